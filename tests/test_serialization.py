"""Tests for JSON serialization of pages and sections."""

import json

import pytest

from penleaf import Alignment, LineIdentity, SheetState, derive_pages, pages_from_json, pages_to_json
from penleaf.serialization import section_from_dict, section_to_dict

RAW = (
    "CS 101: Intro\n"
    "# Week 1\n"
    "**Q1. What is a bit?**\n"
    "1. first\n"
    "   more\n"
    "| col | val |\n"
    "| a | 1 |\n"
    "```py\n"
    "x = 1\n"
    "```\n"
    "Plain words.\n"
)


class TestRoundTrip:
    """Pages survive a JSON round-trip unchanged."""

    def test_all_kinds(self) -> None:
        pages = derive_pages(RAW)
        assert pages_from_json(pages_to_json(pages)) == pages

    def test_decorated_pages(self) -> None:
        state = SheetState()
        pages = derive_pages(RAW)
        state.set_alignment(pages, LineIdentity(0, 1, 0), Alignment.CENTER)
        state.set_header(1, "Notes", Alignment.RIGHT)
        decorated = state.decorate(pages)
        assert pages_from_json(pages_to_json(decorated)) == decorated

    def test_split_pieces(self) -> None:
        pages = derive_pages("word " * 600)
        assert pages_from_json(pages_to_json(pages)) == pages

    def test_empty_document(self) -> None:
        pages = derive_pages("")
        assert pages_from_json(pages_to_json(pages)) == pages


class TestFormat:
    """Tests for the serialized shape."""

    def test_section_dict(self) -> None:
        section = derive_pages("**Q1. Why**\n")[0].sections[0]
        data = section_to_dict(section)
        assert data["_type"] == "Question"
        assert data["kind"] == "question"
        assert data["markup"] == ["**", "**"]
        assert data["location"]["offset"] == 0

    def test_code_block_fields(self) -> None:
        data = section_to_dict(derive_pages("```py\nx=1\n```\n")[0].sections[0])
        assert (data["_type"], data["language"], data["terminated"]) == ("CodeBlock", "py", True)

    def test_deterministic_output(self) -> None:
        pages = derive_pages(RAW)
        assert pages_to_json(pages) == pages_to_json(derive_pages(RAW))

    def test_indent(self) -> None:
        text = pages_to_json(derive_pages("x\n"), indent=2)
        assert "\n  " in text
        assert json.loads(text)[0]["page_number"] == 1

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown section type"):
            section_from_dict({"_type": "Image"})
