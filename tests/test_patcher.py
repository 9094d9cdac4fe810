"""Tests for writing line edits back into the raw text."""

import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from penleaf import PageCapacity, apply_line_edit, classify, derive_pages, paginate

RAW = "# Title\nHello?\nAnswer.\n"


class TestApplyLineEdit:
    """Edits replace exactly one line."""

    def test_edit_paragraph_line(self) -> None:
        pages = derive_pages(RAW)
        assert apply_line_edit(RAW, pages, 0, 2, 0, "Answer, revised.") == (
            "# Title\nHello?\nAnswer, revised.\n"
        )

    def test_edit_heading_restores_marker(self) -> None:
        pages = derive_pages(RAW)
        assert apply_line_edit(RAW, pages, 0, 0, 0, "Notes") == "# Notes\nHello?\nAnswer.\n"

    def test_edit_bold_question_restores_markers(self) -> None:
        raw = "**Q1. Old question**\nbody\n"
        pages = derive_pages(raw)
        assert apply_line_edit(raw, pages, 0, 0, 0, "Q1. New question") == (
            "**Q1. New question**\nbody\n"
        )

    def test_edit_middle_line_of_paragraph(self) -> None:
        raw = "one\ntwo\nthree\n"
        pages = derive_pages(raw)
        assert apply_line_edit(raw, pages, 0, 0, 1, "TWO") == "one\nTWO\nthree\n"

    def test_edit_code_line_keeps_fences(self) -> None:
        raw = "```py\nx=1\ny=2\n```\n"
        pages = derive_pages(raw)
        assert apply_line_edit(raw, pages, 0, 0, 1, "y=3") == "```py\nx=1\ny=3\n```\n"

    def test_edit_table_row(self) -> None:
        raw = "| a | b |\n| 1 | 2 |\n"
        pages = derive_pages(raw)
        assert apply_line_edit(raw, pages, 0, 0, 1, "| 3 | 4 |") == "| a | b |\n| 3 | 4 |\n"

    def test_last_line_without_break(self) -> None:
        raw = "a\nb"
        pages = derive_pages(raw)
        assert apply_line_edit(raw, pages, 0, 0, 1, "c") == "a\nc"

    def test_new_text_line_break_is_dropped(self) -> None:
        pages = derive_pages("x\n")
        assert apply_line_edit("x\n", pages, 0, 0, 0, "y\n") == "y\n"

    def test_crlf_ending_preserved(self) -> None:
        raw = "first\r\nsecond\r\n"
        pages = derive_pages(raw)
        assert apply_line_edit(raw, pages, 0, 0, 0, "1st") == "1st\r\nsecond\r\n"

    def test_edit_on_later_page(self) -> None:
        raw = "# A\n# B\n# C\n"
        pages = paginate(classify(raw), PageCapacity(2, 1000))
        assert apply_line_edit(raw, pages, 1, 0, 0, "Z") == "# A\n# B\n# Z\n"

    def test_edit_split_piece(self) -> None:
        raw = "word " * 600
        pages = paginate(classify(raw), PageCapacity(30, 1080))
        updated = apply_line_edit(raw, pages, 1, 0, 0, "short ")
        assert updated == raw[:1080] + "short " + raw[2160:]

    def test_edit_only_touches_target_section(self) -> None:
        raw = "before\n\n# Mid\n\nafter\n"
        pages = derive_pages(raw)
        assert pages[0].sections[1].text == "Mid\n"
        updated = apply_line_edit(raw, pages, 0, 1, 0, "Middle")
        assert updated == "before\n\n# Middle\n\nafter\n"


class TestNoOpPolicy:
    """Bad coordinates leave the text unchanged."""

    @pytest.mark.parametrize(
        ("page_index", "section_index", "line_index"),
        [(5, 0, 0), (-1, 0, 0), (0, 9, 0), (0, -1, 0), (0, 0, 3), (0, 0, -1)],
    )
    def test_out_of_range(self, page_index: int, section_index: int, line_index: int) -> None:
        pages = derive_pages(RAW)
        assert apply_line_edit(RAW, pages, page_index, section_index, line_index, "x") == RAW

    def test_empty_document(self) -> None:
        pages = derive_pages("")
        assert apply_line_edit("", pages, 0, 0, 0, "x") == ""

    def test_stale_offsets(self, caplog: pytest.LogCaptureFixture) -> None:
        pages = derive_pages(RAW)
        shifted = "prefix\n" + RAW
        with caplog.at_level(logging.WARNING, logger="penleaf"):
            assert apply_line_edit(shifted, pages, 0, 0, 0, "Notes") == shifted
        assert "stale" in caplog.text

    def test_out_of_range_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        pages = derive_pages(RAW)
        with caplog.at_level(logging.WARNING, logger="penleaf"):
            apply_line_edit(RAW, pages, 3, 0, 0, "x")
        assert "no such section" in caplog.text


class TestPatcherProperties:
    """Re-editing a line with its own text is the identity."""

    @given(st.text(max_size=300))
    @settings(max_examples=150)
    def test_identity_edit(self, raw: str) -> None:
        pages = paginate(classify(raw), PageCapacity(5, 60))
        for page_index, page in enumerate(pages):
            for section_index, section in enumerate(page.sections):
                for line_index, line in enumerate(section.lines()):
                    content = line[: len(line.rstrip("\r\n"))]
                    assert (
                        apply_line_edit(raw, pages, page_index, section_index, line_index, content)
                        == raw
                    )
