"""JSON round-trip for pages and sections.

Hands pages to rendering surfaces and export pipelines that live outside
Python. Each section carries a ``_type`` discriminator and its ``kind``.
All output is deterministic (sorted keys).

Example:
    from penleaf import derive_pages
    from penleaf.serialization import pages_to_json, pages_from_json

    pages = derive_pages("# Hello\\nWorld\\n")
    restored = pages_from_json(pages_to_json(pages))
    assert restored == pages

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from penleaf.location import SourceLocation
from penleaf.pages import Alignment, LineIdentity, Page
from penleaf.sections import CodeBlock, Course, Heading, ListItem, Paragraph, Question, Section, Table

# Registry of section class names for deserialization
_SECTION_TYPES: dict[str, type[Section]] = {
    "Heading": Heading,
    "Question": Question,
    "Course": Course,
    "ListItem": ListItem,
    "CodeBlock": CodeBlock,
    "Table": Table,
    "Paragraph": Paragraph,
}

# Fields stored as tuples on sections, lists in JSON
_TUPLE_FIELDS = {"markup", "headers"}


def section_to_dict(section: Section) -> dict[str, Any]:
    """Convert a section to a JSON-compatible dict."""
    result: dict[str, Any] = {"_type": type(section).__name__, "kind": section.kind.value}
    for f in fields(section):
        value = getattr(section, f.name)
        if isinstance(value, SourceLocation):
            value = {lf.name: getattr(value, lf.name) for lf in fields(value)}
        elif isinstance(value, tuple):
            value = list(value)
        result[f.name] = value
    return result


def section_from_dict(data: dict[str, Any]) -> Section:
    """Reconstruct a section from a dict produced by section_to_dict.

    Raises:
        ValueError: If ``_type`` names no known section class.
    """
    type_name = data.get("_type")
    cls = _SECTION_TYPES.get(type_name)  # type: ignore[arg-type]
    if cls is None:
        raise ValueError(f"Unknown section type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "location":
            value = SourceLocation(**value)
        elif f.name in _TUPLE_FIELDS:
            value = tuple(value)
        kwargs[f.name] = value
    return cls(**kwargs)


def page_to_dict(page: Page) -> dict[str, Any]:
    """Convert a page to a JSON-compatible dict."""
    return {
        "page_number": page.page_number,
        "header": page.header,
        "header_alignment": page.header_alignment.value,
        "line_alignments": [
            [*identity, alignment.value] for identity, alignment in page.line_alignments
        ],
        "sections": [section_to_dict(section) for section in page.sections],
    }


def page_from_dict(data: dict[str, Any]) -> Page:
    """Reconstruct a page from a dict produced by page_to_dict."""
    return Page(
        page_number=data["page_number"],
        sections=tuple(section_from_dict(s) for s in data.get("sections", ())),
        header=data.get("header", ""),
        header_alignment=Alignment(data.get("header_alignment", Alignment.LEFT.value)),
        line_alignments=tuple(
            (LineIdentity(page_index, section_index, line_index), Alignment(alignment))
            for page_index, section_index, line_index, alignment in data.get("line_alignments", ())
        ),
    )


def pages_to_json(pages: list[Page], *, indent: int | None = None) -> str:
    """Serialize pages to a JSON string (sorted keys)."""
    return json.dumps([page_to_dict(page) for page in pages], sort_keys=True, indent=indent)


def pages_from_json(json_str: str) -> list[Page]:
    """Deserialize pages from a JSON string."""
    return [page_from_dict(data) for data in json.loads(json_str)]
