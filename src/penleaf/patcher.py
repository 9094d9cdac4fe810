"""Offset-mapped line patching.

Writes an edit made on one rendered line back into the raw document.
The patcher never touches sections or pages: it returns new raw text and
the caller re-runs classify + paginate.

Splicing uses the section's document-relative ``body_offset`` and the
length of its raw body, never the page-relative ``start_index``. Only the
edited line changes; markers stripped from headings and bold questions
are put back around the new text.

Failure policy:
Out-of-range coordinates, or offsets that no longer match the raw text,
leave the document unchanged. Edits degrade to "do nothing" rather than
corrupt the document.

Thread Safety:
``apply_line_edit`` is a pure function, safe to call from any thread.

"""

from collections.abc import Sequence

from penleaf.pages import Page
from penleaf.sections import Section
from penleaf.utils.logger import get_logger

logger = get_logger(__name__)


def apply_line_edit(
    raw: str,
    pages: Sequence[Page],
    page_index: int,
    section_index: int,
    line_index: int,
    new_text: str,
) -> str:
    """Replace one rendered line and return the updated raw text.

    Args:
        raw: The raw document the pages were derived from
        pages: Pages from the last classify + paginate pass over ``raw``
        page_index: 0-based page position
        section_index: Section position within the page
        line_index: Line position within the section
        new_text: Replacement for the line's content (its line break is
            preserved)

    Returns:
        Updated raw text, or ``raw`` unchanged if the coordinate is out of
        range or stale.

    Example:
        >>> raw = "# Title\\nHello?\\n"
        >>> pages = paginate(classify(raw))
        >>> apply_line_edit(raw, pages, 0, 0, 0, "Notes")
        '# Notes\\nHello?\\n'

    """
    section = locate_section(pages, page_index, section_index)
    if section is None:
        logger.warning(
            "Ignoring edit at page %d section %d: no such section", page_index, section_index
        )
        return raw

    lines = section.lines()
    if not 0 <= line_index < len(lines):
        logger.warning(
            "Ignoring edit at page %d section %d: line %d out of range (%d lines)",
            page_index,
            section_index,
            line_index,
            len(lines),
        )
        return raw

    start = section.body_offset
    old_body = section.raw_body()
    if raw[start : start + len(old_body)] != old_body:
        logger.warning(
            "Ignoring edit at page %d section %d: offsets are stale for this text",
            page_index,
            section_index,
        )
        return raw

    new_body = _replace_line(section, lines, line_index, new_text)
    return raw[:start] + new_body + raw[start + len(old_body) :]


def locate_section(pages: Sequence[Page], page_index: int, section_index: int) -> Section | None:
    """Find a section by page and section position (not by content)."""
    if not 0 <= page_index < len(pages):
        return None
    sections = pages[page_index].sections
    if not 0 <= section_index < len(sections):
        return None
    return sections[section_index]


def _replace_line(section: Section, lines: list[str], line_index: int, new_text: str) -> str:
    """Rebuild the section's raw body with one line replaced."""
    old_line = lines[line_index]
    ending = old_line[len(old_line.rstrip("\r\n")) :]
    lines[line_index] = new_text.rstrip("\r\n") + ending

    prefix, suffix = section.markup
    if prefix or suffix:
        first = lines[0]
        content = first.rstrip("\n")
        lines[0] = prefix + content + suffix + first[len(content) :]
    return "".join(lines)
