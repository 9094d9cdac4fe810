"""Greedy page packing.

Packs document-ordered sections into fixed-capacity pages in one pass.
Not optimal packing: a section that does not fit the current page seals
it and starts the next one.

Rules:
- Code blocks and tables are never split. If one would overflow the
  page's line budget, it starts a new page, and it may overflow that
  page on its own.
- Headings, questions and course lines are single lines and are kept
  whole.
- Paragraphs and list runs must respect both the line and the character
  budget. One too large for an empty page is split across pages,
  preferring line boundaries, then whitespace.

Every placed section gets ``start_index``: the page's content length
before it was appended.

Thread Safety:
Pager instances are single-use. ``paginate`` is a pure function.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from penleaf.config import PageCapacity, get_sheet_config
from penleaf.errors import ConfigError
from penleaf.kinds import LINE_ATOMIC_KINDS, UNSPLITTABLE_KINDS
from penleaf.location import SourceLocation
from penleaf.pages import Page
from penleaf.sections import Section
from penleaf.utils.logger import get_logger
from penleaf.utils.text import split_lines

logger = get_logger(__name__)


class Pager:
    """Single-pass greedy pager.

    Usage:
            >>> pages = Pager(PageCapacity(30, 1080)).paginate(sections)
            >>> [page.page_number for page in pages]
        [1, 2]

    """

    __slots__ = ("_capacity", "_pages", "_current", "_lines", "_chars")

    def __init__(self, capacity: PageCapacity) -> None:
        """Initialize a pager.

        Raises:
            ConfigError: If either budget is below one.
        """
        if capacity.lines_per_page < 1:
            raise ConfigError("lines_per_page", f"must be at least 1, got {capacity.lines_per_page}")
        if capacity.chars_per_page < 1:
            raise ConfigError("chars_per_page", f"must be at least 1, got {capacity.chars_per_page}")
        self._capacity = capacity
        self._pages: list[Page] = []
        self._current: list[Section] = []
        self._lines = 0
        self._chars = 0

    def paginate(self, sections: Sequence[Section]) -> list[Page]:
        """Pack sections into pages.

        Returns:
            Pages numbered 1..n. Empty input yields one empty page.
        """
        for section in sections:
            if section.kind in UNSPLITTABLE_KINDS:
                if not self._fits(section, lines_only=True):
                    self._seal()
                self._append(section)
            elif section.kind in LINE_ATOMIC_KINDS:
                if not self._fits(section):
                    self._seal()
                self._append(section)
            else:
                self._place_splittable(section)

        self._seal()
        if not self._pages:
            self._pages.append(Page(page_number=1))

        logger.debug("Paginated %d sections into %d pages", len(sections), len(self._pages))
        return self._pages

    def _fits(self, section: Section, *, lines_only: bool = False) -> bool:
        lines_per_page, chars_per_page = self._capacity
        if self._lines + section.line_count > lines_per_page:
            return False
        return lines_only or self._chars + section.char_count <= chars_per_page

    def _append(self, section: Section) -> None:
        self._current.append(section.with_start_index(self._chars))
        self._lines += section.line_count
        self._chars += section.char_count

    def _seal(self) -> None:
        """Push the current page if it holds anything."""
        if not self._current:
            return
        self._pages.append(Page(page_number=len(self._pages) + 1, sections=tuple(self._current)))
        self._current = []
        self._lines = 0
        self._chars = 0

    # =========================================================================
    # Splitting
    # =========================================================================

    def _place_splittable(self, section: Section) -> None:
        """Place a paragraph or list run, splitting it if it exceeds a page."""
        if self._fits(section):
            self._append(section)
            return
        if self._current and self._fits_empty_page(section):
            self._seal()
            self._append(section)
            return

        # Larger than a whole page: fill the room left here, then continue
        remaining = section
        part = 1
        while not self._fits(remaining):
            cut = self._cut_index(remaining.text)
            if cut == 0:
                self._seal()
                continue
            head, remaining = _split_section(remaining, cut, part)
            self._append(head)
            self._seal()
            part += 1
        self._append(replace(remaining, part=part))

    def _fits_empty_page(self, section: Section) -> bool:
        lines_per_page, chars_per_page = self._capacity
        return section.line_count <= lines_per_page and section.char_count <= chars_per_page

    def _cut_index(self, text: str) -> int:
        """Longest prefix of text that fits the room left on this page.

        Whole lines are taken first. If not even the first line fits, it
        is broken after the last whitespace within reach, or hard-cut
        when it has none.

        Returns:
            Cut position, or 0 if nothing fits (the page must be sealed).
        """
        lines_per_page, chars_per_page = self._capacity
        line_room = lines_per_page - self._lines
        char_room = chars_per_page - self._chars
        if line_room <= 0 or char_room <= 0:
            return 0

        cut = 0
        used_lines = 0
        for line in split_lines(text):
            breaks = line.count("\n")
            if used_lines + breaks > line_room or cut + len(line) > char_room:
                break
            cut += len(line)
            used_lines += breaks
        if cut:
            return cut

        window = text[:char_room]
        soft = max(window.rfind(" "), window.rfind("\t"))
        if soft > 0:
            return soft + 1
        return len(window)


def _split_section(section: Section, cut: int, part: int) -> tuple[Section, Section]:
    """Split an unmarked section's text at cut.

    Both pieces keep exact document-relative offsets, so each can be
    patched on its own.
    """
    head_text, tail_text = section.text[:cut], section.text[cut:]
    loc = section.location
    head_offset = section.body_offset
    tail_offset = head_offset + cut
    head_lines = head_text.count("\n")

    head = replace(
        section,
        text=head_text,
        part=part,
        location=SourceLocation(
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            offset=head_offset,
            end_offset=tail_offset,
            end_lineno=loc.lineno + max(head_lines - 1, 0),
        ),
    )
    tail = replace(
        section,
        text=tail_text,
        body_offset=tail_offset,
        location=SourceLocation(
            lineno=loc.lineno + head_lines,
            col_offset=1 if head_text.endswith("\n") else loc.col_offset + len(head_text),
            offset=tail_offset,
            end_offset=tail_offset + len(tail_text),
            end_lineno=loc.end_lineno,
        ),
    )
    return head, tail


def paginate(sections: Sequence[Section], capacity: PageCapacity | None = None) -> list[Page]:
    """Pack sections into pages.

    Args:
        sections: Sections in document order
        capacity: Page capacity (from the active SheetConfig if None)

    Returns:
        Pages numbered 1..n in emission order
    """
    if capacity is None:
        capacity = get_sheet_config().capacity
    return Pager(capacity).paginate(sections)
