"""Pages produced by the pager.

A page is an ordered run of sections that fits one fixed-size sheet,
plus sheet metadata resolved from SheetState (header and alignments).

Thread Safety:
Page is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from penleaf.sections import Section


class Alignment(Enum):
    """Horizontal alignment of a line or page header."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LineIdentity(NamedTuple):
    """Positional address of a rendered line.

    Used by editing surfaces to point at a line. Indices shift when an
    edit changes section boundaries; SheetState keys durable UI state by
    content instead.
    """

    page_index: int
    section_index: int
    line_index: int


@dataclass(frozen=True, slots=True)
class Page:
    """One fixed-size sheet of sections.

    Attributes:
        page_number: 1-based number, assigned in emission order
        sections: Sections on this page, each with its page-relative
            ``start_index``
        header: Header text shown in the reserved top strip
        header_alignment: Alignment of the header text
        line_alignments: Per-line alignment overrides; lines not listed
            are left-aligned

    """

    page_number: int
    sections: tuple[Section, ...] = ()
    header: str = ""
    header_alignment: Alignment = Alignment.LEFT
    line_alignments: tuple[tuple[LineIdentity, Alignment], ...] = ()

    @property
    def index(self) -> int:
        """0-based position of this page."""
        return self.page_number - 1

    @property
    def content(self) -> str:
        """Concatenated text of all sections on the page."""
        return "".join(section.text for section in self.sections)

    @property
    def line_count(self) -> int:
        return sum(section.line_count for section in self.sections)

    @property
    def char_count(self) -> int:
        return sum(section.char_count for section in self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def alignment_for(self, section_index: int, line_index: int) -> Alignment:
        """Alignment of one line on this page (LEFT unless overridden)."""
        key = LineIdentity(self.index, section_index, line_index)
        for identity, alignment in self.line_alignments:
            if identity == key:
                return alignment
        return Alignment.LEFT

    def identities(self) -> list[LineIdentity]:
        """Every line address on this page, in reading order."""
        return [
            LineIdentity(self.index, section_index, line_index)
            for section_index, section in enumerate(self.sections)
            for line_index in range(len(section.lines()))
        ]
