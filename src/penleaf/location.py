"""Source location tracking for sections.

Provides SourceLocation for tracking where a section came from in the
raw document. Offsets are document-relative; the page-relative offset
lives on the section itself (``start_index``).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a section in the raw document.

    All line/column positions are 1-indexed. ``offset`` and ``end_offset``
    are 0-indexed character positions delimiting the full raw span,
    including any fence lines or stripped markers.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in the raw document
        end_offset: Absolute end offset in the raw document (exclusive)
        end_lineno: Ending line number (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=1, offset=20, end_offset=31)
            >>> str(loc)
        '3:1'
            >>> loc.length
        11

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None

    def __str__(self) -> str:
        """Format location as "line:col"."""
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of raw characters covered."""
        return self.end_offset - self.offset

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for sections created synthetically, e.g. in tests.
        """
        return cls(lineno=0, col_offset=0)
