"""UI state that survives re-derivation.

Sections and pages are rebuilt from scratch after every edit, so state
such as line alignment or "this line is being edited" cannot live on
them. SheetState keeps it aside, keyed by a content-derived LineKey
rather than by position, so inserting a paragraph above a centered line
does not move the centering onto a different line.

Page headers are keyed by page number: a page has no content identity
of its own.

Thread Safety:
SheetState is mutable and not thread-safe. Keep one per editor.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import NamedTuple

from penleaf.pages import Alignment, LineIdentity, Page
from penleaf.sections import Section
from penleaf.utils.hashing import hash_str

# Characters of section text that feed its fingerprint
FINGERPRINT_CHARS = 32


class LineKey(NamedTuple):
    """Content-derived identity of a rendered line.

    Attributes:
        fingerprint: Hash of the section kind and its first characters
        occurrence: Ordinal among sections sharing the fingerprint
        line_index: Line position within the section

    """

    fingerprint: str
    occurrence: int
    line_index: int


def section_fingerprint(section: Section) -> str:
    """Hash a section's kind and leading text."""
    return hash_str(f"{section.kind.value}\x00{section.text[:FINGERPRINT_CHARS]}", truncate=16)


def line_keys(pages: Sequence[Page]) -> dict[LineIdentity, LineKey]:
    """Map every positional line identity to its content key."""
    seen: dict[str, int] = {}
    keys: dict[LineIdentity, LineKey] = {}
    for page_index, page in enumerate(pages):
        for section_index, section in enumerate(page.sections):
            fingerprint = section_fingerprint(section)
            occurrence = seen.get(fingerprint, 0)
            seen[fingerprint] = occurrence + 1
            for line_index in range(len(section.lines())):
                identity = LineIdentity(page_index, section_index, line_index)
                keys[identity] = LineKey(fingerprint, occurrence, line_index)
    return keys


class SheetState:
    """Alignments, headers and the line being edited.

    Usage:
        >>> state = SheetState()
        >>> state.set_alignment(pages, LineIdentity(0, 0, 0), Alignment.CENTER)
        True
        >>> state.decorate(pages)[0].alignment_for(0, 0)
        <Alignment.CENTER: 'center'>

    """

    __slots__ = ("_alignments", "_headers", "_editing")

    def __init__(self) -> None:
        self._alignments: dict[LineKey, Alignment] = {}
        self._headers: dict[int, tuple[str, Alignment]] = {}
        self._editing: LineKey | None = None

    # =========================================================================
    # Line alignment
    # =========================================================================

    def set_alignment(
        self, pages: Sequence[Page], identity: LineIdentity, alignment: Alignment
    ) -> bool:
        """Align one line.

        Returns:
            False if the identity does not address a line on ``pages``.
        """
        key = line_keys(pages).get(identity)
        if key is None:
            return False
        if alignment is Alignment.LEFT:
            self._alignments.pop(key, None)
        else:
            self._alignments[key] = alignment
        return True

    def alignment(self, key: LineKey) -> Alignment:
        return self._alignments.get(key, Alignment.LEFT)

    def carry_over(
        self,
        old_pages: Sequence[Page],
        new_pages: Sequence[Page],
        page_index: int,
        section_index: int,
    ) -> None:
        """Move a section's alignments to its rewritten self.

        Editing a section changes its fingerprint. When the edit kept the
        section at the same position, its line alignments follow it.
        """
        old_keys = line_keys(old_pages)
        new_keys = line_keys(new_pages)
        line_index = 0
        while True:
            identity = LineIdentity(page_index, section_index, line_index)
            old_key = old_keys.get(identity)
            if old_key is None:
                return
            new_key = new_keys.get(identity)
            if old_key in self._alignments and new_key is not None and new_key != old_key:
                self._alignments[new_key] = self._alignments.pop(old_key)
            line_index += 1

    # =========================================================================
    # Page headers
    # =========================================================================

    def set_header(self, page_number: int, text: str, alignment: Alignment = Alignment.LEFT) -> None:
        """Set (or with empty text, clear) a page's header."""
        if text:
            self._headers[page_number] = (text, alignment)
        else:
            self._headers.pop(page_number, None)

    def header(self, page_number: int) -> tuple[str, Alignment]:
        return self._headers.get(page_number, ("", Alignment.LEFT))

    # =========================================================================
    # Editing flag
    # =========================================================================

    def begin_edit(self, pages: Sequence[Page], identity: LineIdentity) -> bool:
        """Mark a line as being edited.

        Returns:
            False if the identity does not address a line on ``pages``.
        """
        key = line_keys(pages).get(identity)
        if key is None:
            return False
        self._editing = key
        return True

    def end_edit(self) -> None:
        self._editing = None

    def editing(self, pages: Sequence[Page]) -> LineIdentity | None:
        """Where the line being edited sits on ``pages``, if anywhere."""
        if self._editing is None:
            return None
        for identity, key in line_keys(pages).items():
            if key == self._editing:
                return identity
        return None

    # =========================================================================
    # Resolution
    # =========================================================================

    def decorate(self, pages: Sequence[Page]) -> list[Page]:
        """Return pages with headers and line alignments filled in."""
        keys = line_keys(pages)
        decorated: list[Page] = []
        for page in pages:
            header, header_alignment = self.header(page.page_number)
            alignments = tuple(
                (identity, self._alignments[keys[identity]])
                for identity in page.identities()
                if keys[identity] in self._alignments
            )
            decorated.append(
                replace(
                    page,
                    header=header,
                    header_alignment=header_alignment,
                    line_alignments=alignments,
                )
            )
        return decorated

    def clear(self) -> None:
        self._alignments.clear()
        self._headers.clear()
        self._editing = None
