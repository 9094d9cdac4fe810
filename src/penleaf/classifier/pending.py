"""The classifier's single pending buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from penleaf.kinds import SectionKind


@dataclass(slots=True)
class Pending:
    """Lines collected for the section currently being built.

    Only one section is ever pending: a paragraph or list run, a fenced
    code block, or a table.

    Attributes:
        kind: TEXT, LIST_ITEM, CODE or TABLE
        start: Document offset of the first raw line (the fence for code)
        lineno: Line number of the first raw line
        body_offset: Document offset of the first body line
        lines: Collected body lines, verbatim
        language: Fence language (code only)
        headers: Header cells (table only)
        terminated: Whether a closing fence was seen (code only)

    """

    kind: SectionKind
    start: int
    lineno: int
    body_offset: int
    lines: list[str] = field(default_factory=list)
    language: str = ""
    headers: tuple[str, ...] = ()
    terminated: bool = False

    @property
    def text(self) -> str:
        return "".join(self.lines)
