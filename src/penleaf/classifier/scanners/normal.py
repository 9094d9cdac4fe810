"""Normal state scanner mixin."""

from typing import Literal

from penleaf.classifier.modes import ScanState
from penleaf.classifier.pending import Pending
from penleaf.classifier.rules.marked import MarkedLine
from penleaf.kinds import SectionKind
from penleaf.sections import Course, Heading, Question, Section


class NormalScannerMixin:
    """Mixin providing classification outside code blocks and tables.

    Rules are tried in precedence order, first match wins:

    1. fence line        → open a code block
    2. table row         → open a table
    3. course code       → Course
    4. ``Q<n>. ``        → Question (one bold layer stripped)
    5. ``# `` / bold line → Heading level 1
    6. ``## ``           → Heading level 2
    7. short, ends ``?`` → Question (markup intact)
    8. ``<n>. ``         → start or continue a list run
    9. anything else     → paragraph accumulator (blank lines close it)

    Every single-line match first flushes whatever is pending.

    """

    # These will be set by the Classifier class
    _state: ScanState
    _pending: Pending | None
    _lineno: int

    # Rule methods (provided by rule mixins)
    def _is_fence_line(self, stripped: str) -> bool:
        raise NotImplementedError

    def _is_table_row(self, line: str) -> bool:
        raise NotImplementedError

    def _is_course_line(self, stripped: str) -> bool:
        raise NotImplementedError

    def _try_numbered_question(self, line: str, stripped: str) -> MarkedLine | None:
        raise NotImplementedError

    def _try_heading(self, line: str, stripped: str) -> tuple[Literal[1, 2], MarkedLine] | None:
        raise NotImplementedError

    def _is_trailing_question(self, stripped: str) -> bool:
        raise NotImplementedError

    def _is_list_line(self, stripped: str) -> bool:
        raise NotImplementedError

    # Classifier methods
    def _flush_pending(self, end_offset: int) -> None:
        raise NotImplementedError

    def _emit_line(
        self, cls: type[Section], line: str, line_start: int, marked: MarkedLine, **extra: object
    ) -> None:
        raise NotImplementedError

    def _scan_normal_line(self, line: str, line_start: int, line_end: int) -> None:
        """Classify one line outside code blocks and tables."""
        stripped = line.strip()

        if self._is_fence_line(stripped):
            self._flush_pending(line_start)
            self._open_code_block(stripped, line_start, line_end)
            return

        if self._is_table_row(line):
            self._flush_pending(line_start)
            self._open_table(line, line_start)
            return

        if self._is_course_line(stripped):
            self._flush_pending(line_start)
            self._emit_line(Course, line, line_start, MarkedLine.plain(line))
            return

        marked = self._try_numbered_question(line, stripped)
        if marked is not None:
            self._flush_pending(line_start)
            self._emit_line(Question, line, line_start, marked)
            return

        heading = self._try_heading(line, stripped)
        if heading is not None:
            level, marked = heading
            self._flush_pending(line_start)
            self._emit_line(Heading, line, line_start, marked, level=level)
            return

        if self._is_trailing_question(stripped):
            self._flush_pending(line_start)
            self._emit_line(Question, line, line_start, MarkedLine.plain(line))
            return

        if self._is_list_line(stripped):
            if self._pending is None or self._pending.kind is not SectionKind.LIST_ITEM:
                self._flush_pending(line_start)
                self._open_accumulator(SectionKind.LIST_ITEM, line_start)
            self._append_pending(line)
            return

        self._scan_paragraph_line(line, stripped, line_start, line_end)

    def _scan_paragraph_line(self, line: str, stripped: str, line_start: int, line_end: int) -> None:
        """Feed a plain or blank line to the accumulator."""
        if not stripped:
            if self._pending is None:
                self._open_accumulator(SectionKind.TEXT, line_start)
            self._append_pending(line)
            self._flush_pending(line_end)
            return

        if self._pending is not None and self._pending.kind is SectionKind.LIST_ITEM:
            self._flush_pending(line_start)

        if self._pending is None:
            self._open_accumulator(SectionKind.TEXT, line_start)
        self._append_pending(line)

    def _open_accumulator(self, kind: SectionKind, line_start: int) -> None:
        self._pending = Pending(
            kind=kind,
            start=line_start,
            lineno=self._lineno,
            body_offset=line_start,
        )
        self._state = ScanState.ACCUMULATING_PARAGRAPH

    def _append_pending(self, line: str) -> None:
        assert self._pending is not None
        self._pending.lines.append(line)
