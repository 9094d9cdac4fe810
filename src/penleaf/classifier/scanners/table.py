"""Table state scanner mixin."""

from penleaf.classifier.modes import ScanState
from penleaf.classifier.pending import Pending
from penleaf.kinds import SectionKind


class TableScannerMixin:
    """Mixin providing table row scanning.

    The first row of a run supplies the headers; every following row,
    including dash separator rows, joins the table body. The first line
    that is not a row closes the table and is handed back for normal
    classification.

    """

    # These will be set by the Classifier class
    _state: ScanState
    _pending: Pending | None
    _lineno: int

    def _is_table_row(self, line: str) -> bool:
        raise NotImplementedError

    def _parse_table_headers(self, line: str) -> tuple[str, ...]:
        raise NotImplementedError

    def _flush_pending(self, end_offset: int) -> None:
        raise NotImplementedError

    def _open_table(self, line: str, line_start: int) -> None:
        self._pending = Pending(
            kind=SectionKind.TABLE,
            start=line_start,
            lineno=self._lineno,
            body_offset=line_start,
            headers=self._parse_table_headers(line),
        )
        self._pending.lines.append(line)
        self._state = ScanState.IN_TABLE

    def _scan_table_line(self, line: str, line_start: int) -> bool:
        """Append a row to the open table.

        Returns:
            True if the line was consumed. False means the table was
            closed and the line still needs classifying.
        """
        assert self._pending is not None
        if self._is_table_row(line):
            self._pending.lines.append(line)
            return True
        self._flush_pending(line_start)
        return False
