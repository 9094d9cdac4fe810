"""Fenced code state scanner mixin."""

from penleaf.classifier.modes import ScanState
from penleaf.classifier.pending import Pending
from penleaf.kinds import SectionKind


class FenceScannerMixin:
    """Mixin providing code fence scanning.

    Inside a fence every line is body text, whatever it looks like. Only
    another fence line ends the block.

    """

    # These will be set by the Classifier class
    _state: ScanState
    _pending: Pending | None
    _lineno: int

    def _is_fence_line(self, stripped: str) -> bool:
        raise NotImplementedError

    def _fence_language(self, stripped: str) -> str:
        raise NotImplementedError

    def _flush_pending(self, end_offset: int) -> None:
        raise NotImplementedError

    def _open_code_block(self, stripped: str, line_start: int, line_end: int) -> None:
        """Start collecting a fenced block after its opening line."""
        self._pending = Pending(
            kind=SectionKind.CODE,
            start=line_start,
            lineno=self._lineno,
            body_offset=line_end,
            language=self._fence_language(stripped),
        )
        self._state = ScanState.IN_CODE_BLOCK

    def _scan_code_line(self, line: str, line_start: int, line_end: int) -> None:
        """Append a line to the open code block, or close it on a fence."""
        assert self._pending is not None
        if self._is_fence_line(line.strip()):
            self._pending.terminated = True
            self._flush_pending(line_end)
            return
        self._pending.lines.append(line)
