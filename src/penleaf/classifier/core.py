"""Line-at-a-time state-machine classifier.

Segments raw text into typed sections in one forward pass. Each line is
read whole, classified by the rule mixins, then handed to the scanner for
the current state.

Thread Safety:
Classifier instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from penleaf.classifier.modes import ScanState
from penleaf.classifier.pending import Pending
from penleaf.classifier.rules import (
    CourseRuleMixin,
    FenceRuleMixin,
    HeadingRuleMixin,
    ListRuleMixin,
    QuestionRuleMixin,
    TableRuleMixin,
)
from penleaf.classifier.rules.marked import MarkedLine, split_line_ending
from penleaf.classifier.scanners import (
    FenceScannerMixin,
    NormalScannerMixin,
    TableScannerMixin,
)
from penleaf.kinds import SectionKind
from penleaf.location import SourceLocation
from penleaf.sections import CodeBlock, ListItem, Paragraph, Section, Table
from penleaf.utils.logger import get_logger

logger = get_logger(__name__)


class Classifier(
    # Rules (pure logic, no state mutation)
    FenceRuleMixin,
    TableRuleMixin,
    CourseRuleMixin,
    QuestionRuleMixin,
    HeadingRuleMixin,
    ListRuleMixin,
    # Scanners (state-specific handling)
    NormalScannerMixin,
    FenceScannerMixin,
    TableScannerMixin,
):
    """State-machine classifier producing document-ordered sections.

    Usage:
            >>> sections = Classifier("# Title\\nHello?\\nAnswer.\\n").classify()
            >>> [(s.kind.value, s.text) for s in sections]
        [('heading1', 'Title\\n'), ('question', 'Hello?\\n'), ('text', 'Answer.\\n')]

    The whole document is scanned before ``classify`` returns; callers
    never observe a partially built section list.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_state",
        "_pending",
        "_sections",
    )

    def __init__(self, source: str) -> None:
        """Initialize classifier with raw text.

        Args:
            source: Raw document text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._state = ScanState.NORMAL
        self._pending: Pending | None = None
        self._sections: list[Section] = []

    def classify(self) -> list[Section]:
        """Classify the whole source.

        Returns:
            Sections in document order. Unterminated code blocks, tables
            and paragraphs still open at end of input are emitted as-is.

        Complexity: O(n) where n = len(source)
        """
        while self._pos < self._source_len:
            line_start = self._pos
            line_end = self._find_line_end()
            line = self._source[line_start:line_end]
            self._dispatch_state(line, line_start, line_end)
            self._pos = line_end
            self._lineno += 1

        if self._pending is not None and self._pending.kind is SectionKind.CODE:
            logger.debug("Unterminated code fence opened on line %d", self._pending.lineno)
        self._flush_pending(self._source_len)

        logger.debug(
            "Classified %d characters into %d sections", self._source_len, len(self._sections)
        )
        return self._sections

    def _dispatch_state(self, line: str, line_start: int, line_end: int) -> None:
        """Dispatch a line to the scanner for the current state."""
        if self._state is ScanState.IN_CODE_BLOCK:
            self._scan_code_line(line, line_start, line_end)
        elif self._state is ScanState.IN_TABLE:
            if not self._scan_table_line(line, line_start):
                self._scan_normal_line(line, line_start, line_end)
        else:
            self._scan_normal_line(line, line_start, line_end)

    def _find_line_end(self) -> int:
        """Position just past the current line's "\\n", or end of source."""
        idx = self._source.find("\n", self._pos)
        return idx + 1 if idx != -1 else self._source_len

    # =========================================================================
    # Section construction
    # =========================================================================

    def _emit_line(
        self, cls: type[Section], line: str, line_start: int, marked: MarkedLine, **extra: object
    ) -> None:
        """Emit a single-line section."""
        _, ending = split_line_ending(line)
        location = SourceLocation(
            lineno=self._lineno,
            col_offset=1,
            offset=line_start,
            end_offset=line_start + len(line),
            end_lineno=self._lineno,
        )
        self._sections.append(
            cls(
                location=location,
                text=marked.content + ending,
                body_offset=line_start,
                markup=(marked.prefix, marked.suffix),
                **extra,  # type: ignore[arg-type]
            )
        )

    def _flush_pending(self, end_offset: int) -> None:
        """Emit the pending section (if any) ending at end_offset."""
        pending = self._pending
        if pending is None:
            return
        self._pending = None
        self._state = ScanState.NORMAL

        location = SourceLocation(
            lineno=pending.lineno,
            col_offset=1,
            offset=pending.start,
            end_offset=end_offset,
            end_lineno=pending.lineno
            + self._source.count("\n", pending.start, max(end_offset - 1, pending.start)),
        )

        section: Section
        match pending.kind:
            case SectionKind.CODE:
                section = CodeBlock(
                    location=location,
                    text=pending.text,
                    body_offset=pending.body_offset,
                    language=pending.language,
                    terminated=pending.terminated,
                )
            case SectionKind.TABLE:
                section = Table(
                    location=location,
                    text=pending.text,
                    body_offset=pending.body_offset,
                    headers=pending.headers,
                )
            case SectionKind.LIST_ITEM:
                section = ListItem(location=location, text=pending.text, body_offset=pending.body_offset)
            case _:
                section = Paragraph(location=location, text=pending.text, body_offset=pending.body_offset)
        self._sections.append(section)
