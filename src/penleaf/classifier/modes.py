"""Scanner states and character sets for the classifier."""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Classifier scanner states.

    The scanner switches between states based on context:
    - NORMAL: Between sections, nothing pending
    - ACCUMULATING_PARAGRAPH: Collecting a paragraph or list run
    - IN_CODE_BLOCK: Inside a fenced code block
    - IN_TABLE: Inside a run of table rows

    Exactly one pending buffer backs the three non-NORMAL states.

    """

    NORMAL = auto()
    ACCUMULATING_PARAGRAPH = auto()
    IN_CODE_BLOCK = auto()
    IN_TABLE = auto()


FENCE_MARKER = "```"
BOLD_MARKER = "**"
TABLE_PIPE = "|"

ASCII_UPPERCASE = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ASCII_DIGITS = frozenset("0123456789")

# Lines ending in "?" at or beyond this trimmed length are not questions
QUESTION_MAX_LENGTH = 100
