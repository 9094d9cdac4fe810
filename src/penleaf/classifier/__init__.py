"""State-machine classifier for penleaf.

Turns raw text into an ordered list of typed sections in one O(n) pass.

Architecture:
classifier/
├── __init__.py          # Re-exports Classifier, ScanState, classify
├── core.py              # Classifier class (mixin composition + line loop)
├── modes.py             # ScanState enum, marker constants
├── pending.py           # The single pending buffer
├── rules/               # Per-line classification mixins
│   ├── fence.py         # ``` fences
│   ├── table.py         # Pipe rows
│   ├── course.py        # Course codes
│   ├── question.py      # Q<n>. and trailing ?
│   ├── heading.py       # #, ## and bold lines
│   ├── list_item.py     # <n>. lists
│   └── marked.py        # Marker stripping
└── scanners/            # State-specific scanners
    ├── normal.py        # NORMAL / ACCUMULATING_PARAGRAPH
    ├── fence.py         # IN_CODE_BLOCK
    └── table.py         # IN_TABLE

Usage:
    >>> from penleaf.classifier import classify
    >>> [s.kind.value for s in classify("# Notes\\nWhy?\\n")]
    ['heading1', 'question']

"""

from penleaf.classifier.core import Classifier
from penleaf.classifier.modes import ScanState
from penleaf.sections import Section


def classify(raw: str) -> list[Section]:
    """Classify raw text into document-ordered sections."""
    return Classifier(raw).classify()


__all__ = ["Classifier", "ScanState", "classify"]
