"""State-specific scanner mixins for the classifier."""

from penleaf.classifier.scanners.fence import FenceScannerMixin
from penleaf.classifier.scanners.normal import NormalScannerMixin
from penleaf.classifier.scanners.table import TableScannerMixin

__all__ = [
    "FenceScannerMixin",
    "NormalScannerMixin",
    "TableScannerMixin",
]
