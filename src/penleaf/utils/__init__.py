"""Utility modules for penleaf.

Provides:
- hashing: hash_str for content fingerprinting
- logger: get_logger for logging
- text: split_lines for "\\n"-only line splitting
"""

from penleaf.utils.hashing import hash_str
from penleaf.utils.logger import get_logger
from penleaf.utils.text import split_lines

__all__ = [
    "get_logger",
    "hash_str",
    "split_lines",
]
