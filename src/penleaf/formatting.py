"""Toolbar format commands applied at the cursor.

Each command rewrites the line containing the cursor and returns new raw
text; like line edits, the caller re-derives sections and pages.

Example:
    >>> apply_format("notes\\nmore", 2, FormatCommand.HEADING)
    '# notes\\nmore'
"""

from enum import Enum

from penleaf.utils.logger import get_logger

logger = get_logger(__name__)


class FormatCommand(Enum):
    """Format buttons offered by the editing surface."""

    HEADING = "heading"
    SUBHEADING = "subheading"
    QUESTION = "question"


def apply_format(raw: str, cursor: int, command: FormatCommand) -> str:
    """Apply a format command to the line containing ``cursor``.

    - HEADING: prefix ``# ``; a ``## `` line becomes ``# ``.
    - SUBHEADING: prefix ``## ``; a ``# `` line becomes ``## ``.
    - QUESTION: trim the line and append ``?`` unless it already ends
      with one.

    A cursor outside the text leaves it unchanged.
    """
    if not 0 <= cursor <= len(raw):
        logger.warning("Ignoring %s format: cursor %d outside text", command.value, cursor)
        return raw

    line_start = raw.rfind("\n", 0, cursor) + 1
    line_end = raw.find("\n", cursor)
    if line_end == -1:
        line_end = len(raw)
    line = raw[line_start:line_end]

    match command:
        case FormatCommand.HEADING:
            new_line = _set_hash_marker(line, "# ")
        case FormatCommand.SUBHEADING:
            new_line = _set_hash_marker(line, "## ")
        case FormatCommand.QUESTION:
            trimmed = line.strip()
            new_line = line if trimmed.endswith("?") else trimmed + "?"

    return raw[:line_start] + new_line + raw[line_end:]


def _set_hash_marker(line: str, marker: str) -> str:
    for existing in ("## ", "# "):
        if line.startswith(existing):
            return marker + line[len(existing) :]
    return marker + line
