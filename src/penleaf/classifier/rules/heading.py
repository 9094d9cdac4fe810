"""Heading rule mixin."""

from typing import Literal

from penleaf.classifier.rules.marked import MarkedLine, split_line_ending, unwrap_bold


class HeadingRuleMixin:
    """Mixin providing heading classification.

    - ``# Title`` → level 1
    - a line wholly wrapped in ``**...**`` with no colon → level 1
    - ``## Title`` → level 2
    """

    def _try_heading(self, line: str, stripped: str) -> tuple[Literal[1, 2], MarkedLine] | None:
        """Try to classify a line as a heading.

        Args:
            line: Raw line including its line break
            stripped: Trimmed line

        Returns:
            (level, MarkedLine) if the line is a heading, None otherwise.
        """
        if stripped.startswith("# "):
            return 1, self._strip_hash_marker(line, 1)

        if ":" not in stripped:
            marked = unwrap_bold(line)
            if marked is not None:
                return 1, marked

        if stripped.startswith("## "):
            return 2, self._strip_hash_marker(line, 2)

        return None

    def _strip_hash_marker(self, line: str, level: int) -> MarkedLine:
        """Move leading whitespace, the hashes and following spaces into the prefix."""
        body, _ = split_line_ending(line)
        lead = len(body) - len(body.lstrip())
        pos = lead + level
        while pos < len(body) and body[pos] in " \t":
            pos += 1
        return MarkedLine(body[:pos], body[pos:], "")
