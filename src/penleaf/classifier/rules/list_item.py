"""Numbered list rule mixin."""

from penleaf.classifier.modes import ASCII_DIGITS


class ListRuleMixin:
    """Mixin providing numbered list line detection."""

    def _is_list_line(self, stripped: str) -> bool:
        """Match ``<digits>. `` at the start of the trimmed line."""
        pos = 0
        while pos < len(stripped) and stripped[pos] in ASCII_DIGITS:
            pos += 1
        return pos > 0 and stripped[pos : pos + 2] == ". "
