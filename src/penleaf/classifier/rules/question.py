"""Question rule mixin."""

from penleaf.classifier.modes import ASCII_DIGITS, BOLD_MARKER, QUESTION_MAX_LENGTH
from penleaf.classifier.rules.marked import MarkedLine, unwrap_bold


class QuestionRuleMixin:
    """Mixin providing question detection.

    Two shapes count as questions:
    - Numbered: ``Q<number>. ...``, optionally wrapped in ``**...**``.
      One bold layer is stripped.
    - Short lines ending in ``?``. Markup is left intact.
    """

    def _try_numbered_question(self, line: str, stripped: str) -> MarkedLine | None:
        """Try to classify a line as a numbered question.

        Args:
            line: Raw line including its line break
            stripped: Trimmed line

        Returns:
            MarkedLine if the line is a numbered question, None otherwise.
        """
        probe = stripped[len(BOLD_MARKER) :] if stripped.startswith(BOLD_MARKER) else stripped
        if not self._starts_with_question_number(probe):
            return None

        marked = unwrap_bold(line)
        if marked is not None:
            return marked
        return MarkedLine.plain(line)

    def _starts_with_question_number(self, text: str) -> bool:
        if not text.startswith("Q"):
            return False
        pos = 1
        while pos < len(text) and text[pos] in ASCII_DIGITS:
            pos += 1
        return pos > 1 and text[pos : pos + 1] == "." and text[pos + 1 : pos + 2] in (" ", "\t")

    def _is_trailing_question(self, stripped: str) -> bool:
        return stripped.endswith("?") and len(stripped) < QUESTION_MAX_LENGTH
