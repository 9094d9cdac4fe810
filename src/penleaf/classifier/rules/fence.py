"""Fenced code block rule mixin."""

from penleaf.classifier.modes import FENCE_MARKER


class FenceRuleMixin:
    """Mixin providing fence line detection.

    A fence line is any line whose trimmed form starts with three
    backticks. Fences toggle: the first opens a block, the next closes it.
    """

    def _is_fence_line(self, stripped: str) -> bool:
        return stripped.startswith(FENCE_MARKER)

    def _fence_language(self, stripped: str) -> str:
        """Language tag trailing the opening fence (may be empty).

        Only the first word counts: ```` ```python title="x" ```` → ``python``.
        """
        info = stripped.lstrip("`").strip()
        return info.split()[0] if info else ""
