"""Split a raw line into stripped markup and display content."""

from typing import NamedTuple

from penleaf.classifier.modes import BOLD_MARKER


class MarkedLine(NamedTuple):
    """A raw line taken apart around its markers.

    ``prefix + content + suffix + ending`` always equals the raw line,
    where ``ending`` is the line break (if any).
    """

    prefix: str
    content: str
    suffix: str

    @classmethod
    def plain(cls, line: str) -> "MarkedLine":
        return cls("", line.rstrip("\n"), "")


def split_line_ending(line: str) -> tuple[str, str]:
    """Return (body, ending) where ending is "\\n" or ""."""
    if line.endswith("\n"):
        return line[:-1], "\n"
    return line, ""


def unwrap_bold(line: str) -> MarkedLine | None:
    """Strip one ``**...**`` layer wrapping the whole (trimmed) line.

    Leading whitespace joins the prefix, trailing whitespace the suffix.

    Returns:
        MarkedLine if the trimmed line is wrapped, None otherwise.
    """
    body, _ = split_line_ending(line)
    stripped = body.strip()
    size = len(BOLD_MARKER)
    if len(stripped) <= 2 * size:
        return None
    if not (stripped.startswith(BOLD_MARKER) and stripped.endswith(BOLD_MARKER)):
        return None
    inner = stripped[size:-size]
    if BOLD_MARKER in inner:
        return None

    lead = len(body) - len(body.lstrip())
    content_start = lead + size
    content_end = content_start + len(inner)
    return MarkedLine(body[:content_start], body[content_start:content_end], body[content_end:])
