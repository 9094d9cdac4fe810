"""Inline markup within a rendered line.

Recognizes three non-nesting markers:

- ``**bold**``
- ``*italic*``
- ``__underline__``

An opening marker without a matching close, or with nothing between the
pair, is kept as literal text. Section text is never rewritten; spans
are for display only.

Example:
    >>> [(s.text, s.bold) for s in parse_inline("a **b** c")]
    [('a ', False), ('b', True), (' c', False)]
"""

from dataclasses import dataclass

# Longest markers first so "**" is not read as two "*"
_MARKERS: tuple[tuple[str, str], ...] = (
    ("**", "bold"),
    ("__", "underline"),
    ("*", "italic"),
)


@dataclass(frozen=True, slots=True)
class InlineSpan:
    """A run of text sharing the same inline formatting."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.italic or self.underline)


def parse_inline(line: str) -> tuple[InlineSpan, ...]:
    """Split a line into formatted spans.

    Args:
        line: One line of display text

    Returns:
        Spans whose texts concatenate to the line without its markers.
    """
    spans: list[InlineSpan] = []
    literal: list[str] = []
    pos = 0
    length = len(line)

    while pos < length:
        matched = _match_marker(line, pos)
        if matched is None:
            literal.append(line[pos])
            pos += 1
            continue

        inner, attr, end = matched
        if literal:
            spans.append(InlineSpan("".join(literal)))
            literal = []
        spans.append(InlineSpan(inner, **{attr: True}))
        pos = end

    if literal:
        spans.append(InlineSpan("".join(literal)))
    return tuple(spans)


def _match_marker(line: str, pos: int) -> tuple[str, str, int] | None:
    """Match a marker pair opening at pos.

    Returns:
        (inner text, span attribute, position after closing marker) or None.
    """
    for marker, attr in _MARKERS:
        if not line.startswith(marker, pos):
            continue
        start = pos + len(marker)
        close = line.find(marker, start)
        if marker == "*":
            # A lone "*" must not close on half of a "**"
            while close != -1 and line.startswith("**", close):
                close = line.find(marker, close + 2)
        if close > start:
            return line[start:close], attr, close + len(marker)
        return None
    return None


def strip_inline(line: str) -> str:
    """Return the line's display text with inline markers removed.

    Example:
        >>> strip_inline("**Note:** read *chapter 2*")
        'Note: read chapter 2'
    """
    return "".join(span.text for span in parse_inline(line))
