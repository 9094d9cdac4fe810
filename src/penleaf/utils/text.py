"""Text utilities for penleaf."""


def split_lines(text: str) -> list[str]:
    """Split text on "\\n" only, keeping line breaks.

    Unlike ``str.splitlines``, carriage returns, form feeds and Unicode
    line separators stay inside their line, so line positions agree with
    the classifier's view of the raw text.

    Examples:
        >>> split_lines("a\\nb\\n")
        ['a\\n', 'b\\n']
        >>> split_lines("a\\r\\nb")
        ['a\\r\\n', 'b']
        >>> split_lines("")
        []
    """
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines
