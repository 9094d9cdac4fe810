"""Table row rule mixin."""

from penleaf.classifier.modes import TABLE_PIPE


class TableRuleMixin:
    """Mixin providing table row detection and header parsing."""

    def _is_table_row(self, line: str) -> bool:
        """A table row is any line with at least two pipe characters."""
        return line.count(TABLE_PIPE) >= 2

    def _parse_table_headers(self, line: str) -> tuple[str, ...]:
        """Split a header row on pipes, dropping empty cells.

        Example:
            ``| Name | Grade |`` → ``("Name", "Grade")``
        """
        cells = (cell.strip() for cell in line.rstrip("\n").split(TABLE_PIPE))
        return tuple(cell for cell in cells if cell)
