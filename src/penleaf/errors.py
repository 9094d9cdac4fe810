"""Exception classes for penleaf.

Classification and line patching are total and never raise. Pagination
raises only for a page capacity that cannot hold anything. These
exceptions cover the configuration surface.
"""

from __future__ import annotations


class PenleafError(Exception):
    """Base exception for all penleaf errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(PenleafError):
    """Invalid sheet configuration.

    Raised when geometry values cannot yield a usable page, or when a
    paper style, font or pen color is not one of the known values.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending configuration field
            message: Description of the problem
        """
        self.field = field
        self.message = message
        super().__init__(f"Config '{field}': {message}")
