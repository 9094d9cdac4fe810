"""Minimal logging utilities for penleaf.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from penleaf.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Classified %d sections", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "penleaf." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'penleaf.mymodule'
    """
    if not (name == "penleaf" or name.startswith("penleaf.")):
        name = f"penleaf.{name}"
    return logging.getLogger(name)
