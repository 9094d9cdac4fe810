"""ContextVar-based sheet configuration for penleaf.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Editor, read by the pager and renderers in the
context.

Usage:
    # Direct usage
    from penleaf.config import SheetConfig, set_sheet_config, reset_sheet_config

    set_sheet_config(SheetConfig(paper_style=PaperStyle.GRID))
    try:
        pages = derive_pages(text)
    finally:
        reset_sheet_config()

    # Or use the context manager
    with sheet_config_context(SheetConfig.from_dict({"paperStyle": "blank"})):
        pages = derive_pages(text)

"""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from penleaf.errors import ConfigError
from penleaf.styles import DEFAULT_FONT, DEFAULT_PEN_COLOR, FONTS

# Fixed sheet size in layout units (A4 at 72 dpi)
PAGE_WIDTH = 595
PAGE_HEIGHT = 842

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class PaperStyle(Enum):
    """Background drawn behind the handwriting."""

    RULED = "ruled"
    GRID = "grid"
    BLANK = "blank"


class PageCapacity(NamedTuple):
    """How much content a page holds, derived from PageGeometry."""

    lines_per_page: int
    chars_per_page: int


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Fixed page geometry used to estimate capacity.

    The content area is the sheet height minus the reserved header and
    footer strips. Capacity is a heuristic: whole lines of ``line_height``
    that fit the content area, times ``chars_per_line``.

    Attributes:
        line_height: Height of one handwritten line
        chars_per_line: Approximate characters per line
        header_height: Strip reserved for the page header
        footer_height: Strip reserved for the page footer
        page_width: Sheet width
        page_height: Sheet height

    """

    line_height: int = 24
    chars_per_line: int = 36
    header_height: int = 60
    footer_height: int = 40
    page_width: int = PAGE_WIDTH
    page_height: int = PAGE_HEIGHT

    def __post_init__(self) -> None:
        if self.line_height <= 0:
            raise ConfigError("line_height", f"must be positive, got {self.line_height}")
        if self.chars_per_line <= 0:
            raise ConfigError("chars_per_line", f"must be positive, got {self.chars_per_line}")
        if self.header_height < 0 or self.footer_height < 0:
            raise ConfigError("header_height", "header and footer heights must not be negative")
        if self.content_height < self.line_height:
            raise ConfigError(
                "page_height",
                f"content area of {self.content_height} cannot hold a line of {self.line_height}",
            )

    @property
    def content_height(self) -> int:
        return self.page_height - self.header_height - self.footer_height

    def capacity(self) -> PageCapacity:
        """Derive lines/characters per page.

        Example:
            >>> PageGeometry().capacity()
            PageCapacity(lines_per_page=30, chars_per_page=1080)
        """
        lines = self.content_height // self.line_height
        return PageCapacity(lines_per_page=lines, chars_per_page=lines * self.chars_per_line)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "PageGeometry":
        """Create PageGeometry from a dict.

        Accepts snake_case field names and the camelCase names used by
        editing surfaces (``lineHeight``, ``charsPerLine``, ...). Unknown
        keys are silently ignored.

        Raises:
            ConfigError: If a value is not an integer.
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _GEOMETRY_ALIASES.get(key, key)
            if name in valid_fields:
                try:
                    filtered[name] = int(value)
                except (TypeError, ValueError):
                    raise ConfigError(name, f"expected an integer, got {value!r}") from None
        return cls(**filtered)


_GEOMETRY_ALIASES = {
    "lineHeight": "line_height",
    "charsPerLine": "chars_per_line",
    "headerHeight": "header_height",
    "footerHeight": "footer_height",
    "pageWidth": "page_width",
    "pageHeight": "page_height",
}

_SHEET_ALIASES = {
    "paperStyle": "paper_style",
    "pageCapacityParams": "geometry",
    "penColor": "pen_color",
    "color": "pen_color",
}


@dataclass(frozen=True, slots=True)
class SheetConfig:
    """Immutable sheet configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        paper_style: Ruled, grid or blank paper
        geometry: Page geometry used for capacity estimation
        font: Handwriting font family (one of styles.FONTS)
        pen_color: Pen color as "#rrggbb"

    """

    paper_style: PaperStyle = PaperStyle.RULED
    geometry: PageGeometry = field(default_factory=PageGeometry)
    font: str = DEFAULT_FONT
    pen_color: str = DEFAULT_PEN_COLOR

    def __post_init__(self) -> None:
        if not isinstance(self.paper_style, PaperStyle):
            raise ConfigError("paper_style", f"expected PaperStyle, got {self.paper_style!r}")
        if self.font not in {name for name, _ in FONTS}:
            raise ConfigError("font", f"unknown handwriting font {self.font!r}")
        if not _HEX_COLOR.fullmatch(self.pen_color):
            raise ConfigError("pen_color", f"expected '#rrggbb', got {self.pen_color!r}")

    @property
    def capacity(self) -> PageCapacity:
        return self.geometry.capacity()

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "SheetConfig":
        """Create SheetConfig from dictionary.

        Useful when config comes from an editing surface or a settings
        file. Only keys naming SheetConfig fields (or their camelCase
        aliases) are used; unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. ``paper_style`` may
                be a string, ``geometry`` may be a nested dict.

        Returns:
            New SheetConfig instance with values from dict.

        Raises:
            ConfigError: If a value is invalid.

        Example:
            >>> config = SheetConfig.from_dict({
            ...     "paperStyle": "grid",
            ...     "pageCapacityParams": {"lineHeight": 30},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.paper_style
            <PaperStyle.GRID: 'grid'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _SHEET_ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value

        style = filtered.get("paper_style")
        if isinstance(style, str):
            try:
                filtered["paper_style"] = PaperStyle(style)
            except ValueError:
                raise ConfigError("paper_style", f"unknown paper style {style!r}") from None

        geometry = filtered.get("geometry")
        if isinstance(geometry, dict):
            filtered["geometry"] = PageGeometry.from_dict(geometry)

        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: SheetConfig = SheetConfig()

_sheet_config: ContextVar[SheetConfig] = ContextVar(
    "sheet_config",
    default=_DEFAULT_CONFIG,
)


def get_sheet_config() -> SheetConfig:
    """Get current sheet configuration (thread-local)."""
    return _sheet_config.get()


def set_sheet_config(config: SheetConfig) -> None:
    """Set sheet configuration for current context.

    Args:
        config: SheetConfig instance to use for this context.

    """
    _sheet_config.set(config)


def reset_sheet_config() -> None:
    """Reset to default configuration."""
    _sheet_config.set(_DEFAULT_CONFIG)


@contextmanager
def sheet_config_context(config: SheetConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with sheet_config_context(SheetConfig(paper_style=PaperStyle.GRID)):
        ...     get_sheet_config().paper_style
        <PaperStyle.GRID: 'grid'>

    """
    previous = _sheet_config.get()
    _sheet_config.set(config)
    try:
        yield
    finally:
        _sheet_config.set(previous)


__all__ = [
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "PageCapacity",
    "PageGeometry",
    "PaperStyle",
    "SheetConfig",
    "get_sheet_config",
    "reset_sheet_config",
    "set_sheet_config",
    "sheet_config_context",
]
