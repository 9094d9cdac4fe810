"""Presentation hints for sections and the sheet palette.

A section's style is a pure function of its kind. Rendering surfaces
merge these hints over the sheet's font and pen color; nothing here
measures glyphs.

Thread Safety:
All values are frozen or tuples; safe to share across threads.

"""

from dataclasses import dataclass, replace
from typing import Literal

from penleaf.kinds import SectionKind


@dataclass(frozen=True, slots=True)
class SectionStyle:
    """Declarative style overrides for one section kind.

    ``None`` for ``color`` or ``font_family`` means "use the sheet's pen
    color / handwriting font".

    Attributes:
        font_size: Font size in sheet units
        line_height: Line advance in sheet units
        font_weight: "normal" or "bold"
        color: Color override (hex), or None
        font_family: Font family override, or None
        margin_top: Space above the section
        margin_bottom: Space below the section

    """

    font_size: int = 20
    line_height: int = 24
    font_weight: Literal["normal", "bold"] = "normal"
    color: str | None = None
    font_family: str | None = None
    margin_top: int = 0
    margin_bottom: int = 0

    @property
    def is_bold(self) -> bool:
        return self.font_weight == "bold"


BASE_STYLE = SectionStyle()

_STYLES: dict[SectionKind, SectionStyle] = {
    SectionKind.HEADING1: replace(
        BASE_STYLE, font_size=28, font_weight="bold", margin_top=8, margin_bottom=4
    ),
    SectionKind.HEADING2: replace(
        BASE_STYLE, font_size=24, font_weight="bold", margin_top=8, margin_bottom=4
    ),
    SectionKind.QUESTION: replace(BASE_STYLE, font_weight="bold", color="#000000"),
    SectionKind.COURSE: replace(
        BASE_STYLE, font_size=30, line_height=36, font_weight="bold", margin_top=12, margin_bottom=6
    ),
    SectionKind.LIST_ITEM: BASE_STYLE,
    SectionKind.CODE: replace(BASE_STYLE, font_size=16, font_family="monospace"),
    SectionKind.TABLE: replace(BASE_STYLE, font_size=18),
    SectionKind.TEXT: BASE_STYLE,
}


def style_for(kind: SectionKind) -> SectionStyle:
    """Return the style hints for a section kind."""
    return _STYLES[kind]


# Handwriting fonts offered by the sheet (family name, label)
FONTS: tuple[tuple[str, str], ...] = (
    ("Caveat", "Casual Handwriting"),
    ("Homemade Apple", "Neat Handwriting"),
    ("Reenie Beanie", "Quick Notes"),
    ("Rock Salt", "Blocky Letters"),
    ("Indie Flower", "School Notes"),
    ("Dancing Script", "Elegant Script"),
    ("Kalam", "Natural Notes"),
)

# Pen colors (hex value, label)
PEN_COLORS: tuple[tuple[str, str], ...] = (
    ("#2563eb", "Blue"),
    ("#000000", "Black"),
    ("#dc2626", "Red"),
    ("#65a30d", "Green"),
    ("#7c3aed", "Purple"),
    ("#9f1239", "Burgundy"),
)

DEFAULT_FONT = FONTS[0][0]
DEFAULT_PEN_COLOR = PEN_COLORS[0][0]
