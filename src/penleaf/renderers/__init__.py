"""Page renderers."""

from penleaf.renderers.plain import PlainRenderer
from penleaf.renderers.protocol import SheetRenderer

__all__ = ["PlainRenderer", "SheetRenderer"]
