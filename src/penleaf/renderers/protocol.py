"""SheetRenderer protocol: the stable interface for page renderers.

Any renderer that implements ``render(page, page_count) -> str`` conforms
to this protocol. Renderers read pages; they never modify section text
or offsets.

"""

from typing import Protocol

from penleaf.pages import Page


class SheetRenderer(Protocol):
    """Protocol for page renderers."""

    def render(self, page: Page, page_count: int) -> str:
        """Render one page.

        Args:
            page: The page to render.
            page_count: Total number of pages (for "Page N of M").

        Returns:
            Rendered output.

        """
        ...
