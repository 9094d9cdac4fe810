"""Editing session over one raw document.

The raw text is the single source of truth. Every change (typing, a line
edit, a format command) replaces the raw text, and the next read of
``pages`` re-runs classify → paginate → decorate from scratch. Nothing
is patched incrementally.

Example:
    >>> editor = Editor("# Title\\nHello?\\nAnswer.\\n")
    >>> editor.page_count
    1
    >>> editor.edit_line(0, 2, 0, "Answer, revised.")
    True
    >>> editor.text
    '# Title\\nHello?\\nAnswer, revised.\\n'

Thread Safety:
Editor instances are not thread-safe. Keep one per editing surface.

"""

from __future__ import annotations

from penleaf.classifier import classify
from penleaf.config import SheetConfig, get_sheet_config, sheet_config_context
from penleaf.formatting import FormatCommand, apply_format
from penleaf.pager import paginate
from penleaf.pages import Alignment, LineIdentity, Page
from penleaf.patcher import apply_line_edit, locate_section
from penleaf.renderers.plain import PlainRenderer
from penleaf.state import SheetState
from penleaf.utils.logger import get_logger

logger = get_logger(__name__)


class Editor:
    """Raw text plus sheet state, with pages derived on demand."""

    __slots__ = ("_text", "_config", "_state", "_pages")

    def __init__(
        self,
        text: str = "",
        *,
        config: SheetConfig | None = None,
        state: SheetState | None = None,
    ) -> None:
        """Initialize an editing session.

        Args:
            text: Initial raw document
            config: Sheet configuration (the active context config if None)
            state: Sheet state to continue from (fresh if None)
        """
        self._text = text
        self._config = config or get_sheet_config()
        self._state = state or SheetState()
        self._pages: list[Page] | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def config(self) -> SheetConfig:
        return self._config

    @property
    def state(self) -> SheetState:
        return self._state

    @property
    def pages(self) -> list[Page]:
        """Pages for the current text, re-derived after any change."""
        if self._pages is None:
            with sheet_config_context(self._config):
                pages = paginate(classify(self._text), self._config.capacity)
            self._pages = self._state.decorate(pages)
        return self._pages

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _invalidate(self) -> None:
        self._pages = None

    # =========================================================================
    # Raw text changes
    # =========================================================================

    def set_text(self, text: str) -> None:
        """Replace the raw text (direct user input)."""
        self._text = text
        self._invalidate()

    def set_config(self, config: SheetConfig) -> None:
        self._config = config
        self._invalidate()

    def edit_line(self, page_index: int, section_index: int, line_index: int, new_text: str) -> bool:
        """Write an edit made on a rendered line back into the raw text.

        Returns:
            True if the raw text changed.
        """
        old_pages = self.pages
        updated = apply_line_edit(
            self._text, old_pages, page_index, section_index, line_index, new_text
        )
        if updated == self._text:
            return False
        self._text = updated
        new_pages = paginate(classify(updated), self._config.capacity)
        self._state.carry_over(old_pages, new_pages, page_index, section_index)
        self._invalidate()
        return True

    def apply_format(self, cursor: int, command: FormatCommand) -> bool:
        """Apply a toolbar format command at a raw-text cursor.

        Returns:
            True if the raw text changed.
        """
        updated = apply_format(self._text, cursor, command)
        if updated == self._text:
            return False
        self.set_text(updated)
        return True

    # =========================================================================
    # Inline line editing
    # =========================================================================

    def line_text(self, identity: LineIdentity) -> str | None:
        """Text of a rendered line without its line break, or None."""
        section = locate_section(self.pages, identity.page_index, identity.section_index)
        if section is None:
            return None
        lines = section.lines()
        if not 0 <= identity.line_index < len(lines):
            return None
        return lines[identity.line_index].rstrip("\r\n")

    def begin_line_edit(self, identity: LineIdentity) -> str | None:
        """Start editing a line.

        Returns:
            The line's current text, or None if the identity is not on
            any page.
        """
        text = self.line_text(identity)
        if text is None or not self._state.begin_edit(self.pages, identity):
            return None
        return text

    def editing(self) -> LineIdentity | None:
        """Where the line being edited currently sits."""
        return self._state.editing(self.pages)

    def commit_line_edit(self, new_text: str) -> bool:
        """Write the line being edited and stop editing.

        Returns:
            True if the raw text changed.
        """
        identity = self.editing()
        self._state.end_edit()
        if identity is None:
            logger.warning("Commit without a line being edited")
            return False
        return self.edit_line(*identity, new_text)

    def cancel_line_edit(self) -> None:
        self._state.end_edit()

    # =========================================================================
    # Sheet state
    # =========================================================================

    def set_line_alignment(self, identity: LineIdentity, alignment: Alignment) -> bool:
        """Align a rendered line. Returns False if the line does not exist."""
        changed = self._state.set_alignment(self.pages, identity, alignment)
        if changed:
            self._invalidate()
        return changed

    def set_page_header(
        self, page_number: int, text: str, alignment: Alignment = Alignment.LEFT
    ) -> None:
        self._state.set_header(page_number, text, alignment)
        self._invalidate()

    # =========================================================================
    # Output
    # =========================================================================

    def render(self) -> list[str]:
        """Render every page as plain text."""
        return PlainRenderer(self._config).render_all(self.pages)
