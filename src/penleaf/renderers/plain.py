"""Plain-text sheet renderer.

Renders a page as fixed-width text, one output line per section line:
header strip, body, and a right-aligned "Page N of M" footer. Heading and
question markers are already stripped by the classifier; inline markup
is stripped here. Code and table lines are kept verbatim, code between
fence lines naming its language.

Example:
    >>> pages = derive_pages("# Notes\\nWhat is **entropy**?\\n")
    >>> text = PlainRenderer().render(pages[0], len(pages))
    >>> text.splitlines()[:2]
    ['| Notes', '| What is entropy?']
"""

from penleaf.config import PaperStyle, SheetConfig, get_sheet_config
from penleaf.inline import strip_inline
from penleaf.pages import Alignment, Page
from penleaf.sections import CodeBlock, Course, Heading, ListItem, Paragraph, Question, Section, Table
from penleaf.stringbuilder import StringBuilder


class PlainRenderer:
    """Render pages to fixed-width plain text.

    Ruled and grid paper draw a left margin rule; blank paper does not.
    """

    __slots__ = ("_config",)

    def __init__(self, config: SheetConfig | None = None) -> None:
        self._config = config or get_sheet_config()

    @property
    def width(self) -> int:
        return self._config.geometry.chars_per_line

    def render(self, page: Page, page_count: int) -> str:
        """Render one page to text."""
        margin = self._margin()
        sb = StringBuilder()
        if page.header:
            sb.append_line(self._align(page.header, page.header_alignment))
            sb.append_line()

        for section_index, section in enumerate(page.sections):
            if isinstance(section, CodeBlock):
                sb.append_line(margin + "```" + section.language)
            for line_index, line in enumerate(self._display_lines(section)):
                alignment = page.alignment_for(section_index, line_index)
                sb.append_line(margin + self._align(line, alignment))
            if isinstance(section, CodeBlock):
                sb.append_line(margin + "```")

        sb.append_line(margin.rstrip())
        footer = f"Page {page.page_number} of {page_count}"
        sb.append(margin + footer.rjust(self.width))
        return sb.build()

    def render_all(self, pages: list[Page]) -> list[str]:
        return [self.render(page, len(pages)) for page in pages]

    def _display_lines(self, section: Section) -> list[str]:
        """Lines as they appear on the sheet, without line breaks."""
        lines = [line.rstrip("\r\n") for line in section.lines()]
        match section:
            case CodeBlock() | Table():
                return lines
            case Heading() | Question() | Course() | ListItem() | Paragraph():
                return [strip_inline(line) for line in lines]
            case _:
                return lines

    def _margin(self) -> str:
        return "" if self._config.paper_style is PaperStyle.BLANK else "| "

    def _align(self, text: str, alignment: Alignment) -> str:
        match alignment:
            case Alignment.CENTER:
                return text.center(self.width).rstrip()
            case Alignment.RIGHT:
                return text.rjust(self.width)
            case _:
                return text
