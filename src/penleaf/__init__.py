"""
penleaf — Handwritten-notes classifier and pager

Turns loosely structured plain text (headings, questions, course lines,
numbered lists, tables, fenced code) into fixed-size pages, and writes
edits made on a rendered line back into the raw text.

Pipeline:
    raw text ──classify──▶ sections ──paginate──▶ pages
        ▲                                           │
        └──────────── apply_line_edit ◀─────────────┘

Quick Start:
    >>> from penleaf import derive_pages, apply_line_edit
    >>> raw = "# Title\\nHello?\\nAnswer.\\n"
    >>> pages = derive_pages(raw)
    >>> [s.kind.value for s in pages[0].sections]
    ['heading1', 'question', 'text']
    >>> apply_line_edit(raw, pages, 0, 1, 0, "Hello again?")
    '# Title\\nHello again?\\nAnswer.\\n'

    >>> # Or keep a session
    >>> from penleaf import Editor
    >>> editor = Editor(raw)
    >>> editor.page_count
    1

Installation:
    pip install penleaf              # zero runtime dependencies
"""

from penleaf.classifier import Classifier, ScanState, classify
from penleaf.config import (
    PAGE_HEIGHT,
    PAGE_WIDTH,
    PageCapacity,
    PageGeometry,
    PaperStyle,
    SheetConfig,
    get_sheet_config,
    reset_sheet_config,
    set_sheet_config,
    sheet_config_context,
)
from penleaf.editor import Editor
from penleaf.errors import ConfigError, PenleafError
from penleaf.formatting import FormatCommand, apply_format
from penleaf.inline import InlineSpan, parse_inline, strip_inline
from penleaf.kinds import SectionKind
from penleaf.location import SourceLocation
from penleaf.pager import Pager, paginate
from penleaf.pages import Alignment, LineIdentity, Page
from penleaf.patcher import apply_line_edit
from penleaf.renderers import PlainRenderer, SheetRenderer
from penleaf.sections import (
    CodeBlock,
    Course,
    Heading,
    ListItem,
    Paragraph,
    Question,
    Section,
    Table,
)
from penleaf.serialization import pages_from_json, pages_to_json
from penleaf.state import LineKey, SheetState
from penleaf.styles import SectionStyle, style_for

__version__ = "0.1.0"


def derive_pages(
    raw: str,
    *,
    config: SheetConfig | None = None,
    state: SheetState | None = None,
) -> list[Page]:
    """Run the full pipeline over raw text.

    Args:
        raw: Raw document text
        config: Sheet configuration (the active context config if None)
        state: Sheet state supplying headers and alignments (none if None)

    Returns:
        Pages numbered from 1. Empty input yields a single empty page.

    Example:
        >>> pages = derive_pages("```py\\nx=1\\n```\\n")
        >>> pages[0].sections[0].language
        'py'
    """
    config = config or get_sheet_config()
    pages = paginate(classify(raw), config.capacity)
    if state is not None:
        pages = state.decorate(pages)
    return pages


__all__ = [
    # Pipeline
    "apply_format",
    "apply_line_edit",
    "classify",
    "derive_pages",
    "paginate",
    # Classes
    "Classifier",
    "Editor",
    "Pager",
    "PlainRenderer",
    "SheetRenderer",
    "SheetState",
    "ScanState",
    # Sections
    "CodeBlock",
    "Course",
    "Heading",
    "ListItem",
    "Paragraph",
    "Question",
    "Section",
    "SectionKind",
    "SectionStyle",
    "SourceLocation",
    "Table",
    "style_for",
    # Pages
    "Alignment",
    "LineIdentity",
    "LineKey",
    "Page",
    # Inline
    "InlineSpan",
    "parse_inline",
    "strip_inline",
    # Config
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
    # Commands / errors / serialization
    "ConfigError",
    "FormatCommand",
    "PenleafError",
    "pages_from_json",
    "pages_to_json",
    "__version__",
]
