"""Typed sections produced by the classifier.

All sections are frozen dataclasses with slots. The hierarchy is closed:
consumers dispatch with ``match`` on the section class, the same way
renderers walk AST nodes.

Section Hierarchy:
Section (base)
├── Heading      (heading1 / heading2)
├── Question
├── Course
├── ListItem
├── CodeBlock    (unsplittable)
├── Table        (unsplittable)
└── Paragraph    (text)

Offsets:
Every section carries two kinds of offset, tracked separately:

- ``location`` / ``body_offset`` are document-relative and fixed at
  classification time. ``location`` spans the whole raw run including
  fence lines; ``body_offset`` is where the raw line(s) behind ``text``
  begin. The patcher splices with these.
- ``start_index`` is page-relative and assigned by the pager.

Thread Safety:
All sections are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, replace
from typing import Literal

from penleaf.kinds import SectionKind
from penleaf.location import SourceLocation
from penleaf.styles import SectionStyle, style_for
from penleaf.utils.text import split_lines


@dataclass(frozen=True, slots=True)
class Section:
    """Base class for all sections.

    Attributes:
        location: Document-relative span of the full raw run
        text: Section text (body only for code blocks, markers stripped
            for headings and bold-wrapped questions)
        body_offset: Document-relative offset of the raw line(s) ``text``
            was taken from
        markup: (prefix, suffix) stripped from the single text line
        start_index: Page-relative offset, set by the pager
        part: 0 for a whole section, 1..n for pieces split across pages

    """

    location: SourceLocation
    text: str
    body_offset: int = 0
    markup: tuple[str, str] = ("", "")
    start_index: int = 0
    part: int = 0

    @property
    def kind(self) -> SectionKind:
        raise NotImplementedError

    @property
    def style(self) -> SectionStyle:
        """Presentation hints, determined solely by kind."""
        return style_for(self.kind)

    @property
    def line_count(self) -> int:
        """Number of line breaks in the text."""
        return self.text.count("\n")

    @property
    def char_count(self) -> int:
        return len(self.text)

    def lines(self) -> list[str]:
        """Split text into lines, keeping line breaks."""
        return split_lines(self.text)

    def raw_body(self) -> str:
        """Reconstruct the raw characters found at ``body_offset``.

        Markup only ever wraps a single line, so the prefix and suffix go
        around the text minus its line break.
        """
        prefix, suffix = self.markup
        if not prefix and not suffix:
            return self.text
        content = self.text.rstrip("\n")
        return prefix + content + suffix + self.text[len(content) :]

    @property
    def body_end_offset(self) -> int:
        return self.body_offset + len(self.raw_body())

    def with_start_index(self, start_index: int) -> "Section":
        """Return a copy placed at a page-relative offset."""
        return replace(self, start_index=start_index)


@dataclass(frozen=True, slots=True)
class Heading(Section):
    """Heading line.

    Markdown: ``# Title``, ``## Subtitle`` or a line wholly wrapped in
    ``**...**`` without a colon (level 1).

    """

    level: Literal[1, 2] = 1

    @property
    def kind(self) -> SectionKind:
        return SectionKind.HEADING1 if self.level == 1 else SectionKind.HEADING2


@dataclass(frozen=True, slots=True)
class Question(Section):
    """Question line: ``Q3. ...`` or a short line ending in ``?``."""

    @property
    def kind(self) -> SectionKind:
        return SectionKind.QUESTION


@dataclass(frozen=True, slots=True)
class Course(Section):
    """Course header line such as ``CS 101: Intro to Computing``."""

    @property
    def kind(self) -> SectionKind:
        return SectionKind.COURSE


@dataclass(frozen=True, slots=True)
class ListItem(Section):
    """Run of numbered list lines (``1. ...``) and their continuations."""

    @property
    def kind(self) -> SectionKind:
        return SectionKind.LIST_ITEM


@dataclass(frozen=True, slots=True)
class CodeBlock(Section):
    """Fenced code block. ``text`` holds the body without fence lines."""

    language: str = ""
    terminated: bool = True

    @property
    def kind(self) -> SectionKind:
        return SectionKind.CODE


@dataclass(frozen=True, slots=True)
class Table(Section):
    """Run of pipe-delimited rows. ``headers`` come from the first row."""

    headers: tuple[str, ...] = ()

    @property
    def kind(self) -> SectionKind:
        return SectionKind.TABLE


@dataclass(frozen=True, slots=True)
class Paragraph(Section):
    """Plain text run, including lone blank lines."""

    @property
    def kind(self) -> SectionKind:
        return SectionKind.TEXT


__all__ = [
    "CodeBlock",
    "Course",
    "Heading",
    "ListItem",
    "Paragraph",
    "Question",
    "Section",
    "Table",
]
