"""Tests for per-line classification rules and their precedence."""

import pytest

from penleaf.classifier import classify
from penleaf.kinds import SectionKind
from penleaf.sections import Course, Heading, ListItem, Paragraph, Question


def kinds(source: str) -> list[str]:
    return [section.kind.value for section in classify(source)]


class TestHeadings:
    """Tests for # / ## / bold-line headings."""

    def test_hash_heading_strips_marker(self) -> None:
        sections = classify("# Title\n")
        assert len(sections) == 1
        assert isinstance(sections[0], Heading)
        assert sections[0].kind is SectionKind.HEADING1
        assert sections[0].text == "Title\n"
        assert sections[0].markup == ("# ", "")

    def test_subheading(self) -> None:
        sections = classify("## Part two\n")
        assert sections[0].kind is SectionKind.HEADING2
        assert sections[0].text == "Part two\n"
        assert sections[0].markup == ("## ", "")

    def test_indented_heading_keeps_indent_in_prefix(self) -> None:
        sections = classify("  # Title\n")
        assert sections[0].text == "Title\n"
        assert sections[0].markup == ("  # ", "")

    def test_bold_line_without_colon_is_heading(self) -> None:
        sections = classify("**Photosynthesis**\n")
        assert sections[0].kind is SectionKind.HEADING1
        assert sections[0].text == "Photosynthesis\n"
        assert sections[0].markup == ("**", "**")

    def test_bold_line_with_colon_is_not_heading(self) -> None:
        assert kinds("**Note: read this**\n") == ["text"]

    def test_bold_line_with_inner_markers_is_not_heading(self) -> None:
        assert kinds("**a** and **b**\n") == ["text"]

    def test_hash_without_space_is_text(self) -> None:
        assert kinds("#hashtag\n") == ["text"]

    def test_lone_hash_is_text(self) -> None:
        assert kinds("#\n") == ["text"]

    def test_heading_without_trailing_newline(self) -> None:
        sections = classify("# End")
        assert sections[0].text == "End"


class TestQuestions:
    """Tests for numbered and trailing-? questions."""

    def test_numbered_question(self) -> None:
        sections = classify("Q1. Define entropy.\n")
        assert isinstance(sections[0], Question)
        assert sections[0].text == "Q1. Define entropy.\n"
        assert sections[0].markup == ("", "")

    def test_bold_numbered_question_strips_one_layer(self) -> None:
        sections = classify("**Q12. Define entropy.**\n")
        assert sections[0].kind is SectionKind.QUESTION
        assert sections[0].text == "Q12. Define entropy.\n"
        assert sections[0].markup == ("**", "**")

    def test_partially_bold_numbered_question_kept_intact(self) -> None:
        sections = classify("**Q2. Explain** it\n")
        assert sections[0].kind is SectionKind.QUESTION
        assert sections[0].text == "**Q2. Explain** it\n"
        assert sections[0].markup == ("", "")

    def test_q_without_number_is_not_numbered_question(self) -> None:
        assert kinds("Q. Something\n") == ["text"]

    def test_trailing_question_mark(self) -> None:
        sections = classify("Why is the sky **blue**?\n")
        assert sections[0].kind is SectionKind.QUESTION
        assert sections[0].text == "Why is the sky **blue**?\n"

    def test_long_line_ending_in_question_mark_is_text(self) -> None:
        line = "x" * 99 + "?"
        assert kinds(line + "\n") == ["text"]

    def test_just_under_limit_is_question(self) -> None:
        line = "x" * 98 + "?"
        assert kinds(line + "\n") == ["question"]


class TestCourse:
    """Tests for course header lines."""

    @pytest.mark.parametrize("line", ["CS 101: Intro", "MATH 241: Calculus", "EE 310:"])
    def test_course_codes(self, line: str) -> None:
        sections = classify(line + "\n")
        assert isinstance(sections[0], Course)
        assert sections[0].text == line + "\n"

    @pytest.mark.parametrize(
        "line",
        ["C 101: one letter", "PHYSX 101: five letters", "CS 10: two digits", "cs 101: lower"],
    )
    def test_not_course_codes(self, line: str) -> None:
        assert kinds(line + "\n") == ["text"]

    def test_course_beats_trailing_question(self) -> None:
        assert kinds("CS 101: Why study this?\n") == ["course"]


class TestLists:
    """Tests for numbered list runs."""

    def test_consecutive_items_form_one_section(self) -> None:
        sections = classify("1. one\n2. two\n3. three\n")
        assert len(sections) == 1
        assert isinstance(sections[0], ListItem)
        assert sections[0].text == "1. one\n2. two\n3. three\n"

    def test_indented_line_ends_list(self) -> None:
        sections = classify("1. a\n2. b\n  cont\n3. c\n")
        assert [(s.kind.value, s.text) for s in sections] == [
            ("listItem", "1. a\n2. b\n"),
            ("text", "  cont\n"),
            ("listItem", "3. c\n"),
        ]

    def test_blank_line_ends_list(self) -> None:
        assert kinds("1. a\n\n2. b\n") == ["listItem", "listItem"]

    def test_unindented_text_ends_list(self) -> None:
        assert kinds("1. one\nafterwards\n") == ["listItem", "text"]

    def test_list_after_paragraph_flushes_paragraph(self) -> None:
        assert kinds("intro line\n1. first\n") == ["text", "listItem"]

    def test_digits_without_space_is_text(self) -> None:
        assert kinds("3.14 is pi\n") == ["text"]


class TestPrecedence:
    """First matching rule wins."""

    def test_table_row_beats_heading(self) -> None:
        assert kinds("# a | b | c\n") == ["table"]

    def test_numbered_question_beats_bold_heading(self) -> None:
        assert kinds("**Q1. What**\n") == ["question"]

    def test_heading_beats_trailing_question(self) -> None:
        assert kinds("# Why?\n") == ["heading1"]

    def test_numbered_question_beats_list(self) -> None:
        assert kinds("Q3. First\n") == ["question"]


class TestParagraphs:
    """Tests for the paragraph accumulator."""

    def test_lines_accumulate_until_blank(self) -> None:
        sections = classify("one\ntwo\n\nthree\n")
        assert [s.text for s in sections] == ["one\ntwo\n\n", "three\n"]
        assert all(isinstance(s, Paragraph) for s in sections)

    def test_blank_line_without_paragraph_is_own_section(self) -> None:
        sections = classify("# T\n\nbody\n")
        assert [(s.kind.value, s.text) for s in sections] == [
            ("heading1", "T\n"),
            ("text", "\n"),
            ("text", "body\n"),
        ]

    def test_heading_flushes_paragraph(self) -> None:
        assert kinds("body\n# Next\n") == ["text", "heading1"]
