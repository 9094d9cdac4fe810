"""Tests for greedy page packing."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from penleaf import (
    ConfigError,
    PageCapacity,
    PageGeometry,
    SectionKind,
    SheetConfig,
    classify,
    paginate,
    sheet_config_context,
)
from penleaf.pager import Pager

DEFAULT = PageCapacity(lines_per_page=30, chars_per_page=1080)


def page_texts(pages) -> list[list[str]]:
    return [[section.text for section in page.sections] for page in pages]


class TestBasics:
    """Tests for numbering, empty input and start indices."""

    def test_empty_input_yields_one_empty_page(self) -> None:
        pages = paginate([], DEFAULT)
        assert len(pages) == 1
        assert pages[0].page_number == 1
        assert pages[0].is_empty

    def test_small_document_fits_one_page(self) -> None:
        pages = paginate(classify("# Title\nHello?\nAnswer.\n"), DEFAULT)
        assert len(pages) == 1
        assert page_texts(pages) == [["Title\n", "Hello?\n", "Answer.\n"]]

    def test_start_index_is_page_relative(self) -> None:
        pages = paginate(classify("# Title\nHello?\nAnswer.\n"), DEFAULT)
        assert [s.start_index for s in pages[0].sections] == [0, 6, 13]

    def test_start_index_resets_on_new_page(self) -> None:
        pages = paginate(classify("# A\n# B\n# C\n"), PageCapacity(2, 1000))
        assert [[s.start_index for s in p.sections] for p in pages] == [[0, 2], [0]]

    def test_page_numbers_are_contiguous(self) -> None:
        pages = paginate(classify("line\n" * 100), PageCapacity(7, 1000))
        assert [p.page_number for p in pages] == list(range(1, len(pages) + 1))
        assert [p.index for p in pages] == list(range(len(pages)))

    def test_pager_is_single_use_class(self) -> None:
        sections = classify("one\n")
        assert Pager(DEFAULT).paginate(sections) == paginate(sections, DEFAULT)


class TestCapacityValidation:
    """A capacity that holds nothing is rejected up front."""

    @pytest.mark.parametrize(
        ("capacity", "field"),
        [
            (PageCapacity(5, 0), "chars_per_page"),
            (PageCapacity(0, 100), "lines_per_page"),
            (PageCapacity(-1, -1), "lines_per_page"),
        ],
    )
    def test_empty_budget_raises(self, capacity: PageCapacity, field: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            paginate(classify("hello world\n"), capacity)
        assert exc_info.value.field == field

    def test_empty_budget_raises_for_empty_input(self) -> None:
        with pytest.raises(ConfigError):
            Pager(PageCapacity(5, 0))

    def test_single_line_single_char_pages(self) -> None:
        pages = paginate(classify("ab\n"), PageCapacity(1, 1))
        assert [p.content for p in pages] == ["a", "b", "\n"]


class TestAtomicSections:
    """Line-atomic and unsplittable sections are never divided."""

    def test_heading_seals_full_page(self) -> None:
        pages = paginate(classify("# A\n# B\n# C\n"), PageCapacity(2, 1000))
        assert page_texts(pages) == [["A\n", "B\n"], ["C\n"]]

    def test_overlong_question_kept_whole(self) -> None:
        question = "Why " + "x" * 40 + "?\n"
        pages = paginate(classify(question), PageCapacity(30, 20))
        assert len(pages) == 1
        assert pages[0].sections[0].text == question

    def test_code_block_moves_to_new_page_and_overflows(self) -> None:
        raw = "intro\n```\na\nb\nc\nd\ne\n```\n"
        pages = paginate(classify(raw), PageCapacity(3, 1000))
        assert len(pages) == 2
        assert page_texts(pages)[0] == ["intro\n"]
        assert pages[1].sections[0].kind is SectionKind.CODE
        assert pages[1].line_count == 5

    def test_table_ignores_character_budget(self) -> None:
        pages = paginate(classify("| a | b |\n| c | d |\n"), PageCapacity(30, 10))
        assert len(pages) == 1
        assert pages[0].char_count > 10

    def test_section_after_overflowing_block_starts_new_page(self) -> None:
        raw = "```\n1\n2\n3\n4\n```\nafter\n"
        pages = paginate(classify(raw), PageCapacity(3, 1000))
        assert page_texts(pages) == [["1\n2\n3\n4\n"], ["after\n"]]


class TestSplitting:
    """Paragraphs and lists larger than a page are divided."""

    def test_three_thousand_characters_make_three_pages(self) -> None:
        raw = "word " * 600
        pages = paginate(classify(raw), DEFAULT)
        assert len(pages) == 3
        assert "".join(p.content for p in pages) == raw
        assert [p.char_count for p in pages] == [1080, 1080, 840]
        assert [s.part for p in pages for s in p.sections] == [1, 2, 3]

    def test_split_prefers_whitespace(self) -> None:
        raw = "alpha beta gamma delta"
        pages = paginate(classify(raw), PageCapacity(5, 12))
        assert [p.content for p in pages] == ["alpha beta ", "gamma delta"]

    def test_split_hard_cuts_without_whitespace(self) -> None:
        pages = paginate(classify("x" * 25), PageCapacity(2, 10))
        assert [p.char_count for p in pages] == [10, 10, 5]

    def test_split_prefers_whole_lines(self) -> None:
        raw = "".join(f"l{i}\n" for i in range(1, 8))
        pages = paginate(classify(raw), PageCapacity(3, 1000))
        assert [p.content for p in pages] == ["l1\nl2\nl3\n", "l4\nl5\nl6\n", "l7\n"]

    def test_fitting_paragraph_moves_whole(self) -> None:
        pages = paginate(classify("# T\none\ntwo\nthree\n"), PageCapacity(3, 1000))
        assert page_texts(pages) == [["T\n"], ["one\ntwo\nthree\n"]]
        assert pages[1].sections[0].part == 0

    def test_split_fills_room_left_on_current_page(self) -> None:
        raw = "# T\n" + "".join(f"l{i}\n" for i in range(1, 6))
        pages = paginate(classify(raw), PageCapacity(3, 1000))
        assert page_texts(pages) == [["T\n", "l1\nl2\n"], ["l3\nl4\nl5\n"]]

    def test_pieces_keep_document_offsets(self) -> None:
        raw = "# Heading\n" + "word " * 600
        for page in paginate(classify(raw), DEFAULT):
            for section in page.sections:
                assert raw[section.body_offset : section.body_end_offset] == section.raw_body()

    def test_piece_locations_chain(self) -> None:
        raw = "".join(f"l{i}\n" for i in range(1, 8))
        pieces = [s for p in paginate(classify(raw), PageCapacity(3, 1000)) for s in p.sections]
        assert [s.location.lineno for s in pieces] == [1, 4, 7]
        assert pieces[0].location.end_offset == pieces[1].location.offset


class TestConfiguredCapacity:
    """Capacity defaults to the active sheet config."""

    def test_default_config_capacity(self) -> None:
        assert len(paginate(classify("word " * 600))) == 3

    def test_context_config_capacity(self) -> None:
        config = SheetConfig(geometry=PageGeometry(chars_per_line=10))
        with sheet_config_context(config):
            pages = paginate(classify("word " * 100))
        assert len(pages) == 2


class TestPagerProperties:
    """Property-based checks over plain text."""

    @given(
        st.text(alphabet="ab \n", max_size=400),
        st.integers(min_value=1, max_value=8),
        st.integers(min_value=1, max_value=60),
    )
    @settings(max_examples=200)
    def test_plain_text_respects_both_budgets(self, raw: str, lines: int, chars: int) -> None:
        pages = paginate(classify(raw), PageCapacity(lines, chars))
        assert "".join(p.content for p in pages) == raw
        for page in pages:
            assert page.line_count <= lines
            assert page.char_count <= chars
            if len(pages) > 1:
                assert not page.is_empty

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_pagination_is_deterministic(self, raw: str) -> None:
        capacity = PageCapacity(4, 80)
        assert paginate(classify(raw), capacity) == paginate(classify(raw), capacity)
