"""Tests for splitting markdown lines into slides."""

from __future__ import annotations

import pytest

from mdpresent.markdown_parser import (
    Deck,
    Slide,
    parse_slides,
    read_markdown_lines,
)


def test_empty_input_yields_empty_deck():
    deck = parse_slides([])

    assert deck == Deck()
    assert len(deck) == 0


def test_lines_without_heading_form_one_untitled_slide():
    deck = parse_slides(["line1", "line2"])

    assert deck.slides == (Slide(title=None, content=("line1", "line2")),)


def test_headings_split_slides():
    deck = parse_slides(["# A", "x", "# B", "y", "z"])

    assert deck.slides == (
        Slide(title="# A", content=("x",)),
        Slide(title="# B", content=("y", "z")),
    )


def test_consecutive_headings_keep_empty_slides():
    deck = parse_slides(["# A", "# B", "y"])

    assert deck.slides == (
        Slide(title="# A", content=()),
        Slide(title="# B", content=("y",)),
    )


def test_trailing_heading_is_kept():
    deck = parse_slides(["# A", "x", "# B"])

    assert deck.slides[-1] == Slide(title="# B", content=())


def test_content_before_first_heading_becomes_leading_slide():
    deck = parse_slides(["preamble", "# A", "x"])

    assert deck.slides[0] == Slide(title=None, content=("preamble",))
    assert deck.slides[1].title == "# A"


def test_marker_must_be_first_character():
    deck = parse_slides(["# A", "  # not a heading", "text # not either"])

    assert len(deck) == 1
    assert deck.slides[0].content == ("  # not a heading", "text # not either")


def test_subheadings_start_slides_and_keep_their_marker():
    deck = parse_slides(["## Sub", "#no-space"])

    assert [s.title for s in deck] == ["## Sub", "#no-space"]


def test_blank_and_duplicate_lines_are_kept_verbatim():
    deck = parse_slides(["# A", "", "dup", "dup", "   "])

    assert deck.slides[0].content == ("", "dup", "dup", "   ")


def test_blank_lines_alone_make_a_slide():
    deck = parse_slides(["", ""])

    assert deck.slides == (Slide(title=None, content=("", "")),)


@pytest.mark.parametrize("lines", [
    [],
    ["only text"],
    ["# A", "x", "# B", "y", "z"],
    ["intro", "", "# A", "# B", "", "## C", "tail"],
])
def test_to_lines_reproduces_input(lines):
    assert parse_slides(lines).to_lines() == lines


def test_parse_accepts_any_iterable():
    deck = parse_slides(line for line in ["# A", "x"])

    assert deck.slides == (Slide(title="# A", content=("x",)),)


class TestDeckAccess:
    """1-based slide access."""

    def test_slide_is_one_based(self):
        deck = parse_slides(["# A", "# B"])

        assert deck.slide(1).title == "# A"
        assert deck.slide(2).title == "# B"

    @pytest.mark.parametrize("index", [0, 3, -1])
    def test_out_of_range_raises(self, index):
        deck = parse_slides(["# A", "# B"])

        with pytest.raises(IndexError):
            deck.slide(index)


class TestMarkdownFile:
    """Reading documents from disk."""

    def test_read_drops_line_terminators(self, tmp_path):
        path = tmp_path / "slides.md"
        path.write_text("# A\nx\r\n\n# B\n", encoding="utf-8")

        assert read_markdown_lines(path) == ["# A", "x", "", "# B"]

    def test_file_lines_parse_into_slides(self, tmp_path):
        path = tmp_path / "slides.md"
        path.write_text("# A\nx\n# B\ny\n", encoding="utf-8")

        deck = parse_slides(read_markdown_lines(path))

        assert [s.title for s in deck] == ["# A", "# B"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_markdown_lines(tmp_path / "missing.md")
