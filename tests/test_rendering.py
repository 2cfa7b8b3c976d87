"""Tests for line wrapping and screen composition."""

from __future__ import annotations

import pytest

from mdpresent.layout import Region
from mdpresent.rendering import (
    compose_screen,
    continuation_indent,
    parse_breakindentopt,
    wrap_line,
    wrap_lines,
)


class TestBreakindentopt:
    """Parsing of breakindent option strings."""

    def test_parse(self):
        assert parse_breakindentopt('list:-1,shift:2') == {'list': -1, 'shift': 2}

    def test_ignores_malformed_entries(self):
        assert parse_breakindentopt('sbr,min:x,shift:4') == {'shift': 4}

    def test_empty(self):
        assert parse_breakindentopt('') == {}


def test_no_wrap_truncates():
    assert wrap_line('abcdefgh', 5) == ['abcde']


def test_zero_width_yields_nothing():
    assert wrap_line('abc', 0) == []


def test_short_line_unchanged():
    assert wrap_line('abc', 10, wrap=True) == ['abc']


def test_wrap_without_breakindent():
    assert wrap_line('abcdefghij', 4, wrap=True) == ['abcd', 'efgh', 'ij']


def test_breakindent_keeps_leading_whitespace():
    line = '    ' + 'x' * 40

    rows = wrap_line(line, 30, wrap=True, breakindent=True, breakindentopt='min:10')

    assert rows[0] == line[:30]
    assert all(row.startswith('    x') for row in rows[1:])
    assert ''.join(row[4:] for row in rows[1:]) == line[30:]


def test_list_option_indents_past_marker():
    line = '- ' + 'word ' * 20

    indent = continuation_indent(line, 40, 'list:-1')

    assert indent == 2
    rows = wrap_line(line, 40, wrap=True, breakindent=True, breakindentopt='list:-1')
    assert all(row.startswith('  ') for row in rows[1:])


def test_numbered_list_marker():
    assert continuation_indent('12. item text', 80, 'list:-1') == 4


def test_min_text_width_limits_indent():
    line = ' ' * 30 + 'text'

    assert continuation_indent(line, 40, '') == 20
    assert continuation_indent(line, 40, 'min:5') == 30


def test_wrap_lines_flattens():
    assert wrap_lines(['abcdef', 'gh'], 3, wrap=True) == ['abc', 'def', 'gh']


class TestComposeScreen:
    """Painting stacked viewports."""

    def test_blank_screen(self):
        assert compose_screen(3, 2, []) == ['   ', '   ']

    def test_higher_zindex_drawn_on_top(self):
        low = Region(x=0, y=0, width=4, height=1, zindex=1)
        high = Region(x=1, y=0, width=2, height=1, zindex=2)

        screen = compose_screen(4, 1, [(high, ['XY']), (low, ['abcd'])])

        assert screen == ['aXYd']

    def test_viewport_is_opaque(self):
        low = Region(x=0, y=0, width=4, height=2, zindex=1)
        high = Region(x=0, y=1, width=4, height=1, zindex=2)

        screen = compose_screen(4, 2, [(low, ['aaaa', 'bbbb']), (high, [])])

        assert screen == ['aaaa', '    ']

    def test_regions_clipped_to_screen(self):
        region = Region(x=2, y=1, width=10, height=10, zindex=1)

        screen = compose_screen(4, 2, [(region, ['hello'])])

        assert screen == ['    ', '  he']

    def test_wrap_option_applies(self):
        region = Region(x=0, y=0, width=3, height=2, zindex=1)

        screen = compose_screen(3, 2, [(region, ['abcdef'])], wrap=True)

        assert screen == ['abc', 'def']

    @pytest.mark.parametrize("width,height", [(0, 0), (5, 0), (0, 3)])
    def test_degenerate_sizes(self, width, height):
        screen = compose_screen(width, height, [])

        assert len(screen) == height
        assert all(len(row) == width for row in screen)
