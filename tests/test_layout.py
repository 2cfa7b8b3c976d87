"""Tests for viewport layout planning."""

from __future__ import annotations

import pytest

from mdpresent.layout import REGION_NAMES, Region, plan_layout


@pytest.mark.parametrize("width,height", [(80, 24), (120, 40), (10, 6)])
def test_body_and_footer_formulas(width, height):
    layout = plan_layout(width, height)

    body = layout.body
    assert (body.x, body.y, body.width, body.height) == (8, 3, width - 8, height - 5)
    footer = layout.footer
    assert (footer.x, footer.y, footer.width, footer.height) == (1, height - 2, width - 1, 1)


def test_background_and_header_span_the_width():
    layout = plan_layout(80, 24)

    assert (layout.background.x, layout.background.y) == (0, 0)
    assert (layout.background.width, layout.background.height) == (80, 24)
    assert (layout.header.x, layout.header.y, layout.header.width, layout.header.height) == (0, 0, 80, 1)


def test_stacking_order():
    layout = plan_layout(80, 24)

    assert layout.background.zindex < layout.body.zindex
    assert layout.body.zindex == layout.footer.zindex
    assert layout.header.zindex > layout.body.zindex
    assert min(region.zindex for _, region in layout.items()) == layout.background.zindex


def test_header_has_border_hint():
    layout = plan_layout(80, 24)

    assert layout.header.border == 'rounded'
    assert layout.body.border is None
    assert all(region.style == 'minimal' for _, region in layout.items())


def test_items_follow_region_names():
    layout = plan_layout(80, 24)

    assert [name for name, _ in layout.items()] == list(REGION_NAMES)
    assert layout['body'] is layout.body


def test_unknown_region_name():
    with pytest.raises(KeyError):
        plan_layout(80, 24)['sidebar']


def test_layout_is_recomputed_each_call():
    assert plan_layout(80, 24) == plan_layout(80, 24)
    assert plan_layout(80, 24).body != plan_layout(100, 30).body
    assert isinstance(plan_layout(1, 1).body, Region)
