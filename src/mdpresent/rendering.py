"""Text layout helpers shared by the hosts.

Pure functions: soft-wrapping of viewport lines according to the wrap,
breakindent and breakindentopt display options, and composition of
stacked viewports into a single screen of text rows.
"""

import re
from typing import Iterable, Sequence

from .layout import Region

# List item prefixes recognised by the "list" breakindent option
LIST_ITEM_PATTERN = re.compile(r'^\s*(?:[-*+]|\d+[.)])\s+')

# Narrowest text width kept for continuation lines
DEFAULT_MIN_TEXT_WIDTH = 20


def parse_breakindentopt(value: str) -> dict[str, int]:
    """Parse a "key:value,key:value" breakindent option string.

    Entries that are not integers are ignored.
    """
    options: dict[str, int] = {}
    for item in (value or '').split(','):
        key, sep, raw = item.partition(':')
        if not sep:
            continue
        try:
            options[key.strip()] = int(raw)
        except ValueError:
            continue
    return options


def continuation_indent(line: str, width: int, breakindentopt: str = '') -> int:
    """Number of cells wrapped continuation lines of line are indented by."""
    options = parse_breakindentopt(breakindentopt)
    indent = len(line) - len(line.lstrip(' \t'))
    indent += options.get('shift', 0)

    list_width = options.get('list', 0)
    if list_width:
        match = LIST_ITEM_PATTERN.match(line)
        if match:
            if list_width < 0:
                indent = len(match.group(0))
            else:
                indent += list_width

    min_width = options.get('min', DEFAULT_MIN_TEXT_WIDTH)
    indent = min(indent, width - min_width)
    return max(indent, 0)


def wrap_line(
    line: str,
    width: int,
    *,
    wrap: bool = False,
    breakindent: bool = False,
    breakindentopt: str = '',
) -> list[str]:
    """Split one content line into the screen rows it occupies.

    Without wrap the line is truncated to width. With wrap it is cut into
    rows of width cells; when breakindent is set the continuation rows are
    indented like the first one.
    """
    if width <= 0:
        return []
    if not wrap or len(line) <= width:
        return [line[:width]]

    rows = [line[:width]]
    rest = line[width:]
    indent = continuation_indent(line, width, breakindentopt) if breakindent else 0
    step = max(width - indent, 1)
    while rest:
        rows.append(' ' * indent + rest[:step])
        rest = rest[step:]
    return rows


def wrap_lines(lines: Iterable[str], width: int, **options) -> list[str]:
    """Apply wrap_line to every line, flattening the rows."""
    rows: list[str] = []
    for line in lines:
        rows.extend(wrap_line(line, width, **options))
    return rows


def compose_screen(
    width: int,
    height: int,
    layers: Iterable[tuple[Region, Sequence[str]]],
    **options,
) -> list[str]:
    """Paint viewports onto a blank screen in stacking order.

    Each viewport is opaque: its whole region is cleared before its rows
    are drawn. Regions are clipped to the screen.

    Args:
        width: Screen width in cells.
        height: Screen height in rows.
        layers: (region, lines) pairs, in any order.
        **options: wrap, breakindent and breakindentopt display options.

    Returns:
        Exactly height rows of exactly width characters.
    """
    width = max(width, 0)
    height = max(height, 0)
    canvas = [[' '] * width for _ in range(height)]

    for region, lines in sorted(layers, key=lambda layer: layer[0].zindex):
        rows = wrap_lines(lines, max(region.width, 0), **options)
        for dy in range(max(region.height, 0)):
            y = region.y + dy
            if y < 0 or y >= height:
                continue
            text = rows[dy] if dy < len(rows) else ''
            for dx in range(max(region.width, 0)):
                x = region.x + dx
                if 0 <= x < width:
                    canvas[y][x] = text[dx] if dx < len(text) else ' '

    return [''.join(row) for row in canvas]
