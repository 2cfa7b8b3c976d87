"""Window layout planning for the presentation viewports.

The presentation is drawn into four floating viewports laid over the
terminal: a full-screen background, a one-row header at the top, an inset
body, and a one-row footer near the bottom edge. All geometry is in
character cells with the origin at the top-left corner.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

# Viewport names, in creation order
REGION_NAMES = ('background', 'header', 'body', 'footer')

# Left margin of the body viewport
BODY_MARGIN = 8


@dataclass(frozen=True)
class Region:
    """Rectangular placement of a viewport.

    Attributes:
        x: Column of the top-left corner.
        y: Row of the top-left corner.
        width: Width in cells.
        height: Height in cells.
        zindex: Stacking order; higher values are drawn on top.
        border: Optional border style hint for the host.
        style: Window style hint for the host.
    """
    x: int
    y: int
    width: int
    height: int
    zindex: int
    border: str | None = None
    style: str = 'minimal'


@dataclass(frozen=True)
class WindowLayout:
    """Regions for the four presentation viewports."""
    background: Region
    header: Region
    body: Region
    footer: Region

    def __getitem__(self, name: str) -> Region:
        if name not in REGION_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> Iterator[tuple[str, Region]]:
        for name in REGION_NAMES:
            yield name, getattr(self, name)


def plan_layout(width: int, height: int) -> WindowLayout:
    """Compute viewport regions for a terminal of the given size.

    Args:
        width: Terminal width in columns.
        height: Terminal height in rows.

    Returns:
        WindowLayout with background, header, body and footer regions.
    """
    layout = WindowLayout(
        background=Region(x=0, y=0, width=width, height=height, zindex=1),
        header=Region(x=0, y=0, width=width, height=1, zindex=3, border='rounded'),
        body=Region(
            x=BODY_MARGIN,
            y=3,
            width=width - BODY_MARGIN,
            height=height - 5,
            zindex=2,
        ),
        footer=Region(x=1, y=height - 2, width=width - 1, height=1, zindex=2),
    )
    logger.debug(f"Planned layout for {width}x{height}: body={layout.body}")
    return layout
