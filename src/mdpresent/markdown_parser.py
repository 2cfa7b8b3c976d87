"""Markdown parsing functionality for slide content.

This module splits a markdown document into Slide structures that the
presentation session navigates.

Every line whose first character is the heading marker starts a new slide;
the heading line itself (marker included) becomes the slide title and the
lines that follow become its content:

    # First slide
    - point one
    - point two
    # Second slide
    Some text...
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Union

logger = logging.getLogger(__name__)

# Marker that introduces a new slide when it is the first character of a line
HEADING_MARKER = '#'


@dataclass(frozen=True)
class Slide:
    """Data structure representing a parsed slide.

    Attributes:
        title: Raw heading line that introduced the slide, or None for a
            leading slide written before any heading.
        content: Body lines in document order.
    """
    title: str | None = None
    content: tuple[str, ...] = ()


@dataclass(frozen=True)
class Deck:
    """The full parsed presentation, slides in document order."""
    slides: tuple[Slide, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def slide(self, index: int) -> Slide:
        """Return the slide at a 1-based position.

        Raises:
            IndexError: If index is outside 1..len(deck).
        """
        if index < 1 or index > len(self.slides):
            raise IndexError(f"Slide {index} out of range (deck has {len(self.slides)} slides)")
        return self.slides[index - 1]

    def to_lines(self) -> list[str]:
        """Reassemble the document lines this deck was parsed from."""
        lines: list[str] = []
        for slide in self.slides:
            if slide.title is not None:
                lines.append(slide.title)
            lines.extend(slide.content)
        return lines


def _is_heading(line: str) -> bool:
    return line[:1] == HEADING_MARKER


def parse_slides(lines: Iterable[str]) -> Deck:
    """Parse document lines into a Deck.

    A slide is only emitted when it has a title or at least one content
    line, so text before the first heading yields an untitled slide only
    when there is some.

    Args:
        lines: Document lines without line terminators.

    Returns:
        Deck with one Slide per heading (plus a leading untitled slide
        when content precedes the first heading).
    """
    slides: list[Slide] = []
    title: str | None = None
    content: list[str] = []

    def flush_slide():
        if title is not None or content:
            slides.append(Slide(title=title, content=tuple(content)))

    for line in lines:
        if _is_heading(line):
            flush_slide()
            title = line
            content = []
        else:
            content.append(line)

    flush_slide()

    logger.debug(f"Parsed {len(slides)} slides")
    return Deck(slides=tuple(slides))


def read_markdown_lines(md_file: Union[str, Path]) -> list[str]:
    """Read a markdown file as a list of lines.

    Line terminators are dropped and a trailing newline does not add an
    empty last line, so the result matches what an editor buffer holds.

    Raises:
        FileNotFoundError: If markdown file doesn't exist.
    """
    path = Path(md_file)
    if not path.exists():
        raise FileNotFoundError(f"Markdown file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        content = f.read()

    logger.info(f"Read markdown file: {path} ({len(content)} chars)")
    return content.splitlines()
