"""Presentation control service."""

import logging
from dataclasses import dataclass
from pathlib import Path

from app.constants import DEFAULT_CONTENT_PATH, PROJECT_ROOT, UNTITLED_SLIDE
from app.state import get_host, get_session, get_paths_config

logger = logging.getLogger(__name__)


@dataclass
class StartResult:
    """Result of a presentation start attempt."""
    success: bool
    slide_count: int = 0
    error_message: str | None = None
    exception: Exception | None = None


def read_default_content() -> list[str]:
    """Read the default document configured under paths.content.
    
    Raises:
        FileNotFoundError: If the document doesn't exist
    """
    from mdpresent.markdown_parser import read_markdown_lines
    
    content = get_paths_config().get('content', DEFAULT_CONTENT_PATH)
    path = Path(content)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return read_markdown_lines(path)


def decode_upload(data: bytes) -> list[str]:
    """Decode an uploaded Markdown file into document lines.
    
    Raises:
        UnicodeDecodeError: If the file is not UTF-8 text
    """
    return data.decode('utf-8').splitlines()


def document_outline(lines: list[str]) -> list[str]:
    """List the slide titles a document would present, in order."""
    from mdpresent.markdown_parser import parse_slides
    
    return [slide.title or UNTITLED_SLIDE for slide in parse_slides(lines)]


def start_presentation(lines: list[str]) -> StartResult:
    """Load lines as the current document and run the Present command.
    
    Args:
        lines: Markdown document lines
        
    Returns:
        StartResult with success status and slide count
    """
    from mdpresent.commands import PRESENT_COMMAND
    from mdpresent.session import SessionError
    
    host = get_host()
    session = get_session()
    
    try:
        host.load_document(lines)
        host.run_command(PRESENT_COMMAND)
        return StartResult(success=True, slide_count=len(session.deck))
    except SessionError as e:
        return StartResult(
            success=False,
            error_message=str(e),
            exception=e,
        )
    except Exception as e:
        logger.exception("Failed to start presentation")
        return StartResult(
            success=False,
            error_message=f"Presentation failed: {e}",
            exception=e,
        )


def press_key(key: str) -> bool:
    """Send a key press to the focused viewport."""
    return get_host().press(key)


def close_window() -> None:
    """Close the focused viewport, as leaving the window would."""
    get_host().close_focused()


def resize_terminal(columns: int, lines: int) -> bool:
    """Resize the virtual terminal if the size changed.
    
    Returns:
        True if observers were notified
    """
    host = get_host()
    size = host.get_terminal_size()
    if (size.width, size.height) == (columns, lines):
        return False
    logger.debug(f"Resizing virtual terminal to {columns}x{lines}")
    host.resize(columns, lines)
    return True
