"""Markdown terminal presenter package."""

from .markdown_parser import (
    Slide,
    Deck,
    parse_slides,
    read_markdown_lines,
    HEADING_MARKER,
)
from .layout import (
    Region,
    WindowLayout,
    plan_layout,
    REGION_NAMES,
)
from .display_settings import (
    DisplaySettings,
    SettingsSnapshot,
    DisplaySettingsManager,
    capture_display_settings,
    PRESENTATION_SETTINGS,
)
from .host import (
    Host,
    ViewportHandle,
    TerminalSize,
    ViewportError,
)
from .session import (
    PresentationSession,
    SessionState,
    Event,
    EventKind,
    SessionError,
    SetupFailure,
    SessionAlreadyActiveError,
    EmptyPresentationError,
)
from .commands import (
    setup,
    start_presentation,
    PRESENT_COMMAND,
)
from .memory_host import InMemoryHost

__all__ = [
    # Markdown parsing
    "Slide",
    "Deck",
    "parse_slides",
    "read_markdown_lines",
    "HEADING_MARKER",
    # Layout planning
    "Region",
    "WindowLayout",
    "plan_layout",
    "REGION_NAMES",
    # Display settings
    "DisplaySettings",
    "SettingsSnapshot",
    "DisplaySettingsManager",
    "capture_display_settings",
    "PRESENTATION_SETTINGS",
    # Host interface
    "Host",
    "ViewportHandle",
    "TerminalSize",
    "ViewportError",
    # Session
    "PresentationSession",
    "SessionState",
    "Event",
    "EventKind",
    "SessionError",
    "SetupFailure",
    "SessionAlreadyActiveError",
    "EmptyPresentationError",
    # Commands
    "setup",
    "start_presentation",
    "PRESENT_COMMAND",
    # Hosts
    "InMemoryHost",
]
