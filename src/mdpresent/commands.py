"""Presenter setup and the user-facing Present command.

setup() runs once per process: it captures the original display options,
builds the session, registers the resize observer and exposes the Present
command on the host.
"""

import logging
from typing import Any, Mapping

from .config import Config
from .display_settings import DisplaySettingsManager, capture_display_settings
from .host import Host
from .session import (
    DEFAULT_FILETYPE,
    DEFAULT_KEYMAP,
    Event,
    EventKind,
    PresentationSession,
)

logger = logging.getLogger(__name__)

PRESENT_COMMAND = 'Present'

# Config key names for the body viewport bindings
KEY_ACTIONS = {
    'next': EventKind.NEXT_SLIDE,
    'prev': EventKind.PREV_SLIDE,
    'quit': EventKind.QUIT,
}


def build_keymap(keys: Mapping[str, str] | None = None) -> dict[str, EventKind]:
    """Build the key to event mapping from configured action keys.

    Args:
        keys: Mapping of action name ('next', 'prev', 'quit') to key.

    Raises:
        ValueError: If an action name is unknown.
    """
    if not keys:
        return dict(DEFAULT_KEYMAP)

    unknown = sorted(set(keys) - set(KEY_ACTIONS))
    if unknown:
        raise ValueError(
            f"Unknown key action(s): {', '.join(unknown)}. "
            f"Available actions: {', '.join(KEY_ACTIONS)}"
        )

    defaults = {action: key for key, action in DEFAULT_KEYMAP.items()}
    keymap = {}
    for name, action in KEY_ACTIONS.items():
        keymap[str(keys.get(name, defaults[action]))] = action
    return keymap


def start_presentation(session: PresentationSession, document: Any = None, filetype: str = DEFAULT_FILETYPE) -> None:
    """Start presenting a host document (the current one by default)."""
    lines = session.host.read_source_lines(document)
    logger.info(f"Starting presentation of {document or 'current document'} ({len(lines)} lines)")
    session.start(lines, filetype=filetype)


def setup(host: Host, config: Config | None = None) -> PresentationSession:
    """Prepare a host for presenting.

    Args:
        host: Host to present on.
        config: Optional configuration for keys, filetype and display overrides.

    Returns:
        The idle PresentationSession bound to the host.
    """
    present = config.present_display if config else None
    keymap = build_keymap(config.keys if config else None)
    filetype = config.filetype if config else DEFAULT_FILETYPE

    snapshot = capture_display_settings(host, present)
    session = PresentationSession(host, DisplaySettingsManager(host, snapshot), keymap)

    host.register_resize_observer(lambda: session.dispatch(Event(EventKind.RESIZE)))

    def present_command(document: Any = None) -> None:
        start_presentation(session, document, filetype)

    host.register_command(PRESENT_COMMAND, present_command)
    logger.debug(f"Registered '{PRESENT_COMMAND}' command")
    return session
