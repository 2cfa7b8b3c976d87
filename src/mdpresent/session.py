"""Presentation session state machine.

A session is either idle or active. Starting it opens the four viewports,
switches the display options to presentation mode and shows the first
slide; navigation only moves the current slide; closing the body viewport
(by quitting or by the user leaving it) tears everything down and restores
the display options.

Pipeline flow on start:
    1. Parse the source lines into a Deck
    2. Plan the layout from the terminal size and open one viewport per region
    3. Apply presentation display settings and focus the body
    4. Register the exit observer and key bindings on the body
    5. Render slide 1
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from .display_settings import DisplaySettingsManager
from .host import Host, ViewportError, ViewportHandle
from .layout import plan_layout
from .markdown_parser import Deck, parse_slides

logger = logging.getLogger(__name__)

DEFAULT_FILETYPE = 'markdown'


class SessionError(Exception):
    """Base class for presentation session errors."""


class SetupFailure(SessionError):
    """Raised when the viewports of a new session cannot be created."""


class SessionAlreadyActiveError(SessionError):
    """Raised when starting a session that is already running."""


class EmptyPresentationError(SessionError):
    """Raised when the source document contains no slides."""


class SessionState(enum.Enum):
    IDLE = 'idle'
    ACTIVE = 'active'


class EventKind(enum.Enum):
    NEXT_SLIDE = 'next_slide'
    PREV_SLIDE = 'prev_slide'
    QUIT = 'quit'
    RESIZE = 'resize'
    EXIT = 'exit'


@dataclass(frozen=True)
class Event:
    """A navigation, resize or exit notification delivered to a session.

    Attributes:
        kind: What happened.
        viewport: For EXIT, the viewport the host has already closed.
    """
    kind: EventKind
    viewport: ViewportHandle | None = None


# Default key bindings on the body viewport
DEFAULT_KEYMAP: dict[str, EventKind] = {
    'n': EventKind.NEXT_SLIDE,
    'p': EventKind.PREV_SLIDE,
    'q': EventKind.QUIT,
}


class PresentationSession:
    """Owns the active deck, the viewports and the current slide.

    All host callbacks (key bindings, resize and exit observers) are routed
    through dispatch(), so handlers can be driven directly with Events.
    """

    def __init__(
        self,
        host: Host,
        settings: DisplaySettingsManager,
        keymap: Mapping[str, EventKind] | None = None,
    ):
        """Initialize an idle session.

        Args:
            host: Host providing viewports, options and notifications.
            settings: Display settings manager holding the captured snapshot.
            keymap: Key to event mapping bound on the body viewport.
        """
        self.host = host
        self.settings = settings
        self.keymap = dict(keymap) if keymap is not None else dict(DEFAULT_KEYMAP)
        self.current_slide = 1
        self.deck: Deck | None = None
        self.viewports: dict[str, ViewportHandle] = {}
        self._handlers: dict[EventKind, Callable[[Event], None]] = {
            EventKind.NEXT_SLIDE: lambda event: self.next_slide(),
            EventKind.PREV_SLIDE: lambda event: self.prev_slide(),
            EventKind.QUIT: lambda event: self.quit(),
            EventKind.RESIZE: lambda event: self.on_resize(),
            EventKind.EXIT: lambda event: self.on_exit(closed=event.viewport),
        }

    @property
    def state(self) -> SessionState:
        return SessionState.ACTIVE if self.deck is not None else SessionState.IDLE

    @property
    def is_active(self) -> bool:
        return self.deck is not None

    def dispatch(self, event: Event) -> None:
        """Run the handler registered for an event's kind."""
        logger.debug(f"Dispatching {event.kind.value} (state={self.state.value})")
        self._handlers[event.kind](event)

    def _callback(self, kind: EventKind, viewport: ViewportHandle | None = None) -> Callable[[], None]:
        def callback():
            self.dispatch(Event(kind, viewport))
        return callback

    # === Lifecycle ===

    def start(self, lines: Sequence[str], filetype: str = DEFAULT_FILETYPE) -> None:
        """Start presenting the given document lines.

        Args:
            lines: Source document lines.
            filetype: Content kind declared on every viewport.

        Raises:
            SessionAlreadyActiveError: If a session is already running.
            EmptyPresentationError: If the lines contain no slides.
            SetupFailure: If a viewport cannot be opened or wired up. Any
                viewport already opened is closed and the display settings
                are restored before it is raised.
        """
        if self.is_active:
            raise SessionAlreadyActiveError("A presentation is already running")

        deck = parse_slides(lines)
        if not deck.slides:
            raise EmptyPresentationError("Nothing to present: the document has no slides")

        size = self.host.get_terminal_size()
        layout = plan_layout(size.width, size.height)

        viewports: dict[str, ViewportHandle] = {}
        settings_applied = False
        step = 'open viewports'
        try:
            for name, region in layout.items():
                viewports[name] = self.host.create_viewport(region)
                self.host.set_viewport_filetype(viewports[name], filetype)

            step = 'apply display settings'
            self.settings.apply_presentation_values()
            settings_applied = True

            step = 'bind the body viewport'
            body = viewports['body']
            self.host.focus_viewport(body)
            self.host.register_exit_observer(body, self._callback(EventKind.EXIT, body))
            for key, kind in self.keymap.items():
                self.host.register_keybinding(body, key, self._callback(kind))
        except ViewportError as e:
            logger.error(f"Failed to {step}: {e}")
            self._destroy_viewports(viewports)
            if settings_applied:
                self.settings.restore_original_values()
            raise SetupFailure(f"Could not {step}: {e}") from e

        self.viewports = viewports
        self.deck = deck
        self.current_slide = 1

        logger.info(f"Presentation started: {len(deck)} slides")
        self._set_slide(self.current_slide)

    def quit(self) -> None:
        """Close the body viewport; the exit observer finishes teardown."""
        if not self.is_active:
            return
        try:
            self.host.destroy_viewport(self.viewports['body'])
        except ViewportError as e:
            logger.debug(f"Ignoring failure closing body viewport: {e}")

    def on_exit(self, closed: ViewportHandle | None = None) -> None:
        """Tear the session down and restore the display settings.

        Every viewport is closed even when some fail to close. Runs at most
        once per session.

        Args:
            closed: Viewport the host already closed; it is not closed again.
        """
        if not self.is_active:
            return

        viewports = {name: handle for name, handle in self.viewports.items() if handle != closed}
        self.viewports = {}
        self.deck = None
        self.current_slide = 1

        failures = self._destroy_viewports(viewports)
        if failures:
            logger.debug(f"Ignored {len(failures)} viewport close failure(s): {failures}")

        self.settings.restore_original_values()
        logger.info("Presentation ended")

    def _destroy_viewports(self, viewports: Mapping[str, ViewportHandle]) -> dict[str, ViewportError]:
        failures: dict[str, ViewportError] = {}
        for name, handle in viewports.items():
            try:
                self.host.destroy_viewport(handle)
            except ViewportError as e:
                failures[name] = e
        return failures

    # === Navigation ===

    def next_slide(self) -> None:
        if not self.is_active or self.current_slide == len(self.deck):
            return
        self.current_slide += 1
        self._set_slide(self.current_slide)

    def prev_slide(self) -> None:
        if not self.is_active or self.current_slide == 1:
            return
        self.current_slide -= 1
        self._set_slide(self.current_slide)

    def on_resize(self) -> None:
        """Re-plan the viewports for the new terminal size."""
        if not self.is_active:
            return

        size = self.host.get_terminal_size()
        layout = plan_layout(size.width, size.height)
        for name, region in layout.items():
            self.host.set_viewport_region(self.viewports[name], region)

        self._set_header(self.deck.slide(self.current_slide).title)
        self._set_footer(self.current_slide)

    # === Rendering ===

    def _set_header(self, title: str | None) -> None:
        width = self.host.get_terminal_size().width
        self.host.set_viewport_content(self.viewports['header'], [center_title(title, width)])

    def _set_footer(self, index: int) -> None:
        self.host.set_viewport_content(
            self.viewports['footer'],
            [format_footer(index, len(self.deck))],
        )

    def _set_slide(self, index: int) -> None:
        slide = self.deck.slide(index)
        self._set_header(slide.title)
        self._set_footer(index)
        self.host.set_viewport_content(self.viewports['body'], list(slide.content))
        logger.debug(f"Showing slide {index}/{len(self.deck)}")


def center_title(title: str | None, width: int) -> str:
    """Left-pad a title so it sits centered in the given width."""
    title = title or ''
    return ' ' * ((width - len(title)) // 2) + title


def format_footer(index: int, total: int) -> str:
    return f"{index}/{total}"
