"""In-memory host.

Keeps viewports, options and observers in plain Python objects. The web
viewer drives presentations through it, and the test suite uses it to
observe every call a session makes.
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from .display_settings import DisplaySettings
from .host import Callback, Host, TerminalSize, ViewportError, ViewportHandle
from .layout import Region
from .rendering import compose_screen

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = 'current'


@dataclass
class Viewport:
    """State the host keeps for one open viewport."""
    handle: ViewportHandle
    region: Region
    lines: list[str] = field(default_factory=list)
    filetype: str = ''
    exit_observers: list[Callback] = field(default_factory=list)
    keybindings: dict[str, Callback] = field(default_factory=dict)


class InMemoryHost(Host):
    """Host whose screen, documents and options live in memory."""

    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        options: Mapping[str, Any] | None = None,
        documents: Mapping[str, Sequence[str]] | None = None,
    ):
        """Initialize the host.

        Args:
            width: Initial terminal width.
            height: Initial terminal height.
            options: Initial display option values.
            documents: Named documents available to read_source_lines.
        """
        self.size = TerminalSize(width, height)
        self.options: dict[str, Any] = DisplaySettings().as_dict()
        self.options.update(options or {})
        self.documents: dict[str, list[str]] = {
            name: list(lines) for name, lines in (documents or {}).items()
        }
        self.current_document = DEFAULT_DOCUMENT
        self.viewports: dict[int, Viewport] = {}
        self.focused: ViewportHandle | None = None
        self.resize_observers: list[Callback] = []
        self.commands: dict[str, Callable[..., None]] = {}
        self._ids = itertools.count(1)

    def _viewport(self, handle: ViewportHandle) -> Viewport:
        viewport = self.viewports.get(handle.win)
        if viewport is None:
            raise ViewportError(f"Invalid window id: {handle.win}")
        return viewport

    # === Host interface ===

    def create_viewport(self, region: Region) -> ViewportHandle:
        handle = ViewportHandle(win=next(self._ids), buf=next(self._ids))
        self.viewports[handle.win] = Viewport(handle=handle, region=region)
        logger.debug(f"Created viewport {handle.win} at {region}")
        return handle

    def destroy_viewport(self, handle: ViewportHandle) -> None:
        viewport = self._viewport(handle)
        del self.viewports[handle.win]
        if self.focused == handle:
            self.focused = None
        logger.debug(f"Destroyed viewport {handle.win}")
        for callback in viewport.exit_observers:
            callback()

    def set_viewport_content(self, handle: ViewportHandle, lines: Sequence[str]) -> None:
        self._viewport(handle).lines = list(lines)

    def set_viewport_region(self, handle: ViewportHandle, region: Region) -> None:
        self._viewport(handle).region = region

    def set_viewport_filetype(self, handle: ViewportHandle, filetype: str) -> None:
        self._viewport(handle).filetype = filetype

    def focus_viewport(self, handle: ViewportHandle) -> None:
        self._viewport(handle)
        self.focused = handle

    def get_terminal_size(self) -> TerminalSize:
        return self.size

    def register_exit_observer(self, handle: ViewportHandle, callback: Callback) -> None:
        self._viewport(handle).exit_observers.append(callback)

    def register_resize_observer(self, callback: Callback) -> None:
        self.resize_observers.append(callback)

    def register_keybinding(self, handle: ViewportHandle, key: str, callback: Callback) -> None:
        self._viewport(handle).keybindings[key] = callback

    def read_source_lines(self, document: Any = None) -> list[str]:
        name = self.current_document if document is None else document
        if name not in self.documents:
            raise FileNotFoundError(f"Document not found: {name}")
        return list(self.documents[name])

    def get_option(self, name: str) -> Any:
        return self.options[name]

    def set_option(self, name: str, value: Any) -> None:
        self.options[name] = value

    def register_command(self, name: str, callback: Callable[..., None]) -> None:
        self.commands[name] = callback

    # === User actions ===

    def load_document(self, lines: Sequence[str], name: str = DEFAULT_DOCUMENT) -> None:
        """Store a document and make it the current one."""
        self.documents[name] = list(lines)
        self.current_document = name

    def run_command(self, name: str, *args: Any) -> None:
        if name not in self.commands:
            raise KeyError(f"Unknown command: {name}")
        self.commands[name](*args)

    def press(self, key: str) -> bool:
        """Deliver a key press to the focused viewport.

        Returns:
            True if a binding handled the key.
        """
        if self.focused is None or self.focused.win not in self.viewports:
            return False
        callback = self.viewports[self.focused.win].keybindings.get(key)
        if callback is None:
            return False
        callback()
        return True

    def close_focused(self) -> None:
        """Close the focused viewport, as a user leaving the window would."""
        if self.focused is not None:
            self.destroy_viewport(self.focused)

    def resize(self, width: int, height: int) -> None:
        """Change the terminal size and notify resize observers."""
        self.size = TerminalSize(width, height)
        for callback in list(self.resize_observers):
            callback()

    # === Inspection ===

    def lines_of(self, handle: ViewportHandle) -> list[str]:
        return list(self._viewport(handle).lines)

    def region_of(self, handle: ViewportHandle) -> Region:
        return self._viewport(handle).region

    def screen(self) -> list[str]:
        """Compose every open viewport into rows of text."""
        return compose_screen(
            self.size.width,
            self.size.height,
            [(vp.region, vp.lines) for vp in self.viewports.values()],
            wrap=bool(self.options.get('wrap')),
            breakindent=bool(self.options.get('breakindent')),
            breakindentopt=str(self.options.get('breakindentopt', '')),
        )
