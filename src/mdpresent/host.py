"""Host collaborator interface.

The presentation core never touches a terminal or window system directly.
Everything it needs from its environment goes through a Host: creating and
destroying viewports, writing their content, focus, key bindings, resize
and exit notification, display options and access to the source document.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .layout import Region

Callback = Callable[[], None]


class ViewportError(Exception):
    """Raised by a host when a viewport operation fails."""


@dataclass(frozen=True)
class ViewportHandle:
    """Opaque reference to a host viewport.

    Attributes:
        win: Window identifier.
        buf: Identifier of the buffer the window displays.
    """
    win: int
    buf: int


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions in character cells."""
    width: int
    height: int


class Host(ABC):
    """Services a presentation session consumes from its environment."""

    @abstractmethod
    def create_viewport(self, region: Region) -> ViewportHandle:
        """Open a viewport over a fresh scratch buffer.

        Raises:
            ViewportError: If the viewport cannot be created.
        """

    @abstractmethod
    def destroy_viewport(self, handle: ViewportHandle) -> None:
        """Close a viewport, firing its exit observers.

        Raises:
            ViewportError: If the viewport is unknown or already closed.
        """

    @abstractmethod
    def set_viewport_content(self, handle: ViewportHandle, lines: Sequence[str]) -> None:
        """Replace all lines displayed by a viewport."""

    @abstractmethod
    def set_viewport_region(self, handle: ViewportHandle, region: Region) -> None:
        """Move and resize a viewport."""

    @abstractmethod
    def set_viewport_filetype(self, handle: ViewportHandle, filetype: str) -> None:
        """Declare the content kind shown by a viewport."""

    @abstractmethod
    def focus_viewport(self, handle: ViewportHandle) -> None:
        """Make a viewport the target of key presses."""

    @abstractmethod
    def get_terminal_size(self) -> TerminalSize:
        """Return the current terminal dimensions."""

    @abstractmethod
    def register_exit_observer(self, handle: ViewportHandle, callback: Callback) -> None:
        """Call callback once when the user leaves or closes the viewport."""

    @abstractmethod
    def register_resize_observer(self, callback: Callback) -> None:
        """Call callback on every terminal resize."""

    @abstractmethod
    def register_keybinding(self, handle: ViewportHandle, key: str, callback: Callback) -> None:
        """Bind a key while the given viewport has focus."""

    @abstractmethod
    def read_source_lines(self, document: Any = None) -> list[str]:
        """Return the lines of a document, or of the current one if None."""

    @abstractmethod
    def get_option(self, name: str) -> Any:
        """Return the live value of a display option."""

    @abstractmethod
    def set_option(self, name: str, value: Any) -> None:
        """Set the live value of a display option."""

    @abstractmethod
    def register_command(self, name: str, callback: Callable[..., None]) -> None:
        """Expose a named command to the user."""
