"""Curses terminal host.

Each viewport is a curses window placed over the terminal; windows are
painted in stacking order so higher ones cover lower ones. The host runs a
key loop until every viewport has been closed.

Keys:
    bound keys   dispatched to the focused viewport's bindings
    Esc          closes the focused viewport (like leaving the window)
    resize       terminal size change, delivered to resize observers
"""

from __future__ import annotations

import curses
import itertools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from .display_settings import DisplaySettings
from .host import Callback, Host, TerminalSize, ViewportError, ViewportHandle
from .layout import Region
from .markdown_parser import read_markdown_lines
from .rendering import wrap_lines

logger = logging.getLogger(__name__)

ESCAPE = 27

# guicursor values understood by the terminal host
CURSOR_VISIBILITY = {
    'hidden': 0,
    'line': 1,
    'block': 2,
}


@dataclass
class _Window:
    handle: ViewportHandle
    region: Region
    window: Any
    lines: list[str] = field(default_factory=list)
    filetype: str = ''
    exit_observers: list[Callback] = field(default_factory=list)
    keybindings: dict[str, Callback] = field(default_factory=dict)


def clamp_region(region: Region, rows: int, cols: int) -> tuple[int, int, int, int]:
    """Fit a region (plus its border, if any) on a rows x cols screen.

    Returns:
        (height, width, y, x) suitable for curses.newwin.
    """
    pad = 1 if region.border else 0
    y = min(max(region.y, 0), max(rows - 1, 0))
    x = min(max(region.x, 0), max(cols - 1, 0))
    height = min(max(region.height, 1) + 2 * pad, rows - y)
    width = min(max(region.width, 1) + 2 * pad, cols - x)
    return max(height, 1), max(width, 1), y, x


class CursesHost(Host):
    """Host drawing viewports as curses windows."""

    def __init__(
        self,
        stdscr,
        current_document: str | Path | None = None,
        options: Mapping[str, Any] | None = None,
    ):
        """Initialize the host on a curses screen.

        Args:
            stdscr: Screen returned by curses.initscr() or curses.wrapper().
            current_document: Path read when no document is named.
            options: Initial display option values.
        """
        self.stdscr = stdscr
        self.stdscr.keypad(True)
        self.current_document = current_document
        self.options: dict[str, Any] = DisplaySettings().as_dict()
        self.options.update(options or {})
        self.message = ''
        self.focused: ViewportHandle | None = None
        self.resize_observers: list[Callback] = []
        self.commands: dict[str, Callable[..., None]] = {}
        self._windows: dict[int, _Window] = {}
        self._ids = itertools.count(1)
        self._apply_cursor()

    def _window(self, handle: ViewportHandle) -> _Window:
        win = self._windows.get(handle.win)
        if win is None:
            raise ViewportError(f"Invalid window id: {handle.win}")
        return win

    def _new_window(self, region: Region):
        rows, cols = self.stdscr.getmaxyx()
        height, width, y, x = clamp_region(region, rows, cols)
        try:
            return curses.newwin(height, width, y, x)
        except curses.error as e:
            raise ViewportError(f"Cannot open {width}x{height} window at ({x}, {y}): {e}") from e

    def _apply_cursor(self) -> None:
        visibility = CURSOR_VISIBILITY.get(str(self.options.get('guicursor')), 1)
        try:
            curses.curs_set(visibility)
        except curses.error:
            logger.debug(f"Terminal does not support cursor visibility {visibility}")

    # === Host interface ===

    def create_viewport(self, region: Region) -> ViewportHandle:
        handle = ViewportHandle(win=next(self._ids), buf=next(self._ids))
        self._windows[handle.win] = _Window(handle=handle, region=region, window=self._new_window(region))
        return handle

    def destroy_viewport(self, handle: ViewportHandle) -> None:
        win = self._window(handle)
        del self._windows[handle.win]
        if self.focused == handle:
            self.focused = None
        for callback in win.exit_observers:
            callback()

    def set_viewport_content(self, handle: ViewportHandle, lines: Sequence[str]) -> None:
        self._window(handle).lines = list(lines)

    def set_viewport_region(self, handle: ViewportHandle, region: Region) -> None:
        win = self._window(handle)
        win.window = self._new_window(region)
        win.region = region

    def set_viewport_filetype(self, handle: ViewportHandle, filetype: str) -> None:
        self._window(handle).filetype = filetype

    def focus_viewport(self, handle: ViewportHandle) -> None:
        self._window(handle)
        self.focused = handle

    def get_terminal_size(self) -> TerminalSize:
        rows, cols = self.stdscr.getmaxyx()
        return TerminalSize(width=cols, height=rows)

    def register_exit_observer(self, handle: ViewportHandle, callback: Callback) -> None:
        self._window(handle).exit_observers.append(callback)

    def register_resize_observer(self, callback: Callback) -> None:
        self.resize_observers.append(callback)

    def register_keybinding(self, handle: ViewportHandle, key: str, callback: Callback) -> None:
        self._window(handle).keybindings[key] = callback

    def read_source_lines(self, document: Any = None) -> list[str]:
        path = document if document is not None else self.current_document
        if path is None:
            raise FileNotFoundError("No document to present")
        return read_markdown_lines(path)

    def get_option(self, name: str) -> Any:
        return self.options[name]

    def set_option(self, name: str, value: Any) -> None:
        self.options[name] = value
        if name == 'guicursor':
            self._apply_cursor()

    def register_command(self, name: str, callback: Callable[..., None]) -> None:
        self.commands[name] = callback

    def run_command(self, name: str, *args: Any) -> None:
        if name not in self.commands:
            raise KeyError(f"Unknown command: {name}")
        self.commands[name](*args)

    # === Drawing ===

    def _draw_window(self, win: _Window) -> None:
        window = win.window
        window.erase()
        height, width = window.getmaxyx()
        top = left = 0
        if win.region.border and height >= 3 and width >= 3:
            window.box()
            top = left = 1
            height -= 2
            width -= 2

        rows = wrap_lines(
            win.lines,
            width,
            wrap=bool(self.options.get('wrap')),
            breakindent=bool(self.options.get('breakindent')),
            breakindentopt=str(self.options.get('breakindentopt', '')),
        )
        for i, row in enumerate(rows[:height]):
            try:
                window.addstr(top + i, left, row)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off-screen
                pass
        window.noutrefresh()

    def _draw_message(self) -> None:
        cmdheight = int(self.options.get('cmdheight') or 0)
        if cmdheight <= 0 or not self.message:
            return
        rows, cols = self.stdscr.getmaxyx()
        try:
            self.stdscr.addstr(max(rows - cmdheight, 0), 0, self.message[:max(cols - 1, 0)])
        except curses.error:
            pass

    def redraw(self) -> None:
        self.stdscr.erase()
        self._draw_message()
        self.stdscr.noutrefresh()
        for win in sorted(self._windows.values(), key=lambda w: w.region.zindex):
            self._draw_window(win)
        curses.doupdate()

    # === Event loop ===

    def close_focused(self) -> None:
        if self.focused is not None:
            self.destroy_viewport(self.focused)

    def handle_key(self, key: int) -> None:
        if key == curses.KEY_RESIZE:
            curses.update_lines_cols()
            for callback in list(self.resize_observers):
                callback()
            return
        if key == ESCAPE:
            self.close_focused()
            return
        if self.focused is None or not 0 <= key < 0x110000:
            return
        callback = self._window(self.focused).keybindings.get(chr(key))
        if callback is not None:
            callback()

    def run(self) -> None:
        """Process keys until every viewport is closed."""
        while self._windows:
            self.redraw()
            self.handle_key(self.stdscr.getch())
        logger.debug("All viewports closed, leaving key loop")
