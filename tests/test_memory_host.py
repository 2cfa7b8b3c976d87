"""Tests for the in-memory host."""

from __future__ import annotations

import pytest

from mdpresent.host import TerminalSize, ViewportError, ViewportHandle
from mdpresent.layout import Region
from mdpresent.memory_host import InMemoryHost

REGION = Region(x=0, y=0, width=5, height=1, zindex=1)


def test_handles_are_unique():
    host = InMemoryHost()

    first = host.create_viewport(REGION)
    second = host.create_viewport(REGION)

    assert first != second
    assert first.win != first.buf


def test_unknown_handle_raises():
    host = InMemoryHost()

    with pytest.raises(ViewportError):
        host.set_viewport_content(ViewportHandle(win=99, buf=100), ['x'])


def test_destroy_twice_raises():
    host = InMemoryHost()
    handle = host.create_viewport(REGION)
    host.destroy_viewport(handle)

    with pytest.raises(ViewportError):
        host.destroy_viewport(handle)


def test_exit_observers_fire_once_on_destroy():
    host = InMemoryHost()
    handle = host.create_viewport(REGION)
    calls = []
    host.register_exit_observer(handle, lambda: calls.append('exit'))

    host.destroy_viewport(handle)

    assert calls == ['exit']
    assert host.focused is None


def test_press_without_focus():
    host = InMemoryHost()

    assert host.press('n') is False


def test_resize_notifies_observers():
    host = InMemoryHost(width=80, height=24)
    sizes = []
    host.register_resize_observer(lambda: sizes.append(host.get_terminal_size()))

    host.resize(100, 30)

    assert sizes == [TerminalSize(100, 30)]


def test_documents():
    host = InMemoryHost(documents={'notes': ['# A']})

    assert host.read_source_lines('notes') == ['# A']
    with pytest.raises(FileNotFoundError):
        host.read_source_lines()

    host.load_document(['# B'])
    assert host.read_source_lines() == ['# B']


def test_unknown_command():
    with pytest.raises(KeyError):
        InMemoryHost().run_command('Nope')


def test_screen_composes_viewports():
    host = InMemoryHost(width=5, height=2)
    top = host.create_viewport(Region(x=0, y=1, width=5, height=1, zindex=2))
    host.set_viewport_content(top, ['hi'])

    assert host.screen() == ['     ', 'hi   ']
