"""Shared fixtures for the presenter tests."""

from __future__ import annotations

import pytest

from mdpresent.commands import setup
from mdpresent.memory_host import InMemoryHost

ORIGINAL_OPTIONS = {
    'cmdheight': 2,
    'guicursor': 'block',
    'wrap': False,
    'breakindent': False,
    'breakindentopt': 'shift:2',
}

DOCUMENT = [
    '# Intro',
    'hello',
    '# Middle',
    'one',
    'two',
    '# End',
]


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost(width=80, height=24, options=ORIGINAL_OPTIONS, documents={'current': DOCUMENT})


@pytest.fixture
def session(host):
    return setup(host)
