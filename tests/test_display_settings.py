"""Tests for presentation display settings."""

from __future__ import annotations

import pytest

from mdpresent.display_settings import (
    PRESENTATION_SETTINGS,
    DisplaySettings,
    DisplaySettingsManager,
    capture_display_settings,
)

from conftest import ORIGINAL_OPTIONS


def test_option_names_are_closed_set():
    assert DisplaySettings.option_names() == (
        'cmdheight', 'guicursor', 'wrap', 'breakindent', 'breakindentopt',
    )


def test_presentation_values():
    assert PRESENTATION_SETTINGS.cmdheight == 0
    assert PRESENTATION_SETTINGS.wrap is True
    assert PRESENTATION_SETTINGS.breakindent is True
    assert PRESENTATION_SETTINGS.breakindentopt == 'list:-1'


def test_capture_reads_live_values(host):
    snapshot = capture_display_settings(host)

    assert snapshot.original.as_dict() == ORIGINAL_OPTIONS
    assert snapshot.present == PRESENTATION_SETTINGS


def test_capture_with_overrides(host):
    snapshot = capture_display_settings(host, {'cmdheight': 1, 'guicursor': 'line'})

    assert snapshot.present.cmdheight == 1
    assert snapshot.present.guicursor == 'line'
    assert snapshot.present.wrap is True


def test_unknown_override_rejected(host):
    with pytest.raises(ValueError, match="linebreak"):
        capture_display_settings(host, {'linebreak': True})


def test_apply_then_restore(host):
    manager = DisplaySettingsManager(host, capture_display_settings(host))

    manager.apply_presentation_values()
    assert host.options == PRESENTATION_SETTINGS.as_dict()

    manager.restore_original_values()
    assert host.options == ORIGINAL_OPTIONS


def test_restore_twice_is_safe(host):
    manager = DisplaySettingsManager(host, capture_display_settings(host))
    manager.apply_presentation_values()

    manager.restore_original_values()
    manager.restore_original_values()

    assert host.options == ORIGINAL_OPTIONS


def test_snapshot_is_not_affected_by_later_changes(host):
    manager = DisplaySettingsManager(host, capture_display_settings(host))
    host.set_option('cmdheight', 7)

    manager.restore_original_values()

    assert host.get_option('cmdheight') == ORIGINAL_OPTIONS['cmdheight']
