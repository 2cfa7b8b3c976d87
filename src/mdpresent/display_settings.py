"""Display option management for presentation mode.

A fixed set of host display options is switched to presentation values
while a session runs and switched back afterwards. The original values are
captured once, when the presenter is set up, and reused for every session.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from .host import Host

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplaySettings:
    """Values for every display option the presenter manages.

    Attributes:
        cmdheight: Rows reserved for the command/status line.
        guicursor: Text-cursor style.
        wrap: Whether long lines are soft-wrapped.
        breakindent: Whether wrapped continuation lines keep the indent.
        breakindentopt: Continuation indent options (e.g. "list:-1").
    """
    cmdheight: int = 1
    guicursor: str = 'block'
    wrap: bool = False
    breakindent: bool = False
    breakindentopt: str = ''

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], base: "DisplaySettings | None" = None) -> "DisplaySettings":
        """Build settings from a mapping, filling gaps from base.

        Raises:
            ValueError: If the mapping names an unknown option.
        """
        unknown = sorted(set(values) - set(cls.option_names()))
        if unknown:
            raise ValueError(
                f"Unknown display option(s): {', '.join(unknown)}. "
                f"Available options: {', '.join(cls.option_names())}"
            )
        return replace(base or cls(), **dict(values))

    def as_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.option_names()}


PRESENTATION_SETTINGS = DisplaySettings(
    cmdheight=0,
    guicursor='hidden',
    wrap=True,
    breakindent=True,
    breakindentopt='list:-1',
)


@dataclass(frozen=True)
class SettingsSnapshot:
    """Original and presentation values for the managed options."""
    original: DisplaySettings
    present: DisplaySettings


def capture_display_settings(
    host: Host,
    present: Mapping[str, Any] | None = None,
) -> SettingsSnapshot:
    """Read the live option values from the host.

    Args:
        host: Host whose options are captured.
        present: Optional overrides for the presentation values.

    Returns:
        SettingsSnapshot pairing live values with presentation values.
    """
    original = DisplaySettings(**{
        name: host.get_option(name) for name in DisplaySettings.option_names()
    })
    present_settings = DisplaySettings.from_mapping(present or {}, PRESENTATION_SETTINGS)
    logger.debug(f"Captured display settings: {original.as_dict()}")
    return SettingsSnapshot(original=original, present=present_settings)


class DisplaySettingsManager:
    """Applies and restores the managed display options on a host."""

    def __init__(self, host: Host, snapshot: SettingsSnapshot):
        self.host = host
        self.snapshot = snapshot

    def _apply(self, settings: DisplaySettings) -> None:
        for name, value in settings.as_dict().items():
            self.host.set_option(name, value)

    def apply_presentation_values(self) -> None:
        """Switch every managed option to its presentation value."""
        self._apply(self.snapshot.present)
        logger.debug("Applied presentation display settings")

    def restore_original_values(self) -> None:
        """Switch every managed option back to its captured value.

        Safe to call more than once.
        """
        self._apply(self.snapshot.original)
        logger.debug("Restored original display settings")
