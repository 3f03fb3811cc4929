"""Configuration management.

This module handles:
- SaturationRange: the in-memory saturation bounds and regeneration flag
- Loading/saving CLI settings (device URL, server host and port)

The saturation range lives for the lifetime of the process only. It is
constructed once by the caller and passed to the endpoint and the effect.
"""

import json
import threading
from pathlib import Path
from typing import Protocol

import click

from models.types import ConfigSnapshot, Settings
from models.validation import clamp

# Configuration file paths
USER_CONFIG_FILE = Path.home() / '.saturation_control' / 'config.json'

DEFAULT_SAT_MIN = 128
DEFAULT_SAT_MAX = 255

DEFAULT_SETTINGS: Settings = {
    'device_url': 'http://127.0.0.1:8080',
    'host': '0.0.0.0',
    'port': 8080,
}


class SaturationStore(Protocol):
    """Operations the endpoint and effect need from a saturation store."""

    def get_min(self) -> int: ...

    def get_max(self) -> int: ...

    def set_min(self, raw) -> int: ...

    def set_max(self, raw) -> int: ...

    def needs_regeneration(self) -> bool: ...

    def clear_regeneration_flag(self) -> None: ...


class SaturationRange:
    """Saturation bounds shared between the config endpoint and the render loop.

    Both bounds are always in [0, 255]. No ordering is enforced between them,
    so min may be greater than max.
    """

    def __init__(self, sat_min: int = DEFAULT_SAT_MIN, sat_max: int = DEFAULT_SAT_MAX):
        """Initialise SaturationRange.

        Args:
            sat_min: Initial minimum saturation (clamped)
            sat_max: Initial maximum saturation (clamped)
        """
        self._lock = threading.Lock()
        self._min = clamp(sat_min)
        self._max = clamp(sat_max)
        self._needs_regeneration = False

    def get_min(self) -> int:
        with self._lock:
            return self._min

    def get_max(self) -> int:
        with self._lock:
            return self._max

    def set_min(self, raw) -> int:
        """Store a clamped minimum saturation and flag the effect for regeneration.

        The flag is raised even when the stored value does not change.

        Returns:
            The stored (clamped) value
        """
        value = clamp(raw)
        with self._lock:
            self._min = value
            self._needs_regeneration = True
        return value

    def set_max(self, raw) -> int:
        """Store a clamped maximum saturation and flag the effect for regeneration.

        Returns:
            The stored (clamped) value
        """
        value = clamp(raw)
        with self._lock:
            self._max = value
            self._needs_regeneration = True
        return value

    def needs_regeneration(self) -> bool:
        with self._lock:
            return self._needs_regeneration

    def clear_regeneration_flag(self) -> None:
        with self._lock:
            self._needs_regeneration = False

    def snapshot(self) -> ConfigSnapshot:
        """Read min, max and the flag together."""
        with self._lock:
            return {
                'min': self._min,
                'max': self._max,
                'needs_regeneration': self._needs_regeneration,
            }

    def __repr__(self) -> str:
        state = self.snapshot()
        return (f"SaturationRange(min={state['min']}, max={state['max']}, "
                f"needs_regeneration={state['needs_regeneration']})")


def load_settings() -> Settings:
    """Load CLI settings from the user config file.

    Returns:
        Settings dict; defaults are used for missing keys or a missing file
    """
    settings = dict(DEFAULT_SETTINGS)
    if USER_CONFIG_FILE.exists():
        try:
            with open(USER_CONFIG_FILE, 'r') as f:
                settings.update(json.load(f))
        except json.JSONDecodeError:
            click.echo(f"Warning: Ignoring invalid settings file {USER_CONFIG_FILE}", err=True)
    return settings


def save_settings(settings: Settings):
    """Save CLI settings to the user config file.

    Args:
        settings: Settings dict to save
    """
    # Create config directory if it doesn't exist
    USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    with open(USER_CONFIG_FILE, 'w') as f:
        json.dump(settings, f, indent=2)
