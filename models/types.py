"""Type definitions for Saturation Control.

This module provides TypedDict definitions for structured data types used across
the application, improving type safety and IDE autocompletion.
"""

from typing import TypedDict


class RGBColour(TypedDict):
    """Displayable colour, each channel in 0-255."""
    r: int
    g: int
    b: int


class SaturationBounds(TypedDict):
    """Stored saturation bounds as returned by the set_saturation endpoint."""
    min: int
    max: int


class ConfigSnapshot(TypedDict):
    """Current range state as exposed by the config endpoint."""
    min: int
    max: int
    needs_regeneration: bool


class Settings(TypedDict):
    """CLI settings loaded from the user config file."""
    device_url: str
    host: str
    port: int
