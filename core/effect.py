"""Saturation effect render loop.

The effect holds a read-only reference to the SaturationRange. On each tick
it checks the regeneration flag; when raised, it rebuilds the LED frame from
freshly sampled saturations and clears the flag.
"""

import threading

from core.config import SaturationStore
from core.sampler import SaturationSampler
from models.colour import colour_for_saturation
from models.types import RGBColour

DEFAULT_NUM_LEDS = 60
DEFAULT_HUE = 160
DEFAULT_VALUE = 255
DEFAULT_TICK_INTERVAL = 0.01  # seconds


class SaturationEffect:
    """Renders one colour per LED with a randomised saturation."""

    def __init__(self, saturation_range: SaturationStore, num_leds: int = DEFAULT_NUM_LEDS,
                 hue: int = DEFAULT_HUE, value: int = DEFAULT_VALUE,
                 sampler: SaturationSampler | None = None):
        """Initialise SaturationEffect.

        Args:
            saturation_range: Store with the saturation bounds (never written here
                except to clear the regeneration flag)
            num_leds: Number of LEDs in a frame
            hue: Hue in the 0-255 device space
            value: Brightness in 0-255
            sampler: Saturation sampler (defaults to one bound to saturation_range)
        """
        self.saturation_range = saturation_range
        self.num_leds = num_leds
        self.hue = hue
        self.value = value
        self.sampler = sampler or SaturationSampler(saturation_range)
        self.frame: list[RGBColour] = []
        self.frames_rendered = 0

    def regenerate(self) -> list[RGBColour]:
        """Rebuild the frame from the current bounds."""
        self.frame = [
            colour_for_saturation(self.hue, self.sampler.sample(), self.value)
            for _ in range(self.num_leds)
        ]
        self.frames_rendered += 1
        return self.frame

    def update(self) -> list[RGBColour]:
        """Run one render tick and return the current frame.

        The flag is cleared before the bounds are read, so a write that lands
        while the frame is being built stays flagged for the next tick.
        """
        if not self.frame or self.saturation_range.needs_regeneration():
            self.saturation_range.clear_regeneration_flag()
            self.regenerate()
        return self.frame

    def run(self, stop_event: threading.Event, interval: float = DEFAULT_TICK_INTERVAL):
        """Tick until stop_event is set."""
        while not stop_event.is_set():
            self.update()
            stop_event.wait(interval)
