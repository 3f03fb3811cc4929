"""Per-tick saturation sampling for the render effect."""

import math
import random


def sample(saturation_range, rng=random) -> int:
    """Draw a saturation uniformly from the stored bounds, inclusive.

    An inverted range (max < min) is sampled between max and min.

    Args:
        saturation_range: Store providing get_min() and get_max()
        rng: Object with a random() method returning floats in [0, 1)

    Returns:
        Saturation in [min, max] (or [max, min] when inverted)
    """
    lo = saturation_range.get_min()
    hi = saturation_range.get_max()
    if hi < lo:
        lo, hi = hi, lo
    return lo + math.floor(rng.random() * (hi - lo + 1))


class SaturationSampler:
    """Samples saturation values from a range using its own random generator."""

    def __init__(self, saturation_range, seed: int | None = None):
        self.saturation_range = saturation_range
        self.rng = random.Random(seed)

    def sample(self) -> int:
        return sample(self.saturation_range, self.rng)
