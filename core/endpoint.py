"""Saturation update handling for the set_saturation endpoint."""

from core.config import SaturationStore
from models.types import SaturationBounds


def apply_saturation_update(saturation_range: SaturationStore, raw_min=None, raw_max=None) -> SaturationBounds:
    """Apply raw min/max query values to the saturation range.

    Each present value is clamped and stored, raising the regeneration flag.
    An absent value (None) leaves that bound unchanged.

    Args:
        saturation_range: Store to update
        raw_min: Raw 'min' parameter, or None when absent
        raw_max: Raw 'max' parameter, or None when absent

    Returns:
        The stored (clamped) bounds, which may differ from the submitted values
    """
    if raw_min is not None:
        saturation_range.set_min(raw_min)
    if raw_max is not None:
        saturation_range.set_max(raw_max)

    return {'min': saturation_range.get_min(), 'max': saturation_range.get_max()}
