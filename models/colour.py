"""Colour conversion and gradient preview helpers.

This module contains the pure colour functions shared by the render loop
and the preview:
- hsv_to_rgb: Device HSV (hue 0-255, saturation/value in percent) to RGB
- colour_for_saturation: 0-255 saturation/value adapter around hsv_to_rgb
- generate_saturation_gradient: Linear saturation samples across a width
- gradient_swatches: Gradient samples converted to displayable colours
- format_slider_value: Display text for a slider value
"""

import math

from models.types import RGBColour
from models.validation import clamp

# Hue used when previewing a saturation gradient (blue in the 0-255 hue space)
DEFAULT_PREVIEW_HUE = 160


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up.

    Matches the device UI rounding, so 127.5 becomes 128 and 0.5 becomes 1.
    """
    return math.floor(value + 0.5)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGBColour:
    """Convert a device HSV colour to RGB.

    Hue is in the device's 0-255 space. Saturation and value are percentages
    (0-100).

    Args:
        hue: Hue (0-255)
        saturation: Saturation percentage (0-100)
        value: Value percentage (0-100)

    Returns:
        RGBColour with channels in 0-255
    """
    h = hue / 255 * 360
    s = saturation / 100
    v = value / 100

    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    elif 300 <= h <= 360:
        # hue 255 maps to exactly 360 degrees
        r, g, b = c, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return {
        'r': round_half_up((r + m) * 255),
        'g': round_half_up((g + m) * 255),
        'b': round_half_up((b + m) * 255),
    }


def colour_for_saturation(hue: int, saturation: int, value: int = 255) -> RGBColour:
    """Colour for a 0-255 saturation and value, as used by the effect and preview."""
    saturation_percent = saturation / 255 * 100
    value_percent = value / 255 * 100
    return hsv_to_rgb(hue, saturation_percent, value_percent)


def generate_saturation_gradient(min_sat: int, max_sat: int, step_count: int) -> list[int]:
    """Linearly interpolate saturation values from min_sat to max_sat.

    Args:
        min_sat: Saturation at index 0
        max_sat: Saturation at the last index
        step_count: Number of samples (usually the canvas width in pixels)

    Returns:
        List of step_count integers. Empty for step_count <= 0, [min_sat] for 1.
    """
    if step_count <= 0:
        return []
    if step_count == 1:
        return [min_sat]

    span = max_sat - min_sat
    last = step_count - 1
    return [round_half_up(min_sat + span * i / last) for i in range(step_count)]


def gradient_swatches(min_sat: int, max_sat: int, width: int,
                      hue: int = DEFAULT_PREVIEW_HUE) -> list[RGBColour]:
    """Colours for each pixel of the saturation preview gradient."""
    return [
        colour_for_saturation(hue, saturation)
        for saturation in generate_saturation_gradient(min_sat, max_sat, width)
    ]


def format_slider_value(value) -> str:
    """Display text shown next to a saturation slider."""
    return str(clamp(value))
