"""Tests for colour conversion and gradient preview in models/colour.py"""

import pytest
from models.colour import (
    DEFAULT_PREVIEW_HUE,
    colour_for_saturation,
    format_slider_value,
    generate_saturation_gradient,
    gradient_swatches,
    hsv_to_rgb,
    round_half_up
)


def as_tuple(colour):
    return colour['r'], colour['g'], colour['b']


class TestRoundHalfUp:
    """Rounding matches the device UI, not banker's rounding."""

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    def test_other_values(self):
        assert round_half_up(1.49) == 1
        assert round_half_up(0.0) == 0
        assert round_half_up(254.6) == 255


class TestHsvToRgb:
    """Tests for hsv_to_rgb (hue 0-255, saturation/value in percent)."""

    def test_red(self):
        assert as_tuple(hsv_to_rgb(0, 100, 100)) == (255, 0, 0)

    def test_green(self):
        assert as_tuple(hsv_to_rgb(85, 100, 100)) == (0, 255, 0)

    def test_blue(self):
        assert as_tuple(hsv_to_rgb(170, 100, 100)) == (0, 0, 255)

    @pytest.mark.parametrize('hue', [0, 42, 85, 128, 170, 213, 255])
    def test_zero_saturation_is_grey(self, hue):
        """Zero saturation gives equal channels for any hue."""
        assert as_tuple(hsv_to_rgb(hue, 0, 50)) == (128, 128, 128)

    def test_zero_value_is_black(self):
        assert as_tuple(hsv_to_rgb(100, 100, 0)) == (0, 0, 0)

    def test_hue_255_is_not_black(self):
        """Hue 255 maps to 360 degrees and falls in the last sector."""
        assert as_tuple(hsv_to_rgb(255, 100, 100)) == (255, 0, 0)

    def test_each_sector(self):
        """One hue inside each 60 degree sector: (full, partial, zero) channel."""
        sectors = [
            (20, 'r', 'g', 'b'),    # ~28 deg
            (60, 'g', 'r', 'b'),    # ~85 deg
            (105, 'g', 'b', 'r'),   # ~148 deg
            (150, 'b', 'g', 'r'),   # ~212 deg
            (190, 'b', 'r', 'g'),   # ~268 deg
            (235, 'r', 'b', 'g'),   # ~332 deg
        ]
        for hue, full, partial, zero in sectors:
            colour = hsv_to_rgb(hue, 100, 100)
            assert colour[full] == 255
            assert 0 < colour[partial] < 255
            assert colour[zero] == 0

    def test_channels_in_range(self):
        for hue in range(0, 256, 5):
            for saturation in (0, 33, 67, 100):
                colour = hsv_to_rgb(hue, saturation, 100)
                assert all(0 <= channel <= 255 for channel in as_tuple(colour))


class TestColourForSaturation:
    """0-255 saturation adapter used by the effect and preview."""

    def test_full_saturation_is_vivid(self):
        colour = colour_for_saturation(160, 255)
        assert colour['r'] != colour['g']
        assert colour['g'] != colour['b']

    def test_zero_saturation_is_grey(self):
        colour = colour_for_saturation(160, 0)
        assert colour['r'] == colour['g'] == colour['b'] == 255

    def test_matches_percent_conversion(self):
        assert colour_for_saturation(0, 255, 255) == hsv_to_rgb(0, 100, 100)
        assert colour_for_saturation(200, 128) == hsv_to_rgb(200, 128 / 255 * 100, 100)

    def test_different_saturations_differ(self):
        for low, high in [(0, 50), (100, 150), (200, 255)]:
            assert colour_for_saturation(200, low) != colour_for_saturation(200, high)


class TestGenerateSaturationGradient:
    """Tests for the linear saturation gradient."""

    def test_five_steps(self):
        assert generate_saturation_gradient(100, 200, 5) == [100, 125, 150, 175, 200]

    def test_endpoints(self):
        gradient = generate_saturation_gradient(0, 255, 300)
        assert len(gradient) == 300
        assert gradient[0] == 0
        assert gradient[-1] == 255

    def test_single_step(self):
        assert generate_saturation_gradient(100, 200, 1) == [100]

    def test_zero_steps(self):
        assert generate_saturation_gradient(100, 200, 0) == []
        assert generate_saturation_gradient(100, 200, -3) == []

    def test_inverted_range_descends(self):
        assert generate_saturation_gradient(200, 100, 5) == [200, 175, 150, 125, 100]

    def test_deterministic(self):
        assert generate_saturation_gradient(13, 240, 17) == generate_saturation_gradient(13, 240, 17)


class TestGradientSwatches:
    """Gradient samples converted to colours."""

    def test_length_and_endpoints(self):
        swatches = gradient_swatches(0, 255, 10)
        assert len(swatches) == 10
        assert swatches[0] == colour_for_saturation(DEFAULT_PREVIEW_HUE, 0)
        assert swatches[-1] == colour_for_saturation(DEFAULT_PREVIEW_HUE, 255)

    def test_custom_hue(self):
        assert gradient_swatches(255, 255, 1, hue=0) == [{'r': 255, 'g': 0, 'b': 0}]

    def test_empty(self):
        assert gradient_swatches(0, 255, 0) == []


class TestFormatSliderValue:
    """Slider display text is the clamped value."""

    def test_verbatim(self):
        assert format_slider_value(150) == '150'
        assert format_slider_value('200') == '200'

    def test_clamped(self):
        assert format_slider_value(300) == '255'
        assert format_slider_value('abc') == '0'
