"""Tests for the chromaticity to RGB converter."""
from __future__ import annotations

import math

import pytest

from tradfri_codec.color import cie_to_rgb, round_half_up


class TestRoundHalfUp:
    """Test the rounding helper."""

    def test_halves_round_up(self):
        """Test that .5 always rounds towards positive infinity."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(76.5) == 77
        assert round_half_up(-0.5) == 0
        assert round_half_up(-1.5) == -1

    def test_regular_rounding(self):
        """Test values away from the halfway point."""
        assert round_half_up(76.245) == 76
        assert round_half_up(126.9) == 127
        assert round_half_up(0.49) == 0

    def test_nan_passes_through(self):
        """Test that NaN is returned unchanged."""
        assert math.isnan(round_half_up(math.nan))


class TestCieToRgb:
    """Test the cie_to_rgb conversion."""

    def test_reference_white_full_brightness(self):
        """Test the D65 white point at full brightness."""
        assert cie_to_rgb(0.3127, 0.3290, 254) == (245, 254, 255)

    def test_reference_white_is_near_white(self):
        """Test the white point stays close to pure white."""
        red, green, blue = cie_to_rgb(0.3127, 0.3290, 254)
        assert all(channel >= 240 for channel in (red, green, blue))

    def test_bulb_red(self):
        """Test the red corner of the bulb's gamut."""
        assert cie_to_rgb(0.7006, 0.2993, 254) == (255, 0, 0)

    def test_default_brightness_is_full(self):
        """Test that an omitted brightness means full brightness."""
        assert cie_to_rgb(0.3127, 0.3290) == cie_to_rgb(0.3127, 0.3290, 254)

    def test_none_counts_as_zero(self):
        """Test None arguments behave like a JSON null, which is zero."""
        assert cie_to_rgb(0.3127, 0.3290, None) == (0, 0, 0)
        assert cie_to_rgb(None, 0.3, 254) == cie_to_rgb(0, 0.3, 254)
        assert cie_to_rgb(None, 0.3, 254) != (0, 0, 0)
        assert cie_to_rgb(0.3, None, 254) == (0, 0, 0)

    def test_zero_brightness_is_black(self):
        """Test that zero brightness gives black."""
        assert cie_to_rgb(0.3127, 0.3290, 0) == (0, 0, 0)

    def test_lower_brightness_is_dimmer(self):
        """Test that dimming lowers every channel of a desaturated color."""
        full = cie_to_rgb(0.4, 0.4, 254)
        dim = cie_to_rgb(0.4, 0.4, 64)
        assert all(d <= f for d, f in zip(dim, full))
        assert sum(dim) < sum(full)

    @pytest.mark.parametrize("y", [0, 0.0])
    def test_zero_y_is_black(self, y):
        """Test that a degenerate y coordinate does not divide by zero."""
        assert cie_to_rgb(0.3, y, 254) == (0, 0, 0)

    @pytest.mark.parametrize(
        "x, y, brightness",
        [
            ("red", 0.3, 254),
            (0.3, 0.3, "full"),
            (math.nan, 0.3, 254),
        ],
    )
    def test_non_numeric_inputs_are_black(self, x, y, brightness):
        """Test that unusable inputs produce black instead of raising."""
        assert cie_to_rgb(x, y, brightness) == (0, 0, 0)

    def test_channels_always_in_range(self):
        """Test output channels stay within 0-255 across the chromaticity plane."""
        for x_step in range(1, 20):
            for y_step in range(1, 20):
                for brightness in (1, 64, 127, 200, 254, 255):
                    rgb = cie_to_rgb(x_step / 20, y_step / 20, brightness)
                    assert all(isinstance(channel, int) for channel in rgb)
                    assert all(0 <= channel <= 255 for channel in rgb)

    def test_out_of_gamut_clamps_towards_zero(self):
        """Test that negative linear channels never produce negative output."""
        # Deep blue outside the bulb gamut drives red and green negative
        red, green, blue = cie_to_rgb(0.1, 0.02, 254)
        assert red >= 0
        assert green >= 0
        assert blue == 255
