"""Tests for RGB <-> HSV conversion."""

import pytest

from colorwheel.colors import color_to_hsv, hsv_model_to_color, hsv_to_rgb, normalize_hue, rgb_to_hsv
from colorwheel.models import HSV, Color


class TestRgbToHsv:
    """Test rgb_to_hsv."""

    @pytest.mark.unit
    @pytest.mark.parametrize("rgb, expected", [
        ((255, 0, 0), (0.0, 1.0, 1.0)),
        ((0, 255, 0), (120.0, 1.0, 1.0)),
        ((0, 0, 255), (240.0, 1.0, 1.0)),
        ((0, 255, 255), (180.0, 1.0, 1.0)),
        ((255, 255, 255), (0.0, 0.0, 1.0)),
        ((0, 0, 0), (0.0, 0.0, 0.0)),
    ])
    def test_primary_colors(self, rgb, expected):
        """Primaries and achromatic colors land on the expected angles."""
        hsv = rgb_to_hsv(*rgb)
        assert hsv.to_tuple() == pytest.approx(expected)

    @pytest.mark.unit
    def test_hue_not_rounded(self):
        """Hue keeps its fractional part."""
        hsv = rgb_to_hsv(255, 128, 0)
        assert hsv.h == pytest.approx(30.117647, abs=1e-6)

    @pytest.mark.unit
    def test_hue_stays_below_360(self):
        """Magenta-ish reds wrap into [0, 360)."""
        hsv = rgb_to_hsv(255, 0, 1)
        assert 359.0 < hsv.h < 360.0


class TestHsvToRgb:
    """Test hsv_to_rgb."""

    @pytest.mark.unit
    @pytest.mark.parametrize("hsv, expected", [
        ((0.0, 1.0), (255, 0, 0)),
        ((90.0, 1.0), (128, 255, 0)),
        ((180.0, 1.0), (0, 255, 255)),
        ((270.0, 1.0), (128, 0, 255)),
        ((0.0, 0.0), (255, 255, 255)),
    ])
    def test_wheel_colors(self, hsv, expected):
        """Full-value colors around the wheel."""
        assert hsv_to_rgb(*hsv).to_rgb_tuple() == expected

    @pytest.mark.unit
    def test_hue_wraps(self):
        """Hue 360 and hue 0 are the same color."""
        assert hsv_to_rgb(360.0, 1.0) == hsv_to_rgb(0.0, 1.0)
        assert hsv_to_rgb(-90.0, 1.0) == hsv_to_rgb(270.0, 1.0)

    @pytest.mark.unit
    def test_out_of_range_saturation_clamped(self):
        """Saturation outside [0, 1] is clamped."""
        assert hsv_to_rgb(0.0, 1.7) == Color(r=255, g=0, b=0)
        assert hsv_to_rgb(0.0, -0.2) == Color.white()

    @pytest.mark.unit
    def test_value_channel(self):
        """Value scales the brightness."""
        assert hsv_to_rgb(0.0, 0.0, 0.0) == Color.off()
        assert hsv_to_rgb(0.0, 1.0, 0.5) == Color(r=128, g=0, b=0)


class TestRoundTrip:
    """Conversions are inverse of each other on 8-bit colors."""

    @pytest.mark.unit
    def test_rgb_grid_round_trip(self):
        """Every sampled RGB triple survives RGB -> HSV -> RGB unchanged."""
        channels = list(range(0, 256, 15)) + [1, 127, 128, 254, 255]
        for r in channels:
            for g in channels:
                for b in channels:
                    hsv = rgb_to_hsv(r, g, b)
                    assert hsv_to_rgb(*hsv.to_tuple()).to_rgb_tuple() == (r, g, b), hsv

    @pytest.mark.unit
    def test_model_helpers(self):
        """Model helpers wrap the plain functions."""
        color = Color(r=26, g=43, b=60)
        hsv = color_to_hsv(color)
        assert isinstance(hsv, HSV)
        assert hsv_model_to_color(hsv) == color


class TestNormalizeHue:
    """Test normalize_hue."""

    @pytest.mark.unit
    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (360.0, 0.0),
        (450.0, 90.0),
        (-90.0, 270.0),
        (-1e-15, 0.0),
    ])
    def test_normalize(self, angle, expected):
        """Angles wrap into [0, 360)."""
        result = normalize_hue(angle)
        assert 0.0 <= result < 360.0
        assert result == pytest.approx(expected)
