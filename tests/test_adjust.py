# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""Tests for lighten/darken, opacity and intensity adjustments."""

import logging

import pytest

from palette.core.adjust import (
    darken,
    intensity,
    lighten,
    with_intensity,
    with_opacity,
)
from palette.core.colorspace import convert
from palette.errors import DivisionByZero, InvalidColorSpace
from palette.schema import ColorSpace, HSVColor, LABColor, RGBAColor


class TestLightenDarken:
    """Fixed-step channel shifts and clamping."""

    def test_lighten_black_default(self):
        assert lighten(RGBAColor(0, 0, 0, 1)) == RGBAColor(26, 26, 26, 1)

    def test_darken_white_default(self):
        assert darken(RGBAColor(255, 255, 255, 1)) == RGBAColor(229, 229, 229, 1)

    def test_lighten_clamps(self):
        c = lighten(RGBAColor(250, 100, 0, 1), 0.5)
        assert c.rgb == (255.0, 228.0, 128.0)

    def test_darken_clamps(self):
        c = darken(RGBAColor(5, 100, 255, 1), 0.2)
        assert c.rgb == (0.0, 49.0, 204.0)

    def test_alpha_untouched(self):
        assert lighten(RGBAColor(10, 10, 10, 0.3), 0.2).a == 0.3

    def test_darken_is_negative_lighten(self):
        c = RGBAColor(120, 60, 30, 1)
        assert darken(c, 0.15) == lighten(c, -0.15)

    def test_half_steps_round_away_from_zero(self):
        """255 * 0.3 = 76.5 moves by 77 in both directions."""
        c = RGBAColor(100, 100, 100, 1)
        assert lighten(c, 0.3).r == 177.0
        assert darken(c, 0.3).r == 23.0

    @pytest.mark.parametrize("p", [0.0, 0.05, 0.1, 0.25, 0.3])
    def test_lighten_undoes_darken(self, p):
        c = RGBAColor(120, 130, 140, 0.8)
        restored = lighten(darken(c, p), p)
        for before, after in zip(c.rgb, restored.rgb):
            assert abs(before - after) <= 1.0
        assert restored.a == c.a

    def test_hsv_input_returns_hsv(self):
        c = lighten(HSVColor(0, 100, 50), 0.1)
        assert isinstance(c, HSVColor)
        rgba = convert(c, ColorSpace.RGBA)
        assert rgba.r == pytest.approx(127.5 + 26, abs=1e-9)
        assert rgba.g == pytest.approx(26.0, abs=1e-9)

    def test_lab_input_returns_lab(self):
        c = LABColor(50, 10, 10)
        lighter = lighten(c, 0.1)
        assert isinstance(lighter, LABColor)
        assert lighter.l > c.l

    def test_clamping_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="palette.core.adjust")
        lighten(RGBAColor(250, 0, 0, 1), 0.1)
        assert "clamped" in caplog.text

    def test_unclamped_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="palette.core.adjust")
        lighten(RGBAColor(100, 100, 100, 1), 0.1)
        assert "clamped" not in caplog.text


class TestOpacity:
    """Alpha replacement on RGBA colors."""

    def test_default_half(self):
        assert with_opacity(RGBAColor(1, 2, 3, 1)).a == 0.5

    def test_only_alpha_changes(self):
        c = with_opacity(RGBAColor(1, 2, 3, 1), 0.25)
        assert c == RGBAColor(1, 2, 3, 0.25)

    @pytest.mark.parametrize("opacity,expected", [(1.5, 1.0), (-0.2, 0.0), (0.0, 0.0), (1.0, 1.0)])
    def test_clamped(self, opacity, expected):
        assert with_opacity(RGBAColor(0, 0, 0, 0.5), opacity).a == expected

    def test_rejects_non_rgba(self):
        with pytest.raises(InvalidColorSpace):
            with_opacity(HSVColor(0, 0, 0), 0.5)


class TestIntensity:
    """Intensity as rescaled CIELAB lightness."""

    def test_white(self):
        assert intensity(RGBAColor(255, 255, 255, 1)) == pytest.approx(255.0)

    def test_black(self):
        assert intensity(RGBAColor(0, 0, 0, 1)) == pytest.approx(0.0, abs=1e-9)

    def test_is_scaled_lab_lightness(self):
        c = RGBAColor(57, 65, 200, 1)
        lab = convert(c, ColorSpace.LAB)
        assert intensity(c) == pytest.approx(255.0 * lab.l / 100.0)

    def test_lab_input(self):
        assert intensity(LABColor(40, 20, -20)) == pytest.approx(102.0, abs=1e-3)

    def test_out_of_gamut_lab_uses_clipped_rgb(self):
        c = LABColor(50, 127, -127)
        rgba = convert(c, ColorSpace.RGBA)
        assert intensity(c) == pytest.approx(intensity(rgba))
        assert abs(intensity(c) - 127.5) > 1.0

    def test_space_independent(self):
        rgba = RGBAColor(255, 0, 0, 1)
        assert intensity(HSVColor(0, 100, 100)) == pytest.approx(intensity(rgba))

    def test_alpha_ignored(self):
        assert intensity(RGBAColor(10, 20, 30, 0.1)) == intensity(RGBAColor(10, 20, 30, 1))


class TestWithIntensity:
    """Rescaling channels to a target intensity."""

    def test_doubling_scales_channels(self):
        c = RGBAColor(100, 50, 20, 0.7)
        doubled = with_intensity(c, 2.0 * intensity(c))
        assert doubled.rgb == pytest.approx((200.0, 100.0, 40.0))
        assert doubled.a == 0.7

    def test_dark_red_saturates(self):
        c = with_intensity(RGBAColor(10, 0, 0, 1), 255)
        assert c.rgb == (255.0, 0.0, 0.0)

    def test_black_raises(self):
        with pytest.raises(DivisionByZero):
            with_intensity(RGBAColor(0, 0, 0, 1), 100)

    def test_black_raises_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            with_intensity(HSVColor(0, 0, 0), 100)

    def test_hsv_input_returns_hsv(self):
        c = HSVColor(200, 50, 40)
        assert isinstance(with_intensity(c, 80), HSVColor)

    def test_out_of_gamut_lab_keeps_intensity(self):
        c = LABColor(50, 127, -127)
        same = with_intensity(c, intensity(c))
        expected = convert(c, ColorSpace.RGBA)
        assert convert(same, ColorSpace.RGBA).rgb == pytest.approx(expected.rgb, abs=1e-6)
