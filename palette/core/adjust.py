# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Channel-level color adjustments.

Lighten/darken and intensity rescaling work on the RGB channels; colors
given in HSV or LAB are converted to RGBA, adjusted, and converted back
so the result is in the same space as the input. Clamping is left to the
value types.
"""

from __future__ import annotations

import dataclasses
import logging
import math

from palette.core.colorspace import convert
from palette.errors import DivisionByZero, InvalidColorSpace
from palette.schema import Color, ColorSpace, RGBAColor

logger = logging.getLogger(__name__)


DEFAULT_STEP = 0.10
DEFAULT_OPACITY = 0.50

# Intensity at or below this is treated as pure black
_ZERO_INTENSITY = 1e-9


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _shift(color: RGBAColor, step: float) -> RGBAColor:
    shifted = RGBAColor(r=color.r + step, g=color.g + step, b=color.b + step, a=color.a)
    if any(not 0.0 <= c + step <= 255.0 for c in color.rgb):
        logger.debug("Adjustment by %+g clamped %s to %s", step, color.rgb, shifted.rgb)
    return shifted


def lighten(color: Color, percent: float = DEFAULT_STEP) -> Color:
    """
    Lighten a color by a fraction of the full channel range.

    Each of R, G and B moves up by ``round(255 * percent)`` and is clamped
    to [0, 255]. Alpha is untouched. A negative ``percent`` darkens.

    Example:
        >>> lighten(RGBAColor(0, 0, 0, 1.0))
        RGBAColor(r=26.0, g=26.0, b=26.0, a=1.0)
    """
    step = _round_half_away(255.0 * percent)
    shifted = _shift(convert(color, ColorSpace.RGBA), step)
    return convert(shifted, color.space)


def darken(color: Color, percent: float = DEFAULT_STEP) -> Color:
    """Darken a color; the mirror image of ``lighten``."""
    return lighten(color, -percent)


def with_opacity(color: RGBAColor, opacity: float = DEFAULT_OPACITY) -> RGBAColor:
    """
    Replace the alpha channel, clamped to [0, 1].

    Raises:
        InvalidColorSpace: If ``color`` is not an RGBAColor
    """
    if getattr(color, "space", None) is not ColorSpace.RGBA:
        raise InvalidColorSpace(
            f"Opacity is only defined for RGBA colors, got {type(color).__name__}"
        )
    return dataclasses.replace(color, a=opacity)


def intensity(color: Color) -> float:
    """
    Perceived intensity on a 0-255 scale.

    The CIELAB lightness of the color, rescaled from [0, 100]. LAB input
    is first brought into the sRGB gamut so the result describes the
    channels that ``with_intensity`` scales.
    """
    lab = convert(convert(color, ColorSpace.RGBA), ColorSpace.LAB)
    return 255.0 * (lab.l / 100.0)


def with_intensity(color: Color, target: float) -> Color:
    """
    Rescale R, G and B by ``target / intensity(color)``.

    Alpha is unchanged and channels clamp at 255. The result is in the
    same space as the input.

    Raises:
        DivisionByZero: If the color has zero intensity (pure black)
    """
    current = intensity(color)
    if current <= _ZERO_INTENSITY:
        raise DivisionByZero(
            f"Cannot rescale a zero-intensity color to intensity {target}"
        )

    ratio = target / current
    rgba = convert(color, ColorSpace.RGBA)
    scaled = RGBAColor(r=rgba.r * ratio, g=rgba.g * ratio, b=rgba.b * ratio, a=rgba.a)
    return convert(scaled, color.space)
