# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
- sRGB → Linear RGB → CIE XYZ (D65) → CIELAB
- sRGB ↔ HSV

References:
- sRGB: IEC 61966-2-1
- CIELAB: CIE 15:2004, D65 2° observer white point

The channel-level functions are pure NumPy and accept arrays of shape
(..., 3), so a single color and a whole image convert the same way.
XYZ is an intermediate: it is scaled so that Y of reference white is 100
and never appears as a value type.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from palette.errors import InvalidColorSpace
from palette.schema import Color, ColorSpace, HSVColor, LABColor, RGBAColor

logger = logging.getLogger(__name__)


# D65 reference white (2° observer), Y normalized to 100
D65_WHITE = np.array([95.047, 100.000, 108.883], dtype=np.float64)

# CIE constants for the LAB companding function
_LAB_EPSILON = 0.008856
_LAB_KAPPA = 7.787
_LAB_OFFSET = 16.0 / 116.0


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb > 0.04045,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
        srgb / 12.92,
    )


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# RGB ↔ XYZ
# =============================================================================

# Linear sRGB to XYZ (D65)
_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)


def rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,255] to CIE XYZ.

    Args:
        rgb: Array of shape (..., 3) with sRGB channels in [0, 255].
            Channels are expected to be clamped already.

    Returns:
        Array of shape (..., 3) with X, Y, Z scaled so white has Y = 100
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = srgb_to_linear(rgb / 255.0) * 100.0
    return np.einsum('...j,ij->...i', linear, _RGB_TO_XYZ)


def xyz_to_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to sRGB [0,255].

    Inverse of rgb_to_xyz. Colors outside the sRGB gamut are clipped
    channel-wise; no gamut mapping is attempted.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    linear = np.einsum('...j,ij->...i', xyz / 100.0, _XYZ_TO_RGB)
    return linear_to_srgb(linear) * 255.0


# =============================================================================
# XYZ ↔ LAB
# =============================================================================


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIELAB.

    Each tristimulus value is normalized by the D65 white and companded
    with a cube root above 0.008856, a linear segment below it.

    Args:
        xyz: Array of shape (..., 3) with X, Y, Z (white Y = 100)

    Returns:
        Array of shape (..., 3) with L, a, b
    """
    t = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(t > _LAB_EPSILON, np.cbrt(t), _LAB_KAPPA * t + _LAB_OFFSET)

    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELAB to CIE XYZ.

    Inverse of xyz_to_lab.
    """
    lab = np.asarray(lab, dtype=np.float64)

    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    f = np.stack([fx, fy, fz], axis=-1)
    f3 = f ** 3
    t = np.where(f3 > _LAB_EPSILON, f3, (f - _LAB_OFFSET) / _LAB_KAPPA)

    return t * D65_WHITE


# =============================================================================
# Convenience: RGB ↔ LAB (full chain)
# =============================================================================


def rgb_to_lab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,255] to CIELAB.

    Full chain: sRGB → Linear RGB → XYZ → LAB
    """
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELAB to sRGB [0,255].

    Full chain: LAB → XYZ → Linear RGB → sRGB (clipped)
    """
    return xyz_to_rgb(lab_to_xyz(lab))


# =============================================================================
# RGB ↔ HSV
# =============================================================================


def rgb_to_hsv(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,255] to HSV.

    Args:
        rgb: Array of shape (..., 3) with sRGB channels in [0, 255]

    Returns:
        Array of shape (..., 3) with H in [0, 360), S and V in [0, 100]
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    cmax = np.max(rgb, axis=-1)
    cmin = np.min(rgb, axis=-1)
    delta = cmax - cmin

    # Avoid dividing by zero; those entries are replaced by np.select below
    safe_delta = np.where(delta == 0.0, 1.0, delta)
    safe_cmax = np.where(cmax == 0.0, 1.0, cmax)

    # Red wins ties, then green
    hue = np.select(
        [delta == 0.0, cmax == r, cmax == g],
        [
            0.0,
            60.0 * np.mod((g - b) / safe_delta, 6.0),
            60.0 * ((b - r) / safe_delta + 2.0),
        ],
        default=60.0 * ((r - g) / safe_delta + 4.0),
    )
    hue = np.where(hue >= 360.0, hue - 360.0, hue)

    saturation = np.where(cmax == 0.0, 0.0, 100.0 * delta / safe_cmax)
    value = 100.0 * cmax

    return np.stack([hue, saturation, value], axis=-1)


def hsv_to_rgb(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSV to sRGB [0,255].

    Hue is reduced modulo 360 and mapped onto one of six 60° sectors.

    Args:
        hsv: Array of shape (..., 3) with H in degrees, S and V in [0, 100]

    Returns:
        Array of shape (..., 3) with sRGB channels in [0, 255]

    Raises:
        RuntimeError: If a hue still lies outside [0, 360) after reduction
    """
    hsv = np.asarray(hsv, dtype=np.float64)

    h = np.mod(hsv[..., 0], 360.0)
    h = np.where(h >= 360.0, h - 360.0, h)
    if np.any(~((h >= 0.0) & (h < 360.0))):
        raise RuntimeError(f"Hue outside [0, 360) after modulo reduction: {h}")

    s = hsv[..., 1] / 100.0
    v = hsv[..., 2] / 100.0

    c = v * s
    x = c * (1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0))
    m = v - c
    zero = np.zeros_like(c)

    sector = np.floor(h / 60.0)
    conditions = [sector == k for k in range(6)]

    r = np.select(conditions, [c, x, zero, zero, x, c])
    g = np.select(conditions, [x, c, c, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, c, c, x])

    return 255.0 * np.stack([r + m, g + m, b + m], axis=-1)


# =============================================================================
# Typed Conversion
# =============================================================================


def _rgba_to_hsv(color: RGBAColor) -> HSVColor:
    h, s, v = rgb_to_hsv(color.rgb)
    return HSVColor(h=float(h), s=float(s), v=float(v))


def _rgba_to_lab(color: RGBAColor) -> LABColor:
    L, a, b = rgb_to_lab(color.rgb)
    return LABColor(l=float(L), a=float(a), b=float(b))


def _hsv_to_rgba(color: HSVColor) -> RGBAColor:
    r, g, b = hsv_to_rgb((color.h, color.s, color.v))
    return RGBAColor(r=float(r), g=float(g), b=float(b), a=1.0)


def _lab_to_rgba(color: LABColor) -> RGBAColor:
    r, g, b = lab_to_rgb((color.l, color.a, color.b))
    return RGBAColor(r=float(r), g=float(g), b=float(b), a=1.0)


_CONVERTERS: dict[tuple[ColorSpace, ColorSpace], Callable[..., Color]] = {
    (ColorSpace.RGBA, ColorSpace.HSV): _rgba_to_hsv,
    (ColorSpace.RGBA, ColorSpace.LAB): _rgba_to_lab,
    (ColorSpace.HSV, ColorSpace.RGBA): _hsv_to_rgba,
    (ColorSpace.HSV, ColorSpace.LAB): lambda c: _rgba_to_lab(_hsv_to_rgba(c)),
    (ColorSpace.LAB, ColorSpace.RGBA): _lab_to_rgba,
    (ColorSpace.LAB, ColorSpace.HSV): lambda c: _rgba_to_hsv(_lab_to_rgba(c)),
}


def convert(color: Color, space: ColorSpace | str) -> Color:
    """
    Express a color in another color space.

    HSV and LAB conversions go through RGB (and XYZ for LAB). Alpha is
    dropped when leaving RGBA and set to 1.0 when entering it.

    Args:
        color: Any Palette color value
        space: Target ColorSpace (or its string value, e.g. "lab")

    Returns:
        A new color of the target space, or ``color`` itself if it is
        already in that space

    Raises:
        InvalidColorSpace: If ``color`` is not a Palette color value or
            ``space`` names no known color space
    """
    try:
        target = ColorSpace(space)
    except ValueError:
        raise InvalidColorSpace(f"Unknown color space: {space!r}") from None

    source = getattr(color, "space", None)
    if not isinstance(source, ColorSpace):
        raise InvalidColorSpace(
            f"Expected a color value, got {type(color).__name__}"
        )

    if source is target:
        return color

    logger.debug("Converting %s -> %s", source.value, target.value)
    return _CONVERTERS[(source, target)](color)
