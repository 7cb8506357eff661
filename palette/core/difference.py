# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (CIEDE2000).

Plain Euclidean distance in LAB overstates differences between saturated
colors and understates them near neutral gray and in the blue region.
CIEDE2000 corrects this with lightness, chroma and hue weighting functions
plus a rotation term coupling chroma and hue differences.

Reference:
- Sharma, Wu, Dalal (2005). The CIEDE2000 Color-Difference Formula:
  Implementation Notes, Supplementary Test Data, and Mathematical
  Observations.

Scale:
- Raw ΔE00 ≈ 1: just noticeable difference
- Raw ΔE00 ≈ 100: black vs. white
- ``distance`` divides by 100 and clamps to [0, 1]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from palette.core.colorspace import convert
from palette.errors import InvalidColorSpace
from palette.schema import Color, ColorSpace, LABColor

# 25^7, the chroma pivot of the G and R_C terms
_POW25_7 = 25.0 ** 7


@dataclass(frozen=True)
class CIEDE2000Weights:
    """Parametric weighting factors (kL, kC, kH).

    The defaults of 1.0 are the reference conditions. Textile work
    commonly uses kL = 2.
    """

    kL: float = 1.0
    kC: float = 1.0
    kH: float = 1.0


_DEFAULT_WEIGHTS = CIEDE2000Weights()


# =============================================================================
# Hue Branches
# =============================================================================


def hue_angle(a_prime: float, b: float) -> float:
    """
    Hue angle h' in degrees [0, 360).

    Defined as 0 when both coordinates are zero.
    """
    if a_prime == 0.0 and b == 0.0:
        return 0.0
    h = math.degrees(math.atan2(b, a_prime))
    if h < 0.0:
        h += 360.0
    return h


def hue_difference(h1: float, h2: float, chroma_product: float) -> float:
    """
    Signed hue difference Δh' in degrees, taking the short way around.

    Zero when either color is achromatic (hue undefined).
    """
    if chroma_product == 0.0:
        return 0.0
    raw = h2 - h1
    if abs(raw) <= 180.0:
        return raw
    if raw > 180.0:
        return raw - 360.0
    return raw + 360.0


def mean_hue(h1: float, h2: float, chroma_product: float) -> float:
    """
    Mean hue h̄' in degrees.

    When either color is achromatic the sum is returned undivided.
    """
    if chroma_product == 0.0:
        return h1 + h2
    if abs(h1 - h2) <= 180.0:
        return (h1 + h2) / 2.0
    if h1 + h2 < 360.0:
        return (h1 + h2 + 360.0) / 2.0
    return (h1 + h2 - 360.0) / 2.0


# =============================================================================
# ΔE00
# =============================================================================


def _require_lab(color: object) -> LABColor:
    if getattr(color, "space", None) is not ColorSpace.LAB:
        raise InvalidColorSpace(
            f"CIEDE2000 requires LAB colors, got {type(color).__name__}"
        )
    return color


def ciede2000(
    lab1: LABColor,
    lab2: LABColor,
    weights: CIEDE2000Weights | None = None,
) -> float:
    """
    Raw CIEDE2000 color difference between two LAB colors.

    Args:
        lab1: Reference color
        lab2: Sample color
        weights: Parametric factors (default: kL = kC = kH = 1)

    Returns:
        ΔE00 (0 for identical colors, about 100 for black vs. white)

    Raises:
        InvalidColorSpace: If either argument is not a LABColor
    """
    lab1 = _require_lab(lab1)
    lab2 = _require_lab(lab2)
    k = weights or _DEFAULT_WEIGHTS

    L1, a1, b1 = lab1.l, lab1.a, lab1.b
    L2, a2, b2 = lab2.l, lab2.a, lab2.b

    # 1-3. Rescale the a axis near the neutral axis
    C_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2.0
    C_bar7 = C_bar ** 7
    G = 0.5 * (1.0 - math.sqrt(C_bar7 / (C_bar7 + _POW25_7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = math.hypot(a1p, b1)
    C2p = math.hypot(a2p, b2)
    chroma_product = C1p * C2p

    # 4. Hue angles
    h1p = hue_angle(a1p, b1)
    h2p = hue_angle(a2p, b2)

    # 5-7. Differences
    dLp = L2 - L1
    dCp = C2p - C1p
    dhp = hue_difference(h1p, h2p, chroma_product)
    dHp = 2.0 * math.sqrt(chroma_product) * math.sin(math.radians(dhp) / 2.0)

    # 8-9. Means
    L_bar = (L1 + L2) / 2.0
    C_bar_p = (C1p + C2p) / 2.0
    h_bar = mean_hue(h1p, h2p, chroma_product)

    # 10-16. Weighting functions
    T = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar))
        + 0.32 * math.cos(math.radians(3.0 * h_bar + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar - 63.0))
    )
    delta_theta = 30.0 * math.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    C_bar_p7 = C_bar_p ** 7
    Rc = 2.0 * math.sqrt(C_bar_p7 / (C_bar_p7 + _POW25_7))

    L_dev2 = (L_bar - 50.0) ** 2
    Sl = 1.0 + (0.015 * L_dev2) / math.sqrt(20.0 + L_dev2)
    Sc = 1.0 + 0.045 * C_bar_p
    Sh = 1.0 + 0.015 * C_bar_p * T

    Rt = -math.sin(math.radians(2.0 * delta_theta)) * Rc

    # 17. Combine
    l_term = dLp / (Sl * k.kL)
    c_term = dCp / (Sc * k.kC)
    h_term = dHp / (Sh * k.kH)

    # Rounding can push the sum a hair below zero for identical inputs
    return math.sqrt(max(l_term ** 2 + c_term ** 2 + h_term ** 2 + Rt * c_term * h_term, 0.0))


def ciede2000_batch(
    lab1: ArrayLike,
    lab2: ArrayLike,
    weights: CIEDE2000Weights | None = None,
) -> NDArray[np.float64]:
    """
    Vectorized ΔE00 for arrays of LAB colors.

    Args:
        lab1: Array of shape (..., 3) with L, a, b
        lab2: Array of the same shape

    Returns:
        Array of shape (...) with raw ΔE00 values
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)
    k = weights or _DEFAULT_WEIGHTS

    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    C_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0
    C_bar7 = C_bar ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar7 / (C_bar7 + _POW25_7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)
    chroma_product = C1p * C2p
    achromatic = chroma_product == 0.0

    h1p = np.degrees(np.arctan2(b1, a1p))
    h1p = np.where(h1p < 0.0, h1p + 360.0, h1p)
    h2p = np.degrees(np.arctan2(b2, a2p))
    h2p = np.where(h2p < 0.0, h2p + 360.0, h2p)

    dLp = L2 - L1
    dCp = C2p - C1p

    raw = h2p - h1p
    dhp = np.select(
        [achromatic, np.abs(raw) <= 180.0, raw > 180.0],
        [0.0, raw, raw - 360.0],
        default=raw + 360.0,
    )
    dHp = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dhp) / 2.0)

    L_bar = (L1 + L2) / 2.0
    C_bar_p = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    h_bar = np.select(
        [achromatic, np.abs(h1p - h2p) <= 180.0, h_sum < 360.0],
        [h_sum, h_sum / 2.0, (h_sum + 360.0) / 2.0],
        default=(h_sum - 360.0) / 2.0,
    )

    T = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )
    delta_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    C_bar_p7 = C_bar_p ** 7
    Rc = 2.0 * np.sqrt(C_bar_p7 / (C_bar_p7 + _POW25_7))

    L_dev2 = (L_bar - 50.0) ** 2
    Sl = 1.0 + (0.015 * L_dev2) / np.sqrt(20.0 + L_dev2)
    Sc = 1.0 + 0.045 * C_bar_p
    Sh = 1.0 + 0.015 * C_bar_p * T

    Rt = -np.sin(np.radians(2.0 * delta_theta)) * Rc

    l_term = dLp / (Sl * k.kL)
    c_term = dCp / (Sc * k.kC)
    h_term = dHp / (Sh * k.kH)

    return np.sqrt(np.maximum(l_term ** 2 + c_term ** 2 + h_term ** 2 + Rt * c_term * h_term, 0.0))


# =============================================================================
# Normalized Scores
# =============================================================================


def distance(lab1: LABColor, lab2: LABColor) -> float:
    """
    Normalized perceptual distance in [0, 1].

    ΔE00 / 100, clamped. 0 means identical, 1 means at least as far
    apart as black and white.

    Raises:
        InvalidColorSpace: If either argument is not a LABColor
    """
    return min(max(ciede2000(lab1, lab2) / 100.0, 0.0), 1.0)


def similarity(color1: Color, color2: Color) -> float:
    """
    Perceptual similarity in [0, 1] between colors in any space.

    Both colors are converted to LAB; the result is ``1 - distance``.
    """
    return 1.0 - distance(convert(color1, ColorSpace.LAB), convert(color2, ColorSpace.LAB))
