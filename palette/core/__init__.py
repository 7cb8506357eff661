# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Numeric core for Palette.

Space conversion, CIEDE2000 difference and channel adjustments.
All operations are pure functions over immutable color values.
"""

from palette.core.adjust import (
    darken,
    intensity,
    lighten,
    with_intensity,
    with_opacity,
)
from palette.core.colorspace import convert
from palette.core.difference import (
    CIEDE2000Weights,
    ciede2000,
    ciede2000_batch,
    distance,
    similarity,
)

__all__ = [
    "convert",
    "ciede2000",
    "ciede2000_batch",
    "CIEDE2000Weights",
    "distance",
    "similarity",
    "lighten",
    "darken",
    "with_opacity",
    "intensity",
    "with_intensity",
]
