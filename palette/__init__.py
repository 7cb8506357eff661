# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Palette -- Perceptual color manipulation for UI and styling code.

Represents colors in RGBA, HSV and CIELAB, converts between them, and
compares or adjusts them the way a human eye would.

Quick start::

    from palette import parse, lighten, similarity, to_string

    c = parse("#3941C8")
    to_string(lighten(c, 0.2))          # "rgb(108, 116, 251)"
    similarity(c, parse("rgb(60, 70, 200)"))
"""

from __future__ import annotations

__version__ = "1.0.0"

from palette.codec import Notation, parse, to_hex, to_string
from palette.core import (
    CIEDE2000Weights,
    ciede2000,
    ciede2000_batch,
    convert,
    darken,
    distance,
    intensity,
    lighten,
    similarity,
    with_intensity,
    with_opacity,
)
from palette.errors import (
    ColorParseError,
    DivisionByZero,
    InvalidColorSpace,
    PaletteError,
)
from palette.schema import Color, ColorSpace, HSVColor, LABColor, RGBAColor

__all__ = [
    # Types
    "Color",
    "ColorSpace",
    "RGBAColor",
    "HSVColor",
    "LABColor",
    # Conversion and comparison
    "convert",
    "ciede2000",
    "ciede2000_batch",
    "CIEDE2000Weights",
    "distance",
    "similarity",
    # Adjustment
    "lighten",
    "darken",
    "with_opacity",
    "intensity",
    "with_intensity",
    # Text codec
    "Notation",
    "parse",
    "to_string",
    "to_hex",
    # Errors
    "PaletteError",
    "InvalidColorSpace",
    "DivisionByZero",
    "ColorParseError",
    # Version
    "__version__",
]
