# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Color value types.

All types in this module are immutable (frozen dataclasses).
Channels are clamped into range on construction; operations always
return new values.
"""

from palette.schema.color import (
    ACHROMATIC_CHROMA,
    Color,
    ColorSpace,
    HSVColor,
    LABColor,
    RGBAColor,
    color_from_dict,
)

__all__ = [
    # Variant tag
    "ColorSpace",
    # Value types
    "RGBAColor",
    "HSVColor",
    "LABColor",
    "Color",
    # Helpers
    "color_from_dict",
    "ACHROMATIC_CHROMA",
]
