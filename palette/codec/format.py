# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Serialize color values to text.

RGB channels are rounded to integers here and nowhere else; HSV and LAB
are written with up to two decimals.
"""

from __future__ import annotations

import math

from palette.codec.base import Notation
from palette.core.colorspace import convert
from palette.schema import Color, ColorSpace


def _byte(value: float) -> int:
    """Round a non-negative channel half-up."""
    return int(math.floor(value + 0.5))


def _number(value: float, digits: int = 2) -> str:
    # + 0.0 turns -0.0 into 0.0
    return f"{round(value, digits) + 0.0:g}"


def _default_notation(color: Color) -> Notation:
    if color.space is ColorSpace.RGBA:
        return Notation.RGB if color.a >= 1.0 else Notation.RGBA
    return Notation(color.space.value)


def to_hex(color: Color) -> str:
    """
    Hex string like ``"#3941C8"``.

    Alpha is appended as a fourth byte (``"#3941C880"``) only when it
    rounds below FF. Non-RGBA colors are converted first.
    """
    rgba = convert(color, ColorSpace.RGBA)
    out = f"#{_byte(rgba.r):02X}{_byte(rgba.g):02X}{_byte(rgba.b):02X}"
    alpha = _byte(rgba.a * 255.0)
    if alpha != 255:
        out += f"{alpha:02X}"
    return out


def to_string(color: Color, notation: Notation | None = None) -> str:
    """
    Serialize a color in the given notation.

    Args:
        color: Any Palette color value
        notation: Output notation. Defaults to the color's own space
            (``rgb(...)`` for opaque RGBA, ``rgba(...)`` otherwise).

    Returns:
        Text that ``palette.codec.parse`` reads back to an equal color,
        up to rounding
    """
    notation = notation or _default_notation(color)
    if notation is Notation.HEX:
        return to_hex(color)

    value = convert(color, notation.space)

    if notation is Notation.RGB:
        return f"rgb({_byte(value.r)}, {_byte(value.g)}, {_byte(value.b)})"
    if notation is Notation.RGBA:
        return (
            f"rgba({_byte(value.r)}, {_byte(value.g)}, {_byte(value.b)}, "
            f"{_number(value.a, 3)})"
        )
    if notation is Notation.HSV:
        return f"hsv({_number(value.h)}, {_number(value.s)}%, {_number(value.v)}%)"
    return f"lab({_number(value.l)}, {_number(value.a)}, {_number(value.b)})"
