# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Parse textual color notations into color values.

Supported forms (case-insensitive, surrounding whitespace ignored):
- ``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``
- ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` with channels 0-255 or percentages
- ``hsv(h, s%, v%)`` with h in degrees
- ``lab(l, a, b)``

Arguments may be separated by commas or whitespace. Out-of-range numbers
are accepted and clamped by the value types.
"""

from __future__ import annotations

import logging
import re

from palette.errors import ColorParseError
from palette.schema import Color, HSVColor, LABColor, RGBAColor

logger = logging.getLogger(__name__)


_HEX_RE = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})")
_FUNC_RE = re.compile(r"(rgba?|hsv|lab)\(\s*([^()]*?)\s*\)")
_NUMBER_RE = re.compile(r"([-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?)(%?)")
_SEPARATOR_RE = re.compile(r"\s*,\s*|\s+")


def _fail(text: str, reason: str) -> ColorParseError:
    logger.debug("Rejected color %r: %s", text, reason)
    return ColorParseError(f"Cannot parse color {text!r}: {reason}")


def _parse_hex(digits: str) -> RGBAColor:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return RGBAColor(r=r, g=g, b=b, a=a)


def _parse_args(text: str, body: str) -> list[tuple[float, bool]]:
    """Split an argument list into (number, is_percentage) pairs."""
    if not body:
        raise _fail(text, "no arguments")
    args = []
    for token in _SEPARATOR_RE.split(body):
        m = _NUMBER_RE.fullmatch(token)
        if not m:
            raise _fail(text, f"{token!r} is not a number")
        args.append((float(m.group(1)), m.group(2) == "%"))
    return args


def _rgba_from_args(text: str, args: list[tuple[float, bool]]) -> RGBAColor:
    if len(args) not in (3, 4):
        raise _fail(text, f"expected 3 or 4 arguments, got {len(args)}")
    channels = [value * 255.0 / 100.0 if percent else value for value, percent in args[:3]]
    alpha = 1.0
    if len(args) == 4:
        value, percent = args[3]
        alpha = value / 100.0 if percent else value
    return RGBAColor(r=channels[0], g=channels[1], b=channels[2], a=alpha)


def parse(text: str) -> Color:
    """
    Parse a color notation into a typed color value.

    Args:
        text: Color string such as ``"#3941C8"`` or ``"hsv(220, 70%, 78%)"``

    Returns:
        RGBAColor for hex/rgb/rgba, HSVColor for hsv, LABColor for lab

    Raises:
        ColorParseError: If the text matches no supported notation
    """
    normalized = text.strip().lower()

    m = _HEX_RE.fullmatch(normalized)
    if m:
        return _parse_hex(m.group(1))

    m = _FUNC_RE.fullmatch(normalized)
    if not m:
        raise _fail(text, "unrecognised notation")

    name, body = m.group(1), m.group(2)
    args = _parse_args(text, body)

    if name in ("rgb", "rgba"):
        return _rgba_from_args(text, args)

    if len(args) != 3:
        raise _fail(text, f"{name}() takes 3 arguments, got {len(args)}")
    values = [value for value, _ in args]

    if name == "hsv":
        return HSVColor(h=values[0], s=values[1], v=values[2])
    return LABColor(l=values[0], a=values[1], b=values[2])
