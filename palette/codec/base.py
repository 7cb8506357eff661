# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""Base types for the text codec."""

from enum import Enum

from palette.schema import ColorSpace


class Notation(Enum):
    """Textual color notations."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSV = "hsv"
    LAB = "lab"

    @property
    def space(self) -> ColorSpace:
        """Color space a value must be in to be written in this notation."""
        return _NOTATION_SPACES[self]


_NOTATION_SPACES = {
    Notation.HEX: ColorSpace.RGBA,
    Notation.RGB: ColorSpace.RGBA,
    Notation.RGBA: ColorSpace.RGBA,
    Notation.HSV: ColorSpace.HSV,
    Notation.LAB: ColorSpace.LAB,
}
