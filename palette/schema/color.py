# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Color value types: the tagged variant every operation works on.

Design principles:
- Immutable: All types are frozen dataclasses
- Total: Out-of-range channels are clamped, never rejected
- Tagged: Each type carries its ColorSpace, conversions dispatch on it

Channel ranges:
- RGBA: r, g, b in [0, 255] (real-valued until serialized), a in [0, 1]
- HSV:  h in [0, 360) (wrapped modulo 360), s, v in [0, 100]
- LAB:  l in [0, 100], a, b in [-128, 128] (CIELAB, D65 white)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


# Chroma below this is treated as having no perceptible hue
ACHROMATIC_CHROMA = 0.5


# =============================================================================
# Variant Tag
# =============================================================================


class ColorSpace(Enum):
    """Color spaces a value can be expressed in."""
    RGBA = "rgba"
    HSV = "hsv"
    LAB = "lab"


# =============================================================================
# Channel Helpers
# =============================================================================


def _channel(name: str, value: float) -> float:
    """Coerce a channel to float, rejecting NaN."""
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"Channel {name} must be a number, got NaN")
    return value


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _wrap_hue(value: float) -> float:
    """Reduce a hue angle into [0, 360)."""
    hue = value % 360.0
    # -1e-17 % 360.0 rounds up to 360.0
    if hue >= 360.0:
        hue = 0.0
    return hue


# =============================================================================
# Value Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBAColor:
    """
    A color in sRGB with straight (non-premultiplied) alpha.

    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]
        a: Alpha [0, 1], where 1.0 is fully opaque
    """
    r: float
    g: float
    b: float
    a: float

    space: ClassVar[ColorSpace] = ColorSpace.RGBA

    def __post_init__(self) -> None:
        """Clamp channels into range."""
        for name in ("r", "g", "b"):
            value = _channel(name, getattr(self, name))
            object.__setattr__(self, name, _clamp(value, 0.0, 255.0))
        object.__setattr__(self, "a", _clamp(_channel("a", self.a), 0.0, 1.0))

    @property
    def rgb(self) -> tuple[float, float, float]:
        """Color channels without alpha."""
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"space": self.space.value, "r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> RGBAColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data["a"])


@dataclass(frozen=True, slots=True)
class HSVColor:
    """
    A color in the HSV cylinder.

    Attributes:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation [0, 100]
        v: Value [0, 100]
    """
    h: float
    s: float
    v: float

    space: ClassVar[ColorSpace] = ColorSpace.HSV

    def __post_init__(self) -> None:
        """Wrap hue and clamp saturation/value."""
        object.__setattr__(self, "h", _wrap_hue(_channel("h", self.h)))
        object.__setattr__(self, "s", _clamp(_channel("s", self.s), 0.0, 100.0))
        object.__setattr__(self, "v", _clamp(_channel("v", self.v), 0.0, 100.0))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"space": self.space.value, "h": self.h, "s": self.s, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> HSVColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], v=data["v"])


@dataclass(frozen=True, slots=True)
class LABColor:
    """
    A color in CIELAB relative to the D65 white point.

    Attributes:
        l: Lightness (0 = black, 100 = diffuse white)
        a: Green (-) to red (+) axis [-128, 128]
        b: Blue (-) to yellow (+) axis [-128, 128]
    """
    l: float
    a: float
    b: float

    space: ClassVar[ColorSpace] = ColorSpace.LAB

    def __post_init__(self) -> None:
        """Clamp lightness and chroma axes."""
        object.__setattr__(self, "l", _clamp(_channel("l", self.l), 0.0, 100.0))
        object.__setattr__(self, "a", _clamp(_channel("a", self.a), -128.0, 128.0))
        object.__setattr__(self, "b", _clamp(_channel("b", self.b), -128.0, 128.0))

    @property
    def chroma(self) -> float:
        """Magnitude of the (a, b) vector."""
        return math.hypot(self.a, self.b)

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no perceptible hue (gray/white/black)."""
        return self.chroma < ACHROMATIC_CHROMA

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"space": self.space.value, "l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> LABColor:
        """Deserialize from dictionary."""
        return cls(l=data["l"], a=data["a"], b=data["b"])


Color = RGBAColor | HSVColor | LABColor

_TYPES: dict[ColorSpace, type] = {
    ColorSpace.RGBA: RGBAColor,
    ColorSpace.HSV: HSVColor,
    ColorSpace.LAB: LABColor,
}


def color_from_dict(data: dict) -> Color:
    """
    Deserialize any color from a dictionary produced by ``to_dict``.

    Raises:
        ValueError: If the ``"space"`` key names no known color space
    """
    space = ColorSpace(data["space"])
    return _TYPES[space].from_dict(data)
