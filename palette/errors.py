# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""Exception types raised by Palette."""


class PaletteError(Exception):
    """Base class for all Palette errors."""


class InvalidColorSpace(PaletteError, TypeError):
    """An operation received a color in a space it does not accept."""


class DivisionByZero(PaletteError, ZeroDivisionError):
    """Intensity rescaling was attempted on a zero-intensity color."""


class ColorParseError(PaletteError, ValueError):
    """Text could not be recognised as any supported color notation."""
