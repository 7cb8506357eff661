# Copyright (c) 2026 Palette
# SPDX-License-Identifier: MIT

"""
Text codec for Palette colors.

Turns CSS-style notations ("#3941C8", "rgba(...)", "hsv(...)",
"lab(...)") into typed color values and back. The numeric core never
sees strings; this is the only place text is handled.
"""

from palette.codec.base import Notation
from palette.codec.format import to_hex, to_string
from palette.codec.parse import parse

__all__ = [
    "Notation",
    "parse",
    "to_string",
    "to_hex",
]
