"""
RGB color value type and text helpers.

This module provides:
1. The Color value type (three integer channels)
2. color_to_string() for the "(r, g, b)" display format
3. parse_color() to read that format (or plain "r,g,b") back in

Channels are NOT range-checked here. A Color holds whatever integers it was
given; callers that need a displayable value use clamped().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import re

from .constants import CHANNEL_MIN, CHANNEL_MAX, DEFAULT_COLOR


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color.

    Frozen dataclass = structural equality and hashing for free. Two colors
    are equal iff all three channels match exactly.
    """
    red: int
    green: int
    blue: int

    @classmethod
    def from_rgb(cls, rgb: Tuple[int, int, int]) -> Color:
        """Build a Color from an (r, g, b) tuple."""
        r, g, b = rgb
        return cls(r, g, b)

    @classmethod
    def black(cls) -> Color:
        return cls.from_rgb(DEFAULT_COLOR)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def clamped(self) -> Color:
        """Return a copy with every channel clamped to 0-255."""
        return Color(*(min(max(c, CHANNEL_MIN), CHANNEL_MAX) for c in self.rgb))

    def to_hex(self) -> str:
        """Hex code of the clamped color, e.g. '#FF8000'."""
        r, g, b = self.clamped().rgb
        return f"#{r:02X}{g:02X}{b:02X}"

    def __str__(self) -> str:
        return color_to_string(self)


def color_to_string(c: Color) -> str:
    """
    Format a color as "(r, g, b)".

    Display only - this is the format every console line and summary uses.
    """
    return f"({c.red}, {c.green}, {c.blue})"


# Optional parentheses around three comma-separated (possibly negative) integers
_COLOR_PATTERN = re.compile(r"^\(?\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*\)?$")


def parse_color(text: str) -> Color:
    """
    Parse a color from "(r, g, b)" or "r,g,b" text.

    This is the inverse of color_to_string(): parse_color(color_to_string(c)) == c
    for every color, including out-of-range channels.

    Args:
        text: Text to parse

    Returns:
        The parsed Color

    Raises:
        ValueError: If the text is not three comma-separated integers
    """
    match = _COLOR_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Expected '(r, g, b)' or 'r,g,b', got {text!r}")
    r, g, b = (int(group) for group in match.groups())
    return Color(r, g, b)
