"""
Test helper utilities for creating palettes and colors.

Named colors and small builders used across multiple test files.
"""

from typing import Tuple

from color_palette.color import Color
from color_palette.palette import ColorPalette

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def make_palette(*rgbs: Tuple[int, int, int]) -> ColorPalette:
    """
    Create a palette holding the given colors, in order.

    Args:
        *rgbs: RGB tuples (or Color objects) to add

    Returns:
        A new ColorPalette
    """
    palette = ColorPalette()
    for rgb in rgbs:
        palette.add_color(rgb if isinstance(rgb, Color) else Color.from_rgb(rgb))
    return palette
