"""
Color Palette Package

A fixed-capacity palette of RGB colors with stack-like add/remove, membership
checks, and two analytics: the average (blended) color and the most frequent
color. Includes a console demo that prompts for colors and prints a summary.
"""

from .constants import __version__, MAX_PALETTE_SIZE

# Make the CLI main function easily accessible
from .cli import main

# Core types
from .color import Color, color_to_string, parse_color
from .palette import ColorPalette, PaletteContractError
from .config import PaletteConfig

# Output writers
from .summary_writer import write_summary_file
from .swatch_generator import generate_swatches_image

__all__ = [
    "__version__",
    "MAX_PALETTE_SIZE",
    "main",
    "Color",
    "color_to_string",
    "parse_color",
    "ColorPalette",
    "PaletteContractError",
    "PaletteConfig",
    "write_summary_file",
    "generate_swatches_image"
]
