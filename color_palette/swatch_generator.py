"""
Generate a color swatches image showing each palette color with its label.

Each color gets a rectangular swatch with its "(r, g, b)" text and hex code
next to it, so a palette can be checked at a glance.
"""

import logging
from pathlib import Path
from typing import List

from PIL import Image, ImageDraw, ImageFont

from .color import Color

logger = logging.getLogger(__name__)

# Layout in pixels
SWATCH_WIDTH = 100
SWATCH_HEIGHT = 50
TEXT_WIDTH = 300
MARGIN = 20


def _load_font():
    """Try a nice monospace font, fall back to PIL's built-in one."""
    try:
        return ImageFont.truetype("consola.ttf", 16)  # Windows Consolas
    except OSError:
        try:
            return ImageFont.truetype("DejaVuSansMono.ttf", 16)  # Linux
        except OSError:
            return ImageFont.load_default()


def generate_swatches_image(
    output_path: Path,
    colors: List[Color],
    names: List[str]
) -> Path:
    """
    Generate a color swatches PNG image.

    Channels outside 0-255 are clamped for drawing only; the label shows
    whatever text the caller passed in.

    Args:
        output_path: Path of the PNG to write
        colors: Colors to draw, top to bottom
        names: One label per color (same length as colors)

    Returns:
        Path to the generated PNG file

    Raises:
        ValueError: If colors and names have different lengths, or are empty
    """
    if len(colors) != len(names):
        raise ValueError(f"Colors and names must have same length (got {len(colors)} colors, {len(names)} names)")

    if len(colors) == 0:
        raise ValueError("Cannot generate swatches for empty color list")

    row_height = SWATCH_HEIGHT + MARGIN
    img_width = MARGIN + SWATCH_WIDTH + MARGIN + TEXT_WIDTH + MARGIN
    img_height = MARGIN + (row_height * len(colors)) + MARGIN

    img = Image.new('RGB', (img_width, img_height), color=(255, 255, 255))
    draw = ImageDraw.Draw(img)
    font = _load_font()

    y_offset = MARGIN
    for color, name in zip(colors, names):
        x1 = MARGIN
        y1 = y_offset
        x2 = MARGIN + SWATCH_WIDTH
        y2 = y_offset + SWATCH_HEIGHT

        draw.rectangle([x1, y1, x2, y2], fill=color.clamped().rgb, outline=(0, 0, 0), width=2)

        # Vertically center the text next to the swatch
        text_x = x2 + MARGIN
        text_y = y_offset + (SWATCH_HEIGHT // 2) - 8
        draw.text((text_x, text_y), name, fill=(0, 0, 0), font=font)

        y_offset += row_height

    swatches_path = Path(output_path)
    swatches_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(swatches_path, "PNG")

    logger.info(f"Wrote {len(colors)} swatches to {swatches_path}")
    return swatches_path
