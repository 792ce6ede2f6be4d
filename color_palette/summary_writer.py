"""
Summary file writer module.

This module writes a plain text report of a palette: every color with its
hex code, followed by the average color, the most frequent color and the
size. It is an export for people to read - nothing loads it back.
"""

import logging
from pathlib import Path
from typing import List

from .color import color_to_string
from .palette import ColorPalette

logger = logging.getLogger(__name__)


def build_summary_lines(palette: ColorPalette) -> List[str]:
    """
    Build the summary report as a list of lines.

    Args:
        palette: Palette to describe

    Returns:
        Lines of the report (no trailing newlines)
    """
    lines = []
    lines.append("=" * 70)
    lines.append("Color Palette Summary")
    lines.append("=" * 70)
    lines.append("")
    lines.append(f"Colors: {palette.size()} of {palette.capacity}")
    lines.append("")

    if palette.is_empty():
        lines.append("(palette is empty)")
        lines.append("")
    else:
        lines.append("Colors Used:")
        lines.append("-" * 70)
        lines.append("")
        for i, color in enumerate(palette, start=1):
            lines.append(f"{i}. {color_to_string(color)}")
            lines.append(f"   Hex: {color.to_hex()}")
            lines.append("")

    lines.append("-" * 70)
    lines.append(f"Average color: {color_to_string(palette.average_color())}")
    lines.append(f"Most frequent color: {color_to_string(palette.most_frequent())}")
    lines.append(f"Palette size: {palette.size()}")
    lines.append(f"Is empty? {str(palette.is_empty()).lower()}")
    lines.append("=" * 70)
    return lines


def write_summary_file(output_path: str, palette: ColorPalette) -> str:
    """
    Write a summary file describing the palette.

    Args:
        output_path: Path of the summary file to write
        palette: Palette to describe

    Returns:
        Path to the generated summary file
    """
    summary_path = Path(output_path)
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    summary_path.write_text('\n'.join(build_summary_lines(palette)) + '\n', encoding='utf-8')

    logger.info(f"Wrote summary for {palette.size()} colors to {summary_path}")
    return str(summary_path)
