"""
Configuration dataclass for the palette demo.

This module defines the PaletteConfig dataclass that holds the options for a
demo run. The CLI builds one from its arguments, and everything downstream
reads from it instead of from argparse.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import CHANNEL_MIN, CHANNEL_MAX, SWATCHES_SUFFIX, SUMMARY_SUFFIX


@dataclass
class PaletteConfig:
    """
    Configuration for a palette demo run.

    Attributes:
        plain_output: If True, print the classic plain-text console output
                      instead of Rich tables
        colors: Colors given on the command line as RGB tuples. If empty,
                colors are read interactively.
        swatches_path: Where to write a swatches PNG (None = don't write one)
        summary_path: Where to write a text summary (None = don't write one)
        verbose: If True, show debug logging from the palette
    """

    plain_output: bool = False
    colors: List[Tuple[int, int, int]] = field(default_factory=list)
    swatches_path: Optional[str] = None
    summary_path: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration parameters."""
        for rgb in self.colors:
            if not isinstance(rgb, tuple) or len(rgb) != 3:
                raise ValueError(f"colors must be RGB tuples, got {rgb}")
            if not all(CHANNEL_MIN <= c <= CHANNEL_MAX for c in rgb):
                raise ValueError(f"color RGB values must be 0-255, got {rgb}")

        if self.swatches_path is not None and Path(self.swatches_path).suffix.lower() != ".png":
            raise ValueError(f"swatches_path must be a .png file, got {self.swatches_path}")

        if (self.swatches_path is not None and self.summary_path is not None
                and Path(self.swatches_path).resolve() == Path(self.summary_path).resolve()):
            raise ValueError("swatches_path and summary_path must be different files")

    @property
    def interactive(self) -> bool:
        """True when colors have to be read from the console."""
        return not self.colors


def default_output_paths(stem: str) -> Tuple[str, str]:
    """
    Derive swatches and summary paths from a single output stem.

    >>> default_output_paths("out/sunset")
    ('out/sunset_swatches.png', 'out/sunset.summary.txt')
    """
    return stem + SWATCHES_SUFFIX, stem + SUMMARY_SUFFIX
