"""
Fixed-capacity color palette.

ColorPalette keeps up to MAX_PALETTE_SIZE colors in insertion order. The
kernel operations are stack-like (append at the tail, remove the last one)
and the analytics (average_color, most_frequent) are read-only scans.

Preconditions are contracts, not recoverable errors: breaking one raises
PaletteContractError, which means the caller has a bug.
"""

import logging
from typing import Iterator, List, Optional, TextIO

from .color import Color, color_to_string
from .constants import MAX_PALETTE_SIZE, DISPLAY_HEADER

# Set up logging for this module
logger = logging.getLogger(__name__)


class PaletteContractError(AssertionError):
    """
    Raised when a palette operation is called with a broken precondition.

    Subclasses AssertionError because that is what it is - a failed
    assertion about the caller. It is raised explicitly so running Python
    with -O does not switch the checks off.
    """


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise PaletteContractError(f"Violation of: {message}")


class ColorPalette:
    """
    A bounded, ordered collection of colors.

    Storage is a fixed list of MAX_PALETTE_SIZE slots plus a count. Only
    the first `count` slots are part of the palette; anything after that
    is unused storage.
    """

    capacity = MAX_PALETTE_SIZE

    def __init__(self) -> None:
        self._colors: List[Optional[Color]] = [None] * self.capacity
        self._count = 0

    # ------------------------------------------------------------------
    # Kernel
    # ------------------------------------------------------------------

    def add_color(self, c: Color) -> None:
        """
        Append a color to the end of the palette.

        Args:
            c: Color to add

        Raises:
            PaletteContractError: If c is not a Color or the palette is full
        """
        _require(isinstance(c, Color), "c is a Color")
        _require(self._count < self.capacity, f"size < {self.capacity}")

        self._colors[self._count] = c
        self._count += 1
        logger.debug(f"Added {color_to_string(c)} (size={self._count})")

    def remove_color(self) -> Color:
        """
        Remove and return the most recently added color.

        Raises:
            PaletteContractError: If the palette is empty
        """
        _require(self._count > 0, "size > 0")

        self._count -= 1
        removed = self._colors[self._count]
        self._colors[self._count] = None
        logger.debug(f"Removed {color_to_string(removed)} (size={self._count})")
        return removed

    def contains(self, c: Color) -> bool:
        """True if an equal color is in the palette."""
        _require(isinstance(c, Color), "c is a Color")
        return any(entry == c for entry in self)

    def is_empty(self) -> bool:
        return self._count == 0

    def size(self) -> int:
        return self._count

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    def average_color(self) -> Color:
        """
        Blend all colors by averaging each channel.

        Each channel is the channel sum divided by the size, truncated
        (never rounded): averaging (255, 0, 0) and (0, 0, 1) gives
        (127, 0, 0).

        Returns:
            The average color, or black if the palette is empty
        """
        if self._count == 0:
            return Color.black()

        totals = [0, 0, 0]
        for c in self:
            totals[0] += c.red
            totals[1] += c.green
            totals[2] += c.blue

        avg = Color(*(_truncating_div(total, self._count) for total in totals))
        logger.debug(f"Average of {self._count} colors: {color_to_string(avg)}")
        return avg

    def most_frequent(self) -> Color:
        """
        Find the color that appears most often.

        Ties go to the color inserted first: the best is only replaced on a
        strictly higher count, and positions are visited in insertion order.

        Returns:
            The most frequent color, or black if the palette is empty
        """
        entries = list(self)
        result = Color.black()
        max_count = 0

        for i, color in enumerate(entries):
            # Occurrences from this position onward, this one included
            current_count = entries[i:].count(color)
            if current_count > max_count:
                max_count = current_count
                result = color

        logger.debug(f"Most frequent: {color_to_string(result)} x{max_count}")
        return result

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display(self, out: TextIO) -> None:
        """Write the header line and one "(r, g, b)" line per color."""
        out.write(DISPLAY_HEADER + "\n")
        for c in self:
            out.write(color_to_string(c) + "\n")

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Color]:
        for i in range(self._count):
            yield self._colors[i]

    def __contains__(self, c: object) -> bool:
        return isinstance(c, Color) and self.contains(c)

    def __repr__(self) -> str:
        colors = ", ".join(color_to_string(c) for c in self)
        return f"ColorPalette([{colors}], size={self._count}/{self.capacity})"


def _truncating_div(total: int, count: int) -> int:
    """Integer division that truncates toward zero (floor for non-negative totals)."""
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient
