"""
Configuration constants for the color palette.

All the magic numbers and console strings live here. The prompt and label
strings are kept verbatim so plain-mode output matches the classic console
demo line for line.
"""

__version__ = "1.0.0"

# ============================================================================
# Palette Limits
# ============================================================================

# Maximum number of colors a palette can hold
# This is a fixed capacity, not a default - every palette gets exactly this many slots
MAX_PALETTE_SIZE = 10

# Color returned by the analytics when the palette is empty (black)
DEFAULT_COLOR = (0, 0, 0)

# Conventional channel range (only enforced on command-line input)
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# ============================================================================
# Demo Prompts & Labels
# ============================================================================

COUNT_PROMPT = f"How many colors would you like to add (max {MAX_PALETTE_SIZE})? "
COLOR_HEADER = "Enter RGB values for color {index}: "
RED_PROMPT = "Red (0–255): "
GREEN_PROMPT = "Green (0–255): "
BLUE_PROMPT = "Blue (0–255): "

DISPLAY_HEADER = "Current Colors in Palette:"
AVERAGE_LABEL = "Average color: "
MOST_FREQUENT_LABEL = "Most frequent color: "
SIZE_LABEL = "Palette size: "
EMPTY_LABEL = "Is empty? "

# ============================================================================
# Output Files
# ============================================================================

# Suffixes used when only an output stem is given
SWATCHES_SUFFIX = "_swatches.png"
SUMMARY_SUFFIX = ".summary.txt"
