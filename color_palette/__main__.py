"""Allow running the demo with ``python -m color_palette``."""

from .cli import main

main()
