#!/usr/bin/env python3
"""
Command-line interface for the color palette demo.

This module handles all the CLI-specific stuff: argument parsing, prompting
for colors, pretty printing and error display. The palette itself lives in
palette.py and can be imported/used programmatically.

Two output styles:
- Rich (default): panels and tables, colors shown as real swatches
- Plain (--plain): the classic console text, line for line
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.markup import escape
from rich import box

from .constants import (
    MAX_PALETTE_SIZE,
    CHANNEL_MIN,
    CHANNEL_MAX,
    COUNT_PROMPT,
    COLOR_HEADER,
    RED_PROMPT,
    GREEN_PROMPT,
    BLUE_PROMPT,
    AVERAGE_LABEL,
    MOST_FREQUENT_LABEL,
    SIZE_LABEL,
    EMPTY_LABEL,
    __version__
)
from .color import Color, color_to_string, parse_color
from .config import PaletteConfig, default_output_paths
from .palette import ColorPalette
from .summary_writer import write_summary_file
from .swatch_generator import generate_swatches_image

# Create Rich consoles for output and errors
console = Console()
error_console = Console(stderr=True)


def parse_rgb_arg(text: str) -> Tuple[int, int, int]:
    """
    Parse a command-line color like '255,128,0' and check the range.

    Unlike interactive input, colors given as arguments must be 0-255.

    Raises:
        ValueError: If the text is malformed or a channel is out of range
    """
    rgb = parse_color(text).rgb
    if not all(CHANNEL_MIN <= c <= CHANNEL_MAX for c in rgb):
        raise ValueError("RGB values must be 0-255")
    return rgb


def read_integer(ask: Callable[[str], str], prompt: str) -> int:
    """Ask for one integer. Raises ValueError if the answer isn't one."""
    answer = ask(prompt).strip()
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"Expected a whole number, got {answer!r}") from None


def collect_colors(
    palette: ColorPalette,
    ask: Callable[[str], str],
    say: Callable[[str], None]
) -> ColorPalette:
    """
    Prompt for a count, then for that many colors, adding each one.

    The count is capped at the palette capacity. Channels are added exactly
    as typed - no range check.

    Args:
        palette: Palette to fill
        ask: Shows a prompt and returns the typed line
        say: Prints a full line

    Returns:
        The same palette, for chaining
    """
    num_colors = read_integer(ask, COUNT_PROMPT)

    i = 0
    while i < num_colors and i < MAX_PALETTE_SIZE:
        say(COLOR_HEADER.format(index=i + 1))
        r = read_integer(ask, RED_PROMPT)
        g = read_integer(ask, GREEN_PROMPT)
        b = read_integer(ask, BLUE_PROMPT)

        palette.add_color(Color(r, g, b))
        i += 1

    return palette


def build_palette(colors: List[Tuple[int, int, int]]) -> ColorPalette:
    """
    Build a palette from RGB tuples, keeping at most MAX_PALETTE_SIZE.

    Extra colors are dropped with a warning, the same cap the prompts use.
    """
    if len(colors) > MAX_PALETTE_SIZE:
        error_console.print(
            f"[yellow]⚠️  {len(colors)} colors given, only the first "
            f"{MAX_PALETTE_SIZE} will be used[/yellow]"
        )

    palette = ColorPalette()
    for rgb in colors[:MAX_PALETTE_SIZE]:
        palette.add_color(Color.from_rgb(rgb))
    return palette


# ============================================================================
# Plain output
# ============================================================================

def write_plain_report(palette: ColorPalette, out: TextIO) -> None:
    """Write the colors list and the statistics as plain text."""
    out.write("\n")
    palette.display(out)

    out.write("\n")
    out.write(AVERAGE_LABEL + color_to_string(palette.average_color()) + "\n")
    out.write(MOST_FREQUENT_LABEL + color_to_string(palette.most_frequent()) + "\n")
    out.write(SIZE_LABEL + str(palette.size()) + "\n")
    out.write(EMPTY_LABEL + str(palette.is_empty()).lower() + "\n")


def run_plain(config: PaletteConfig, in_stream: TextIO, out_stream: TextIO) -> ColorPalette:
    """
    Run the demo with plain text streams.

    Raises:
        ValueError: If an answer isn't a whole number
        EOFError: If the input ends before all answers are read
    """
    def ask(prompt: str) -> str:
        out_stream.write(prompt)
        out_stream.flush()
        line = in_stream.readline()
        if not line:
            raise EOFError("Input ended before all values were entered")
        return line

    def say(line: str) -> None:
        out_stream.write(line + "\n")

    if config.interactive:
        palette = collect_colors(ColorPalette(), ask, say)
    else:
        palette = build_palette(config.colors)

    write_plain_report(palette, out_stream)
    return palette


# ============================================================================
# Rich output
# ============================================================================

def render_report(palette: ColorPalette, out: Console) -> None:
    """Print the colors table and the statistics table."""
    colors_table = Table(title="Current Colors in Palette", box=box.ROUNDED,
                         show_header=True, header_style="bold cyan")
    colors_table.add_column("#", style="dim", justify="right")
    colors_table.add_column("RGB", style="white")
    colors_table.add_column("Hex", style="bold yellow")
    colors_table.add_column("Swatch")

    for i, color in enumerate(palette, start=1):
        swatch = Text(" " * 8, style=f"on {color.to_hex().lower()}")
        colors_table.add_row(str(i), color_to_string(color), color.to_hex(), swatch)

    if palette.is_empty():
        out.print("[yellow]⚠️  The palette is empty[/yellow]")
    else:
        out.print(colors_table)
    out.print()

    average = palette.average_color()
    frequent = palette.most_frequent()

    stats_table = Table(show_header=False, box=box.SIMPLE, padding=(0, 1))
    stats_table.add_column("Label", style="bold cyan")
    stats_table.add_column("Value", style="white")

    stats_table.add_row("Average color:", f"{color_to_string(average)} {average.to_hex()}")
    stats_table.add_row("Most frequent color:", f"{color_to_string(frequent)} {frequent.to_hex()}")
    stats_table.add_row("Palette size:", f"{palette.size()} of {palette.capacity}")
    stats_table.add_row("Is empty?", "Yes" if palette.is_empty() else "No")

    out.print(stats_table)


def run_rich(config: PaletteConfig, out: Console, stream: Optional[TextIO] = None) -> ColorPalette:
    """
    Run the demo on a Rich console.

    Args:
        config: Demo configuration
        out: Console to print to
        stream: Optional stream to read answers from (defaults to stdin)
    """
    out.print(Panel.fit(
        "[bold cyan]🎨 Color Palette[/bold cyan]",
        border_style="cyan"
    ))
    out.print()

    def ask(prompt: str) -> str:
        answer = out.input(f"[yellow]{prompt}[/yellow]", stream=stream)
        if stream is not None and not answer:
            raise EOFError("Input ended before all values were entered")
        return answer

    def say(line: str) -> None:
        out.print(f"[bold cyan]{line}[/bold cyan]")

    if config.interactive:
        palette = collect_colors(ColorPalette(), ask, say)
        out.print()
    else:
        palette = build_palette(config.colors)

    render_report(palette, out)
    return palette


def write_outputs(config: PaletteConfig, palette: ColorPalette) -> List[str]:
    """Write the optional swatches image and summary file. Returns the paths written."""
    written = []

    if config.swatches_path:
        if palette.is_empty():
            error_console.print("[yellow]⚠️  Palette is empty, no swatches image written[/yellow]")
        else:
            colors = list(palette)
            names = [f"{color_to_string(c)} {c.to_hex()}" for c in colors]
            written.append(str(generate_swatches_image(config.swatches_path, colors, names)))

    if config.summary_path:
        written.append(write_summary_file(config.summary_path, palette))

    return written


def configure_logging(verbose: bool) -> None:
    """Show the palette's debug logging on stderr when verbose."""
    if not verbose:
        return

    palette_logger = logging.getLogger('color_palette')
    palette_logger.setLevel(logging.DEBUG)

    # Add handler only if one doesn't exist
    if not palette_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('   [PALETTE] %(message)s'))
        palette_logger.addHandler(handler)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""

    parser = argparse.ArgumentParser(
        description="Build a palette of up to 10 RGB colors and summarize it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive - you will be asked for each color
  %(prog)s
  %(prog)s --plain

  # Colors on the command line
  %(prog)s --color 255,0,0 --color 0,0,255 --color 255,0,0
  %(prog)s -c 255,128,0 -c 0,128,255 --output sunset
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program's version number and exit"
    )

    parser.add_argument(
        "-c", "--color",
        dest="colors",
        action="append",
        default=[],
        metavar="R,G,B",
        help=f"Add a color as R,G,B (e.g., '255,0,0'). Repeat for more colors "
             f"(max {MAX_PALETTE_SIZE}). Skips the interactive prompts."
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print plain text instead of tables"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output stem: writes {stem}_swatches.png and {stem}.summary.txt"
    )

    parser.add_argument(
        "--swatches",
        type=str,
        default=None,
        help="Write a swatches PNG to this path"
    )

    parser.add_argument(
        "--summary",
        type=str,
        default=None,
        help="Write a text summary to this path"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    # Parse command-line colors
    colors = []
    for text in args.colors:
        try:
            colors.append(parse_rgb_arg(text))
        except ValueError as e:
            error_console.print(f"[red]❌ Error: Invalid color '{escape(text)}': {escape(str(e))}[/red]")
            error_console.print("[red]   Format: R,G,B (e.g., '255,255,255' for white)[/red]")
            sys.exit(1)

    swatches_path, summary_path = args.swatches, args.summary
    if args.output:
        default_swatches, default_summary = default_output_paths(args.output)
        swatches_path = swatches_path or default_swatches
        summary_path = summary_path or default_summary

    try:
        config = PaletteConfig(
            plain_output=args.plain,
            colors=colors,
            swatches_path=swatches_path,
            summary_path=summary_path,
            verbose=args.verbose
        )
    except ValueError as e:
        error_console.print(f"[red]❌ Error: Invalid configuration: {escape(str(e))}[/red]")
        sys.exit(1)

    configure_logging(config.verbose)

    try:
        if config.plain_output:
            palette = run_plain(config, sys.stdin, sys.stdout)
        else:
            palette = run_rich(config, console)
    except (ValueError, EOFError) as e:
        error_console.print(f"\n[red]❌ Error: {escape(str(e))}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        error_console.print("\n[red]Cancelled.[/red]")
        sys.exit(1)

    try:
        written = write_outputs(config, palette)
    except OSError as e:
        error_console.print(f"\n[red]❌ Error: Could not write output: {escape(str(e))}[/red]")
        sys.exit(1)

    for path in written:
        if config.plain_output:
            print(f"Wrote {path}")
        else:
            console.print(f"[cyan]📄 Wrote {escape(path)}[/cyan]")


if __name__ == "__main__":
    main()
