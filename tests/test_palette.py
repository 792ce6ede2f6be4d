"""
Unit tests for the palette module.

Tests the kernel operations (add, remove, contains, is_empty, size), the
analytics (average_color, most_frequent), the contract checks and display.
"""

import io
import unittest
import sys
from pathlib import Path

# Add parent directory to path to import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from color_palette.color import Color
from color_palette.constants import MAX_PALETTE_SIZE
from color_palette.palette import ColorPalette, PaletteContractError
from tests.helpers import make_palette, RED, GREEN, BLUE, WHITE, BLACK


class TestKernel(unittest.TestCase):
    """Test add/remove/contains/is_empty/size."""

    def test_new_palette_is_empty(self):
        """A new palette has no colors."""
        palette = ColorPalette()
        self.assertTrue(palette.is_empty())
        self.assertEqual(palette.size(), 0)
        self.assertEqual(len(palette), 0)
        self.assertEqual(list(palette), [])

    def test_capacity_is_ten(self):
        self.assertEqual(ColorPalette.capacity, 10)
        self.assertEqual(MAX_PALETTE_SIZE, 10)

    def test_add_increases_size(self):
        """Each add grows the palette by one."""
        palette = ColorPalette()
        palette.add_color(RED)
        self.assertEqual(palette.size(), 1)
        self.assertFalse(palette.is_empty())
        palette.add_color(GREEN)
        self.assertEqual(palette.size(), 2)

    def test_insertion_order_preserved(self):
        """Iteration follows insertion order, no sorting."""
        palette = make_palette(BLUE, RED, GREEN)
        self.assertEqual(list(palette), [BLUE, RED, GREEN])

    def test_duplicates_kept(self):
        """Adding the same color twice stores it twice."""
        palette = make_palette(RED, RED)
        self.assertEqual(palette.size(), 2)

    def test_remove_is_lifo(self):
        """Add A, B, C; removes give C then B; one left."""
        palette = make_palette(RED, GREEN, BLUE)
        self.assertEqual(palette.remove_color(), BLUE)
        self.assertEqual(palette.remove_color(), GREEN)
        self.assertEqual(palette.size(), 1)
        self.assertEqual(list(palette), [RED])

    def test_remove_last_empties_palette(self):
        palette = make_palette(WHITE)
        self.assertEqual(palette.remove_color(), WHITE)
        self.assertTrue(palette.is_empty())

    def test_size_tracks_adds_minus_removes(self):
        """size() is always net adds minus removes, within 0..10."""
        palette = ColorPalette()
        script = ["add"] * 4 + ["remove"] * 2 + ["add"] * 8 + ["remove"] * 10
        expected = 0
        for i, step in enumerate(script):
            if step == "add":
                palette.add_color(Color(i, i, i))
                expected += 1
            else:
                palette.remove_color()
                expected -= 1
            self.assertEqual(palette.size(), expected)
            self.assertTrue(0 <= palette.size() <= MAX_PALETTE_SIZE)

    def test_fill_to_capacity(self):
        """Exactly ten colors fit."""
        palette = make_palette(*[(i, 0, 0) for i in range(MAX_PALETTE_SIZE)])
        self.assertEqual(palette.size(), MAX_PALETTE_SIZE)

    def test_reuse_after_remove(self):
        """A slot freed by remove can be filled again."""
        palette = make_palette(*[(i, 0, 0) for i in range(MAX_PALETTE_SIZE)])
        palette.remove_color()
        palette.add_color(WHITE)
        self.assertEqual(palette.remove_color(), WHITE)

    def test_contains(self):
        palette = make_palette(RED, GREEN)
        self.assertTrue(palette.contains(RED))
        self.assertTrue(palette.contains(Color(0, 255, 0)))  # structural equality
        self.assertFalse(palette.contains(BLUE))

    def test_contains_after_removing_one_duplicate(self):
        """Add red twice, remove once: red is still there."""
        palette = make_palette(RED, RED)
        palette.remove_color()
        self.assertTrue(palette.contains(RED))
        palette.remove_color()
        self.assertFalse(palette.contains(RED))

    def test_contains_ignores_removed_colors(self):
        """Removed colors are not found even though storage held them."""
        palette = make_palette(RED, BLUE)
        palette.remove_color()
        self.assertFalse(palette.contains(BLUE))

    def test_in_operator(self):
        palette = make_palette(RED)
        self.assertIn(RED, palette)
        self.assertNotIn(BLUE, palette)
        self.assertNotIn((255, 0, 0), palette)  # tuples aren't colors

    def test_repr(self):
        palette = make_palette(RED)
        self.assertEqual(repr(palette), "ColorPalette([(255, 0, 0)], size=1/10)")


class TestContracts(unittest.TestCase):
    """Test that broken preconditions fail fast."""

    def test_eleventh_add_fails(self):
        """Adding past capacity raises instead of wrapping."""
        palette = make_palette(*[(i, i, i) for i in range(MAX_PALETTE_SIZE)])
        with self.assertRaises(PaletteContractError):
            palette.add_color(RED)
        self.assertEqual(palette.size(), MAX_PALETTE_SIZE)
        self.assertNotIn(RED, palette)

    def test_remove_from_empty_fails(self):
        with self.assertRaises(PaletteContractError):
            ColorPalette().remove_color()

    def test_add_non_color_fails(self):
        palette = ColorPalette()
        with self.assertRaises(PaletteContractError):
            palette.add_color(None)
        with self.assertRaises(PaletteContractError):
            palette.add_color((255, 0, 0))
        self.assertTrue(palette.is_empty())

    def test_contains_non_color_fails(self):
        with self.assertRaises(PaletteContractError):
            make_palette(RED).contains(None)

    def test_contract_error_is_assertion_error(self):
        """Contract violations are assertion failures, not ValueErrors."""
        self.assertTrue(issubclass(PaletteContractError, AssertionError))
        self.assertFalse(issubclass(PaletteContractError, ValueError))

    def test_contract_message(self):
        with self.assertRaisesRegex(PaletteContractError, "Violation of: size > 0"):
            ColorPalette().remove_color()


class TestAverageColor(unittest.TestCase):
    """Test average_color()."""

    def test_empty_is_black(self):
        self.assertEqual(ColorPalette().average_color(), BLACK)

    def test_single_color(self):
        self.assertEqual(make_palette((10, 20, 30)).average_color(), Color(10, 20, 30))

    def test_truncates_instead_of_rounding(self):
        """(255,0,0) and (0,0,1) average to (127,0,0): 127.5 -> 127, 0.5 -> 0."""
        palette = make_palette((255, 0, 0), (0, 0, 1))
        self.assertEqual(palette.average_color(), Color(127, 0, 0))

    def test_truncates_two_thirds(self):
        """(0,0,0), (1,1,1), (1,1,1) -> 2/3 truncates to 0."""
        palette = make_palette((0, 0, 0), (1, 1, 1), (1, 1, 1))
        self.assertEqual(palette.average_color(), Color(0, 0, 0))

    def test_primaries(self):
        palette = make_palette(RED, GREEN, BLUE)
        self.assertEqual(palette.average_color(), Color(85, 85, 85))

    def test_only_valid_entries_count(self):
        """Removed colors don't affect the average."""
        palette = make_palette(RED, WHITE)
        palette.remove_color()
        self.assertEqual(palette.average_color(), RED)

    def test_out_of_range_channels_not_validated(self):
        """Channels are averaged as-is, even outside 0-255."""
        palette = make_palette((300, 0, 0), (100, 0, 0))
        self.assertEqual(palette.average_color(), Color(200, 0, 0))

    def test_negative_total_truncates_toward_zero(self):
        palette = make_palette((-3, 0, 0), (0, 0, 0))
        self.assertEqual(palette.average_color(), Color(-1, 0, 0))

    def test_average_does_not_mutate(self):
        palette = make_palette(RED, BLUE)
        palette.average_color()
        self.assertEqual(list(palette), [RED, BLUE])


class TestMostFrequent(unittest.TestCase):
    """Test most_frequent()."""

    def test_empty_is_black(self):
        self.assertEqual(ColorPalette().most_frequent(), BLACK)

    def test_repeated_color_wins(self):
        """[red, blue, red] -> red."""
        self.assertEqual(make_palette(RED, BLUE, RED).most_frequent(), RED)

    def test_no_repeats_first_wins(self):
        """[red, blue] -> red (tie at one, first inserted wins)."""
        self.assertEqual(make_palette(RED, BLUE).most_frequent(), RED)

    def test_later_color_with_more_occurrences_wins(self):
        palette = make_palette(RED, BLUE, BLUE, GREEN, BLUE, RED)
        self.assertEqual(palette.most_frequent(), BLUE)

    def test_tie_goes_to_earliest_inserted(self):
        """Blue and red both appear twice; blue was inserted first."""
        palette = make_palette(GREEN, BLUE, RED, RED, BLUE)
        self.assertEqual(palette.most_frequent(), BLUE)

    def test_removed_colors_ignored(self):
        palette = make_palette(RED, BLUE, BLUE)
        palette.remove_color()
        self.assertEqual(palette.most_frequent(), RED)


class TestDisplay(unittest.TestCase):
    """Test display()."""

    def test_display_lists_colors_in_order(self):
        out = io.StringIO()
        make_palette(RED, (1, 2, 3)).display(out)
        self.assertEqual(
            out.getvalue(),
            "Current Colors in Palette:\n(255, 0, 0)\n(1, 2, 3)\n"
        )

    def test_display_empty(self):
        out = io.StringIO()
        ColorPalette().display(out)
        self.assertEqual(out.getvalue(), "Current Colors in Palette:\n")


if __name__ == '__main__':
    unittest.main()
