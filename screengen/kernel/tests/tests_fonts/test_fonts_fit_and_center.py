"""
Screengen Fonts -- Font Fit & Text Centering Tests

Font fit walks the device's font table from the largest size down and takes
the first size where the string is narrower than the tile AND the size is
below the tile height. Nothing fits → the smallest size, overflowing.

Centering is floor arithmetic on the fixed glyph width:
  offset.x = (width - min(glyph_width * len, width)) // 2
  offset.y = (height - font_size) // 2
"""

import pytest

from screengen.kernel.fonts import apply_font, fit_font_size, text_offset
from screengen.kernel.profiles import FontTable
from screengen.kernel.types import LayoutError, Offset, Rect, Text, Tile

SMALL_TABLE = FontTable(entries=((24, 17), (20, 14), (16, 11), (12, 7), (8, 5)))


def placed_tile(content, rect, font_size=None):
    return Tile(text=Text(content=content, font_size=font_size), rect=rect)


# ============================================================================
# Font fit
# ============================================================================


class TestFitFontSize:
    def test_first_match_in_descending_order_wins(self):
        # 24: 17*5 = 85 < 100 and 24 < 30, so 24 is taken before 20 is tried
        assert fit_font_size("hello", 100, 30, SMALL_TABLE) == 24

    def test_width_rules_out_large_sizes(self):
        # 24: 85 !< 80; 20: 70 < 80 and 20 < 30
        assert fit_font_size("hello", 80, 30, SMALL_TABLE) == 20

    def test_height_rules_out_large_sizes(self):
        # 24, 20 not below 18; 16: 55 < 100 and 16 < 18
        assert fit_font_size("hello", 100, 18, SMALL_TABLE) == 16

    def test_comparisons_are_strict(self):
        # 17*5 == 85 is not < 85, and 24 is not < 24
        assert fit_font_size("hello", 85, 30, SMALL_TABLE) == 20
        assert fit_font_size("hi", 100, 24, SMALL_TABLE) == 20

    def test_falls_back_to_smallest_size(self):
        assert fit_font_size("a very long label indeed", 20, 5, SMALL_TABLE) == 8

    def test_empty_content_takes_largest_size_below_height(self):
        assert fit_font_size("", 10, 21, SMALL_TABLE) == 20

    def test_line_break_marker_counts_as_a_character(self):
        # "ab\ncd" is 5 characters wide as far as fitting is concerned
        assert fit_font_size("ab\ncd", 80, 30, SMALL_TABLE) == fit_font_size("abcde", 80, 30, SMALL_TABLE)


# ============================================================================
# Centering
# ============================================================================


class TestTextOffset:
    def test_centers_in_both_axes(self):
        assert text_offset("hello", 16, 100, 30, SMALL_TABLE) == Offset(x=22, y=7)

    def test_floor_division(self):
        # (99 - 55) / 2 = 22, (31 - 16) / 2 = 7.5 → 7
        assert text_offset("hello", 16, 99, 31, SMALL_TABLE) == Offset(x=22, y=7)

    def test_overflowing_string_is_clamped_to_tile_width(self):
        assert text_offset("overflowing", 24, 50, 30, SMALL_TABLE).x == 0

    def test_font_taller_than_tile_sticks_to_top(self):
        assert text_offset("A", 24, 100, 12, SMALL_TABLE).y == 0

    def test_unknown_size_is_a_layout_error(self):
        with pytest.raises(LayoutError, match="not available"):
            text_offset("A", 13, 100, 30, SMALL_TABLE)


# ============================================================================
# apply_font
# ============================================================================


class TestApplyFont:
    def test_fits_when_no_explicit_size(self):
        node = placed_tile("hello", Rect(0, 0, 100, 30))
        apply_font(node, SMALL_TABLE)
        assert node.text.resolved_font_size == 24
        assert node.text.font_size is None
        assert node.text.offset == Offset(x=(100 - 85) // 2, y=3)

    def test_explicit_size_is_never_second_guessed(self):
        # 24 does not fit a 12px high tile; it is kept anyway
        node = placed_tile("hello", Rect(0, 0, 100, 12), font_size=24)
        apply_font(node, SMALL_TABLE)
        assert node.text.resolved_font_size == 24
        assert node.text.font_size == 24

    def test_explicit_size_is_centered(self):
        node = placed_tile("hello", Rect(10, 10, 100, 30), font_size=16)
        apply_font(node, SMALL_TABLE)
        assert node.text.offset == Offset(x=22, y=7)

    def test_unplaced_tile_is_rejected(self):
        with pytest.raises(LayoutError):
            apply_font(Tile(text=Text(content="A")), SMALL_TABLE)
