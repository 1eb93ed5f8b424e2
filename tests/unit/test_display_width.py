#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_display_width.py
"""Unit tests for display width measurement.

Tests cover:
- The heuristic width function (emoji, symbols, zero-width characters)
- Surrogate pair handling
- Width strategy selection, including the wcwidth strategy

"""

import sys

import pytest

from md2medium.exceptions import DependencyError
from md2medium.utils.display_width import display_width, get_width_function, wcwidth_display_width

ZERO_WIDTH_JOINER = chr(0x200D)
VARIATION_SELECTOR_16 = chr(0xFE0F)
VARIATION_SELECTOR_15 = chr(0xFE0E)
MONGOLIAN_FVS1 = chr(0x180B)


@pytest.mark.unit
class TestHeuristicDisplayWidth:
    """Tests for the default heuristic width function."""

    def test_empty_string(self):
        assert display_width("") == 0

    def test_ascii(self):
        assert display_width("A") == 1
        assert display_width("Hello, world") == 12

    def test_check_mark_is_double_width(self):
        """U+2705 is in the Dingbats block."""
        assert display_width(chr(0x2705)) == 2

    def test_supplementary_plane_emoji(self):
        assert display_width(chr(0x1F600)) == 2
        assert display_width(chr(0x1F680) + "x") == 3

    @pytest.mark.parametrize(
        "char",
        [ZERO_WIDTH_JOINER, VARIATION_SELECTOR_16, VARIATION_SELECTOR_15, MONGOLIAN_FVS1],
    )
    def test_zero_width_characters(self, char):
        assert display_width(char) == 0

    def test_emoji_with_variation_selector(self):
        """A heart followed by VS16 is still two columns."""
        assert display_width(chr(0x2764) + VARIATION_SELECTOR_16) == 2

    def test_zwj_sequence(self):
        """Each pictograph counts, the joiner does not."""
        family = chr(0x1F468) + ZERO_WIDTH_JOINER + chr(0x1F469)
        assert display_width(family) == 4

    @pytest.mark.parametrize(
        "code_point",
        [0x2600, 0x27BF, 0x2300, 0x23FF, 0x2B00, 0x2BFF],
    )
    def test_wide_symbol_range_bounds(self, code_point):
        assert display_width(chr(code_point)) == 2

    @pytest.mark.parametrize("code_point", [0x25FF, 0x27C0, 0x22FF, 0x2AFF, 0x2C00])
    def test_just_outside_wide_ranges(self, code_point):
        assert display_width(chr(code_point)) == 1

    def test_explicit_surrogate_pair_counts_once(self):
        pair = chr(0xD83D) + chr(0xDE00)
        assert display_width(pair) == 2

    def test_lone_surrogates_count_as_one(self):
        assert display_width(chr(0xD83D)) == 1
        assert display_width(chr(0xDE00)) == 1
        assert display_width(chr(0xD83D) + "a") == 2

    def test_cjk_is_narrow_in_heuristic(self):
        """The heuristic only knows symbol blocks; CJK needs the wcwidth strategy."""
        assert display_width(chr(0x4E2D)) == 1


@pytest.mark.unit
class TestWidthStrategies:
    """Tests for width strategy selection."""

    def test_heuristic_strategy(self):
        assert get_width_function("heuristic") is display_width

    def test_default_strategy_is_heuristic(self):
        assert get_width_function() is display_width

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="width strategy"):
            get_width_function("unicode")

    def test_wcwidth_strategy(self):
        pytest.importorskip("wcwidth")
        width_fn = get_width_function("wcwidth")
        assert width_fn is wcwidth_display_width
        assert width_fn("") == 0
        assert width_fn("A") == 1
        assert width_fn(chr(0x4E2D) + chr(0x6587)) == 4
        assert width_fn(chr(0x1F600)) == 2
        assert width_fn(ZERO_WIDTH_JOINER) == 0

    def test_wcwidth_control_characters_count_zero(self):
        pytest.importorskip("wcwidth")
        assert wcwidth_display_width("a\x07b") == 2

    def test_wcwidth_strategy_missing_dependency(self, monkeypatch):
        """A missing wcwidth package surfaces as DependencyError."""
        monkeypatch.setitem(sys.modules, "wcwidth", None)
        with pytest.raises(DependencyError) as exc_info:
            get_width_function("wcwidth")
        assert exc_info.value.missing_packages[0][0] == "wcwidth"
        assert "pip install" in str(exc_info.value)
