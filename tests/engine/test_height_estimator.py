"""Tests for the chars-per-line height heuristic."""

import pytest

from certlayout.engine.height_estimator import (
    MIN_CHARS_PER_LINE,
    chars_per_line,
    estimate_line_count,
    estimate_list_height,
    estimate_paragraph_height,
    wrap_text,
)


class TestCharsPerLine:
    """Test suite for chars_per_line."""

    def test_width_over_half_em(self):
        """435pt at 12.5pt holds 69 characters."""
        assert chars_per_line(435.0, 12.5) == 69

    def test_minimum_applies_to_narrow_columns(self):
        assert chars_per_line(20.0, 12.0) == MIN_CHARS_PER_LINE

    def test_non_positive_width_is_clamped(self):
        assert chars_per_line(0.0, 12.0) == MIN_CHARS_PER_LINE
        assert chars_per_line(-50.0, 12.0) == MIN_CHARS_PER_LINE


class TestParagraphHeight:
    """Test suite for estimate_paragraph_height."""

    def test_empty_text_reserves_one_line(self):
        assert estimate_paragraph_height("", 200.0, 10.0, 1.2) == pytest.approx(12.0)

    def test_newlines_force_breaks(self):
        assert estimate_line_count("a\nb\nc", 500.0, 10.0) == 3
        assert estimate_paragraph_height("a\n\nc", 500.0, 10.0, 1.0) == pytest.approx(30.0)

    def test_long_manual_paragraph(self):
        """2000 characters at 435pt / 12.5pt / 1.18 wrap to 29 lines."""
        height = estimate_paragraph_height("x" * 2000, 435.0, 12.5, 1.18)
        assert height == pytest.approx(29 * 12.5 * 1.18)

    def test_monotonic_in_text_length(self):
        heights = [estimate_paragraph_height("w" * n, 150.0, 11.0, 1.1) for n in range(0, 400, 7)]
        assert all(a <= b for a, b in zip(heights, heights[1:]))

    def test_monotonic_in_width(self):
        text = "palabra " * 60
        heights = [estimate_paragraph_height(text, width, 11.0, 1.1) for width in range(-10, 800, 15)]
        assert all(a >= b for a, b in zip(heights, heights[1:]))

    def test_zero_width_equals_minimum_width(self):
        assert estimate_paragraph_height("y" * 35, 0.0, 10.0, 1.0) == estimate_paragraph_height(
            "y" * 35, 1.0, 10.0, 1.0
        )


class TestListHeight:
    """Test suite for estimate_list_height."""

    def test_empty_list_has_no_height(self):
        assert estimate_list_height([], 300.0, 10.0, 1.0, 3.0, 12.0) == 0.0

    def test_items_wrap_inside_bullet_indent(self):
        # 112pt - 12pt indent = 100pt -> 20 chars per line at 10pt
        items = ["a" * 20, "b" * 21]
        height = estimate_list_height(items, 112.0, 10.0, 1.0, 3.0, 12.0)
        assert height == pytest.approx((10.0 + 3.0) + (20.0 + 3.0))


class TestWrapText:
    """Test suite for wrap_text."""

    def test_lines_respect_chars_per_line(self):
        text = "uno dos tres cuatro cinco seis siete ocho nueve diez once doce"
        per_line = chars_per_line(100.0, 10.0)
        lines = wrap_text(text, 100.0, 10.0)
        assert all(len(line) <= per_line for line in lines)
        assert " ".join(lines) == text

    def test_long_words_are_split(self):
        lines = wrap_text("x" * 45, 100.0, 10.0)
        assert lines == ["x" * 20, "x" * 20, "x" * 5]

    def test_newlines_are_kept(self):
        assert wrap_text("a\nb", 200.0, 10.0) == ["a", "b"]
