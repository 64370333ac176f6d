"""Tests for math_utils rounding and percentage helpers."""

from __future__ import annotations

from progress_engine.utils.math_utils import (
    calculate_percentage,
    clamp,
    floor_multiply,
    round_half_up,
    round_score,
)


class TestRounding:
    """Tests for half-up rounding."""

    def test_half_goes_up(self) -> None:
        """Test .5 rounds up where round() would go to even."""
        assert round_half_up(2.5) == 3
        assert round_half_up(42.5) == 43

    def test_precision(self) -> None:
        """Test rounding at two decimals."""
        assert round_half_up(84.125, 2) == 84.13
        assert round_score(84.456) == 84.46

    def test_negative_half(self) -> None:
        """Test negative halves round away from zero."""
        assert round_half_up(-2.5) == -3


class TestArithmetic:
    """Tests for multiplier and percentage helpers."""

    def test_floor_multiply(self) -> None:
        """Test products are truncated."""
        assert floor_multiply(7, 1.5) == 10
        assert floor_multiply(25, 2) == 50

    def test_percentage(self) -> None:
        """Test whole-number percentages."""
        assert calculate_percentage(3, 7) == 43
        assert calculate_percentage(1, 8) == 13

    def test_empty_range_is_complete(self) -> None:
        """Test a zero target reports 100."""
        assert calculate_percentage(0, 0) == 100

    def test_clamp(self) -> None:
        """Test values are bounded."""
        assert clamp(150, 0, 100) == 100
        assert clamp(-10, 0, 100) == 0
        assert clamp(50, 0, 100) == 50


class TestRoundingMagnitude:
    """Tests for rounding values outside everyday score ranges."""

    def test_large_magnitude(self) -> None:
        """Test values wider than the default decimal precision round cleanly."""
        assert round_half_up(1e30) == 1e30
        assert round_half_up(-1e30, 2) == -1e30

    def test_non_finite_passthrough(self) -> None:
        """Test infinities are returned unchanged."""
        assert round_half_up(float("inf")) == float("inf")
        assert round_half_up(float("-inf"), 2) == float("-inf")
