"""Unit tests for range bucketing."""

import pytest

from catalog_filters.exceptions import InvalidArgumentError
from catalog_filters.filters.ranges import split_into_ranges


@pytest.mark.unit
class TestSplitIntoRanges:
    """Tests for split_into_ranges function."""

    @pytest.mark.parametrize(
        ("min_value", "max_value", "n"),
        [(10.0, 100.0, 10), (0.0, 1.0, 3), (0.1, 0.7, 7), (-5.0, 5.0, 4), (2.5, 2.6, 1)],
    )
    def test_contiguous_cover(self, min_value, max_value, n):
        """Test ranges are contiguous and cover the whole domain exactly."""
        ranges = split_into_ranges(min_value, max_value, n)

        assert len(ranges) == n
        assert ranges[0]["min_range"] == min_value
        assert ranges[-1]["max_range"] == max_value
        for current, following in zip(ranges, ranges[1:]):
            assert current["max_range"] == following["min_range"]

    def test_even_width(self):
        """Test 10 buckets over [10, 100] are 9 wide."""
        ranges = split_into_ranges(10.0, 100.0, 10)

        assert ranges[0] == {"min_range": 10.0, "max_range": 19.0}
        assert ranges[-1] == {"min_range": 91.0, "max_range": 100.0}
        for r in ranges:
            assert r["max_range"] - r["min_range"] == pytest.approx(9.0)

    def test_last_bound_absorbs_drift(self):
        """Test float drift never pushes the last bound past max."""
        ranges = split_into_ranges(0.1, 0.7, 3)
        assert ranges[-1]["max_range"] == 0.7

    def test_no_rounding(self):
        """Test bounds are left unrounded."""
        ranges = split_into_ranges(0.0, 1.0, 3)
        assert ranges[0]["max_range"] == 1.0 / 3

    def test_degenerate_domain(self):
        """Test min == max yields n zero-width buckets."""
        ranges = split_into_ranges(5.0, 5.0, 4)
        assert ranges == [{"min_range": 5.0, "max_range": 5.0}] * 4

    def test_restartable(self):
        """Test identical inputs give identical output."""
        assert split_into_ranges(3.0, 17.5, 6) == split_into_ranges(3.0, 17.5, 6)

    def test_single_bucket(self):
        """Test one bucket spans the full domain."""
        assert split_into_ranges(1.0, 8.0, 1) == [{"min_range": 1.0, "max_range": 8.0}]

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_non_positive_count(self, n):
        """Test bucket counts below 1 are rejected."""
        with pytest.raises(InvalidArgumentError):
            split_into_ranges(0.0, 10.0, n)

    @pytest.mark.parametrize("n", [2.5, "3", True])
    def test_non_integer_count(self, n):
        """Test non-integer bucket counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            split_into_ranges(0.0, 10.0, n)

    def test_invalid_argument_is_value_error(self):
        """Test callers can catch the error as ValueError."""
        with pytest.raises(ValueError):
            split_into_ranges(0.0, 10.0, 0)

    def test_inverted_bounds(self):
        """Test min greater than max is rejected."""
        with pytest.raises(InvalidArgumentError):
            split_into_ranges(10.0, 1.0, 3)
