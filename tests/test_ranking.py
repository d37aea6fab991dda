"""Tests for basin ranking."""

import pytest

from py_basins.core.errors import InsufficientBasinsError
from py_basins.core.ranking import basin_score, largest_basin_sizes


class TestBasinRanking:
    """Test the product of the largest basins."""

    def test_sample_score(self):
        assert largest_basin_sizes([3, 9, 14, 9]) == [14, 9, 9]
        assert basin_score([3, 9, 14, 9]) == 1134

    def test_exactly_three(self):
        assert basin_score([2, 5, 7]) == 70

    def test_accepts_any_iterable(self):
        assert basin_score(size for size in [1, 1, 4, 2]) == 8

    def test_custom_count(self):
        assert basin_score([3, 9, 14, 9], count=1) == 14
        assert basin_score([3, 9, 14, 9], count=4) == 3402

    def test_too_few_basins(self):
        with pytest.raises(InsufficientBasinsError) as exc_info:
            basin_score([10, 4])

        assert exc_info.value.found == 2
        assert exc_info.value.required == 3

    def test_no_basins(self):
        with pytest.raises(InsufficientBasinsError):
            largest_basin_sizes([])

    @pytest.mark.parametrize("count", [0, -2])
    def test_invalid_count(self, count):
        with pytest.raises(ValueError):
            basin_score([1, 2, 3], count=count)
