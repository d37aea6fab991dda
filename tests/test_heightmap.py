"""Tests for height map parsing."""

import numpy as np
import pytest

from py_basins.core.errors import (
    EmptyHeightmapError,
    HeightmapError,
    InvalidHeightError,
    RaggedHeightmapError,
)
from py_basins.core.heightmap import HeightMap, load_heightmap, parse_heightmap


class TestParseHeightmap:
    """Test text parsing."""

    def test_sample_shape_and_values(self, sample_heightmap):
        assert sample_heightmap.shape == (5, 10)
        assert sample_heightmap.size == 50
        assert sample_heightmap.to_rows()[0] == [2, 1, 9, 9, 9, 4, 3, 2, 1, 0]
        assert sample_heightmap.height_at((4, 9)) == 8
        assert sample_heightmap.heights.dtype == np.uint8

    def test_blank_lines_skipped(self):
        heightmap = parse_heightmap("\n\n  123 \n\n\t456\n   \n")
        np.testing.assert_array_equal(heightmap.heights, [[1, 2, 3], [4, 5, 6]])

    def test_windows_line_endings(self):
        heightmap = parse_heightmap("12\r\n34\r\n")
        assert heightmap.to_rows() == [[1, 2], [3, 4]]

    def test_non_digit_rejected_with_position(self):
        with pytest.raises(InvalidHeightError) as exc_info:
            parse_heightmap("123\n 4x6\n789")

        error = exc_info.value
        assert error.character == "x"
        assert error.line == 2
        assert error.column == 3

    def test_inner_whitespace_rejected(self):
        with pytest.raises(InvalidHeightError):
            parse_heightmap("1 2 3")

    def test_unicode_digits_rejected(self):
        with pytest.raises(InvalidHeightError):
            parse_heightmap("12²")

    def test_ragged_rows_rejected(self):
        with pytest.raises(RaggedHeightmapError) as exc_info:
            parse_heightmap("123\n45\n678")

        error = exc_info.value
        assert (error.row, error.expected, error.actual) == (1, 3, 2)
        assert error.line == 2

    def test_ragged_rows_report_source_line(self):
        with pytest.raises(RaggedHeightmapError) as exc_info:
            parse_heightmap("123\n\n\n45\n678")

        error = exc_info.value
        assert error.row == 1
        assert error.line == 4
        assert "line 4" in str(error)

    def test_ragged_rows_from_rows_name_row_index(self):
        with pytest.raises(RaggedHeightmapError) as exc_info:
            HeightMap.from_rows([[1, 2], [3]])

        assert exc_info.value.line is None
        assert "row index 1" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "\n\n", "   \n \t \n"])
    def test_empty_input_rejected(self, text):
        with pytest.raises(EmptyHeightmapError):
            parse_heightmap(text)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_heightmap("abc")
        assert issubclass(RaggedHeightmapError, HeightmapError)

    def test_load_from_file(self, tmp_path, sample_text):
        path = tmp_path / "day9.txt"
        path.write_text(sample_text, encoding="utf-8")

        heightmap = load_heightmap(path)
        assert heightmap.shape == (5, 10)


class TestHeightMap:
    """Test grid access helpers."""

    def test_grid_is_read_only(self, sample_heightmap):
        with pytest.raises(ValueError):
            sample_heightmap.heights[0, 0] = 5

    def test_constructor_copies_input(self):
        source = np.array([[1, 2], [3, 4]])
        heightmap = HeightMap(source)
        source[0, 0] = 9
        assert heightmap.height_at((0, 0)) == 1

    def test_neighbors_in_bounds_only(self, sample_heightmap):
        assert sample_heightmap.neighbors((0, 0)) == [(1, 0), (0, 1)]
        assert sample_heightmap.neighbors((4, 9)) == [(3, 9), (4, 8)]
        assert sample_heightmap.neighbors((2, 3)) == [(1, 3), (3, 3), (2, 2), (2, 4)]

    def test_single_cell_has_no_neighbors(self):
        assert HeightMap.from_rows([[5]]).neighbors((0, 0)) == []

    def test_boundary_cells(self, sample_heightmap):
        assert sample_heightmap.is_boundary((0, 2))
        assert not sample_heightmap.is_boundary((0, 0))
        assert sample_heightmap.boundary_count() == int(np.sum(sample_heightmap.heights == 9))

    def test_cells_row_major(self):
        heightmap = HeightMap.from_rows([[1, 2, 3], [4, 5, 6]])
        assert list(heightmap.cells()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_from_rows_validates(self):
        with pytest.raises(InvalidHeightError):
            HeightMap.from_rows([[1, 10]])
        with pytest.raises(InvalidHeightError):
            HeightMap.from_rows([[1, -1]])
        with pytest.raises(InvalidHeightError):
            HeightMap.from_rows([[1, True]])
        with pytest.raises(RaggedHeightmapError):
            HeightMap.from_rows([[1, 2], [3]])
        with pytest.raises(EmptyHeightmapError):
            HeightMap.from_rows([])
        with pytest.raises(EmptyHeightmapError):
            HeightMap.from_rows([[]])

    def test_constructor_rejects_out_of_range_heights(self):
        with pytest.raises(InvalidHeightError) as exc_info:
            HeightMap(np.array([[10, 300, -1]]))
        assert exc_info.value.character == "10"
        assert (exc_info.value.line, exc_info.value.column) == (1, 1)

        with pytest.raises(InvalidHeightError) as exc_info:
            HeightMap(np.array([[1, 2], [3, -1]]))
        assert (exc_info.value.line, exc_info.value.column) == (2, 2)

        with pytest.raises(InvalidHeightError):
            HeightMap(np.array([[1, 2, 256]]))

    def test_constructor_rejects_non_integer_dtypes(self):
        with pytest.raises(InvalidHeightError):
            HeightMap(np.array([[1.0, 2.0]]))
        with pytest.raises(InvalidHeightError):
            HeightMap(np.array([[True, False]]))
        with pytest.raises(InvalidHeightError):
            HeightMap(np.array([["1", "2"]]))

    def test_constructor_accepts_any_integer_dtype(self):
        heightmap = HeightMap(np.array([[0, 9]], dtype=np.int64))
        assert heightmap.heights.dtype == np.uint8
        assert heightmap.to_rows() == [[0, 9]]

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (3, 0), (0, 2)])
    def test_off_grid_cells_raise(self, cell):
        heightmap = HeightMap.from_rows([[1, 9], [9, 9], [0, 1]])

        assert not heightmap.in_bounds(cell)
        with pytest.raises(IndexError):
            heightmap.height_at(cell)
        with pytest.raises(IndexError):
            heightmap.is_boundary(cell)
