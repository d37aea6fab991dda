"""
Height map parsing and grid access.

A height map is a rectangular grid of single-digit elevations. Height 9
marks a boundary cell that never belongs to a basin. Once built, the grid
is read-only; every analysis pass indexes into it without writing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
import structlog

from .errors import EmptyHeightmapError, InvalidHeightError, RaggedHeightmapError

logger = structlog.get_logger()

Cell = Tuple[int, int]  # (row, column)

BOUNDARY_HEIGHT = 9
MAX_HEIGHT = 9

# up, down, left, right
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, eq=False)
class HeightMap:
    """Immutable rectangular grid of heights 0-9."""

    heights: np.ndarray

    def __post_init__(self):
        raw = np.asarray(self.heights)
        if raw.ndim != 2 or raw.size == 0:
            raise EmptyHeightmapError()

        # bool is its own dtype kind, so it is rejected here too
        if raw.dtype.kind not in "iu":
            raise InvalidHeightError(str(raw.flat[0]), 1, 1)

        out_of_range = np.argwhere((raw < 0) | (raw > MAX_HEIGHT))
        if len(out_of_range):
            row, col = (int(i) for i in out_of_range[0])
            raise InvalidHeightError(str(raw[row, col]), row + 1, col + 1)

        heights = raw.astype(np.uint8)
        heights.flags.writeable = False
        object.__setattr__(self, "heights", heights)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "HeightMap":
        """
        Build a height map from nested integer rows.

        Args:
            rows: Iterable of rows, each a sequence of ints in 0-9

        Returns:
            Validated HeightMap

        Raises:
            EmptyHeightmapError: No rows, or a zero-width first row
            RaggedHeightmapError: Rows of unequal length
            InvalidHeightError: A value that is not an int in 0-9
        """
        grid: List[List[int]] = []
        for row_index, row in enumerate(rows):
            values = []
            for col_index, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise InvalidHeightError(str(value), row_index + 1, col_index + 1)
                if not 0 <= value <= MAX_HEIGHT:
                    raise InvalidHeightError(str(value), row_index + 1, col_index + 1)
                values.append(int(value))
            grid.append(values)

        _check_rectangular(grid)
        return cls(np.array(grid, dtype=np.uint8))

    @property
    def rows(self) -> int:
        return self.heights.shape[0]

    @property
    def cols(self) -> int:
        return self.heights.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def size(self) -> int:
        return int(self.heights.size)

    def height_at(self, cell: Cell) -> int:
        """Height of a cell; off-grid cells raise IndexError instead of wrapping."""
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {cell} is outside the {self.rows}x{self.cols} height map")
        row, col = cell
        return int(self.heights[row, col])

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Orthogonal neighbors inside the grid, ordered up, down, left, right."""
        row, col = cell
        result = []
        for d_row, d_col in NEIGHBOR_OFFSETS:
            neighbor = (row + d_row, col + d_col)
            if self.in_bounds(neighbor):
                result.append(neighbor)
        return result

    def is_boundary(self, cell: Cell) -> bool:
        return self.height_at(cell) == BOUNDARY_HEIGHT

    def boundary_mask(self) -> np.ndarray:
        return self.heights == BOUNDARY_HEIGHT

    def boundary_count(self) -> int:
        return int(np.count_nonzero(self.boundary_mask()))

    def cells(self) -> Iterable[Cell]:
        """All cells in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def to_rows(self) -> List[List[int]]:
        return self.heights.tolist()


def _check_rectangular(grid: List[List[int]], line_numbers: Optional[List[int]] = None) -> None:
    if not grid or not grid[0]:
        raise EmptyHeightmapError()

    expected = len(grid[0])
    for row_index, row in enumerate(grid):
        if len(row) != expected:
            line = line_numbers[row_index] if line_numbers is not None else None
            raise RaggedHeightmapError(row_index, expected, len(row), line=line)


def parse_heightmap(text: str) -> HeightMap:
    """
    Parse a height map from text.

    Each non-blank line is one row; surrounding whitespace is trimmed and
    blank lines are skipped. Every remaining character must be a decimal
    digit.

    Args:
        text: Raw multi-line input

    Returns:
        Parsed HeightMap

    Raises:
        InvalidHeightError: A non-digit character (line/column are 1-based
            positions in the raw input)
        EmptyHeightmapError: No non-blank lines
        RaggedHeightmapError: Rows of unequal length
    """
    grid: List[List[int]] = []
    line_numbers: List[int] = []

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        offset = len(raw_line) - len(raw_line.lstrip())
        row = []
        for pos, char in enumerate(line):
            # ASCII digits only
            if char not in "0123456789":
                raise InvalidHeightError(char, line_no, offset + pos + 1)
            row.append(int(char))
        grid.append(row)
        line_numbers.append(line_no)

    _check_rectangular(grid, line_numbers)

    heightmap = HeightMap(np.array(grid, dtype=np.uint8))
    logger.debug("Height map parsed", rows=heightmap.rows, cols=heightmap.cols)
    return heightmap


def load_heightmap(path: Union[str, Path]) -> HeightMap:
    """Read a UTF-8 text file and parse it as a height map."""
    path = Path(path)
    logger.info("Loading height map", path=str(path))
    return parse_heightmap(path.read_text(encoding="utf-8"))
