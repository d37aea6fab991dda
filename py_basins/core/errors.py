"""Errors raised while parsing and analyzing height maps."""

from typing import Optional


class HeightmapError(ValueError):
    """Base class for every height map failure."""


class InvalidHeightError(HeightmapError):
    """A cell is not a single decimal digit."""

    def __init__(self, character: str, line: Optional[int] = None, column: Optional[int] = None):
        self.character = character
        self.line = line
        self.column = column
        where = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"Invalid height {character!r}{where}: expected a digit 0-9")


class EmptyHeightmapError(HeightmapError):
    """The input holds no rows."""

    def __init__(self, message: str = "Height map has no rows"):
        super().__init__(message)


class RaggedHeightmapError(HeightmapError):
    """Rows have unequal lengths."""

    def __init__(self, row: int, expected: int, actual: int, line: Optional[int] = None):
        self.row = row  # 0-based grid row
        self.line = line  # 1-based input line, when parsed from text
        self.expected = expected
        self.actual = actual
        where = f"at line {line}" if line is not None else f"at row index {row}"
        super().__init__(
            f"Row {where} has {actual} cells, expected {expected}: height map must be rectangular"
        )


class InsufficientBasinsError(HeightmapError):
    """Fewer basins exist than the ranking needs."""

    def __init__(self, found: int, required: int):
        self.found = found
        self.required = required
        super().__init__(f"Need at least {required} basins to rank, found {found}")
