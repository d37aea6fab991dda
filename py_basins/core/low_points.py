"""
Low point detection.

A low point is a cell strictly lower than every orthogonal neighbor that
exists. Cells off the grid take no part in the comparison, and an equal
neighbor disqualifies the cell, so a flat minimum wider than one cell
yields no low point at all.
"""

from dataclasses import dataclass
from typing import List, Sequence

import structlog

from .heightmap import Cell, HeightMap

logger = structlog.get_logger()


@dataclass(frozen=True)
class LowPoint:
    """A local minimum of the height map."""

    cell: Cell
    height: int

    @property
    def risk_level(self) -> int:
        return self.height + 1


class LowPointDetector:
    """Scans a height map once for local minima."""

    def __init__(self, heightmap: HeightMap):
        self.heightmap = heightmap

    def is_low_point(self, cell: Cell) -> bool:
        """
        Check whether a cell is lower than all of its existing neighbors.

        A cell with no neighbors (1x1 grid) qualifies trivially.
        """
        height = self.heightmap.height_at(cell)
        return all(
            height < self.heightmap.height_at(neighbor)
            for neighbor in self.heightmap.neighbors(cell)
        )

    def detect(self) -> List[LowPoint]:
        """
        Find all low points.

        Returns:
            Low points in row-major discovery order
        """
        low_points = [
            LowPoint(cell=cell, height=self.heightmap.height_at(cell))
            for cell in self.heightmap.cells()
            if self.is_low_point(cell)
        ]

        logger.info(
            "Low points detected",
            low_points=len(low_points),
            total_risk=total_risk(low_points),
        )
        return low_points


def find_low_points(heightmap: HeightMap) -> List[LowPoint]:
    return LowPointDetector(heightmap).detect()


def risk_levels(low_points: Sequence[LowPoint]) -> List[int]:
    return [point.risk_level for point in low_points]


def total_risk(low_points: Sequence[LowPoint]) -> int:
    """Sum of risk levels over all low points."""
    return sum(risk_levels(low_points))
