"""
Basin partitioning.

A basin is a maximal 4-connected region of non-boundary cells (height
below 9). Basins are labeled with a breadth-first flood fill driven by an
explicit FIFO worklist and a separate visited marker, so the grid itself
is never written to.

Neighbors are enqueued without checking their state; a popped cell that
is already visited or is a boundary cell is discarded. Each cell is
enqueued at most once per neighbor, so the total work stays O(rows * cols).
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np
import structlog

from .heightmap import Cell, HeightMap

logger = structlog.get_logger()

# Label for cells that belong to no basin
UNLABELED = 0


@dataclass
class Basin:
    """A connected region of non-boundary cells."""

    id: int
    first_cell: Cell
    cells: List[Cell] = field(default_factory=list)  # in visitation order

    @property
    def size(self) -> int:
        return len(self.cells)

    def heights(self, heightmap: HeightMap) -> List[int]:
        return [heightmap.height_at(cell) for cell in self.cells]

    def low_point(self, heightmap: HeightMap) -> Cell:
        """Lowest member cell; the earliest visited wins ties."""
        return min(self.cells, key=heightmap.height_at)

    def __contains__(self, cell) -> bool:
        return cell in self.cells


class Basins:
    """Partitions a height map into basins."""

    def __init__(self, heightmap: HeightMap):
        """
        Initialize the partitioner.

        Args:
            heightmap: Parsed height map, left untouched
        """
        self.heightmap = heightmap
        self.labels: Optional[np.ndarray] = None
        self.basins: List[Basin] = []
        self._by_id: Dict[int, Basin] = {}

    def partition(self) -> List[Basin]:
        """
        Label every non-boundary cell with the id of its basin.

        Returns:
            Basins in discovery order (row-major order of their first cell)
        """
        heightmap = self.heightmap
        visited = np.zeros(heightmap.shape, dtype=bool)
        boundary = heightmap.boundary_mask()

        self.labels = np.full(heightmap.shape, UNLABELED, dtype=np.int32)
        self.basins = []

        basin_id = 1
        for start in heightmap.cells():
            if visited[start] or boundary[start]:
                continue

            basin = Basin(id=basin_id, first_cell=start)
            queue = deque([start])

            while queue:
                cell = queue.popleft()

                # Cells can be queued by several neighbors
                if visited[cell] or boundary[cell]:
                    continue

                visited[cell] = True
                self.labels[cell] = basin_id
                basin.cells.append(cell)

                queue.extend(heightmap.neighbors(cell))

            self.basins.append(basin)
            basin_id += 1

        self._by_id = {basin.id: basin for basin in self.basins}

        logger.info(
            "Basins partitioned",
            basins=len(self.basins),
            basin_cells=int(np.count_nonzero(visited)),
            boundary_cells=int(np.count_nonzero(boundary)),
        )
        return self.basins

    def basin_of(self, cell: Cell) -> Optional[Basin]:
        """Basin containing a cell, or None for a boundary cell."""
        if not self.heightmap.in_bounds(cell):
            raise IndexError(f"Cell {cell} is outside the height map")
        if self.labels is None:
            self.partition()

        label = int(self.labels[cell])
        if label == UNLABELED:
            return None
        return self._by_id[label]

    def sizes(self) -> List[int]:
        """Basin sizes in discovery order."""
        if self.labels is None:
            self.partition()
        return [basin.size for basin in self.basins]


def find_basins(heightmap: HeightMap) -> List[Basin]:
    return Basins(heightmap).partition()
