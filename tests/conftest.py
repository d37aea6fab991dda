"""Pytest fixtures for height map tests."""

import numpy as np
import pytest

from py_basins.core.heightmap import HeightMap, parse_heightmap

SAMPLE_INPUT = """\
    2199943210
    3987894921
    9856789892
    8767896789
    9899965678
"""


@pytest.fixture
def sample_text():
    """The canonical 5x10 example, indented the way it is usually pasted."""
    return SAMPLE_INPUT


@pytest.fixture
def sample_heightmap():
    return parse_heightmap(SAMPLE_INPUT)


@pytest.fixture
def random_heightmaps():
    """Seeded random grids of varied shape, with and without boundary cells."""
    rng = np.random.default_rng(20211209)
    grids = []
    for rows, cols in [(1, 1), (1, 7), (6, 1), (5, 5), (12, 17), (30, 30)]:
        grids.append(HeightMap(rng.integers(0, 10, size=(rows, cols))))
        grids.append(HeightMap(rng.integers(0, 9, size=(rows, cols))))
        grids.append(HeightMap(rng.choice([2, 9], size=(rows, cols))))
    return grids
