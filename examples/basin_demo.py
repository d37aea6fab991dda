#!/usr/bin/env python3
"""
Simple demo script showing low point and basin analysis.
"""

import numpy as np
from py_basins.core import Basins, HeightMap, analyze, parse_heightmap

SAMPLE = """
2199943210
3987894921
9856789892
8767896789
9899965678
"""


def show_labels(heightmap, labels):
    """Print the grid with each cell replaced by its basin letter."""
    for row in range(heightmap.rows):
        line = ""
        for col in range(heightmap.cols):
            label = labels[row, col]
            line += "#" if label == 0 else chr(ord("a") + (label - 1) % 26)
        print(f"  {line}")


def main():
    """Demonstrate height map analysis."""
    print("Py-Basins Height Map Analysis Demo")
    print("=" * 40)

    heightmap = parse_heightmap(SAMPLE)
    report = analyze(heightmap)

    print(f"\nSample map ({heightmap.rows}x{heightmap.cols}):")
    print("-" * 30)
    print(f"  Low points: {[point.cell for point in report.low_points]}")
    print(f"  Risk levels: {report.risk_levels} (sum {report.total_risk})")
    print(f"  Basin sizes: {report.basin_sizes}")
    print(f"  Basin score: {report.basin_score}")

    partitioner = Basins(heightmap)
    partitioner.partition()
    print("\n  Basins (# = boundary):")
    show_labels(heightmap, partitioner.labels)

    # Random terrain
    print("\n\nRandom Terrain Example:")
    print("-" * 30)
    rng = np.random.default_rng(9)
    terrain = HeightMap(rng.integers(0, 10, size=(20, 40)))
    report = analyze(terrain)

    print(f"  Boundary cells: {terrain.boundary_count()} of {terrain.size}")
    print(f"  Low points: {len(report.low_points)} (risk sum {report.total_risk})")
    print(f"  Basins: {len(report.basin_sizes)}, largest {report.largest_basins}")
    print(f"  Basin score: {report.basin_score}")


if __name__ == "__main__":
    main()
