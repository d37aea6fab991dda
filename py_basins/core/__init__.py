"""
Core height map analysis functionality.
"""

from .heightmap import HeightMap, Cell, parse_heightmap, load_heightmap, BOUNDARY_HEIGHT
from .low_points import LowPoint, LowPointDetector, find_low_points, risk_levels, total_risk
from .basins import Basin, Basins, find_basins
from .ranking import largest_basin_sizes, basin_score
from .analysis import HeightmapReport, analyze
from .errors import (
    HeightmapError,
    InvalidHeightError,
    EmptyHeightmapError,
    RaggedHeightmapError,
    InsufficientBasinsError,
)

__all__ = ['HeightMap', 'Cell', 'parse_heightmap', 'load_heightmap', 'BOUNDARY_HEIGHT',
           'LowPoint', 'LowPointDetector', 'find_low_points', 'risk_levels', 'total_risk',
           'Basin', 'Basins', 'find_basins',
           'largest_basin_sizes', 'basin_score',
           'HeightmapReport', 'analyze',
           'HeightmapError', 'InvalidHeightError', 'EmptyHeightmapError',
           'RaggedHeightmapError', 'InsufficientBasinsError']
