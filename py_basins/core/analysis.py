"""
End-to-end height map analysis.

Runs the low point and basin passes over the same grid and gathers both
scores into a single report.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import structlog

from .basins import Basins
from .errors import InsufficientBasinsError
from .heightmap import HeightMap
from .low_points import LowPoint, LowPointDetector, risk_levels, total_risk
from .ranking import DEFAULT_TOP_BASINS, basin_score, largest_basin_sizes

logger = structlog.get_logger()


@dataclass
class HeightmapReport:
    """Results of analyzing one height map."""

    shape: Tuple[int, int]
    low_points: List[LowPoint] = field(default_factory=list)
    basin_sizes: List[int] = field(default_factory=list)
    largest_basins: List[int] = field(default_factory=list)
    basin_score: Optional[int] = None  # None when too few basins to rank

    @property
    def risk_levels(self) -> List[int]:
        return risk_levels(self.low_points)

    @property
    def total_risk(self) -> int:
        return total_risk(self.low_points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.shape[0],
            "cols": self.shape[1],
            "low_points": [
                {
                    "row": point.cell[0],
                    "col": point.cell[1],
                    "height": point.height,
                    "risk_level": point.risk_level,
                }
                for point in self.low_points
            ],
            "risk_levels": self.risk_levels,
            "total_risk": self.total_risk,
            "basin_count": len(self.basin_sizes),
            "basin_sizes": list(self.basin_sizes),
            "largest_basins": list(self.largest_basins),
            "basin_score": self.basin_score,
        }


def analyze(heightmap: HeightMap, top_basins: int = DEFAULT_TOP_BASINS) -> HeightmapReport:
    """
    Analyze a height map.

    Args:
        heightmap: Parsed height map
        top_basins: Number of largest basins multiplied into the score

    Returns:
        HeightmapReport; basin_score is None when fewer than top_basins
        basins exist
    """
    logger.info("Analyzing height map", rows=heightmap.rows, cols=heightmap.cols)

    low_points = LowPointDetector(heightmap).detect()
    sizes = Basins(heightmap).sizes()

    report = HeightmapReport(
        shape=heightmap.shape,
        low_points=low_points,
        basin_sizes=sizes,
    )

    try:
        report.largest_basins = largest_basin_sizes(sizes, top_basins)
        report.basin_score = basin_score(sizes, top_basins)
    except InsufficientBasinsError as e:
        logger.warning("Basin score unavailable", found=e.found, required=e.required)
        report.largest_basins = sorted(sizes, reverse=True)

    logger.info(
        "Height map analyzed",
        total_risk=report.total_risk,
        basins=len(sizes),
        basin_score=report.basin_score,
    )
    return report
