"""FastAPI main application."""

from typing import List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core import (
    Basins,
    HeightMap,
    HeightmapError,
    LowPointDetector,
    analyze,
    parse_heightmap,
)
from ..log_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Height Map Basin API",
    description="Low point and basin analysis for digit height maps",
    version=__version__,
)


# Request/Response models
class HeightmapRequest(BaseModel):
    """A height map as text, one row of digits per line."""

    heightmap: str = Field(..., description="Height map rows separated by newlines")


class AnalyzeRequest(HeightmapRequest):
    """Request to analyze a height map."""

    top_basins: Optional[int] = Field(
        None, ge=1, description="Number of largest basins in the score (defaults to settings)"
    )


class LowPointInfo(BaseModel):
    """A single low point."""

    row: int
    col: int
    height: int
    risk_level: int


class LowPointsResponse(BaseModel):
    """Low points of a height map."""

    low_points: List[LowPointInfo]
    risk_levels: List[int]
    total_risk: int


class BasinInfo(BaseModel):
    """A single basin."""

    id: int
    size: int
    first_cell: List[int]
    cells: List[List[int]]


class BasinsResponse(BaseModel):
    """Basins of a height map."""

    basin_count: int
    boundary_cells: int
    basins: List[BasinInfo]


class AnalysisResponse(BaseModel):
    """Full analysis of a height map."""

    rows: int
    cols: int
    low_points: List[LowPointInfo]
    risk_levels: List[int]
    total_risk: int
    basin_count: int
    basin_sizes: List[int]
    largest_basins: List[int]
    basin_score: Optional[int]


def _parse_request(request: HeightmapRequest) -> HeightMap:
    """Parse a request's height map or raise 400/413."""
    # Each non-whitespace character is one cell of a well-formed map
    cells = len("".join(request.heightmap.split()))
    if cells > settings.max_grid_cells:
        raise HTTPException(
            status_code=413,
            detail=f"Height map has {cells} cells, limit is {settings.max_grid_cells}",
        )

    try:
        return parse_heightmap(request.heightmap)
    except HeightmapError as e:
        logger.warning("Rejected height map", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Height Map Basin API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/analyze", response_model=AnalysisResponse)
def analyze_heightmap(request: AnalyzeRequest):
    """Find low points and basins and score both."""
    heightmap = _parse_request(request)
    top_basins = request.top_basins or settings.top_basins

    report = analyze(heightmap, top_basins=top_basins)
    return AnalysisResponse(**report.to_dict())


@app.post("/low-points", response_model=LowPointsResponse)
def get_low_points(request: HeightmapRequest):
    """List low points with their risk levels."""
    heightmap = _parse_request(request)
    low_points = LowPointDetector(heightmap).detect()

    risk = [point.risk_level for point in low_points]
    return LowPointsResponse(
        low_points=[
            LowPointInfo(
                row=point.cell[0],
                col=point.cell[1],
                height=point.height,
                risk_level=point.risk_level,
            )
            for point in low_points
        ],
        risk_levels=risk,
        total_risk=sum(risk),
    )


@app.post("/basins", response_model=BasinsResponse)
def get_basins(request: HeightmapRequest):
    """List basins with their member cells."""
    heightmap = _parse_request(request)
    basins = Basins(heightmap).partition()

    return BasinsResponse(
        basin_count=len(basins),
        boundary_cells=heightmap.boundary_count(),
        basins=[
            BasinInfo(
                id=basin.id,
                size=basin.size,
                first_cell=list(basin.first_cell),
                cells=[list(cell) for cell in basin.cells],
            )
            for basin in basins
        ],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
