"""Command-line entry point: analyze a height map file."""

import argparse
import json
import sys
from typing import List, Optional

import structlog

from .config import settings
from .core import analyze, load_heightmap
from .log_config import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-basins",
        description="Find low points and basins in a height map",
    )
    parser.add_argument("path", help="Text file with one row of digits per line")
    parser.add_argument(
        "--top",
        type=int,
        default=settings.top_basins,
        help="Number of largest basins multiplied into the score",
    )
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, settings.log_format)

    try:
        heightmap = load_heightmap(args.path)
        report = analyze(heightmap, top_basins=args.top)
    except (ValueError, OSError) as e:
        logger.error("Analysis failed", path=args.path, error=str(e))
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    print(f"risk levels: {report.risk_levels}")
    print(f"sum: {report.total_risk}")
    if report.basin_score is None:
        print(f"basin score: unavailable ({len(report.basin_sizes)} basins)")
    else:
        print(f"largest basins: {report.largest_basins}")
        print(f"basin score: {report.basin_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
