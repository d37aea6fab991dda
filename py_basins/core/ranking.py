"""Basin ranking by size."""

from math import prod
from typing import Iterable, List

import structlog

from .errors import InsufficientBasinsError

logger = structlog.get_logger()

DEFAULT_TOP_BASINS = 3


def largest_basin_sizes(sizes: Iterable[int], count: int = DEFAULT_TOP_BASINS) -> List[int]:
    """
    Pick the largest basin sizes.

    Args:
        sizes: Basin sizes in any order
        count: How many sizes to keep

    Returns:
        The ``count`` largest sizes, descending

    Raises:
        ValueError: count is below 1
        InsufficientBasinsError: Fewer than ``count`` basins
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    ranked = sorted(sizes, reverse=True)
    if len(ranked) < count:
        raise InsufficientBasinsError(found=len(ranked), required=count)

    return ranked[:count]


def basin_score(sizes: Iterable[int], count: int = DEFAULT_TOP_BASINS) -> int:
    """Product of the ``count`` largest basin sizes."""
    largest = largest_basin_sizes(sizes, count)
    score = prod(largest)
    logger.debug("Basins ranked", largest=largest, score=score)
    return score
