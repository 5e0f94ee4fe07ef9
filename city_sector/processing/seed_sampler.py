"""
Seed point sampling for City Sector Generator.

Draws Voronoi seed points uniformly inside a padded, origin-centered
rectangle. Randomness comes from an injectable random.Random so passes
are reproducible.
"""

from typing import List, Optional
import logging
import random

from ..models.geometry import Point2D

logger = logging.getLogger(__name__)


def sample_seed_points(
    count: int,
    width: float,
    height: float,
    padding: float = 0.0,
    rng: Optional[random.Random] = None
) -> List[Point2D]:
    """
    Sample unique seed points inside [-w/2+pad, w/2-pad] x [-h/2+pad, h/2-pad].

    If the padding leaves an empty or inverted range, the full rectangle
    is used instead.

    Args:
        count: Number of points to draw
        width: Rectangle width
        height: Rectangle height
        padding: Inward padding from every edge
        rng: Random source (a fresh unseeded Random if None)

    Returns:
        Unique points in draw order. May hold fewer than `count` points
        after deduplication; callers must abort on fewer than 3.
    """
    if rng is None:
        rng = random.Random()

    min_x = -width / 2.0 + padding
    max_x = width / 2.0 - padding
    min_y = -height / 2.0 + padding
    max_y = height / 2.0 - padding

    if min_x >= max_x or min_y >= max_y:
        logger.warning(
            f"Bounds padding {padding} is too large for sector "
            f"{width}x{height}; sampling the full sector"
        )
        min_x, max_x = -width / 2.0, width / 2.0
        min_y, max_y = -height / 2.0, height / 2.0

    points = [
        Point2D(rng.uniform(min_x, max_x), rng.uniform(min_y, max_y))
        for _ in range(count)
    ]

    # dict keeps first-occurrence order
    unique = list(dict.fromkeys(points))
    if len(unique) < len(points):
        logger.debug(f"Removed {len(points) - len(unique)} duplicate seed points")

    return unique
