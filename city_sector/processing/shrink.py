"""
Centroid-based polygon shrinking for City Sector Generator.

Carves street margins and building insets by pulling every vertex a
fixed distance toward the vertex centroid. This is a coarse stand-in
for true polygon erosion: it only guards against vertices crossing the
centroid, not against a self-intersecting result.
"""

from typing import List, Optional
import logging

from ..models.geometry import Point2D
from ..config import GEOMETRIC_EPSILON
from ..utils.polygon_utils import polygon_centroid

logger = logging.getLogger(__name__)


def shrink_polygon(
    ring: List[Point2D],
    distance: float,
    epsilon: float = GEOMETRIC_EPSILON
) -> Optional[List[Point2D]]:
    """
    Move every vertex toward the centroid by `distance`.

    A positive distance shrinks the polygon, a negative one expands it.

    Args:
        ring: Polygon vertices
        distance: Signed shrink distance
        epsilon: Degeneracy tolerance

    Returns:
        New vertex list, or None if the polygon has fewer than 3 vertices,
        a vertex sits on the centroid, or a vertex is closer to the
        centroid than a positive `distance`
    """
    if ring is None or len(ring) < 3:
        return None

    if abs(distance) < epsilon:
        return list(ring)

    centroid = polygon_centroid(ring)
    result = []

    for i, vertex in enumerate(ring):
        to_centroid = centroid - vertex
        reach = to_centroid.length()

        if reach < epsilon:
            logger.debug(f"Shrink: vertex {i} coincides with centroid")
            return None

        if distance > 0 and reach < distance:
            logger.debug(
                f"Shrink: vertex {i} is {reach:.3f} from centroid, "
                f"less than shrink distance {distance:.3f}"
            )
            return None

        result.append(vertex + to_centroid * (distance / reach))

    return result
