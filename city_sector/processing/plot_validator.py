"""
Plot geometry validation for City Sector Generator.

Accepts or rejects candidate plots and footprints by minimum area,
side length and interior angle. Angles are the unsigned angle between
the two edges meeting at a vertex, so a reflex corner is measured as
its convex complement; non-convex plots are judged on that basis.
"""

from enum import Enum
from typing import List, Optional

from ..models.geometry import Point2D
from ..utils.math_utils import angle_between_vectors
from ..utils.polygon_utils import polygon_area


class PlotRejection(Enum):
    """Reason a plot failed validation."""
    TOO_FEW_VERTICES = "too_few_vertices"
    TOO_SMALL_AREA = "too_small_area"
    TOO_SHORT_SIDE = "too_short_side"
    TOO_SHARP_ANGLE = "too_sharp_angle"


def plot_rejection_reason(
    ring: List[Point2D],
    min_side_length: float,
    min_angle_deg: float,
    min_area: float
) -> Optional[PlotRejection]:
    """
    Find the first validation check a plot fails.

    Checks run in order: vertex count, area, then per vertex the side
    to the next vertex and the angle at the vertex.

    Returns:
        None if the plot passes every check
    """
    if ring is None or len(ring) < 3:
        return PlotRejection.TOO_FEW_VERTICES

    if polygon_area(ring) < min_area:
        return PlotRejection.TOO_SMALL_AREA

    n = len(ring)
    for i in range(n):
        curr = ring[i]
        nxt = ring[(i + 1) % n]
        prev = ring[(i - 1) % n]

        if curr.distance_to(nxt) < min_side_length:
            return PlotRejection.TOO_SHORT_SIDE

        if angle_between_vectors(prev - curr, nxt - curr) < min_angle_deg:
            return PlotRejection.TOO_SHARP_ANGLE

    return None


def validate_plot_geometry(
    ring: List[Point2D],
    min_side_length: float,
    min_angle_deg: float,
    min_area: float
) -> bool:
    """True if the plot meets all three thresholds."""
    return plot_rejection_reason(ring, min_side_length, min_angle_deg, min_area) is None
