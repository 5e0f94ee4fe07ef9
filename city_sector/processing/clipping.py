"""
Sutherland-Hodgman polygon clipping for City Sector Generator.

Clips a subject polygon against an axis-aligned rectangle by clipping
sequentially against its bottom, right, top and left edges (CCW order,
so "inside" is always to the left of the directed clip edge).
"""

from typing import List, Optional
import logging

from ..models.geometry import Point2D, Rect
from ..config import GEOMETRIC_EPSILON
from ..utils.math_utils import orientation, segment_line_intersection

logger = logging.getLogger(__name__)


class _ParallelEdge(Exception):
    """A transition edge ran parallel to the clip edge."""


def clip_polygon_to_rect(
    subject: List[Point2D],
    rect: Rect,
    epsilon: float = GEOMETRIC_EPSILON
) -> Optional[List[Point2D]]:
    """
    Clip a polygon against a rectangle.

    Args:
        subject: Polygon vertices in order
        rect: Clipping window
        epsilon: Tolerance of the inside test (points on the boundary are inside)

    Returns:
        Clipped polygon, or None if fewer than 3 vertices survive any
        clip edge, or if an intersection could not be computed
    """
    if subject is None or len(subject) < 3:
        return None

    corners = rect.corners()
    clipped = list(subject)

    for k in range(4):
        edge_start = corners[k]
        edge_end = corners[(k + 1) % 4]
        try:
            clipped = _clip_against_edge(clipped, edge_start, edge_end, epsilon)
        except _ParallelEdge:
            logger.warning(
                f"Clipping aborted: subject edge parallel to clip edge "
                f"({edge_start.x:.3f}, {edge_start.y:.3f})-"
                f"({edge_end.x:.3f}, {edge_end.y:.3f})"
            )
            return None
        if len(clipped) < 3:
            return None

    return clipped


def _clip_against_edge(
    subject: List[Point2D],
    edge_start: Point2D,
    edge_end: Point2D,
    epsilon: float
) -> List[Point2D]:
    """Clip a polygon against the half-plane left of edge_start->edge_end."""
    output: List[Point2D] = []
    if not subject:
        return output

    # Walk subject edges s->e, starting with the wrap-around edge
    s = subject[-1]
    s_inside = _is_inside(edge_start, edge_end, s, epsilon)

    for e in subject:
        e_inside = _is_inside(edge_start, edge_end, e, epsilon)

        if s_inside and e_inside:
            output.append(e)
        elif s_inside and not e_inside:
            output.append(_intersect(edge_start, edge_end, s, e))
        elif not s_inside and e_inside:
            output.append(_intersect(edge_start, edge_end, s, e))
            output.append(e)

        s, s_inside = e, e_inside

    return output


def _is_inside(edge_start: Point2D, edge_end: Point2D, p: Point2D, epsilon: float) -> bool:
    """Point is left of, or on, the directed clip edge."""
    return orientation(edge_start, edge_end, p) >= -epsilon


def _intersect(edge_start: Point2D, edge_end: Point2D, s: Point2D, e: Point2D) -> Point2D:
    point = segment_line_intersection(edge_start, edge_end, s, e)
    if point is None:
        raise _ParallelEdge()
    return point
