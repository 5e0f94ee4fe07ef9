"""
Mitered edge-loop offsetting for City Sector Generator.

Produces the inset (or outset) edge loop of a roof layer by shifting
every edge along its outward normal and intersecting neighbouring
shifted edges, which keeps corners sharp.

Edge directions, normals and offset lines always come from a stable
base polygon (the building footprint), never from the loop being
offset, so every chained layer (mansard -> attic -> flat cap) is
measured from the footprint instead of compounding drift from earlier
layers. The loop being offset only supplies elevations and the anchor
for degenerate corners.
"""

from typing import List, Optional
import logging

from ..models.geometry import Point2D, Point3D, EdgeLoop
from ..config import GEOMETRIC_EPSILON
from ..utils.math_utils import line_intersection, normalize_vector
from ..utils.polygon_utils import polygon_signed_area, edge_outward_normal

logger = logging.getLogger(__name__)


def offset_edge_loop(
    outer: EdgeLoop,
    base: List[Point2D],
    distance: float,
    rise: float,
    epsilon: float = GEOMETRIC_EPSILON
) -> Optional[EdgeLoop]:
    """
    Offset an edge loop horizontally and raise it vertically.

    Args:
        outer: Loop to offset (plan positions + elevations)
        base: Stable reference polygon with the same vertex count as `outer`;
              supplies edge directions and the winding used for normals
        distance: Horizontal offset from the base polygon's edges; positive
                  moves inward, negative outward
        rise: Added to every vertex elevation
        epsilon: Parallel-line and zero-length tolerance

    Returns:
        New loop, or None if the loop has fewer than 3 vertices, the vertex
        counts differ, or the base has a zero-length edge
    """
    n = len(outer)
    if n < 3 or len(base) != n:
        logger.debug(
            f"Offset: invalid input (loop {n} vertices, base {len(base)} vertices)"
        )
        return None

    if abs(distance) < epsilon:
        return EdgeLoop([Point3D(v.x, v.y, v.z + rise) for v in outer.vertices])

    signed_area = polygon_signed_area(base)
    ring = outer.ring()
    result = []

    for i in range(n):
        prev_base = base[(i - 1) % n]
        curr_base = base[i]
        next_base = base[(i + 1) % n]

        dir_prev = curr_base - prev_base
        dir_next = next_base - curr_base
        if dir_prev.length() < epsilon or dir_next.length() < epsilon:
            logger.debug(f"Offset: zero-length base edge at vertex {i}")
            return None
        dir_prev = normalize_vector(dir_prev)
        dir_next = normalize_vector(dir_next)

        normal_prev = edge_outward_normal(prev_base, curr_base, signed_area)
        normal_next = edge_outward_normal(curr_base, next_base, signed_area)

        # Shifted edge lines are measured from the base polygon
        origin_prev = prev_base - normal_prev * distance
        origin_next = curr_base - normal_next * distance

        corner = line_intersection(origin_prev, dir_prev, origin_next, dir_next, epsilon)
        if corner is None:
            corner = _parallel_corner(ring[i], normal_prev, normal_next, dir_prev, distance, epsilon)
            logger.debug(f"Offset: parallel edges at vertex {i}, using averaged normal")

        result.append(Point3D(corner.x, corner.y, outer.vertices[i].z + rise))

    return EdgeLoop(result)


def _parallel_corner(
    vertex: Point2D,
    normal_prev: Point2D,
    normal_next: Point2D,
    dir_prev: Point2D,
    distance: float,
    epsilon: float
) -> Point2D:
    """
    Corner position when the two shifted edges are parallel.

    A straight (180 degree) corner moves along the shared normal; a full
    reversal, where the normals cancel, moves along the perpendicular of
    the incoming edge.
    """
    avg = normal_prev + normal_next
    if avg.length() < epsilon:
        avg = Point2D(dir_prev.y, -dir_prev.x)
    else:
        avg = normalize_vector(avg)
    return vertex - avg * distance


def strip_triangles(n: int) -> List[tuple]:
    """
    Triangle indices joining two n-vertex loops into a closed strip.

    Indices address `outer + inner`, with outer vertices at 0..n-1 and
    inner vertices at n..2n-1. Each edge yields two triangles.
    """
    triangles = []
    for i in range(n):
        curr_outer = i
        next_outer = (i + 1) % n
        curr_inner = i + n
        next_inner = (i + 1) % n + n

        triangles.append((curr_outer, next_outer, next_inner))
        triangles.append((curr_outer, next_inner, curr_inner))
    return triangles
