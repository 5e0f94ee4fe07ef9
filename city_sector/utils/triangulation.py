"""
Triangulation utilities for City Sector Generator.

Provides the ear clipping triangulation used for flat roof caps,
pavement surfaces and plot placeholders. Accepts either winding and
emits triangles with the same winding as the input ring.
"""

from typing import List, Tuple, Optional
import logging

from ..models.geometry import Point2D
from ..config import GEOMETRIC_EPSILON
from .math_utils import orientation
from .polygon_utils import polygon_signed_area, polygon_area

logger = logging.getLogger(__name__)

Triangle = Tuple[int, int, int]


def triangulate_polygon(
    ring: List[Point2D],
    epsilon: float = GEOMETRIC_EPSILON
) -> Optional[List[Triangle]]:
    """
    Triangulate a simple polygon using ear clipping algorithm.

    Args:
        ring: Polygon vertices in either winding, without closing duplicate
        epsilon: Tolerance for the convexity and containment tests

    Returns:
        List of triangle tuples (i, j, k) as indices into the input ring,
        exactly len(ring) - 2 of them; None if fewer than 3 vertices were
        given or no ear could be found (self-intersecting/invalid polygon)
    """
    n = len(ring)
    if n < 3:
        logger.debug(f"Ear clipping: polygon has only {n} vertices")
        return None

    clockwise = polygon_signed_area(ring) < 0

    indices = list(range(n))
    triangles: List[Triangle] = []

    while len(indices) > 3:
        ear_at = _find_ear(ring, indices, clockwise, epsilon)
        if ear_at is None:
            logger.debug(
                f"Ear clipping: no ear found with {len(indices)} "
                f"of {n} vertices remaining"
            )
            return None

        count = len(indices)
        prev_idx = indices[(ear_at - 1) % count]
        curr_idx = indices[ear_at]
        next_idx = indices[(ear_at + 1) % count]

        triangles.append((prev_idx, curr_idx, next_idx))
        indices.pop(ear_at)

    # Add final triangle
    triangles.append((indices[0], indices[1], indices[2]))
    return triangles


def _find_ear(
    ring: List[Point2D],
    indices: List[int],
    clockwise: bool,
    epsilon: float
) -> Optional[int]:
    """Position in `indices` of the first ear tip, scanning from the start."""
    count = len(indices)

    for i in range(count):
        prev_i = (i - 1) % count
        next_i = (i + 1) % count

        prev_p = ring[indices[prev_i]]
        curr_p = ring[indices[i]]
        next_p = ring[indices[next_i]]

        if not _is_convex_vertex(prev_p, curr_p, next_p, clockwise, epsilon):
            continue

        contains_other = False
        for j in range(count):
            if j in (prev_i, i, next_i):
                continue
            if _point_in_triangle(ring[indices[j]], prev_p, curr_p, next_p, epsilon):
                contains_other = True
                break

        if not contains_other:
            return i

    return None


def _is_convex_vertex(
    prev_p: Point2D,
    curr_p: Point2D,
    next_p: Point2D,
    clockwise: bool,
    epsilon: float
) -> bool:
    """
    Check if vertex curr_p turns the same way as the ring's winding.

    CCW rings turn left at convex vertices (positive cross product),
    CW rings turn right (negative cross product).
    """
    cross = orientation(prev_p, curr_p, next_p)
    if clockwise:
        return cross < -epsilon
    return cross > epsilon


def _point_in_triangle(
    p: Point2D,
    v0: Point2D,
    v1: Point2D,
    v2: Point2D,
    epsilon: float
) -> bool:
    """
    Check if point is inside triangle or on its boundary.

    The point is outside only when the three edge cross products have
    clearly mixed signs.
    """
    d1 = orientation(p, v0, v1)
    d2 = orientation(p, v1, v2)
    d3 = orientation(p, v2, v0)

    has_neg = (d1 < -epsilon) or (d2 < -epsilon) or (d3 < -epsilon)
    has_pos = (d1 > epsilon) or (d2 > epsilon) or (d3 > epsilon)

    return not (has_neg and has_pos)


def triangulation_area(
    vertices: List[Point2D],
    triangles: List[Triangle]
) -> float:
    """Sum of unsigned triangle areas."""
    return sum(
        abs(_triangle_area(vertices[a], vertices[b], vertices[c]))
        for a, b, c in triangles
    )


def validate_triangulation(
    vertices: List[Point2D],
    triangles: List[Triangle],
    expected_area: Optional[float] = None,
    tolerance: float = 0.01
) -> List[str]:
    """
    Validate triangulation result.

    Args:
        vertices: List of vertices
        triangles: List of triangle index tuples
        expected_area: Expected polygon area (defaults to the shoelace area)
        tolerance: Relative area tolerance

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not triangles:
        errors.append("No triangles generated")
        return errors

    n = len(vertices)

    # Check index validity
    for i, tri in enumerate(triangles):
        if any(idx < 0 or idx >= n for idx in tri):
            errors.append(f"Triangle {i} has invalid index")
    if errors:
        return errors

    # Check for degenerate triangles
    for i, (a, b, c) in enumerate(triangles):
        area = _triangle_area(vertices[a], vertices[b], vertices[c])
        if abs(area) < 1e-10:
            errors.append(f"Triangle {i} is degenerate (zero area)")

    if expected_area is None:
        expected_area = polygon_area(vertices)

    total_area = triangulation_area(vertices, triangles)
    if abs(total_area - expected_area) > expected_area * tolerance:
        errors.append(
            f"Total triangulated area {total_area:.2f} differs from "
            f"expected {expected_area:.2f}"
        )

    return errors


def _triangle_area(v0: Point2D, v1: Point2D, v2: Point2D) -> float:
    """Compute signed area of triangle."""
    return 0.5 * (
        (v1.x - v0.x) * (v2.y - v0.y) -
        (v2.x - v0.x) * (v1.y - v0.y)
    )
