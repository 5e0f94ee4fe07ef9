"""
Polygon utilities for City Sector Generator.

Provides functions for point-in-polygon tests, area calculations,
winding normalisation, edge normals and vertex snapping.

Winding convention (used by every module):
    positive signed area = counter-clockwise (CCW)
    negative signed area = clockwise (CW)
"""

from typing import List
import math

from ..models.geometry import Point2D
from ..config import GEOMETRIC_EPSILON, GEOMETRIC_EPSILON_SQ


def point_in_polygon(point: Point2D, ring: List[Point2D]) -> bool:
    """
    Test if point is inside a polygon ring using ray casting algorithm.

    Args:
        point: Point to test
        ring: List of polygon vertices (implicitly closed)

    Returns:
        True if point is inside or on edge
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    j = n - 1

    for i in range(n):
        xi, yi = ring[i].x, ring[i].y
        xj, yj = ring[j].x, ring[j].y

        # Check if point is on edge (approximately)
        if _point_on_segment(point, ring[i], ring[j]):
            return True

        # Ray casting
        if ((yi > point.y) != (yj > point.y)) and \
           (point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def polygon_signed_area(ring: List[Point2D]) -> float:
    """
    Compute signed area using shoelace formula.

    Args:
        ring: List of polygon vertices

    Returns:
        Signed area (positive = CCW, negative = CW)
    """
    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i].x * ring[j].y
        area -= ring[j].x * ring[i].y

    return area / 2.0


def polygon_area(ring: List[Point2D]) -> float:
    """
    Compute unsigned area of polygon.

    Args:
        ring: List of polygon vertices

    Returns:
        Absolute area
    """
    return abs(polygon_signed_area(ring))


def polygon_centroid(ring: List[Point2D]) -> Point2D:
    """
    Compute the vertex-average centroid of a polygon.

    Args:
        ring: List of polygon vertices

    Returns:
        Centroid point
    """
    n = len(ring)
    if n == 0:
        return Point2D(0.0, 0.0)

    cx = sum(p.x for p in ring) / n
    cy = sum(p.y for p in ring) / n
    return Point2D(cx, cy)


def is_clockwise(ring: List[Point2D]) -> bool:
    """True if the ring has negative signed area."""
    return polygon_signed_area(ring) < 0


def ensure_ccw(ring: List[Point2D]) -> List[Point2D]:
    """
    Ensure ring is counter-clockwise, reversing if needed.

    Args:
        ring: List of polygon vertices

    Returns:
        Ring in CCW order (a new list when reversed)
    """
    if is_clockwise(ring):
        return list(reversed(ring))
    return ring


def is_convex(ring: List[Point2D]) -> bool:
    """
    Check if polygon ring is convex (either winding).

    Args:
        ring: List of polygon vertices

    Returns:
        True if polygon is convex
    """
    n = len(ring)
    if n < 3:
        return False

    sign = None

    for i in range(n):
        p1 = ring[i]
        p2 = ring[(i + 1) % n]
        p3 = ring[(i + 2) % n]

        cross = (p2.x - p1.x) * (p3.y - p2.y) - (p2.y - p1.y) * (p3.x - p2.x)

        if abs(cross) > 1e-10:  # Not collinear
            if sign is None:
                sign = cross > 0
            elif (cross > 0) != sign:
                return False

    return True


def edge_outward_normal(p1: Point2D, p2: Point2D, signed_area: float) -> Point2D:
    """
    Unit normal of edge p1->p2 pointing out of the polygon.

    For a CCW ring the outside lies to the right of each directed edge,
    so the right-hand perpendicular (dy, -dx) is used; CW rings flip it.

    Args:
        p1, p2: Edge endpoints in ring order
        signed_area: Signed area of the ring the edge belongs to

    Returns:
        Outward unit normal, or (0, 0) for a zero-length edge
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    length = math.sqrt(dx * dx + dy * dy)
    if length < GEOMETRIC_EPSILON:
        return Point2D(0.0, 0.0)

    normal = Point2D(dy / length, -dx / length)
    if signed_area < 0:
        return -normal
    return normal


def snap_polygon_vertices(
    ring: List[Point2D],
    snap_size: float,
    remove_duplicates: bool = True
) -> List[Point2D]:
    """
    Snap all vertices to a square grid.

    Args:
        ring: Polygon vertices
        snap_size: Grid spacing; values <= epsilon disable snapping
        remove_duplicates: Drop vertices that collapse onto their predecessor

    Returns:
        Snapped ring. May have fewer than 3 vertices if snapping degenerates it.
    """
    if not ring or snap_size <= GEOMETRIC_EPSILON:
        return ring

    snapped = [
        Point2D(
            round(p.x / snap_size) * snap_size,
            round(p.y / snap_size) * snap_size
        )
        for p in ring
    ]

    if remove_duplicates:
        return remove_consecutive_duplicates(snapped)
    return snapped


def remove_consecutive_duplicates(ring: List[Point2D]) -> List[Point2D]:
    """
    Remove vertices closer than epsilon to the vertex before them.

    The closing edge is checked too: a last vertex equal to the first is dropped.
    """
    if len(ring) < 2:
        return ring

    unique = [ring[0]]
    for p in ring[1:]:
        d = p - unique[-1]
        if d.dot(d) > GEOMETRIC_EPSILON_SQ:
            unique.append(p)

    if len(unique) > 2:
        d = unique[-1] - unique[0]
        if d.dot(d) < GEOMETRIC_EPSILON_SQ:
            unique.pop()

    return unique


def _point_on_segment(p: Point2D, a: Point2D, b: Point2D,
                      tolerance: float = 1e-6) -> bool:
    """Check if point is on line segment (within tolerance)."""
    ab_x = b.x - a.x
    ab_y = b.y - a.y

    ap_x = p.x - a.x
    ap_y = p.y - a.y

    # Cross product (should be ~0 if collinear)
    cross = abs(ab_x * ap_y - ab_y * ap_x)

    ab_len = math.sqrt(ab_x * ab_x + ab_y * ab_y)
    if ab_len < 1e-10:
        return p.distance_to(a) < tolerance

    # Distance from line
    if cross / ab_len > tolerance:
        return False

    # Check if projection is within segment
    dot = ap_x * ab_x + ap_y * ab_y
    t = dot / (ab_len * ab_len)

    return -tolerance <= t <= 1 + tolerance
