"""
Mathematical utilities for City Sector Generator.

Provides functions for line intersection, vector helpers and angle
calculations shared by the clipper, offsetter and validator.
"""

from typing import Optional
import math

from ..models.geometry import Point2D
from ..config import GEOMETRIC_EPSILON


def line_intersection(
    p1: Point2D, dir1: Point2D,
    p2: Point2D, dir2: Point2D,
    epsilon: float = GEOMETRIC_EPSILON
) -> Optional[Point2D]:
    """
    Find intersection point of two infinite lines in point/direction form.

    Line 1: p1 + t * dir1
    Line 2: p2 + u * dir2

    Args:
        p1, dir1: Point on and direction of first line
        p2, dir2: Point on and direction of second line
        epsilon: Determinant threshold below which lines count as parallel

    Returns:
        Intersection point, or None if lines are parallel
    """
    determinant = dir2.y * dir1.x - dir2.x * dir1.y

    if abs(determinant) < epsilon:
        return None  # Lines are parallel or coincident

    dx = p2.x - p1.x
    dy = p2.y - p1.y

    u = (dx * dir1.y - dy * dir1.x) / determinant

    return Point2D(p2.x + u * dir2.x, p2.y + u * dir2.y)


def segment_line_intersection(
    line_p1: Point2D, line_p2: Point2D,
    seg_start: Point2D, seg_end: Point2D,
    epsilon: float = GEOMETRIC_EPSILON
) -> Optional[Point2D]:
    """
    Intersect the infinite line (line_p1, line_p2) with the line through a segment.

    The parallel test uses the sine of the angle between both directions,
    so it does not depend on segment lengths.

    Returns:
        Intersection point on the first line, or None if (nearly) parallel
    """
    line_dir = line_p2 - line_p1
    seg_dir = seg_end - seg_start

    determinant = line_dir.cross(seg_dir)
    scale = line_dir.length() * seg_dir.length()
    if scale < epsilon or abs(determinant) < epsilon * scale:
        return None

    delta = seg_start - line_p1
    t = delta.cross(seg_dir) / determinant

    return line_p1 + line_dir * t


def cross_product_2d(v1: Point2D, v2: Point2D) -> float:
    """
    2D cross product (z-component of 3D cross product).

    Args:
        v1, v2: 2D vectors

    Returns:
        Scalar z-component of cross product
    """
    return v1.x * v2.y - v1.y * v2.x


def orientation(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Cross product of (b - a) and (c - a).

    Positive when c lies to the left of the directed line a->b,
    negative to the right, zero when collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def vector_length(v: Point2D) -> float:
    """Length of 2D vector."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize_vector(v: Point2D) -> Point2D:
    """
    Normalize 2D vector to unit length.

    Args:
        v: 2D vector

    Returns:
        Unit vector, or (0, 0) if input is zero-length
    """
    length = vector_length(v)
    if length < 1e-10:
        return Point2D(0.0, 0.0)
    return Point2D(v.x / length, v.y / length)


def perpendicular_vector(v: Point2D) -> Point2D:
    """
    Get perpendicular vector (rotated 90 degrees CCW).

    Args:
        v: 2D vector

    Returns:
        Perpendicular vector
    """
    return Point2D(-v.y, v.x)


def angle_between_vectors(v1: Point2D, v2: Point2D) -> float:
    """
    Compute unsigned angle between two 2D vectors in degrees.

    Args:
        v1, v2: Direction vectors

    Returns:
        Angle in degrees [0, 180]; 0 if either vector is zero-length
    """
    dot = v1.x * v2.x + v1.y * v2.y
    len1 = vector_length(v1)
    len2 = vector_length(v2)

    if len1 < 1e-10 or len2 < 1e-10:
        return 0.0

    cos_angle = clamp(dot / (len1 * len2), -1.0, 1.0)
    return math.degrees(math.acos(cos_angle))


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp value to [min_val, max_val] range.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))
