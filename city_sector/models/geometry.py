"""
Core geometry types for City Sector Generator.

Provides Point2D, Point3D, Rect and EdgeLoop classes used throughout
the pipeline for representing plots, footprints and roof layers.
"""

from dataclasses import dataclass
from typing import List
import math


@dataclass(frozen=True, slots=True)
class Point2D:
    """2D point in local sector coordinates."""
    x: float
    y: float

    def distance_to(self, other: 'Point2D') -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __sub__(self, other: 'Point2D') -> 'Point2D':
        """Vector subtraction."""
        return Point2D(self.x - other.x, self.y - other.y)

    def __add__(self, other: 'Point2D') -> 'Point2D':
        """Vector addition."""
        return Point2D(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> 'Point2D':
        """Scale by a scalar."""
        return Point2D(self.x * factor, self.y * factor)

    def __neg__(self) -> 'Point2D':
        return Point2D(-self.x, -self.y)

    def dot(self, other: 'Point2D') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Point2D') -> float:
        """2D cross product (returns scalar z-component)."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Length when read as a vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)


@dataclass(frozen=True, slots=True)
class Point3D:
    """3D point: plan position plus elevation in z."""
    x: float
    y: float
    z: float

    def to_2d(self) -> Point2D:
        """Project to XY plane."""
        return Point2D(self.x, self.y)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in 2D."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @staticmethod
    def centered(width: float, height: float) -> 'Rect':
        """Rectangle of the given size centered on the origin."""
        return Rect(-width / 2.0, -height / 2.0, width / 2.0, height / 2.0)

    @property
    def width(self) -> float:
        """Width in X direction."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Height in Y direction."""
        return self.max_y - self.min_y

    def contains_point(self, p: Point2D) -> bool:
        """Check if point is inside rect (inclusive)."""
        return (
            self.min_x <= p.x <= self.max_x and
            self.min_y <= p.y <= self.max_y
        )

    def corners(self) -> List[Point2D]:
        """Corners in counter-clockwise order, starting bottom-left."""
        return [
            Point2D(self.min_x, self.min_y),
            Point2D(self.max_x, self.min_y),
            Point2D(self.max_x, self.max_y),
            Point2D(self.min_x, self.max_y),
        ]


@dataclass(frozen=True)
class EdgeLoop:
    """
    Closed loop of roof vertices, each carrying its own elevation.

    Produced by the mitered offsetter; consecutive loops of a roof are
    joined by strip triangles.
    """
    vertices: List[Point3D]

    @staticmethod
    def from_ring(ring: List[Point2D], elevation: float) -> 'EdgeLoop':
        """Lift a planar ring to a constant elevation."""
        return EdgeLoop([Point3D(p.x, p.y, elevation) for p in ring])

    def __len__(self) -> int:
        return len(self.vertices)

    def ring(self) -> List[Point2D]:
        """Plan (XY) positions of the loop."""
        return [v.to_2d() for v in self.vertices]

    def elevations(self) -> List[float]:
        """Per-vertex elevations."""
        return [v.z for v in self.vertices]
