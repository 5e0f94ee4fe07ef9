"""
Building data model for City Sector Generator.

Provides the footprint vertex record consumed from the placement layer
and the roof/pavement/building records handed back to it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .geometry import Point2D, EdgeLoop

TriangleIndices = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class FootprintVertex:
    """Footprint corner with its "place corner feature" flag."""
    position: Point2D
    add_corner_element: bool = True


@dataclass
class RoofLayer:
    """
    One sloped roof band between two edge loops.

    Strip triangles index into `outer.vertices + inner.vertices`.
    """
    name: str
    outer: EdgeLoop
    inner: EdgeLoop
    strip_triangles: List[TriangleIndices]


@dataclass
class RoofResult:
    """Sloped layers (mansard, attic) plus the triangulated flat cap."""
    layers: List[RoofLayer] = field(default_factory=list)
    cap: Optional[EdgeLoop] = None
    cap_triangles: List[TriangleIndices] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class PavementSurface:
    """Flat pavement outline and its triangulation."""
    outline: List[Point2D]
    triangles: List[TriangleIndices]


@dataclass
class BuildingPlan:
    """
    Everything the placement layer needs to build one plot.

    Attributes:
        site_index: Voronoi site the plot was carved from
        plot: Pavement plot (street margin already removed)
        footprint: Building footprint vertices (CCW)
        floors: Number of middle floors
        wall_top: Elevation where the roof starts
        roof: Roof layers and cap
        pavement: Pavement surface, None if it could not be triangulated
    """
    site_index: int
    plot: List[Point2D]
    footprint: List[FootprintVertex]
    floors: int
    wall_top: float
    roof: RoofResult
    pavement: Optional[PavementSurface] = None

    @property
    def footprint_ring(self) -> List[Point2D]:
        return [v.position for v in self.footprint]

    @property
    def corner_positions(self) -> List[Point2D]:
        """Footprint corners flagged for a corner feature."""
        return [v.position for v in self.footprint if v.add_corner_element]
