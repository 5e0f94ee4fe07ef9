"""
Voronoi cell construction for City Sector Generator.

Builds each site's cell from the circumcenters of its incident Delaunay
triangles, ordered by angle around the site. Sites on the convex hull
of the seed set have unbounded true cells and usually collect fewer
than 3 circumcenters; they are reported as NO_CELL, not as errors.
"""

from typing import Dict, List, Optional
import logging
import math

from ..models.geometry import Point2D
from ..models.sector import Site, SiteTriangle, SkipReason, StageResult
from ..config import HIGH_PRECISION_EPSILON

logger = logging.getLogger(__name__)


def circumcenter(a: Point2D, b: Point2D, c: Point2D) -> Optional[Point2D]:
    """
    Closed-form circumcenter of triangle abc.

    Returns:
        Circumcenter, or None if the points are collinear
    """
    d = 2.0 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if abs(d) < HIGH_PRECISION_EPSILON:
        return None

    a_sq = a.x * a.x + a.y * a.y
    b_sq = b.x * b.x + b.y * b.y
    c_sq = c.x * c.x + c.y * c.y

    ux = (a_sq * (b.y - c.y) + b_sq * (c.y - a.y) + c_sq * (a.y - b.y)) / d
    uy = (a_sq * (c.x - b.x) + b_sq * (a.x - c.x) + c_sq * (b.x - a.x)) / d

    return Point2D(ux, uy)


def order_around(vertices: List[Point2D], center: Point2D) -> List[Point2D]:
    """Sort vertices by ascending atan2 angle around center (CCW)."""
    return sorted(
        vertices,
        key=lambda v: math.atan2(v.y - center.y, v.x - center.x)
    )


def incident_triangles(
    triangles: List[SiteTriangle]
) -> Dict[int, List[SiteTriangle]]:
    """Map each site index to the triangles that reference it."""
    incidence: Dict[int, List[SiteTriangle]] = {}
    for tri in triangles:
        for site_index in tri:
            incidence.setdefault(site_index, []).append(tri)
    return incidence


def build_cell(
    site: Site,
    sites: List[Site],
    triangles: List[SiteTriangle]
) -> Optional[List[Point2D]]:
    """
    Build the Voronoi cell polygon of one site.

    Args:
        site: Site whose cell is built
        sites: All sites, indexable by Site.index
        triangles: Triangles incident to `site` (others are ignored)

    Returns:
        CCW cell polygon, or None if fewer than 3 circumcenters were found
    """
    centers = []
    for tri in triangles:
        if site.index not in tri:
            continue
        a, b, c = (sites[i].position for i in tri)
        center = circumcenter(a, b, c)
        if center is not None:
            centers.append(center)

    if len(centers) < 3:
        return None

    return order_around(centers, site.position)


def build_all_cells(
    sites: List[Site],
    triangles: List[SiteTriangle]
) -> Dict[int, StageResult]:
    """
    Build the Voronoi cell of every site.

    Args:
        sites: All sites (Site.index == list position)
        triangles: Delaunay triangles as site index triples

    Returns:
        Dict of site index -> StageResult holding the cell polygon,
        or skipped with NO_CELL
    """
    incidence = incident_triangles(triangles)
    results: Dict[int, StageResult] = {}

    for site in sites:
        cell = build_cell(site, sites, incidence.get(site.index, []))
        if cell is None:
            results[site.index] = StageResult.skipped(
                SkipReason.NO_CELL,
                f"site {site.index} has fewer than 3 valid circumcenters"
            )
            logger.debug(f"Site {site.index}: no bounded cell")
        else:
            results[site.index] = StageResult.ok(cell)

    return results
