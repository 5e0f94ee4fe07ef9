"""
Pavement surface generator for City Sector Generator.

The pavement is a flat ring around the building footprint. Its outline
is the footprint pushed outward by the pavement outset; when the
footprint is too degenerate for that, the original plot is used.
"""

from typing import List, Optional
import logging

from ..models.geometry import Point2D
from ..models.building import PavementSurface
from ..config import (
    GEOMETRIC_EPSILON,
    PAVEMENT_MIN_SIDE_LENGTH,
    PAVEMENT_MIN_ANGLE_DEG,
    PAVEMENT_MIN_AREA,
)
from ..processing.shrink import shrink_polygon
from ..processing.plot_validator import validate_plot_geometry
from ..utils.polygon_utils import ensure_ccw
from ..utils.triangulation import triangulate_polygon

logger = logging.getLogger(__name__)


def _is_pavement_capable(ring: Optional[List[Point2D]]) -> bool:
    return validate_plot_geometry(
        ring,
        PAVEMENT_MIN_SIDE_LENGTH,
        PAVEMENT_MIN_ANGLE_DEG,
        PAVEMENT_MIN_AREA,
    )


def determine_pavement_outline(
    footprint: List[Point2D],
    outset: float,
    original_plot: Optional[List[Point2D]] = None
) -> Optional[List[Point2D]]:
    """
    Choose the outline of the pavement surface.

    Args:
        footprint: Building footprint
        outset: Outward distance from the footprint (<= epsilon: footprint as-is)
        original_plot: Plot to fall back to when the footprint is unusable

    Returns:
        Outline polygon (winding as produced), or None if there is nothing
        usable to pave
    """
    if _is_pavement_capable(footprint):
        if abs(outset) <= GEOMETRIC_EPSILON:
            return list(footprint)

        expanded = shrink_polygon(footprint, -outset)
        if _is_pavement_capable(expanded):
            return expanded

        logger.debug("Pavement: outset outline rejected, using footprint")
        return list(footprint)

    if original_plot is not None and len(original_plot) >= 3:
        logger.debug("Pavement: footprint unusable, falling back to original plot")
        return list(original_plot)

    return None


def generate_pavement(
    footprint: List[Point2D],
    outset: float,
    original_plot: Optional[List[Point2D]] = None
) -> Optional[PavementSurface]:
    """
    Build the triangulated pavement surface for one plot.

    Returns:
        PavementSurface with a CCW outline, or None if no outline could
        be chosen or triangulated
    """
    outline = determine_pavement_outline(footprint, outset, original_plot)
    if outline is None:
        return None

    outline = ensure_ccw(outline)
    triangles = triangulate_polygon(outline)
    if triangles is None:
        logger.warning(f"Pavement: triangulation failed ({len(outline)} vertices)")
        return None

    return PavementSurface(outline=outline, triangles=triangles)
