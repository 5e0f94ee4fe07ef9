"""
Stepped roof generator for City Sector Generator.

Generates the roof of a building as a sequence of edge loops:

    wall top -> mansard layer -> attic layer -> flat cap

Each sloped layer is the previous loop offset inward and raised, with
the footprint as the stable direction reference. The cap is the last
loop, optionally inset or overhung, triangulated by ear clipping.
"""

from typing import List, Optional
import logging

from ..models.geometry import Point2D, EdgeLoop
from ..models.building import RoofLayer, RoofResult
from ..models.sector import SkipReason, StageResult
from ..config import RoofConfig, GEOMETRIC_EPSILON
from ..utils.triangulation import triangulate_polygon
from .roof_offset import offset_edge_loop, strip_triangles

logger = logging.getLogger(__name__)

MANSARD_LAYER_NAME = "mansard"
ATTIC_LAYER_NAME = "attic"


def generate_roof(
    footprint: List[Point2D],
    wall_top: float,
    config: Optional[RoofConfig] = None
) -> StageResult:
    """
    Generate all roof layers for a footprint.

    Args:
        footprint: Building footprint (stable base for every offset)
        wall_top: Elevation of the top of the walls
        config: Roof parameters (defaults if None)

    Returns:
        StageResult holding a RoofResult, or skipped with INPUT_INVALID,
        ROOF_LAYER_FAILED or TRIANGULATION_FAILED
    """
    if config is None:
        config = RoofConfig()

    if len(footprint) < 3:
        return StageResult.skipped(
            SkipReason.INPUT_INVALID,
            f"footprint has {len(footprint)} vertices"
        )

    roof = RoofResult()
    current = EdgeLoop.from_ring(footprint, wall_top)

    stages = [
        (MANSARD_LAYER_NAME, config.use_mansard, config.mansard_distance, config.mansard_rise),
        (ATTIC_LAYER_NAME, config.use_attic, config.attic_distance, config.attic_rise),
    ]

    for name, enabled, distance, rise in stages:
        if not enabled or distance <= GEOMETRIC_EPSILON:
            continue

        inner = offset_edge_loop(current, footprint, distance, rise)
        if inner is None:
            logger.warning(f"Roof: failed to compute inner edge loop for {name} layer")
            return StageResult.skipped(
                SkipReason.ROOF_LAYER_FAILED,
                f"{name} layer offset failed"
            )

        roof.layers.append(RoofLayer(
            name=name,
            outer=current,
            inner=inner,
            strip_triangles=strip_triangles(len(current)),
        ))
        current = inner

    return _add_flat_cap(roof, current, footprint, config)


def _add_flat_cap(
    roof: RoofResult,
    perimeter: EdgeLoop,
    footprint: List[Point2D],
    config: RoofConfig
) -> StageResult:
    """Offset (optionally) and triangulate the final perimeter."""
    if abs(config.flat_roof_edge_offset) > GEOMETRIC_EPSILON:
        # Positive offset is an overhang; the offsetter treats positive as inward
        offset = offset_edge_loop(perimeter, footprint, -config.flat_roof_edge_offset, 0.0)
        if offset is not None:
            perimeter = offset
        else:
            message = "Flat roof offset failed; using non-offset perimeter"
            logger.warning(f"Roof: {message}")
            roof.warnings.append(message)

    triangles = triangulate_polygon(perimeter.ring())
    if triangles is None:
        logger.warning(
            f"Roof: flat cap triangulation failed ({len(perimeter)} vertices)"
        )
        return StageResult.skipped(
            SkipReason.TRIANGULATION_FAILED,
            "flat cap could not be triangulated"
        )

    roof.cap = perimeter
    roof.cap_triangles = triangles
    return StageResult.ok(roof)
