"""
Sector generation pass for City Sector Generator.

Runs the full pipeline for one rectangular city sector:

    seeds -> Delaunay -> Voronoi cells -> clip -> snap -> street margin
          -> footprint -> floors -> roof layers -> pavement

Sites are processed independently. A site that fails any stage is
skipped with a recorded reason and the pass continues; only a seed set
that cannot be triangulated aborts the pass.
"""

from typing import List, Optional, Tuple
import logging
import random

from ..models.geometry import Point2D, Rect
from ..models.sector import (
    Site,
    SkipReason,
    StageResult,
    PlotRecord,
    SectorResult,
    SectorReport,
)
from ..models.building import FootprintVertex, BuildingPlan
from ..config import SectorConfig, RoofConfig, GEOMETRIC_EPSILON
from ..processing.seed_sampler import sample_seed_points
from ..processing.delaunay import make_sites, triangulate_sites
from ..processing.voronoi import build_all_cells
from ..processing.clipping import clip_polygon_to_rect
from ..processing.shrink import shrink_polygon
from ..processing.plot_validator import plot_rejection_reason
from ..utils.math_utils import orientation
from ..utils.polygon_utils import ensure_ccw, snap_polygon_vertices
from ..utils.triangulation import triangulate_polygon
from .roof_layers import generate_roof
from .pavement import generate_pavement

logger = logging.getLogger(__name__)


def generate_sector(
    config: Optional[SectorConfig] = None,
    roof_config: Optional[RoofConfig] = None,
    rng: Optional[random.Random] = None
) -> SectorResult:
    """
    Run one generation pass.

    Args:
        config: Sector parameters (defaults if None)
        roof_config: Roof layer parameters (defaults if None)
        rng: Random source; seeded from `config.seed` if None

    Returns:
        SectorResult. `result.report.aborted` is set when fewer than 3
        seeds survive or the Delaunay step yields no triangles.
    """
    if config is None:
        config = SectorConfig()
    if roof_config is None:
        roof_config = RoofConfig()
    if rng is None:
        rng = random.Random(config.seed)

    result = SectorResult()
    report = result.report

    # Step 1: Seeds
    seeds = sample_seed_points(
        config.seed_count,
        config.sector_width,
        config.sector_height,
        config.bounds_padding,
        rng,
    )
    result.seeds = seeds
    report.seed_count = len(seeds)

    if len(seeds) < 3:
        return _abort(result, f"only {len(seeds)} unique seed points")

    # Step 2: Delaunay
    sites = make_sites(seeds)
    triangles = triangulate_sites(sites)
    result.triangles = triangles
    report.triangle_count = len(triangles)

    if not triangles:
        return _abort(result, "Delaunay triangulation produced no triangles")

    logger.info(f"Triangulated {len(sites)} sites into {len(triangles)} triangles")

    # Step 3: Per-site pipeline
    rect = Rect.centered(config.sector_width, config.sector_height)
    cells = build_all_cells(sites, triangles)

    for site in sites:
        cell_result = cells[site.index]
        if cell_result.is_ok:
            result.raw_cells[site.index] = cell_result.value
            outcome = _process_site(site, cell_result.value, rect, config, roof_config, rng, result)
        else:
            outcome = cell_result

        result.site_results[site.index] = outcome
        if outcome.is_ok:
            if outcome.value.roof.warnings:
                report.warnings.extend(
                    f"site {site.index}: {w}" for w in outcome.value.roof.warnings
                )
        else:
            report.record_skip(outcome)
            logger.debug(
                f"Site {site.index} skipped: {outcome.reason.value}"
                + (f" ({outcome.detail})" if outcome.detail else "")
            )

    report.raw_cells = len(result.raw_cells)
    report.plots = len(result.plots)
    report.buildings = len(result.buildings)

    logger.info(
        f"Sector pass complete: {report.raw_cells} cells, {report.plots} plots, "
        f"{report.buildings} buildings from {report.seed_count} seeds"
    )
    return result


def _abort(result: SectorResult, reason: str) -> SectorResult:
    logger.warning(f"Sector pass aborted: {reason}")
    result.report.aborted = True
    result.report.abort_reason = reason
    return result


def _process_site(
    site: Site,
    cell: List[Point2D],
    rect: Rect,
    config: SectorConfig,
    roof_config: RoofConfig,
    rng: random.Random,
    result: SectorResult
) -> StageResult:
    """Carve one site's cell down to a BuildingPlan."""
    clipped = clip_polygon_to_rect(cell, rect)
    if clipped is None:
        return StageResult.skipped(SkipReason.CLIPPED_AWAY)

    if config.plot_vertex_snap_size > GEOMETRIC_EPSILON:
        clipped = snap_polygon_vertices(clipped, config.plot_vertex_snap_size)
        if len(clipped) < 3:
            return StageResult.skipped(
                SkipReason.SNAP_DEGENERATE,
                f"{len(clipped)} vertices after snapping"
            )

    # Pavement plot: half the street on each side of the cell edge
    plot = shrink_polygon(clipped, config.street_width / 2.0)
    if plot is None:
        return StageResult.skipped(SkipReason.SHRINK_FAILED, "street margin")

    rejection = plot_rejection_reason(
        plot, config.min_side_length, config.min_angle_deg, config.min_area
    )
    if rejection is not None:
        return StageResult.skipped(SkipReason.PLOT_REJECTED, rejection.value)

    plot = ensure_ccw(plot)
    result.plots.append(PlotRecord(
        site_index=site.index,
        raw_cell=cell,
        clipped_cell=clipped,
        plot=plot,
        triangles=_plot_triangles(plot, site.index, result.report),
    ))

    # Building footprint
    footprint = shrink_polygon(plot, config.building_inset)
    if footprint is None:
        return StageResult.skipped(SkipReason.SHRINK_FAILED, "building inset")

    rejection = plot_rejection_reason(
        footprint, config.min_side_length, config.min_angle_deg, config.min_area
    )
    if rejection is not None:
        return StageResult.skipped(SkipReason.FOOTPRINT_REJECTED, rejection.value)

    floors = rng.randint(config.min_floors, config.max_floors)
    wall_top = config.floor_height * (1 + floors)

    roof_result = generate_roof(footprint, wall_top, roof_config)
    if not roof_result.is_ok:
        return roof_result

    pavement = generate_pavement(footprint, config.pavement_outset, plot)

    return StageResult.ok(BuildingPlan(
        site_index=site.index,
        plot=plot,
        footprint=footprint_vertices(footprint),
        floors=floors,
        wall_top=wall_top,
        roof=roof_result.value,
        pavement=pavement,
    ))


def _plot_triangles(plot: List[Point2D], site_index: int, report: SectorReport) -> List[Tuple[int, int, int]]:
    triangles = triangulate_polygon(plot)
    if triangles is None:
        logger.warning(f"Site {site_index}: plot triangulation failed ({len(plot)} vertices)")
        report.warnings.append(f"site {site_index}: plot triangulation failed")
        return []
    return triangles


def footprint_vertices(footprint: List[Point2D]) -> List[FootprintVertex]:
    """
    Wrap a CCW footprint for the placement layer.

    Convex corners are flagged for a corner feature; reflex and
    straight corners are not.
    """
    n = len(footprint)
    vertices = []
    for i in range(n):
        turn = orientation(footprint[i - 1], footprint[i], footprint[(i + 1) % n])
        vertices.append(FootprintVertex(footprint[i], add_corner_element=turn > GEOMETRIC_EPSILON))
    return vertices
