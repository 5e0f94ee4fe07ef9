"""
Sector data model for City Sector Generator.

Provides the Site/SiteTriangle arena types consumed by the Voronoi
builder, the tagged StageResult used by every fallible pipeline stage,
and the per-pass result and report records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

from .geometry import Point2D

T = TypeVar('T')


@dataclass(frozen=True, slots=True)
class Site:
    """Voronoi generator: a seed point with a stable integer identity."""
    index: int
    position: Point2D


# Delaunay triangle as three Site indices. Not to be confused with the
# (i, j, k) vertex-index triangles produced by ear clipping.
SiteTriangle = Tuple[int, int, int]


class ErrorCategory(Enum):
    """Failure taxonomy shared by all geometry stages."""
    INPUT_INVALID = "input_invalid"
    DEGENERATE = "degenerate"
    NUMERICALLY_UNSTABLE = "numerically_unstable"
    GEOMETRIC_INFEASIBLE = "geometric_infeasible"


class SkipReason(Enum):
    """
    Reason a site, layer or surface was skipped.

    Each value refines one ErrorCategory; see SkipReason.category.
    """
    INPUT_INVALID = "input_invalid"
    NO_CELL = "no_cell"
    CLIPPED_AWAY = "clipped_away"
    SNAP_DEGENERATE = "snap_degenerate"
    SHRINK_FAILED = "shrink_failed"
    PLOT_REJECTED = "plot_rejected"
    FOOTPRINT_REJECTED = "footprint_rejected"
    ROOF_LAYER_FAILED = "roof_layer_failed"
    TRIANGULATION_FAILED = "triangulation_failed"

    @property
    def category(self) -> ErrorCategory:
        return _REASON_CATEGORIES[self]


_REASON_CATEGORIES = {
    SkipReason.INPUT_INVALID: ErrorCategory.INPUT_INVALID,
    SkipReason.NO_CELL: ErrorCategory.DEGENERATE,
    SkipReason.CLIPPED_AWAY: ErrorCategory.GEOMETRIC_INFEASIBLE,
    SkipReason.SNAP_DEGENERATE: ErrorCategory.DEGENERATE,
    SkipReason.SHRINK_FAILED: ErrorCategory.GEOMETRIC_INFEASIBLE,
    SkipReason.PLOT_REJECTED: ErrorCategory.GEOMETRIC_INFEASIBLE,
    SkipReason.FOOTPRINT_REJECTED: ErrorCategory.GEOMETRIC_INFEASIBLE,
    SkipReason.ROOF_LAYER_FAILED: ErrorCategory.NUMERICALLY_UNSTABLE,
    SkipReason.TRIANGULATION_FAILED: ErrorCategory.GEOMETRIC_INFEASIBLE,
}


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """
    Tagged outcome of a fallible stage: Ok(value) or Skipped(reason).

    Callers must check `is_ok` before reading `value`.
    """
    value: Optional[T] = None
    reason: Optional[SkipReason] = None
    detail: str = ""

    @staticmethod
    def ok(value: T) -> 'StageResult[T]':
        return StageResult(value=value)

    @staticmethod
    def skipped(reason: SkipReason, detail: str = "") -> 'StageResult[T]':
        return StageResult(reason=reason, detail=detail)

    @property
    def is_ok(self) -> bool:
        return self.reason is None


@dataclass
class PlotRecord:
    """
    Pavement plot carved from one site's clipped Voronoi cell.

    `triangles` index into `plot` and are empty if the plot could not
    be triangulated.
    """
    site_index: int
    raw_cell: List[Point2D]
    clipped_cell: List[Point2D]
    plot: List[Point2D]
    triangles: List[Tuple[int, int, int]] = field(default_factory=list)


@dataclass
class SectorReport:
    """Counts and skip reasons from one generation pass."""
    seed_count: int = 0
    triangle_count: int = 0
    raw_cells: int = 0
    plots: int = 0
    buildings: int = 0
    aborted: bool = False
    abort_reason: Optional[str] = None
    skip_reasons: Dict[str, int] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def record_skip(self, result: StageResult) -> None:
        """Count a skipped stage outcome by reason."""
        key = result.reason.value
        self.skip_reasons[key] = self.skip_reasons.get(key, 0) + 1


@dataclass
class SectorResult:
    """
    Complete output of one sector generation pass.

    Attributes:
        seeds: Deduplicated seed points (Site index = list position)
        triangles: Delaunay triangles as site index triples
        raw_cells: Successfully built (unclipped) Voronoi cells by site
        site_results: Final StageResult per site; ok values are BuildingPlans
        report: Aggregated counts and skip reasons
    """
    seeds: List[Point2D] = field(default_factory=list)
    triangles: List[SiteTriangle] = field(default_factory=list)
    raw_cells: Dict[int, List[Point2D]] = field(default_factory=dict)
    plots: List[PlotRecord] = field(default_factory=list)
    site_results: Dict[int, StageResult] = field(default_factory=dict)
    report: SectorReport = field(default_factory=SectorReport)

    @property
    def buildings(self) -> list:
        """BuildingPlans of every site that completed the pipeline."""
        return [r.value for r in self.site_results.values() if r.is_ok]
