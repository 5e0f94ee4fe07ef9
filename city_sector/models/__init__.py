"""
Data models for City Sector Generator.
"""

from .geometry import Point2D, Point3D, Rect, EdgeLoop
from .sector import (
    Site,
    SiteTriangle,
    ErrorCategory,
    SkipReason,
    StageResult,
    PlotRecord,
    SectorReport,
    SectorResult,
)
from .building import (
    FootprintVertex,
    RoofLayer,
    RoofResult,
    PavementSurface,
    BuildingPlan,
)

__all__ = [
    'Point2D', 'Point3D', 'Rect', 'EdgeLoop',
    'Site', 'SiteTriangle', 'ErrorCategory', 'SkipReason', 'StageResult',
    'PlotRecord', 'SectorReport', 'SectorResult',
    'FootprintVertex', 'RoofLayer', 'RoofResult', 'PavementSurface',
    'BuildingPlan',
]
