"""
Processing modules for City Sector Generator.

Contains seed sampling, Delaunay/Voronoi construction, rectangle
clipping, centroid shrinking and plot validation.
"""

from .seed_sampler import sample_seed_points
from .delaunay import make_sites, triangulate_sites
from .voronoi import (
    circumcenter,
    order_around,
    build_cell,
    build_all_cells,
)
from .clipping import clip_polygon_to_rect
from .shrink import shrink_polygon
from .plot_validator import (
    PlotRejection,
    plot_rejection_reason,
    validate_plot_geometry,
)

__all__ = [
    'sample_seed_points',
    'make_sites',
    'triangulate_sites',
    'circumcenter',
    'order_around',
    'build_cell',
    'build_all_cells',
    'clip_polygon_to_rect',
    'shrink_polygon',
    'PlotRejection',
    'plot_rejection_reason',
    'validate_plot_geometry',
]
