"""
Utility functions for City Sector Generator.
"""

from .math_utils import (
    line_intersection,
    segment_line_intersection,
    angle_between_vectors,
    orientation,
    clamp,
)
from .polygon_utils import (
    point_in_polygon,
    polygon_signed_area,
    polygon_area,
    polygon_centroid,
    ensure_ccw,
    is_convex,
    edge_outward_normal,
)
from .triangulation import (
    triangulate_polygon,
    triangulation_area,
    validate_triangulation,
)

__all__ = [
    'line_intersection',
    'segment_line_intersection',
    'angle_between_vectors',
    'orientation',
    'clamp',
    'point_in_polygon',
    'polygon_signed_area',
    'polygon_area',
    'polygon_centroid',
    'ensure_ccw',
    'is_convex',
    'edge_outward_normal',
    'triangulate_polygon',
    'triangulation_area',
    'validate_triangulation',
]
