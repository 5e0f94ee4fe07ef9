"""
Geometry generators for City Sector Generator.

Contains the mitered edge-loop offsetter, roof layers, pavement
surfaces and the sector generation pass.
"""

from .roof_offset import offset_edge_loop, strip_triangles
from .roof_layers import generate_roof
from .pavement import determine_pavement_outline, generate_pavement
from .sector_generator import generate_sector, footprint_vertices

__all__ = [
    'offset_edge_loop',
    'strip_triangles',
    'generate_roof',
    'determine_pavement_outline',
    'generate_pavement',
    'generate_sector',
    'footprint_vertices',
]
