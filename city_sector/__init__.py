"""
City Sector Generator

A Python geometry pipeline that derives city block plots, building
footprints and stepped roof silhouettes from a handful of 2D seed points.

Can be used as:
- Library: from city_sector.generators import generate_sector
- CLI tool: python -m city_sector.main
"""

__version__ = "0.3.0"
__author__ = "City Sector Team"
