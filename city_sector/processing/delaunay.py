"""
Delaunay provider for City Sector Generator.

Thin wrapper over scipy.spatial.Delaunay. Sites are passed in index
order, so every simplex row is already a triple of Site indices and no
coordinate matching is needed to map triangles back to sites.
"""

from typing import List, Sequence
import logging

import numpy as np
from scipy.spatial import Delaunay, QhullError

from ..models.sector import Site, SiteTriangle

logger = logging.getLogger(__name__)


def make_sites(points: Sequence) -> List[Site]:
    """Give each point a Site identity equal to its list position."""
    return [Site(index=i, position=p) for i, p in enumerate(points)]


def triangulate_sites(sites: List[Site]) -> List[SiteTriangle]:
    """
    Delaunay-triangulate sites.

    Args:
        sites: Sites whose `index` equals their position in the list

    Returns:
        Triangles as (i, j, k) site indices; empty if fewer than 3 sites
        were given or the point set is degenerate (e.g. all collinear)
    """
    if len(sites) < 3:
        logger.warning(f"Delaunay needs at least 3 sites, got {len(sites)}")
        return []

    coords = np.array([[s.position.x, s.position.y] for s in sites], dtype=float)

    try:
        tri = Delaunay(coords)
    except QhullError as e:
        logger.warning(f"Delaunay triangulation failed: {e}")
        return []

    # Map simplex rows back through the site list in case indices differ
    # from positions
    ids = [s.index for s in sites]
    triangles = [
        (ids[int(a)], ids[int(b)], ids[int(c)])
        for a, b, c in tri.simplices
    ]

    logger.debug(f"Delaunay produced {len(triangles)} triangles from {len(sites)} sites")
    return triangles
