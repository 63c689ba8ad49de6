"""Polygon generators: convex decomposition, convex merge and no-fit polygons."""

from planar_nfp.generators.decomposition import merge_convex, triangulate
from planar_nfp.generators.nfp import no_fit_polygon

__all__ = [
    "merge_convex",
    "triangulate",
    "no_fit_polygon",
]
