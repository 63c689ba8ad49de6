"""Intersection queries.

- lines: infinite line vs infinite line
- segments: bounded segment vs bounded segment, with collinear overlap
- polygons: boundary vs boundary
"""

from planar_nfp.queries.intersection import (
    LineIntersection,
    LineIntersectionKind,
    PolygonIntersection,
    PolygonIntersectionKind,
    SegmentIntersection,
    SegmentIntersectionKind,
    intersect_lines,
    intersect_polygons,
    intersect_segments,
)

__all__ = [
    "LineIntersection",
    "LineIntersectionKind",
    "PolygonIntersection",
    "PolygonIntersectionKind",
    "SegmentIntersection",
    "SegmentIntersectionKind",
    "intersect_lines",
    "intersect_polygons",
    "intersect_segments",
]
