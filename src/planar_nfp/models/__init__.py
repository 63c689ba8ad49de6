"""Geometry value types."""

from planar_nfp.models.errors import DegenerateInputError, DomainError
from planar_nfp.models.geometry import ZERO_TOLERANCE, Point2D, Vector2D
from planar_nfp.models.line import (
    Line,
    LinePointRelation,
    SlopedLine,
    VerticalLine,
    line_through,
    point_line_relation,
)
from planar_nfp.models.segment import LineSegment
from planar_nfp.models.polygon import CONCAVITY_THRESHOLD, Polygon2D

__all__ = [
    "DegenerateInputError",
    "DomainError",
    "ZERO_TOLERANCE",
    "Point2D",
    "Vector2D",
    "Line",
    "LinePointRelation",
    "SlopedLine",
    "VerticalLine",
    "line_through",
    "point_line_relation",
    "LineSegment",
    "CONCAVITY_THRESHOLD",
    "Polygon2D",
]
