"""Intersection tests between lines, segments and polygons.

Every test returns a tagged result; "no intersection" is a regular
outcome, never an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from operator import attrgetter

from planar_nfp.models.geometry import ZERO_TOLERANCE, Point2D
from planar_nfp.models.line import Line, VerticalLine
from planar_nfp.models.polygon import Polygon2D
from planar_nfp.models.segment import LineSegment

logger = logging.getLogger(__name__)


class LineIntersectionKind(str, Enum):
    NONE = "none"  # parallel, distinct lines
    POINT = "point"
    EQUAL = "equal"  # same infinite line


class SegmentIntersectionKind(str, Enum):
    NONE = "none"
    POINT = "point"
    OVERLAP = "overlap"


class PolygonIntersectionKind(str, Enum):
    NONE = "none"
    POINT = "point"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class LineIntersection:
    """Result of intersecting two infinite lines."""
    kind: LineIntersectionKind
    point: Point2D | None = None


@dataclass(frozen=True)
class SegmentIntersection:
    """Result of intersecting two segments.

    `point` is set for POINT, `segment` for OVERLAP.
    """
    kind: SegmentIntersectionKind
    point: Point2D | None = None
    segment: LineSegment | None = None

    @property
    def found(self) -> bool:
        return self.kind != SegmentIntersectionKind.NONE


@dataclass(frozen=True)
class PolygonIntersection:
    """Result of intersecting two polygon boundaries."""
    kind: PolygonIntersectionKind
    points: list[Point2D] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.kind != PolygonIntersectionKind.NONE


_NO_SEGMENT_HIT = SegmentIntersection(kind=SegmentIntersectionKind.NONE)


def intersect_lines(first: Line, other: Line, tol: float = ZERO_TOLERANCE) -> LineIntersection:
    """Intersect two infinite lines."""
    if first.is_parallel_to(other, tol):
        if first.coincides_with(other, tol):
            return LineIntersection(kind=LineIntersectionKind.EQUAL)
        return LineIntersection(kind=LineIntersectionKind.NONE)

    if isinstance(first, VerticalLine):
        point = other.point_at(first.x)
    elif isinstance(other, VerticalLine):
        point = first.point_at(other.x)
    else:
        # m1·x + b1 = m2·x + b2
        point = first.point_at((other.b - first.b) / (first.m - other.m))
    return LineIntersection(kind=LineIntersectionKind.POINT, point=point)


def intersect_segments(
    first: LineSegment,
    other: LineSegment,
    tol: float = ZERO_TOLERANCE,
) -> SegmentIntersection:
    """Intersect two bounded segments.

    Non-parallel segments are solved with Cramer's rule; a touch at a
    shared endpoint is a POINT. Parallel segments only meet when collinear:
    overlapping ones report an OVERLAP spanning the outermost of the four
    endpoints, ones that merely touch report a POINT, and disjoint ones
    report NONE.
    """
    denominator = first.denominator_with(other)
    if abs(denominator) < tol:
        return _intersect_parallel(first, other, tol)

    a0, a1 = first.start, first.end
    b0, b1 = other.start, other.end
    t = ((a0.x - b0.x) * (b0.y - b1.y) - (a0.y - b0.y) * (b0.x - b1.x)) / denominator
    u = -((a0.x - a1.x) * (a0.y - b0.y) - (a0.y - a1.y) * (a0.x - b0.x)) / denominator

    # Parameter slack equivalent to `tol` in distance along each segment
    t_slack = tol / first.length
    u_slack = tol / other.length
    if not (-t_slack <= t <= 1.0 + t_slack and -u_slack <= u <= 1.0 + u_slack):
        return _NO_SEGMENT_HIT

    point = first.point_at(min(max(t, 0.0), 1.0))
    return SegmentIntersection(kind=SegmentIntersectionKind.POINT, point=point)


def _intersect_parallel(
    first: LineSegment,
    other: LineSegment,
    tol: float,
) -> SegmentIntersection:
    collinear = first.line_with(tol).is_point_on(
        other.start, tol
    ) or other.line_with(tol).is_point_on(first.start, tol)
    if not collinear:
        return _NO_SEGMENT_HIT

    points = [first.start, first.end, other.start, other.end]
    # project on x unless all four endpoints share it
    x0 = points[0].x
    key = attrgetter("y") if all(abs(p.x - x0) < tol for p in points) else attrgetter("x")

    first_low, first_high = sorted((key(first.start), key(first.end)))
    other_low, other_high = sorted((key(other.start), key(other.end)))
    shared = min(first_high, other_high) - max(first_low, other_low)
    if shared < -tol:
        return _NO_SEGMENT_HIT
    if shared <= tol:
        touch = min(first_high, other_high)
        point = min((first.start, first.end), key=lambda p: abs(key(p) - touch))
        return SegmentIntersection(kind=SegmentIntersectionKind.POINT, point=point)

    points.sort(key=key)
    logger.debug("Collinear overlap spans %s -> %s", points[0], points[-1])
    return SegmentIntersection(
        kind=SegmentIntersectionKind.OVERLAP,
        segment=LineSegment(start=points[0], end=points[-1]),
    )


def intersect_polygons(
    first: Polygon2D,
    other: Polygon2D,
    tol: float = ZERO_TOLERANCE,
) -> PolygonIntersection:
    """Collect the points where two polygon boundaries meet.

    Every edge pair is tested. Overlapping edges contribute both ends of
    the overlap. Points equal under `tol` are reported once, in discovery
    order.
    """
    found: list[Point2D] = []

    def add(pt: Point2D) -> None:
        if not any(pt.epsilon_equals(seen, tol) for seen in found):
            found.append(pt)

    for first_edge in first.edges():
        for other_edge in other.edges():
            hit = intersect_segments(first_edge, other_edge, tol)
            if hit.kind == SegmentIntersectionKind.POINT:
                add(hit.point)
            elif hit.kind == SegmentIntersectionKind.OVERLAP:
                add(hit.segment.start)
                add(hit.segment.end)

    if not found:
        return PolygonIntersection(kind=PolygonIntersectionKind.NONE)
    if len(found) == 1:
        return PolygonIntersection(kind=PolygonIntersectionKind.POINT, points=found)
    return PolygonIntersection(kind=PolygonIntersectionKind.MULTIPLE, points=found)
