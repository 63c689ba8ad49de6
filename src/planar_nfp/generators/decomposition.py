"""Convex decomposition of simple polygons and the inverse convex merge.

triangulate() clips one ear per pass: every locally convex vertex whose
neighbor-to-neighbor diagonal crosses no other edge is a candidate, and
the shortest diagonal wins. merge_convex() glues two convex pieces back
together along a shared edge when the union stays convex.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from planar_nfp.models.errors import DegenerateInputError
from planar_nfp.models.geometry import ZERO_TOLERANCE, Point2D, Vector2D
from planar_nfp.models.line import LinePointRelation, point_line_relation
from planar_nfp.models.polygon import CONCAVITY_THRESHOLD, Polygon2D
from planar_nfp.models.segment import LineSegment
from planar_nfp.queries.intersection import SegmentIntersectionKind, intersect_segments

logger = logging.getLogger(__name__)


class _VertexRing:
    """Closed ring of points with index links, so removal is O(1)."""

    def __init__(self, points: list[Point2D]) -> None:
        n = len(points)
        self.points = list(points)
        self.prev = [(i - 1) % n for i in range(n)]
        self.next = [(i + 1) % n for i in range(n)]
        self.head = 0
        self.size = n

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        i = self.head
        for _ in range(self.size):
            yield i
            i = self.next[i]

    def remove(self, i: int) -> None:
        self.next[self.prev[i]] = self.next[i]
        self.prev[self.next[i]] = self.prev[i]
        if self.head == i:
            self.head = self.next[i]
        self.size -= 1

    def corners(self) -> list[Point2D]:
        return [self.points[i] for i in self]


@dataclass
class _Ear:
    """Candidate diagonal prev → next cutting off vertex `middle`."""
    prev: int
    middle: int
    next: int
    length_sq: float


def _turn(ring: _VertexRing, i: int, ccw: bool) -> float:
    pts = ring.points
    incoming = Vector2D.from_points(pts[ring.prev[i]], pts[i])
    outgoing = Vector2D.from_points(pts[i], pts[ring.next[i]])
    angle = incoming.angle_to(outgoing)
    if ccw:
        return angle
    return (2.0 * math.pi - angle) % (2.0 * math.pi)


def _diagonal_is_clear(ring: _VertexRing, ear: _Ear, tol: float) -> bool:
    """True if the diagonal only meets other ring edges at their endpoints."""
    pts = ring.points
    diagonal = LineSegment(start=pts[ear.prev], end=pts[ear.next])
    for j in ring:
        # the two edges adjacent to the middle vertex
        if j == ear.prev or j == ear.middle:
            continue
        edge = LineSegment(start=pts[j], end=pts[ring.next[j]])
        hit = intersect_segments(diagonal, edge, tol)
        if hit.kind == SegmentIntersectionKind.OVERLAP:
            return False
        if hit.kind == SegmentIntersectionKind.POINT and not (
            hit.point.epsilon_equals(edge.start, tol) or hit.point.epsilon_equals(edge.end, tol)
        ):
            return False
    return True


def _contains_other_vertex(ring: _VertexRing, ear: _Ear, ccw: bool, tol: float) -> bool:
    """True if another ring vertex lies strictly inside the ear triangle.

    Catches a chain that enters the ear through one of the diagonal's own
    endpoints, which the edge test above lets through.
    """
    pts = ring.points
    a, b, c = pts[ear.prev], pts[ear.middle], pts[ear.next]
    inside = LinePointRelation.LEFT if ccw else LinePointRelation.RIGHT
    for j in ring:
        if j in (ear.prev, ear.middle, ear.next):
            continue
        pt = pts[j]
        if (
            point_line_relation(a, b, pt, tol) == inside
            and point_line_relation(b, c, pt, tol) == inside
            and point_line_relation(c, a, pt, tol) == inside
        ):
            return True
    return False


def _find_ears(ring: _VertexRing, ccw: bool, tol: float) -> list[_Ear]:
    pts = ring.points
    ears = []
    for i in ring:
        if _turn(ring, i, ccw) > CONCAVITY_THRESHOLD:
            continue
        ear = _Ear(
            prev=ring.prev[i],
            middle=i,
            next=ring.next[i],
            length_sq=pts[ring.prev[i]].distance_to_squared(pts[ring.next[i]]),
        )
        if _diagonal_is_clear(ring, ear, tol) and not _contains_other_vertex(ring, ear, ccw, tol):
            ears.append(ear)
    return ears


def triangulate(polygon: Polygon2D, tol: float = ZERO_TOLERANCE) -> list[Polygon2D]:
    """Decompose a simple polygon into N − 2 triangles.

    Each pass cuts off the ear with the shortest diagonal (first vertex in
    ring order on ties), emits it as (prev, middle, next) and drops the
    middle vertex. The last three vertices form the final triangle. A
    triangle comes back unchanged.

    Args:
        polygon: Simple polygon, either winding, possibly concave.
        tol: Geometric tolerance.

    Returns:
        Triangles whose union covers the polygon.

    Raises:
        DegenerateInputError: fewer than 3 vertices, or no ear can be cut
            (self-intersecting or collapsed input).
    """
    ccw = polygon.is_counter_clockwise
    ring = _VertexRing(polygon.vertices)
    triangles: list[Polygon2D] = []

    while len(ring) > 3:
        ears = _find_ears(ring, ccw, tol)
        if not ears:
            raise DegenerateInputError(
                f"No ear can be cut from the remaining {len(ring)}-vertex ring"
            )
        ear = min(ears, key=lambda e: e.length_sq)
        logger.debug(
            "Cutting ear at vertex %d (diagonal² %.6g, %d candidates)",
            ear.middle, ear.length_sq, len(ears),
        )
        pts = ring.points
        triangles.append(Polygon2D(vertices=[pts[ear.prev], pts[ear.middle], pts[ear.next]]))
        ring.remove(ear.middle)

    triangles.append(Polygon2D(vertices=ring.corners()))
    return triangles


def _find_shared_edge(
    first: Polygon2D,
    other: Polygon2D,
    tol: float,
) -> tuple[int, int] | None:
    """Indices (i, j) of an edge run in opposite directions by both polygons."""
    other_edges = other.edges()
    for i, edge in enumerate(first.edges()):
        for j, other_edge in enumerate(other_edges):
            if edge.is_from_to_coincident(other_edge, tol) and edge.end.epsilon_equals(
                other_edge.start, tol
            ):
                return i, j
    return None


def merge_convex(
    first: Polygon2D,
    other: Polygon2D,
    tol: float = ZERO_TOLERANCE,
) -> Polygon2D | None:
    """Merge two convex polygons that share one full edge.

    `other` is reversed on a copy if its winding differs from `first`.
    The union is accepted only if both new corners at the ends of the
    shared edge still turn in the ring's winding direction; a reflex or
    straight corner rejects the merge.

    Returns:
        The merged polygon, with `other`'s remaining vertices spliced in
        after the shared edge's start vertex, or None if the polygons share
        no edge or the union would not be strictly convex.
    """
    ccw = first.is_counter_clockwise
    if other.is_counter_clockwise != ccw:
        other = other.reversed()

    shared = _find_shared_edge(first, other, tol)
    if shared is None:
        logger.debug("No shared edge, nothing to merge")
        return None
    i, j = shared

    a, b = first.vertices, other.vertices
    n, m = len(a), len(b)
    start, end = a[i], a[(i + 1) % n]
    before_start = a[(i - 1) % n]
    after_end = a[(i + 2) % n]
    spliced = [b[(j + k) % m] for k in range(2, m)]
    # after the shared edge on `other`, and the last vertex before it
    after_shared = spliced[0]
    before_shared = spliced[-1]

    expected = LinePointRelation.LEFT if ccw else LinePointRelation.RIGHT
    at_start = point_line_relation(before_start, start, after_shared, tol)
    at_end = point_line_relation(before_shared, end, after_end, tol)
    if at_start != expected or at_end != expected:
        logger.debug(
            "Merge rejected: join corners turn %s/%s, need %s",
            at_start.value, at_end.value, expected.value,
        )
        return None

    return Polygon2D(vertices=a[: i + 1] + spliced + a[i + 1 :])
