"""Simple polygons and their metrics."""

from __future__ import annotations

import math

from pydantic import BaseModel

from planar_nfp.models.errors import DegenerateInputError
from planar_nfp.models.geometry import ZERO_TOLERANCE, Point2D, Vector2D
from planar_nfp.models.segment import LineSegment

# A vertex whose turn (measured in the ring's own winding) exceeds this is
# reflex. A straight angle still counts as convex.
CONCAVITY_THRESHOLD = math.pi


class Polygon2D(BaseModel):
    """Closed polygon in the XY plane. Auto-closes (no need to repeat first vertex).

    Vertex order encodes the winding; the sign of `signed_area` reveals it.
    Metrics need at least 3 vertices and raise DegenerateInputError otherwise.
    """

    vertices: list[Point2D]

    @classmethod
    def from_edges(cls, edges: list[LineSegment]) -> Polygon2D:
        """Polygon from a chain of edges, taking each edge's start point.

        No continuity checks are made between consecutive edges.
        """
        return cls(vertices=[edge.start for edge in edges])

    @classmethod
    def square(cls, length: float) -> Polygon2D:
        """Counter-clockwise square of side `length` centered on the origin."""
        half = length / 2.0
        return cls(
            vertices=[
                Point2D(x=-half, y=-half),
                Point2D(x=half, y=-half),
                Point2D(x=half, y=half),
                Point2D(x=-half, y=half),
            ]
        )

    @classmethod
    def circle(cls, radius: float, corner_count: int) -> Polygon2D:
        """Regular counter-clockwise polygon inscribed in a circle."""
        if corner_count == 0:
            return cls(vertices=[])
        step = 2.0 * math.pi / corner_count
        return cls(vertices=[Point2D.from_polar(radius, n * step) for n in range(corner_count)])

    def _require_ring(self) -> int:
        n = len(self.vertices)
        if n < 3:
            raise DegenerateInputError(f"Polygon needs at least 3 vertices, got {n}")
        return n

    @property
    def signed_area(self) -> float:
        """Shoelace area, positive for counter-clockwise winding."""
        n = self._require_ring()
        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.vertices[i].x * self.vertices[j].y
            area -= self.vertices[i].y * self.vertices[j].x
        return area / 2.0

    @property
    def area(self) -> float:
        """Compute area using the shoelace formula. Returns absolute value."""
        return abs(self.signed_area)

    @property
    def is_counter_clockwise(self) -> bool:
        return self.signed_area >= 0.0

    @property
    def perimeter(self) -> float:
        return sum(edge.length for edge in self.edges())

    def edge(self, index: int) -> LineSegment:
        """Edge from vertex `index` to its successor, wrapping last → first."""
        n = self._require_ring()
        return LineSegment(start=self.vertices[index], end=self.vertices[(index + 1) % n])

    def edges(self) -> list[LineSegment]:
        """All N edges of an N-vertex polygon, in vertex order."""
        n = self._require_ring()
        return [self.edge(i) for i in range(n)]

    def interior_angles(self) -> list[float]:
        """Signed angle at each vertex from the incoming to the outgoing edge.

        For a counter-clockwise ring convex corners read below π and reflex
        corners above; clockwise rings read mirrored.
        """
        n = self._require_ring()
        angles = []
        for i in range(n):
            prev_pt = self.vertices[(i - 1) % n]
            next_pt = self.vertices[(i + 1) % n]
            incoming = Vector2D.from_points(prev_pt, self.vertices[i])
            outgoing = Vector2D.from_points(self.vertices[i], next_pt)
            angles.append(incoming.angle_to(outgoing))
        return angles

    def turn_angles(self) -> list[float]:
        """Interior angles read in the ring's own winding direction."""
        angles = self.interior_angles()
        if self.is_counter_clockwise:
            return angles
        return [(2.0 * math.pi - a) % (2.0 * math.pi) for a in angles]

    def is_concave(self, tol: float = ZERO_TOLERANCE) -> bool:
        """True if some corner turns against the winding.

        A reflex turn within `tol` radians of a full turn is a
        near-straight corner and does not count.
        """
        full_turn = 2.0 * math.pi
        return any(
            CONCAVITY_THRESHOLD < a < full_turn - tol for a in self.turn_angles()
        )

    def is_convex(self, tol: float = ZERO_TOLERANCE) -> bool:
        return not self.is_concave(tol)

    def is_point_on(self, pt: Point2D, tol: float = ZERO_TOLERANCE) -> bool:
        """True if `pt` lies on any edge."""
        return any(edge.is_point_on(pt, tol) for edge in self.edges())

    def reverse_orientation(self) -> None:
        """Flip the winding in place."""
        self.vertices.reverse()

    def reversed(self) -> Polygon2D:
        return Polygon2D(vertices=list(reversed(self.vertices)))

    def epsilon_equals(self, other: Polygon2D, tol: float = ZERO_TOLERANCE) -> bool:
        """Vertex-by-vertex equality under tolerance, same starting vertex."""
        if len(self.vertices) != len(other.vertices):
            return False
        return all(a.epsilon_equals(b, tol) for a, b in zip(self.vertices, other.vertices))

    def is_equivalent(self, other: Polygon2D, tol: float = ZERO_TOLERANCE) -> bool:
        """Same vertex ring and winding, allowing any starting vertex."""
        n = len(self.vertices)
        if n != len(other.vertices):
            return False
        if n == 0:
            return True
        for shift in range(n):
            if all(
                self.vertices[(i + shift) % n].epsilon_equals(other.vertices[i], tol)
                for i in range(n)
            ):
                return True
        return False
