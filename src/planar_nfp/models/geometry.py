"""Geometric primitives: points and displacement vectors in the XY plane."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

# Default epsilon under which two coordinates are treated as equal.
ZERO_TOLERANCE = 1e-6

# Cross products of unit vectors below this are parallel.
_SIN_EPSILON = 1e-12


class Point2D(BaseModel):
    """2D point in the XY plane."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Point2D:
        """Point at `radius` from the origin, `angle` radians from +x."""
        return cls(x=radius * math.cos(angle), y=radius * math.sin(angle))

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_to_squared(other))

    def distance_to_squared(self, other: Point2D) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def epsilon_equals(self, other: Point2D, tol: float = ZERO_TOLERANCE) -> bool:
        """True if both coordinate deltas are below `tol`."""
        return abs(self.x - other.x) < tol and abs(self.y - other.y) < tol

    def translated(self, vector: Vector2D) -> Point2D:
        """Copy of this point moved along `vector`."""
        return Point2D(x=self.x + vector.x, y=self.y + vector.y)

    @staticmethod
    def are_colinear(
        p0: Point2D, p1: Point2D, p2: Point2D, tol: float = ZERO_TOLERANCE
    ) -> bool:
        """True if the three points lie on one line (cross product within tol)."""
        v0 = Vector2D.from_points(p0, p1)
        v1 = Vector2D.from_points(p0, p2)
        return abs(v0.cross(v1)) < tol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.epsilon_equals(other)

    def __hash__(self) -> int:
        return hash((round(self.x, 6), round(self.y, 6)))


class Vector2D(BaseModel):
    """2D displacement. The zero vector is valid."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @classmethod
    def from_points(cls, start: Point2D, end: Point2D) -> Vector2D:
        """Vector pointing from `start` to `end`."""
        return cls(x=end.x - start.x, y=end.y - start.y)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length
        if length == 0.0:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / length, y=self.y / length)

    def negated(self) -> Vector2D:
        return Vector2D(x=-self.x, y=-self.y)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def angle_to(self, other: Vector2D) -> float:
        """Signed angle from this vector to `other`, in [0, 2π).

        Counter-clockwise turns read in (0, π), clockwise turns in
        (π, 2π). Computed with atan2 on the normalized vectors; a cross
        product within _SIN_EPSILON snaps to exactly 0 or π, so parallel
        vectors compare as exact ties. Order matters: a.angle_to(b) !=
        b.angle_to(a) in general.
        """
        a = self.normalized()
        b = other.normalized()
        sine = a.cross(b)
        cosine = a.dot(b)
        if abs(sine) < _SIN_EPSILON:
            return 0.0 if cosine >= 0.0 else math.pi
        angle = math.atan2(sine, cosine)
        if angle < 0.0:
            angle += 2.0 * math.pi
        return angle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=ZERO_TOLERANCE) and math.isclose(
            self.y, other.y, abs_tol=ZERO_TOLERANCE
        )

    def __hash__(self) -> int:
        return hash((round(self.x, 6), round(self.y, 6)))
