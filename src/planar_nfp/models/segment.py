"""Bounded line segments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from planar_nfp.models.errors import DegenerateInputError, DomainError
from planar_nfp.models.geometry import ZERO_TOLERANCE, Point2D, Vector2D
from planar_nfp.models.line import Line, VerticalLine, line_through


class LineSegment(BaseModel):
    """Segment from `start` to `end`. Zero-length segments are rejected."""

    model_config = ConfigDict(frozen=True)

    start: Point2D
    end: Point2D

    @model_validator(mode="after")
    def start_and_end_differ(self) -> LineSegment:
        if self.start == self.end:
            raise DegenerateInputError("LineSegment is zero-length: start and end coincide")
        return self

    @classmethod
    def from_points(cls, start: Point2D, end: Point2D) -> LineSegment:
        return cls(start=start, end=end)

    @property
    def line(self) -> Line:
        """Underlying infinite line, classified with the default tolerance."""
        return self.line_with(ZERO_TOLERANCE)

    def line_with(self, tol: float) -> Line:
        """Underlying infinite line, vertical when the x delta is within `tol`."""
        return line_through(self.start, self.end, tol)

    @property
    def direction(self) -> Vector2D:
        return Vector2D.from_points(self.start, self.end)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def length_squared(self) -> float:
        return self.start.distance_to_squared(self.end)

    def angle_to(self, other: LineSegment) -> float:
        """Signed angle between the two segment directions, in [0, 2π)."""
        return self.direction.angle_to(other.direction)

    def point_at(self, t: float) -> Point2D:
        """Linear interpolation between start (t=0) and end (t=1).

        Raises:
            DomainError: if t is outside [0, 1].
        """
        if t < 0.0 or t > 1.0:
            raise DomainError(f"Segment parameter {t} is not normalized to [0, 1]")
        return Point2D(
            x=self.start.x + t * (self.end.x - self.start.x),
            y=self.start.y + t * (self.end.y - self.start.y),
        )

    def is_point_on(self, pt: Point2D, tol: float = ZERO_TOLERANCE) -> bool:
        """True if `pt` lies on the segment within tolerance.

        The point must lie on the infinite line, and its dominant
        coordinate (y for vertical segments, x otherwise) must fall within
        the segment's range.
        """
        line = self.line_with(tol)
        if not line.is_point_on(pt, tol):
            return False
        if isinstance(line, VerticalLine):
            low, high = sorted((self.start.y, self.end.y))
            return low - tol <= pt.y <= high + tol
        low, high = sorted((self.start.x, self.end.x))
        return low - tol <= pt.x <= high + tol

    def denominator_with(self, other: LineSegment) -> float:
        """Cramer denominator (x1 − x2)(y3 − y4) − (y1 − y2)(x3 − x4)."""
        return (self.start.x - self.end.x) * (other.start.y - other.end.y) - (
            self.start.y - self.end.y
        ) * (other.start.x - other.end.x)

    def is_from_to_coincident(self, other: LineSegment, tol: float = ZERO_TOLERANCE) -> bool:
        """True if both segments join the same two points, in either order."""
        return (
            self.start.epsilon_equals(other.start, tol)
            and self.end.epsilon_equals(other.end, tol)
        ) or (
            self.start.epsilon_equals(other.end, tol)
            and self.end.epsilon_equals(other.start, tol)
        )

    def moved_by(self, vector: Vector2D) -> LineSegment:
        """New segment translated along `vector`."""
        return LineSegment(start=self.start.translated(vector), end=self.end.translated(vector))

    def moved_to(self, pt: Point2D) -> LineSegment:
        """New segment translated so that it starts at `pt`."""
        return self.moved_by(Vector2D.from_points(self.start, pt))

    def reversed(self) -> LineSegment:
        return LineSegment(start=self.end, end=self.start)
