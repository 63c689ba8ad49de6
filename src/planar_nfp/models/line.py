"""Infinite lines.

A line is either sloped (y = m·x + b) or vertical (x = c). Keeping the
vertical case as its own type avoids carrying an infinite slope through
comparisons.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from planar_nfp.models.geometry import ZERO_TOLERANCE, Point2D, Vector2D


class SlopedLine(BaseModel):
    """Non-vertical line y = m·x + b."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sloped"] = "sloped"
    m: float = Field(description="Rate of change")
    b: float = Field(description="Y offset")

    def evaluate(self, x: float) -> float:
        return self.m * x + self.b

    def point_at(self, x: float) -> Point2D:
        """Point on the line for the given x value."""
        return Point2D(x=x, y=self.evaluate(x))

    def is_point_on(self, pt: Point2D, tol: float = ZERO_TOLERANCE) -> bool:
        return abs(self.evaluate(pt.x) - pt.y) < tol

    def is_parallel_to(self, other: Line, tol: float = ZERO_TOLERANCE) -> bool:
        if isinstance(other, VerticalLine):
            return False
        return abs(self.m - other.m) < tol

    def coincides_with(self, other: Line, tol: float = ZERO_TOLERANCE) -> bool:
        """True if both describe the same infinite line."""
        return self.is_parallel_to(other, tol) and other.is_point_on(
            self.point_at(0.0), tol
        )


class VerticalLine(BaseModel):
    """Vertical line x = c."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["vertical"] = "vertical"
    x: float

    def is_point_on(self, pt: Point2D, tol: float = ZERO_TOLERANCE) -> bool:
        return abs(pt.x - self.x) < tol

    def is_parallel_to(self, other: Line, tol: float = ZERO_TOLERANCE) -> bool:
        return isinstance(other, VerticalLine)

    def coincides_with(self, other: Line, tol: float = ZERO_TOLERANCE) -> bool:
        return isinstance(other, VerticalLine) and abs(self.x - other.x) < tol


Line = Annotated[Union[SlopedLine, VerticalLine], Field(discriminator="kind")]


def line_through(p0: Point2D, p1: Point2D, tol: float = ZERO_TOLERANCE) -> Line:
    """Build the infinite line through two points.

    Near-vertical pairs (x delta within tol) become a VerticalLine and
    near-horizontal pairs get an exact zero slope.
    """
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    if abs(dx) < tol:
        return VerticalLine(x=p0.x)
    if abs(dy) < tol:
        return SlopedLine(m=0.0, b=p0.y)
    m = dy / dx
    # y = m·x + b  =>  b = y − m·x
    return SlopedLine(m=m, b=p0.y - m * p0.x)


class LinePointRelation(str, Enum):
    """Side of a directed line a point lies on."""

    LEFT = "left"  # counter-clockwise
    RIGHT = "right"  # clockwise
    ON = "on"


def point_line_relation(
    start: Point2D,
    end: Point2D,
    pt: Point2D,
    tol: float = ZERO_TOLERANCE,
) -> LinePointRelation:
    """Classify `pt` against the directed line start → end."""
    cross = Vector2D.from_points(start, end).cross(Vector2D.from_points(start, pt))
    if abs(cross) < tol:
        return LinePointRelation.ON
    if cross > 0:
        return LinePointRelation.LEFT
    return LinePointRelation.RIGHT
