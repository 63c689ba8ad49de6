"""Tests for infinite lines and point-line relations."""

import math

from pydantic import TypeAdapter

from planar_nfp.models.geometry import Point2D
from planar_nfp.models.line import (
    Line,
    LinePointRelation,
    SlopedLine,
    VerticalLine,
    line_through,
    point_line_relation,
)


class TestLineThrough:
    def test_vertical(self):
        line = line_through(Point2D(x=1, y=0), Point2D(x=1, y=5))
        assert isinstance(line, VerticalLine)
        assert line.x == 1

    def test_near_vertical_within_tolerance(self):
        line = line_through(Point2D(x=1, y=0), Point2D(x=1.0000001, y=5), tol=1e-6)
        assert isinstance(line, VerticalLine)

    def test_horizontal(self):
        line = line_through(Point2D(x=0, y=2), Point2D(x=5, y=2))
        assert isinstance(line, SlopedLine)
        assert line.m == 0.0
        assert line.b == 2.0

    def test_sloped(self):
        line = line_through(Point2D(x=0, y=1), Point2D(x=2, y=5))
        assert math.isclose(line.m, 2.0)
        assert math.isclose(line.b, 1.0)
        assert line.point_at(3.0) == Point2D(x=3, y=7)


class TestLinePredicates:
    def test_point_on_sloped(self):
        line = SlopedLine(m=1.0, b=0.0)
        assert line.is_point_on(Point2D(x=4, y=4))
        assert not line.is_point_on(Point2D(x=4, y=4.1))

    def test_point_on_vertical(self):
        line = VerticalLine(x=2.0)
        assert line.is_point_on(Point2D(x=2, y=-100))
        assert not line.is_point_on(Point2D(x=2.1, y=0))

    def test_vertical_lines_parallel(self):
        assert VerticalLine(x=0).is_parallel_to(VerticalLine(x=3))
        assert not VerticalLine(x=0).coincides_with(VerticalLine(x=3))
        assert VerticalLine(x=3).coincides_with(VerticalLine(x=3))

    def test_vertical_never_parallel_to_sloped(self):
        assert not VerticalLine(x=0).is_parallel_to(SlopedLine(m=0, b=0))
        assert not SlopedLine(m=1e9, b=0).is_parallel_to(VerticalLine(x=0))

    def test_sloped_parallel(self):
        assert SlopedLine(m=2, b=0).is_parallel_to(SlopedLine(m=2, b=5))
        assert not SlopedLine(m=2, b=0).coincides_with(SlopedLine(m=2, b=5))
        assert SlopedLine(m=2, b=5).coincides_with(SlopedLine(m=2, b=5))

    def test_discriminated_union(self):
        adapter = TypeAdapter(Line)
        assert isinstance(adapter.validate_python({"kind": "vertical", "x": 3}), VerticalLine)
        sloped = adapter.validate_python({"kind": "sloped", "m": 1, "b": 2})
        assert isinstance(sloped, SlopedLine)


class TestPointLineRelation:
    def test_left_right_on(self):
        a, b = Point2D(x=0, y=0), Point2D(x=2, y=0)
        assert point_line_relation(a, b, Point2D(x=1, y=1)) == LinePointRelation.LEFT
        assert point_line_relation(a, b, Point2D(x=1, y=-1)) == LinePointRelation.RIGHT
        assert point_line_relation(a, b, Point2D(x=5, y=0)) == LinePointRelation.ON

    def test_direction_flips_side(self):
        a, b = Point2D(x=0, y=0), Point2D(x=2, y=0)
        pt = Point2D(x=1, y=1)
        assert point_line_relation(b, a, pt) == LinePointRelation.RIGHT
