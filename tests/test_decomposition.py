"""Tests for triangulation and convex merge."""

import math

import pytest

from planar_nfp.generators.decomposition import merge_convex, triangulate
from planar_nfp.models.errors import DegenerateInputError
from planar_nfp.models.geometry import Point2D
from planar_nfp.models.polygon import Polygon2D


def poly(*coords) -> Polygon2D:
    return Polygon2D(vertices=[Point2D(x=x, y=y) for x, y in coords])


L_SHAPE = ((0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2))
# U opening upwards, two reflex corners
U_SHAPE = ((0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3))


def assert_covers(polygon: Polygon2D, triangles: list[Polygon2D]) -> None:
    assert len(triangles) == len(polygon.vertices) - 2
    for t in triangles:
        assert len(t.vertices) == 3
    assert math.isclose(sum(t.area for t in triangles), polygon.area, abs_tol=1e-9)


class TestTriangulate:
    def test_triangle_unchanged(self):
        triangle = poly((0, 0), (4, 0), (0, 3))
        result = triangulate(triangle)
        assert len(result) == 1
        assert result[0].epsilon_equals(triangle)

    def test_square(self):
        square = Polygon2D.square(2)
        assert_covers(square, triangulate(square))

    def test_square_first_vertex_wins_tie(self):
        square = Polygon2D.square(2)
        first = triangulate(square)[0]
        # all diagonals are equally long, vertex 0 is cut first
        assert first.epsilon_equals(
            Polygon2D(vertices=[square.vertices[3], square.vertices[0], square.vertices[1]])
        )

    def test_quadrilateral(self):
        quad = poly((2, 2), (11, 2), (14, 9), (4, 10))
        assert_covers(quad, triangulate(quad))

    def test_concave_l_shape(self):
        shape = poly(*L_SHAPE)
        assert_covers(shape, triangulate(shape))

    def test_concave_u_shape(self):
        shape = poly(*U_SHAPE)
        triangles = triangulate(shape)
        assert_covers(shape, triangles)
        assert all(t.area > 0 for t in triangles)

    def test_dart_skips_ear_with_vertex_inside(self):
        # shortest diagonal (0,0)-(1,0) would swallow the reflex tip
        dart = poly((0, 0), (0.5, -10), (1, 0), (0.5, -0.1))
        triangles = triangulate(dart)
        assert_covers(dart, triangles)
        assert triangles[0].epsilon_equals(poly((0.5, -0.1), (0, 0), (0.5, -10)))

    def test_clockwise_input(self):
        shape = poly(*reversed(L_SHAPE))
        assert_covers(shape, triangulate(shape))

    def test_regular_polygon(self):
        shape = Polygon2D.circle(5.0, 12)
        assert_covers(shape, triangulate(shape))

    def test_input_not_modified(self):
        shape = poly(*L_SHAPE)
        triangulate(shape)
        assert shape.epsilon_equals(poly(*L_SHAPE))

    def test_too_few_vertices(self):
        with pytest.raises(DegenerateInputError):
            triangulate(poly((0, 0), (1, 0)))

    def test_collapsed_ring_has_no_ear(self):
        with pytest.raises(DegenerateInputError, match="No ear"):
            triangulate(poly((0, 0), (1, 0), (2, 0), (3, 0)))

    def test_collinear_vertex_cut_as_flat_triangle(self):
        shape = poly((0, 0), (1, 0), (2, 0), (2, 2), (0, 2))
        triangles = triangulate(shape)
        assert_covers(shape, triangles)
        assert triangles[0].epsilon_equals(poly((0, 0), (1, 0), (2, 0)))
        assert triangles[0].area == 0.0


class TestMergeConvex:
    def test_square_halves_merge_back(self):
        square = Polygon2D.square(2)
        first, second = triangulate(square)
        merged = merge_convex(first, second)
        assert merged is not None
        assert len(merged.vertices) == 4
        assert merged.is_convex()
        assert merged.is_equivalent(square)

    def test_merge_is_symmetric_in_result_area(self):
        square = Polygon2D.square(2)
        first, second = triangulate(square)
        merged = merge_convex(second, first)
        assert merged is not None
        assert math.isclose(merged.area, 4.0)

    def test_opposite_winding(self):
        square = Polygon2D.square(2)
        first, second = triangulate(square)
        merged = merge_convex(first, second.reversed())
        assert merged is not None
        assert merged.is_equivalent(square)

    def test_splices_after_shared_edge(self):
        first = poly((0, 0), (2, 0), (1, 1))
        second = poly((1, 1), (2, 0), (3, 2))
        merged = merge_convex(first, second)
        assert merged.epsilon_equals(poly((0, 0), (2, 0), (3, 2), (1, 1)))

    def test_concave_union_rejected(self):
        first = poly((0, 0), (2, 0), (1, 1))
        second = poly((1, 1), (2, 0), (3, 4))
        assert merge_convex(first, second) is None

    def test_collinear_join_rejected(self):
        first = poly((0, 0), (1, 0), (0, 1))
        second = poly((1, 0), (2, 0), (0, 1))
        assert merge_convex(first, second) is None

    def test_no_shared_edge(self):
        square = Polygon2D.square(2)
        far = poly((5, 5), (6, 5), (5, 6))
        assert merge_convex(square, far) is None

    def test_triangulate_then_merge_l_shape(self):
        shape = poly(*L_SHAPE)
        pieces = triangulate(shape)
        merged_any = False
        for i, a in enumerate(pieces):
            for b in pieces[i + 1:]:
                merged = merge_convex(a, b)
                if merged is not None:
                    merged_any = True
                    assert merged.is_convex()
                    assert math.isclose(merged.area, a.area + b.area)
        assert merged_any
