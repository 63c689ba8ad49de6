"""No-fit polygon of two convex polygons.

The orbiting polygon is reversed, which negates its edge vectors. The edges
of both polygons are then sorted by direction and chained end to start; the
chain is the boundary of the Minkowski difference, i.e. the locus of
reference-point positions where the orbiting polygon touches the stationary
one without overlapping it.

Both inputs must be convex and share a winding (counter-clockwise for a
counter-clockwise result). Concave parts should be triangulated and merged
into convex pieces first.
"""

from __future__ import annotations

import logging
import math

from planar_nfp.models.geometry import ZERO_TOLERANCE, Vector2D
from planar_nfp.models.polygon import Polygon2D
from planar_nfp.models.segment import LineSegment

logger = logging.getLogger(__name__)

REFERENCE_DIRECTION = Vector2D(x=1.0, y=0.0)


def edge_angle(edge: LineSegment, tol: float = ZERO_TOLERANCE) -> float:
    """Signed angle from the edge direction to +x, in [0, 2π).

    Angles within `tol` of a full turn wrap to 0.
    """
    angle = edge.direction.angle_to(REFERENCE_DIRECTION)
    if angle > 2.0 * math.pi - tol:
        return 0.0
    return angle


def _sort_keys(angles: list[float], tol: float) -> list[float]:
    """Angles with each run of near-equal values snapped to its largest."""
    keys = list(angles)
    order = sorted(range(len(angles)), key=angles.__getitem__, reverse=True)
    for prev, cur in zip(order, order[1:]):
        if keys[prev] - angles[cur] < tol:
            keys[cur] = keys[prev]
    return keys


def no_fit_polygon(
    stationary: Polygon2D,
    orbiting: Polygon2D,
    tol: float = ZERO_TOLERANCE,
) -> Polygon2D:
    """Build the NFP of `orbiting` around `stationary`.

    Edges are ordered by edge_angle() descending. Edges whose angles differ
    by less than `tol` count as parallel and keep collection order:
    stationary edges before orbiting ones, each in vertex order. The first
    edge stays where it is and every following edge is translated to start
    at the previous edge's end. Neither input is modified.

    Returns:
        Convex polygon with one vertex per input edge (collinear vertices
        are kept), positioned relative to the first chained edge.
    """
    edges = stationary.edges() + orbiting.reversed().edges()
    keys = _sort_keys([edge_angle(edge, tol) for edge in edges], tol)
    order = sorted(range(len(edges)), key=keys.__getitem__, reverse=True)
    ordered = [edges[i] for i in order]

    chain = [ordered[0]]
    for edge in ordered[1:]:
        chain.append(edge.moved_to(chain[-1].end))

    logger.debug(
        "NFP chained %d edges (%d stationary, %d orbiting)",
        len(chain), len(stationary.vertices), len(orbiting.vertices),
    )
    return Polygon2D.from_edges(chain)
