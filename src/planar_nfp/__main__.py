"""planar-nfp CLI.

Usage:
    python -m planar_nfp <command> [options]

The kernel itself has no I/O; these commands exist to exercise it on
sample geometry and print the results as JSON.
"""
from __future__ import annotations

import json
import logging

import typer

from planar_nfp.generators import merge_convex, no_fit_polygon, triangulate
from planar_nfp.models import Point2D, Polygon2D, ZERO_TOLERANCE

app = typer.Typer(
    name="planar_nfp",
    help="planar-nfp: intersection, decomposition and no-fit polygon kernel.",
    no_args_is_help=True,
)


def _points_json(polygon: Polygon2D) -> list[list[float]]:
    return [[round(p.x, 9), round(p.y, 9)] for p in polygon.vertices]


@app.command()
def version() -> None:
    """Show version."""
    from planar_nfp import __version__

    typer.echo(f"planar-nfp v{__version__}")


@app.command()
def demo(
    side: float = typer.Option(2.0, help="Side length of the stationary square"),
    tol: float = typer.Option(ZERO_TOLERANCE, help="Geometric tolerance"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log algorithm steps"),
) -> None:
    """Triangulate, re-merge and nest a square against a triangle."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    square = Polygon2D.square(side)
    triangle = Polygon2D(
        vertices=[Point2D(x=0, y=0), Point2D(x=1, y=0), Point2D(x=0, y=1)]
    )

    pieces = triangulate(square, tol)
    merged = merge_convex(pieces[0], pieces[1], tol) if len(pieces) == 2 else None
    nfp = no_fit_polygon(square, triangle, tol)

    typer.echo(json.dumps({
        "ok": True,
        "square": {
            "points": _points_json(square),
            "area": square.area,
            "convex": square.is_convex(tol),
        },
        "triangulation": [_points_json(t) for t in pieces],
        "merged": _points_json(merged) if merged is not None else None,
        "nfp": {
            "points": _points_json(nfp),
            "vertex_count": len(nfp.vertices),
            "area": nfp.area,
            "convex": nfp.is_convex(tol),
        },
    }, indent=2))


if __name__ == "__main__":
    app()
