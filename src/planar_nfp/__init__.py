"""Planar geometry kernel for part nesting."""

__version__ = "0.1.0"
