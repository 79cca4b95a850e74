"""Geometry primitives for ngonkit."""

from .types import Point, Segment, Chain, VertexView, PointArray, view
from .ngon import (
    Ngon,
    EdgeView,
    Triangle,
    Quadrangle,
    Pentagon,
    Hexagon,
    Heptagon,
    Octagon,
    Nonagon,
    Decagon,
    DEFAULT_ATOL,
    make,
    nvertices,
    contains,
    signed_area,
    triangle_area,
    point_in_triangle,
)

__all__ = [
    "Point",
    "Segment",
    "Chain",
    "VertexView",
    "PointArray",
    "view",
    "Ngon",
    "EdgeView",
    "Triangle",
    "Quadrangle",
    "Pentagon",
    "Hexagon",
    "Heptagon",
    "Octagon",
    "Nonagon",
    "Decagon",
    "DEFAULT_ATOL",
    "make",
    "nvertices",
    "contains",
    "signed_area",
    "triangle_area",
    "point_in_triangle",
]
