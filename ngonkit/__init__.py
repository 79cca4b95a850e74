"""ngonkit: fixed-size polygons (N-gons) in any dimension."""

__version__ = "0.1.0"

from .errors import NgonError, DimensionMismatch
from .geometry import (
    Point,
    Segment,
    Chain,
    PointArray,
    view,
    Ngon,
    Triangle,
    Quadrangle,
    Pentagon,
    Hexagon,
    Heptagon,
    Octagon,
    Nonagon,
    Decagon,
    make,
    nvertices,
    contains,
)

__all__ = [
    "NgonError",
    "DimensionMismatch",
    "Point",
    "Segment",
    "Chain",
    "PointArray",
    "view",
    "Ngon",
    "Triangle",
    "Quadrangle",
    "Pentagon",
    "Hexagon",
    "Heptagon",
    "Octagon",
    "Nonagon",
    "Decagon",
    "make",
    "nvertices",
    "contains",
]
