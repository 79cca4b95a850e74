"""N-gons: polygons with a fixed number of vertices.

An N-gon is a polygon with ``N`` vertices ``p1, p2, ..., pN`` oriented
counter-clockwise (CCW). ``N`` is part of the type: ``Ngon[N]`` is a
subclass of :class:`Ngon` carrying ``N`` as a class constant, and the
usual names are provided as aliases::

    Triangle, Quadrangle, Pentagon, Hexagon,
    Heptagon, Octagon, Nonagon, Decagon

Notes:
    - The vertex sequence is borrowed, never copied. Any indexable
      sequence of points works, including :class:`~.types.VertexView`
      and :class:`~.types.PointArray`, so thousands of N-gons can be
      built over slices of one big point buffer.
    - Orientation is not checked. A CW vertex order gives a negative
      :meth:`Ngon.signed_area`.
    - Containment for N > 3 uses a fan triangulation and is only
      correct for convex N-gons.
"""

import logging
import math
import operator
import threading
from collections.abc import Sequence
from typing import ClassVar, Dict, Iterator, List, Optional

import numpy as np

from ..errors import DimensionMismatch
from .types import Chain, Point, Segment, view

logger = logging.getLogger(__name__)

_classes_lock = threading.Lock()

# Distance tolerance for point-in-triangle tests above 2D
DEFAULT_ATOL = 1e-9

_ALIASES = {
    3: "Triangle",
    4: "Quadrangle",
    5: "Pentagon",
    6: "Hexagon",
    7: "Heptagon",
    8: "Octagon",
    9: "Nonagon",
    10: "Decagon",
}


def _common_dim(*points: Point) -> int:
    dim = points[0].dim
    for p in points[1:]:
        if p.dim != dim:
            raise DimensionMismatch(
                f"points of different dimensions: {dim}D and {p.dim}D"
            )
    return dim


def _divide(num, den):
    """Divide, giving inf/nan instead of raising when ``den`` is zero."""
    if den == 0:
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.float64(num) / np.float64(den)
    return num / den


def _signed_area(a: Point, b: Point, c: Point):
    return ((b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)) / 2


def signed_area(a: Point, b: Point, c: Point):
    """Signed area of the 2D triangle (a, b, c).

    Positive when the vertices are CCW, negative when CW, zero when
    collinear.
    """
    if _common_dim(a, b, c) != 2:
        raise DimensionMismatch("signed area is only defined in 2D")
    return _signed_area(a, b, c)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Unsigned area of the triangle (a, b, c) in any dimension.

    Half the norm of ``(b - a) x (c - a)``. Above 3D the norm of the
    cross product is taken through the Lagrange identity.
    """
    dim = _common_dim(a, b, c)
    if dim == 2:
        return abs(_signed_area(a, b, c))
    u = b - a
    v = c - a
    if dim == 3:
        w = np.cross(u, v)
        return math.sqrt(float(np.dot(w, w))) / 2
    # |u x v|^2 == |u|^2 |v|^2 - (u . v)^2
    uv = float(np.dot(u, v))
    gram = float(np.dot(u, u)) * float(np.dot(v, v)) - uv * uv
    return math.sqrt(max(gram, 0.0)) / 2


def point_in_triangle(p: Point, a: Point, b: Point, c: Point,
                      atol: float = DEFAULT_ATOL) -> bool:
    """Closed point-in-triangle test with barycentric coordinates.

    In 2D the coordinates come from Cramer's rule. Above 2D the point is
    projected on the triangle's plane first and must lie within ``atol``
    of it. Degenerate (collinear) triangles give nan/inf coordinates and
    therefore contain nothing.
    """
    dim = _common_dim(p, a, b, c)
    if dim == 2:
        x1, y1 = a.x, a.y
        x2, y2 = b.x, b.y
        x3, y3 = c.x, c.y
        x, y = p.x, p.y

        det = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
        l1 = _divide((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3), det)
        l2 = _divide((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3), det)
        l3 = 1 - l1 - l2
    else:
        u = (b - a).astype(float)
        v = (c - a).astype(float)
        w = (p - a).astype(float)
        d00, d01, d11 = np.dot(u, u), np.dot(u, v), np.dot(v, v)
        d20, d21 = np.dot(w, u), np.dot(w, v)
        with np.errstate(divide="ignore", invalid="ignore"):
            det = d00 * d11 - d01 * d01
            l2 = (d11 * d20 - d01 * d21) / det
            l3 = (d00 * d21 - d01 * d20) / det
            l1 = 1 - l2 - l3
            off_plane = np.linalg.norm(w - l2 * u - l3 * v)
        if not off_plane <= atol:
            return False

    return bool(0 <= l1 <= 1 and 0 <= l2 <= 1 and 0 <= l3 <= 1)


class EdgeView(Sequence):
    """The N boundary segments of an N-gon, built on access.

    Edge ``i`` joins vertex ``i`` to vertex ``(i + 1) % N``.
    """

    __slots__ = ("vertices",)

    def __init__(self, vertices):
        self.vertices = vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, i):
        n = len(self.vertices)
        if isinstance(i, slice):
            return [self[j] for j in range(n)[i]]
        if not -n <= i < n:
            raise IndexError("edge index out of range")
        i %= n
        return Segment(self.vertices[i], self.vertices[(i + 1) % n])

    def __repr__(self):
        return f"EdgeView(n={len(self)})"


class Ngon:
    """Polygon with a fixed number ``N`` of CCW-ordered vertices.

    ``Ngon[N](vertices)`` checks the vertex count; ``Ngon(vertices)``
    takes ``N`` from ``len(vertices)`` and returns an ``Ngon[N]``.
    """

    N: ClassVar[Optional[int]] = None
    _classes: ClassVar[Dict[int, type]] = {}

    __slots__ = ("vertices", "_dim")

    def __class_getitem__(cls, n):
        if cls.N is not None:
            raise TypeError(f"{cls.__name__} already has N = {cls.N}")
        if isinstance(n, bool):
            raise ValueError(f"an N-gon needs an integer N >= 3, got {n!r}")
        try:
            n = operator.index(n)
        except TypeError:
            raise ValueError(f"an N-gon needs an integer N >= 3, got {n!r}") from None
        if n < 3:
            raise ValueError(f"an N-gon needs an integer N >= 3, got {n!r}")
        with _classes_lock:
            try:
                return Ngon._classes[n]
            except KeyError:
                pass
            name = _ALIASES.get(n, f"Ngon[{n}]")
            klass = type(name, (Ngon,), {"N": n, "__slots__": (), "__module__": __name__})
            Ngon._classes[n] = klass
            return klass

    def __new__(cls, vertices):
        if cls.N is None:
            n = len(vertices)
            if n < 3:
                logger.debug("rejected N-gon with %d vertices", n)
                raise DimensionMismatch(f"an N-gon needs at least 3 vertices, got {n}")
            cls = Ngon[n]
        return super().__new__(cls)

    def __init__(self, vertices: Sequence):
        n = len(vertices)
        if n != self.N:
            logger.debug("rejected %s with %d vertices", type(self).__name__, n)
            raise DimensionMismatch(
                f"{type(self).__name__} needs {self.N} vertices, got {n}"
            )
        dim = getattr(vertices, "dim", None)
        if dim is None:
            dim = _common_dim(*vertices)
        if dim < 2:
            raise DimensionMismatch(f"an N-gon needs at least 2 dimensions, got {dim}")
        self.vertices = vertices
        self._dim = dim

    @property
    def dim(self) -> int:
        """Embedding dimension."""
        return self._dim

    @property
    def nvertices(self) -> int:
        return self.N

    # Topology. These only depend on N, so they also work on the class:
    # Triangle.is_convex() is True.

    @classmethod
    def is_simple(cls) -> bool:
        return True

    @classmethod
    def has_holes(cls) -> bool:
        return False

    @classmethod
    def is_simplex(cls) -> bool:
        return cls.N == 3

    @classmethod
    def is_convex(cls) -> bool:
        """True for triangles. Convexity of larger N-gons is not computed."""
        return cls.N == 3

    # Boundary

    def edges(self) -> EdgeView:
        return EdgeView(self.vertices)

    def chains(self) -> List[Chain]:
        """The boundary as a single closed chain (first vertex repeated)."""
        return [Chain(view(self.vertices, [*range(self.N), 0]))]

    def _fan(self) -> Iterator["Ngon"]:
        v = self.vertices
        for i in range(1, self.N - 1):
            yield Triangle(view(v, [0, i, i + 1]))

    def triangles(self) -> List["Ngon"]:
        """Fan triangulation from the first vertex, as views on the vertices."""
        return list(self._fan())

    def unique(self) -> "Ngon":
        """No-op: an N-gon has no duplicate vertices to remove."""
        return self

    # Measure

    def signed_area(self):
        """Signed area of a 2D N-gon, positive for CCW vertices.

        Sum of the signed areas of the fan triangles (v1, vi, vi+1).
        """
        if self._dim != 2:
            raise DimensionMismatch(
                f"signed area is only defined in 2D, this {type(self).__name__} is {self._dim}D"
            )
        v = self.vertices
        return sum(_signed_area(v[0], v[i], v[i + 1]) for i in range(1, self.N - 1))

    def measure(self):
        """Area of the N-gon.

        In 2D this is ``abs(signed_area())``. Above 2D it is the sum of the
        unsigned areas of the fan triangles.
        """
        if self._dim == 2:
            return abs(self.signed_area())
        v = self.vertices
        return sum(triangle_area(v[0], v[i], v[i + 1]) for i in range(1, self.N - 1))

    area = measure

    # Sequence protocol over the vertices

    def __len__(self) -> int:
        return self.N

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, i) -> Point:
        return self.vertices[i]

    def __contains__(self, point: Point) -> bool:
        return contains(point, self)

    def __eq__(self, other):
        if not isinstance(other, Ngon):
            return NotImplemented
        return type(self) is type(other) and all(
            a == b for a, b in zip(self.vertices, other.vertices)
        )

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(p) for p in self.vertices)})"


Triangle = Ngon[3]
Quadrangle = Ngon[4]
Pentagon = Ngon[5]
Hexagon = Ngon[6]
Heptagon = Ngon[7]
Octagon = Ngon[8]
Nonagon = Ngon[9]
Decagon = Ngon[10]


def make(vertices: Sequence, n: Optional[int] = None) -> Ngon:
    """Build an N-gon over ``vertices`` without copying them.

    Raises:
        DimensionMismatch: ``n`` is given and differs from ``len(vertices)``.
    """
    if n is None:
        return Ngon(vertices)
    return Ngon[n](vertices)


def nvertices(shape) -> int:
    """Vertex count of an N-gon class or instance."""
    if shape.N is None:
        raise TypeError("the unbound Ngon class has no fixed vertex count")
    return shape.N


def contains(point: Point, ngon: Ngon, atol: float = DEFAULT_ATOL) -> bool:
    """Closed point-in-N-gon test.

    Triangles use barycentric coordinates. Larger N-gons are split into
    their fan triangles and the point is inside when any triangle holds
    it, which assumes the N-gon is convex.
    """
    if point.dim != ngon.dim:
        raise DimensionMismatch(
            f"cannot test a {point.dim}D point against a {ngon.dim}D {type(ngon).__name__}"
        )
    if ngon.N == 3:
        a, b, c = ngon.vertices
        return point_in_triangle(point, a, b, c, atol=atol)
    # fan triangulation (assumes convexity)
    return any(contains(point, t, atol=atol) for t in ngon._fan())
