"""Type definitions for ngonkit geometry."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

import numpy as np

from ..errors import DimensionMismatch


class Point:
    """Point in D-dimensional space.

    Coordinates are stored exactly as given, so exact scalar types such as
    ``fractions.Fraction`` survive 2D arithmetic.
    """

    __slots__ = ("coords",)

    def __init__(self, *coords):
        if len(coords) == 1 and not np.isscalar(coords[0]):
            coords = tuple(coords[0])
        if not coords:
            raise DimensionMismatch("a point needs at least one coordinate")
        self.coords = tuple(coords)

    @property
    def dim(self) -> int:
        return len(self.coords)

    @property
    def x(self):
        return self.coords[0]

    @property
    def y(self):
        return self.coords[1]

    @property
    def z(self):
        return self.coords[2]

    def to_array(self) -> np.ndarray:
        return np.asarray(self.coords)

    def __iter__(self):
        return iter(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, i):
        return self.coords[i]

    def __sub__(self, other: "Point") -> np.ndarray:
        if not isinstance(other, Point):
            return NotImplemented
        if other.dim != self.dim:
            raise DimensionMismatch(
                f"cannot subtract a {other.dim}D point from a {self.dim}D point"
            )
        return self.to_array() - other.to_array()

    def __add__(self, vector) -> "Point":
        vector = np.asarray(vector)
        if vector.shape != (self.dim,):
            raise DimensionMismatch(
                f"cannot translate a {self.dim}D point by a vector of shape {vector.shape}"
            )
        return Point(*(c + d for c, d in zip(self.coords, vector.tolist())))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.coords == other.coords

    def __hash__(self):
        return hash(self.coords)

    def __repr__(self):
        return f"Point{self.coords!r}"


@dataclass(frozen=True)
class Segment:
    """A line segment defined by two endpoints."""
    start: Point
    end: Point

    @property
    def vertices(self) -> Tuple[Point, Point]:
        return (self.start, self.end)

    def __iter__(self):
        yield self.start
        yield self.end

    def measure(self) -> float:
        """Euclidean length."""
        d = self.end - self.start
        return math.sqrt(float(np.dot(d, d)))


@dataclass(frozen=True)
class Chain:
    """Ordered polyline. Closed when the first vertex is repeated at the end."""
    vertices: Sequence

    @property
    def nvertices(self) -> int:
        return len(self.vertices)

    def is_closed(self) -> bool:
        return len(self.vertices) > 1 and self.vertices[0] == self.vertices[-1]

    def segments(self) -> List[Segment]:
        v = self.vertices
        return [Segment(v[i], v[i + 1]) for i in range(len(v) - 1)]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)


class VertexView(Sequence):
    """Read-only view of selected elements of another sequence.

    Elements are looked up in the parent on every access, so nothing is
    copied and later writes to the parent are visible through the view.
    """

    __slots__ = ("parent", "indices")

    def __init__(self, parent: Sequence, indices: Union[range, Sequence[int]]):
        if isinstance(parent, VertexView):
            indices = [parent.indices[i] for i in indices]
            parent = parent.parent
        self.parent = parent
        self.indices = indices

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return VertexView(self.parent, self.indices[i])
        return self.parent[self.indices[i]]

    def __iter__(self):
        parent = self.parent
        for i in self.indices:
            yield parent[i]

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self):
        return f"VertexView({list(self)!r})"


class PointArray(Sequence):
    """Sequence of points backed by an ``(M, D)`` numpy array.

    Points are built from array rows on access; the buffer itself is
    never copied.
    """

    __slots__ = ("array",)

    def __init__(self, array):
        array = np.asarray(array)
        if array.ndim != 2:
            raise DimensionMismatch(
                f"expected an (M, D) coordinate array, got shape {array.shape}"
            )
        self.array = array

    @property
    def dim(self) -> int:
        return self.array.shape[1]

    def __len__(self) -> int:
        return self.array.shape[0]

    def __getitem__(self, i):
        if isinstance(i, slice):
            return PointArray(self.array[i])
        return Point(*self.array[i].tolist())

    def __repr__(self):
        return f"PointArray(shape={self.array.shape})"


def view(seq: Sequence, start, stop=None) -> Sequence:
    """View ``seq`` through an index sequence, or the range ``[start, stop)``.

    Examples:
        view(points, 10, 14)      # points 10..13
        view(points, [0, 4, 5])   # points 0, 4 and 5
    """
    if stop is not None:
        indices = range(start, stop)
    elif isinstance(start, int):
        raise TypeError("view() needs an index sequence or a start and stop")
    else:
        indices = start

    if isinstance(seq, PointArray) and isinstance(indices, range) and indices.step == 1:
        return seq[indices.start:indices.stop]
    return VertexView(seq, indices)
