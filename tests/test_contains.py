"""Tests for point-in-N-gon containment."""

import numpy as np
import pytest
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from ngonkit import DimensionMismatch
from ngonkit.geometry import (
    Ngon,
    Point,
    PointArray,
    Quadrangle,
    Triangle,
    contains,
    point_in_triangle,
    view,
)


@pytest.fixture
def triangle():
    return Triangle([Point(0, 0), Point(1, 0), Point(0, 1)])


@pytest.fixture
def square():
    return Quadrangle([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])


def test_triangle_interior(triangle):
    """A point well inside the triangle is contained."""
    assert contains(Point(0.25, 0.25), triangle)
    assert Point(0.25, 0.25) in triangle


def test_triangle_exterior(triangle):
    """A point beyond the hypotenuse is not contained."""
    assert not contains(Point(1, 1), triangle)
    assert Point(-0.1, 0.5) not in triangle


def test_triangle_boundary(triangle):
    """Vertices and edge points count as inside."""
    assert Point(0, 0) in triangle
    assert Point(1, 0) in triangle
    assert Point(0.5, 0) in triangle
    assert Point(0.5, 0.5) in triangle


def test_square(square):
    """The square's center, corners and edges are inside; outside points are not."""
    assert Point(0.5, 0.5) in square
    assert Point(1, 1) in square
    assert Point(0, 0.5) in square
    assert Point(1.5, 0.5) not in square
    assert Point(0.5, -0.01) not in square


def test_clockwise_triangle():
    """Barycentric coordinates do not depend on orientation."""
    triangle = Triangle([Point(0, 0), Point(0, 1), Point(1, 0)])
    assert Point(0.25, 0.25) in triangle
    assert Point(1, 1) not in triangle


def test_degenerate_triangle():
    """Collinear vertices give nan coordinates and contain nothing."""
    triangle = Triangle([Point(0, 0), Point(1, 1), Point(2, 2)])
    assert Point(1, 1) not in triangle
    assert Point(5, 0) not in triangle
    assert not point_in_triangle(Point(0.0, 0.0), Point(0.0, 0.0), Point(0.0, 0.0), Point(0.0, 0.0))


def test_convex_against_shapely():
    """Fan containment agrees with shapely for a convex polygon."""
    angles = np.linspace(0, 2 * np.pi, 9, endpoint=False)
    verts = [Point(2 * np.cos(a) + 1, 2 * np.sin(a) - 1) for a in angles]
    ngon = Ngon(verts)
    shape = Polygon([(p.x, p.y) for p in verts])

    rng = np.random.default_rng(42)
    for x, y in rng.uniform(-2, 4, size=(300, 2)):
        expected = shape.covers(ShapelyPoint(x, y))
        assert contains(Point(x, y), ngon) == expected


def test_non_convex_uses_fan():
    """Non-convex N-gons are tested through the fan from the first vertex.

    The first fan triangle of this arrow shape covers part of its notch, so
    a point there is reported inside even though it lies outside the polygon.
    """
    arrow = Ngon([Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)])
    notch = Point(2.5, 2.2)
    assert not Polygon([(p.x, p.y) for p in arrow]).covers(ShapelyPoint(2.5, 2.2))
    assert notch in arrow


def test_triangle_3d():
    """Above 2D a point must lie on the triangle's plane."""
    triangle = Triangle([Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0)])
    assert Point(0.25, 0.25, 0) in triangle
    assert Point(0, 0, 0) in triangle
    assert Point(0.25, 0.25, 0.5) not in triangle
    assert Point(1, 1, 0) not in triangle


def test_tolerance_3d():
    """The off-plane tolerance is adjustable."""
    triangle = Triangle([Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0)])
    p = Point(0.25, 0.25, 1e-6)
    assert not contains(p, triangle)
    assert contains(p, triangle, atol=1e-3)


def test_square_3d():
    """A tilted square in 3D contains points on its plane."""
    square = Quadrangle([
        Point(0, 0, 0), Point(1, 0, 1), Point(1, 1, 1), Point(0, 1, 0),
    ])
    assert Point(0.5, 0.5, 0.5) in square
    assert Point(0.5, 0.5, 0.0) not in square


def test_shared_buffer():
    """Containment works on N-gons viewing a numpy buffer."""
    points = PointArray(np.array([[9.0, 9.0], [0.0, 0.0], [2.0, 0.0], [2.0, 2.0], [0.0, 2.0]]))
    square = Quadrangle(view(points, 1, 5))
    assert Point(1.0, 1.0) in square
    assert Point(9.0, 9.0) not in square


def test_dimension_mismatch(triangle):
    """Points must live in the N-gon's space."""
    with pytest.raises(DimensionMismatch):
        contains(Point(0.1, 0.1, 0.0), triangle)
