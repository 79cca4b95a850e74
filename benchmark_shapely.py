#!/usr/bin/env python3
"""
Shapely comparison benchmark for ngonkit.

Generates random convex polygons, then computes areas and point
containment with ngonkit (fan triangulation) and with Shapely, and
reports timings plus any disagreement between the two.

Usage:
    python benchmark_shapely.py [num_polygons] [num_vertices]
    python benchmark_shapely.py 5000 8
"""

import time
import math
import sys

try:
    from shapely.geometry import Polygon, Point as ShapelyPoint
    import numpy as np
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely numpy")
    sys.exit(1)

from ngonkit import Ngon, Point, PointArray, contains, view


def random_convex_buffer(num_polygons: int, num_vertices: int, seed: int = 0) -> np.ndarray:
    """
    Build one (num_polygons * num_vertices, 2) buffer of CCW convex polygons.
    Vertices are sorted angles on a circle of random center and radius.
    """
    rng = np.random.default_rng(seed)
    angles = np.sort(rng.uniform(0, 2 * math.pi, size=(num_polygons, num_vertices)), axis=1)
    centers = rng.uniform(-100, 100, size=(num_polygons, 1, 2))
    radii = rng.uniform(1, 10, size=(num_polygons, 1, 1))
    ring = np.stack([np.cos(angles), np.sin(angles)], axis=-1)
    return (centers + radii * ring).reshape(-1, 2)


def benchmark(num_polygons: int = 2000, num_vertices: int = 6):
    """Run the full benchmark."""
    print(f"Generating {num_polygons} convex polygons with {num_vertices} vertices...")
    buffer = random_convex_buffer(num_polygons, num_vertices)
    points = PointArray(buffer)

    # N-gons over views of the shared buffer
    build_start = time.perf_counter()
    ngons = [
        Ngon[num_vertices](view(points, i * num_vertices, (i + 1) * num_vertices))
        for i in range(num_polygons)
    ]
    build_time = time.perf_counter() - build_start

    shapes = [Polygon(buffer[i * num_vertices:(i + 1) * num_vertices]) for i in range(num_polygons)]
    probes = [Point(*shape.centroid.coords[0]) for shape in shapes]

    area_start = time.perf_counter()
    areas = [ngon.measure() for ngon in ngons]
    area_time = time.perf_counter() - area_start

    inside_start = time.perf_counter()
    inside = [contains(p, ngon) for p, ngon in zip(probes, ngons)]
    inside_time = time.perf_counter() - inside_start

    shapely_start = time.perf_counter()
    shapely_areas = [shape.area for shape in shapes]
    shapely_inside = [shape.covers(ShapelyPoint(p.x, p.y)) for p, shape in zip(probes, shapes)]
    shapely_time = time.perf_counter() - shapely_start

    max_error = max(abs(a - b) / b for a, b in zip(areas, shapely_areas))
    disagreements = sum(1 for a, b in zip(inside, shapely_inside) if a != b)

    print()
    print("=" * 50)
    print("RESULTS (ngonkit vs Shapely)")
    print("=" * 50)
    print(f"Polygons:             {num_polygons}")
    print(f"Build time:           {build_time*1000:.1f}ms")
    print(f"Area time:            {area_time*1000:.1f}ms")
    print(f"Containment time:     {inside_time*1000:.1f}ms")
    print(f"Shapely time:         {shapely_time*1000:.1f}ms")
    print(f"Max relative error:   {max_error:.3e}")
    print(f"Containment mismatch: {disagreements}")
    print("=" * 50)

    return max_error, disagreements


if __name__ == "__main__":
    num_polygons = int(sys.argv[1]) if len(sys.argv) > 1 else 2000
    num_vertices = int(sys.argv[2]) if len(sys.argv) > 2 else 6

    if num_vertices < 3:
        print("Error: polygons need at least 3 vertices")
        print("Usage: python benchmark_shapely.py [num_polygons] [num_vertices]")
        sys.exit(1)

    benchmark(num_polygons, num_vertices)
