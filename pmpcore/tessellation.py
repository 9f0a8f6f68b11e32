"""Triangulation of polygonal faces by minimising the sum of squared areas."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .vectors import VectorLike, cross, sqrnorm

Triangle = Tuple[int, int, int]


def squared_area(p0: VectorLike, p1: VectorLike, p2: VectorLike) -> float:
    """Return the squared length of (p1 - p0) x (p2 - p0).

    This is four times the squared triangle area. It is the cost that
    tessellate() minimises.
    """
    a = np.asarray(p0, dtype=float)
    return sqrnorm(cross(np.asarray(p1, dtype=float) - a, np.asarray(p2, dtype=float) - a))


def _quad(points: np.ndarray) -> List[Triangle]:
    diagonal_02 = squared_area(points[0], points[1], points[2]) + squared_area(
        points[0], points[2], points[3]
    )
    diagonal_13 = squared_area(points[0], points[1], points[3]) + squared_area(
        points[1], points[2], points[3]
    )
    if diagonal_02 < diagonal_13:
        return [(0, 1, 2), (0, 2, 3)]
    return [(0, 1, 3), (1, 2, 3)]


def _polygon(points: np.ndarray) -> List[Triangle]:
    n = len(points)
    # cost[i][k] and split[i][k] describe the best triangulation of the
    # sub-polygon i, i+1, ..., k.
    cost = [[math.inf] * n for _ in range(n)]
    split = [[-1] * n for _ in range(n)]
    for i in range(n - 1):
        cost[i][i + 1] = 0.0

    for j in range(2, n):
        for i in range(n - j):
            k = i + j
            best, best_m = math.inf, -1
            for m in range(i + 1, k):
                w = cost[i][m] + squared_area(points[i], points[m], points[k]) + cost[m][k]
                if w < best:
                    best, best_m = w, m
            cost[i][k] = best
            split[i][k] = best_m

    triangles: List[Triangle] = []
    todo = [(0, n - 1)]
    while todo:
        start, end = todo.pop()
        if end - start < 2:
            continue
        m = split[start][end]
        triangles.append((start, m, end))
        todo.append((start, m))
        todo.append((m, end))
    return triangles


def tessellate(points: Sequence[VectorLike]) -> List[Triangle]:
    """Split a polygon into triangles given as index triples into points.

    Triangles keep their corners in polygon order. Quads pick the diagonal
    with the smaller sum of squared areas; larger polygons are triangulated
    by dynamic programming so that this sum is minimal, which avoids folded
    triangles on non-convex polygons. Raises ValueError for fewer than three
    points.
    """
    pts = np.asarray(points, dtype=float)
    n = len(pts)
    if n < 3:
        raise ValueError(f"a polygon needs at least 3 corners, got {n}")
    if n == 3:
        return [(0, 1, 2)]
    if n == 4:
        return _quad(pts)
    return _polygon(pts)