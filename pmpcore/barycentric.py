"""Barycentric coordinates of a point with respect to a triangle."""

from __future__ import annotations

import numpy as np

from .vectors import VectorLike


def barycentric_coordinates(
    p: VectorLike, u: VectorLike, v: VectorLike, w: VectorLike
) -> np.ndarray:
    """Return the barycentric coordinates of p in triangle (u, v, w).

    The point is projected onto the coordinate plane in which the triangle
    has the largest area. Degenerate triangles yield the barycenter.
    """
    u = np.asarray(u, dtype=float)
    vu = np.asarray(v, dtype=float) - u
    wu = np.asarray(w, dtype=float) - u
    pu = np.asarray(p, dtype=float) - u

    result = np.full(3, 1.0 / 3.0)

    nx = vu[1] * wu[2] - vu[2] * wu[1]
    ny = vu[2] * wu[0] - vu[0] * wu[2]
    nz = vu[0] * wu[1] - vu[1] * wu[0]
    ax, ay, az = abs(nx), abs(ny), abs(nz)

    if ax > ay:
        max_coord = 0 if ax > az else 2
    else:
        max_coord = 1 if ay > az else 2

    if max_coord == 0:
        if 1.0 + ax != 1.0:
            result[1] = 1.0 + (pu[1] * wu[2] - pu[2] * wu[1]) / nx - 1.0
            result[2] = 1.0 + (vu[1] * pu[2] - vu[2] * pu[1]) / nx - 1.0
            result[0] = 1.0 - result[1] - result[2]
    elif max_coord == 1:
        if 1.0 + ay != 1.0:
            result[1] = 1.0 + (pu[2] * wu[0] - pu[0] * wu[2]) / ny - 1.0
            result[2] = 1.0 + (vu[2] * pu[0] - vu[0] * pu[2]) / ny - 1.0
            result[0] = 1.0 - result[1] - result[2]
    else:
        if 1.0 + az != 1.0:
            result[1] = 1.0 + (pu[0] * wu[1] - pu[1] * wu[0]) / nz - 1.0
            result[2] = 1.0 + (vu[0] * pu[1] - vu[1] * pu[0]) / nz - 1.0
            result[0] = 1.0 - result[1] - result[2]

    return result