"""Vector helpers and the common I/O flags used for meshes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]

#: Largest representable element index (32-bit index type).
MAX_INDEX = 2**32 - 1


@dataclass
class IOFlags:
    """Common flags for reading and writing meshes."""

    use_binary: bool = False
    use_vertex_normals: bool = False
    use_vertex_colors: bool = False
    use_vertex_texcoords: bool = False
    use_face_normals: bool = False
    use_face_colors: bool = False
    use_halfedge_texcoords: bool = False


def _vec(a: VectorLike) -> np.ndarray:
    return np.asarray(a, dtype=float)


def dot(a: VectorLike, b: VectorLike) -> float:
    """Return the dot product of two vectors."""
    return float(np.dot(_vec(a), _vec(b)))


def cross(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Return the cross product of two 3D vectors."""
    return np.cross(_vec(a), _vec(b))


def sqrnorm(a: VectorLike) -> float:
    """Return the squared Euclidean length of a vector."""
    v = _vec(a)
    return float(np.dot(v, v))


def norm(a: VectorLike) -> float:
    """Return the Euclidean length of a vector."""
    return float(np.linalg.norm(_vec(a)))


def add(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Return the component-wise sum of two vectors."""
    return _vec(a) + _vec(b)


def sub(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Return the component-wise difference a - b."""
    return _vec(a) - _vec(b)


def scale(a: VectorLike, s: float) -> np.ndarray:
    """Return the vector multiplied by a scalar."""
    return _vec(a) * float(s)


def all_finite(a: VectorLike) -> bool:
    """Return True if no component is infinite or NaN."""
    return bool(np.all(np.isfinite(_vec(a))))