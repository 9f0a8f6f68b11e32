"""Cones of normals, described by a center direction and an opening angle."""

from __future__ import annotations

import math
from typing import Union

import numpy as np

from .vectors import VectorLike, dot


class NormalCone:
    """A cone around a unit center normal with a radius angle in radians."""

    def __init__(self, normal: VectorLike, angle: float = 0.0) -> None:
        self.center_normal = np.asarray(normal, dtype=float)
        self.angle = float(angle)

    def merge(self, other: Union["NormalCone", VectorLike]) -> "NormalCone":
        """Enlarge this cone so that it also encloses other; returns self."""
        if not isinstance(other, NormalCone):
            other = NormalCone(other)

        dp = dot(self.center_normal, other.center_normal)

        if dp > 0.99999:
            self.angle = max(self.angle, other.angle)
        elif dp < -0.99999:
            self.angle = 2.0 * math.pi
        else:
            center_angle = math.acos(dp)
            min_angle = min(-self.angle, center_angle - other.angle)
            max_angle = max(self.angle, center_angle + other.angle)
            self.angle = 0.5 * (max_angle - min_angle)

            axis_angle = 0.5 * (min_angle + max_angle)
            self.center_normal = (
                self.center_normal * math.sin(center_angle - axis_angle)
                + other.center_normal * math.sin(axis_angle)
            ) / math.sin(center_angle)

        return self

    def __repr__(self) -> str:
        return f"NormalCone({self.center_normal.tolist()!r}, {self.angle!r})"