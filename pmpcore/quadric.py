"""Error quadrics stored as the upper triangle of a symmetric 4x4 matrix."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields

from .vectors import VectorLike, dot


@dataclass
class Quadric:
    """Symmetric 4x4 matrix used by quadric error metrics."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0
    f: float = 0.0
    g: float = 0.0
    h: float = 0.0
    i: float = 0.0
    j: float = 0.0

    @classmethod
    def from_plane(cls, a: float, b: float, c: float, d: float) -> "Quadric":
        """Build the quadric of the plane ax + by + cz + d = 0."""
        return cls(a * a, a * b, a * c, a * d, b * b, b * c, b * d, c * c, c * d, d * d)

    @classmethod
    def from_point_normal(cls, normal: VectorLike, point: VectorLike) -> "Quadric":
        """Build the quadric of the plane through a point with a given normal."""
        return cls.from_plane(
            float(normal[0]), float(normal[1]), float(normal[2]), -dot(normal, point)
        )

    def clear(self) -> None:
        """Set all matrix entries to zero."""
        for field in fields(self):
            setattr(self, field.name, 0.0)

    def __iadd__(self, other: "Quadric") -> "Quadric":
        for field, value in zip(fields(self), astuple(other)):
            setattr(self, field.name, getattr(self, field.name) + value)
        return self

    def __add__(self, other: "Quadric") -> "Quadric":
        return Quadric(*(x + y for x, y in zip(astuple(self), astuple(other))))

    def __imul__(self, s: float) -> "Quadric":
        for field in fields(self):
            setattr(self, field.name, getattr(self, field.name) * s)
        return self

    def __mul__(self, s: float) -> "Quadric":
        return Quadric(*(x * s for x in astuple(self)))

    __rmul__ = __mul__

    def __call__(self, p: VectorLike) -> float:
        """Evaluate p^T Q p for the homogeneous point (x, y, z, 1)."""
        x, y, z = float(p[0]), float(p[1]), float(p[2])
        return (
            self.a * x * x + 2.0 * self.b * x * y + 2.0 * self.c * x * z + 2.0 * self.d * x
            + self.e * y * y + 2.0 * self.f * y * z + 2.0 * self.g * y
            + self.h * z * z + 2.0 * self.i * z
            + self.j
        )