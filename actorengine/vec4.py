"""Four-component vector and the 4D cross product."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from actorengine.vec3 import Vec3


@dataclass(frozen=True)
class Vec4:
    """An immutable 4D vector; add and subtract produce a point (w = 1)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vec3(cls, vec: Vec3) -> Vec4:
        """Build a point from a 3D vector, with w set to 1."""
        return cls(vec.x, vec.y, vec.z, 1.0)

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, 1.0)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, 1.0)

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w)

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)


Vec4.RIGHT = Vec4(1.0, 0.0, 0.0, 0.0)
Vec4.UP = Vec4(0.0, 1.0, 0.0, 0.0)
Vec4.FORWARD = Vec4(0.0, 0.0, 1.0, 0.0)


def cross4(a: Vec4, b: Vec4, c: Vec4) -> Vec4:
    """Generalised cross product of three 4D vectors."""
    return Vec4(
        a.y * (b.z * c.w - b.w * c.z)
        - a.z * (b.y * c.w - b.w * c.y)
        + a.w * (b.y * c.z - b.z * c.y),
        -a.x * (b.z * c.w - b.w * c.z)
        + a.z * (b.x * c.w - b.w * c.x)
        - a.w * (b.x * c.z - b.z * c.x),
        a.x * (b.y * c.w - b.w * c.y)
        - a.y * (b.x * c.w - b.w * c.x)
        + a.w * (b.x * c.y - b.y * c.x),
        -a.x * (b.y * c.z - b.z * c.y)
        + a.y * (b.x * c.z - b.z * c.x)
        - a.z * (b.x * c.y - b.y * c.x),
    )