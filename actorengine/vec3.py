"""Three-component vector and its free functions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from numbers import Real


@total_ordering
@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector, ordered lexicographically by (x, y, z)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __lt__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self.x, self.y, self.z) < (other.x, other.y, other.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec3()
        inv = 1.0 / length
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def clamp_mag(self, max_mag: float) -> Vec3:
        """Return this vector scaled down so its length does not exceed max_mag."""
        magnitude = self.length()
        if magnitude > max_mag:
            return self * (max_mag / magnitude)
        return self


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.RIGHT = Vec3(1.0, 0.0, 0.0)
Vec3.UP = Vec3(0.0, 1.0, 0.0)
Vec3.FORWARD = Vec3(0.0, 0.0, 1.0)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z