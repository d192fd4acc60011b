"""Quaternions for rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from actorengine.constants import DEG_TO_RAD_F
from actorengine.vec3 import Vec3


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion; the default value is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        q = other
        return Quat(
            self.x * q.w + self.w * q.x + self.z * q.y - self.y * q.z,
            self.y * q.w - self.z * q.x + self.w * q.y + self.x * q.z,
            self.z * q.w + self.y * q.x - self.x * q.y + self.w * q.z,
            self.w * q.w - self.x * q.x - self.y * q.y - self.z * q.z,
        )


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


def euler_rad_to_quat(vec: Vec3) -> Quat:
    """Quaternion from Euler angles in radians (x = pitch, y = yaw, z = roll)."""
    sx, cx = math.sin(vec.x / 2.0), math.cos(vec.x / 2.0)
    sy, cy = math.sin(vec.y / 2.0), math.cos(vec.y / 2.0)
    sz, cz = math.sin(vec.z / 2.0), math.cos(vec.z / 2.0)
    return Quat(
        sy * cx * sz + cy * sx * cz,
        sy * cx * cz - cy * sx * sz,
        cy * cx * sz - sy * sx * cz,
        cy * cx * cz + sy * sx * sz,
    )


def euler_deg_to_quat(vec: Vec3) -> Quat:
    """Quaternion from Euler angles in degrees."""
    return euler_rad_to_quat(vec * DEG_TO_RAD_F)


def conjugate(quat: Quat) -> Quat:
    """Conjugate of a quaternion."""
    return Quat(-quat.x, -quat.y, -quat.z, quat.w)


def rotate(vec: Vec3, quat: Quat) -> Vec3:
    """Rotate a vector by a quaternion."""
    rotated = conjugate(quat) * Quat(vec.x, vec.y, vec.z, 1.0) * quat
    return Vec3(rotated.x, rotated.y, rotated.z)