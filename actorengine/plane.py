"""Planes in the form a*x + b*y + c*z + d."""

from __future__ import annotations

import math
from dataclasses import dataclass

from actorengine.vec3 import Vec3, cross, dot


@dataclass(frozen=True)
class Plane:
    """An immutable plane with coefficients a, b, c and d."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def is_inside(self, point: Vec3, radius: float) -> bool:
        """True when a sphere at point with the given radius is not fully behind the plane."""
        return plane_dot_coord(self, point) >= -radius


def plane_from_points(p0: Vec3, p1: Vec3, p2: Vec3) -> Plane:
    """Normalised plane through three points, facing along (p1 - p0) x (p2 - p0)."""
    normal = cross(p1 - p0, p2 - p0).normalized()
    return normalize_plane(plane_from_point_normal(p0, normal))


def normalize_plane(plane: Plane) -> Plane:
    """Scale a plane so its normal has unit length; raises ValueError for a zero normal."""
    length = math.sqrt(plane.a * plane.a + plane.b * plane.b + plane.c * plane.c)
    if length == 0.0:
        raise ValueError("cannot normalise a plane with a zero normal")
    mag = 1.0 / length
    return Plane(plane.a * mag, plane.b * mag, plane.c * mag, plane.d * mag)


def plane_from_point_normal(point: Vec3, normal: Vec3) -> Plane:
    """Plane with the given normal whose d term is the dot of point and normal."""
    return Plane(normal.x, normal.y, normal.z, dot(point, normal))


def plane_dot_coord(plane: Plane, point: Vec3) -> float:
    """Evaluate the plane equation at a point."""
    return plane.a * point.x + plane.b * point.y + plane.c * point.z + plane.d