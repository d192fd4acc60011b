"""View frustum built from a camera's projection parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from actorengine.plane import Plane, plane_from_points
from actorengine.vec3 import Vec3


class FrustumSide(IntEnum):
    """Index of each plane in a frustum."""

    NEAR = 0
    FAR = 1
    TOP = 2
    RIGHT = 3
    BOTTOM = 4
    LEFT = 5


@dataclass(frozen=True)
class Frustum:
    """A view frustum: six planes, the clip-plane corners and the parameters."""

    planes: tuple[Plane, ...]
    near_clip_verts: tuple[Vec3, Vec3, Vec3, Vec3]
    far_clip_verts: tuple[Vec3, Vec3, Vec3, Vec3]
    field_of_view: float
    aspect_ratio: float
    near_clip_dist: float
    far_clip_dist: float

    def plane(self, side: FrustumSide) -> Plane:
        """The plane on the given side."""
        return self.planes[side]

    def is_inside(self, point: Vec3, radius: float) -> bool:
        """True when a sphere is inside or touching every plane of the frustum."""
        return all(plane.is_inside(point, radius) for plane in self.planes)


def _clip_verts(centre: Vec3, right: Vec3, up: Vec3) -> tuple[Vec3, Vec3, Vec3, Vec3]:
    return (
        centre - right + up,
        centre + right + up,
        centre + right - up,
        centre - right - up,
    )


def make_frustum(
    field_of_view: float,
    aspect_ratio: float,
    near_clip_dist: float,
    far_clip_dist: float,
) -> Frustum:
    """Build a frustum from a field of view in radians, aspect ratio and clip distances."""
    tan_half_fov = math.tan(field_of_view / 2.0)
    near_extent = near_clip_dist * tan_half_fov * aspect_ratio
    far_extent = far_clip_dist * tan_half_fov * aspect_ratio
    near_verts = _clip_verts(
        near_clip_dist * Vec3.FORWARD, near_extent * Vec3.RIGHT, near_extent * Vec3.UP
    )
    far_verts = _clip_verts(
        far_clip_dist * Vec3.FORWARD, far_extent * Vec3.RIGHT, far_extent * Vec3.UP
    )
    origin = Vec3()
    planes = {
        FrustumSide.NEAR: plane_from_points(near_verts[2], near_verts[1], near_verts[0]),
        FrustumSide.FAR: plane_from_points(far_verts[0], far_verts[1], far_verts[2]),
        FrustumSide.RIGHT: plane_from_points(far_verts[2], far_verts[1], origin),
        FrustumSide.TOP: plane_from_points(far_verts[1], far_verts[0], origin),
        FrustumSide.LEFT: plane_from_points(far_verts[0], far_verts[3], origin),
        FrustumSide.BOTTOM: plane_from_points(far_verts[3], far_verts[2], origin),
    }
    return Frustum(
        planes=tuple(planes[side] for side in FrustumSide),
        near_clip_verts=near_verts,
        far_clip_verts=far_verts,
        field_of_view=field_of_view,
        aspect_ratio=aspect_ratio,
        near_clip_dist=near_clip_dist,
        far_clip_dist=far_clip_dist,
    )