"""Row-major 4x4 matrices and the transforms built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from actorengine.quat import Quat
from actorengine.vec3 import Vec3
from actorengine.vec4 import Vec4, cross4

Rows = tuple[tuple[float, float, float, float], ...]

_IDENTITY_ROWS: Rows = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Mat4x4:
    """An immutable 4x4 matrix stored as four rows; defaults to the identity."""

    m: Rows = field(default=_IDENTITY_ROWS)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.m)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4x4 needs exactly four rows of four values")
        object.__setattr__(self, "m", rows)

    @classmethod
    def identity(cls) -> Mat4x4:
        """The identity matrix."""
        return cls(_IDENTITY_ROWS)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.m[row][col]

    def __mul__(self, other: Mat4x4) -> Mat4x4:
        if not isinstance(other, Mat4x4):
            return NotImplemented
        columns = list(zip(*other.m))
        return Mat4x4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.m
            )
        )


def _editable_identity() -> list[list[float]]:
    return [list(row) for row in _IDENTITY_ROWS]


def _freeze(rows: list[list[float]]) -> Mat4x4:
    return Mat4x4(tuple(tuple(row) for row in rows))


def position(mat: Mat4x4) -> Vec3:
    """Translation part of a transform matrix."""
    x, y, z, _ = mat.m[3]
    return Vec3(x, y, z)


def determinant(mat: Mat4x4) -> float:
    """Determinant of a 4x4 matrix."""
    m = mat.m
    v1 = Vec4(m[0][0], m[1][0], m[2][0], m[3][0])
    v2 = Vec4(m[0][1], m[1][1], m[2][1], m[3][1])
    v3 = Vec4(m[0][2], m[1][2], m[2][2], m[3][2])
    x = cross4(v1, v2, v3)
    return -(m[0][3] * x.x + m[1][3] * x.y + m[2][3] * x.z + m[3][3] * x.w)


def inverse(mat: Mat4x4) -> Mat4x4:
    """Inverse of a matrix; raises ValueError when the matrix is singular."""
    det = determinant(mat)
    if det == 0.0:
        raise ValueError("matrix is singular and has no inverse")
    result = _editable_identity()
    for i in range(4):
        others = [Vec4(*row) for j, row in enumerate(mat.m) if j != i]
        x = cross4(*others)
        sign = (-1.0) ** i
        for j, cofactor in enumerate((x.x, x.y, x.z, x.w)):
            result[j][i] = sign * cofactor / det
    return _freeze(result)


def matrix_perspective_fov_lh(
    field_of_view: float,
    aspect_ratio: float,
    near_clip_dist: float,
    far_clip_dist: float,
) -> Mat4x4:
    """Left-handed perspective projection from a vertical field of view in radians."""
    rows = _editable_identity()
    tan_fov = math.tan(field_of_view / 2.0)
    depth = far_clip_dist - near_clip_dist
    rows[0][0] = 1.0 / (aspect_ratio * tan_fov)
    rows[1][1] = 1.0 / tan_fov
    rows[2][2] = far_clip_dist / depth
    rows[2][3] = 1.0
    rows[3][2] = (far_clip_dist * -near_clip_dist) / depth
    rows[3][3] = 0.0
    return _freeze(rows)


def _set_rotation(rows: list[list[float]], rot: Quat) -> None:
    x, y, z, w = rot.x, rot.y, rot.z, rot.w
    rows[0][0] = 1.0 - 2.0 * (y * y + z * z)
    rows[0][1] = 2.0 * (x * y + z * w)
    rows[0][2] = 2.0 * (x * z - y * w)
    rows[1][0] = 2.0 * (x * y - z * w)
    rows[1][1] = 1.0 - 2.0 * (x * x + z * z)
    rows[1][2] = 2.0 * (y * z + x * w)
    rows[2][0] = 2.0 * (x * z + y * w)
    rows[2][1] = 2.0 * (y * z - x * w)
    rows[2][2] = 1.0 - 2.0 * (x * x + y * y)


def rot_to_mat4x4(rot: Quat) -> Mat4x4:
    """Rotation matrix from a quaternion."""
    rows = _editable_identity()
    _set_rotation(rows, rot)
    return _freeze(rows)


def scl_to_mat4x4(scl: Vec3) -> Mat4x4:
    """Scaling matrix."""
    rows = _editable_identity()
    rows[0][0] = scl.x
    rows[1][1] = scl.y
    rows[2][2] = scl.z
    return _freeze(rows)


def pos_to_mat4x4(pos: Vec3) -> Mat4x4:
    """Translation matrix."""
    rows = _editable_identity()
    rows[3][0] = pos.x
    rows[3][1] = pos.y
    rows[3][2] = pos.z
    return _freeze(rows)


def rot_scl_pos_to_mat4x4(rot: Quat, scl: Vec3, pos: Vec3) -> Mat4x4:
    """Combined transform: rotation with its diagonal scaled, then translation."""
    rows = _editable_identity()
    _set_rotation(rows, rot)
    rows[3][0] = pos.x
    rows[3][1] = pos.y
    rows[3][2] = pos.z
    rows[0][0] *= scl.x
    rows[1][1] *= scl.y
    rows[2][2] *= scl.z
    return _freeze(rows)