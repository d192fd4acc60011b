import pytest

from actorengine.mat4x4 import (
    Mat4x4,
    determinant,
    inverse,
    matrix_perspective_fov_lh,
    pos_to_mat4x4,
    position,
    rot_scl_pos_to_mat4x4,
    rot_to_mat4x4,
    scl_to_mat4x4,
)
from actorengine.quat import Quat, euler_rad_to_quat
from actorengine.vec3 import Vec3


def _flat(mat):
    return [value for row in mat.m for value in row]


def _assert_close(a, b):
    assert _flat(a) == pytest.approx(_flat(b), abs=1e-9)


SAMPLE = Mat4x4(
    (
        (2.0, 1.0, 0.0, 0.0),
        (0.5, 3.0, 1.0, 0.0),
        (0.0, 1.0, 4.0, 0.0),
        (1.0, 2.0, 3.0, 1.0),
    )
)


def test_default_is_identity():
    assert Mat4x4() == Mat4x4.identity()
    assert Mat4x4.identity()[0, 0] == 1.0
    assert Mat4x4.identity()[0, 1] == 0.0


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Mat4x4(((1.0, 0.0), (0.0, 1.0)))


def test_identity_is_neutral_for_multiplication():
    assert Mat4x4.identity() * SAMPLE == SAMPLE
    assert SAMPLE * Mat4x4.identity() == SAMPLE


def test_multiply_entry_is_row_times_column():
    product = SAMPLE * SAMPLE
    expected = sum(SAMPLE.m[1][k] * SAMPLE.m[k][2] for k in range(4))
    assert product[1, 2] == pytest.approx(expected)


def test_determinant_of_identity():
    assert determinant(Mat4x4.identity()) == pytest.approx(1.0)


def test_determinant_of_scale_is_product():
    assert determinant(scl_to_mat4x4(Vec3(2.0, 3.0, 4.0))) == pytest.approx(2.0 * 3.0 * 4.0)


def test_determinant_is_multiplicative():
    other = rot_scl_pos_to_mat4x4(
        euler_rad_to_quat(Vec3(0.3, -0.2, 0.7)), Vec3(1.5, 1.0, 0.5), Vec3(1.0, 2.0, 3.0)
    )
    assert determinant(SAMPLE * other) == pytest.approx(
        determinant(SAMPLE) * determinant(other)
    )


def test_rotation_matrix_has_unit_determinant():
    rot = euler_rad_to_quat(Vec3(1.0, -1.0, 0.5))
    assert determinant(rot_to_mat4x4(rot)) == pytest.approx(1.0)


def test_inverse_times_matrix_is_identity():
    _assert_close(inverse(SAMPLE) * SAMPLE, Mat4x4.identity())
    _assert_close(SAMPLE * inverse(SAMPLE), Mat4x4.identity())


def test_inverse_of_transform():
    mat = rot_scl_pos_to_mat4x4(
        euler_rad_to_quat(Vec3(0.4, 0.1, -0.3)), Vec3(1.0, 1.0, 1.0), Vec3(5.0, -2.0, 1.0)
    )
    _assert_close(mat * inverse(mat), Mat4x4.identity())


def test_inverse_of_singular_raises():
    with pytest.raises(ValueError):
        inverse(scl_to_mat4x4(Vec3(1.0, 0.0, 1.0)))


def test_position_round_trip():
    pos = Vec3(1.0, -2.0, 3.5)
    assert position(pos_to_mat4x4(pos)) == pos


def test_rot_of_identity_quat_is_identity():
    assert rot_to_mat4x4(Quat.IDENTITY) == Mat4x4.identity()


def test_rot_scl_pos_with_identity_rotation():
    scl = Vec3(2.0, 3.0, 4.0)
    pos = Vec3(1.0, 2.0, 3.0)
    assert rot_scl_pos_to_mat4x4(Quat.IDENTITY, scl, pos) == scl_to_mat4x4(scl) * pos_to_mat4x4(pos)


def test_rot_scl_pos_with_unit_scale_and_no_translation():
    rot = euler_rad_to_quat(Vec3(0.2, 0.5, -0.1))
    assert rot_scl_pos_to_mat4x4(rot, Vec3(1.0, 1.0, 1.0), Vec3()) == rot_to_mat4x4(rot)


def _project_depth(mat, z):
    row = (0.0, 0.0, z, 1.0)
    out = [sum(row[k] * mat.m[k][j] for k in range(4)) for j in range(4)]
    return out[2] / out[3]


def test_perspective_maps_clip_planes_to_unit_depth():
    near, far = 0.5, 100.0
    proj = matrix_perspective_fov_lh(1.0, 1.5, near, far)
    assert _project_depth(proj, near) == pytest.approx(0.0, abs=1e-9)
    assert _project_depth(proj, far) == pytest.approx(1.0)
    assert proj[2, 3] == 1.0
    assert proj[3, 3] == 0.0