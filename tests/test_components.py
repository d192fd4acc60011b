import pytest

from actorengine.actor import Actor
from actorengine.camera import Camera, CameraBuffer, CameraDef
from actorengine.components import (
    CameraComponent,
    Component,
    ComponentType,
    TransformComponent,
)
from actorengine.constants import PI
from actorengine.game_input import GameInput
from actorengine.mat4x4 import matrix_perspective_fov_lh, pos_to_mat4x4, position
from actorengine.quat import Quat, euler_rad_to_quat
from actorengine.resources import Resources
from actorengine.vec3 import Vec3
from actorengine.window_config import WindowConfig, WindowStyle


class FakeRenderer:
    def __init__(self, width=800, height=600):
        self.window_config = WindowConfig(width, height, WindowStyle.WINDOW, 32)
        self.cameras = CameraBuffer()

    def set_camera(self, camera):
        self.cameras.stage(camera)


def _transform(pos=Vec3(), vel=Vec3()):
    return TransformComponent(pos, vel, Vec3(1.0, 1.0, 1.0))


def test_component_types():
    assert Component().component_type is ComponentType.OTHER
    assert _transform().component_type is ComponentType.TRANSFORM


def test_transform_defaults_to_identity_rotations():
    t = _transform()
    assert t.rot == Quat.IDENTITY
    assert t.model_rot == Quat.IDENTITY


def test_update_moves_by_velocity_times_delta():
    t = _transform(vel=Vec3(1.0, 2.0, 3.0))
    t.update(2.0, GameInput())
    assert t.pos == Vec3(1.0, 2.0, 3.0) * 2.0


def test_transform_translation_is_position():
    pos = Vec3(1.0, -2.0, 3.0)
    assert position(_transform(pos).transform()) == pos


def test_transform_includes_parent():
    t = _transform(Vec3(1.0, 0.0, 0.0))
    t.parent_transform = pos_to_mat4x4(Vec3(0.0, 5.0, 0.0))
    assert position(t.transform()) == Vec3(1.0, 5.0, 0.0)


def test_model_transform_equals_transform_without_model_rotation():
    t = _transform(Vec3(1.0, 2.0, 3.0))
    t.rot = euler_rad_to_quat(Vec3(0.0, 0.5, 0.0))
    assert t.model_transform() == t.transform()


def test_model_transform_differs_with_model_rotation():
    t = _transform()
    t.model_rot = euler_rad_to_quat(Vec3(0.3, 0.0, 0.0))
    assert t.model_transform() != t.transform()
    assert position(t.model_transform()) == position(t.transform())


def test_camera_init_builds_projection():
    renderer = FakeRenderer()
    camera = CameraComponent(CameraDef(0.001, 1000.0))
    camera.init(Resources(), renderer)
    assert camera.projection == matrix_perspective_fov_lh(PI / 4.0, 800 / 600, 0.001, 1000.0)
    assert camera.frustum.near_clip_dist == 0.001
    assert camera.frustum.far_clip_dist == 1000.0


def test_camera_update_stages_owner_view():
    renderer = FakeRenderer()
    actor = Actor(_transform(Vec3(0.0, 2.0, -7.0)))
    camera = CameraComponent(CameraDef(0.001, 1000.0))
    actor.add_component(camera)
    camera.init(Resources(), renderer)
    camera.update(16.0, GameInput())
    renderer.cameras.swap()
    staged = renderer.cameras.current()
    assert staged == Camera(camera.projection, actor.transform_component.model_transform())
    assert position(staged.transform) == Vec3(0.0, 2.0, -7.0)


def test_camera_update_before_init_raises():
    camera = CameraComponent(CameraDef(0.1, 10.0))
    Actor(_transform()).add_component(camera)
    with pytest.raises(RuntimeError):
        camera.update(1.0, GameInput())


def test_camera_update_without_owner_raises():
    camera = CameraComponent(CameraDef(0.1, 10.0))
    camera.init(Resources(), FakeRenderer())
    with pytest.raises(RuntimeError):
        camera.update(1.0, GameInput())