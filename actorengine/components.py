"""Actor components: the base type, transforms and cameras."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from actorengine.camera import Camera, CameraDef
from actorengine.constants import PI
from actorengine.frustum import Frustum, make_frustum
from actorengine.game_input import GameInput
from actorengine.mat4x4 import Mat4x4, matrix_perspective_fov_lh, rot_scl_pos_to_mat4x4
from actorengine.quat import Quat
from actorengine.vec3 import Vec3
from actorengine.window_config import WindowConfig

if TYPE_CHECKING:
    from actorengine.actor import Actor
    from actorengine.resources import Resources


class _CameraTarget(Protocol):
    window_config: WindowConfig

    def set_camera(self, camera: Camera) -> None: ...


class ComponentType(Enum):
    """Kind of a component."""

    TRANSFORM = 0
    OTHER = 1


class Component:
    """Base component; every hook does nothing until a subclass overrides it."""

    def __init__(self, component_type: ComponentType = ComponentType.OTHER) -> None:
        self.component_type = component_type
        self.owner: Actor | None = None

    def init(self, resources: Resources, renderer: Any) -> None:
        """Prepare the component before the first frame."""

    def update(self, delta_ms: float, game_input: GameInput) -> None:
        """Advance the component by one frame."""

    def render(self, renderer: Any) -> None:
        """Draw the component."""


class TransformComponent(Component):
    """Position, velocity, scale and rotations of an actor."""

    def __init__(
        self,
        pos: Vec3,
        vel: Vec3,
        scl: Vec3,
        rot: Quat = Quat.IDENTITY,
        model_rot: Quat = Quat.IDENTITY,
        parent_transform: Mat4x4 | None = None,
    ) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.pos = pos
        self.vel = vel
        self.scl = scl
        self.rot = rot
        self.model_rot = model_rot
        self.parent_transform = (
            parent_transform if parent_transform is not None else Mat4x4.identity()
        )

    def update(self, delta_ms: float, game_input: GameInput) -> None:
        """Move by the velocity over the elapsed time."""
        self.pos = self.pos + self.vel * delta_ms

    def transform(self) -> Mat4x4:
        """World transform from rotation, scale and position, then the parent's."""
        return rot_scl_pos_to_mat4x4(self.rot, self.scl, self.pos) * self.parent_transform

    def model_transform(self) -> Mat4x4:
        """World transform that also applies the model's own rotation."""
        return (
            rot_scl_pos_to_mat4x4(self.model_rot * self.rot, self.scl, self.pos)
            * self.parent_transform
        )


class CameraComponent(Component):
    """Publishes its owner's view to the renderer each frame."""

    def __init__(self, camera_def: CameraDef) -> None:
        super().__init__()
        self.camera_def = camera_def
        self.frustum: Frustum | None = None
        self.projection: Mat4x4 | None = None
        self._renderer: _CameraTarget | None = None

    def init(self, resources: Resources, renderer: _CameraTarget) -> None:
        """Build the frustum and projection from the renderer's window size."""
        self._renderer = renderer
        config = renderer.window_config
        self.frustum = make_frustum(
            PI / 4.0,
            config.width / config.height,
            self.camera_def.near_clip_dist,
            self.camera_def.far_clip_dist,
        )
        self.projection = matrix_perspective_fov_lh(
            self.frustum.field_of_view,
            self.frustum.aspect_ratio,
            self.frustum.near_clip_dist,
            self.frustum.far_clip_dist,
        )

    def update(self, delta_ms: float, game_input: GameInput) -> None:
        """Hand the projection and the owner's model transform to the renderer."""
        if self._renderer is None or self.projection is None:
            raise RuntimeError("camera component used before init")
        if self.owner is None:
            raise RuntimeError("camera component has no owner")
        self._renderer.set_camera(
            Camera(self.projection, self.owner.transform_component.model_transform())
        )