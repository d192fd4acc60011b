"""Camera definitions and a double-buffered camera store."""

from __future__ import annotations

from dataclasses import dataclass, field

from actorengine.mat4x4 import Mat4x4


@dataclass(frozen=True)
class CameraDef:
    """Clip distances of a camera."""

    near_clip_dist: float
    far_clip_dist: float


@dataclass(frozen=True)
class Camera:
    """Projection and world transform of a camera."""

    projection: Mat4x4 = field(default_factory=Mat4x4.identity)
    transform: Mat4x4 = field(default_factory=Mat4x4.identity)


class CameraBuffer:
    """Two camera slots: one is read while the other is written, until swapped."""

    def __init__(self) -> None:
        self._first = True
        self._cameras = [Camera(), Camera()]

    def current(self) -> Camera:
        """The camera in the front slot."""
        return self._cameras[0 if self._first else 1]

    def stage(self, camera: Camera) -> None:
        """Write a camera into the back slot."""
        self._cameras[1 if self._first else 0] = camera

    def swap(self) -> None:
        """Exchange the front and back slots."""
        self._first = not self._first