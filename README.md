# actorengine

The core of a small actor/component game engine. It is written in pure Python
and needs no third-party packages.

## Modules

- `actorengine.constants`: `PI`, `TWO_PI`, `DEG_TO_RAD`, `RAD_TO_DEG` and
  their `_F` variants.
- `actorengine.vec2`, `actorengine.vec3`, `actorengine.vec4`: the immutable
  vectors `Vec2`, `Vec3` and `Vec4`. `Vec3` has `length()`, `normalized()`
  and `clamp_mag()`, the constants `Vec3.ZERO`, `RIGHT`, `UP` and `FORWARD`,
  and the free functions `cross` and `dot`. `Vec4` has `from_vec3` and
  `cross4`. Adding or subtracting two `Vec4` values always gives `w = 1`.
- `actorengine.quat`: `Quat` (the default is `Quat.IDENTITY`),
  `euler_rad_to_quat`, `euler_deg_to_quat`, `conjugate` and `rotate`.
- `actorengine.mat4x4`: the row-major `Mat4x4`, indexed as `mat[row, col]`,
  and the functions `position`, `determinant`, `inverse`,
  `matrix_perspective_fov_lh`, `rot_to_mat4x4`, `scl_to_mat4x4`,
  `pos_to_mat4x4` and `rot_scl_pos_to_mat4x4`. `inverse` raises `ValueError`
  when the matrix is singular.
- `actorengine.plane`: `Plane` with `is_inside(point, radius)`, and the
  functions `plane_from_points`, `normalize_plane`, `plane_from_point_normal`
  and `plane_dot_coord`.
- `actorengine.frustum`: `make_frustum(field_of_view, aspect_ratio, near, far)`
  builds a `Frustum`. `Frustum.is_inside(point, radius)` tests a sphere
  against all six planes, and `Frustum.plane(FrustumSide.NEAR)` and the like
  return a single plane.
- `actorengine.game_input`: `Key`, `MouseButton`, `Mouse` and `GameInput`.
  Index a `GameInput` with a `Key`, a key code from 0 to 254, or a
  `MouseButton`. Any other key code raises `IndexError`. `copy()` returns an
  independent snapshot.
- `actorengine.camera`: `CameraDef`, `Camera` and `CameraBuffer`. On a
  `CameraBuffer`, `stage()` writes the back slot, `current()` reads the front
  slot, and `swap()` exchanges the two.
- `actorengine.timer`: `Timer` takes an optional clock that returns
  milliseconds. `update()` returns the time since the previous update, and
  `time_ms()` returns the total time measured.
- `actorengine.mesh`: `Color`, `Vertex`, `Mesh`, `Model`, `ModelType`,
  `BuiltInModelType`, `compute_tangents_and_binormals`, `cube_mesh` and
  `model_file_extension`.
- `actorengine.window_config`: `WindowStyle` and `WindowConfig`.
- `actorengine.material`: `MaterialDef`, plus these helpers:
  - `effective_texture_repeat` returns the material's repeat, or (1, 1) when
    either component is zero.
  - `texture_format` returns `TextureFormat.DDS` or `TextureFormat.WIC`.
- `actorengine.resources`: `Resources` caches each model and material the
  first time it is requested:
  - `get_loaded_model((filename, scale))` accepts only `.fbx` names. It calls
    the `model_loader` given to the constructor.
  - `get_built_in_model((BuiltInModelType.BOX, dimensions))` builds a cube.
  - `get_material(material_def)` calls `material_loader`. The default loader
    returns the definition itself.
- `actorengine.components`: `Component`, whose `init`, `update` and `render`
  hooks do nothing by default, plus `ComponentType`, `TransformComponent` and
  `CameraComponent`.
  - A `CameraComponent` is initialised with a renderer object that has a
    `window_config` attribute and a `set_camera(camera)` method.
- `actorengine.actor`: `Actor` owns a transform, components and child actors.
  `update()` updates its own transform first, then its components, then its
  children, passing each child its parent's transform.
- `actorengine.ball`: `BallTransformComponent` is a rolling ball:
  - W/S/Q/E accelerate it while it is on the ground.
  - A/D turn it.
  - Space makes it jump.
  - Gravity and a bounce keep it at a height of 0.45 or above.

## Installation

```
pip install .
```

## Example

```python
from actorengine.actor import Actor
from actorengine.ball import BallTransformComponent
from actorengine.game_input import GameInput, Key
from actorengine.vec3 import Vec3

ball = Actor(BallTransformComponent(
    pos=Vec3(0.0, 0.45, 0.0),
    vel=Vec3(0.0, 0.0, 0.0),
    scl=Vec3(1.0, 1.0, 1.0),
))

game_input = GameInput()
game_input[Key.W] = True
for _ in range(10):
    ball.update(16.0, game_input)

print(ball.transform_component.pos)
print(ball.transform_component.transform())
```

## What it does not do

This package has no window, no graphics device and no main loop. It does not
read keyboard or mouse events from the system; it only stores the state you
set. It does not draw anything, and `Component.render` is a no-op.

It cannot read model files by itself. To load models, pass
`Resources(model_loader=...)` a callable that returns a `Model` for a
filename and scale. Without one, `get_loaded_model` raises `RuntimeError`.

There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```