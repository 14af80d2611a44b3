# enginecore

The core of a small real-time 3D engine, written in plain Python with no
third-party dependencies.

## Modules

- `enginecore.vector`: `Vector3` and `Vector4` dataclasses. `Vector3` has
  `length_squared()` and `dot()`, and supports `+`, `+=`, `-` (another
  vector, or a number subtracted from each component), `*` (dot product
  with another vector, or scaling by a number) and `/` by a number.
- `enginecore.matrix`: `Matrix4x4`, a row-major 4x4 matrix (`m[row][col]`).
  It supports `+`, `-`, `*` (matrix product or scaling by a number), `*=`,
  indexing by row, and `Matrix4x4.zero()` and `Matrix4x4.identity()`.
  Constructing it with anything other than 4 rows of 4 values raises
  `ValueError`.
- `enginecore.mymath`: `add`, `subtract`, `multiply`, `length`, `distance`,
  `normalize`, `lerp`, `vector3_lerp`, `inverse`, `transform`,
  `transform_normal`, and matrix builders `make_translate_matrix`,
  `make_scale_matrix`, `make_rotate_x_matrix`, `make_rotate_y_matrix`,
  `make_rotate_z_matrix`, `make_rotate_matrix`, `make_affine_matrix`,
  `make_viewport_matrix`, `make_identity`, `make_orthographic_matrix` and
  `make_perspective_fov_matrix`, plus `get_pi()`. Matrices follow the
  row-vector convention (`v * M`, translation in the last row).
  `inverse` raises `ValueError` for a singular matrix; `normalize` returns
  a zero vector unchanged. `make_rotate_matrix` takes the angle of its Z
  factor from `rotate.x`; `make_affine_matrix` uses `rotate.z` for Z.
- `enginecore.particles`: a billboard particle system.
  `ParticleManager(camera, rng)` holds named `ParticleGroup`s
  (`create_particle_group` raises `ValueError` for a duplicate name;
  `emit` raises `KeyError` for an unknown one). Emitted particles get a
  random offset in [-1, 1] around the position, a random velocity and
  colour, and a lifetime between 1 and 3 seconds. `update()` drops expired
  particles, then advances up to 100 live particles per group by a fixed
  1/60 s step, applying the `AccelerationField` to particles inside its
  `AABB`, and fills each group's `instances` with `InstanceData` (world
  matrix, world-view-projection matrix, and colour whose alpha fades with
  age); `num_instance` counts them. `ParticleEmitter` emits `count`
  (default 3) particles every `frequency` (default 0.5) seconds of
  simulated time, one burst per existing group into its own named group.
- `enginecore.scenes`: `BaseScene` (abstract `initialize`, `finalize`,
  `update`, `draw`), `AbstractSceneFactory`, `SceneFactory` (scene
  constructors registered by name, each called with the arguments given to
  the factory) and `SceneManager`. The manager swaps in the reserved scene
  at the start of `update`, finalizing the one it replaces; `close()` (or
  leaving a `with` block) finalizes the running scene.
- `enginecore.input`: `ControllerState` and `InputState`. Each call to
  `InputState.update(keys, controller)` takes a 256-byte key table and a
  gamepad snapshot; `push_key`/`trigger_key` and
  `push_button`/`trigger_button` report held and just-pressed state, and
  the stick accessors return the current stick values. `set_vibration`
  records the requested motor speeds in `vibration`.
- `enginecore.textutil`: `encode_utf8`, `decode_utf8` (invalid data becomes
  U+FFFD) and `log`, which writes to the `enginecore` logger at debug level.

## Example

```python
import random

from enginecore.particles import CameraTransform, ParticleEmitter, ParticleManager
from enginecore.vector import Vector3

camera = CameraTransform(translate=Vector3(0.0, 2.5, -25.0))
manager = ParticleManager(camera, random.Random(0))
manager.create_particle_group("sparks", "./resources/circle.png")

emitter = ParticleEmitter(manager, "sparks")
for _ in range(120):
    emitter.update()
    manager.update()

group = manager.particle_groups()["sparks"]
print(len(group.particles), group.num_instance)
```

Scenes:

```python
from enginecore.scenes import BaseScene, SceneFactory, SceneManager


class Scene(BaseScene):
    def initialize(self):
        pass

    def finalize(self):
        pass

    def update(self):
        pass

    def draw(self):
        pass


class Title(Scene):
    def update(self):
        self.scene_manager.change_scene("GAME")


class Game(Scene):
    pass


factory = SceneFactory()
factory.register("TITLE", Title)
factory.register("GAME", Game)

with SceneManager() as manager:
    manager.set_scene_factory(factory)
    manager.change_scene("TITLE")
    manager.update()  # Title starts and asks for GAME
    manager.update()  # Game replaces Title
```

## What it does not do

The package computes state only. It does not open a window, draw anything
on screen, load textures or models, play sound, or read a keyboard or
gamepad: key tables and controller snapshots must be supplied by the
caller, and vibration requests are only recorded.

## Tests

```
pip install -e .[test]
pytest
```