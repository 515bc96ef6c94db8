# wfengine

Building blocks for small games and interactive tools. It is written in plain
Python on top of numpy and holds the data and logic that a game loop or a
renderer works with.

## Modules

- `wfengine.vecmath`: `Mat4` (in-place `translate`, `scale` and `rotate`,
  `Mat4.look_at`, and `*` for matrix products), the axis-aligned `BoundingBox`
  (`extend`, `reset`, `size`, `midpoint`, `intersects`, `contains`), and
  `Transform`. A `Transform` holds a position, an Euler rotation in degrees and
  a scale. It has `matrix()`, `world_position()`, `up()`, `forward()` (-Z),
  `right()` and the shorthand constructors `Transform.t`, `Transform.r` and
  `Transform.s`.
- `wfengine.utils`: `cross_2d`, `perp_cw`, `perp_ccw` and `spring_force`, a
  damped spring that works on 2D or 3D vectors.
- `wfengine.bitfield`: `Bitfield` (`set_on`, `set_off`, `get_bit`, `clear`) and
  `Bitfields`, which holds one mask per axis. `miss` is true when no axis
  shares a bit, and `same` is its inverse.
- `wfengine.colour`: `Colour` and `ColourDenorm`, plus named colour constants
  such as `WHITE`, `BLACK`, `RED` and `CUTTINGMAT`. A `Colour` converts to and
  from vectors and denormalised bytes, formats as `#rrggbbaa` with `to_hex()`,
  and computes WCAG `luminance()`, `contrast_ratio()` and
  `is_contrast_sufficient()`.
- `wfengine.noise`: 2D `PerlinNoise` and `SimplexNoise`. Each is built from a
  seeded permutation table and sampled with `value(x, y)`.
- `wfengine.splines`: cubic `Bezier` curves with `position`, `tangent`,
  `orientation` (a `(w, x, y, z)` quaternion) and `transform` (a `Mat4`).
- `wfengine.geometry`: `Vertex`, `Mesh` (with `bounding_box()`) and
  `generate_mesh_tangents`.
- `wfengine.mesh_factory`: `create_simple_plane`, `create_circle`,
  `create_cube` (8 shared vertices), `create_cube_ext` (24 vertices, one set
  per face), `create_sphere` (rings and slices are raised to at least 3) and
  `create_hello_triangle`.
- `wfengine.terrain`: `create_plane`, which builds a flat grid, and functions
  that shape its heights in place. These are `apply_perlin_noise`,
  `apply_simplex_noise`, `apply_fractal_simplex_noise`, `apply_masked_simplex`,
  `apply_edging`, `apply_center`, `apply_min_y` and `apply_adjust_y`. Two more
  helpers go with them: `fix_normals_and_uvs`, which rebuilds normals, planar
  UVs and tangents, and `fractal_noise_2d`.
- `wfengine.timer`: `Timer` measures frame `delta_time` and `fps`, runs a
  fixed-step accumulator (`is_fixed_update_ready`), and drives `CustomTimer`
  callbacks. A `CustomTimer` can renew itself forever or a set number of times.
  The clock is injectable for testing.
- `wfengine.events`: `EventDispatcher`. Listeners are registered per exact
  event type with `on` or `on_notify`, and are called immediately by
  `dispatch` or `trigger`.
- `wfengine.entities`: a component `Registry`, the `Entity` handle,
  `EntityManager` and `ResourceManager`. `EntityManager` adds named entities,
  `find`, `each`, `first`, and `on_create` / `on_remove` component hooks.
  `ResourceManager.shutdown` clears everything.
- `wfengine.input`: `Input` is fed `InputEvent`s (see `EventType`). It reports
  keys and mouse buttons as pressed, held or released between frames, along
  with the mouse position, delta and wheel. Key and button constants such as
  `KEY_ESCAPE`, `KEY_A` and `BUTTON_LEFT` follow USB HID scancodes.
- `wfengine.shader`: `Shader`, a program handle and a table of uniform
  locations. `is_valid_location` and `location` look entries up in it.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Examples

Build some terrain:

```python
from wfengine import terrain

mesh = terrain.create_plane(100, 100, 64, 10.0)
terrain.apply_center(mesh, (100.0, 100.0))
terrain.apply_fractal_simplex_noise(mesh, 0.02, 8.0, 42, 4, 0.5, 2.0)
terrain.fix_normals_and_uvs(mesh, (100.0, 100.0), 10.0)
print(mesh.bounding_box().size())
```

Work with named entities:

```python
from dataclasses import dataclass
from wfengine.entities import EntityManager

@dataclass
class Health:
    value: int

manager = EntityManager()
manager.on_create(Health, lambda entity: print("health added to", entity.name))
player = manager.create_named("player")
player.add_component(Health(100))
assert manager.get("player").get_component(Health).value == 100
```

Run a renewing callback timer for a few frames:

```python
import time
from wfengine.timer import Timer

timer = Timer()
timer.create_timer(0.05, lambda t: print("ding", t.renewals), True, 3)
for _ in range(30):
    time.sleep(0.01)
    timer.tick(True)
    while timer.is_fixed_update_ready():
        pass  # fixed-step simulation goes here
```

Track input across frames:

```python
from wfengine.input import KEY_A, EventType, Input, InputEvent

state = Input()
state.process_event(InputEvent(EventType.KEY_DOWN, key=KEY_A))
assert state.is_key_pressed(KEY_A)
state.refresh()
assert state.is_key_held(KEY_A)
```

## What it does not do

The package opens no windows and draws nothing. It does not talk to a GPU,
compile or load shaders, load images or textures, or provide a GUI. `Shader`
only stores locations that you supply. `Input` does not read devices itself,
so you convert events from your windowing library into `InputEvent`s. There
is no command-line program.

## Running the tests

```
pytest
```