# orrery

A small solar-system simulation. The Sun and eight planets pull on one
another under gravity with first-order relativistic corrections. A "gravity
well" grid sinks under each body in proportion to its mass.

The package holds the simulation and the parts around it: sphere and grid
geometry, model transforms, a fly-through camera and the input state that
drives the camera. It does no drawing of its own. Meshes go to whatever
renderer you pass in.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Simulation (`orrery.simulation`)

```python
from orrery.simulation import System

system = System()               # Sun, Mercury ... Neptune on circular orbits
system.simulate(0.016)          # physics only
system.simulate(0.016, renderer)
```

`System.simulate(dt, renderer=None)` does these steps in order:

1. It scales `dt` by `system.time_multiplier`.
2. It works out the pairwise forces and advances every body.
3. It bends the grid.

When you pass a renderer, planets go to `renderer.draw_lit(mesh, transform, color)`. The star and the grid go to `renderer.draw_unlit(mesh, transform, color)`.

`System.reset()` puts every body back at its starting position and flattens the grid. The system also exposes `bodies`, `grid_vertices` and `grid_mesh`. Two settings are checked when you assign them, and a value outside the range raises `ValueError`:

| Setting | Allowed range | Default |
|---|---|---|
| `time_multiplier` | 0.01 to 10 | 1.0 |
| `vis_scale` | 0.0001 to 1 | 0.5 |

A single body is a `Celestial` with a `BodyType` of `PLANET` or `STAR`, and it carries its own sphere `mesh`.

- `Celestial.calculate_forces(other)` adds the mutual pull of two bodies to their accelerations. It raises `ValueError` if the two bodies share a position.
- `Celestial.update(dt)` integrates momentum, the Lorentz factor `gamma`, velocity, position and `proper_time`.
- `Celestial.set_mass(mass)` changes both `mass` and `rest_mass`. The mass must lie between 0 and 1,000,000.

`build_grid(columns, rows)` returns the vertices and line indices of a flat grid spanning ±5000 in x and z. It needs at least two columns and two rows.

The simulation uses screen-friendly units rather than SI: `orrery.geometry.G = 3` and `orrery.geometry.C = 1000`.

## Geometry and transforms

```python
from orrery.geometry import generate_sphere, CUBE_VERTICES, CUBE_INDICES
from orrery.transform import Transform

vertices, indices = generate_sphere(10.0, 20, 20)
model = Transform(pos=[1.0, 2.0, 3.0]).to_mat4()   # 4x4 numpy array
```

- `generate_sphere(radius, stacks, slices)` returns a flat float32 array with six floats per vertex (position and normal), and uint32 triangle indices. It needs a radius other than zero and at least one stack and one slice.
- `CUBE_VERTICES` and `CUBE_INDICES` describe a unit cube in the same layout. `SUN_POSITION`, `SCR_WIDTH` and `SCR_HEIGHT` are the scene defaults.
- `Transform` holds `pos`, a rotation quaternion `rot` as (w, x, y, z), and `scale`. `to_mat4()` translates, then rotates, then scales.

`orrery.mesh.Mesh(vertices, indices, stride, dynamic, mode)` keeps the vertex and index data for one drawable object, with a `DrawMode` of `TRIANGLES` or `LINES`.

- It checks that the stride is at least 3 and that the vertex data divides evenly by the stride.
- It checks that every index refers to an existing vertex.
- `update_vertices(data)` overwrites vertex data from the start of the buffer.

## Camera and controls

```python
from orrery.camera import Camera
from orrery.controls import Controls

camera = Camera()
controls = Controls(camera)
dt = controls.time_check(now)            # seconds since the previous call
controls.process_keys({"w", "d"})        # held keys
controls.process_mouse(x, y, right_pressed=True)
controls.process_scroll(0.0, 1.0)
view = camera.view_matrix()
```

`Controls.process_keys` understands the following held keys. It ignores any other key.

| Key | Effect |
|---|---|
| `"w"` | move forward |
| `"s"` | move back |
| `"a"` | strafe left |
| `"d"` | strafe right |
| `"escape"` | sets `should_close` |

The camera only turns while the right mouse button is held. Pitch stays within ±89 degrees. Scrolling changes `camera.zoom`, which is kept between 1 and 45. `Controls.process_resize(width, height)` records the window size. `aspect_ratio()` returns width divided by height and raises `ValueError` when the height is zero.

You can also call `Camera.process_keyboard(CamMovement.FORWARD, dt)`, `Camera.process_mouse(x_offset, y_offset, constrain_pitch)` and `Camera.process_scroll(y_offset)` directly. `orrery.camera.look_at(eye, center, up)` builds a right-handed view matrix.

## What this package does not do

There is no window, no drawing and no command to run. The package does not:

- open a window;
- read the mouse or keyboard;
- compile shaders or draw anything;
- offer an on-screen panel for the sliders.

To see the system you supply the frame loop and a renderer yourself. Feed `Controls` your input events, call `System.simulate` once per frame, and draw what it hands to your renderer.