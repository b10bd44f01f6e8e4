# slingsim

`slingsim` is a compact two-dimensional rigid-body simulation with the
pieces for a slingshot game built on top of it. Birds, platforms, walls and
pigs are polygons in a `Scene`. Each tick the scene runs its force creators,
which cover gravity, friction, springs, drag and collisions, and then moves
the bodies.

## Modules

- `slingsim.vector` provides `Vector`, a frozen dataclass with `x` and `y`.
  It supports `+`, `-`, unary `-`, multiplication by a number, and `abs()`
  for the length. It also has `dot`, `cross` (the z-component), `rotate`
  (counterclockwise, in radians) and `distance`. `VEC_ZERO` is the zero
  vector.
- `slingsim.polygon` provides `polygon_area`, `polygon_centroid`,
  `polygon_translate` and `polygon_rotate`. Each takes a list of vertices.
  `polygon_area` returns the signed area, which is positive for
  counterclockwise order. `polygon_centroid` raises `ValueError` for a
  polygon of zero area. `polygon_translate` and `polygon_rotate` change the
  list in place.
- `slingsim.color` provides `Color`, whose components must lie in
  `[0, 1]`; any other value raises `ValueError`. It also provides
  `random_color(rng=None)`.
- `slingsim.collision` provides `find_collision(shape1, shape2)`, a
  separating-axis test for convex polygons. It returns a `CollisionInfo`,
  which is truthy when the shapes collide. When they do, its `axis` is a
  unit vector pointing from the first shape towards the second.
- `slingsim.body` provides `Body(shape, mass, color, info=None)`, a polygon
  of uniform density.
  - It exposes `shape` (a copy of the polygon), `centroid`, `velocity`,
    `mass`, `rotation` (an absolute angle), `color`, `info`, `image` and
    `removed`.
  - `add_force` and `add_impulse` accumulate effects until the next
    `tick(dt)`. During a tick the body moves at the average of its old and
    new velocity.
  - `remove()` marks the body for removal.
  - A mass of `math.inf` makes the body immovable. A mass that is not
    positive raises `ValueError`.
- `slingsim.scene` provides `Scene`. It supports `len()`, indexing and
  iteration over its bodies.
  - `add_force_creator(forcer, bodies=None, id=0)` registers a
    zero-argument callable that runs on every tick.
  - `remove_force_creator(id)` drops every creator registered with that id.
  - `remove_body(index)` marks a body for removal.
  - `tick(dt)` works in three steps. It first runs every force creator. It
    then drops removed bodies, together with every force creator that
    depends on them. Finally it advances the remaining bodies, unless `dt`
    is 0.
- `slingsim.forces` provides the force creators:
  - `create_newtonian_gravity`, which has no effect when the centroids are
    within `MIN_DISTANCE` of each other.
  - `create_downward_gravity`, `create_horizontal_friction`,
    `create_spring` and `create_drag`.
  - `create_collision(scene, body1, body2, handler)`, which calls
    `handler(body1, body2, axis)` once each time the bodies start touching.
  - `create_destructive_collision`, which removes both bodies.
  - `create_one_sided_destructive_collision`, which removes only the first
    body.
  - `create_physics_collision(scene, elasticity, body1, body2)`, which
    applies impulses and treats an infinite-mass body as a wall.
- `slingsim.builders` provides:
  - The `Kind` enum (`PLATFORM`, `PIG`, `BIRD`, `WALL`), stored as each
    body's `info`.
  - `WorldConfig`, which holds dimensions, masses, colors and sprite names.
  - The shape helpers `make_circle`, `make_rectangle` (which takes
    half-extents), `make_equilateral_triangle`, `make_slingshot` and
    `make_rubberband`.
  - The world builders `make_bird`, `make_speedy`, `make_pigs`,
    `make_platforms` and `make_collisions`. Platforms get infinite mass and
    walls get a mass of `WALL_MASS`. Pigs get a randomly chosen sprite path.
  - The helpers `get_body`, `get_index` and `make_path`.
- `slingsim.levels` provides `LevelStyle`, which sets the slingshot position
  and the bird and wall colors. It also provides six layouts, `level_one`
  to `level_six`, and `load_level(scene, number, config, style, rng=None)`.
  `load_level` raises `ValueError` for any number outside 1 to 6.
- `slingsim.render` provides drawing with pygame:
  - `Viewport` maps scene coordinates (y up) to window pixels (y down).
  - `TickClock` measures the time between calls.
  - `Key` and `KeyEventType` describe key events, and `key_for` maps pygame
    key codes to them.
  - `Renderer(minimum, maximum, surface=None, ...)` opens a resizable
    window, or draws onto a given surface. Its methods are `clear`,
    `draw_polygon`, `render_scene`, `show`, `load_image`, `render_image`,
    `build_text`, `render_text`, `on_key` and `is_done`.
  - `build_text` loads its font from `assets/angrybirds-regular.ttf` by
    default. Pass `font_path=None` to use pygame's default font.

## Example

```python
import math

from slingsim.body import Body
from slingsim.builders import make_rectangle
from slingsim.color import Color
from slingsim.forces import create_downward_gravity
from slingsim.polygon import polygon_area, polygon_rotate
from slingsim.scene import Scene
from slingsim.vector import Vector

square = make_rectangle(1, 1)          # corners at (±1, ±1)
print(polygon_area(square))            # 4.0
polygon_rotate(square, math.pi / 4, Vector(0, 0))

scene = Scene()
box = Body(make_rectangle(1, 1), 2.0, Color(0.5, 0.5, 0.5))
scene.add_body(box)
create_downward_gravity(scene, 9.8, box)
for _ in range(60):
    scene.tick(1 / 60)
print(box.centroid, box.velocity)
```

## What the package does not do

The package has no command and no game loop. It supplies the simulation,
the level layouts and a renderer. It does not include the playable game
that ties them together: launching birds from the slingshot, bird powers,
scoring, or switching levels with the keyboard. Sprite images and the font
file are not included either.

## Running the tests

Install with the `test` extra and run `pytest`.