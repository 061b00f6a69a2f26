# luminoveau

Small, dependency-free building blocks for 2D games: vector maths, rectangles,
colours, easing curves, named tweens, a point quadtree and a camera.

## Modules

- `luminoveau.vectors`
  - `Vec2(x, y)`: an immutable 2D vector. Supports `+` (vector or number),
    `-`, `*` and `/` (component-wise with another vector, or by a number, from
    either side), unary `-` and `+`, and `<` / `>` ordering by `y` then `x`.
    `str()` gives `"(x,y)"` with two decimals.
  - Methods: `mag`, `mag2`, `norm` (raises `ZeroDivisionError` for a zero
    vector), `perp`, `floor`, `ceil`, `clamp(rect)`, `distance_to`,
    `reflect_on(normal)`, `angle`, `rotated(radians)`, `max`, `min`,
    `cart` (treats `(x, y)` as radius and angle), `polar`, `dot`, `cross`.
  - Constants: `PI`, `EPSILON`, `DEG2RAD`, `RAD2DEG`.
- `luminoveau.rectangles`
  - `Rect(x, y, width, height)` with `pos` and `size` properties,
    `contains(point)` (edges count as inside) and `Rect.from_vectors(pos, size)`.
- `luminoveau.colors`
  - `Color(r, g, b, a)` with 0-255 channels; `Color.from_code(0xRRGGBBAA)`,
    `Color.from_floats(r, g, b, a)` (0.0-1.0, truncated), the properties
    `r_float`, `g_float`, `b_float`, `a_float` and `as_floats()`.
  - Named colours: `RED`, `BLACK`, `WHITE`, `BLUE`, `GREEN`, `YELLOW`,
    `PURPLE`, `PINK`, `DARKGREEN`, `DARKRED`, `GRAY`, `DARKGRAY`, `LIME`, `BROWN`.
- `luminoveau.easings`
  - Easing curves taking `t` (time), `b` (start), `c` (change), `d` (duration):
    `ease_linear_none/in/out/in_out`, and `_in`, `_out`, `_in_out` variants of
    `sine`, `circ`, `cubic`, `quad`, `expo`, `back`, `bounce` and `elastic`
    (for example `ease_sine_in`, `ease_bounce_out`, `ease_elastic_in_out`).
- `luminoveau.lerp`
  - `LerpAnimator`: interpolates from `start_value` by `change` over
    `duration` using a `callback` easing function (linear by default);
    `value()` clamps the result to the start/end range, `is_finished()`
    reports whether `time >= duration`.
  - `Lerp`: a registry of animators by name. `get_lerp(name, start, change,
    duration)` returns the existing animator or creates one, `find(name)`
    returns it or `None`, `reset_time(name)` sets its time back to zero and
    `update(frame_time)` advances every started animator, marking finished
    ones with `can_delete`.
- `luminoveau.quadtree`
  - `QtPoint(x, y, entity)`, `AABB(x, y, width, height)` and
    `AABBCircle(x, y, r)` as query ranges.
  - `QuadTree(boundary, capacity=3)`: `insert(point)` returns `False` for a
    point outside the boundary, `query(area)` returns the entities of the
    points inside an `AABB` or `AABBCircle`, `subdivide()` and `reset()`.
- `luminoveau.camera`
  - `Camera(target, scale)`: `to_screen_space(world, screen_size)` and
    `to_world_space(screen, screen_size)` convert positions for a screen of the
    given size, centred on the target. `lock()` / `unlock()`,
    `activate()` / `deactivate()`, and the read-only `locked`, `moved` and
    `active` properties. Setting `target` while locked raises
    `CameraLockedError`.
- `luminoveau.helpers`
  - `clamp`, `map_values`, `difficulty_modifier`, `lines_from_rectangle`
    (top, right, bottom, left edges), `line_intersects_rectangle` (true when
    the segment crosses or touches an edge; a segment wholly inside gives
    false), `random_chance(percent)`, `random_value(min, max)` (inclusive),
    `text_format(fmt, *args)` (printf-style, cut to 1023 characters) and
    `total_system_memory()` (bytes, or 0 where the system does not report it).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from luminoveau.vectors import Vec2
from luminoveau.rectangles import Rect
from luminoveau.easings import ease_quad_out
from luminoveau.quadtree import QuadTree, QtPoint, AABBCircle
from luminoveau.camera import Camera

v = Vec2(3.0, 4.0)
print(v.mag())                           # 5.0
print(v.clamp(Rect(0, 0, 2, 2)))         # (2.00,2.00)

print(ease_quad_out(0.5, 0.0, 100.0, 1.0))   # 75.0

tree = QuadTree(Rect(0, 0, 100, 100))
tree.insert(QtPoint(10, 10, entity="player"))
print(tree.query(AABBCircle(12, 12, 5)))     # ['player']

camera = Camera()
camera.target = Vec2(10, 10)
print(camera.to_screen_space(Vec2(10, 10), Vec2(800, 600)))  # (400.00,300.00)
```

## What it does not do

This package holds no window, renderer, input handling or asset loading. Nothing
is drawn: the quadtree and camera work only on numbers, the camera is told the
screen size by the caller, and `Lerp.update` is given the frame time rather than
reading a clock.