# wirecanvas

A small toolkit with no dependencies. It draws anti-aliased lines onto a
grayscale canvas and projects 3D wireframes onto that canvas.

## Modules

### `wirecanvas.canvas`

`Canvas(width, height)` is a grid of brightness values from 0.0 to 1.0. The
values are held in `pixels[y][x]` and every value starts at 0.0. A negative
size raises `ValueError`.

- `set_pixel(x, y, intensity)` adds `intensity` at a fractional position. The
  amount is spread bilinearly over the four surrounding pixels. Each pixel is
  clamped to the range 0.0 to 1.0, and pixels off the canvas are ignored.
- `draw_line(x0, y0, x1, y1, thickness=1.0)` steps along the line's major
  axis one pixel at a time. At each step it stamps a round brush of the given
  thickness. A line of zero length draws nothing.
- `to_pgm()` returns the canvas as plain-text PGM (`P2`, maxval 255).
  Brightness is inverted, so drawn pixels come out dark on a white
  background.
- `save_pgm(path)` writes that text to a file.

### `wirecanvas.math3d`

`Vec3(x, y, z, r, theta, phi)` holds Cartesian coordinates and cached
spherical coordinates.

- `Vec3.from_spherical(r, theta, phi)` builds a vector from a radius, a polar
  angle and an azimuth.
- `update_spherical()` recomputes `r`, `theta` and `phi` from `x`, `y` and
  `z`. The zero vector gets angles of 0.
- `normalize_fast()` returns a copy of roughly unit length. It uses the
  single-precision fast inverse square root, refined by one Newton step, so
  the length is close to 1 but not exact.
- `slerp(other, t)` interpolates spherically between the directions of two
  vectors. The spherical fields of the result are left at zero.

`Mat4(m)` is an immutable 4x4 matrix held as 16 floats in column-major order.
Any other number of values raises `ValueError`.

- `Mat4.identity()`
- `Mat4.translate(tx, ty, tz)`
- `Mat4.scale(sx, sy, sz)`
- `Mat4.rotate_xyz(rx, ry, rz)` rotates by the given angles in radians.
- `Mat4.frustum_asymmetric(left, right, bottom, top, near, far)` builds a
  perspective projection. It raises `ValueError` if two opposing planes
  coincide.
- `transform(v)` applies the matrix to a point and divides by `w`. When `w`
  is 0 it divides by 1 instead. The spherical fields of the result are filled
  in.

### `wirecanvas.renderer`

- `project_vertex(v, mvp, width, height)` maps a vertex through `mvp` to
  screen coordinates, with y pointing down. The depth is kept in `z`. The
  perspective divide is skipped when `w` is 0.
- `clip_to_circular_viewport(canvas, x, y)` returns `True` when the point
  lies inside the largest circle centred on the canvas.
- `render_wireframe(canvas, vertices, edges, mvp)` projects the vertices and
  then draws each edge `(a, b)` as a line of thickness 1. An edge is skipped
  if it refers to a missing vertex. It is also skipped if both of its
  endpoints fall outside the circular viewport.

### `wirecanvas.demo`

- `draw_clock(canvas, radius=80.0, thickness=1.0)` draws 24 radial lines from
  the canvas centre, one every 15 degrees.
- `main(argv=None)` runs the command below.

## Installation

```
pip install .
```

## Drawing a clock face

This command draws the clock face on a 200x200 canvas. By default it writes
the result to `clock_lines.pgm`:

```
wirecanvas-clock
wirecanvas-clock --output clock.pgm
```

If the file cannot be written, the command prints an error to stderr and
exits with status 1.

## Rendering a wireframe

```python
from wirecanvas.canvas import Canvas
from wirecanvas.math3d import Mat4, Vec3
from wirecanvas.renderer import render_wireframe

canvas = Canvas(200, 200)
vertices = [Vec3(-0.5, -0.5, -3.0), Vec3(0.5, -0.5, -3.0),
            Vec3(0.5, 0.5, -3.0), Vec3(-0.5, 0.5, -3.0)]
edges = [(0, 1), (1, 2), (2, 3), (3, 0)]
mvp = Mat4.frustum_asymmetric(-1, 1, -1, 1, 1, 10)

render_wireframe(canvas, vertices, edges, mvp)
canvas.save_pgm("square.pgm")
```

## What it does not do

- `Mat4` has no matrix multiplication. To chain transforms, apply them to a
  point one after another with `transform`.
- There is no window or on-screen display, and there is no hidden-line
  removal. Output is plain-text PGM only.

## Running the tests

```
pip install .[test]
pytest
```