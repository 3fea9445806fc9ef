# photon

A small software 3D renderer. It builds a cube from two corner points and
projects its eight corners through a perspective matrix. It then splits the
cube's faces into twelve triangles. It draws the triangle edges pixel by pixel
into an RGBA framebuffer with Bresenham's line algorithm. The framebuffer is
shown in a resizable pygame window.

## Installing

```
pip install .
```

To also install what the test suite needs:

```
pip install ".[test]"
```

## Running

```
photon
```

This opens a 500×500 window titled "Photon". When you resize the window, the
frame is redrawn at the new size. A width or height below 200 is raised to 200.
Each frame lasts at least 20 ms, which holds the frame rate to about 50 frames
per second. Close the window to quit.

The command accepts no options other than `--help`. If the window cannot be
opened, it prints `Failed` and exits with status 1.

## Using it as a library

```python
from photon.vertex import Vertex3
from photon.triangle import cube_vertices, triangles_from_cube
from photon.matrix import perspective_matrix
from photon.primitives import Framebuffer, perspective_transform

width, height = 320, 240
matrix = perspective_matrix(width, height, 90.0, 0.1, 1000.0)

cube = cube_vertices(Vertex3(-1.0, -0.5, 2.0), Vertex3(0.0, 0.5, 3.0))
projected = [perspective_transform(v, matrix, width, height) for v in cube]

frame = Framebuffer(width, height)
for tri in triangles_from_cube(projected):
    frame.draw_triangle(tri, (255, 255, 255, 255))

print(hex(frame[160, 120]))
```

### Modules

- `photon.vertex`: the frozen dataclasses `Vertex2(x, y)` and
  `Vertex3(x, y, z)`. In `Vertex3`, `y` is the vertical axis.
- `photon.matrix`:
  - `Matrix4x4` holds 16 floats in row-major order and supports indexing.
  - `perspective_matrix(width, height, fov=90.0, near=0.1, far=1000.0)` builds
    the projection matrix. It raises `ValueError` if a dimension is not
    positive or if `near == far`.
  - `Camera` is a dataclass holding a position, pitch, yaw, fov and the near
    and far planes.
- `photon.triangle`:
  - `Triangle(p1, p2, p3)` is a screen-space triangle, and iterating over it
    yields its three points.
  - `cube_vertices(lower, upper)` returns the eight corners of a box.
  - `triangles_from_cube(cube)` returns the twelve face triangles, using only x
    and y. It raises `ValueError` unless it is given exactly 8 corners.
- `photon.primitives`:
  - `pack_rgba(r, g, b, a)` packs four channels into one `0xRRGGBBAA` integer.
    It raises `ValueError` if a channel is outside 0–255.
  - `Framebuffer(width, height)` is a row-major grid of packed pixels.
    - `frame[x, y]` reads a pixel.
    - `set_pixel(x, y, color)` writes a pixel. Both raise `IndexError` outside
      the buffer.
    - `draw_line(start, end, color)` and `draw_triangle(triangle, color)` take
      a colour as an `(r, g, b, a)` tuple. They silently skip pixels that fall
      outside the buffer or on row 0 or column 0.
  - `perspective_transform(vertex, matrix, width, height)` projects a vertex to
    screen coordinates. The origin is at the top left and the projected Y axis
    points up. The returned `z` is the projected depth.
- `photon.renderer`:
  - `render_scene(width, height)` draws the default white wireframe cube into
    a new framebuffer. The cube spans corners `(-1, -0.5, 2)` to `(0, 0.5, 3)`.
  - `present(framebuffer, surface)` clears a pygame surface to black and
    copies the framebuffer onto it, stretching it if the sizes differ.
- `photon.window`:
  - `frame_delay(elapsed_ms)` gives the wait needed to make up a 20 ms frame.
  - `main()` runs the window loop.

## What it does not do

The scene is fixed: a single cube drawn as white outlines. There is no camera
movement and no input handling apart from closing and resizing the window.
`Camera` only describes a viewer and is not used when rendering. Triangles are
not filled, and there is no depth testing or hidden-line removal. Nothing is
loaded from or saved to files.

## Running the tests

```
pytest
```