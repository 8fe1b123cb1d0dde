# meshview

meshview is a small software 3D renderer. It loads a triangle mesh from a
Wavefront OBJ file, spins it around the Z and X axes, shades each face by
its angle to a fixed light, sorts the faces back to front (painter's
algorithm) and rasterises them into a low-resolution pixel window.

Everything is drawn in pure Python onto an in-memory sprite. pygame is only
used to open the window, show each finished frame and notice when the
window is closed. Pillow is used by `Sprite.load_image` to read image files.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
meshview [OBJ] [--width W] [--height H] [--pixel-size N]
```

- `OBJ` – the mesh file to load; defaults to `VideoShip.obj` in the current
  directory.
- `--width`, `--height` – the screen size in pixels (default 256×240).
- `--pixel-size` – each screen pixel is drawn as an N×N block (default 2).

The window title shows the frame rate, updated once a second. Close the
window to quit. If a size is not positive, or the mesh cannot be read, the
command prints a message to standard error and exits with status 1.

Only `v` and `f` lines of the OBJ file are read. Each `v` line gives three
coordinates; each `f` line gives 1-based vertex indices, of which the first
three are used (an index written as `a/b/c` is read as `a`). Other lines are
ignored.

## Using it as a library

- `meshview.mathutil` – `degrees_to_radians`, `clamp`, `random_double` and
  `random_int`.
- `meshview.vec3.Vec3` – a mutable 3-component vector with arithmetic,
  `dot`, `cross`, `length`, `normalize`, `translate`, `scale`, `near_zero`,
  `reflect`, `refract` and random sampling helpers; also the functions
  `dot_product`, `cross_product` and `unit_vector`.
- `meshview.pixel` – `Pixel`, an immutable RGBA colour (`from_int`,
  `to_int`, `scaled`), the `PixelMode` enum and named colours such as
  `WHITE`, `BLACK` and `BLANK`.
- `meshview.sprite` – `Sprite`, a 2D pixel buffer with `get_pixel`,
  `set_pixel`, `sample` and `fill`, in `SampleMode.NORMAL` or
  `SampleMode.PERIODIC`; raw sprite files through `to_bytes`/`from_bytes`
  and `save_spr`/`load_spr` (optionally from a resource pack), and
  `load_image` for PNG and other formats Pillow reads.
- `meshview.resourcepack.ResourcePack` – bundle several files into one pack
  file (`add`, `save`, `load`, `get`, `clear`) and read them back by name.
- `meshview.font.build_font_sprite` – the built-in 8×8 font sheet for
  characters 32 to 127.
- `meshview.canvas.Canvas` – drawing routines: `draw`, `draw_line`,
  `draw_circle`, `fill_circle`, `draw_rect`, `fill_rect`, `draw_triangle`,
  `fill_triangle`, `draw_sprite`, `draw_partial_sprite`, `draw_string` and
  `clear`, with normal, mask, alpha (`set_pixel_blend`) and custom
  (`set_custom_mode`) blending, and drawing into any sprite through
  `set_draw_target`.
- `meshview.triangle.Triangle` – a 3D triangle with `normal`, `depth`,
  `translate`, `scale`, and `draw`/`fill` onto a canvas.
- `meshview.scene` – `Mat4` (`projection`, `rotation_z`, `rotation_x`,
  `transform`), `Mesh` (`parse_obj`, `from_obj`) and `Renderer` (`advance`,
  `project`, `render`), which turns a mesh into shaded, sorted screen
  triangles.
- `meshview.app` – `run` to show a renderer in a window, `main` for the
  command, plus `ButtonState` and `mouse_to_pixel` helpers for tracking
  buttons and mapping window coordinates to screen pixels.

A frame can be rendered without a window:

```python
from meshview.canvas import Canvas
from meshview.scene import Mesh, Renderer

mesh = Mesh.parse_obj([
    "v 0 0 0",
    "v 0 1 0",
    "v 1 1 0",
    "f 1 2 3",
])
canvas = Canvas(256, 240)
renderer = Renderer(mesh, 256, 240)
renderer.render(canvas, 0.016)
```

## What it does not do

- The viewer reacts to no keyboard or mouse input other than closing the
  window; the camera and the spin cannot be steered. `ButtonState` and
  `mouse_to_pixel` are available to build that on, but `run` does not use
  them.
- Triangles are not clipped against the screen edges or the near plane, and
  there is no depth buffer: faces are only sorted by their mean depth.