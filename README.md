# fractol

An interactive explorer for the Mandelbrot set and Julia sets. It opens an
800×800 window, renders the chosen fractal in four horizontal bands on a pool
of four threads, and lets you zoom and pan. The iteration limit grows with the
zoom level, from 100 up to 1000.

## Installation

```
pip install .
```

## Usage

```
fractol mandelbrot
fractol julia <real> <imag>
```

For example:

```
fractol julia -0.8 0.156
```

The Mandelbrot view starts centred on -0.5 + 0i; the Julia view starts centred
on the origin. Wrong or missing arguments print a usage message and exit with
status 1. If the window cannot be opened, an error message is printed and the
exit status is 1.

### Controls

| Input                          | Action                          |
|--------------------------------|---------------------------------|
| `Esc` / closing the window     | quit                            |
| `=`, keypad `+`, scroll up     | zoom in (×1.2)                  |
| `-`, keypad `-`, scroll down   | zoom out (÷1.2)                 |
| arrow keys                     | move the view by 20 pixels      |

## Library use

The pieces behind the program can be used on their own:

```python
from fractol.config import parse_args
from fractol.render import Image, render_fractal
from fractol.color import colorpicker

config = parse_args(["mandelbrot"])
image = Image()
render_fractal(config, image)
print(hex(image.get_pixel(400, 400)))
print(hex(colorpicker(10, 100)))
```

- `fractol.config`: `Config` (the view state, with `pixel_to_complex`),
  `FractalType`, `parse_args` (the arguments after the program name; raises
  `UsageError` when they are wrong), `parse_fractal_type` and
  `calculate_max_iter`.
- `fractol.sets`: the escape-time functions `mandelbrot_escape` and
  `julia_escape`, and `escape_rows`, which computes escape counts for a band of
  image rows with numpy.
- `fractol.color`: `colorpicker` for one escape count and `colorize` for an
  array of them.
- `fractol.render`: `Image`, a grid of `0xRRGGBB` pixels with `put_pixel` and
  `get_pixel`; `row_bands`; and `render_fractal`, which draws into an 800×800
  image.
- `fractol.events`: `key_press` and `mouse_press` apply input to a `Config`;
  the `Key` enum lists the key codes they understand.
- `fractol.printf`: `printf` and `sprintf` handling the
  `%c %s %d %i %u %x %X %p %%` conversions, plus `format_hex` and
  `format_pointer`.
- `fractol.app`: `main`, `usage_text` and `exit_message`.

The `fractol.libft` sub-package holds character tests (`chars`), integer
conversion (`convert`), byte-buffer helpers (`memory`), a singly linked list
(`linked`), string utilities (`strings`) and writers for file descriptors
(`output`).

## What it does not do

The viewer only shows the fractal on screen; there is no way to save a
rendered image to a file, and the window size is fixed at 800×800.

## Running the tests

```
pip install .[test]
pytest
```