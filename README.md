# fractview

An interactive viewer for the Mandelbrot set and Julia sets. It opens a
1250 × 1250 window, colours every pixel by how quickly its orbit escapes
(up to 200 iterations), and zooms in or out around the mouse pointer as you
scroll.

## Installing

```
pip install .
```

This pulls in `numpy` and `pygame`.

## Running

Draw the Mandelbrot set:

```
fractview mandelbrot
```

Draw a Julia set. Give the real and imaginary parts of the constant `c`:

```
fractview julia -0.8 0.156
fractview julia 0.285 0.01
```

For a Julia set, the chosen constant is printed as
`x_julia: -0.800000, y_julia: 0.156000` before the window opens. Any other
arguments print a usage message and the command exits with status 1.

### Controls

- Scroll up: zoom in by 10 % around the mouse pointer.
- Scroll down: zoom out by 10 % around the mouse pointer.
- Escape or closing the window: quit.

The image is only recomputed after a zoom or a key press, so an idle window
costs little. The window can be resized; the mouse position is then mapped
against the new window size, while the image stays 1250 × 1250.

## Using it from Python

The fractal model lives in `fractview.fractal` and needs no window.
`parse_args` takes the arguments without the program name:

```python
from fractview.fractal import parse_args

fractal = parse_args(["julia", "-0.8", "0.156"])
counts = fractal.iteration_grid(200, 200)   # escape counts, shape (200, 200)
pixels = fractal.render(200, 200)           # packed RGBA colours
fractal.zoom_at(100, 100, 200, 200, ydelta=1.0)  # zoom in at the centre
```

`parse_args` raises `UsageError` for arguments it does not accept.
`build_palette()` returns the 200-entry colour table, `escape_time(z, c)`
counts iterations for a single point, `Fractal.iterations(x0, y0)` does the
same for a plane point of the current fractal, and each `Axis` tracks the
visible range of one coordinate.

`fractview.viewer.Viewer` wraps a `Fractal` with its rendered image:
`handle_scroll(ydelta, mouse_x, mouse_y)` zooms, `frame()` re-renders when
the view changed, and `run()` opens the pygame window.

The package also carries small helpers for C-style text, memory and number
handling (`fractview.ctext`, `fractview.cstring`, `fractview.memory`,
`fractview.numeric`, `fractview.output`) and a singly linked list
(`fractview.linkedlist`).

## What it does not do

There is no way to save the image to a file, to change the iteration limit
or colours from the command line, or to pan other than by zooming around
the pointer.

## Running the tests

```
pip install .[test]
pytest
```