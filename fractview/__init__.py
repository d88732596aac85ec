"""Interactive Mandelbrot and Julia set viewer, with C-style text, memory and list helpers."""

__version__ = "0.1.0"