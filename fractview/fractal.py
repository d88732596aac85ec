"""Mandelbrot and Julia sets: escape-time iteration, colouring and zooming."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from fractview.cstring import strncmp
from fractview.numeric import atod, scale

__all__ = [
    "WIDTH",
    "HEIGHT",
    "ITER",
    "FractalKind",
    "Axis",
    "UsageError",
    "Fractal",
    "build_palette",
    "escape_time",
    "parse_args",
]

WIDTH = 1250
HEIGHT = 1250
ITER = 200

ZOOM_IN = 0.9
ZOOM_OUT = 1.1

SHORT_USAGE = "enter mandelbrot or julia"
FULL_USAGE = "enter mandelbrot or julia [r] [i]"


class FractalKind(enum.Enum):
    """The sets that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


class UsageError(ValueError):
    """The command-line arguments do not name a drawable fractal."""


@dataclass
class Axis:
    """A closed interval of the complex plane along one axis."""

    min: float = -2.0
    max: float = 2.0

    def zoom(self, center: float, factor: float) -> None:
        """Scale the interval by ``factor`` about ``center``."""
        self.min = center - (center - self.min) * factor
        self.max = center + (self.max - center) * factor

    @property
    def span(self) -> float:
        return self.max - self.min


def build_palette() -> tuple[int, ...]:
    """Return the ``ITER`` RGBA colours used for escape counts.

    Entry 0 is used for points inside the set; the others follow a
    polynomial blend of red, green and blue.
    """
    colours = [0xEE]
    half = ITER // 2
    for i in range(1, ITER):
        t = i / half
        r = int(9 * (1 - t) * t * t * t * 255)
        g = int(15 * (1 - t) * (1 - t) * t * t * 255)
        b = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
        colours.append(((r << 24) | (g << 16) | (b << 8) | 255) & 0xFFFFFFFF)
    return tuple(colours)


def escape_time(z: complex, c: complex) -> int:
    """Count iterations of ``z -> z*z + c`` before ``|z|`` exceeds 2.

    Returns ``ITER`` when the orbit stays bounded for all iterations.
    """
    z = complex(z)
    c = complex(c)
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    for count in range(ITER):
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        if zr * zr + zi * zi > 4:
            return count
    return ITER


def _axis_samples(count: int, axis: Axis) -> np.ndarray:
    pixels = np.arange(count, dtype=np.float64)
    return (pixels - 0.0) * (axis.max - axis.min) / (count - 0.0) + axis.min


@dataclass
class Fractal:
    """A fractal to draw together with its current view of the plane."""

    kind: FractalKind
    julia: complex = 0j
    x_axis: Axis = field(default_factory=Axis)
    y_axis: Axis = field(default_factory=Axis)
    zoom_factor: float = 1.0
    zoom_center: tuple[float, float] = (0.0, 0.0)
    palette: tuple[int, ...] = field(default_factory=build_palette)
    renderer_changed: bool = True

    def iterations(self, x0: float, y0: float) -> int:
        """Escape count for the plane point ``(x0, y0)``."""
        point = complex(x0, y0)
        if self.kind is FractalKind.MANDELBROT:
            return escape_time(0j, point)
        return escape_time(point, self.julia)

    def iteration_grid(self, width: int, height: int) -> np.ndarray:
        """Escape counts for every pixel of a ``width`` by ``height`` image.

        The result has shape ``(height, width)``; pixel ``(x, y)`` is at
        ``[y, x]`` and maps onto the current axes.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        re, im = np.meshgrid(
            _axis_samples(width, self.x_axis), _axis_samples(height, self.y_axis)
        )
        if self.kind is FractalKind.MANDELBROT:
            zr, zi = np.zeros_like(re), np.zeros_like(im)
            cr, ci = re, im
        else:
            zr, zi = re.copy(), im.copy()
            cr = np.full_like(re, self.julia.real)
            ci = np.full_like(im, self.julia.imag)
        counts = np.zeros(re.shape, dtype=np.int64)
        active = np.ones(re.shape, dtype=bool)
        with np.errstate(over="ignore", invalid="ignore"):
            for _ in range(ITER):
                if not active.any():
                    break
                nr = zr * zr - zi * zi + cr
                ni = 2.0 * zr * zi + ci
                escaped = active & (nr * nr + ni * ni > 4.0)
                still = active & ~escaped
                counts[still] += 1
                zr = np.where(active, nr, zr)
                zi = np.where(active, ni, zi)
                active = still
        return counts

    def render(self, width: int, height: int) -> np.ndarray:
        """Colour every pixel; returns RGBA values shaped ``(height, width)``."""
        counts = self.iteration_grid(width, height)
        palette = np.asarray(self.palette, dtype=np.uint32)
        return palette[counts % ITER]

    def zoom_at(
        self, mouse_x: float, mouse_y: float, width: float, height: float, ydelta: float
    ) -> None:
        """Zoom about the plane point under the mouse in a window of that size.

        A positive ``ydelta`` zooms in, anything else zooms out.
        """
        self.zoom_factor = ZOOM_IN if ydelta > 0 else ZOOM_OUT
        cx = self.x_axis.min + self.x_axis.span * (mouse_x / width)
        cy = self.y_axis.min + self.y_axis.span * (mouse_y / height)
        self.zoom_center = (cx, cy)
        self.x_axis.zoom(cx, self.zoom_factor)
        self.y_axis.zoom(cy, self.zoom_factor)
        self.renderer_changed = True


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal from command-line arguments (program name excluded).

    ``mandelbrot`` takes no further arguments; ``julia`` takes the real and
    imaginary parts of its constant.
    """
    if not argv:
        raise UsageError(SHORT_USAGE)
    name = argv[0]
    if strncmp(name, "mandelbrot", 10) == 0 and len(argv) == 1:
        return Fractal(FractalKind.MANDELBROT)
    if strncmp(name, "julia", 5) == 0 and len(argv) == 3:
        return Fractal(FractalKind.JULIA, julia=complex(atod(argv[1]), atod(argv[2])))
    raise UsageError(FULL_USAGE)