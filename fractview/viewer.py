"""Interactive window showing a fractal, zoomed with the mouse wheel."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np

from fractview.fractal import HEIGHT, WIDTH, Fractal, FractalKind, UsageError, parse_args

__all__ = ["Viewer", "clamp_mouse", "main"]

TITLE = "Fractol"


def clamp_mouse(x: int, y: int, width: int, height: int) -> tuple[int, int]:
    """Clamp a mouse position to ``[0, width] x [0, height]``."""
    return min(max(x, 0), width), min(max(y, 0), height)


def _to_rgb(image: np.ndarray) -> np.ndarray:
    """Split RGBA words shaped ``(h, w)`` into an ``(h, w, 3)`` byte array."""
    channels = [(image >> shift) & 0xFF for shift in (24, 16, 8)]
    return np.stack(channels, axis=-1).astype(np.uint8)


class Viewer:
    """Holds a fractal, its rendered image and the window geometry."""

    def __init__(
        self,
        fractal: Fractal,
        image_size: tuple[int, int] = (WIDTH, HEIGHT),
        window_size: tuple[int, int] | None = None,
    ) -> None:
        self.fractal = fractal
        self.image_size = image_size
        self.window_size = window_size if window_size is not None else image_size
        width, height = image_size
        self.image = np.zeros((height, width), dtype=np.uint32)

    def handle_scroll(self, ydelta: float, mouse_x: int, mouse_y: int) -> None:
        """Zoom about the (clamped) mouse position; up zooms in."""
        width, height = self.window_size
        x, y = clamp_mouse(mouse_x, mouse_y, width, height)
        self.fractal.zoom_at(x, y, width, height, ydelta)

    def frame(self) -> bool:
        """Redraw the image if the view changed; return whether it did."""
        changed = self.fractal.renderer_changed
        if changed:
            self.image = self.fractal.render(*self.image_size)
        self.fractal.renderer_changed = False
        return changed

    def run(self) -> None:
        """Open the window and process events until it is closed or Esc is hit."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            surface = None
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                            running = False
                        self.fractal.renderer_changed = True
                    elif event.type == pygame.MOUSEWHEEL:
                        mouse_x, mouse_y = pygame.mouse.get_pos()
                        self.handle_scroll(event.y, mouse_x, mouse_y)
                    elif event.type == pygame.VIDEORESIZE:
                        self.window_size = (event.w, event.h)
                if not running:
                    break
                if self.frame() or surface is None:
                    rgb = _to_rgb(self.image).transpose(1, 0, 2)
                    surface = pygame.surfarray.make_surface(np.ascontiguousarray(rgb))
                screen.fill((0, 0, 0))
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the viewer for ``mandelbrot`` or ``julia <r> <i>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        fractal = parse_args(args)
    except UsageError as err:
        print(err)
        return 1
    if fractal.kind is FractalKind.JULIA:
        print(f"x_julia: {fractal.julia.real:f}, y_julia: {fractal.julia.imag:f}")
    Viewer(fractal).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())