import numpy as np
import pytest

from fractview.fractal import Fractal, FractalKind
from fractview.viewer import Viewer, clamp_mouse, main


def test_clamp_inside_unchanged():
    assert clamp_mouse(30, 40, 100, 100) == (30, 40)


def test_clamp_negative_to_zero():
    assert clamp_mouse(-5, 10, 100, 100) == (0, 10)


def test_clamp_past_edge_to_size():
    assert clamp_mouse(150, 200, 100, 120) == (100, 120)


def test_frame_renders_once_until_changed():
    fractal = Fractal(FractalKind.MANDELBROT)
    viewer = Viewer(fractal, image_size=(8, 6))
    assert viewer.frame() is True
    assert np.array_equal(viewer.image, fractal.render(8, 6))
    assert viewer.frame() is False
    assert fractal.renderer_changed is False


def test_scroll_triggers_redraw_with_new_view():
    fractal = Fractal(FractalKind.MANDELBROT)
    viewer = Viewer(fractal, image_size=(8, 6))
    viewer.frame()
    before = viewer.image.copy()
    viewer.handle_scroll(1.0, 2, 1)
    assert fractal.renderer_changed is True
    assert viewer.frame() is True
    assert np.array_equal(viewer.image, fractal.render(8, 6))
    assert fractal.x_axis.span == pytest.approx(4.0 * 0.9)
    assert before.shape == viewer.image.shape


def test_scroll_clamps_mouse_to_window():
    expected = Fractal(FractalKind.MANDELBROT)
    expected.zoom_at(0, 100, 100, 100, 1.0)
    fractal = Fractal(FractalKind.MANDELBROT)
    viewer = Viewer(fractal, image_size=(10, 10), window_size=(100, 100))
    viewer.handle_scroll(1.0, -50, 500)
    assert fractal.x_axis == expected.x_axis
    assert fractal.y_axis == expected.y_axis


def test_scroll_uses_window_not_image_size():
    fractal = Fractal(FractalKind.MANDELBROT)
    viewer = Viewer(fractal, image_size=(10, 10), window_size=(200, 100))
    viewer.handle_scroll(-1.0, 100, 50)
    assert fractal.zoom_center == pytest.approx((0.0, 0.0))
    assert fractal.x_axis.span == pytest.approx(4.0 * 1.1)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "enter mandelbrot or julia\n"


def test_main_with_bad_arguments(capsys):
    assert main(["julia", "0.2"]) == 1
    assert "enter mandelbrot or julia [r] [i]" in capsys.readouterr().out