import pytest

from mandelbrot_navigator.compute import (
    BOUNDED,
    compute_escape_counts,
    evaluate,
    map_pixel,
)
from mandelbrot_navigator.navigation import Viewport


@pytest.mark.parametrize("viewport", [
    Viewport(-2.0, 2.0, -2.0, 2.0),
    Viewport(-0.75, -0.74, 0.1, 0.11),
    Viewport(0.0, 1.0, -3.0, 5.0),
])
def test_map_pixel_corners(viewport):
    width, height = 940, 720
    x_min, x_max, y_min, y_max = viewport.bounds

    assert map_pixel(0, 0, x_min, x_max, y_min, y_max, width, height) == complex(x_min, y_min)

    far = map_pixel(width - 1, height - 1, x_min, x_max, y_min, y_max, width, height)
    pixel_w = (x_max - x_min) / width
    pixel_h = (y_max - y_min) / height
    assert x_max - pixel_w - 1e-12 <= far.real < x_max
    assert y_max - pixel_h - 1e-12 <= far.imag < y_max


def test_map_pixel_rows_grow_imaginary_part():
    top = map_pixel(0, 0, -2.0, 2.0, -2.0, 2.0, 4, 4)
    below = map_pixel(0, 1, -2.0, 2.0, -2.0, 2.0, 4, 4)
    assert below.imag == top.imag + 1.0
    assert below.real == top.real


def test_origin_is_bounded():
    assert evaluate(0j) == BOUNDED
    assert evaluate(0j, max_iter=1) == BOUNDED


@pytest.mark.parametrize("z", [2.5, -3.0, 2 + 0.1j, 1.5 + 1.5j, 3j])
def test_outside_radius_escapes_immediately(z):
    assert evaluate(z) == 0


@pytest.mark.parametrize("z", [-1.0, -2.0, 0.25, -0.1 + 0.1j, 1j])
def test_known_interior_points(z):
    assert evaluate(z) == BOUNDED


def test_escape_iteration_counts():
    # 1 -> 2 -> 5: |2| is not beyond the radius, 5 is
    assert evaluate(1.0) == 2
    # 2 -> 6
    assert evaluate(2.0) == 1


def test_iteration_cap():
    assert evaluate(1.0, max_iter=2) == BOUNDED
    assert evaluate(1.0, max_iter=3) == 2


def test_escape_radius():
    assert evaluate(1.0, escape_radius=1.5) == 1
    assert evaluate(1.0, escape_radius=10.0) == 3


def test_escape_counts_match_single_point_evaluation():
    viewport = Viewport(-2.0, 1.0, -1.2, 1.2)
    width, height = 24, 18
    counts = compute_escape_counts(*viewport.bounds, width, height, 50, 2.0)

    assert counts.shape == (height, width)
    for py in range(height):
        for px in range(width):
            z = viewport.point_at(px, py, width, height)
            assert counts[py, px] == evaluate(z, max_iter=50)
