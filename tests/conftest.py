import pytest

from mandelbrot_navigator.config import load_settings
from mandelbrot_navigator.navigation import Viewport


@pytest.fixture
def default_viewport():
    return Viewport.from_center(0.0, 0.0, 2.0)


@pytest.fixture
def small_settings():
    return load_settings(overrides={'width': 16, 'height': 12})
