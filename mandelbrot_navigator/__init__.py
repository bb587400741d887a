"""
Mandelbrot Navigator Package

A keyboard-driven Mandelbrot set explorer using Pygame for display and
Numba for JIT-compiled computation.

Quick Start:
    from mandelbrot_navigator import run
    run()

Or from command line:
    python -m mandelbrot_navigator

Package Structure:
    - compute.py: JIT-compiled pixel mapping and escape-time functions
    - colormaps.py: Reference blue ramp and lookup-table palettes
    - navigation.py: Viewport and the keyboard navigation state machine
    - renderer.py: Viewport to RGBA color buffer
    - config.py: settings.json loading and validation
    - app.py: Main application and event loop

Controls:
    - Arrow keys: Pan by half the view
    - Enter: Zoom in 2x
    - Backspace: Zoom out 2x
    - R: Reset to default view
    - ESC: Quit
"""

from .app import run, MandelbrotApp, RenderUnavailable
from .compute import BOUNDED, evaluate, map_pixel
from .colormaps import color_of, PALETTES, get_palette, list_palette_names
from .navigation import Command, Navigator, Viewport
from .renderer import FractalRenderer

__version__ = "1.0.0"
__all__ = [
    "run",
    "MandelbrotApp",
    "RenderUnavailable",
    "BOUNDED",
    "evaluate",
    "map_pixel",
    "color_of",
    "PALETTES",
    "get_palette",
    "list_palette_names",
    "Command",
    "Navigator",
    "Viewport",
    "FractalRenderer",
]
