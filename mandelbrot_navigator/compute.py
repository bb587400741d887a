"""
Escape-time computation functions using Numba JIT compilation.

This module contains the performance-critical functions that are
JIT-compiled for speed:
- Pixel to complex-plane mapping
- Escape-time evaluation of a single point (z² + c)
- Full-raster escape counts, parallelised over rows

Escape classifications are plain integers: n >= 0 means the orbit
escaped at iteration n, BOUNDED (-1) means it never escaped within
max_iter iterations.
"""

import math

import numpy as np
from numba import jit, prange


BOUNDED = -1

DEFAULT_MAX_ITER = 200
DEFAULT_ESCAPE_RADIUS = 2.0


@jit(nopython=True, cache=True)
def map_pixel(px, py, x_min, x_max, y_min, y_max, width, height):
    """
    Map a pixel of a width x height raster to a point in the complex plane.

    Pixel (0, 0) maps to (x_min, y_min); y grows with the row index.

    Args:
        px, py: Pixel column and row
        x_min, x_max: Real axis bounds
        y_min, y_max: Imaginary axis bounds
        width, height: Raster dimensions in pixels

    Returns:
        complex point for the pixel
    """
    x = px / width * (x_max - x_min) + x_min
    y = py / height * (y_max - y_min) + y_min
    return complex(x, y)


@jit(nopython=True, cache=True)
def escape_time(cr, ci, max_iter, escape_radius):
    """
    Iterate v = v² + c from v = 0 until |v| exceeds escape_radius.

    Args:
        cr, ci: Real and imaginary parts of c
        max_iter: Iteration cap
        escape_radius: Escape threshold on |v|

    Returns:
        Index of the first iteration whose |v| > escape_radius,
        or BOUNDED if there is none within max_iter iterations.
    """
    zr = 0.0
    zi = 0.0
    for n in range(max_iter):
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        if math.hypot(zr, zi) > escape_radius:
            return n
    return BOUNDED


@jit(nopython=True, parallel=True, cache=True)
def compute_escape_counts(x_min, x_max, y_min, y_max, width, height,
                          max_iter, escape_radius):
    """
    Compute the escape classification of every pixel in a raster.

    Rows are computed in parallel; the returned array is only handed
    back once every row is done.

    Args:
        x_min, x_max: Real axis bounds in the complex plane
        y_min, y_max: Imaginary axis bounds in the complex plane
        width, height: Output raster dimensions in pixels
        max_iter: Maximum iteration count
        escape_radius: Escape threshold

    Returns:
        2D int32 array of shape (height, width) holding escape
        iterations, BOUNDED for points that never escaped.
    """
    result = np.empty((height, width), dtype=np.int32)
    dx = x_max - x_min
    dy = y_max - y_min

    for py in prange(height):
        y = py / height * dy + y_min
        for px in range(width):
            x = px / width * dx + x_min
            result[py, px] = escape_time(x, y, max_iter, escape_radius)

    return result


def evaluate(z, max_iter=DEFAULT_MAX_ITER, escape_radius=DEFAULT_ESCAPE_RADIUS):
    """Classify a single complex point (escape iteration or BOUNDED)."""
    z = complex(z)
    return int(escape_time(z.real, z.imag, max_iter, float(escape_radius)))


def warmup_jit():
    """
    Warm up JIT compilation with a tiny raster.

    Call this once at startup so the first real render does not pay
    for compilation.
    """
    map_pixel(0, 0, -2.0, 2.0, -2.0, 2.0, 4, 4)
    compute_escape_counts(-2.0, 2.0, -2.0, 2.0, 4, 4, 10, DEFAULT_ESCAPE_RADIUS)
