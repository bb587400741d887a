"""
Color mapping for escape-time classifications.

The reference palette is a blue ramp: an escape at iteration n gets
blue = base - contrast * n. Once that goes negative the channel either
wraps modulo 256 (COLOR_MODE_WRAP, repeating bands) or saturates at 0
(COLOR_MODE_CLAMP). Bounded points are opaque black in every palette.

Lookup-table palettes are numpy arrays of shape (NUM_COLORS, 3); an
escape at iteration n picks entry n * (NUM_COLORS - 1) // max_iter.

To add a new palette:
1. Define a create_palette_xxx() function that returns the color array
2. Add it to the PALETTES dictionary at the bottom of this file
"""

import numpy as np
from numba import jit, prange

from .compute import BOUNDED


NUM_COLORS = 256

DEFAULT_CONTRAST = 25
DEFAULT_BASE_BLUE = 155

COLOR_MODE_WRAP = 'wrap'
COLOR_MODE_CLAMP = 'clamp'
COLOR_MODES = (COLOR_MODE_WRAP, COLOR_MODE_CLAMP)

REFERENCE_PALETTE = 'reference'

BLACK = (0, 0, 0, 255)


@jit(nopython=True, cache=True)
def ramp_blue(n, base, contrast, wrap):
    """Blue channel of the reference ramp for an escape at iteration n."""
    value = base - contrast * n
    if wrap:
        return value % 256
    return min(max(value, 0), 255)


@jit(nopython=True, parallel=True, cache=True)
def colorize_ramp(counts, base, contrast, wrap, out):
    """
    Color a raster of escape counts with the reference blue ramp.

    Args:
        counts: 2D int array from compute_escape_counts
        base: Blue value for an escape at iteration 0
        contrast: Blue decrement per iteration
        wrap: True for modulo-256 banding, False for saturation
        out: Output RGBA array (height, width, 4), modified in place
    """
    height, width = counts.shape
    for py in prange(height):
        for px in range(width):
            n = counts[py, px]
            out[py, px, 0] = 0
            out[py, px, 1] = 0
            out[py, px, 3] = 255
            if n == BOUNDED:
                out[py, px, 2] = 0
            else:
                out[py, px, 2] = ramp_blue(n, base, contrast, wrap)


@jit(nopython=True, parallel=True, cache=True)
def colorize_palette(counts, max_iter, palette, out):
    """
    Color a raster of escape counts with a lookup-table palette.

    Args:
        counts: 2D int array from compute_escape_counts
        max_iter: Iteration cap the counts were computed with
        palette: Nx3 array of RGB colors (uint8)
        out: Output RGBA array (height, width, 4), modified in place
    """
    height, width = counts.shape
    last = palette.shape[0] - 1
    for py in prange(height):
        for px in range(width):
            n = counts[py, px]
            out[py, px, 3] = 255
            if n == BOUNDED:
                out[py, px, 0] = 0
                out[py, px, 1] = 0
                out[py, px, 2] = 0
            else:
                idx = min(n * last // max_iter, last)
                out[py, px, 0] = palette[idx, 0]
                out[py, px, 1] = palette[idx, 1]
                out[py, px, 2] = palette[idx, 2]


def color_of(classification, color_mode=COLOR_MODE_WRAP,
             contrast=DEFAULT_CONTRAST, base=DEFAULT_BASE_BLUE):
    """
    Get the reference RGBA color for a single escape classification.

    Args:
        classification: Escape iteration n >= 0, or BOUNDED
        color_mode: COLOR_MODE_WRAP or COLOR_MODE_CLAMP
        contrast: Blue decrement per iteration
        base: Blue value for an escape at iteration 0

    Returns:
        (r, g, b, a) tuple of ints
    """
    check_color_mode(color_mode)
    if classification == BOUNDED:
        return BLACK
    blue = ramp_blue(classification, base, contrast, color_mode == COLOR_MODE_WRAP)
    return (0, 0, int(blue), 255)


def check_color_mode(color_mode):
    if color_mode not in COLOR_MODES:
        raise ValueError(
            f"Unknown color mode {color_mode!r}, expected one of {COLOR_MODES}"
        )


def _ramp(t, start, stop):
    return np.clip(start + (stop - start) * t, 0, 255)


def create_palette_hot():
    """
    Hot palette: black -> red -> yellow -> white.

    Early escapes stay dark, slow escapes near the boundary glow.
    """
    t = np.linspace(0.0, 1.0, NUM_COLORS) ** 0.8
    colors = np.empty((NUM_COLORS, 3), dtype=np.uint8)
    colors[:, 0] = np.clip(255 * t * 2.5, 0, 255)
    colors[:, 1] = np.clip(255 * (t - 0.4) * 2.5, 0, 255)
    colors[:, 2] = np.clip(255 * (t - 0.7) * 3.3, 0, 255)
    return colors


def create_palette_ocean():
    """Ocean palette: deep blue -> cyan -> white."""
    t = np.linspace(0.0, 1.0, NUM_COLORS)
    colors = np.empty((NUM_COLORS, 3), dtype=np.uint8)
    colors[:, 0] = _ramp((t - 0.5) * 2, 0, 255)
    colors[:, 1] = _ramp(t, 0, 255)
    colors[:, 2] = _ramp(t, 50, 255)
    return colors


def create_palette_grayscale():
    """Grayscale palette: black -> white."""
    v = np.linspace(0, 255, NUM_COLORS).astype(np.uint8)
    return np.repeat(v[:, np.newaxis], 3, axis=1)


# Registry of lookup-table palettes.
# Keys are the names accepted in settings, values are factory functions.
PALETTES = {
    'hot': create_palette_hot,
    'ocean': create_palette_ocean,
    'grayscale': create_palette_grayscale,
}


def get_palette(name):
    """
    Get a lookup-table palette by name.

    Raises:
        ValueError if name is not a known palette
    """
    try:
        factory = PALETTES[name]
    except KeyError:
        raise ValueError(
            f"Unknown palette {name!r}, expected one of {list_palette_names()}"
        ) from None
    return factory()


def list_palette_names():
    """Get list of available palette names, reference ramp first."""
    return [REFERENCE_PALETTE] + list(PALETTES.keys())
