"""
Synchronous Mandelbrot renderer.

The FractalRenderer turns a Viewport into a complete RGBA color buffer:
escape counts for every pixel (rows computed in parallel by Numba),
then the configured palette. A render call only returns once the whole
buffer is filled.
"""

import logging

import numpy as np

from .compute import (
    DEFAULT_ESCAPE_RADIUS,
    DEFAULT_MAX_ITER,
    compute_escape_counts,
)
from .colormaps import (
    COLOR_MODE_WRAP,
    DEFAULT_BASE_BLUE,
    DEFAULT_CONTRAST,
    REFERENCE_PALETTE,
    check_color_mode,
    colorize_palette,
    colorize_ramp,
    get_palette,
)


logger = logging.getLogger(__name__)


class FractalRenderer:
    """
    Renders viewports of the complex plane to RGBA color buffers.

    Usage:
        renderer = FractalRenderer(940, 720)
        buffer = renderer.render(Viewport.from_center(0.0, 0.0, 2.0))
        # buffer[py, px] is the (r, g, b, a) of pixel (px, py)

    Attributes:
        width, height: Raster dimensions in pixels (fixed)
        max_iter: Iteration cap for the escape test
        escape_radius: Escape threshold on |v|
        color_mode: 'wrap' or 'clamp' for the reference ramp
        palette: 'reference' or the name of a lookup-table palette
    """

    def __init__(self, width, height, max_iter=DEFAULT_MAX_ITER,
                 escape_radius=DEFAULT_ESCAPE_RADIUS, color_mode=COLOR_MODE_WRAP,
                 contrast=DEFAULT_CONTRAST, base_blue=DEFAULT_BASE_BLUE,
                 palette=REFERENCE_PALETTE):
        """
        Initialize the renderer.

        Args:
            width, height: Raster dimensions in pixels
            max_iter: Maximum iteration count (default 200)
            escape_radius: Escape threshold (default 2.0)
            color_mode: Reference ramp behavior past black, 'wrap' or 'clamp'
            contrast: Blue decrement per iteration of the reference ramp
            base_blue: Blue value for points escaping at iteration 0
            palette: Palette name (default 'reference')
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Raster must be at least 1x1, got {width}x{height}")
        if max_iter <= 0:
            raise ValueError(f"max_iter must be positive, got {max_iter}")
        if not escape_radius > 0:
            raise ValueError(f"escape_radius must be positive, got {escape_radius}")
        check_color_mode(color_mode)

        self.width = int(width)
        self.height = int(height)
        self.max_iter = int(max_iter)
        self.escape_radius = float(escape_radius)
        self.color_mode = color_mode
        self.contrast = int(contrast)
        self.base_blue = int(base_blue)
        self.palette = palette
        self._palette_colors = None
        if palette != REFERENCE_PALETTE:
            self._palette_colors = get_palette(palette)

    @classmethod
    def from_settings(cls, settings):
        """Build a renderer from a settings dict (see config.load_settings)."""
        return cls(
            settings['width'], settings['height'],
            max_iter=settings['max_iter'],
            escape_radius=settings['escape_radius'],
            color_mode=settings['color_mode'],
            contrast=settings['contrast'],
            base_blue=settings['base_blue'],
            palette=settings['palette'],
        )

    @property
    def shape(self):
        """Shape of the buffers returned by render()."""
        return (self.height, self.width, 4)

    def classify(self, viewport):
        """
        Escape classification of every pixel for a viewport.

        Returns:
            int32 array (height, width) of escape iterations or BOUNDED
        """
        x_min, x_max, y_min, y_max = viewport.bounds
        return compute_escape_counts(
            x_min, x_max, y_min, y_max,
            self.width, self.height, self.max_iter, self.escape_radius
        )

    def render(self, viewport):
        """
        Render a viewport to a new color buffer.

        The viewport is not modified. A buffer that cannot be allocated
        raises MemoryError, which callers treat as fatal.

        Args:
            viewport: navigation.Viewport to render

        Returns:
            uint8 array (height, width, 4) of RGBA pixels
        """
        logger.info("Rendering real [%r, %r] imag [%r, %r]", *viewport.bounds)
        counts = self.classify(viewport)
        out = np.empty(self.shape, dtype=np.uint8)

        if self._palette_colors is None:
            colorize_ramp(counts, self.base_blue, self.contrast,
                          self.color_mode == COLOR_MODE_WRAP, out)
        else:
            colorize_palette(counts, self.max_iter, self._palette_colors, out)
        return out
