"""
Viewport and keyboard navigation state.

A Viewport is the rectangle of the complex plane mapped onto the raster.
The Navigator holds the current view as a center point plus a
half-width "deviation" and steps it in response to discrete commands:
panning moves the center by step * deviation, zooming scales the
deviation by step.
"""

import enum
import logging
import math
from collections import namedtuple

from .compute import map_pixel


logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Discrete navigation commands."""
    PAN_UP = 'pan_up'
    PAN_DOWN = 'pan_down'
    PAN_LEFT = 'pan_left'
    PAN_RIGHT = 'pan_right'
    ZOOM_IN = 'zoom_in'
    ZOOM_OUT = 'zoom_out'
    RESET = 'reset'


class Viewport(namedtuple('Viewport', 'min_real max_real min_imag max_imag')):
    """
    Rectangular region of the complex plane.

    Immutable; navigation produces a new Viewport instead of
    modifying one in place.
    """

    __slots__ = ()

    def __new__(cls, min_real, max_real, min_imag, max_imag):
        if not (min_real < max_real and min_imag < max_imag):
            raise ValueError(
                f"Empty viewport: real [{min_real}, {max_real}], "
                f"imag [{min_imag}, {max_imag}]"
            )
        return super().__new__(
            cls, float(min_real), float(max_real), float(min_imag), float(max_imag)
        )

    @classmethod
    def _make(cls, iterable):
        # _replace goes through here too, so both keep the bounds checks
        return cls(*iterable)

    @classmethod
    def from_center(cls, center_real, center_imag, deviation):
        """Build the square viewport of half-width deviation around a center."""
        if not deviation > 0:
            raise ValueError(f"Deviation must be positive, got {deviation}")
        return cls(
            center_real - deviation, center_real + deviation,
            center_imag - deviation, center_imag + deviation,
        )

    @property
    def bounds(self):
        """(x_min, x_max, y_min, y_max) tuple as taken by the compute kernels."""
        return tuple(self)

    @property
    def center(self):
        return ((self.min_real + self.max_real) / 2,
                (self.min_imag + self.max_imag) / 2)

    def point_at(self, px, py, width, height):
        """
        Complex point under pixel (px, py) of a width x height raster.

        Pixel (0, 0) maps to (min_real, min_imag).
        """
        return complex(map_pixel(px, py, self.min_real, self.max_real,
                                 self.min_imag, self.max_imag, width, height))


class Navigator:
    """
    Navigation state machine over a square viewport.

    Usage:
        nav = Navigator()
        viewport = nav.apply(Command.ZOOM_IN)

    Attributes:
        center_x, center_y: Current view center in the complex plane
        deviation: Current half-width of the view
        step: Pan fraction and zoom factor (0 < step < 1)
        min_deviation: Floor for zooming in (0 disables it)
    """

    DEFAULT_CENTER = (0.0, 0.0)
    DEFAULT_DEVIATION = 2.0
    DEFAULT_STEP = 0.5

    def __init__(self, center=None, deviation=None, step=None, min_deviation=0.0):
        """
        Initialize the navigator.

        Args:
            center: (real, imag) starting center (default (0, 0))
            deviation: Starting half-width (default 2.0)
            step: Pan/zoom step (default 0.5)
            min_deviation: Smallest deviation ZOOM_IN may reach (default 0, no floor)
        """
        center = self.DEFAULT_CENTER if center is None else center
        deviation = self.DEFAULT_DEVIATION if deviation is None else deviation
        step = self.DEFAULT_STEP if step is None else step

        if not deviation > 0:
            raise ValueError(f"Deviation must be positive, got {deviation}")
        if not 0 < step < 1:
            raise ValueError(f"Step must be between 0 and 1, got {step}")
        if min_deviation < 0 or min_deviation > deviation:
            raise ValueError(
                f"min_deviation must be in [0, {deviation}], got {min_deviation}"
            )

        self.initial = (float(center[0]), float(center[1]), float(deviation))
        self.center_x, self.center_y, self.deviation = self.initial
        self.step = float(step)
        self.min_deviation = float(min_deviation)

    @property
    def viewport(self):
        """The current view as a Viewport."""
        return Viewport.from_center(self.center_x, self.center_y, self.deviation)

    def apply(self, command):
        """
        Apply one navigation command.

        Args:
            command: A Command member

        Returns:
            The new Viewport
        """
        command = Command(command)
        previous = (self.center_x, self.center_y, self.deviation)
        shift = self.step * self.deviation

        if command is Command.PAN_UP:
            self.center_y -= shift
        elif command is Command.PAN_DOWN:
            self.center_y += shift
        elif command is Command.PAN_LEFT:
            self.center_x -= shift
        elif command is Command.PAN_RIGHT:
            self.center_x += shift
        elif command is Command.ZOOM_IN:
            self._zoom_in()
        elif command is Command.ZOOM_OUT:
            self.deviation /= self.step
        elif command is Command.RESET:
            self.center_x, self.center_y, self.deviation = self.initial

        if self._collapsed():
            # Double precision can no longer tell the view edges apart
            logger.warning("Precision limit reached at deviation %g, ignoring %s",
                           self.deviation, command.name)
            self.center_x, self.center_y, self.deviation = previous

        logger.debug("%s -> center=(%r, %r) deviation=%r", command.name,
                     self.center_x, self.center_y, self.deviation)
        return self.viewport

    def _zoom_in(self):
        deviation = self.deviation * self.step
        if deviation < self.min_deviation:
            logger.warning("Zoom limit reached (deviation %g), clamping to %g",
                           deviation, self.min_deviation)
            deviation = self.min_deviation
        self.deviation = deviation

    def _collapsed(self):
        d = self.deviation
        return not (0 < d < math.inf
                    and self.center_x - d < self.center_x + d
                    and self.center_y - d < self.center_y + d)
