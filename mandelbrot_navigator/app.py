"""
Main application module for the Mandelbrot navigator.

Contains the MandelbrotApp class which handles:
- Window setup and the main loop (pygame)
- Translating key presses into navigation commands
- Re-rendering after every command and presenting the result
"""

import logging

import pygame

from .compute import warmup_jit
from .config import load_settings
from .navigation import Command, Navigator
from .renderer import FractalRenderer


logger = logging.getLogger(__name__)


class RenderUnavailable(RuntimeError):
    """A rendered buffer could not be turned into something on screen."""


KEY_COMMANDS = {
    pygame.K_UP: Command.PAN_UP,
    pygame.K_DOWN: Command.PAN_DOWN,
    pygame.K_LEFT: Command.PAN_LEFT,
    pygame.K_RIGHT: Command.PAN_RIGHT,
    pygame.K_RETURN: Command.ZOOM_IN,
    pygame.K_KP_ENTER: Command.ZOOM_IN,
    pygame.K_BACKSPACE: Command.ZOOM_OUT,
    pygame.K_r: Command.RESET,
}

QUIT_KEYS = (pygame.K_ESCAPE,)


class MandelbrotApp:
    """
    Main application class for the Mandelbrot navigator.

    Owns everything a frame needs: the navigator (current viewport),
    the renderer, the latest color buffer and the pygame window.
    Commands are handled one at a time; a command is only finished
    once its render is done and presented.
    """

    def __init__(self, settings=None):
        """
        Initialize the application.

        Args:
            settings: Settings dict (default: config.load_settings())
        """
        self.settings = settings if settings is not None else load_settings()

        self.navigator = Navigator(
            center=self.settings['center'],
            deviation=self.settings['deviation'],
            step=self.settings['step'],
            min_deviation=self.settings['min_deviation'],
        )
        self.renderer = FractalRenderer.from_settings(self.settings)
        self.width = self.renderer.width
        self.height = self.renderer.height

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None

        # Display state
        self.current_buffer = None
        self.current_surface = None

        self.running = False

    @property
    def viewport(self):
        return self.navigator.viewport

    def run(self):
        """Run the application main loop until quit."""
        warmup_jit()
        # The first frame exists before the window does
        self.current_buffer = self.renderer.render(self.viewport)
        try:
            self._init_pygame()
            self._present()

            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self._draw()
                self.clock.tick(max(1, round(1000 / self.settings['tick_interval_ms'])))
        finally:
            pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create the window."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
        except pygame.error as err:
            raise RenderUnavailable(f"Could not open a window: {err}") from err
        pygame.display.set_caption(self.settings['window_title'])
        self.clock = pygame.time.Clock()

    def handle_event(self, event):
        """
        Process one pygame event.

        Returns:
            The Command applied, or None if the event was not a navigation key
        """
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                self.running = False
            elif event.key in KEY_COMMANDS:
                command = KEY_COMMANDS[event.key]
                self.apply_command(command)
                return command
        return None

    def apply_command(self, command):
        """
        Step the viewport and re-render it.

        Returns:
            The new color buffer
        """
        viewport = self.navigator.apply(command)
        self.current_buffer = self.renderer.render(viewport)
        if self.screen is not None:
            self._present()
        return self.current_buffer

    def _present(self):
        """Convert the current buffer to a surface and show it."""
        try:
            # surfarray is indexed [x, y]; buffer rows are y
            self.current_surface = pygame.surfarray.make_surface(
                self.current_buffer[:, :, :3].swapaxes(0, 1)
            )
        except (pygame.error, ValueError) as err:
            raise RenderUnavailable(f"Could not create a surface: {err}") from err
        self._draw()

    def _draw(self):
        """Draw the current frame."""
        self.screen.blit(self.current_surface, (0, 0))
        pygame.display.flip()


def run(settings=None):
    """
    Run the Mandelbrot navigator.

    Args:
        settings: Settings dict (default: config.load_settings())
    """
    app = MandelbrotApp(settings)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, quitting")
