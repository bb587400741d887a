"""
Command-line entry point: python -m mandelbrot_navigator
"""
import argparse
import logging
import sys

from .app import RenderUnavailable, run
from .colormaps import COLOR_MODES, list_palette_names
from .config import load_settings
from .logging_config import setup_logging


logger = logging.getLogger("mandelbrot_navigator")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="mandelbrot-navigator",
        description="Explore the Mandelbrot set with the keyboard.",
    )
    parser.add_argument("--width", type=int, help="raster width in pixels")
    parser.add_argument("--height", type=int, help="raster height in pixels")
    parser.add_argument("--max-iter", type=int, dest="max_iter",
                        help="iteration cap for the escape test")
    parser.add_argument("--color-mode", choices=COLOR_MODES, dest="color_mode",
                        help="blue ramp past zero: wrap (banded) or clamp")
    parser.add_argument("--palette", choices=list_palette_names(),
                        help="color palette")
    parser.add_argument("--settings", help="path to a settings JSON file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    overrides = {
        'width': args.width,
        'height': args.height,
        'max_iter': args.max_iter,
        'color_mode': args.color_mode,
        'palette': args.palette,
    }
    try:
        settings = load_settings(args.settings, overrides)
    except ValueError as e:
        logger.error("Invalid settings: %s", e)
        return 2

    try:
        run(settings)
    except RenderUnavailable as e:
        logger.error("Display failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
