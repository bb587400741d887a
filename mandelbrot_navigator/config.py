"""
Settings for the Mandelbrot navigator.

Defaults live in DEFAULT_SETTINGS; settings.json (next to this module,
or any path given explicitly) is merged over them, and command-line
overrides are merged over that.
"""

import json
import logging
import os

from .colormaps import COLOR_MODES, list_palette_names


logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULT_SETTINGS = {
    'width': 940,
    'height': 720,
    'max_iter': 200,
    'escape_radius': 2.0,
    'contrast': 25,
    'base_blue': 155,
    'color_mode': 'wrap',
    'palette': 'reference',
    'center': [0.0, 0.0],
    'deviation': 2.0,
    'step': 0.5,
    'min_deviation': 0.0,
    'tick_interval_ms': 30,
    'window_title': 'Mandelbrot',
}


def load_settings(path=None, overrides=None):
    """
    Load settings from a JSON file merged over the defaults.

    A missing or malformed file is reported and the defaults are used.

    Args:
        path: Settings file (default: settings.json in this package)
        overrides: Dict of values that win over the file, None values ignored

    Returns:
        Validated settings dict

    Raises:
        ValueError if the file does not hold a JSON object, or a setting
        has the wrong type or is out of range
    """
    settings = dict(DEFAULT_SETTINGS)
    settings_path = path or SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            loaded = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s, using defaults: %s", settings_path, e)
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(
            f"{settings_path} must hold a JSON object, got {type(loaded).__name__}"
        )

    unknown = set(loaded) - set(DEFAULT_SETTINGS)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
    settings.update((k, v) for k, v in loaded.items() if k in DEFAULT_SETTINGS)

    if overrides:
        settings.update((k, v) for k, v in overrides.items() if v is not None)

    validate_settings(settings)
    return settings


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_settings(settings):
    """Raise ValueError if any setting is unusable."""
    for key in ('width', 'height', 'max_iter', 'tick_interval_ms'):
        value = settings[key]
        if not _is_number(value) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{key} must be a positive integer, got {value!r}")
    for key in ('contrast', 'base_blue'):
        if not _is_number(settings[key]) or not isinstance(settings[key], int):
            raise ValueError(f"{key} must be an integer, got {settings[key]!r}")
    for key in ('escape_radius', 'deviation', 'step', 'min_deviation'):
        if not _is_number(settings[key]):
            raise ValueError(f"{key} must be a number, got {settings[key]!r}")
    for key in ('escape_radius', 'deviation'):
        if not settings[key] > 0:
            raise ValueError(f"{key} must be positive, got {settings[key]!r}")
    if not 0 < settings['step'] < 1:
        raise ValueError(f"step must be between 0 and 1, got {settings['step']!r}")
    if not 0 <= settings['min_deviation'] <= settings['deviation']:
        raise ValueError(
            f"min_deviation must be in [0, deviation], got {settings['min_deviation']!r}"
        )
    center = settings['center']
    if (not isinstance(center, (list, tuple)) or len(center) != 2
            or not all(_is_number(v) for v in center)):
        raise ValueError(f"center must be [real, imag], got {center!r}")
    if not isinstance(settings['window_title'], str):
        raise ValueError(f"window_title must be a string, got {settings['window_title']!r}")
    if settings['color_mode'] not in COLOR_MODES:
        raise ValueError(
            f"color_mode must be one of {COLOR_MODES}, got {settings['color_mode']!r}"
        )
    if settings['palette'] not in list_palette_names():
        raise ValueError(
            f"palette must be one of {list_palette_names()}, got {settings['palette']!r}"
        )
