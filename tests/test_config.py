import json
import logging

import pytest

from mandelbrot_navigator.config import DEFAULT_SETTINGS, load_settings


def test_packaged_settings():
    settings = load_settings()
    assert settings['width'] == 940
    assert settings['height'] == 720
    assert settings['max_iter'] == 200
    assert settings['color_mode'] == 'wrap'
    assert settings['step'] == 0.5
    assert settings['tick_interval_ms'] == 30


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="mandelbrot_navigator"):
        settings = load_settings(str(tmp_path / "absent.json"))
    assert settings == DEFAULT_SETTINGS
    assert "Could not load" in caplog.text


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{ not json")
    assert load_settings(str(path)) == DEFAULT_SETTINGS


def test_file_values_and_overrides(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'max_iter': 64, 'color_mode': 'clamp', 'zoom': 3}))

    with caplog.at_level(logging.WARNING, logger="mandelbrot_navigator"):
        settings = load_settings(str(path), {'max_iter': 100, 'width': None})

    assert settings['max_iter'] == 100
    assert settings['color_mode'] == 'clamp'
    assert settings['width'] == DEFAULT_SETTINGS['width']
    assert 'zoom' not in settings
    assert "zoom" in caplog.text


@pytest.mark.parametrize("overrides", [
    {'width': 0},
    {'height': 12.5},
    {'max_iter': -3},
    {'escape_radius': 0},
    {'step': 1.5},
    {'deviation': 0},
    {'min_deviation': 5.0},
    {'center': [0.0]},
    {'color_mode': 'mirror'},
    {'palette': 'plasma'},
])
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        load_settings(overrides=overrides)


@pytest.mark.parametrize("contents", [
    {'step': "0.5"},
    {'deviation': "2"},
    {'escape_radius': None},
    {'min_deviation': [0]},
    {'center': 3},
    {'center': ["0", 0]},
    {'center': [0.0, 0.0, 0.0]},
    {'width': True},
    {'contrast': 2.5},
    {'window_title': 7},
    [1, 2],
    "wrap",
])
def test_wrongly_typed_settings_file(tmp_path, contents):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(contents))
    with pytest.raises(ValueError):
        load_settings(str(path))
