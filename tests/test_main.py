import json

import pytest

from mandelbrot_navigator import __main__ as cli
from mandelbrot_navigator.app import RenderUnavailable


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level, log_file=None: None)


def test_overrides_reach_run(monkeypatch):
    seen = {}
    monkeypatch.setattr(cli, "run", lambda settings: seen.update(settings))

    status = cli.main(["--width", "32", "--height", "24", "--color-mode", "clamp",
                       "--log-level", "WARNING"])

    assert status == 0
    assert (seen['width'], seen['height']) == (32, 24)
    assert seen['color_mode'] == 'clamp'
    assert seen['max_iter'] == 200


def test_invalid_settings_exit_code(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'step': 2}))
    monkeypatch.setattr(cli, "run", lambda settings: None)

    assert cli.main(["--settings", str(path), "--log-level", "ERROR"]) == 2


def test_render_unavailable_exit_code(monkeypatch):
    def fail(settings):
        raise RenderUnavailable("no display")

    monkeypatch.setattr(cli, "run", fail)
    assert cli.main(["--log-level", "ERROR"]) == 1


def test_wrongly_typed_settings_exit_code(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'deviation': "2"}))
    monkeypatch.setattr(cli, "run", lambda settings: None)

    assert cli.main(["--settings", str(path), "--log-level", "ERROR"]) == 2
