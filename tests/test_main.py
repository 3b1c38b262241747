from unittest.mock import MagicMock

import pytest

from gridsnake import __main__ as launcher
from gridsnake import config
from gridsnake.store import JsonFileStore


@pytest.fixture
def run_game(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(launcher, "run_game", mock)
    return mock


def test_launcher_passes_options(run_game, tmp_path):
    path = tmp_path / "best.json"
    launcher.main(["--store", str(path), "--seed", "3", "--fps-limit", "30", "--log-level", "DEBUG"])

    run_game.assert_called_once()
    (store,), kwargs = run_game.call_args
    assert isinstance(store, JsonFileStore)
    assert store.path == path
    assert kwargs == {"fps_limit": 30, "seed": 3}


def test_launcher_defaults(run_game, monkeypatch, tmp_path):
    default = tmp_path / "data" / config.STORE_FILENAME
    monkeypatch.setattr(launcher, "default_store_path", lambda: default)

    launcher.main([])

    (store,), kwargs = run_game.call_args
    assert store.path == default
    assert kwargs == {"fps_limit": config.FPS_LIMIT, "seed": None}


def test_launcher_rejects_unknown_log_level(run_game):
    with pytest.raises(SystemExit):
        launcher.main(["--log-level", "LOUD"])
    run_game.assert_not_called()
