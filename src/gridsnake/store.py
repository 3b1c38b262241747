from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import appdirs

from . import config

log = logging.getLogger(__name__)


def default_store_path() -> Path:
    return Path(appdirs.user_data_dir(config.APP_NAME)) / config.STORE_FILENAME


class MemoryStore:
    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Key-value store kept as a single JSON object on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring store %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            log.warning("could not write store %s: %s", self.path, e)


def load_best_score(store) -> int:
    raw = store.get(config.BEST_SCORE_KEY)
    if raw is None:
        return 0
    try:
        value = float(raw)
    except ValueError:
        log.warning("stored best score %r is not a number, using 0", raw)
        return 0
    if not math.isfinite(value):
        log.warning("stored best score %r is not finite, using 0", raw)
        return 0
    return max(0, int(value))


def save_best_score(store, value: int) -> None:
    store.set(config.BEST_SCORE_KEY, str(int(value)))


class BestScore:
    """Best score read once at startup, written only when it is beaten."""

    def __init__(self, store):
        self.store = store
        self.value = load_best_score(store)

    def record(self, score: int) -> bool:
        if score <= self.value:
            return False
        log.info("new best score %d (was %d)", score, self.value)
        self.value = score
        save_best_score(self.store, score)
        return True
