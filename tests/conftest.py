"""Shared pytest fixtures for SwipeSaver tests."""

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from swipe_saver.storage.key_value import JsonFileKeyValueStore, encode_value
from swipe_saver.storage.keys import StorageKey


class RecordingStore:
    """In-memory key-value store that records every save call."""

    def __init__(self, initial: Optional[dict] = None):
        self.data: dict[str, Any] = dict(initial or {})
        self.saves: list[tuple[str, Any]] = []
        self.fail_saves = False

    @staticmethod
    def _key(key) -> str:
        return key.key if isinstance(key, StorageKey) else key

    def save(self, key, value) -> None:
        self.saves.append((self._key(key), value))
        if self.fail_saves:
            raise OSError("disk full")
        self.data[self._key(key)] = encode_value(value)

    def load(self, key, decode: Optional[Callable] = None):
        raw = self.data.get(self._key(key))
        if raw is None or decode is None:
            return raw
        try:
            return decode(raw)
        except (TypeError, ValueError):
            return None

    def delete(self, key) -> None:
        self.data.pop(self._key(key), None)

    def saved_values(self, key: str = "appSettings") -> list:
        return [value for saved_key, value in self.saves if saved_key == key]


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the JSON store at a temporary directory."""
    directory = tmp_path / "config"
    monkeypatch.setenv("SWIPESAVER_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def json_store(config_dir: Path) -> JsonFileKeyValueStore:
    return JsonFileKeyValueStore()
