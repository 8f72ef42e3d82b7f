import json
import threading
import time
from concurrent.futures import TimeoutError as FutureTimeoutError

import pytest

from swipe_saver.core.settings_store import load_settings
from swipe_saver.models.settings import AppSettings
from swipe_saver.services.theme import ThemeMode
from swipe_saver.storage import key_value
from swipe_saver.storage.key_value import BackgroundKeyValueStore, JsonFileKeyValueStore
from swipe_saver.storage.keys import StorageKey


def test_json_store_uses_config_dir_override(json_store, config_dir) -> None:
    assert json_store.path == config_dir / "settings.json"


def test_json_store_platform_default(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("SWIPESAVER_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))

    store = JsonFileKeyValueStore(app_name="TestApp")

    assert store.path == tmp_path / "TestApp" / "settings.json"


def test_save_writes_one_document_with_all_keys(json_store) -> None:
    json_store.save(StorageKey.APP_SETTINGS, AppSettings(language="ru"))
    json_store.save(StorageKey.THEME_MODE, ThemeMode.DARK)
    json_store.save("isFirstLoad", False)

    document = json.loads(json_store.path.read_text(encoding="utf-8"))

    assert document["appSettings"]["language"] == "ru"
    assert document["themeMode"] == "Dark"
    assert document["isFirstLoad"] is False


def test_values_survive_a_new_store_instance(json_store) -> None:
    json_store.save(StorageKey.APP_SETTINGS, AppSettings(is_premium_user=True))

    reopened = JsonFileKeyValueStore()

    assert reopened.load(StorageKey.APP_SETTINGS, AppSettings.from_dict) == AppSettings(
        is_premium_user=True
    )


def test_load_missing_key_returns_none(json_store) -> None:
    assert json_store.load(StorageKey.ONBOARDING_COMPLETED) is None


def test_load_returns_none_when_decode_fails(json_store) -> None:
    json_store.save(StorageKey.APP_SETTINGS, {"language": "ru"})

    assert json_store.load(StorageKey.APP_SETTINGS, AppSettings.from_dict) is None


def test_last_write_wins(json_store) -> None:
    json_store.save("key", 1)
    json_store.save("key", 2)

    assert json_store.load("key") == 2


def test_delete_removes_key(json_store) -> None:
    json_store.save(StorageKey.IS_FIRST_LOAD, True)
    json_store.delete(StorageKey.IS_FIRST_LOAD)

    assert json_store.load(StorageKey.IS_FIRST_LOAD) is None
    assert JsonFileKeyValueStore().load(StorageKey.IS_FIRST_LOAD) is None


def test_unserializable_value_is_not_written(json_store) -> None:
    json_store.save("good", 1)
    json_store.save("bad", object())

    assert json_store.load("bad") is None
    assert json_store.load("good") == 1


def test_corrupt_file_is_backed_up_and_treated_as_empty(json_store, config_dir) -> None:
    config_dir.mkdir(parents=True)
    json_store.path.write_text("{not json", encoding="utf-8")

    assert json_store.load(StorageKey.APP_SETTINGS) is None
    assert (config_dir / "settings.json.bak").exists()

    json_store.save("key", "value")
    assert JsonFileKeyValueStore().load("key") == "value"


def test_save_failure_is_logged_not_raised(json_store, config_dir, caplog) -> None:
    # A file where the directory should be makes every write fail
    config_dir.parent.mkdir(parents=True, exist_ok=True)
    config_dir.write_text("", encoding="utf-8")

    json_store.save("key", "value")

    assert "Error saving 'key'" in caplog.text


class SlowStore:
    def __init__(self):
        self.saves = []
        self.threads = set()

    def save(self, key, value):
        time.sleep(0.01)
        self.threads.add(threading.current_thread().name)
        self.saves.append((key, value))

    def load(self, key, decode=None):
        for saved_key, value in reversed(self.saves):
            if saved_key == key:
                return value
        return None

    def delete(self, key):
        self.saves.append((key, None))


def test_background_store_preserves_write_order() -> None:
    inner = SlowStore()
    with BackgroundKeyValueStore(inner) as store:
        for i in range(5):
            store.save("key", i)
        store.flush()

        assert [value for _key, value in inner.saves] == [0, 1, 2, 3, 4]
    assert all(name.startswith("KeyValueWriter") for name in inner.threads)


def test_background_store_save_returns_before_write() -> None:
    inner = SlowStore()
    store = BackgroundKeyValueStore(inner)

    store.save("key", "value")
    queued_immediately = len(inner.saves) == 0
    store.close()

    assert queued_immediately
    assert inner.saves == [("key", "value")]


def test_background_store_load_sees_pending_writes() -> None:
    store = BackgroundKeyValueStore(SlowStore())
    store.save("key", "latest")

    assert store.load("key") == "latest"
    store.close()


def test_background_store_survives_failing_writes() -> None:
    class FailingStore(SlowStore):
        def save(self, key, value):
            raise OSError("read-only")

    store = BackgroundKeyValueStore(FailingStore())
    store.save("key", "value")
    store.flush()
    store.close()


def test_closed_background_store_drops_writes() -> None:
    inner = SlowStore()
    store = BackgroundKeyValueStore(inner)
    store.close()

    store.save("key", "value")

    assert inner.saves == []


def fail_first_open(monkeypatch) -> None:
    """Make the next open() of the storage module raise PermissionError."""
    calls = []

    def flaky_open(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            raise PermissionError("file is locked")
        return open(*args, **kwargs)

    monkeypatch.setattr(key_value, "open", flaky_open, raising=False)


def test_unreadable_file_is_kept_and_read_again(config_dir, monkeypatch) -> None:
    JsonFileKeyValueStore().save(StorageKey.APP_SETTINGS, AppSettings(language="ru"))
    JsonFileKeyValueStore().save(StorageKey.ONBOARDING_COMPLETED, True)

    store = JsonFileKeyValueStore()
    fail_first_open(monkeypatch)

    assert load_settings(store) == AppSettings.default()
    assert not (config_dir / "settings.json.bak").exists()

    store.save(StorageKey.IS_FIRST_LOAD, False)

    document = json.loads(store.path.read_text(encoding="utf-8"))
    assert document["appSettings"]["language"] == "ru"
    assert document["onboardingCompleted"] is True
    assert document["isFirstLoad"] is False


def test_save_is_skipped_when_file_cannot_be_read(config_dir, monkeypatch, caplog) -> None:
    JsonFileKeyValueStore().save(StorageKey.APP_SETTINGS, AppSettings(language="ru"))

    store = JsonFileKeyValueStore()
    fail_first_open(monkeypatch)
    store.save(StorageKey.IS_FIRST_LOAD, False)

    document = json.loads(store.path.read_text(encoding="utf-8"))
    assert "Error saving 'isFirstLoad'" in caplog.text
    assert document == {"appSettings": AppSettings(language="ru").to_dict()}
    assert store.load(StorageKey.APP_SETTINGS, AppSettings.from_dict) == AppSettings(language="ru")


def test_loaded_values_are_copies(json_store) -> None:
    json_store.save(StorageKey.APP_SETTINGS, AppSettings())

    loaded = json_store.load(StorageKey.APP_SETTINGS)
    loaded["language"] = "ru"

    assert json_store.load(StorageKey.APP_SETTINGS)["language"] == "en"


def test_background_flush_timeout_is_raised() -> None:
    release = threading.Event()

    class BlockedStore(SlowStore):
        def save(self, key, value):
            release.wait(5)
            super().save(key, value)

    inner = BlockedStore()
    store = BackgroundKeyValueStore(inner)
    store.save("key", "value")

    with pytest.raises(FutureTimeoutError):
        store.flush(timeout=0.01)

    release.set()
    store.close()
    assert inner.saves == [("key", "value")]
