import gc

import pytest

from swipe_saver.core.settings_store import SettingsStore, load_settings
from swipe_saver.models.settings import AppSettings
from swipe_saver.storage.key_value import JsonFileKeyValueStore
from swipe_saver.storage.keys import StorageKey


def test_construction_does_not_save(recording_store) -> None:
    SettingsStore(AppSettings.default(), recording_store)

    assert recording_store.saves == []


def test_current_returns_initial_record(recording_store) -> None:
    initial = AppSettings(language="ru")
    store = SettingsStore(initial, recording_store)

    assert store.current() is initial


def test_every_replace_is_saved_once_in_order(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    records = [
        AppSettings(language="ru"),
        AppSettings(language="de"),
        AppSettings(),
        AppSettings(start_page="https://example.org"),
    ]

    for record in records:
        store.replace(record)

    assert recording_store.saves == [("appSettings", record) for record in records]
    assert store.current() == records[-1]


def test_identical_record_is_still_saved(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)

    store.replace(AppSettings())

    assert recording_store.saved_values() == [AppSettings()]


def test_returning_to_initial_value_is_saved(recording_store) -> None:
    initial = AppSettings()
    store = SettingsStore(initial, recording_store)

    store.update(notifications_enabled=False)
    store.update(notifications_enabled=True)

    assert recording_store.saved_values()[-1] == initial
    assert len(recording_store.saves) == 2


def test_premium_toggle_scenario(recording_store) -> None:
    store = SettingsStore(AppSettings.default(), recording_store)
    assert len(recording_store.saves) == 0

    premium = store.current().with_changes(is_premium_user=True)
    store.replace(premium)
    assert recording_store.saved_values() == [premium]

    store.replace(premium.with_changes(is_premium_user=True))
    assert recording_store.saved_values() == [premium, premium]


def test_failed_save_keeps_new_value_in_memory(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    recording_store.fail_saves = True

    new_record = AppSettings(enable_watermark=False)
    store.replace(new_record)

    assert store.current() == new_record
    assert len(recording_store.saves) == 1


def test_save_failure_does_not_stop_later_saves(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    recording_store.fail_saves = True
    store.update(language="ru")
    recording_store.fail_saves = False
    store.update(language="de")

    assert recording_store.data["appSettings"]["language"] == "de"


def test_replace_rejects_non_settings(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)

    with pytest.raises(TypeError):
        store.replace({"language": "ru"})  # type: ignore[arg-type]

    assert store.current() == AppSettings()
    assert recording_store.saves == []


def test_update_returns_new_record(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)

    updated = store.update(enable_browser_history=True)

    assert updated.enable_browser_history is True
    assert store.current() is updated


def test_custom_storage_key(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store, key="otherSettings")
    store.update(language="ru")

    assert recording_store.saves[0][0] == "otherSettings"


def test_subscribers_get_current_value_then_changes(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    seen = []

    store.subscribe(seen.append)
    store.update(language="ru")

    assert seen == [AppSettings(), AppSettings(language="ru")]


def test_listeners_are_called_in_registration_order_after_auto_save(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    calls = []
    store.subscribe(lambda s: calls.append(("first", len(recording_store.saves))))
    store.subscribe(lambda s: calls.append(("second", len(recording_store.saves))))
    calls.clear()

    store.update(language="ru")

    # Auto-save is registered first, so it has already run
    assert calls == [("first", 1), ("second", 1)]


def test_listener_errors_do_not_escape_replace(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)

    def broken(settings):
        if settings.language == "ru":
            raise RuntimeError("boom")

    store.subscribe(broken)
    store.update(language="ru")

    assert store.current().language == "ru"
    assert len(recording_store.saves) == 1


def test_cancelled_subscription_stops_receiving(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    seen = []
    subscription = store.subscribe(seen.append)

    subscription.cancel()
    store.update(language="ru")

    assert seen == [AppSettings()]
    assert subscription.active is False


def test_close_stops_auto_save(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    store.update(language="ru")

    store.close()
    store.update(language="de")

    assert len(recording_store.saves) == 1
    assert store.current().language == "de"
    assert store.closed


def test_context_manager_closes_store(recording_store) -> None:
    with SettingsStore(AppSettings(), recording_store) as store:
        store.update(language="ru")
    store.update(language="de")

    assert len(recording_store.saves) == 1


def test_discarded_store_never_saves_again(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    store.update(language="ru")
    auto_save = store._auto_save.listener

    del store
    gc.collect()
    auto_save(AppSettings(language="de"))

    assert recording_store.saved_values() == [AppSettings(language="ru")]


def test_subscribe_after_close_is_inactive(recording_store) -> None:
    store = SettingsStore(AppSettings(), recording_store)
    store.close()
    seen = []

    subscription = store.subscribe(seen.append)

    assert subscription.active is False
    assert seen == []


def test_load_settings_returns_stored_record(recording_store) -> None:
    recording_store.data["appSettings"] = AppSettings(language="ru").to_dict()

    assert load_settings(recording_store) == AppSettings(language="ru")


def test_load_settings_falls_back_when_missing(recording_store) -> None:
    assert load_settings(recording_store) == AppSettings.default()


def test_load_settings_falls_back_when_corrupt(recording_store) -> None:
    recording_store.data["appSettings"] = {"language": "ru"}

    assert load_settings(recording_store) == AppSettings.default()


def test_load_settings_falls_back_when_store_raises() -> None:
    class BrokenStore:
        def load(self, key, decode=None):
            raise OSError("unreadable")

    assert load_settings(BrokenStore(), StorageKey.APP_SETTINGS) == AppSettings.default()


def test_update_with_wrong_type_keeps_record_and_saves_nothing(recording_store) -> None:
    store = SettingsStore(AppSettings(language="ru"), recording_store)

    with pytest.raises(TypeError):
        store.update(language="de", notifications_enabled=0)

    assert store.current() == AppSettings(language="ru")
    assert recording_store.saves == []


def test_every_saved_record_reloads_unchanged(json_store) -> None:
    store = SettingsStore(AppSettings(), json_store)
    store.update(language="ru", notifications_enabled=False)

    assert load_settings(JsonFileKeyValueStore()) == AppSettings(
        language="ru", notifications_enabled=False
    )
