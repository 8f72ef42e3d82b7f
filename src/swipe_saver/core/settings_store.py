"""Observable settings holder with automatic persistence."""

import weakref
from typing import Callable, Optional
import logging

from ..models.settings import AppSettings
from ..storage.key_value import KeyLike, KeyValueStore
from ..storage.keys import StorageKey

logger = logging.getLogger(__name__)

SettingsListener = Callable[[AppSettings], None]


class Subscription:
    """Handle for a listener registered on a SettingsStore."""

    def __init__(self, store: "SettingsStore", listener: SettingsListener):
        self._store = weakref.ref(store)
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def listener(self) -> SettingsListener:
        return self._listener

    def cancel(self) -> None:
        """Stop delivering notifications to the listener."""
        if not self._active:
            return
        self._active = False
        store = self._store()
        if store is not None:
            store._remove(self)


class _AutoSaver:
    """Listener that writes every settings change to the key-value store.

    The first notification it receives is the value the store was created
    with; it is skipped by position, not by comparing values, so setting a
    field back to its startup value is still written.
    """

    def __init__(self, owner: "SettingsStore", storage: KeyValueStore, key: KeyLike):
        self._owner = weakref.ref(owner)
        self._storage = storage
        self._key = key
        self._past_initial = False

    def __call__(self, settings: AppSettings) -> None:
        if not self._past_initial:
            self._past_initial = True
            return

        owner = self._owner()
        if owner is None or owner.closed:
            return

        try:
            self._storage.save(self._key, settings)
            logger.info("Settings saved")
        except Exception as e:
            # The in-memory value stays authoritative for this session
            logger.error(f"Failed to save settings: {e}")


class SettingsStore:
    """Holds the live settings record and persists every replacement.

    All access is expected from a single thread (the GUI main loop). Listeners
    are called synchronously, in registration order, on every ``replace``;
    the auto-save listener is always registered first.
    """

    def __init__(
        self,
        initial: AppSettings,
        storage: KeyValueStore,
        key: KeyLike = StorageKey.APP_SETTINGS,
    ):
        """Initialize the store.

        Args:
            initial: Settings to start with (loaded from storage or defaults)
            storage: Key-value store the settings are written to
            key: Storage key for the settings entry
        """
        self._settings = initial
        self._storage = storage
        self._subscriptions: list[Subscription] = []
        self._closed = False

        self._auto_save = self.subscribe(_AutoSaver(self, storage, key))

    @property
    def closed(self) -> bool:
        return self._closed

    def current(self) -> AppSettings:
        """Get the current settings."""
        return self._settings

    def replace(self, settings: AppSettings) -> None:
        """Swap in a new settings record and notify listeners.

        Equal records are not filtered out: every call is delivered and saved.

        Args:
            settings: The new settings record

        Raises:
            TypeError: If settings is not an AppSettings
        """
        if not isinstance(settings, AppSettings):
            raise TypeError(f"Expected AppSettings, got {type(settings).__name__}")

        self._settings = settings
        self._notify(settings)

    def update(self, **changes) -> AppSettings:
        """Replace the settings with a copy that has some fields changed.

        Args:
            **changes: Field names and new values

        Returns:
            The new settings record
        """
        settings = self._settings.with_changes(**changes)
        self.replace(settings)
        return settings

    def subscribe(self, listener: SettingsListener) -> Subscription:
        """Register a listener.

        The listener is called right away with the current settings, then on
        every replacement until the subscription is cancelled.

        Args:
            listener: Function called with the new settings

        Returns:
            Subscription handle
        """
        subscription = Subscription(self, listener)
        if self._closed:
            logger.warning("Subscribing to a closed settings store")
            subscription._active = False
            return subscription

        self._subscriptions.append(subscription)
        self._deliver(subscription, self._settings)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass

    def _notify(self, settings: AppSettings) -> None:
        for subscription in list(self._subscriptions):
            if subscription.active:
                self._deliver(subscription, settings)

    def _deliver(self, subscription: Subscription, settings: AppSettings) -> None:
        try:
            subscription.listener(settings)
        except Exception as e:
            logger.error(f"Error in settings listener: {e}")

    def close(self) -> None:
        """Cancel all subscriptions, including auto-save."""
        if self._closed:
            return
        for subscription in list(self._subscriptions):
            subscription.cancel()
        self._closed = True
        logger.debug("Settings store closed")

    def __enter__(self) -> "SettingsStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def load_settings(storage: KeyValueStore, key: KeyLike = StorageKey.APP_SETTINGS) -> AppSettings:
    """Load persisted settings, falling back to defaults.

    Args:
        storage: Key-value store to read from
        key: Storage key for the settings entry

    Returns:
        The stored settings, or the default record if missing or corrupt
    """
    try:
        settings: Optional[AppSettings] = storage.load(key, AppSettings.from_dict)
    except Exception as e:
        logger.warning(f"Failed to load settings, using defaults: {e}")
        settings = None

    if settings is None:
        logger.info("No usable stored settings, using defaults")
        return AppSettings.default()
    return settings
