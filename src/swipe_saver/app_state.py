"""Global application state."""

from enum import Enum
import logging

from .core.events import Event, EventBus, EventType
from .storage.key_value import KeyValueStore
from .storage.keys import StorageKey

logger = logging.getLogger(__name__)


def _as_bool(value) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected bool, got {type(value).__name__}")
    return value


class ViewState(Enum):
    """Top-level views the window can show."""

    SPLASH = "splash"
    ONBOARDING = "onboarding"
    MAIN = "main"


class AppState:
    """Tracks which top-level view is shown and the first-run flags.

    The app always starts on the splash view; ``finish_app_check`` moves on to
    onboarding or straight to the main view depending on the stored flags.
    """

    def __init__(self, storage: KeyValueStore, event_bus: EventBus):
        self._storage = storage
        self._event_bus = event_bus
        self._view_state = ViewState.SPLASH
        self.is_show_paywall = False
        self.is_first_load = self._load_flag(StorageKey.IS_FIRST_LOAD, default=True)

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def is_onboarding_shown(self) -> bool:
        return self._load_flag(StorageKey.ONBOARDING_COMPLETED, default=False)

    def _load_flag(self, key: StorageKey, default: bool) -> bool:
        value = self._storage.load(key, _as_bool)
        return default if value is None else value

    def _set_view_state(self, state: ViewState) -> None:
        if state == self._view_state:
            return
        self._view_state = state
        logger.info(f"View state: {state.value}")
        self._event_bus.publish(Event(EventType.VIEW_STATE_CHANGED, state))

    def finish_app_check(self) -> None:
        """Leave the splash view once start-up checks are done."""
        self.is_first_load = self._load_flag(StorageKey.IS_FIRST_LOAD, default=True)
        if self.is_onboarding_shown:
            self._set_view_state(ViewState.MAIN)
        else:
            self._set_view_state(ViewState.ONBOARDING)

    def onboarding_completed(self) -> None:
        """Persist that onboarding is done and show the main view."""
        self._storage.save(StorageKey.ONBOARDING_COMPLETED, True)
        self._storage.save(StorageKey.IS_FIRST_LOAD, False)
        self.is_first_load = False
        self._event_bus.publish(Event(EventType.ONBOARDING_COMPLETED))
        self._set_view_state(ViewState.MAIN)
