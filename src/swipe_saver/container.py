"""Dependency container: builds and wires every service of the app."""

from pathlib import Path
from typing import Optional
import logging

from .app_state import AppState
from .constants import APP_NAME
from .core.events import EventBus
from .core.settings_store import SettingsStore, load_settings
from .interactors.app_interactor import AppInteractor
from .navigation.coordinator import Coordinator
from .repositories.example import ExampleRepository
from .services.theme import ThemeRepository, ThemeService
from .storage.key_value import BackgroundKeyValueStore, JsonFileKeyValueStore, KeyValueStore

logger = logging.getLogger(__name__)


class AppContainer:
    """Creates all dependencies once, in dependency order.

    Nothing in the app reaches for module-level singletons; components get
    what they need from here through their constructors.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStore] = None,
        config_dir: Optional[Path] = None,
    ):
        """Initialize the container.

        Args:
            storage: Key-value store to use (defaults to the JSON file store,
                written from a background thread)
            config_dir: Directory for the JSON file store
        """
        # Services
        self.storage: KeyValueStore = storage or BackgroundKeyValueStore(
            JsonFileKeyValueStore(app_name=APP_NAME, directory=config_dir)
        )
        self.event_bus = EventBus()
        self.theme_service = ThemeService(self.storage)

        # Settings loaded before anything observes them
        app_settings = load_settings(self.storage)

        # Repositories
        self.theme_repository = ThemeRepository(self.theme_service)
        self.example_repository = ExampleRepository()

        # Interactors
        self.settings_store = SettingsStore(app_settings, self.storage)
        self.app_interactor = AppInteractor(
            self.settings_store,
            self.theme_repository,
            self.event_bus,
        )

        # App state and navigation
        self.app_state = AppState(self.storage, self.event_bus)
        self.coordinator = Coordinator(self.event_bus)

        logger.info("Dependencies initialized")

    def close(self) -> None:
        """Tear down the settings subscription and flush pending writes."""
        self.app_interactor.close()
        close_storage = getattr(self.storage, "close", None)
        if callable(close_storage):
            close_storage()
