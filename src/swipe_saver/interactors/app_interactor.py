"""Application-level business logic."""

import asyncio
from typing import Optional
import logging

from ..core.events import Event, EventBus, EventType
from ..core.settings_store import SettingsStore, Subscription
from ..models.settings import AppSettings
from ..services.theme import ThemeMode, ThemeRepository

logger = logging.getLogger(__name__)


class AppInteractor:
    """Main application interactor.

    Owns the settings store and republishes every settings change on the
    event bus so views do not need to hold on to the store themselves.
    """

    def __init__(
        self,
        settings_store: SettingsStore,
        theme_repository: ThemeRepository,
        event_bus: EventBus,
    ):
        self._settings_store = settings_store
        self._theme_repository = theme_repository
        self._event_bus = event_bus
        self._seen_initial = False

        self._subscription: Optional[Subscription] = settings_store.subscribe(
            self._on_settings_changed
        )
        theme_repository.on_change(self._on_theme_changed)

    @property
    def settings_store(self) -> SettingsStore:
        return self._settings_store

    @property
    def app_settings(self) -> AppSettings:
        """Get the current settings."""
        return self._settings_store.current()

    @app_settings.setter
    def app_settings(self, settings: AppSettings) -> None:
        self._settings_store.replace(settings)

    @property
    def theme_repository(self) -> ThemeRepository:
        return self._theme_repository

    def update_settings(self, **changes) -> AppSettings:
        """Change some settings fields.

        Args:
            **changes: Field names and new values

        Returns:
            The new settings record
        """
        return self._settings_store.update(**changes)

    def set_theme(self, mode: ThemeMode) -> None:
        self._theme_repository.set_theme(mode)

    async def app_check(self) -> None:
        """Run start-up checks before the main UI is shown."""
        logger.info("App check started...")
        # Yield once so callers can schedule this like any other coroutine
        await asyncio.sleep(0)
        logger.info(f"App check finished (language={self.app_settings.language})")

    def _on_settings_changed(self, settings: AppSettings) -> None:
        # The subscription replays the current value first; only real changes are published
        if not self._seen_initial:
            self._seen_initial = True
            return
        self._event_bus.publish(Event(EventType.SETTINGS_CHANGED, settings))

    def _on_theme_changed(self, mode: ThemeMode) -> None:
        self._event_bus.publish(Event(EventType.THEME_CHANGED, mode))

    def close(self) -> None:
        """Release the settings subscription and the store."""
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self._settings_store.close()
