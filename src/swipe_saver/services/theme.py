"""Theme preference handling."""

from enum import Enum
from typing import Callable
import logging

from ..storage.key_value import KeyValueStore
from ..storage.keys import StorageKey

logger = logging.getLogger(__name__)


class ThemeMode(Enum):
    """Application theme modes."""

    LIGHT = "Light"
    DARK = "Dark"
    SYSTEM = "System"

    @property
    def title(self) -> str:
        return self.value

    @property
    def appearance_mode(self) -> str:
        """Get the matching customtkinter appearance mode."""
        return self.name.lower()


class ThemeService:
    """Reads and writes the theme preference."""

    def __init__(self, storage: KeyValueStore):
        self._storage = storage

    def get_current_theme(self) -> ThemeMode:
        """Get the stored theme, or SYSTEM if none is stored."""
        return self._storage.load(StorageKey.THEME_MODE, ThemeMode) or ThemeMode.SYSTEM

    def set_theme(self, mode: ThemeMode) -> None:
        self._storage.save(StorageKey.THEME_MODE, mode)


class ThemeRepository:
    """Holds the active theme and notifies when it changes."""

    def __init__(self, theme_service: ThemeService):
        self._theme_service = theme_service
        self._current_theme = theme_service.get_current_theme()
        self._on_change: list[Callable[[ThemeMode], None]] = []

    @property
    def current_theme(self) -> ThemeMode:
        return self._current_theme

    def on_change(self, callback: Callable[[ThemeMode], None]) -> None:
        """Register a callback for theme changes.

        Args:
            callback: Function called with the new theme
        """
        if callback not in self._on_change:
            self._on_change.append(callback)

    def set_theme(self, mode: ThemeMode) -> None:
        """Set and persist a new theme.

        Args:
            mode: The theme to switch to
        """
        self._current_theme = mode
        self._theme_service.set_theme(mode)
        logger.info(f"Theme set to {mode.title}")

        for callback in self._on_change:
            try:
                callback(mode)
            except Exception as e:
                logger.error(f"Error in theme change callback: {e}")
