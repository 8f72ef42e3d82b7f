"""Type-safe keys for the key-value store."""

from enum import Enum


class StorageKey(Enum):
    """Keys of the entries kept in local storage."""

    APP_SETTINGS = "appSettings"
    ONBOARDING_COMPLETED = "onboardingCompleted"
    IS_FIRST_LOAD = "isFirstLoad"
    THEME_MODE = "themeMode"

    @property
    def key(self) -> str:
        """Get the raw string key."""
        return self.value
