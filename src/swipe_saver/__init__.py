"""SwipeSaver - application shell with auto-persisted settings."""

from .core.settings_store import SettingsStore
from .models.settings import AppSettings

__all__ = ["AppSettings", "SettingsStore"]
