"""Core modules for SwipeSaver."""

from .events import EventBus, Event, EventType
from .settings_store import SettingsStore, Subscription, load_settings

__all__ = ["EventBus", "Event", "EventType", "SettingsStore", "Subscription", "load_settings"]
