"""Storage and persistence layer."""

from .keys import StorageKey
from .key_value import BackgroundKeyValueStore, JsonFileKeyValueStore, KeyValueStore

__all__ = ["StorageKey", "KeyValueStore", "JsonFileKeyValueStore", "BackgroundKeyValueStore"]
