"""Local key-value persistence."""

import copy
import json
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, TypeVar, Union
import logging

from .keys import StorageKey

logger = logging.getLogger(__name__)

T = TypeVar("T")

KeyLike = Union[StorageKey, str]

CONFIG_DIR_ENV = "SWIPESAVER_CONFIG_DIR"


def _raw_key(key: KeyLike) -> str:
    return key.key if isinstance(key, StorageKey) else key


def encode_value(value: Any) -> Any:
    """Convert a value into something json can serialize.

    Objects exposing ``to_dict()`` (like AppSettings) are encoded through it,
    enums through their value.
    """
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    return value


class KeyValueStore(Protocol):
    """Durable key/value persistence used by the rest of the app."""

    def save(self, key: KeyLike, value: Any) -> None:
        ...

    def load(self, key: KeyLike, decode: Optional[Callable[[Any], T]] = None) -> Optional[T]:
        ...

    def delete(self, key: KeyLike) -> None:
        ...


class JsonFileKeyValueStore:
    """Key-value store backed by a single JSON document on disk.

    Every entry lives in ``settings.json`` inside the platform config
    directory. Writes go to a temporary file first and are then moved into
    place, so a crash never leaves a half-written document behind.
    """

    def __init__(
        self,
        app_name: str = "SwipeSaver",
        directory: Optional[Path] = None,
        filename: str = "settings.json",
    ):
        """Initialize the store.

        Args:
            app_name: Name of the application (used for config directory)
            directory: Explicit storage directory (overrides the platform default)
            filename: Name of the JSON document
        """
        self._app_name = app_name
        self._directory = Path(directory) if directory else self._get_config_dir()
        self._file = self._directory / filename
        self._lock = threading.Lock()
        self._data: Optional[dict[str, Any]] = None

    def _get_config_dir(self) -> Path:
        """Get the appropriate config directory for the platform."""
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            return Path(override)

        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        else:  # Linux/Mac
            base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

        return base / self._app_name

    @property
    def path(self) -> Path:
        """Get the path of the backing JSON document."""
        return self._file

    def _read(self) -> dict[str, Any]:
        """Read the document from disk once, caching the result.

        A corrupt document is moved aside and treated as empty. An I/O error
        leaves the file alone, caches nothing and is raised, so the caller
        never writes over a document it could not read.

        Raises:
            OSError: If the document exists but cannot be read
        """
        if self._data is not None:
            return self._data

        if not self._file.exists():
            self._data = {}
            return self._data

        try:
            with open(self._file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            logger.error(f"Failed to read storage from {self._file}: {e}")
            raise
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            data = None
            logger.warning(f"Storage is not valid JSON: {e}")

        if not isinstance(data, dict):
            logger.warning("Storage is corrupt, starting empty")
            self._backup_corrupt_file()
            self._data = {}
            return self._data

        self._data = data
        logger.info(f"Storage loaded from {self._file}")
        return self._data

    def _backup_corrupt_file(self) -> None:
        backup = self._file.with_name(self._file.name + ".bak")
        try:
            os.replace(self._file, backup)
            logger.warning(f"Corrupt storage moved to {backup}")
        except OSError as e:
            logger.error(f"Failed to back up corrupt storage: {e}")

    def _write(self, data: dict[str, Any]) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        tmp = self._file.with_suffix(self._file.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        os.replace(tmp, self._file)

    def save(self, key: KeyLike, value: Any) -> None:
        """Save a value under a key.

        Errors are logged, never raised.

        Args:
            key: Storage key
            value: JSON-serializable value, or an object with ``to_dict()``
        """
        raw_key = _raw_key(key)
        with self._lock:
            try:
                encoded = encode_value(value)
                data = dict(self._read())
                data[raw_key] = encoded
                # Fail on unserializable values before touching the file
                json.dumps(encoded)
                self._write(data)
                self._data = data
                logger.info(f"Saved '{raw_key}'")
            except (TypeError, ValueError, OSError) as e:
                logger.error(f"Error saving '{raw_key}': {e}")

    def load(self, key: KeyLike, decode: Optional[Callable[[Any], T]] = None) -> Optional[Any]:
        """Load a value.

        Args:
            key: Storage key
            decode: Optional callable turning the raw JSON value into an object

        Returns:
            The (decoded) value, or None if missing, unreadable or undecodable.
            The value is a copy; mutating it does not touch the store.
        """
        raw_key = _raw_key(key)
        with self._lock:
            try:
                data = self._read()
            except OSError as e:
                logger.warning(f"Error loading '{raw_key}': {e}")
                return None
            if raw_key not in data:
                logger.info(f"No data for '{raw_key}'")
                return None
            raw = copy.deepcopy(data[raw_key])

        if decode is None:
            return raw

        try:
            value = decode(raw)
        except (TypeError, ValueError, KeyError) as e:
            logger.warning(f"Error loading '{raw_key}': {e}")
            return None

        logger.info(f"Loaded '{raw_key}'")
        return value

    def delete(self, key: KeyLike) -> None:
        """Remove a key.

        Args:
            key: Storage key
        """
        raw_key = _raw_key(key)
        with self._lock:
            try:
                data = dict(self._read())
                if raw_key not in data:
                    return
                del data[raw_key]
                self._write(data)
                self._data = data
                logger.info(f"Deleted '{raw_key}'")
            except OSError as e:
                logger.error(f"Error deleting '{raw_key}': {e}")


class BackgroundKeyValueStore:
    """Runs writes of another store on a single worker thread.

    ``save`` and ``delete`` return immediately; the queued writes execute in
    call order. ``load`` waits for pending writes so it always sees the last
    write for a key.
    """

    def __init__(self, inner: KeyValueStore):
        self._inner = inner
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="KeyValueWriter")
        self._pending: Optional[Future] = None
        self._closed = False

    def _submit(self, func: Callable, *args) -> None:
        if self._closed:
            logger.warning("Background store closed, dropping write")
            return

        future = self._executor.submit(func, *args)
        future.add_done_callback(self._log_failure)
        self._pending = future

    @staticmethod
    def _log_failure(future: Future) -> None:
        error = future.exception()
        if error is not None:
            logger.error(f"Background write failed: {error}")

    def save(self, key: KeyLike, value: Any) -> None:
        self._submit(self._inner.save, key, value)

    def delete(self, key: KeyLike) -> None:
        self._submit(self._inner.delete, key)

    def load(self, key: KeyLike, decode: Optional[Callable[[Any], T]] = None) -> Optional[Any]:
        self.flush()
        return self._inner.load(key, decode)

    def flush(self, timeout: Optional[float] = None) -> None:
        """Wait until every queued write has run.

        Raises:
            concurrent.futures.TimeoutError: If the writes did not finish in time
        """
        pending = self._pending
        if pending is None:
            return
        try:
            pending.result(timeout=timeout)
        except FutureTimeoutError:
            logger.warning(f"Pending writes did not finish within {timeout}s")
            raise
        except Exception as e:
            # Already logged by the done callback
            logger.debug(f"Flushed write had failed: {e}")

    def close(self) -> None:
        """Drain the queue and stop the worker thread."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=True)
        logger.info("Background store closed")

    def __enter__(self) -> "BackgroundKeyValueStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
