"""Application settings model."""

from dataclasses import dataclass, fields, replace
from typing import Any


class SettingsDecodeError(ValueError):
    """Raised when a stored settings payload cannot be turned into AppSettings."""


# Attribute name -> key in the persisted JSON object
_WIRE_KEYS = {
    "start_page": "startPage",
    "enable_browser_history": "enableBrowserHistory",
    "notifications_enabled": "notificationsEnabled",
    "language": "language",
    "enable_watermark": "enableWatermark",
    "is_premium_user": "isPremiumUser",
}


@dataclass(frozen=True)
class AppSettings:
    """User preferences with defaults.

    Records are frozen: an edit produces a new record (see ``with_changes``)
    which is then handed to the settings store as a whole.
    """

    # Browser
    start_page: str = "https://startpage.com"
    enable_browser_history: bool = False

    # General
    notifications_enabled: bool = True
    language: str = "en"

    # Video saving
    enable_watermark: bool = True

    # Subscription status
    is_premium_user: bool = False

    def __post_init__(self) -> None:
        # Same exact-type rule as from_dict, so every record survives a reload
        for f in fields(self):
            value = getattr(self, f.name)
            if type(value) is not f.type:
                raise TypeError(
                    f"{f.name} must be {f.type.__name__}, got {type(value).__name__}"
                )

    @classmethod
    def default(cls) -> "AppSettings":
        """Get the default settings record."""
        return cls()

    def with_changes(self, **changes: Any) -> "AppSettings":
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If a field name is unknown or a value has the wrong type
        """
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON object layout."""
        return {_WIRE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "AppSettings":
        """Build settings from a persisted JSON object.

        Every field must be present with the right type; extra keys are ignored.

        Args:
            data: Decoded JSON value

        Returns:
            The settings record

        Raises:
            SettingsDecodeError: If the payload is not a complete settings object
        """
        if not isinstance(data, dict):
            raise SettingsDecodeError(f"Expected an object, got {type(data).__name__}")

        values = {}
        for f in fields(cls):
            wire_key = _WIRE_KEYS[f.name]
            if wire_key not in data:
                raise SettingsDecodeError(f"Missing key: {wire_key}")

            value = data[wire_key]
            # Exact type match: JSON 0/1 must not pass as a bool
            if type(value) is not f.type:
                raise SettingsDecodeError(
                    f"Invalid value for {wire_key}: expected {f.type.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[f.name] = value

        return cls(**values)
