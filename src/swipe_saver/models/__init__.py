"""Data models."""

from .settings import AppSettings, SettingsDecodeError

__all__ = ["AppSettings", "SettingsDecodeError"]
