"""Application services."""

from .theme import ThemeMode, ThemeRepository, ThemeService

__all__ = ["ThemeMode", "ThemeService", "ThemeRepository"]
