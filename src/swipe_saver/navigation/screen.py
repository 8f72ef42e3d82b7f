"""Screens of the application."""

from enum import Enum


class Screen(Enum):
    """All screens the coordinator can show."""

    HOME = "home"
    EXAMPLE = "example"
    SETTINGS = "settings"
    BROWSER_HISTORY = "browser_history"
    BROWSER_FAVORITES = "browser_favorites"
    BROWSER_TABS = "browser_tabs"

    @property
    def id(self) -> str:
        """Stable identifier, e.g. ``"BrowserHistory"``."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    @property
    def title_key(self) -> str:
        """Translation key for the screen title."""
        return f"screen_{self.value}"


# Screens shown as tabs in the main window, in order
TAB_SCREENS = (Screen.HOME, Screen.EXAMPLE, Screen.SETTINGS)
