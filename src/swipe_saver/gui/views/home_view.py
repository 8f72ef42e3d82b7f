"""Home screen."""

import customtkinter as ctk
from typing import Callable

from ...i18n import _
from ...models.settings import AppSettings
from ...navigation.screen import Screen

BROWSER_SCREENS = (Screen.BROWSER_TABS, Screen.BROWSER_HISTORY, Screen.BROWSER_FAVORITES)


class HomeView(ctk.CTkFrame):
    """Greeting, the configured start page and shortcuts to browser screens."""

    def __init__(self, parent, settings: AppSettings, on_open: Callable[[Screen], None], **kwargs):
        super().__init__(parent, fg_color="transparent", **kwargs)

        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text=_("home_welcome"),
            font=ctk.CTkFont(size=24, weight="bold"),
        ).grid(row=0, column=0, pady=(40, 10))

        self.start_page_label = ctk.CTkLabel(self, text="", text_color="gray")
        self.start_page_label.grid(row=1, column=0, pady=5)

        for offset, screen in enumerate(BROWSER_SCREENS):
            ctk.CTkButton(
                self,
                text=_(screen.title_key),
                width=200,
                command=lambda s=screen: on_open(s),
            ).grid(row=2 + offset, column=0, pady=5)

        self.refresh(settings)

    def refresh(self, settings: AppSettings) -> None:
        self.start_page_label.configure(text=_("home_start_page", url=settings.start_page))
