"""Splash and onboarding screens."""

import customtkinter as ctk
from typing import Callable

from ...i18n import _


class SplashView(ctk.CTkFrame):
    """Shown while the start-up checks run."""

    def __init__(self, parent, **kwargs):
        super().__init__(parent, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure((0, 3), weight=1)

        ctk.CTkLabel(
            self,
            text=_("app_title"),
            font=ctk.CTkFont(size=32, weight="bold"),
        ).grid(row=1, column=0, pady=10)
        ctk.CTkLabel(self, text=_("splash_loading"), text_color="gray").grid(row=2, column=0)


class OnboardingView(ctk.CTkFrame):
    """First-run welcome screen."""

    def __init__(self, parent, on_complete: Callable[[], None], **kwargs):
        super().__init__(parent, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure((0, 4), weight=1)

        ctk.CTkLabel(
            self,
            text=_("onboarding_title"),
            font=ctk.CTkFont(size=24, weight="bold"),
        ).grid(row=1, column=0, pady=10)
        ctk.CTkLabel(self, text=_("onboarding_text"), text_color="gray", wraplength=400).grid(
            row=2, column=0, pady=10
        )
        ctk.CTkButton(
            self,
            text=_("onboarding_continue"),
            height=44,
            command=on_complete,
        ).grid(row=3, column=0, pady=20)
