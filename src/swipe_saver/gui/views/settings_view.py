"""Settings screen."""

import customtkinter as ctk
from typing import TYPE_CHECKING
import logging
import webbrowser

from ...constants import PRIVACY_POLICY_URL, TERMS_OF_USE_URL, app_version
from ...i18n import _, get_available_languages
from ...models.settings import AppSettings
from ...services.theme import ThemeMode

if TYPE_CHECKING:
    from ...interactors.app_interactor import AppInteractor

logger = logging.getLogger(__name__)


class SettingsView(ctk.CTkScrollableFrame):
    """Subscription status and the user preferences.

    Every control writes straight through the interactor; the store takes
    care of saving.
    """

    def __init__(self, parent, interactor: "AppInteractor", **kwargs):
        super().__init__(parent, **kwargs)

        self._interactor = interactor
        settings = interactor.app_settings

        languages = get_available_languages()
        self._lang_by_name = {name: code for code, name in languages}
        self._name_by_lang = {code: name for code, name in languages}

        self.start_page_var = ctk.StringVar(value=settings.start_page)
        self.history_var = ctk.BooleanVar(value=settings.enable_browser_history)
        self.notifications_var = ctk.BooleanVar(value=settings.notifications_enabled)
        self.watermark_var = ctk.BooleanVar(value=settings.enable_watermark)
        self.language_var = ctk.StringVar(value=self._language_name(settings.language))
        self.theme_var = ctk.StringVar(value=interactor.theme_repository.current_theme.value)

        self.grid_columnconfigure(0, weight=1)
        self._setup_subscription_section()
        self._setup_settings_section()
        self._setup_footer()

    def _language_name(self, code: str) -> str:
        return self._name_by_lang.get(code, code)

    def _section(self, row: int, title_key: str) -> ctk.CTkFrame:
        section = ctk.CTkFrame(self)
        section.grid(row=row, column=0, sticky="ew", padx=10, pady=10)
        section.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            section,
            text=_(title_key),
            font=ctk.CTkFont(size=14, weight="bold"),
        ).grid(row=0, column=0, columnspan=3, sticky="w", padx=10, pady=(10, 5))
        return section

    def _setup_subscription_section(self) -> None:
        section = self._section(0, "section_subscription")

        ctk.CTkLabel(section, text=_("subscription_status")).grid(
            row=1, column=0, sticky="w", padx=10, pady=(0, 10)
        )
        self.status_label = ctk.CTkLabel(section, text="", text_color="gray")
        self.status_label.grid(row=1, column=2, sticky="e", padx=10, pady=(0, 10))
        self._update_status(self._interactor.app_settings)

    def _setup_settings_section(self) -> None:
        section = self._section(1, "section_settings")

        # Start page
        ctk.CTkLabel(section, text=_("start_page")).grid(row=1, column=0, sticky="w", padx=10, pady=5)
        entry = ctk.CTkEntry(section, textvariable=self.start_page_var)
        entry.grid(row=1, column=1, sticky="ew", padx=5, pady=5)
        entry.bind("<Return>", lambda _event: self._apply_start_page())
        ctk.CTkButton(section, text=_("apply"), width=80, command=self._apply_start_page).grid(
            row=1, column=2, padx=10, pady=5
        )

        # Toggles
        toggles = [
            ("enable_browser_history", "enable_browser_history", self.history_var),
            ("notifications", "notifications_enabled", self.notifications_var),
            ("enable_watermark", "enable_watermark", self.watermark_var),
        ]
        for offset, (label_key, field, var) in enumerate(toggles):
            ctk.CTkSwitch(
                section,
                text=_(label_key),
                variable=var,
                command=lambda f=field, v=var: self._set_field(f, v.get()),
            ).grid(row=2 + offset, column=0, columnspan=3, sticky="w", padx=10, pady=5)

        # Language
        ctk.CTkLabel(section, text=_("language")).grid(row=5, column=0, sticky="w", padx=10, pady=5)
        ctk.CTkOptionMenu(
            section,
            variable=self.language_var,
            values=list(self._lang_by_name),
            command=self._on_language_selected,
            width=160,
        ).grid(row=5, column=1, sticky="w", padx=5, pady=5)
        ctk.CTkLabel(
            section,
            text=_("language_restart_note"),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        ).grid(row=5, column=2, sticky="e", padx=10, pady=5)

        # Theme
        ctk.CTkLabel(section, text=_("theme")).grid(row=6, column=0, sticky="w", padx=10, pady=(5, 10))
        theme_options = ctk.CTkFrame(section, fg_color="transparent")
        theme_options.grid(row=6, column=1, columnspan=2, sticky="w", padx=5, pady=(5, 10))
        for mode in ThemeMode:
            ctk.CTkRadioButton(
                theme_options,
                text=_(f"theme_{mode.appearance_mode}"),
                variable=self.theme_var,
                value=mode.value,
                command=self._on_theme_selected,
            ).pack(side="left", padx=5)

    def _setup_footer(self) -> None:
        links = ctk.CTkFrame(self, fg_color="transparent")
        links.grid(row=2, column=0, pady=(10, 0))
        for label_key, url in [("privacy_policy", PRIVACY_POLICY_URL), ("terms_of_use", TERMS_OF_USE_URL)]:
            ctk.CTkButton(
                links,
                text=_(label_key),
                fg_color="transparent",
                text_color=("gray20", "gray80"),
                command=lambda u=url: webbrowser.open(u),
            ).pack(side="left", padx=5)

        ctk.CTkLabel(
            self,
            text=_("version", version=app_version()),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        ).grid(row=3, column=0, pady=10)

    def _set_field(self, field: str, value) -> None:
        self._interactor.update_settings(**{field: value})

    def _apply_start_page(self) -> None:
        url = self.start_page_var.get().strip()
        if url and url != self._interactor.app_settings.start_page:
            self._set_field("start_page", url)

    def _on_language_selected(self, name: str) -> None:
        code = self._lang_by_name.get(name)
        if code:
            self._set_field("language", code)
            logger.info(f"Language set to '{code}', applies after restart")

    def _on_theme_selected(self) -> None:
        mode = ThemeMode(self.theme_var.get())
        self._interactor.set_theme(mode)

    def _update_status(self, settings: AppSettings) -> None:
        key = "subscription_active" if settings.is_premium_user else "subscription_inactive"
        self.status_label.configure(text=_(key))

    def refresh(self, settings: AppSettings) -> None:
        """Show settings that were changed elsewhere.

        Args:
            settings: The new settings
        """
        self.start_page_var.set(settings.start_page)
        self.history_var.set(settings.enable_browser_history)
        self.notifications_var.set(settings.notifications_enabled)
        self.watermark_var.set(settings.enable_watermark)
        self.language_var.set(self._language_name(settings.language))
        self._update_status(settings)
