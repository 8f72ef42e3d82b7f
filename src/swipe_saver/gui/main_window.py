"""Main application window."""

import customtkinter as ctk
from typing import TYPE_CHECKING, Callable, Optional
import logging

from ..app_state import ViewState
from ..core.events import Event, EventType
from ..i18n import _
from ..navigation.screen import Screen, TAB_SCREENS
from ..repositories.example import ExampleViewModel
from .views import ExampleView, HomeView, OnboardingView, SettingsView, SplashView

if TYPE_CHECKING:
    from ..app import SwipeSaverApp

logger = logging.getLogger(__name__)


class MainWindow(ctk.CTk):
    """Window hosting splash, onboarding and the tabbed main view."""

    def __init__(
        self,
        app: "SwipeSaverApp",
        on_close: Optional[Callable] = None,
        **kwargs,
    ):
        """Initialize the main window.

        Args:
            app: The main application instance
            on_close: Callback when window is closed
            **kwargs: Additional arguments for CTk
        """
        super().__init__(**kwargs)

        self.app = app
        self._on_close = on_close
        self._content: Optional[ctk.CTkFrame] = None
        self._views: dict[Screen, ctk.CTkFrame] = {}
        self._tab_bar: Optional[ctk.CTkSegmentedButton] = None

        self._setup_window()
        self._bind_events()
        self.show_view_state(app.container.app_state.view_state)

    def _setup_window(self) -> None:
        """Configure the window."""
        self.title(_("app_title"))

        width, height = 420, 760
        x = (self.winfo_screenwidth() - width) // 2
        y = (self.winfo_screenheight() - height) // 2
        self.geometry(f"{width}x{height}+{x}+{y}")
        self.minsize(360, 560)

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        try:
            self.iconbitmap("assets/icon.ico")
        except Exception:
            logger.debug("No window icon available")

    def _bind_events(self) -> None:
        """Bind window and application events."""
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

        bus = self.app.container.event_bus
        bus.subscribe(EventType.VIEW_STATE_CHANGED, self._on_view_state_changed)
        bus.subscribe(EventType.SETTINGS_CHANGED, self._on_settings_changed)
        bus.subscribe(EventType.THEME_CHANGED, self._on_theme_changed)
        bus.subscribe(EventType.SCREEN_PRESENTED, self._on_screen_changed)
        bus.subscribe(EventType.SCREEN_DISMISSED, self._on_screen_changed)

    def _replace_content(self, frame: ctk.CTkFrame) -> None:
        if self._content is not None:
            self._content.destroy()
        self._content = frame
        frame.grid(row=0, column=0, sticky="nsew")

    # View states --------------------------------------------------------

    def show_view_state(self, state: ViewState) -> None:
        """Show the top-level view for a state."""
        self._views.clear()
        self._tab_bar = None
        if state == ViewState.SPLASH:
            self._replace_content(SplashView(self))
        elif state == ViewState.ONBOARDING:
            self._replace_content(
                OnboardingView(self, on_complete=self.app.container.app_state.onboarding_completed)
            )
        else:
            self._show_main()

    def _show_main(self) -> None:
        container = ctk.CTkFrame(self, fg_color="transparent", corner_radius=0)
        container.grid_rowconfigure(0, weight=1)
        container.grid_columnconfigure(0, weight=1)
        self._replace_content(container)

        self._tab_names = {_(screen.title_key): screen for screen in TAB_SCREENS}
        self._tab_bar = ctk.CTkSegmentedButton(
            container,
            values=list(self._tab_names),
            command=self._on_tab_selected,
        )
        self._tab_bar.grid(row=1, column=0, sticky="ew", padx=10, pady=10)

        self._main_container = container
        self._show_screen(self.app.container.coordinator.visible_screen)

    def _build_screen(self, screen: Screen) -> ctk.CTkFrame:
        container = self.app.container
        if screen == Screen.HOME:
            return HomeView(
                self._main_container,
                container.app_interactor.app_settings,
                on_open=container.coordinator.push,
            )
        if screen == Screen.EXAMPLE:
            view = ExampleView(
                self._main_container,
                ExampleViewModel(container.example_repository),
                self.app.async_bridge,
            )
            view.load()
            return view
        if screen == Screen.SETTINGS:
            return SettingsView(self._main_container, container.app_interactor)
        return self._build_placeholder(screen)

    def _build_placeholder(self, screen: Screen) -> ctk.CTkFrame:
        frame = ctk.CTkFrame(self._main_container, fg_color="transparent")
        frame.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(frame, text=_(screen.title_key), font=ctk.CTkFont(size=20, weight="bold")).grid(
            row=0, column=0, pady=(40, 10)
        )
        ctk.CTkButton(frame, text="←", width=40, command=self._go_back).grid(row=1, column=0)
        return frame

    def _show_screen(self, screen: Screen) -> None:
        for view in self._views.values():
            view.grid_forget()

        view = self._views.get(screen)
        if view is None:
            view = self._build_screen(screen)
            self._views[screen] = view
        view.grid(row=0, column=0, sticky="nsew")

        if self._tab_bar is not None:
            self._tab_bar.set(_(self.app.container.coordinator.selected_tab.title_key))

    def _go_back(self) -> None:
        coordinator = self.app.container.coordinator
        if coordinator.presented_screen is not None:
            coordinator.dismiss()
        else:
            coordinator.pop()

    # Event handlers -------------------------------------------------------

    def _on_tab_selected(self, name: str) -> None:
        screen = self._tab_names.get(name)
        if screen is not None:
            self.app.container.coordinator.select_tab(screen)

    def _on_screen_changed(self, event: Event) -> None:
        if self._tab_bar is not None and event.data is not None:
            self._show_screen(event.data)

    def _on_view_state_changed(self, event: Event) -> None:
        self.show_view_state(event.data)

    def _on_settings_changed(self, event: Event) -> None:
        for view in self._views.values():
            if isinstance(view, (HomeView, SettingsView)):
                view.refresh(event.data)

    def _on_theme_changed(self, event: Event) -> None:
        ctk.set_appearance_mode(event.data.appearance_mode)

    def _handle_close(self) -> None:
        """Handle window close event."""
        if self._on_close:
            self._on_close()
        else:
            self.destroy()
