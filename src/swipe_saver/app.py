"""Main application orchestrator."""

import customtkinter as ctk
from typing import Optional
import logging
import os
import sys

from .constants import APP_NAME, LOG_LEVEL_ENV
from .container import AppContainer
from .gui.main_window import MainWindow
from .i18n import init_translator
from .utils.async_helpers import AsyncBridge

logger = logging.getLogger(__name__)


class SwipeSaverApp:
    """Main application class that wires the container to the window."""

    def __init__(self, container: Optional[AppContainer] = None):
        """Initialize the application.

        Args:
            container: Prebuilt dependency container (built from disk if None)
        """
        self._setup_logging()

        logger.info(f"Initializing {APP_NAME}")

        self.container = container or AppContainer()
        self.async_bridge = AsyncBridge()

        settings = self.container.app_interactor.app_settings
        init_translator(settings.language)

        ctk.set_appearance_mode(self.container.theme_repository.current_theme.appearance_mode)
        ctk.set_default_color_theme("blue")

        self.window = MainWindow(self, on_close=self.quit)

    def _setup_logging(self) -> None:
        """Configure logging."""
        level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        logging.basicConfig(
            level=getattr(logging, level_name, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.StreamHandler(sys.stdout),
            ],
        )

    def run(self) -> None:
        """Start the application."""
        logger.info(f"Starting {APP_NAME}")

        self.async_bridge.start()
        self.async_bridge.run(
            self.container.app_interactor.app_check(),
            on_result=lambda _result: self.container.app_state.finish_app_check(),
            on_error=lambda _error: self.container.app_state.finish_app_check(),
            schedule=self.window.after,
        )

        self.window.mainloop()

    def _cleanup(self) -> None:
        """Release resources; pending settings writes are flushed."""
        logger.info("Cleaning up...")

        try:
            self.async_bridge.stop()
        except Exception as e:
            logger.error(f"Error stopping async bridge: {e}")

        try:
            self.container.close()
        except Exception as e:
            logger.error(f"Error closing container: {e}")

    def quit(self) -> None:
        """Quit the application."""
        logger.info("Quitting application")

        self._cleanup()

        try:
            self.window.quit()
            self.window.destroy()
        except Exception as e:
            logger.error(f"Error destroying window: {e}")


def main():
    """Application entry point."""
    app = SwipeSaverApp()
    app.run()


if __name__ == "__main__":
    main()
