"""Navigation coordinator."""

from typing import Optional
import logging

from ..core.events import Event, EventBus, EventType
from .screen import Screen, TAB_SCREENS

logger = logging.getLogger(__name__)


class Coordinator:
    """Keeps track of navigation state.

    There is a push stack on top of the selected tab and one modal slot for
    full-screen presentations. Every change is published on the event bus so
    the window can rebuild its content.
    """

    def __init__(self, event_bus: EventBus):
        self._event_bus = event_bus
        self._selected_tab = TAB_SCREENS[0]
        self._stack: list[Screen] = []
        self._presented: Optional[Screen] = None

    @property
    def selected_tab(self) -> Screen:
        return self._selected_tab

    @property
    def stack(self) -> list[Screen]:
        """Get a copy of the push stack."""
        return list(self._stack)

    @property
    def presented_screen(self) -> Optional[Screen]:
        return self._presented

    @property
    def visible_screen(self) -> Screen:
        """Get the screen currently on top."""
        if self._presented is not None:
            return self._presented
        if self._stack:
            return self._stack[-1]
        return self._selected_tab

    def select_tab(self, screen: Screen) -> None:
        """Switch to a tab, clearing the push stack.

        Raises:
            ValueError: If the screen is not a tab
        """
        if screen not in TAB_SCREENS:
            raise ValueError(f"{screen.id} is not a tab")
        self._selected_tab = screen
        self._stack.clear()
        self._publish(EventType.SCREEN_PRESENTED)

    def push(self, screen: Screen) -> None:
        self._stack.append(screen)
        logger.debug(f"Pushed {screen.id}")
        self._publish(EventType.SCREEN_PRESENTED)

    def pop(self) -> Optional[Screen]:
        """Pop the top screen, if any."""
        if not self._stack:
            return None
        screen = self._stack.pop()
        self._publish(EventType.SCREEN_DISMISSED)
        return screen

    def pop_to_root(self) -> None:
        if self._stack:
            self._stack.clear()
            self._publish(EventType.SCREEN_DISMISSED)

    def present(self, screen: Screen) -> None:
        """Show a screen as a full-screen cover."""
        self._presented = screen
        self._publish(EventType.SCREEN_PRESENTED)

    def dismiss(self) -> None:
        if self._presented is None:
            return
        self._presented = None
        self._publish(EventType.SCREEN_DISMISSED)

    def _publish(self, event_type: EventType) -> None:
        self._event_bus.publish(Event(event_type, self.visible_screen))
