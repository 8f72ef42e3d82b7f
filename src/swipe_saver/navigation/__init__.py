"""Screen identities and navigation."""

from .coordinator import Coordinator
from .screen import Screen, TAB_SCREENS

__all__ = ["Coordinator", "Screen", "TAB_SCREENS"]
