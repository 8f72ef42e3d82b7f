"""Interactors holding application business logic."""

from .app_interactor import AppInteractor

__all__ = ["AppInteractor"]
