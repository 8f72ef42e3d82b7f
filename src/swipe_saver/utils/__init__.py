"""Utility helpers."""

from .async_helpers import AsyncBridge

__all__ = ["AsyncBridge"]
