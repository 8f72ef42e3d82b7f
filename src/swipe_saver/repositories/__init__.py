"""Data repositories."""

from .example import ExampleRepository, ExampleViewModel

__all__ = ["ExampleRepository", "ExampleViewModel"]
