"""customtkinter user interface."""
