"""Example screen backed by the example repository."""

import customtkinter as ctk

from ...i18n import _
from ...repositories.example import ExampleViewModel
from ...utils.async_helpers import AsyncBridge


class ExampleView(ctk.CTkFrame):
    """Shows whatever the example view model loads."""

    def __init__(self, parent, view_model: ExampleViewModel, async_bridge: AsyncBridge, **kwargs):
        super().__init__(parent, fg_color="transparent", **kwargs)

        self._view_model = view_model
        self._async_bridge = async_bridge

        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text=_("example_title"),
            font=ctk.CTkFont(size=24, weight="bold"),
        ).grid(row=0, column=0, pady=(40, 10))

        self.data_label = ctk.CTkLabel(self, text="", text_color="gray")
        self.data_label.grid(row=1, column=0, pady=5)

        self.refresh_btn = ctk.CTkButton(self, text=_("refresh"), command=self.load)
        self.refresh_btn.grid(row=2, column=0, pady=20)

    def load(self) -> None:
        """Load data in the background and update the labels when done."""
        self.refresh_btn.configure(state="disabled")
        self.data_label.configure(text=_("loading"))
        self._async_bridge.run(
            self._view_model.load_data(),
            on_result=lambda _result: self._show_result(),
            on_error=lambda _error: self._show_result(),
            schedule=self.after,
        )

    def _show_result(self) -> None:
        self.refresh_btn.configure(state="normal")
        if self._view_model.error_message:
            self.data_label.configure(text=self._view_model.error_message, text_color="red")
        else:
            self.data_label.configure(text=self._view_model.data, text_color="gray")
