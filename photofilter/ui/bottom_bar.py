from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=56, **kwargs)

        # callbacks
        self.on_save: Optional[Callable[[], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)  # status stretches

        self._status_value = ctk.StringVar(value="Выберите изображение")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_value, anchor="w")
        self._status_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Сохранить", width=120, command=self._on_save_click)
        self._save_btn.grid(row=0, column=1, padx=(6, 10), pady=8, sticky="e")
        self.set_save_enabled(False)

    # public API (sync from controller)
    def set_status(self, text: str) -> None:
        self._status_value.set(text)

    def set_save_enabled(self, enabled: bool) -> None:
        self._save_btn.configure(state="normal" if enabled else "disabled")

    # events
    def _on_save_click(self) -> None:
        if self.on_save:
            self.on_save()
