"""Боковая панель: открытие файла, информация об изображении, выбор фильтра.

Принципы:
- SRP: управляет только UI, не содержит алгоритмов.
- ISP: события наружу через `on_*`, синхронизация состояния через `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from photofilter.models.filter_kind import FilterKind
from photofilter.models.image_model import ImageData

NO_FILTER_LABEL = "Нет"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: файл, информация, фильтр."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=260, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_filter_change: Optional[Callable[[Optional[FilterKind]], None]] = None

        # Controls
        self._title = ctk.CTkLabel(self, text="Изображение", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Выбрать изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=240, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=6, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Filters
        self._filter_title = ctk.CTkLabel(self, text="Фильтр", font=ctk.CTkFont(size=16, weight="bold"))
        self._filter_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        self._filter_value = ctk.StringVar(value=NO_FILTER_LABEL)
        self._filter_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._filter_frame.grid(row=8, column=0, padx=8, pady=(0, 8), sticky="ew")

        labels = [NO_FILTER_LABEL] + [kind.label for kind in FilterKind]
        self._filter_buttons = []
        for row, label in enumerate(labels):
            rb = ctk.CTkRadioButton(
                self._filter_frame,
                text=label,
                variable=self._filter_value,
                value=label,
                command=self._emit_filter_change,
            )
            rb.grid(row=row, column=0, padx=6, pady=2, sticky="w")
            self._filter_buttons.append(rb)

        # filler
        self.grid_rowconfigure(99, weight=1)
        self.set_filters_enabled(False)

    # ---- Public API ----
    def set_image_info(self, image_data: Optional[ImageData]) -> None:
        if image_data is None:
            for var in (self._path_val, self._size_val, self._dims_val, self._mode_val):
                var.set("—")
            return
        self._path_val.set(f"Файл: {image_data.path}")
        self._size_val.set(f"Размер: {self._format_size(image_data.size_bytes)}")
        self._dims_val.set(f"Разрешение: {image_data.width}×{image_data.height}")
        self._mode_val.set(f"Режим: {image_data.mode}")

    def set_filter_value(self, filter_kind: Optional[FilterKind]) -> None:
        self._filter_value.set(filter_kind.label if filter_kind is not None else NO_FILTER_LABEL)

    def set_filters_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        for rb in self._filter_buttons:
            rb.configure(state=state)

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_filter_change(self) -> None:
        if self.on_filter_change:
            self.on_filter_change(FilterKind.parse(self._filter_value.get()))

    # ---- Helpers ----
    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**4)
        return f"{value:.1f} ГБ"
