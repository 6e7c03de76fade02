"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сессией (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; состояние и пересчёт вынесены в `FilterSession`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from photofilter.models.filter_kind import FilterKind
from photofilter.services.picker_service import PickerService
from photofilter.services.session_service import FilterSession, SessionState
from photofilter.ui.bottom_bar import BottomBar
from photofilter.ui.image_viewer import ImageViewer
from photofilter.ui.sidebar import Sidebar
from photofilter.utils.logging import get_logger

_LOGGER = get_logger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Выбор изображения через `PickerService`.
    - Применение фильтра и сохранение через `FilterSession`.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    session: FilterSession
    picker: PickerService = field(default_factory=PickerService)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_filter_change = self._handle_filter_change
        self.bottom.on_save = self._handle_save

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        picked = self.picker.request_image().result()
        if not self.session.accept_pick(picked):
            return
        self.sidebar.set_image_info(self.session.source)
        # новый снимок показывается без фильтра
        self.sidebar.set_filter_value(None)
        self.sidebar.set_filters_enabled(True)
        self._show_processed()

    def _handle_filter_change(self, filter_kind: Optional[FilterKind]) -> None:
        if self.session.state is SessionState.NO_IMAGE:
            return
        self.session.select_filter(filter_kind)
        _LOGGER.debug("Фильтр: %s", filter_kind.value if filter_kind else "нет")
        self._show_processed()

    def _handle_save(self) -> None:
        if not self.session.export():
            return
        self.bottom.set_status(f"Отправлено в библиотеку: {self.session.export_service.library_dir}")

    # ---- Helpers ----
    def _show_processed(self) -> None:
        self.viewer.set_image(self.session.processed)
        self.bottom.set_save_enabled(self.session.processed is not None)
        source = self.session.source
        if source is None:
            return
        label = self.session.selected_filter.label if self.session.selected_filter else "без фильтра"
        self.bottom.set_status(f"{source.path.name}: {source.width}×{source.height}, {label}")
