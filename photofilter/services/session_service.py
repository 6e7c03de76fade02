"""Состояние сессии: исходное изображение, выбранный фильтр, результат.

Принципы:
- SRP: хранит три слота состояния UI и пересчитывает результат; о виджетах не знает.
- Результат всегда пересчитывается целиком из исходного изображения.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from PIL import Image

from photofilter.models.filter_kind import FilterKind
from photofilter.models.image_model import ImageData
from photofilter.services.export_service import ExportService
from photofilter.services.filter_service import FilterService


class SessionState(str, Enum):
    NO_IMAGE = "no_image"
    IMAGE_SELECTED = "image_selected"
    FILTER_APPLIED = "filter_applied"


@dataclass
class FilterSession:
    """Слоты состояния UI и переходы между ними.

    NoImage -> ImageSelected -> (FilterApplied)* ; новый выбор изображения
    сбрасывает фильтр и показывает оригинал.
    """
    export_service: ExportService
    filter_service: FilterService = field(default_factory=FilterService)
    source: Optional[ImageData] = None
    processed: Optional[Image.Image] = None
    selected_filter: Optional[FilterKind] = None

    @property
    def state(self) -> SessionState:
        if self.source is None:
            return SessionState.NO_IMAGE
        if self.selected_filter is None:
            return SessionState.IMAGE_SELECTED
        return SessionState.FILTER_APPLIED

    def accept_pick(self, picked: Optional[ImageData]) -> bool:
        """Принимает результат выбора изображения.

        `None` (отмена) оставляет состояние без изменений и возвращает False.
        """
        if picked is None:
            return False
        self.source = picked
        self.selected_filter = None
        self._recompute()
        return True

    def select_filter(self, filter_kind: Optional[FilterKind]) -> Optional[Image.Image]:
        """Запоминает фильтр и пересчитывает результат (если есть исходник)."""
        self.selected_filter = filter_kind
        self._recompute()
        return self.processed

    def export(self) -> bool:
        """Сохраняет текущий результат; без результата ничего не делает."""
        if self.processed is None:
            return False
        self.export_service.export(self.processed)
        return True

    def _recompute(self) -> None:
        if self.source is None:
            return
        self.processed = self.filter_service.apply(self.source.pil_image, self.selected_filter)
