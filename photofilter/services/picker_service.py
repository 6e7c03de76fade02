"""Выбор изображения пользователем.

Диалог выбора оформлен как явный запрос/ответ: `request_image()` возвращает
`Future`, который завершается ровно одним результатом: `ImageData` либо
`None` при отмене.
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, Optional

from photofilter.models.image_model import ImageData
from photofilter.services.image_service import ImageService
from photofilter.utils.logging import get_logger

_LOGGER = get_logger(__name__)

IMAGE_FILETYPES = (
    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
    ("All files", "*.*"),
)

AskPath = Callable[[], Optional[str]]


def ask_image_path() -> Optional[str]:
    """Показывает системный диалог открытия файла; пустая строка означает отмену."""
    from tkinter import TclError, filedialog

    try:
        return filedialog.askopenfilename(title="Выберите изображение", filetypes=IMAGE_FILETYPES)
    except TclError:
        # Silent fail if dialog cannot open
        return None


class PickerService:
    def __init__(self, image_service: Optional[ImageService] = None, ask_path: Optional[AskPath] = None) -> None:
        self._image_service = image_service or ImageService()
        self._ask_path = ask_path or ask_image_path

    def request_image(self) -> "Future[Optional[ImageData]]":
        """Запрашивает одно изображение у пользователя.

        Returns:
            Завершённый `Future`: `ImageData` при выборе файла, `None` при отмене
            или если выбранный файл не удалось прочитать как изображение.
        """
        result: "Future[Optional[ImageData]]" = Future()
        result.set_running_or_notify_cancel()
        result.set_result(self._pick())
        return result

    def _pick(self) -> Optional[ImageData]:
        file_path = self._ask_path()
        if not file_path:
            _LOGGER.debug("Выбор изображения отменён")
            return None
        try:
            image_data = self._image_service.load_image(file_path)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Не удалось открыть %s: %s", file_path, exc)
            return None
        _LOGGER.info("Выбрано изображение %s (%dx%d)", image_data.path, image_data.width, image_data.height)
        return image_data
