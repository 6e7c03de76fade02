"""Сохранение результата в фотобиблиотеку.

Запись отправляется в фоновый поток и не ожидается вызывающим кодом;
ошибки записи только логируются.
"""
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from PIL import Image

from photofilter.utils.logging import get_logger

_LOGGER = get_logger(__name__)

_EXTENSIONS = {"PNG": ".png", "JPEG": ".jpg"}


class ExportService:
    def __init__(
        self,
        library_dir: Path,
        image_format: str = "PNG",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._library_dir = Path(library_dir)
        self._format = image_format
        self._clock = clock
        # один поток: имена файлов выбираются последовательно
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="photofilter-export")
        self._closed = False

    @property
    def library_dir(self) -> Path:
        return self._library_dir

    def export(self, image: Optional[Image.Image]) -> None:
        """Отправляет копию изображения на запись; `None` игнорируется."""
        if image is None:
            return
        if self._closed:
            _LOGGER.warning("Сохранение после остановки сервиса пропущено")
            return
        future = self._executor.submit(self._write, image.copy())
        future.add_done_callback(self._log_failure)

    def shutdown(self, wait: bool = True) -> None:
        """Останавливает фоновый поток; при `wait=True` дожидается незавершённых записей."""
        self._closed = True
        self._executor.shutdown(wait=wait)

    # ---- Internals ----
    def _log_failure(self, future: "Future[None]") -> None:
        exc = future.exception()
        if exc is not None:
            _LOGGER.warning("Ошибка при сохранении в %s: %r", self._library_dir, exc)

    def _write(self, image: Image.Image) -> None:
        try:
            self._library_dir.mkdir(parents=True, exist_ok=True)
            path = self._next_path()
            if self._format == "JPEG" and image.mode != "RGB":
                image = image.convert("RGB")
            image.save(path, format=self._format)
        except OSError as exc:
            _LOGGER.warning("Не удалось сохранить изображение в %s: %s", self._library_dir, exc)
            return
        _LOGGER.info("Изображение сохранено: %s", path)

    def _next_path(self) -> Path:
        stem = self._clock().strftime("photo_%Y%m%d_%H%M%S")
        ext = _EXTENSIONS.get(self._format, "." + self._format.lower())
        path = self._library_dir / f"{stem}{ext}"
        n = 1
        while path.exists():
            path = self._library_dir / f"{stem}_{n}{ext}"
            n += 1
        return path
