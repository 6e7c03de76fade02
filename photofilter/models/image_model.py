"""Исходное изображение сессии: заменяется целиком при каждом новом выборе."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Выбранный снимок и сведения для панели информации.

    Fields:
        path: Путь к выбранному файлу.
        pil_image: Декодированное изображение PIL (RGBA).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGBA".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height
