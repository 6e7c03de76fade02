from __future__ import annotations

from typing import Mapping, Optional, Tuple

from PIL import Image

from photofilter.models.filter_kind import FilterKind
from photofilter.services.filter_presets import Preset, default_presets
from photofilter.utils.logging import get_logger

_LOGGER = get_logger(__name__)


class FilterService:
    """Применение пресета к изображению с сохранением исходного разрешения.

    Состояние между вызовами не хранится; реестр пресетов задаётся при создании.
    """

    def __init__(self, presets: Optional[Mapping[FilterKind, Preset]] = None) -> None:
        self._presets = dict(default_presets() if presets is None else presets)

    def apply(self, image: Image.Image, filter_kind: Optional[FilterKind] = None) -> Image.Image:
        """
        Применяет фильтр `filter_kind` к `image`.

        - Без фильтра возвращает входное изображение как есть.
        - Если пресет изменил размер, результат масштабируется обратно.
        - Если пресета нет или он ничего не вернул, возвращается оригинал.
        """
        if filter_kind is None:
            return image

        preset = self._presets.get(filter_kind)
        if preset is None:
            _LOGGER.warning("Пресет %s недоступен, показываем оригинал", filter_kind.value)
            return image

        output = preset(image)
        # пустой холст равнозначен отсутствию результата
        if output is None or 0 in output.size:
            _LOGGER.warning("Пресет %s не вернул результат, показываем оригинал", filter_kind.value)
            return image

        return self._fit_to_size(output, image.size)

    # ---------- Вспомогательные функции ----------
    def _fit_to_size(self, image: Image.Image, size: Tuple[int, int]) -> Image.Image:
        """
        Линейное масштабирование по осям независимо:
        scale_x = width / out_width, scale_y = height / out_height.
        """
        if image.size == size:
            return image
        width, height = size
        out_w, out_h = image.size
        scale_x = width / out_w
        scale_y = height / out_h
        _LOGGER.debug("Масштабирование результата %sx%s -> %sx%s", out_w, out_h, width, height)
        # AFFINE принимает обратное отображение: выход -> вход
        return image.transform(
            size,
            Image.Transform.AFFINE,
            (1.0 / scale_x, 0.0, 0.0, 0.0, 1.0 / scale_y, 0.0),
            resample=Image.Resampling.BILINEAR,
        )
