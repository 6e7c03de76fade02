"""Рецепты предустановленных фильтров.

Каждый рецепт работает с RGB-каналами в float [0..1], альфа не меняется:
1) смешивание с яркостью (Rec. 709) по коэффициенту насыщенности;
2) поканальные усиление и смещение;
3) кусочно-линейная тональная кривая.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np
from PIL import Image

from photofilter.models.filter_kind import FilterKind

Preset = Callable[[Image.Image], Optional[Image.Image]]

_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)

Curve = Tuple[Tuple[float, float], ...]
_IDENTITY_CURVE: Curve = ((0.0, 0.0), (1.0, 1.0))


@dataclass(frozen=True)
class PresetRecipe:
    """Параметры одного пресета.

    Fields:
        saturation: 0 даёт монохром, 1 оставляет цвета, >1 усиливает насыщенность.
        gain: Множители каналов (R, G, B).
        offset: Смещения каналов (R, G, B), в долях от 255.
        curve: Узлы тональной кривой (вход, выход), вход по возрастанию.
    """
    saturation: float = 1.0
    gain: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    offset: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    curve: Curve = _IDENTITY_CURVE

    def apply(self, image: Image.Image) -> Image.Image:
        """Применяет рецепт; результат в RGBA для RGBA-входа, иначе в RGB."""
        keep_alpha = image.mode == "RGBA"
        rgba = image if keep_alpha else image.convert("RGBA")
        arr = np.asarray(rgba, dtype=np.float32) / 255.0

        rgb = arr[..., :3]
        luma = np.tensordot(rgb, _LUMA_WEIGHTS, axes=([-1], [0]))[..., None]
        rgb = luma + (rgb - luma) * np.float32(self.saturation)
        rgb = rgb * np.asarray(self.gain, dtype=np.float32) + np.asarray(self.offset, dtype=np.float32)

        xs = [p[0] for p in self.curve]
        ys = [p[1] for p in self.curve]
        rgb = np.interp(np.clip(rgb, 0.0, 1.0), xs, ys)

        out = np.empty_like(arr)
        out[..., :3] = rgb
        out[..., 3] = arr[..., 3]
        out_u8 = np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)

        if keep_alpha:
            return Image.fromarray(out_u8)
        return Image.fromarray(np.ascontiguousarray(out_u8[..., :3]))


PRESET_RECIPES: Dict[FilterKind, PresetRecipe] = {
    FilterKind.CHROME: PresetRecipe(
        saturation=1.25,
        curve=((0.0, 0.0), (0.25, 0.21), (0.75, 0.81), (1.0, 1.0)),
    ),
    FilterKind.FADE: PresetRecipe(
        saturation=0.7,
        curve=((0.0, 0.12), (0.5, 0.53), (1.0, 0.92)),
    ),
    FilterKind.INSTANT: PresetRecipe(
        saturation=0.85,
        gain=(1.06, 1.01, 0.88),
        offset=(0.02, 0.0, 0.04),
        curve=((0.0, 0.06), (0.5, 0.52), (1.0, 0.97)),
    ),
    FilterKind.MONO: PresetRecipe(saturation=0.0),
    FilterKind.NOIR: PresetRecipe(
        saturation=0.0,
        curve=((0.0, 0.0), (0.2, 0.08), (0.5, 0.5), (0.8, 0.92), (1.0, 1.0)),
    ),
    FilterKind.PROCESS: PresetRecipe(
        saturation=0.9,
        gain=(0.92, 1.0, 1.1),
        offset=(0.0, 0.02, 0.03),
        curve=((0.0, 0.02), (0.5, 0.5), (1.0, 0.98)),
    ),
    FilterKind.TONAL: PresetRecipe(
        saturation=0.0,
        curve=((0.0, 0.08), (0.5, 0.5), (1.0, 0.92)),
    ),
    FilterKind.TRANSFER: PresetRecipe(
        saturation=1.05,
        gain=(1.08, 1.02, 0.85),
        offset=(0.03, 0.01, 0.0),
        curve=((0.0, 0.04), (0.5, 0.52), (1.0, 0.98)),
    ),
}


def default_presets() -> Dict[FilterKind, Preset]:
    """Реестр пресетов по умолчанию: все восемь фильтров."""
    return {kind: recipe.apply for kind, recipe in PRESET_RECIPES.items()}
