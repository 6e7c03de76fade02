"""Tests for the filter engine and the built-in preset recipes."""
from __future__ import annotations

import numpy as np
import pytest
from PIL import Image, ImageOps

from photofilter.models.filter_kind import FilterKind
from photofilter.services.filter_presets import PRESET_RECIPES, default_presets
from photofilter.services.filter_service import FilterService


@pytest.mark.parametrize("kind", list(FilterKind))
def test_output_keeps_source_dimensions(kind: FilterKind, gradient_image: Image.Image) -> None:
    result = FilterService().apply(gradient_image, kind)
    assert result.size == gradient_image.size


@pytest.mark.parametrize("kind", list(FilterKind))
def test_every_preset_changes_pixels(kind: FilterKind, gradient_image: Image.Image) -> None:
    result = FilterService().apply(gradient_image, kind)
    assert result.tobytes() != gradient_image.tobytes()


def test_no_filter_is_passthrough(make_image) -> None:
    image = make_image(800, 600)
    before = image.tobytes()

    result = FilterService().apply(image, None)

    assert result is image
    assert result.tobytes() == before


def test_apply_is_deterministic(gradient_image: Image.Image) -> None:
    service = FilterService()
    first = service.apply(gradient_image, FilterKind.INSTANT)
    second = service.apply(gradient_image, FilterKind.INSTANT)
    assert first.tobytes() == second.tobytes()


def test_apply_does_not_mutate_input(gradient_image: Image.Image) -> None:
    before = gradient_image.tobytes()
    FilterService().apply(gradient_image, FilterKind.CHROME)
    assert gradient_image.tobytes() == before


def test_noir_on_400x300_is_desaturated(gradient_image: Image.Image) -> None:
    result = FilterService().apply(gradient_image, FilterKind.NOIR)

    assert result.size == (400, 300)
    r, g, b, _a = result.split()
    assert r.tobytes() == g.tobytes() == b.tobytes()


@pytest.mark.parametrize("kind", [FilterKind.MONO, FilterKind.NOIR, FilterKind.TONAL])
def test_monochrome_presets_have_equal_channels(kind: FilterKind, gradient_image: Image.Image) -> None:
    arr = np.asarray(FilterService().apply(gradient_image, kind))
    assert np.array_equal(arr[..., 0], arr[..., 1])
    assert np.array_equal(arr[..., 1], arr[..., 2])


def test_noir_deepens_shadows() -> None:
    gray = Image.new("RGBA", (8, 8), (51, 51, 51, 255))
    value = FilterService().apply(gray, FilterKind.NOIR).getpixel((0, 0))[0]
    assert abs(value - 20) <= 1


def test_fade_lifts_blacks() -> None:
    black = Image.new("RGBA", (8, 8), (0, 0, 0, 255))
    arr = np.asarray(FilterService().apply(black, FilterKind.FADE))
    assert arr[..., :3].min() >= 30


def test_warm_presets_shift_towards_red() -> None:
    gray = Image.new("RGB", (8, 8), (128, 128, 128))
    for kind in (FilterKind.INSTANT, FilterKind.TRANSFER):
        r, _g, b = FilterService().apply(gray, kind).getpixel((0, 0))
        assert r > b


def test_process_shifts_towards_blue() -> None:
    gray = Image.new("RGB", (8, 8), (128, 128, 128))
    r, _g, b = FilterService().apply(gray, FilterKind.PROCESS).getpixel((0, 0))
    assert b > r


def test_alpha_channel_is_preserved(make_image) -> None:
    image = make_image(32, 16)
    image.putalpha(128)

    result = FilterService().apply(image, FilterKind.CHROME)

    assert result.mode == "RGBA"
    assert set(np.asarray(result)[..., 3].flatten().tolist()) == {128}


def test_non_rgba_input_gives_rgb_output() -> None:
    gray = Image.new("L", (20, 10), 200)
    result = FilterService().apply(gray, FilterKind.CHROME)
    assert result.mode == "RGB"
    assert result.size == (20, 10)


def test_padded_preset_output_is_scaled_back(gradient_image: Image.Image) -> None:
    def padded(image: Image.Image) -> Image.Image:
        return ImageOps.expand(image, border=(1, 2))

    service = FilterService(presets={FilterKind.NOIR: padded})
    result = service.apply(gradient_image, FilterKind.NOIR)

    assert result.size == gradient_image.size


def test_shrunk_preset_output_is_scaled_per_axis() -> None:
    image = Image.new("RGB", (400, 300), (10, 200, 30))

    def shrink(img: Image.Image) -> Image.Image:
        return img.resize((100, 150))

    result = FilterService(presets={FilterKind.MONO: shrink}).apply(image, FilterKind.MONO)

    assert result.size == (400, 300)
    assert result.getpixel((200, 150)) == (10, 200, 30)


def test_preset_without_output_falls_back_to_original(gradient_image: Image.Image) -> None:
    service = FilterService(presets={FilterKind.FADE: lambda image: None})
    assert service.apply(gradient_image, FilterKind.FADE) is gradient_image


def test_preset_with_empty_output_falls_back_to_original(gradient_image: Image.Image) -> None:
    service = FilterService(presets={FilterKind.NOIR: lambda image: Image.new("RGBA", (0, 0))})
    assert service.apply(gradient_image, FilterKind.NOIR) is gradient_image


def test_preset_with_zero_height_output_falls_back_to_original(gradient_image: Image.Image) -> None:
    service = FilterService(presets={FilterKind.MONO: lambda image: Image.new("RGB", (400, 0))})
    assert service.apply(gradient_image, FilterKind.MONO) is gradient_image


def test_missing_preset_falls_back_to_original(gradient_image: Image.Image) -> None:
    service = FilterService(presets={})
    assert service.apply(gradient_image, FilterKind.CHROME) is gradient_image


def test_default_registry_covers_every_kind() -> None:
    assert set(default_presets()) == set(FilterKind)
    assert set(PRESET_RECIPES) == set(FilterKind)
