"""Tests for fire-and-forget export to the library directory."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from PIL import Image

from photofilter.services.export_service import ExportService


def _fixed_clock() -> datetime:
    return datetime(2026, 1, 2, 12, 30, 45)


def test_export_writes_png_into_library(tmp_path: Path, make_image) -> None:
    library = tmp_path / "library"
    service = ExportService(library, clock=_fixed_clock)

    service.export(make_image(40, 30))
    service.shutdown(wait=True)

    written = library / "photo_20260102_123045.png"
    assert written.exists()
    with Image.open(written) as saved:
        assert saved.size == (40, 30)


def test_export_does_not_overwrite_existing_files(tmp_path: Path, make_image) -> None:
    service = ExportService(tmp_path, clock=_fixed_clock)

    service.export(make_image(8, 8))
    service.export(make_image(8, 8))
    service.shutdown(wait=True)

    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["photo_20260102_123045.png", "photo_20260102_123045_1.png"]


def test_export_jpeg_drops_alpha(tmp_path: Path, make_image) -> None:
    service = ExportService(tmp_path, image_format="JPEG", clock=_fixed_clock)

    service.export(make_image(16, 16))
    service.shutdown(wait=True)

    with Image.open(tmp_path / "photo_20260102_123045.jpg") as saved:
        assert saved.format == "JPEG"
        assert saved.mode == "RGB"


def test_export_none_is_noop(tmp_path: Path) -> None:
    library = tmp_path / "library"
    service = ExportService(library)

    service.export(None)
    service.shutdown(wait=True)

    assert not library.exists()


def test_export_failure_is_logged_not_raised(tmp_path: Path, make_image, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where the library should be", encoding="utf-8")
    service = ExportService(blocker / "library")

    with caplog.at_level(logging.WARNING):
        service.export(make_image(8, 8))
        service.shutdown(wait=True)

    assert any("Не удалось сохранить" in record.getMessage() for record in caplog.records)


def test_export_writes_a_snapshot(tmp_path: Path) -> None:
    image = Image.new("RGB", (4, 4), (255, 0, 0))
    service = ExportService(tmp_path, clock=_fixed_clock)

    service.export(image)
    image.paste((0, 0, 255), (0, 0, 4, 4))
    service.shutdown(wait=True)

    with Image.open(tmp_path / "photo_20260102_123045.png") as saved:
        assert saved.convert("RGB").getpixel((0, 0)) == (255, 0, 0)


def test_unexpected_write_error_is_logged(tmp_path: Path, make_image, caplog) -> None:
    service = ExportService(tmp_path, image_format="NOT-A-FORMAT", clock=_fixed_clock)

    with caplog.at_level(logging.WARNING):
        service.export(make_image(8, 8))
        service.shutdown(wait=True)

    assert any("Ошибка при сохранении" in record.getMessage() for record in caplog.records)


def test_export_after_shutdown_is_skipped(tmp_path: Path, make_image) -> None:
    library = tmp_path / "library"
    service = ExportService(library)
    service.shutdown(wait=True)

    service.export(make_image(8, 8))

    assert not library.exists()
