"""Конфигурация приложения: значения по умолчанию и переопределения из окружения.

Переменные окружения:
- PHOTOFILTER_LIBRARY_DIR: каталог фотобиблиотеки для сохранения.
- PHOTOFILTER_EXPORT_FORMAT: PNG | JPEG (JPG как синоним JPEG).
- PHOTOFILTER_LOG_LEVEL: уровень логирования (имя или число).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from photofilter.utils.logging import resolve_log_level

ENV_LIBRARY_DIR = "PHOTOFILTER_LIBRARY_DIR"
ENV_EXPORT_FORMAT = "PHOTOFILTER_EXPORT_FORMAT"
ENV_LOG_LEVEL = "PHOTOFILTER_LOG_LEVEL"

EXPORT_FORMATS = ("PNG", "JPEG")
_FORMAT_ALIASES = {"JPG": "JPEG"}


def default_library_dir() -> Path:
    return Path.home() / "Pictures" / "Image Filter"


def normalize_export_format(value: str) -> str:
    """Приводит имя формата к виду Pillow; для неизвестного формата ValueError."""
    fmt = value.strip().upper()
    fmt = _FORMAT_ALIASES.get(fmt, fmt)
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Неподдерживаемый формат сохранения: {value!r} (ожидается PNG или JPEG)")
    return fmt


@dataclass(frozen=True)
class AppConfig:
    library_dir: Path = field(default_factory=default_library_dir)
    export_format: str = "PNG"
    log_level: int = logging.INFO
    window_title: str = "Image Filter"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Собирает конфигурацию, применяя переопределения из окружения.

        Args:
            environ: Источник переменных; по умолчанию `os.environ`.

        Raises:
            ValueError: если задан неподдерживаемый формат сохранения.
        """
        env = os.environ if environ is None else environ

        library_raw = (env.get(ENV_LIBRARY_DIR) or "").strip()
        library_dir = Path(library_raw).expanduser() if library_raw else default_library_dir()

        format_raw = (env.get(ENV_EXPORT_FORMAT) or "").strip()
        export_format = normalize_export_format(format_raw) if format_raw else "PNG"

        level_raw = (env.get(ENV_LOG_LEVEL) or "").strip()
        log_level = resolve_log_level(level_raw) if level_raw else logging.INFO

        return cls(library_dir=library_dir, export_format=export_format, log_level=log_level)
