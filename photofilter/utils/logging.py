"""Логирование проекта: один обработчик stderr на базовом логгере `photofilter`."""
from __future__ import annotations

import logging
import sys

_BASE_NAME = "photofilter"


def resolve_log_level(level: str | int | None) -> int:
    """Уровень логирования по имени или числу; неизвестное имя даёт INFO."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        normalized = level.strip().upper()
        if normalized.isdigit():
            return int(normalized)
        resolved = logging.getLevelName(normalized)
        if isinstance(resolved, int):
            return resolved
    return logging.INFO


def setup_logging(level: str | int | None = logging.INFO) -> logging.Logger:
    """Настраивает логгер проекта.

    На базовом логгере остаётся ровно один StreamHandler в stderr, поэтому
    повторный вызов только меняет уровень.
    """
    logger = logging.getLogger(_BASE_NAME)
    logger.setLevel(resolve_log_level(level))

    handler: logging.StreamHandler | None = None
    for existing in logger.handlers:
        if isinstance(existing, logging.StreamHandler) and getattr(existing, "stream", None) is sys.stderr:
            handler = existing
            break
    if handler is None:
        handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(handler)

    handler.setFormatter(
        logging.Formatter(fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Возвращает логгер проекта или его потомка.

    Имена вне пакета (``__main__`` и подобные) тоже подвешиваются к базовому логгеру.
    """
    if not name or name == _BASE_NAME:
        return logging.getLogger(_BASE_NAME)
    if name.startswith(_BASE_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(_BASE_NAME).getChild(name)
