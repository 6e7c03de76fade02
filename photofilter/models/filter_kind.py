"""Набор предустановленных фильтров.

Набор закрыт: восемь идентификаторов, без параметров.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class FilterKind(str, Enum):
    CHROME = "chrome"
    FADE = "fade"
    INSTANT = "instant"
    MONO = "mono"
    NOIR = "noir"
    PROCESS = "process"
    TONAL = "tonal"
    TRANSFER = "transfer"

    @property
    def label(self) -> str:
        """Подпись для UI, например "Noir"."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["FilterKind"]:
        """Возвращает фильтр по идентификатору или подписи.

        Пустое или неизвестное имя означает «без фильтра» (None).
        """
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None
