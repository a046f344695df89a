# 🧊 payrate/shared/utils/immutables.py
"""
🧊 Заморожування довідкових таблиць.

🔹 Словники → `MappingProxyType`, списки/кортежі → tuple, множини → frozenset.
🔹 Використовується для таблиці властивостей напрямків конвертації.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Mapping                      # 🧰 Перевірка словників
from decimal import Decimal                              # 💵 Скаляри-гроші
from enum import Enum                                    # 🏷️ Ключі-перерахування
from types import MappingProxyType                       # 🔒 Незмінна обгортка над dict
from typing import Any

_SCALARS = (str, bytes, int, float, bool, Decimal, Enum)  # 🧱 Незмінні самі по собі


def freeze(obj: Any) -> Any:
    """Рекурсивно перетворює колекції на незмінні аналоги."""
    if obj is None or isinstance(obj, _SCALARS):
        return obj
    if isinstance(obj, Mapping):
        return MappingProxyType({key: freeze(value) for key, value in obj.items()})
    if isinstance(obj, (set, frozenset)):
        return frozenset(freeze(value) for value in obj)
    if isinstance(obj, (list, tuple)):
        return tuple(freeze(value) for value in obj)
    return obj                                            # ⚖️ Решта типів без змін


__all__ = ["freeze"]
