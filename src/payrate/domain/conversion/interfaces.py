# 🔀 payrate/domain/conversion/interfaces.py
"""
🔀 Контракти домену конвертації ставок.

🔹 `ConversionDirection` — режим (`hourly` | `salary`), у якому користувач вказав свою ставку.
🔹 `WORKING_HOURS_PER_YEAR` — єдиний коефіцієнт конвертації (40 год × 52 тижні).
🔹 `IRateConverter` — контракт чистого сервісу конвертації.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                        # 🧾 Логування парсингу режиму
from abc import ABC, abstractmethod                                   # 🏛️ Контракт сервісу
from dataclasses import dataclass                                     # 🧱 Властивості режиму
from decimal import Decimal                                           # 💵 Точна ставка
from enum import Enum, unique                                         # 🧱 Два режими
from typing import Final, Mapping

# 🧩 Внутрішні модулі проєкту
from payrate.errors.custom_errors import InvalidModeError             # 🔀 Невідомий режим
from payrate.shared.utils.immutables import freeze                    # 🧊 Незмінна таблиця
from payrate.shared.utils.logger import LOG_NAME                      # 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.domain.conversion")


# ================================
# 📏 КОНСТАНТИ
# ================================
HOURS_PER_WEEK: Final[int] = 40
WEEKS_PER_YEAR: Final[int] = 52
WORKING_HOURS_PER_YEAR: Final[int] = HOURS_PER_WEEK * WEEKS_PER_YEAR  # 🕒 2080


# ================================
# 🧱 ВЛАСТИВОСТІ РЕЖИМУ
# ================================
@dataclass(frozen=True, slots=True)
class DirectionTraits:
    """Все, що відрізняє один режим від іншого."""

    unit_label: str          # 🏷️ Одиниця поточної ставки ("hour" / "year")
    opposite_label: str      # 🔁 Одиниця результату
    target_phrase: str       # 🎯 Куди конвертуємо ("a salary" / "an hourly pay")
    multiplies: bool         # ✖️ True → rate × 2080, False → rate ÷ 2080


@unique
class ConversionDirection(str, Enum):
    """Режим конвертації; значення збігається з токеном CLI."""

    HOURLY = "hourly"    # ⏱️ Ставка за годину → річна зарплата
    SALARY = "salary"    # 📅 Річна зарплата → ставка за годину

    def __str__(self) -> str:
        return self.value

    @property
    def traits(self) -> DirectionTraits:
        return _TRAITS[self]

    @property
    def unit_label(self) -> str:
        return self.traits.unit_label

    @property
    def opposite_label(self) -> str:
        return self.traits.opposite_label

    @property
    def target_phrase(self) -> str:
        return self.traits.target_phrase

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        """Токени, які приймає CLI."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, token: object) -> "ConversionDirection":
        """
        🔍 Розбирає токен без урахування регістру.

        Raises:
            InvalidModeError: Токен не є `hourly` або `salary`.
        """
        if isinstance(token, cls):
            return token
        normalized = str(token).strip().lower()
        try:
            direction = cls(normalized)
        except ValueError as exc:
            raise InvalidModeError(token, choices=cls.choices()) from exc
        logger.debug("🔀 mode %r → %s", token, direction.name)
        return direction


# 🧊 Таблиця має покривати кожен режим; перевіряється при імпорті нижче
_TRAITS: Mapping[ConversionDirection, DirectionTraits] = freeze(
    {
        ConversionDirection.HOURLY: DirectionTraits(
            unit_label="hour",
            opposite_label="year",
            target_phrase="a salary",
            multiplies=True,
        ),
        ConversionDirection.SALARY: DirectionTraits(
            unit_label="year",
            opposite_label="hour",
            target_phrase="an hourly pay",
            multiplies=False,
        ),
    }
)

_missing = set(ConversionDirection) - set(_TRAITS)
if _missing:
    raise RuntimeError(f"DirectionTraits missing for: {sorted(m.name for m in _missing)}")


# ================================
# 💰 КОНТРАКТ СЕРВІСУ
# ================================
class IRateConverter(ABC):
    """💰 Контракт чистої конвертації ставки (без форматування та I/O)."""

    @abstractmethod
    def convert(self, direction: ConversionDirection, rate: Decimal) -> int:
        """Повертає конвертовану ставку, усічену до цілого."""
        raise NotImplementedError
