# 📦 payrate/domain/conversion/services.py
"""
📦 Чистий сервіс конвертації ставки між погодинною оплатою та річною зарплатою.

🔹 Обчислення у Decimal: аргумент `0.1` — рівно одна десята, без артефактів float.
🔹 Усічення (не округлення) до цілого з насиченням у діапазон i32.
🔹 Жодних побічних ефектів, окрім debug-логів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків
from decimal import ROUND_DOWN, Decimal, InvalidOperation, Overflow, localcontext  # 💵 Точна арифметика
from typing import Final, Union

# 🧩 Внутрішні модулі проєкту
from .interfaces import (
    WORKING_HOURS_PER_YEAR,
    ConversionDirection,
    IRateConverter,
)
from payrate.errors.custom_errors import InvalidRateError
from payrate.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.conversion")

# ================================
# 📏 МЕЖІ ЦІЛОГО
# ================================
INT_MIN: Final[int] = -(2 ** 31)
INT_MAX: Final[int] = 2 ** 31 - 1

_FACTOR: Final[Decimal] = Decimal(WORKING_HOURS_PER_YEAR)

RateLike = Union[Decimal, int, float, str]


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def to_rate(value: RateLike) -> Decimal:
    """
    🧮 Приводить значення до Decimal через рядкове представлення.

    Raises:
        InvalidRateError: Значення не є числом.
    """
    if isinstance(value, bool):
        raise InvalidRateError(value, details="bool is not a pay rate")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidRateError(value, details=str(exc)) from exc
    if amount.is_snan():                                       # 🚫 sNaN зупинив би будь-яку арифметику
        raise InvalidRateError(value, details="signaling NaN")
    return amount


def truncate_rate(value: RateLike) -> int:
    """
    ✂️ Відкидає дробову частину (в бік нуля) і насичує результат у [INT_MIN, INT_MAX].

    `+inf` → INT_MAX, `-inf` → INT_MIN, `nan` → 0.
    """
    amount = to_rate(value)
    if amount.is_nan():
        return 0
    if amount.is_infinite():
        return INT_MAX if amount > 0 else INT_MIN
    if amount >= INT_MAX + 1:
        return INT_MAX
    if amount <= INT_MIN - 1:
        return INT_MIN
    return int(amount.to_integral_value(rounding=ROUND_DOWN))


# ================================
# 🏛️ ДОМЕННИЙ СЕРВІС
# ================================
class RateConverter(IRateConverter):
    """💸 Конвертує ставку за фіксованою кількістю робочих годин на рік."""

    def convert(self, direction: ConversionDirection, rate: RateLike) -> int:
        """
        🚀 Конвертує ставку у протилежну одиницю.

        Args:
            direction: Режим, у якому вказана ставка.
            rate: Ставка користувача.

        Returns:
            int: `rate × 2080` для HOURLY, `rate ÷ 2080` для SALARY, усічене до цілого.
        """
        direction = ConversionDirection.parse(direction)
        amount = to_rate(rate)
        with localcontext() as ctx:
            ctx.traps[Overflow] = False                        # ♾️ Переповнення → Infinity → насичення
            if direction.traits.multiplies:
                raw = amount * _FACTOR
            else:
                raw = amount / _FACTOR
        result = truncate_rate(raw)
        logger.debug(
            "🔄 convert | mode=%s rate=%s raw=%s → %s",
            direction.value,
            amount,
            raw,
            result,
        )
        return result


__all__ = ["INT_MAX", "INT_MIN", "RateConverter", "to_rate", "truncate_rate"]
