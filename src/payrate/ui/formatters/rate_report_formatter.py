# 🧾 payrate/ui/formatters/rate_report_formatter.py
"""
🧾 Форматує результат конвертації у рядок-звіт.

🔹 `describe_current` / `describe_converted` — `$<сума з розділювачами> per <одиниця>`.
🔹 `render` — повне речення без стилів; `render_text` — те саме як `rich.text.Text`
    (суми зеленим, фраза призначення підкреслена).
🔹 Поточна ставка підписується одиницею самого режиму (`hour` для hourly, `year` для salary).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.text import Text                                           # 🎨 Стилізований рядок

# 🔠 Системні імпорти
import logging
from typing import Final, Optional

# 🧩 Внутрішні модулі проєкту
from payrate.domain.conversion import (
    ConversionDirection,
    IRateConverter,
    RateConverter,
    truncate_rate,
)
from payrate.domain.conversion.services import RateLike
from payrate.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.ui.formatter")


def group_thousands(value: int) -> str:
    """🔢 `1234567` → `1,234,567` (локаль en)."""
    return f"{value:,}"


# ================================
# 💬 КЛАС ФОРМАТЕРА
# ================================
class RateReportFormatter:
    """
    💬 Будує рядок звіту «поточна ставка → конвертована ставка».
    """

    AMOUNT_STYLE: Final[str] = "green"                                # 💵 Стиль сум
    PHRASE_STYLE: Final[str] = "underline"                            # 🎯 Стиль фрази призначення
    _CURRENCY_SIGN: Final[str] = "$"

    def __init__(self, converter: Optional[IRateConverter] = None) -> None:
        self._converter = converter or RateConverter()

    # ================================
    # 🧮 ДОПОМІЖНІ ФОРМАТЕРИ
    # ================================
    def _amount_parts(self, amount: int, unit: str) -> tuple[str, str, str]:
        """`$`, `1,234`, ` per hour` — окремо, щоб стилізувати лише число."""
        return self._CURRENCY_SIGN, group_thousands(amount), f" per {unit}"

    def _current_parts(self, rate: RateLike, direction: ConversionDirection) -> tuple[str, str, str]:
        return self._amount_parts(truncate_rate(rate), direction.unit_label)

    def _converted_parts(self, rate: RateLike, direction: ConversionDirection) -> tuple[str, str, str]:
        amount = self._converter.convert(direction, rate)
        return self._amount_parts(amount, direction.opposite_label)

    # ================================
    # 📤 ПУБЛІЧНИЙ API
    # ================================
    def describe_current(self, rate: RateLike, direction: ConversionDirection) -> str:
        """`$<ставка> per <одиниця режиму>`."""
        return "".join(self._current_parts(rate, ConversionDirection.parse(direction)))

    def describe_converted(self, rate: RateLike, direction: ConversionDirection) -> str:
        """`$<конвертована ставка> per <протилежна одиниця>`."""
        return "".join(self._converted_parts(rate, ConversionDirection.parse(direction)))

    def render(self, rate: RateLike, direction: ConversionDirection) -> str:
        """Повне речення звіту без стилів."""
        return self.render_text(rate, direction).plain

    def render_text(self, rate: RateLike, direction: ConversionDirection) -> Text:
        """
        🎨 Повне речення звіту зі стилями rich.

        Returns:
            Text: `Your current pay rate of … converted to … would be …`.
        """
        direction = ConversionDirection.parse(direction)
        sign, current, current_unit = self._current_parts(rate, direction)
        sign_new, converted, converted_unit = self._converted_parts(rate, direction)

        text = Text.assemble(
            "Your current pay rate of ",
            sign,
            (current, self.AMOUNT_STYLE),
            current_unit,
            " converted to ",
            (direction.target_phrase, self.PHRASE_STYLE),
            " would be ",
            sign_new,
            (converted, self.AMOUNT_STYLE),
            converted_unit,
        )
        logger.debug("🧾 render | mode=%s rate=%s → %s", direction.value, rate, text.plain)
        return text


__all__ = ["RateReportFormatter", "group_thousands"]
