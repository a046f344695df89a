# 🖥️ payrate/ui/console.py
"""
🖥️ Фабрика `rich.Console` для виводу звіту.

🔹 `ColorChoice` — auto / always / never (як `--color` у CLI).
🔹 Явний флаг перемагає ENV: `always` ігнорує `NO_COLOR`, `never` не пише escape-кодів взагалі.
🔹 Автопідсвітка чисел та емодзі rich вимкнені: стилі задає лише форматер.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console                                     # 🎨 Кольоровий вивід у термінал

# 🔠 Системні імпорти
import logging
from enum import Enum, unique
from typing import IO, Any, Dict, Optional

# 🧩 Внутрішні модулі проєкту
from payrate.errors.custom_errors import ConfigError
from payrate.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.ui.console")


@unique
class ColorChoice(str, Enum):
    """Коли фарбувати вивід."""

    AUTO = "auto"        # 🤖 Лише у терміналі, з повагою до NO_COLOR
    ALWAYS = "always"    # 🎨 Завжди, навіть у пайпі
    NEVER = "never"      # 🚫 Ніколи

    def __str__(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, token: object, *, key: str = "output.color") -> "ColorChoice":
        """
        🔍 Розбирає значення з CLI/конфігів без урахування регістру.

        Raises:
            ConfigError: Значення не входить до auto/always/never.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(str(token).strip().lower())
        except ValueError as exc:
            raise ConfigError(key, token, details=f"choose from {', '.join(cls.choices())}") from exc


def build_console(choice: ColorChoice = ColorChoice.AUTO, *, file: Optional[IO[str]] = None) -> Console:
    """
    🏗️ Створює Console під обраний режим кольору.

    Args:
        choice: Режим кольору.
        file: Потік виводу (за замовчуванням stdout).
    """
    choice = ColorChoice.parse(choice)
    options: Dict[str, Any] = {"file": file, "highlight": False, "emoji": False}
    if choice is ColorChoice.NEVER:
        options["color_system"] = None                                # 🚫 Жодних ANSI-послідовностей
    elif choice is ColorChoice.ALWAYS:
        options.update(force_terminal=True, no_color=False, color_system="standard")
    logger.debug("🖥️ Console | color=%s", choice.value)
    return Console(**options)


__all__ = ["ColorChoice", "build_console"]
