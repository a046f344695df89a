# 🚨 payrate/errors/custom_errors.py
"""
🚨 Ієрархія винятків калькулятора ставок.

🔹 `AppError` — базовий виняток із `details` та `to_log_extra()` для logger.extra.
🔹 `InvalidModeError` / `InvalidRateError` — невалідні аргументи CLI (до будь-яких обчислень).
🔹 `ConfigError` — некоректне значення у YAML/ENV конфігурації.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional									# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from payrate.shared.utils.logger import LOG_NAME					# 🏷️ Базове імʼя логера


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Локальний логер


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Категорії помилок для структурованих логів."""

    INVALID_MODE = "invalid_mode"									# 🔀 Невідомий режим
    INVALID_RATE = "invalid_rate"									# 🔢 Неможливо розібрати ставку
    CONFIG = "config_error"											# ⚙️ Помилка конфігурації
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AppError(Exception):
    """🧠 Базова помилка застосунку з текстом для користувача та деталями для логів."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message										# 👀 Текст для stderr
        self.details = details										# 🔍 Технічні деталі для логів

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для logger.extra."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message


# ================================
# 🧾 ПОМИЛКИ АРГУМЕНТІВ
# ================================
class InvalidModeError(AppError, ValueError):
    """🔀 Режим не входить до `hourly` | `salary`."""

    code = ErrorCode.INVALID_MODE

    def __init__(self, token: object, *, choices: Optional[tuple] = None) -> None:
        allowed = ", ".join(choices or ())
        message = f"invalid mode: {token!r}" + (f" (choose from {allowed})" if allowed else "")
        super().__init__(message)
        self.token = token											# 🔤 Що саме ввів користувач
        logger.debug("🔀 InvalidModeError created", extra={"token": str(token)})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["token"] = str(self.token)
        return extra


class InvalidRateError(AppError, ValueError):
    """🔢 Ставку не вдалося перетворити на число."""

    code = ErrorCode.INVALID_RATE

    def __init__(self, raw: object, *, details: Optional[str] = None) -> None:
        super().__init__(f"invalid pay rate: {raw!r}", details=details)
        self.raw = raw												# 🧾 Сирий аргумент
        logger.debug("🔢 InvalidRateError created", extra={"raw": str(raw)})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["raw"] = str(self.raw)
        return extra


# ================================
# ⚙️ ПОМИЛКИ КОНФІГУРАЦІЇ
# ================================
class ConfigError(AppError):
    """⚙️ Значення з конфігів або ENV не підходить."""

    code = ErrorCode.CONFIG

    def __init__(self, key: str, value: object, *, details: Optional[str] = None) -> None:
        super().__init__(f"invalid value for {key!r}: {value!r}", details=details)
        self.key = key												# 🔑 Крапковий ключ конфігу
        self.value = value

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["key"] = self.key
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "InvalidModeError",
    "InvalidRateError",
    "ConfigError",
]
