# 🚨 payrate/errors/__init__.py
"""🚨 Пакет винятків: одна ієрархія від `AppError`."""

from .custom_errors import (
    AppError,
    ConfigError,
    ErrorCode,
    InvalidModeError,
    InvalidRateError,
)

__all__ = [
    "AppError",
    "ConfigError",
    "ErrorCode",
    "InvalidModeError",
    "InvalidRateError",
]
