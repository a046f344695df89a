# 🧰 payrate/shared/utils/__init__.py
"""
🧰 Спільні утиліти: логування та незмінні структури.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    init_logging,
    init_logging_from_config,
)

# 🧊 Незмінні структури
from .immutables import freeze

__all__ = [
    "LOG_NAME",
    "init_logging",
    "init_logging_from_config",
    "freeze",
]
