# 🔀 payrate/domain/conversion/__init__.py
"""
🔀 Пакет `domain.conversion` публікує режими, константи та сервіс конвертації ставок.

🔹 `interfaces.py` — `ConversionDirection`, `DirectionTraits`, `WORKING_HOURS_PER_YEAR`, `IRateConverter`.
🔹 `services.py` — `RateConverter` і політика усічення `truncate_rate`.
"""

from .interfaces import (
    HOURS_PER_WEEK,
    WEEKS_PER_YEAR,
    WORKING_HOURS_PER_YEAR,
    ConversionDirection,
    DirectionTraits,
    IRateConverter,
)
from .services import INT_MAX, INT_MIN, RateConverter, to_rate, truncate_rate


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "HOURS_PER_WEEK",
    "WEEKS_PER_YEAR",
    "WORKING_HOURS_PER_YEAR",
    "ConversionDirection",
    "DirectionTraits",
    "IRateConverter",
    "INT_MAX",
    "INT_MIN",
    "RateConverter",
    "to_rate",
    "truncate_rate",
]
