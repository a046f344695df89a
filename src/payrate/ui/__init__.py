# 🎨 payrate/ui/__init__.py
"""
🎨 Презентаційний шар: кольори, розділювачі тисяч, текст звіту.

Домен повертає цілі числа; все, що стосується вигляду, живе тут.
"""

from .console import ColorChoice, build_console
from .formatters import RateReportFormatter, group_thousands

__all__ = ["ColorChoice", "build_console", "RateReportFormatter", "group_thousands"]
