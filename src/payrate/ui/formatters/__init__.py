# 🧾 payrate/ui/formatters/__init__.py
"""🧾 Форматери текстових звітів."""

from .rate_report_formatter import RateReportFormatter, group_thousands

__all__ = ["RateReportFormatter", "group_thousands"]
