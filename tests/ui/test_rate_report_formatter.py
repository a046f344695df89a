"""
🧪 test_rate_report_formatter.py — unit-тести для RateReportFormatter

Перевіряє:
- Розділювачі тисяч
- Підписи поточної та конвертованої ставки
- Повне речення звіту та його стилі (зелені суми, підкреслена фраза)
"""

from decimal import Decimal

import pytest

from payrate.domain.conversion import ConversionDirection, IRateConverter
from payrate.ui.formatters.rate_report_formatter import RateReportFormatter, group_thousands

HOURLY = ConversionDirection.HOURLY
SALARY = ConversionDirection.SALARY


@pytest.fixture
def formatter():
    return RateReportFormatter()


@pytest.mark.parametrize("value,expected", [
    (0, "0"),
    (999, "999"),
    (1234, "1,234"),
    (41600, "41,600"),
    (1234567, "1,234,567"),
    (-1234, "-1,234"),
])
def test_group_thousands(value, expected):
    assert group_thousands(value) == expected


def test_describe_current_uses_mode_unit(formatter):
    assert formatter.describe_current(Decimal("20"), HOURLY) == "$20 per hour"
    assert formatter.describe_current(Decimal("41600"), SALARY) == "$41,600 per year"


def test_describe_current_truncates(formatter):
    assert formatter.describe_current(Decimal("1234.99"), HOURLY) == "$1,234 per hour"


def test_describe_converted_uses_opposite_unit(formatter):
    assert formatter.describe_converted(Decimal("20"), HOURLY) == "$41,600 per year"
    assert formatter.describe_converted(Decimal("41600"), SALARY) == "$20 per hour"


def test_render_hourly_to_salary(formatter):
    assert formatter.render(Decimal("20"), HOURLY) == (
        "Your current pay rate of $20 per hour converted to a salary would be $41,600 per year"
    )


def test_render_salary_to_hourly(formatter):
    assert formatter.render(Decimal("41600"), SALARY) == (
        "Your current pay rate of $41,600 per year converted to an hourly pay would be $20 per hour"
    )


@pytest.mark.parametrize("direction", [HOURLY, SALARY])
def test_render_zero(formatter, direction):
    line = formatter.render(Decimal("0"), direction)
    assert line.count("$0 per") == 2


def test_render_text_styles(formatter):
    text = formatter.render_text(Decimal("20"), HOURLY)
    styled = {text.plain[span.start:span.end]: str(span.style) for span in text.spans}
    assert styled == {"20": "green", "a salary": "underline", "41,600": "green"}
    assert text.plain == formatter.render(Decimal("20"), HOURLY)


def test_formatter_uses_injected_converter():
    class FixedConverter(IRateConverter):
        def convert(self, direction, rate):
            return 7

    formatter = RateReportFormatter(converter=FixedConverter())
    assert formatter.describe_converted(Decimal("1"), HOURLY) == "$7 per year"
