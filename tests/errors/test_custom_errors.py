"""
🧪 test_custom_errors.py — ієрархія винятків

Перевіряє:
- Наслідування від AppError / ValueError
- Тексти повідомлень для stderr
- Поля для logger.extra
"""

import pytest

from payrate.errors import AppError, ConfigError, ErrorCode, InvalidModeError, InvalidRateError


@pytest.mark.parametrize("error", [
    InvalidModeError("weekly", choices=("hourly", "salary")),
    InvalidRateError("abc"),
    ConfigError("output.color", "rainbow"),
])
def test_all_errors_are_app_errors(error):
    assert isinstance(error, AppError)


def test_argument_errors_are_value_errors():
    assert isinstance(InvalidModeError("x"), ValueError)
    assert isinstance(InvalidRateError("x"), ValueError)
    assert not isinstance(ConfigError("k", "v"), ValueError)


def test_invalid_mode_message():
    error = InvalidModeError("weekly", choices=("hourly", "salary"))
    assert str(error) == "invalid mode: 'weekly' (choose from hourly, salary)"
    assert error.token == "weekly"
    assert str(InvalidModeError("weekly")) == "invalid mode: 'weekly'"


def test_invalid_rate_message_and_extra():
    error = InvalidRateError("12,5", details="ConversionSyntax")
    assert str(error) == "invalid pay rate: '12,5'"
    assert error.raw == "12,5"
    assert error.to_log_extra() == {
        "error_code": ErrorCode.INVALID_RATE,
        "details": "ConversionSyntax",
        "raw": "12,5",
    }


def test_config_error_message_and_extra():
    error = ConfigError("logging.level", "chatty")
    assert error.message == "invalid value for 'logging.level': 'chatty'"
    assert error.key == "logging.level"
    assert error.value == "chatty"
    assert error.to_log_extra() == {"error_code": ErrorCode.CONFIG, "key": "logging.level"}


def test_base_error_defaults():
    error = AppError("boom")
    assert str(error) == "boom"
    assert error.details is None
    assert error.to_log_extra() == {"error_code": ErrorCode.UNKNOWN}
