"""
🧪 test_console.py — режими кольору для rich.Console
"""

import io

import pytest
from rich.text import Text

from payrate.errors.custom_errors import ConfigError
from payrate.ui.console import ColorChoice, build_console

ESC = "\x1b["


def _print(choice, text):
    buffer = io.StringIO()
    build_console(choice, file=buffer).print(text, soft_wrap=True)
    return buffer.getvalue()


def _sample():
    return Text.assemble("pay ", ("41,600", "green"), " as ", ("a salary", "underline"))


@pytest.mark.parametrize("token,expected", [
    ("auto", ColorChoice.AUTO),
    ("ALWAYS", ColorChoice.ALWAYS),
    ("never", ColorChoice.NEVER),
    (ColorChoice.NEVER, ColorChoice.NEVER),
])
def test_parse_color_choice(token, expected):
    assert ColorChoice.parse(token) is expected


def test_parse_rejects_unknown_choice():
    with pytest.raises(ConfigError) as info:
        ColorChoice.parse("rainbow")
    assert info.value.key == "output.color"


def test_never_writes_plain_text():
    assert _print(ColorChoice.NEVER, _sample()) == "pay 41,600 as a salary\n"


def test_always_writes_escape_codes_even_with_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    out = _print(ColorChoice.ALWAYS, _sample())
    assert f"{ESC}32m41,600" in out
    assert f"{ESC}4ma salary" in out


def test_auto_is_plain_when_not_a_terminal():
    out = _print(ColorChoice.AUTO, _sample())
    assert ESC not in out
    assert out == "pay 41,600 as a salary\n"


def test_numbers_are_not_auto_highlighted():
    out = _print(ColorChoice.ALWAYS, Text("rate 20 per hour"))
    assert ESC not in out
