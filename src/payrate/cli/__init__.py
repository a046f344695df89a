# 🧮 payrate/cli/__init__.py
"""🧮 Командний рядок: розбір аргументів і вивід звіту."""

from .main import build_parser, emit, main, run

__all__ = ["build_parser", "emit", "main", "run"]
