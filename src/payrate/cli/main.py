# 🧮 payrate/cli/main.py
"""
🧮 Entry-point CLI-калькулятора: погодинна ставка ⇄ річна зарплата.

🔹 Розбирає `MODE PAY_RATE` (+ `--color`, `--log-level`, `--version`) через argparse.
🔹 Піднімає ConfigService і логування, рахує ставку й друкує рівно один рядок у stdout.
🔹 Помилки аргументів → usage у stderr і код 2; помилки конфігурації → код 1. Stdout лишається порожнім.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import argparse                                                      # 🧾 Розбір аргументів
import logging                                                       # 🧾 Логування запуску
import sys                                                           # 🧵 stderr та argv
from decimal import Decimal
from typing import IO, List, Optional

# 🧩 Внутрішні модулі проєкту
from payrate import __version__
from payrate.config.config_service import ConfigService
from payrate.domain.conversion import ConversionDirection, to_rate
from payrate.errors.custom_errors import AppError, ConfigError, InvalidModeError, InvalidRateError
from payrate.shared.utils.logger import LOG_NAME, init_logging_from_config, is_valid_level
from payrate.ui.console import ColorChoice, build_console
from payrate.ui.formatters.rate_report_formatter import RateReportFormatter

logger = logging.getLogger(f"{LOG_NAME}.cli")

PROG = "payrate"


# ================================
# 🔤 ТИПИ АРГУМЕНТІВ
# ================================
def _mode_arg(token: str) -> ConversionDirection:
    try:
        return ConversionDirection.parse(token)
    except InvalidModeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _rate_arg(token: str) -> Decimal:
    try:
        return to_rate(token)
    except InvalidRateError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _color_arg(token: str) -> ColorChoice:
    try:
        return ColorChoice.parse(token, key="--color")
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(f"invalid choice: {token!r} ({exc.details})") from exc


def _level_arg(token: str) -> str:
    if not is_valid_level(token):
        raise argparse.ArgumentTypeError(f"invalid log level: {token!r}")
    return token.upper()


# ================================
# 🧾 ПАРСЕР
# ================================
def build_parser() -> argparse.ArgumentParser:
    """Будує argparse-парсер CLI."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Convert a pay rate between an hourly wage and an annual salary "
            "(40 hours a week, 52 weeks a year)."
        ),
    )
    parser.add_argument(
        "mode",
        type=_mode_arg,
        metavar="{" + ",".join(ConversionDirection.choices()) + "}",
        help="unit of PAY_RATE: 'hourly' converts to a salary, 'salary' converts to an hourly pay",
    )
    parser.add_argument("pay_rate", type=_rate_arg, metavar="PAY_RATE", help="the pay rate to convert")
    parser.add_argument(
        "--color",
        type=_color_arg,
        default=None,
        metavar="{" + ",".join(ColorChoice.choices()) + "}",
        help="when to colorize the output (default: output.color from config, 'auto')",
    )
    parser.add_argument(
        "--log-level",
        type=_level_arg,
        default=None,
        metavar="LEVEL",
        help="log level for stderr diagnostics (default: logging.level from config)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ================================
# ⚙️ BOOTSTRAP
# ================================
def _bootstrap(args: argparse.Namespace) -> ColorChoice:
    """
    Читає конфіги, вмикає логування та визначає режим кольору.

    Raises:
        ConfigError: Рівень логів або режим кольору в конфігах некоректні.
    """
    config = ConfigService()
    logging_node = dict(config.get("logging", {}) or {})
    level = args.log_level or logging_node.get("level")
    if not is_valid_level(level):
        raise ConfigError("logging.level", level)
    init_logging_from_config(logging_node, level=level)

    if args.color is not None:
        return args.color
    return ColorChoice.parse(config.get("output.color", ColorChoice.AUTO.value))


def emit(
    rate: Decimal,
    direction: ConversionDirection,
    *,
    color: ColorChoice = ColorChoice.AUTO,
    file: Optional[IO[str]] = None,
    formatter: Optional[RateReportFormatter] = None,
) -> str:
    """
    🖨️ Друкує рядок звіту і повертає його текст без стилів.
    """
    formatter = formatter or RateReportFormatter()
    text = formatter.render_text(rate, direction)
    console = build_console(color, file=file)
    console.print(text, soft_wrap=True)                               # 🚫 Без переносу: рівно один рядок
    return text.plain


# ================================
# 🚀 ENTRYPOINT
# ================================
def main(argv: Optional[List[str]] = None) -> int:
    """
    Основна точка входу: парсить аргументи, рахує і друкує звіт.

    Returns:
        int: Код виходу (0 — успіх, 1 — помилка конфігурації).
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)  # ⛔ Usage error → SystemExit(2)

    try:
        color = _bootstrap(args)
    except AppError as exc:
        sys.stderr.write(f"{PROG}: error: {exc}\n")
        logger.debug("🚨 bootstrap failed: %s", exc, extra=exc.to_log_extra())
        return 1

    logger.info("🧮 mode=%s rate=%s color=%s", args.mode.value, args.pay_rate, color.value)
    emit(args.pay_rate, args.mode, color=color)
    return 0


def run() -> None:
    """Console-script обгортка над `main`."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
