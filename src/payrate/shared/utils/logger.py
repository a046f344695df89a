# 📜 payrate/shared/utils/logger.py
"""
📜 Єдина схема логування для CLI-калькулятора ставок.

🔹 Консольний вивід іде у stderr: stdout зарезервований під рядок звіту.
🔹 Файловий вивід (plain або JSON) вмикається лише коли задано шлях у конфігах.
🔹 Модулі беруть дочірні логери як `logging.getLogger(f"{LOG_NAME}.<область>")`.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json									# 📦 Серіалізація payload логів
import logging									# 🪵 Робота з логерами Python
import sys									# 🧵 Потік stderr
import threading								# 🧵 Захист ініціалізації
from dataclasses import dataclass, field					# 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler			# 📁 Хендлер з ротацією файлів
from pathlib import Path								# 📂 Операції з файловими шляхами
from typing import Any, Dict, Optional, Union				# 🧰 Типи для конфігів

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "payrate"							# 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"	# 📄 Формат для файлів
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"			# 🖥️ Мінімалістичний консольний формат
DEFAULT_LEVEL: str = "WARNING"						# 🤫 Звичайний запуск мовчить у stderr
ROTATE_WHEN: str = "midnight"						# ⏰ Ротація файлу щоночі
ROTATE_BACKUPS: int = 7							# ♻️ Скільки копій зберігати
FILE_ENCODING: str = "utf-8"						# 🔤 Кодування лог-файлу

_lock = threading.Lock()							# 🔒 Блокуємо одночасну ініціалізацію

_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)										# 🚫 Стандартні поля LogRecord, що не йдуть у extra


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: str = DEFAULT_LEVEL						# 🎚️ Глобальний рівень логів
    console: bool = True							# 🖥️ Чи вмикати вивід у stderr
    json: bool = False								# 📦 JSON-формат для файлу
    file: Optional[str] = None						# 📁 Шлях до лог-файлу (None → без файлу)
    suppress: Dict[str, str] = field(default_factory=dict)			# 🙊 Сторонні логери та їх рівні
    console_format: str = CONSOLE_FORMAT				# 🖥️ Шаблон для консолі
    file_format: str = PLAIN_FORMAT					# 📄 Шаблон для файлу


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи логів у плоский JSON (одна подія — один рядок)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),	# ⏱️ Час події
            "level": record.levelname,					# 🎚️ Рівень
            "name": record.name,						# 🏷️ Імʼя логера
            "func": record.funcName,					# 🧮 Функція джерела
            "line": record.lineno,						# 📍 Номер рядка
            "message": record.getMessage(),				# 🗒️ Повідомлення
        }
        for key, value in record.__dict__.items():			# 🔎 Додаємо extra-поля
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)						# ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)				# 🔄 Decimal та інші → рядок
        if record.exc_info:						# ⚠️ Трейсбек винятку
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМОЖНІ ФУНКЦІЇ
# ================================
def _to_level(value: Union[str, int, None], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())	# 🎚️ "DEBUG" → 10, невідоме → "Level X"
    return level if isinstance(level, int) else default


def is_valid_level(value: Union[str, int, None]) -> bool:
    """True, якщо значення можна використати як рівень логування."""
    if value is None or isinstance(value, int):
        return True
    return isinstance(logging.getLevelName(str(value).strip().upper()), int)


def _make_console_handler(fmt: logging.Formatter) -> logging.Handler:
    """Консольний хендлер поверх stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    return handler


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))					# 📂 Конвертуємо шлях
    log_path.parent.mkdir(parents=True, exist_ok=True)		# 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=ROTATE_WHEN,
        backupCount=ROTATE_BACKUPS,
        encoding=FILE_ENCODING,
    )
    handler.setFormatter(fmt)
    return handler


def _suppress_third_party(suppress: Dict[str, str]) -> None:
    """Знижує рівні логування для сторонніх бібліотек."""
    for name, level in (suppress or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[Union[str, int]] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
) -> logging.Logger:
    """
    Ініціалізує кореневий логер `payrate` за єдиною схемою.

    Повторний виклик замінює хендлери, які додав попередній виклик,
    тому CLI може переналаштувати рівень після розбору аргументів.
    """
    with _lock:
        cfg = LoggingConfig(
            level=str(level or DEFAULT_LEVEL),
            console=True if console is None else bool(console),
            json=bool(json_mode),
            file=file or None,
            suppress=dict(suppress or {}),
            console_format=console_format or CONSOLE_FORMAT,
            file_format=file_format or PLAIN_FORMAT,
        )

        root_logger = logging.getLogger(LOG_NAME)			# 🏷️ Кореневий логер застосунку
        root_level = _to_level(cfg.level, logging.WARNING)
        root_logger.setLevel(root_level)
        root_logger.propagate = False					# 🔇 Не дублюємо записи у root Python

        for handler in list(root_logger.handlers):			# 🧹 Прибираємо хендлери попереднього виклику
            if getattr(handler, "_payrate_owned", False):
                root_logger.removeHandler(handler)
                handler.close()

        if cfg.console:
            console_handler = _make_console_handler(logging.Formatter(cfg.console_format))
            console_handler.setLevel(root_level)
            console_handler._payrate_owned = True  # type: ignore[attr-defined]
            root_logger.addHandler(console_handler)

        if cfg.file:
            fmt_file = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)
            file_handler = _make_file_handler(cfg, fmt_file)
            file_handler.setLevel(root_level)
            file_handler._payrate_owned = True  # type: ignore[attr-defined]
            root_logger.addHandler(file_handler)

        _suppress_third_party(cfg.suppress)

        root_logger.debug(
            "✅ Logging initialized | level=%s console=%s json=%s file=%s",
            logging.getLevelName(root_level),
            "ON" if cfg.console else "OFF",
            "ON" if cfg.json else "OFF",
            cfg.file or "-",
        )
        return root_logger


def init_logging_from_config(config: Optional[Dict[str, Any]], *, level: Optional[str] = None) -> logging.Logger:
    """
    Ініціалізує логування на базі розділу `logging` з ConfigService.

    Args:
        config: Словник розділу `logging`.
        level: Рівень, що перекриває конфіг (наприклад, з CLI-флага).

    Returns:
        logging.Logger: Кореневий логер застосунку.
    """
    node = config or {}
    return init_logging(
        level=level or node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        suppress=node.get("suppress"),
        console_format=node.get("console_format"),
        file_format=node.get("file_format"),
    )

