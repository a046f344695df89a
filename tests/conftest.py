# tests/conftest.py
import logging
import os
import sys
from pathlib import Path

import pytest

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "payrate.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from payrate.config.config_service import ConfigService  # noqa: E402
from payrate.shared.utils.logger import LOG_NAME  # noqa: E402

# ENV, що впливають на конфіг та кольори
_ENV_KEYS = (
    "PAYRATE_COLOR",
    "PAYRATE_LOG_LEVEL",
    "PAYRATE_CONFIG",
    "NO_COLOR",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
    "TTY_INTERACTIVE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Кожен тест стартує з чистим ENV, свіжим ConfigService і без наших лог-хендлерів."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    ConfigService.reset()
    yield
    ConfigService.reset()
    root = logging.getLogger(LOG_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True
