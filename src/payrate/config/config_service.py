# ⚙️ config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з вбудованих дефолтів, config.yaml та змінних оточення (.env).
- Надає єдиний метод .get() для доступу до будь-якого параметра.
- Працює як Singleton.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import find_dotenv, load_dotenv # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import copy                                 # 🧬 Глибока копія дефолтів
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Dict, Optional      # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from payrate.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"   # 📘 Вбудований YAML
CONFIG_PATH_ENV = "PAYRATE_CONFIG"                           # 🛤️ Альтернативний YAML

# 🌱 ENV-змінна → крапковий ключ
ENV_KEYS: Dict[str, str] = {
    "PAYRATE_COLOR": "output.color",
    "PAYRATE_LOG_LEVEL": "logging.level",
}

# 🧱 Значення, якщо YAML відсутній або порожній
_DEFAULTS: Dict[str, Any] = {
    "output": {"color": "auto"},
    "logging": {
        "level": "WARNING",
        "console": True,
        "json": False,
        "file": None,
        "suppress": {},
    },
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів.
    Працює як Singleton — конфігурація зчитується лише один раз за процес.
    """

    _instance: Optional["ConfigService"] = None   # 🧩 Singleton-екземпляр
    _config: Dict[str, Any]                       # 📦 Обʼєднана конфігурація зі всіх джерел

    def __new__(cls):
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._load_all_configs()          # 🔄 Завантаження під час першого виклику
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає singleton (наступний виклик перечитає джерела)."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (від слабшого): дефолти → config.yaml → ENV/.env
        """
        self._config = copy.deepcopy(_DEFAULTS)

        # --- 1. YAML-файл ---
        yaml_path = Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
        try:
            logger.debug("📘 Завантаження %s", yaml_path)
            with open(yaml_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
            if isinstance(loaded, dict):
                self._deep_update(self._config, loaded)
                self._restore_sections(self._config, _DEFAULTS)   # 🧱 Секції мають лишатися словниками
            elif loaded is not None:
                logger.warning("⚠️ %s має містити словник, отримано %s", yaml_path, type(loaded).__name__)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", yaml_path, e)

        # --- 2. .env та змінні оточення ---
        load_dotenv(find_dotenv(usecwd=True))  # 🔐 .env з робочої директорії; не перезаписує вже встановлені змінні
        env_vars = {key: os.getenv(env) for env, key in ENV_KEYS.items() if os.getenv(env)}
        if env_vars:
            logger.debug("🌱 ENV overrides: %s", sorted(env_vars))
            self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.debug("🔍 Обʼєднаний словник конфігурації: %s", self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'logging.level').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]                 # 🔎 Переходимо глибше в структуру
            else:
                return default
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'logging.level' → {'logging': {'level': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    @classmethod
    def _restore_sections(cls, config: Dict[str, Any], defaults: Dict[str, Any], prefix: str = "") -> None:
        """
        🧱 Повертає дефолт для кожної секції, яка у YAML перестала бути словником.
        `logging: verbose` → попередження і `logging` з `_DEFAULTS`.
        """
        for key, default in defaults.items():
            if not isinstance(default, dict):
                continue
            dotted = f"{prefix}{key}"
            value = config.get(key)
            if isinstance(value, dict):
                cls._restore_sections(value, default, f"{dotted}.")
            else:
                logger.warning("⚠️ '%s' має бути словником, отримано %s; беремо дефолт", dotted, type(value).__name__)
                config[key] = copy.deepcopy(default)

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словники (overrides перемагає)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value
