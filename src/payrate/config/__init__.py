# ⚙️ payrate/config/__init__.py
"""
⚙️ Пакет Config — централізована конфігурація CLI.

Цей пакет відповідає за:
- Завантаження налаштувань (вбудований config.yaml, PAYRATE_CONFIG, .env/ENV).
- Єдиний доступ до них через `ConfigService.get()`.
"""

from .config_service import ConfigService

__all__ = ["ConfigService"]
