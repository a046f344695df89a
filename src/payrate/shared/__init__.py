# 🧰 payrate/shared/__init__.py
"""🧰 Спільний шар: логування та утиліти, які не залежать від домену."""
