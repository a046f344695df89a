# 🏛️ payrate/domain/__init__.py
"""🏛️ Доменний шар: чиста арифметика без форматування та I/O."""
