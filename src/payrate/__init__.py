# 💸 payrate/__init__.py
"""
💸 payrate — CLI-калькулятор: погодинна ставка ⇄ річна зарплата (2080 робочих годин на рік).
"""

__version__ = "0.1.0"
