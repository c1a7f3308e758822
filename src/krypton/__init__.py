"""
krypton — транзакционный движок обновления состояния портфеля.

Состояние портфеля меняется только через валидированные команды (transports).
Каждое обновление — чистая функция: старый Portfolio → новый Portfolio или ошибка.
"""

__version__ = "0.1.0"
