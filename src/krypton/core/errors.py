"""
Ошибки обновления портфеля.

Все ошибки — подклассы UpdateError. Validators, appliers и dispatcher
не выбрасывают их, а возвращают внутри UpdateResult. Исключение —
InvalidValue: выбрасывается сразу при создании PDecimal.
"""

from typing import Any


class UpdateError(Exception):
    """Базовый класс для всех ошибок обновления."""


class InvalidValue(UpdateError, ValueError):
    """Отрицательное (или неупорядочиваемое) десятичное значение."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Value must be a non-negative decimal, got {value!r}")


class PositionDoesNotExist(UpdateError):
    """Позиция с данным ISIN отсутствует в портфеле."""

    def __init__(self, isin: Any):
        self.isin = isin
        super().__init__(f"Position for {isin} does not exist")


class UnknownPositionUpdate(UpdateError):
    """Команда неизвестной формы дошла до position validator."""

    def __init__(self, position: Any):
        self.position = position
        super().__init__(f"Unknown update on position {position}")


class UnknownPortfolioUpdate(UpdateError):
    """Команда неизвестной формы дошла до portfolio validator."""

    def __init__(self, portfolio: Any):
        self.portfolio = portfolio
        super().__init__(f"Unknown update on portfolio {portfolio}")


class UnknownUpdate(UpdateError):
    """Transport не соответствует ни одной известной форме."""

    def __init__(self, transport: Any = None):
        self.transport = transport
        super().__init__("Unknown update")
