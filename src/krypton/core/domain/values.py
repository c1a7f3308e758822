"""
Value objects: ISIN и PDecimal

Immutable обёртки, проверяющие доменные инварианты при создании.
PDecimal допускает только неотрицательные числа: отрицательное значение
отклоняется как можно раньше, до появления любой команды.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from krypton.core.errors import InvalidValue


DecimalInput = Union[Decimal, int, float, str]


# =============================================================================
# ISIN
# =============================================================================


@dataclass(frozen=True)
class ISIN:
    """Идентификатор позиции. Равенство и hash по значению."""

    value: str

    def __str__(self) -> str:
        return self.value


# =============================================================================
# PDECIMAL
# =============================================================================


def _to_decimal(value: DecimalInput) -> Decimal:
    if isinstance(value, bool):
        raise TypeError(f"Expected a decimal number, got {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # через str, чтобы 0.1 осталось 0.1, а не двоичным приближением
        return Decimal(str(value))
    if isinstance(value, (int, str)):
        try:
            return Decimal(value)
        except InvalidOperation:
            raise InvalidValue(value) from None
    raise TypeError(f"Expected a decimal number, got {type(value).__name__}")


@dataclass(frozen=True, order=True)
class PDecimal:
    """
    Неотрицательное десятичное число.

    Создание с отрицательным значением, NaN или Infinity выбрасывает InvalidValue.
    Округления и нормализации scale нет; -0 хранится как 0, чтобы
    строковое представление всегда проходило wire-контракт.
    Арифметика всегда возвращает новый экземпляр.
    """

    value: Decimal

    def __post_init__(self) -> None:
        value = _to_decimal(self.value)
        if not value.is_finite() or value < 0:
            raise InvalidValue(self.value)
        if value.is_zero():
            value = value.copy_abs()
        object.__setattr__(self, "value", value)

    def __add__(self, other: "PDecimal") -> "PDecimal":
        if not isinstance(other, PDecimal):
            return NotImplemented
        return PDecimal(self.value + other.value)

    def __sub__(self, other: "PDecimal") -> "PDecimal":
        """Разность; InvalidValue, если результат отрицательный."""
        if not isinstance(other, PDecimal):
            return NotImplemented
        return PDecimal(self.value - other.value)

    def __mul__(self, other: "PDecimal") -> "PDecimal":
        if not isinstance(other, PDecimal):
            return NotImplemented
        return PDecimal(self.value * other.value)

    def __str__(self) -> str:
        return str(self.value)


ZERO: PDecimal = PDecimal(Decimal("0"))


def as_pdecimal(value: "PDecimal | DecimalInput") -> PDecimal:
    """PDecimal как есть; сырое число оборачивается (InvalidValue для отрицательных)."""
    if isinstance(value, PDecimal):
        return value
    return PDecimal(value)
