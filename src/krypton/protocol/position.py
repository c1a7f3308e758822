"""
Команды обновления позиции.

Каждая команда несёт ровно одно значение PDecimal. Сырые числа
оборачиваются в PDecimal при создании команды, поэтому отрицательное
значение отклоняется (InvalidValue) ещё до dispatcher'а, а position
validator принимает эти команды без дополнительных условий.
"""

from dataclasses import dataclass

from krypton.core.domain.values import ISIN, PDecimal, as_pdecimal
from krypton.protocol.transport import Transport


# =============================================================================
# UPDATES
# =============================================================================


@dataclass(frozen=True)
class PositionUpdate:
    """Базовый тип для команд уровня позиции."""


@dataclass(frozen=True)
class ChangeQuantity(PositionUpdate):
    quantity: PDecimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantity", as_pdecimal(self.quantity))


@dataclass(frozen=True)
class ChangePriceBuy(PositionUpdate):
    price_buy: PDecimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "price_buy", as_pdecimal(self.price_buy))


@dataclass(frozen=True)
class ChangeLastPrice(PositionUpdate):
    last_price: PDecimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "last_price", as_pdecimal(self.last_price))


# =============================================================================
# TRANSPORT
# =============================================================================


@dataclass(frozen=True)
class PositionTransport(Transport):
    """Команда, адресованная позиции с данным ISIN."""

    isin: ISIN
    update: PositionUpdate

    def __post_init__(self) -> None:
        if not isinstance(self.isin, ISIN):
            raise TypeError(f"Expected ISIN, got {type(self.isin).__name__}")
