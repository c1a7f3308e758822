"""
Команды обновления портфеля.

ReplacePosition — insert-or-overwrite, валидна всегда.
DeletePosition — валидна только для ISIN, присутствующего в портфеле.

Типы полей проверяются при создании: в портфель не может попасть
ничего, кроме Position под ключом ISIN.
"""

from dataclasses import dataclass

from krypton.core.domain.position import Position
from krypton.core.domain.values import ISIN
from krypton.protocol.transport import Transport


def _require_isin(isin: object) -> None:
    if not isinstance(isin, ISIN):
        raise TypeError(f"Expected ISIN, got {type(isin).__name__}")


# =============================================================================
# UPDATES
# =============================================================================


@dataclass(frozen=True)
class PortfolioUpdate:
    """Базовый тип для команд уровня портфеля."""


@dataclass(frozen=True)
class ReplacePosition(PortfolioUpdate):
    isin: ISIN
    position: Position

    def __post_init__(self) -> None:
        _require_isin(self.isin)
        if not isinstance(self.position, Position):
            raise TypeError(f"Expected Position, got {type(self.position).__name__}")


@dataclass(frozen=True)
class DeletePosition(PortfolioUpdate):
    isin: ISIN

    def __post_init__(self) -> None:
        _require_isin(self.isin)


# =============================================================================
# TRANSPORT
# =============================================================================


@dataclass(frozen=True)
class PortfolioTransport(Transport):
    """Команда, адресованная портфелю целиком."""

    update: PortfolioUpdate
