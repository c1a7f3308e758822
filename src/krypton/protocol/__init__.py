"""
Protocol — команды обновления и transport-конверты.

- Position-scoped: ChangeQuantity, ChangePriceBuy, ChangeLastPrice
- Portfolio-scoped: ReplacePosition, DeletePosition
- Transports: PositionTransport, PortfolioTransport
"""

from .portfolio import DeletePosition, PortfolioTransport, PortfolioUpdate, ReplacePosition
from .position import (
    ChangeLastPrice,
    ChangePriceBuy,
    ChangeQuantity,
    PositionTransport,
    PositionUpdate,
)
from .transport import Transport

__all__ = [
    "Transport",
    # Position
    "PositionUpdate",
    "ChangeQuantity",
    "ChangePriceBuy",
    "ChangeLastPrice",
    "PositionTransport",
    # Portfolio
    "PortfolioUpdate",
    "ReplacePosition",
    "DeletePosition",
    "PortfolioTransport",
]
