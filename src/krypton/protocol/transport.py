"""
Transport — конверт для команды обновления.

Transport адресует команду либо одной позиции (PositionTransport),
либо портфелю целиком (PortfolioTransport). Иерархия открыта:
неизвестные подклассы отклоняются dispatcher'ом как UnknownUpdate.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Transport:
    """Базовый тип для всех transports."""
