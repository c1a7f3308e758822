"""
Domain models and value objects.

Contains ISIN, PDecimal, Position and Portfolio.
"""

from krypton.core.domain.portfolio import Portfolio
from krypton.core.domain.position import Position
from krypton.core.domain.values import ISIN, ZERO, PDecimal, as_pdecimal

__all__ = [
    # Value objects
    "ISIN",
    "PDecimal",
    "ZERO",
    "as_pdecimal",
    # Entities
    "Position",
    "Portfolio",
]
