"""
Portfolio validator/applier.

- ReplacePosition: всегда валидна, insert-or-overwrite
- DeletePosition: валидна только если ISIN есть в портфеле
- Остальное: UnknownPortfolioUpdate
"""

from krypton.core.domain.portfolio import Portfolio
from krypton.core.domain.values import ISIN
from krypton.core.errors import PositionDoesNotExist, UnknownPortfolioUpdate
from krypton.protocol.portfolio import DeletePosition, PortfolioUpdate, ReplacePosition
from krypton.update.result import UpdateResult


def has_isin(portfolio: Portfolio, isin: ISIN) -> bool:
    return isin in portfolio.positions


def validate(portfolio: Portfolio, update: PortfolioUpdate) -> UpdateResult[PortfolioUpdate]:
    """
    Валидация команды против текущего портфеля.

    Args:
        portfolio: текущий портфель
        update: команда уровня портфеля

    Returns:
        UpdateResult с командой, PositionDoesNotExist или UnknownPortfolioUpdate
    """
    if isinstance(update, ReplacePosition):
        return UpdateResult.success(update)
    if isinstance(update, DeletePosition):
        if has_isin(portfolio, update.isin):
            return UpdateResult.success(update)
        return UpdateResult.failure(PositionDoesNotExist(update.isin))
    return UpdateResult.failure(UnknownPortfolioUpdate(portfolio))


def apply(portfolio: Portfolio, update: PortfolioUpdate) -> UpdateResult[Portfolio]:
    """Новый портфель; исходный dict позиций не изменяется."""
    if isinstance(update, ReplacePosition):
        positions = {**portfolio.positions, update.isin: update.position}
        return UpdateResult.success(portfolio.with_positions(positions))
    if isinstance(update, DeletePosition):
        positions = {k: v for k, v in portfolio.positions.items() if k != update.isin}
        return UpdateResult.success(portfolio.with_positions(positions))
    return UpdateResult.failure(UnknownPortfolioUpdate(portfolio))


def update(portfolio: Portfolio, update: PortfolioUpdate) -> UpdateResult[Portfolio]:
    return validate(portfolio, update).and_then(lambda validated: apply(portfolio, validated))
