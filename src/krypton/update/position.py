"""
Position validator/applier.

validate() решает, допустима ли команда для позиции; apply() строит новую
позицию с заменённым полем; update() = validate, затем apply.
Все функции чистые.
"""

from krypton.core.domain.position import Position
from krypton.core.errors import UnknownPositionUpdate
from krypton.protocol.position import (
    ChangeLastPrice,
    ChangePriceBuy,
    ChangeQuantity,
    PositionUpdate,
)
from krypton.update.result import UpdateResult


def validate(position: Position, update: PositionUpdate) -> UpdateResult[PositionUpdate]:
    """
    Валидация команды против текущей позиции.

    Сейчас все три известные команды принимаются без условий: значение
    уже неотрицательно. Здесь место для правил вида "ChangeQuantity только
    при достаточном балансе".

    Args:
        position: текущая позиция
        update: команда уровня позиции

    Returns:
        UpdateResult с той же командой или UnknownPositionUpdate
    """
    if isinstance(update, (ChangeQuantity, ChangePriceBuy, ChangeLastPrice)):
        return UpdateResult.success(update)
    return UpdateResult.failure(UnknownPositionUpdate(position))


def apply(position: Position, update: PositionUpdate) -> UpdateResult[Position]:
    """Новая позиция, в которой заменено ровно одно поле.

    model_copy не валидирует, но значение команды уже PDecimal (см. protocol.position).
    """
    if isinstance(update, ChangeQuantity):
        return UpdateResult.success(position.model_copy(update={"quantity": update.quantity}))
    if isinstance(update, ChangePriceBuy):
        return UpdateResult.success(position.model_copy(update={"price_buy": update.price_buy}))
    if isinstance(update, ChangeLastPrice):
        return UpdateResult.success(position.model_copy(update={"last_price": update.last_price}))
    return UpdateResult.failure(UnknownPositionUpdate(position))


def update(position: Position, update: PositionUpdate) -> UpdateResult[Position]:
    return validate(position, update).and_then(lambda validated: apply(position, validated))
