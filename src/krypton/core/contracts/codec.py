"""
Codec — преобразование между JSON представлением и transports/портфелем.

Декодирование всегда начинается с проверки JSON Schema, поэтому
отрицательные или нечисловые значения отклоняются до создания объектов.
"""

from typing import Any, Dict

from krypton.core.contracts.validators import validate_portfolio, validate_transport
from krypton.core.domain.portfolio import Portfolio
from krypton.core.domain.position import Position
from krypton.core.domain.values import ISIN, PDecimal
from krypton.core.errors import UnknownUpdate
from krypton.protocol.portfolio import DeletePosition, PortfolioTransport, ReplacePosition
from krypton.protocol.position import (
    ChangeLastPrice,
    ChangePriceBuy,
    ChangeQuantity,
    PositionTransport,
)
from krypton.protocol.transport import Transport


# wire type → (класс команды, имя поля)
_POSITION_UPDATES = {
    "change_quantity": (ChangeQuantity, "quantity"),
    "change_price_buy": (ChangePriceBuy, "price_buy"),
    "change_last_price": (ChangeLastPrice, "last_price"),
}


def decode_transport(data: Dict[str, Any]) -> Transport:
    """
    JSON dict → Transport.

    Raises:
        ContractViolation: Если данные не соответствуют transport.json
    """
    validate_transport(data)
    update = data["update"]

    if data["target"] == "position":
        update_cls, field_name = _POSITION_UPDATES[update["type"]]
        return PositionTransport(
            isin=ISIN(data["isin"]),
            update=update_cls(**{field_name: PDecimal(update["value"])}),
        )

    if update["type"] == "replace_position":
        return PortfolioTransport(
            ReplacePosition(
                isin=ISIN(update["isin"]),
                position=Position.model_validate(update["position"]),
            )
        )
    return PortfolioTransport(DeletePosition(isin=ISIN(update["isin"])))


def encode_transport(transport: Transport) -> Dict[str, Any]:
    """
    Transport → JSON dict.

    Raises:
        UnknownUpdate: Если transport или команда неизвестной формы
    """
    if isinstance(transport, PositionTransport):
        for wire_type, (update_cls, field_name) in _POSITION_UPDATES.items():
            if type(transport.update) is update_cls:
                value: PDecimal = getattr(transport.update, field_name)
                return {
                    "target": "position",
                    "isin": transport.isin.value,
                    "update": {"type": wire_type, "value": str(value)},
                }

    if isinstance(transport, PortfolioTransport):
        update = transport.update
        if isinstance(update, ReplacePosition):
            return {
                "target": "portfolio",
                "update": {
                    "type": "replace_position",
                    "isin": update.isin.value,
                    "position": update.position.model_dump(mode="json"),
                },
            }
        if isinstance(update, DeletePosition):
            return {
                "target": "portfolio",
                "update": {"type": "delete_position", "isin": update.isin.value},
            }

    raise UnknownUpdate(transport)


def decode_portfolio(data: Dict[str, Any]) -> Portfolio:
    """
    JSON dict → Portfolio.

    Raises:
        ContractViolation: Если данные не соответствуют portfolio.json
    """
    validate_portfolio(data)
    return Portfolio.model_validate(data)


def encode_portfolio(portfolio: Portfolio) -> Dict[str, Any]:
    return portfolio.model_dump(mode="json")
