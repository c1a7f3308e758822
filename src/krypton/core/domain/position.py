"""
Position — Модель позиции в портфеле

Immutable Pydantic модель: ISIN, количество, цена покупки, последняя цена.
Все десятичные поля — PDecimal (неотрицательные). Любое изменение позиции
создаёт новый экземпляр.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, FieldSerializationInfo, field_serializer, field_validator

from krypton.core.domain.values import ISIN, PDecimal


# =============================================================================
# POSITION MODEL
# =============================================================================


class Position(BaseModel):
    """
    Модель позиции.

    Immutable модель (frozen=True). Принимает как готовые ISIN/PDecimal,
    так и "сырые" значения (строки, числа) — они оборачиваются в value objects.
    Отрицательные значения отклоняются (ValidationError).
    """

    isin: ISIN = Field(..., description="Идентификатор инструмента")
    quantity: PDecimal = Field(..., description="Количество")
    price_buy: PDecimal = Field(..., description="Цена покупки")
    last_price: PDecimal = Field(..., description="Последняя цена")

    model_config = {"frozen": True}

    @field_validator("isin", mode="before")
    @classmethod
    def coerce_isin(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ISIN(v)
        return v

    @field_validator("quantity", "price_buy", "last_price", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        """Сырые числа → PDecimal (InvalidValue для отрицательных)."""
        if isinstance(v, (Decimal, int, float, str)) and not isinstance(v, bool):
            return PDecimal(v)
        return v

    @field_serializer("isin")
    def serialize_isin(self, isin: ISIN) -> str:
        return isin.value

    @field_serializer("quantity", "price_buy", "last_price")
    def serialize_decimal(self, v: PDecimal, info: FieldSerializationInfo) -> Any:
        if info.mode_is_json():
            return str(v.value)
        return v.value

    def market_value(self) -> Decimal:
        """Рыночная стоимость: quantity * last_price."""
        return self.quantity.value * self.last_price.value

    def cost_value(self) -> Decimal:
        """Стоимость покупки: quantity * price_buy."""
        return self.quantity.value * self.price_buy.value

    def unrealized_pnl(self) -> Decimal:
        """
        Нереализованный PnL.

        Returns:
            market_value - cost_value (может быть отрицательным, поэтому Decimal)
        """
        return self.market_value() - self.cost_value()
