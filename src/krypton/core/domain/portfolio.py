"""
Portfolio — Модель портфеля

Immutable Pydantic модель: отображение ISIN → Position.
Ключи уникальны (семантика dict). Пустой портфель — портфель по умолчанию.

Портфель никогда не изменяется на месте: positions доступен только для
чтения (MappingProxyType), а обновления строят новый dict и новый
Portfolio через with_positions() (copy-and-replace), поэтому ссылки на
предыдущие версии остаются корректными.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, Field, FieldSerializationInfo, field_serializer, field_validator

from krypton.core.domain.position import Position
from krypton.core.domain.values import ISIN


class Portfolio(BaseModel):
    """
    Модель портфеля (снапшот позиций).

    Immutable модель (frozen=True), positions — read-only mapping.
    Изменения — только через krypton.update.dispatcher.update().
    """

    positions: Mapping[ISIN, Position] = Field(
        default_factory=dict, validate_default=True, description="Позиции по ISIN"
    )

    model_config = {"frozen": True}

    @field_validator("positions", mode="before")
    @classmethod
    def coerce_keys(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {ISIN(k) if isinstance(k, str) else k: p for k, p in v.items()}
        return v

    @field_validator("positions", mode="after")
    @classmethod
    def freeze_positions(cls, v: Mapping[ISIN, Position]) -> Mapping[ISIN, Position]:
        return MappingProxyType(dict(v))

    @field_serializer("positions")
    def serialize_positions(
        self, positions: Mapping[ISIN, Position], info: FieldSerializationInfo
    ) -> dict[str, Any]:
        mode = "json" if info.mode_is_json() else "python"
        return {isin.value: p.model_dump(mode=mode) for isin, p in positions.items()}

    def with_positions(self, positions: Mapping[ISIN, Position]) -> "Portfolio":
        """Новый портфель с данными позициями (копия mapping, без повторной валидации)."""
        return self.model_copy(update={"positions": MappingProxyType(dict(positions))})

    @property
    def size(self) -> int:
        """Количество позиций."""
        return len(self.positions)

    def get_position(self, isin: ISIN) -> Optional[Position]:
        return self.positions.get(isin)

    def has_isin(self, isin: ISIN) -> bool:
        return isin in self.positions

    def market_value(self) -> Decimal:
        """Суммарная рыночная стоимость всех позиций."""
        return sum((p.market_value() for p in self.positions.values()), Decimal("0"))

    def cost_value(self) -> Decimal:
        """Суммарная стоимость покупки всех позиций."""
        return sum((p.cost_value() for p in self.positions.values()), Decimal("0"))
