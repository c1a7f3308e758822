"""
Тесты для position validator/applier.

Coverage:
- Принятие трёх известных команд
- Замена ровно одного поля
- Отклонение неизвестных команд (UnknownPositionUpdate)
"""

from dataclasses import dataclass
from decimal import Decimal

import pytest

from krypton.core.domain import ISIN, PDecimal, Position
from krypton.core.errors import InvalidValue, UnknownPositionUpdate
from krypton.protocol import (
    ChangeLastPrice,
    ChangePriceBuy,
    ChangeQuantity,
    PositionTransport,
    PositionUpdate,
)
from krypton.update import position as position_updates


@dataclass(frozen=True)
class SplitPosition(PositionUpdate):
    """Команда, которую validator не знает."""

    ratio: PDecimal


def pd(value: str) -> PDecimal:
    return PDecimal(Decimal(value))


@pytest.fixture
def position() -> Position:
    return Position(isin=ISIN("DE01"), quantity=pd("1"), price_buy=pd("2"), last_price=pd("3"))


class TestValidate:
    """Тесты position validate()."""

    @pytest.mark.parametrize(
        "update",
        [ChangeQuantity(pd("5")), ChangePriceBuy(pd("5")), ChangeLastPrice(pd("5"))],
    )
    def test_known_updates_accepted(self, position, update):
        result = position_updates.validate(position, update)
        assert result.is_success
        assert result.value is update

    def test_unknown_update_rejected(self, position):
        result = position_updates.validate(position, SplitPosition(pd("2")))
        assert isinstance(result.error, UnknownPositionUpdate)
        assert result.error.position == position

    def test_non_command_rejected(self, position):
        result = position_updates.validate(position, "change_quantity")  # type: ignore
        assert isinstance(result.error, UnknownPositionUpdate)


class TestApply:
    """Тесты position apply()."""

    def test_change_quantity(self, position):
        updated = position_updates.apply(position, ChangeQuantity(pd("7"))).get()
        assert updated.quantity == pd("7")
        assert updated.price_buy == position.price_buy
        assert updated.last_price == position.last_price
        assert updated.isin == position.isin

    def test_change_price_buy(self, position):
        updated = position_updates.apply(position, ChangePriceBuy(pd("7"))).get()
        assert updated.price_buy == pd("7")
        assert updated.quantity == position.quantity
        assert updated.last_price == position.last_price

    def test_change_last_price(self, position):
        updated = position_updates.apply(position, ChangeLastPrice(pd("7"))).get()
        assert updated.last_price == pd("7")
        assert updated.quantity == position.quantity
        assert updated.price_buy == position.price_buy

    def test_original_untouched(self, position):
        """apply() возвращает новый экземпляр."""
        updated = position_updates.apply(position, ChangeQuantity(pd("9"))).get()
        assert updated is not position
        assert position.quantity == pd("1")

    def test_unknown_update(self, position):
        result = position_updates.apply(position, SplitPosition(pd("2")))
        assert isinstance(result.error, UnknownPositionUpdate)


class TestUpdate:
    """Тесты position update() = validate + apply."""

    def test_validate_then_apply(self, position):
        result = position_updates.update(position, ChangeLastPrice(pd("4.5")))
        assert result.get().last_price == pd("4.5")

    def test_validation_failure_skips_apply(self, position, monkeypatch):
        calls = []
        monkeypatch.setattr(position_updates, "apply", lambda *args: calls.append(args))

        result = position_updates.update(position, SplitPosition(pd("2")))

        assert isinstance(result.error, UnknownPositionUpdate)
        assert calls == []


class TestCommandPayload:
    """Команды приводят значение к PDecimal при создании."""

    @pytest.mark.parametrize(
        "command,value",
        [(ChangeQuantity, Decimal("-5")), (ChangePriceBuy, -1), (ChangeLastPrice, "-2")],
    )
    def test_negative_raw_value_rejected(self, command, value):
        with pytest.raises(InvalidValue):
            command(value)

    def test_raw_value_coerced(self):
        command = ChangeQuantity(Decimal("5"))
        assert command.quantity == pd("5")
        assert isinstance(command.quantity, PDecimal)

    def test_pdecimal_kept(self):
        value = pd("5")
        assert ChangeLastPrice(value).last_price is value

    def test_applied_field_is_pdecimal(self, position):
        """Сырое значение не попадает в позицию в обход PDecimal."""
        updated = position_updates.update(position, ChangePriceBuy("2.5")).get()
        assert updated.price_buy == pd("2.5")
        assert isinstance(updated.price_buy, PDecimal)

    def test_transport_requires_isin(self):
        with pytest.raises(TypeError):
            PositionTransport("DE01", ChangeQuantity(pd("1")))  # type: ignore
