"""Tests for the supply ledger."""

import pytest

from caravan.engine.supplies import (
    add_supplies,
    apply_supply_delta,
    clone_supplies,
    consume_food,
    create_supplies,
    feed_party,
    get_daily_food_need,
    has_enough,
    spend_money,
    subtract_supplies,
    use_ammo,
    use_medicine,
    use_parts,
)
from caravan.models.game import RationsType
from caravan.models.supplies import Supplies, SupplyDelta


def test_create_supplies_uses_starting_amounts():
    supplies = create_supplies()

    assert supplies.food == 200
    assert supplies.ammunition == 100
    assert supplies.medicine == 5
    assert supplies.spare_parts == 2
    assert supplies.money == 400


def test_clone_is_equal_but_independent():
    """Mutating a clone must never change the original."""
    original = Supplies(food=50, ammunition=20, medicine=1, spare_parts=1, money=12.5)
    clone = clone_supplies(original)

    assert clone == original
    assert clone is not original

    clone.food = 0
    clone.money = 0

    assert original.food == 50
    assert original.money == 12.5


@pytest.mark.parametrize(
    "spend, field, before",
    [
        (lambda s: consume_food(s, 10), "food", 5),
        (lambda s: use_ammo(s, 10), "ammunition", 5),
        (lambda s: use_medicine(s), "medicine", 0),
        (lambda s: use_parts(s), "spare_parts", 0),
        (lambda s: spend_money(s, 10), "money", 5),
    ],
)
def test_spend_is_all_or_nothing(spend, field, before):
    """An insufficient spend fails and leaves the pool untouched."""
    supplies = Supplies(**{field: before})

    assert spend(supplies) is False
    assert getattr(supplies, field) == before


def test_successful_spends_deduct_full_amount():
    supplies = Supplies(food=10, ammunition=10, medicine=1, spare_parts=1, money=10)

    assert consume_food(supplies, 10) is True
    assert use_ammo(supplies, 4) is True
    assert use_medicine(supplies) is True
    assert use_parts(supplies) is True
    assert spend_money(supplies, 2.5) is True

    assert supplies == Supplies(food=0, ammunition=6, medicine=0, spare_parts=0, money=7.5)


def test_add_supplies_floors_at_zero():
    supplies = Supplies(food=10)

    add_supplies(supplies, "food", -25)

    assert supplies.food == 0


def test_unknown_supply_raises():
    supplies = Supplies()

    with pytest.raises(ValueError):
        add_supplies(supplies, "whiskey", 1)
    with pytest.raises(ValueError):
        has_enough(supplies, "whiskey", 1)


def test_apply_supply_delta_adds_and_floors():
    supplies = Supplies(food=30, ammunition=10, medicine=2, spare_parts=1, money=5)

    apply_supply_delta(supplies, SupplyDelta(food=-50, ammunition=5, money=-2))

    assert supplies.food == 0
    assert supplies.ammunition == 15
    assert supplies.medicine == 2  # absent fields are unchanged
    assert supplies.spare_parts == 1
    assert supplies.money == 3


def test_subtract_supplies_takes_positive_losses():
    supplies = Supplies(food=30, spare_parts=1)

    subtract_supplies(supplies, SupplyDelta(food=10, spare_parts=3))

    assert supplies.food == 20
    assert supplies.spare_parts == 0


def test_supply_delta_helpers():
    delta = SupplyDelta(food=-5, money=2)

    assert not delta.is_empty()
    assert SupplyDelta().is_empty()
    assert delta.negated() == SupplyDelta(food=5, money=-2)
    assert delta.to_dict() == {"food": -5, "money": 2}


@pytest.mark.parametrize(
    "rations, expected",
    [(RationsType.BARE, 3), (RationsType.MEAGER, 6), (RationsType.FILLING, 9)],
)
def test_daily_food_need(rations, expected):
    assert get_daily_food_need(3, rations) == expected


def test_feed_party_reports_shortfall():
    supplies = Supplies(food=4)

    shortfall = feed_party(supplies, 3, RationsType.MEAGER)

    assert shortfall == 2
    assert supplies.food == 0


def test_negative_supplies_rejected():
    with pytest.raises(ValueError):
        Supplies(food=-1)
