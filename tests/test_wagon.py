"""Tests for the wagon ledger."""

import pytest

from caravan.engine.wagon import (
    add_oxen,
    can_travel,
    clone_wagon,
    damage,
    get_condition_status,
    lose_oxen,
    remove_oxen,
    repair,
)
from caravan.models.wagon import Wagon


def test_damage_clamps_and_reports_loss():
    wagon = Wagon(condition=15)

    assert damage(wagon, 40) == 15
    assert wagon.condition == 0


def test_repair_returns_actual_amount_restored():
    wagon = Wagon(condition=90)

    assert repair(wagon) == 10
    assert wagon.condition == 100


def test_repair_default_and_full():
    wagon = Wagon(condition=40)
    assert repair(wagon) == 25
    assert wagon.condition == 65

    assert repair(wagon, full_repair=True) == 35
    assert wagon.condition == 100


def test_oxen_limits():
    wagon = Wagon(oxen=4)
    assert add_oxen(wagon) is False

    wagon = Wagon(oxen=1)
    assert remove_oxen(wagon) is False
    assert lose_oxen(wagon) is True
    assert wagon.oxen == 0
    assert lose_oxen(wagon) is False
    assert can_travel(wagon) is False


def test_clone_is_independent():
    wagon = Wagon(condition=70, oxen=3)
    clone = clone_wagon(wagon)
    damage(clone, 10)

    assert wagon.condition == 70


@pytest.mark.parametrize(
    "condition, status",
    [(0, "Broken"), (20, "Poor"), (50, "Fair"), (70, "Good"), (100, "Excellent")],
)
def test_condition_status(condition, status):
    assert get_condition_status(Wagon(condition=condition)) == status


def test_invalid_wagon_rejected():
    with pytest.raises(ValueError):
        Wagon(condition=120)
