"""General store: prices, purchases and sales.

Ammunition is sold by the box of AMMO_PER_BOX rounds; every other item by
the single unit. Oxen are priced here but live on the wagon, so
apply_purchase and apply_sale leave supplies untouched for them apart from
the money.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum

from ..models.supplies import Supplies
from ..models.wagon import Wagon
from ..utils.constants import AMMO_PER_BOX, SELL_PRICE_RATIO, STORE_PRICES


class StoreItem(str, Enum):
    FOOD = "food"
    AMMUNITION = "ammunition"
    MEDICINE = "medicine"
    SPARE_PARTS = "spare_parts"
    OXEN = "oxen"


# (singular, plural)
_UNITS: dict[StoreItem, tuple[str, str]] = {
    StoreItem.FOOD: ("lb", "lbs"),
    StoreItem.AMMUNITION: ("box (20)", "boxes (20)"),
    StoreItem.MEDICINE: ("dose", "doses"),
    StoreItem.SPARE_PARTS: ("set", "sets"),
    StoreItem.OXEN: ("ox", "oxen"),
}

# Supply units received per store unit
_UNIT_SIZE: dict[StoreItem, int] = {
    StoreItem.FOOD: 1,
    StoreItem.AMMUNITION: AMMO_PER_BOX,
    StoreItem.MEDICINE: 1,
    StoreItem.SPARE_PARTS: 1,
    StoreItem.OXEN: 1,
}


@dataclass
class PurchaseResult:
    success: bool
    cost: float
    message: str


@dataclass
class SaleResult:
    success: bool
    revenue: float
    message: str


def get_price(item: StoreItem) -> float:
    return STORE_PRICES[StoreItem(item).value]


def get_unit(item: StoreItem, quantity: int = 1) -> str:
    singular, plural = _UNITS[StoreItem(item)]
    return plural if quantity > 1 else singular


def calculate_cost(item: StoreItem, quantity: int) -> float:
    return get_price(item) * quantity


def can_afford(money: float, item: StoreItem, quantity: int) -> bool:
    return money >= calculate_cost(item, quantity)


def buy(item: StoreItem, quantity: int, current_money: float) -> PurchaseResult:
    """Price a purchase without applying it.

    Args:
        item: Item to buy
        quantity: Store units (boxes for ammunition)
        current_money: Money available

    Returns:
        PurchaseResult; cost is 0 when the purchase is refused
    """
    if quantity <= 0:
        return PurchaseResult(success=False, cost=0, message="Invalid quantity.")

    cost = calculate_cost(item, quantity)
    if not can_afford(current_money, item, quantity):
        return PurchaseResult(success=False, cost=0, message=f"Not enough money. Need ${cost:.2f}.")

    return PurchaseResult(
        success=True,
        cost=cost,
        message=f"Purchased {quantity} {get_unit(item, quantity)} for ${cost:.2f}.",
    )


def get_sell_price(item: StoreItem) -> float:
    return get_price(item) * SELL_PRICE_RATIO


def sell(item: StoreItem, quantity: int, current_quantity: int) -> SaleResult:
    """Price a sale without applying it.

    Args:
        item: Item to sell
        quantity: Store units to sell
        current_quantity: Store units owned (see get_owned_quantity)

    Returns:
        SaleResult; revenue is 0 when the sale is refused
    """
    if quantity <= 0:
        return SaleResult(success=False, revenue=0, message="Invalid quantity.")

    if quantity > current_quantity:
        return SaleResult(
            success=False,
            revenue=0,
            message=f"You only have {current_quantity} to sell.",
        )

    revenue = get_sell_price(item) * quantity
    return SaleResult(
        success=True,
        revenue=revenue,
        message=f"Sold {quantity} {get_unit(item, quantity)} for ${revenue:.2f}.",
    )


def get_max_purchase(money: float, item: StoreItem) -> int:
    return math.floor(money / get_price(item))


def get_owned_quantity(supplies: Supplies, wagon: Wagon, item: StoreItem) -> int:
    """Return how many whole store units of an item the party owns."""
    item = StoreItem(item)
    if item == StoreItem.OXEN:
        return wagon.oxen
    return getattr(supplies, item.value) // _UNIT_SIZE[item]


def apply_purchase(supplies: Supplies, item: StoreItem, quantity: int) -> Supplies:
    """Return new supplies with the purchase paid for and received."""
    item = StoreItem(item)
    updated = replace(supplies, money=supplies.money - calculate_cost(item, quantity))
    if item != StoreItem.OXEN:
        received = getattr(updated, item.value) + quantity * _UNIT_SIZE[item]
        setattr(updated, item.value, received)
    return updated


def apply_sale(supplies: Supplies, item: StoreItem, quantity: int) -> Supplies:
    """Return new supplies with the goods handed over and paid for."""
    item = StoreItem(item)
    updated = replace(supplies, money=supplies.money + get_sell_price(item) * quantity)
    if item != StoreItem.OXEN:
        remaining = getattr(updated, item.value) - quantity * _UNIT_SIZE[item]
        setattr(updated, item.value, max(0, remaining))
    return updated


def get_store_inventory() -> list[dict]:
    """List every item with its price and unit label."""
    return [
        {"item": item.value, "price": get_price(item), "unit": get_unit(item)}
        for item in StoreItem
    ]
