"""Order items: the things a customer can put in an order.

``Item`` is the common capability. Bakery items are priced food sold by
unit; beverages live in ``coffeeshop.domain.model.drink``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.value_objects import Money


class Item(ABC):
    """Anything that can appear in an order."""


def _require_text(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{field_name} is required")
    return value.strip()


def _coerce_price(price: Money | str | int | float | Decimal) -> Money:
    if isinstance(price, Money):
        return price
    return Money.of(price)


class BakeryItem(Item):
    """A priced food item sold by unit (bagel, cookie, donut)."""

    price: Money

    @property
    def category(self) -> str:
        """Variant name shown on the receipt, e.g. ``Bagel``."""
        return type(self).__name__

    @property
    @abstractmethod
    def subtype(self) -> str:
        """The flavour of this item, e.g. ``EVERYTHING`` for a bagel."""

    def receipt_line(self) -> str:
        return f"{self.category}: [{self.subtype}] {self.price}"


@dataclass(frozen=True)
class Bagel(BakeryItem):
    bagel_type: str
    spread_type: str
    price: Money

    def __post_init__(self) -> None:
        object.__setattr__(self, "bagel_type", _require_text(self.bagel_type, "Bagel type"))
        object.__setattr__(self, "spread_type", _require_text(self.spread_type, "Spread type"))
        object.__setattr__(self, "price", _coerce_price(self.price))

    @property
    def subtype(self) -> str:
        return self.bagel_type


@dataclass(frozen=True)
class Cookie(BakeryItem):
    cookie_type: str
    price: Money

    def __post_init__(self) -> None:
        object.__setattr__(self, "cookie_type", _require_text(self.cookie_type, "Cookie type"))
        object.__setattr__(self, "price", _coerce_price(self.price))

    @property
    def subtype(self) -> str:
        return self.cookie_type


@dataclass(frozen=True)
class Donut(BakeryItem):
    donut_type: str
    price: Money

    def __post_init__(self) -> None:
        object.__setattr__(self, "donut_type", _require_text(self.donut_type, "Donut type"))
        object.__setattr__(self, "price", _coerce_price(self.price))

    @property
    def subtype(self) -> str:
        return self.donut_type
