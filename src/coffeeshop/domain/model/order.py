"""Order: a customer's name and the items they asked for.

An Order is a value: once built, neither the name nor the item sequence
can change. All input validation happens at construction time.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.drink import Beverage
from coffeeshop.domain.model.item import BakeryItem, Item


@dataclass(frozen=True)
class Order:
    """Immutable coffee shop order.

    ``items`` accepts any iterable of ``Item`` and is stored as a tuple,
    so later changes to the caller's list never leak into the order.
    """

    customer_name: str
    items: tuple[Item, ...]

    def __post_init__(self) -> None:
        if self.customer_name is None or not str(self.customer_name).strip():
            raise InvalidInputError("Customer name is required")
        if self.items is None:
            raise InvalidInputError("Item list is required")
        if isinstance(self.items, (str, bytes)) or not isinstance(self.items, Iterable):
            raise InvalidInputError(
                f"Items must be a sequence of order items, got {type(self.items).__name__}"
            )

        items = tuple(self.items)
        for position, item in enumerate(items, start=1):
            if not isinstance(item, Item):
                raise InvalidInputError(
                    f"Item #{position} is not an order item: {item!r}"
                )

        object.__setattr__(self, "customer_name", str(self.customer_name).strip())
        object.__setattr__(self, "items", items)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(customer_name: str, items: Iterable[Item]) -> Order:
        """Create a new order, enforcing all invariants."""
        return Order(customer_name=customer_name, items=items)  # type: ignore[arg-type]

    # --- Views ----------------------------------------------------------------

    @property
    def bakery_items(self) -> tuple[BakeryItem, ...]:
        return tuple(item for item in self.items if isinstance(item, BakeryItem))

    @property
    def beverages(self) -> tuple[Beverage, ...]:
        return tuple(item for item in self.items if isinstance(item, Beverage))
