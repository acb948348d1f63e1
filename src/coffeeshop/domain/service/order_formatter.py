"""Domain service: Order Formatter.

Read-only queries that turn an Order into receipt text and item
descriptions. Nothing here mutates the order, so every call on the same
order yields the same output.
"""

from __future__ import annotations

import logging

from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.drink import Beverage
from coffeeshop.domain.model.item import Bagel, Cookie, Donut
from coffeeshop.domain.model.order import Order
from coffeeshop.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class OrderFormatter:

    def generate_food_receipt(self, order: Order) -> str:
        """Receipt for the bakery items of an order.

        One ``<Category>: [<subtype>] $<price>`` line per bakery item in
        order, followed by ``Total: $<sum>``. Beverages are left off and
        do not count toward the total.
        """
        self._require_order(order)

        lines: list[str] = []
        total = Money.zero()
        for item in order.bakery_items:
            lines.append(item.receipt_line())
            total = total + item.price
        lines.append(f"Total: {total}")

        logger.debug(
            "Receipt for %s: %d bakery item(s), total %s",
            order.customer_name,
            len(lines) - 1,
            total,
        )
        return "\n".join(lines)

    def list_food_descriptions(self, order: Order) -> list[str]:
        """Describe each bakery item; anything else is skipped."""
        self._require_order(order)

        descriptions: list[str] = []
        for item in order.items:
            match item:
                case Bagel(bagel_type=bagel_type, spread_type=spread_type):
                    descriptions.append(f"{bagel_type} bagel with {spread_type}")
                case Cookie(cookie_type=cookie_type):
                    descriptions.append(f"{cookie_type} cookie")
                case Donut(donut_type=donut_type):
                    descriptions.append(f"{donut_type} donut")
                case _:
                    continue
        return descriptions

    def list_drink_descriptions(self, order: Order) -> list[str]:
        """Describe each beverage, e.g. ``Hot Caramel Latte with Almond Milk``."""
        self._require_order(order)

        descriptions: list[str] = []
        for item in order.items:
            match item:
                case Beverage():
                    descriptions.append(item.description)
                case _:
                    continue
        return descriptions

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _require_order(order: Order) -> None:
        if order is None:
            raise InvalidInputError("Order is required")
        if not isinstance(order, Order):
            raise InvalidInputError(
                f"Expected an Order, got {type(order).__name__}"
            )
