"""Application service: Summarize Order use case (query).

Builds an Order from raw item specs and runs every formatter query
over it.
"""

from __future__ import annotations

import logging

from coffeeshop.application.dto import ItemSpec, OrderSummaryDTO
from coffeeshop.application.item_factory import build_item
from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.order import Order
from coffeeshop.domain.service.order_formatter import OrderFormatter

logger = logging.getLogger(__name__)


class SummarizeOrderHandler:

    def __init__(self, formatter: OrderFormatter) -> None:
        self._formatter = formatter

    def handle(self, customer_name: str, item_specs: list[ItemSpec]) -> OrderSummaryDTO:
        """Build the order, then summarize it."""
        if item_specs is None:
            raise InvalidInputError("Item list is required")
        items = [build_item(spec) for spec in item_specs]
        order = Order.create(customer_name=customer_name, items=items)
        logger.debug("Built order for %s with %d item(s)", order.customer_name, len(items))
        return self.summarize(order)

    def summarize(self, order: Order) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            customer_name=order.customer_name,
            receipt=self._formatter.generate_food_receipt(order),
            food_items=self._formatter.list_food_descriptions(order),
            drinks=self._formatter.list_drink_descriptions(order),
        )
