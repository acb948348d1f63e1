"""Composition root: wires concrete objects together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from coffeeshop.application.summarize_order import SummarizeOrderHandler
from coffeeshop.domain.model.drink import Americano, Latte, Macchiato, MilkType, Tea
from coffeeshop.domain.model.item import Bagel, Cookie, Donut
from coffeeshop.domain.model.order import Order
from coffeeshop.domain.service.order_formatter import OrderFormatter

SAMPLE_CUSTOMER = "John Doe"


def order_formatter() -> OrderFormatter:
    return OrderFormatter()


def summarize_order_handler() -> SummarizeOrderHandler:
    return SummarizeOrderHandler(order_formatter())


def sample_order() -> Order:
    """The demo order: three bakery items and four drinks."""
    return Order.create(
        customer_name=SAMPLE_CUSTOMER,
        items=[
            Cookie("CHOCOLATE_CHIP", "2.50"),
            Bagel("EVERYTHING", "HERB_GARLIC_CREAM_CHEESE", "3.00"),
            Donut("GLAZED", "1.75"),
            Americano(),
            Latte("Caramel", MilkType.ALMOND),
            Macchiato("Vanilla", MilkType.WHOLE),
            Tea("Matcha"),
        ],
    )
