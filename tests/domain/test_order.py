"""Unit tests for the Order value and its input validation."""

import pytest

from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.drink import Americano, Tea
from coffeeshop.domain.model.order import Order
from tests.factories import bagel, cookie, donut


class TestOrderCreation:

    def test_happy_path(self):
        order = Order("Alice", [cookie(), bagel()])
        assert order.customer_name == "Alice"
        assert len(order.items) == 2

    def test_create_factory(self):
        order = Order.create("Bob", [donut()])
        assert order.items == (donut(),)

    def test_customer_name_is_trimmed(self):
        assert Order("  Alice ", []).customer_name == "Alice"

    def test_empty_item_list_is_valid(self):
        assert Order("Alice", []).items == ()

    def test_items_accepts_any_iterable(self):
        order = Order("Alice", (item for item in [cookie(), donut()]))
        assert order.items == (cookie(), donut())


class TestOrderImmutability:

    def test_items_stored_as_tuple(self):
        assert isinstance(Order("Alice", [cookie()]).items, tuple)

    def test_caller_list_changes_do_not_leak(self):
        items = [cookie()]
        order = Order("Alice", items)
        items.append(donut())
        assert order.items == (cookie(),)

    def test_fields_cannot_be_reassigned(self):
        order = Order("Alice", [cookie()])
        with pytest.raises(AttributeError):
            order.customer_name = "Bob"


class TestOrderValidation:

    def test_none_customer_name_rejected(self):
        with pytest.raises(InvalidInputError, match="Customer name"):
            Order(None, [cookie()])

    def test_blank_customer_name_rejected(self):
        with pytest.raises(InvalidInputError, match="Customer name"):
            Order.create("   ", [cookie()])

    def test_none_items_rejected(self):
        with pytest.raises(InvalidInputError, match="Item list is required"):
            Order("Alice", None)

    def test_string_items_rejected(self):
        with pytest.raises(InvalidInputError, match="sequence of order items"):
            Order("Alice", "cookie")

    def test_non_item_element_rejected(self):
        with pytest.raises(InvalidInputError, match="Item #2 is not an order item"):
            Order("Alice", [cookie(), "donut"])


class TestOrderViews:

    def test_bakery_items_and_beverages_keep_order(self):
        order = Order("Alice", [Americano(), donut(), Tea("Green"), cookie()])
        assert order.bakery_items == (donut(), cookie())
        assert order.beverages == (Americano(), Tea("Green"))
