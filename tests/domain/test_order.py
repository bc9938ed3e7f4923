"""Unit tests for the Order aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity


def _make_item(name: str = "Widget", qty: int = 1, price: str = "10.00") -> OrderItem:
    """Helper to build a valid order item."""
    return OrderItem(
        product_id="1",
        product_name=name,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(user_id=1, items=[_make_item(qty=2, price="10.00")])
        assert order.user_id == 1
        assert order.id is None  # assigned by repository
        assert order.paid is False
        assert order.total == Money.of("20.00")

    def test_total_is_sum_of_items(self):
        order = Order.create(
            user_id=1,
            items=[_make_item("A", qty=2, price="10.00"), _make_item("B", qty=1, price="5.00")],
        )
        assert order.total == Money.of("25.00")

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create(user_id=1, items=[])

    def test_stored_total_is_not_recomputed(self):
        order = Order(
            id=5,
            user_id=1,
            items=[_make_item(qty=1, price="10.00")],
            total=Money.of("9.00"),
            paid=True,
        )
        assert order.total == Money.of("9.00")


class TestOrderPayment:

    def test_mark_paid(self):
        order = Order.create(user_id=1, items=[_make_item()])
        order.mark_paid()
        assert order.paid is True

    def test_stored_order_cannot_change_payment_state(self):
        order = Order.create(user_id=1, items=[_make_item()])
        order.id = 3
        with pytest.raises(ValidationError):
            order.mark_paid()


class TestOrderItem:

    def test_line_total(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")

    def test_item_is_frozen(self):
        item = _make_item()
        with pytest.raises(AttributeError):
            item.unit_price = Money.of("1.00")  # type: ignore[misc]
