"""Tests for the order queries."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository


def _order(user_id, minutes_ago=0):
    item = OrderItem("1", "Widget", Quantity(1), Money.of("10.00"))
    order = Order.create(user_id=user_id, items=[item])
    order.created_at = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
    order.mark_paid()
    return order


@pytest.fixture()
def orders():
    repo = FakeOrderRepository()
    repo.add(_order(1, minutes_ago=10))
    repo.add(_order(2, minutes_ago=5))
    repo.add(_order(1, minutes_ago=1))
    return repo


class TestShowOrder:

    def test_show_any_order_without_owner(self, orders):
        assert ShowOrderHandler(orders).handle(2).user_id == 2

    def test_owner_sees_own_order(self, orders):
        dto = ShowOrderHandler(orders).handle(1, owner_id=1)
        assert dto.total == "10.00"
        assert dto.paid is True

    def test_other_users_order_is_not_found(self, orders):
        with pytest.raises(EntityNotFoundError, match="#2 not found"):
            ShowOrderHandler(orders).handle(2, owner_id=1)

    def test_unknown_order(self, orders):
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(orders).handle(99)


class TestListOrders:

    def test_user_orders_newest_first(self, orders):
        assert [o.id for o in ListOrdersHandler(orders).handle(user_id=1)] == [3, 1]

    def test_all_orders(self, orders):
        assert len(ListOrdersHandler(orders).handle()) == 3
