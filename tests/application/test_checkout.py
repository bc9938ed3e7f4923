"""Integration tests for the Checkout use case.

Uses in-memory fakes: no file I/O.
"""

import threading
import time

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.exceptions import (
    AuthorizationError,
    EmptyCartError,
    PaymentDeclinedError,
)
from storefront.domain.model.order import Order
from storefront.domain.model.session import Session
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.service.payment_gateway import PaymentGateway, PaymentResult
from storefront.infrastructure.payment.stub_payment_gateway import StubPaymentGateway
from tests.fakes import (
    DecliningPaymentGateway,
    FakeOrderRepository,
    FakeProductRepository,
    FakeUserRepository,
    RecordingPaymentGateway,
    default_products,
)


class _SlowPaymentGateway(PaymentGateway):
    """Approves, but only after a pause, so concurrent checkouts overlap."""

    def authorize(self, order: Order) -> PaymentResult:
        time.sleep(0.05)
        return PaymentResult(approved=True, reference="slow")


class _FailingOrderRepository(FakeOrderRepository):

    def add(self, order: Order) -> None:
        raise OSError("disk full")


class _World:
    """Fake repositories plus a signed-in session."""

    def __init__(self, gateway=None, orders=None) -> None:
        self.products = FakeProductRepository(default_products())
        self.users = FakeUserRepository()
        self.orders = orders or FakeOrderRepository()
        user = User.create("jane", "jane@example.com", "hash")
        self.users.add(user)
        self.user_id = user.id
        self.session = Session(id="s1", user_id=user.id)
        self.handler = CheckoutHandler(
            order_repo=self.orders,
            product_repo=self.products,
            user_repo=self.users,
            payment_gateway=gateway or StubPaymentGateway(),
        )

    def add(self, product_id: str, qty: int) -> None:
        AddToCartHandler(self.products).handle(self.session, product_id, qty=qty)


@pytest.fixture()
def world():
    return _World()


class TestCheckoutHappyPath:

    def test_example_cart(self, world):
        world.add("1", 2)  # 2 x 10.00
        world.add("2", 1)  # 1 x 5.00
        assert ViewCartHandler(world.products).handle(world.session).total == "25.00"

        dto = world.handler.handle(world.session)

        assert dto.total == "25.00"
        assert dto.paid is True
        assert dto.user_id == world.user_id
        assert world.session.cart.is_empty
        assert world.session.modified

    def test_exactly_one_order_stored(self, world):
        world.add("1", 1)
        dto = world.handler.handle(world.session)
        stored = world.orders.list_all()
        assert [o.id for o in stored] == [dto.id]
        assert stored[0].total == Money.of("10.00")

    def test_items_capture_name_quantity_and_price(self, world):
        world.add("3", 2)
        dto = world.handler.handle(world.session)
        [item] = dto.items
        assert (item.product_id, item.product_name, item.quantity) == ("3", "Deluxe Gizmo", 2)
        assert item.unit_price == "99.99"
        assert item.line_total == "199.98"

    def test_total_equals_sum_of_items(self, world):
        world.add("1", 3)
        world.add("3", 1)
        order = world.orders.get_by_id(world.handler.handle(world.session).id)
        expected = Money.zero()
        for item in order.items:
            expected = expected + item.unit_price * item.quantity.value
        assert order.total == expected


class TestCheckoutPriceLock:

    def test_price_change_after_checkout_does_not_touch_order(self, world):
        world.add("1", 2)
        dto = world.handler.handle(world.session)

        widget = world.products.get_by_id("1")
        widget.update_price(Money.of("99.00"))
        world.products.save(widget)

        order = world.orders.get_by_id(dto.id)
        assert order.items[0].unit_price == Money.of("10.00")
        assert order.total == Money.of("20.00")


class TestCheckoutRejections:

    def test_empty_cart_creates_no_order(self, world):
        with pytest.raises(EmptyCartError):
            world.handler.handle(world.session)
        assert world.orders.list_all() == []

    def test_anonymous_caller_creates_no_order(self, world):
        world.add("1", 1)
        world.session.user_id = None
        with pytest.raises(AuthorizationError):
            world.handler.handle(world.session)
        assert world.orders.list_all() == []
        assert world.session.cart.lines == {"1": 1}

    def test_removed_user_creates_no_order(self, world):
        world.add("1", 1)
        world.users.remove(world.user_id)
        with pytest.raises(AuthorizationError):
            world.handler.handle(world.session)
        assert world.orders.list_all() == []

    def test_declined_payment_writes_nothing(self):
        world = _World(gateway=DecliningPaymentGateway())
        world.add("1", 1)
        with pytest.raises(PaymentDeclinedError, match="Card declined"):
            world.handler.handle(world.session)
        assert world.orders.list_all() == []
        assert world.session.cart.lines == {"1": 1}


class TestCheckoutMissingProducts:

    def test_missing_product_dropped_like_view(self, world):
        world.add("1", 2)
        world.add("2", 1)
        world.products.delete("2")
        shown = ViewCartHandler(world.products).handle(world.session).total

        dto = world.handler.handle(world.session)

        assert dto.total == shown == "20.00"
        assert [i.product_id for i in dto.items] == ["1"]

    def test_all_products_missing_is_empty_cart(self, world):
        world.add("2", 1)
        world.products.delete("2")
        with pytest.raises(EmptyCartError):
            world.handler.handle(world.session)
        assert world.orders.list_all() == []


class TestCheckoutPaymentGateway:

    def test_gateway_sees_order_total(self):
        gateway = RecordingPaymentGateway()
        world = _World(gateway=gateway)
        world.add("1", 1)
        world.add("2", 2)
        world.handler.handle(world.session)
        assert gateway.authorized == [Money.of("20.00")]

    def test_second_checkout_of_same_session_is_empty(self, world):
        world.add("1", 1)
        world.handler.handle(world.session)
        with pytest.raises(EmptyCartError):
            world.handler.handle(world.session)
        assert len(world.orders.list_all()) == 1


class TestCheckoutAtomicity:

    def test_failed_order_write_keeps_cart(self):
        world = _World(orders=_FailingOrderRepository())
        world.add("1", 2)
        world.add("2", 1)
        with pytest.raises(OSError, match="disk full"):
            world.handler.handle(world.session)
        assert world.orders.list_all() == []
        assert world.session.cart.lines == {"1": 2, "2": 1}

    def test_concurrent_checkouts_of_one_session_create_one_order(self):
        world = _World(gateway=_SlowPaymentGateway())
        world.add("1", 1)
        start = threading.Barrier(2)
        outcomes: list[str] = []

        def attempt() -> None:
            start.wait()
            try:
                world.handler.handle(world.session)
                outcomes.append("order")
            except EmptyCartError:
                outcomes.append("empty")

        threads = [threading.Thread(target=attempt) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert sorted(outcomes) == ["empty", "order"]
        assert len(world.orders.list_all()) == 1
        assert world.session.cart.is_empty
