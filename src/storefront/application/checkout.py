"""Application service: Checkout use case.

Turns the session's cart into a stored, paid Order and empties the cart.

The whole operation is one transactional boundary:
  Phase 1 (validate and price): empty cart, signed-in user, catalog
            lookups, payment authorization. Nothing is written yet.
  Phase 2 (write): the order and its items go to the store in a single
            write, and only then is the cart cleared.

Checkouts are serialized by a lock, so two concurrent requests for the
same session cannot both see the pre-checkout cart.
"""

from __future__ import annotations

import threading

import structlog

from storefront.application.current_user import CurrentUserHandler
from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EmptyCartError, PaymentDeclinedError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.session import Session
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.cart_pricing_service import CartPricingService
from storefront.domain.service.payment_gateway import PaymentGateway

logger = structlog.get_logger(__name__)

_checkout_lock = threading.Lock()


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        payment_gateway: PaymentGateway,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._pricing = CartPricingService(product_repo)
        self._payment_gateway = payment_gateway

    def handle(self, session: Session) -> OrderDTO:
        with _checkout_lock:
            if session.cart.is_empty:
                raise EmptyCartError("Your cart is empty")

            user = CurrentUserHandler(self._user_repo).require(session)

            priced = self._pricing.price(session)
            if not priced.lines:
                raise EmptyCartError("Your cart is empty")

            order = Order.create(
                user_id=user.id,  # type: ignore[arg-type]
                items=[
                    OrderItem(
                        product_id=line.product.id,
                        product_name=line.product.name,
                        quantity=Quantity(line.quantity),
                        unit_price=line.product.price,  # <-- price snapshot
                    )
                    for line in priced.lines
                ],
            )

            payment = self._payment_gateway.authorize(order)
            if not payment.approved:
                logger.warning(
                    "Payment declined", user_id=user.id, reason=payment.reason
                )
                raise PaymentDeclinedError(payment.reason or "Payment was declined")
            order.mark_paid()

            self._order_repo.add(order)

            session.cart.clear()
            session.mark_modified()

        logger.info(
            "Order created",
            order_id=order.id,
            user_id=user.id,
            total=str(order.total),
            payment_reference=payment.reference,
        )
        return OrderDTO.from_domain(order)
