"""Order aggregate: the immutable result of a checkout.

An Order owns its items. Both are written once, at checkout, and never
change afterwards: there is no cancellation, refund or fulfillment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderItem:
    """Captures the price snapshot of a product at purchase time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # frozen copy, not Product.price

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for completed purchases.

    Use ``Order.create()`` for new orders: it computes ``total`` from the
    items exactly once. The ``__init__`` takes the stored total as-is so
    the repository can reconstitute persisted orders without recomputing.
    """

    id: int | None
    user_id: int | None
    items: list[OrderItem]
    total: Money
    paid: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: int, items: list[OrderItem]) -> Order:
        """Create a new, not yet paid order."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(id=None, user_id=user_id, items=list(items), total=total)

    def mark_paid(self) -> None:
        if self.id is not None:
            raise ValidationError("A stored order cannot change its payment state")
        self.paid = True
