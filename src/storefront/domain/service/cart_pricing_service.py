"""Domain service: Cart Pricing.

Resolves a session's cart against the catalog. This is the single place
that decides what happens to entries whose product has been removed
from the catalog: they are dropped from the cart and the session is
marked modified. Viewing the cart and checking out both go through
here, so the total a shopper sees is always the total they are charged.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.domain.model.product import Product
from storefront.domain.model.session import Session
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PricedLine:
    product: Product
    quantity: int

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class PricedCart:
    lines: list[PricedLine]

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result


class CartPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def price(self, session: Session) -> PricedCart:
        """Price every cart entry at the current catalog price.

        Entries referencing a missing product are pruned from the cart.
        """
        lines: list[PricedLine] = []
        missing: list[str] = []

        for product_id, quantity in session.cart.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                missing.append(product_id)
                continue
            lines.append(PricedLine(product=product, quantity=quantity))

        if missing:
            for product_id in missing:
                session.cart.remove(product_id)
            session.mark_modified()
            logger.warning(
                "Dropped cart entries for missing products",
                product_ids=missing,
            )

        return PricedCart(lines=lines)
