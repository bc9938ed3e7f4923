"""Application service: Remove From Cart use case.

Removing a product that is not in the cart is a no-op.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.model.session import Session
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, session: Session, product_id: str) -> CartDTO:
        if session.cart.remove(product_id):
            session.mark_modified()
            logger.info("Cart item removed", product_id=product_id)

        return ViewCartHandler(self._product_repo).handle(session)
