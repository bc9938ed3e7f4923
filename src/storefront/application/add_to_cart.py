"""Application service: Add To Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.session import Session
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, session: Session, product_id: str, qty: int = 1) -> CartDTO:
        """Add *qty* of a product to the session's cart.

        The product must exist; stock is deliberately not checked.
        Returns the updated cart summary.
        """
        quantity = Quantity(qty)
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        new_qty = session.cart.add(product_id, quantity)
        session.mark_modified()
        logger.info("Cart item added", product_id=product_id, quantity=new_qty)

        return ViewCartHandler(self._product_repo).handle(session)
