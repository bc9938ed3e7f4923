"""Application service: Remove Product use case (administrative).

Carts still holding the product drop the entry the next time they are
viewed or checked out. Stored orders keep their own copy of the name
and price, so they are unaffected.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("Product removed", product_id=product_id)
