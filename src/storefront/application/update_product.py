"""Application service: administrative product updates.

Price changes never touch existing orders: they captured a price
snapshot at checkout time.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        stock: int | None = None,
    ) -> ProductDTO:
        product = self._get(product_id)

        if new_price is not None:
            product.update_price(Money.of(new_price))
        if stock is not None:
            product.set_stock(stock)

        self._product_repo.save(product)
        logger.info(
            "Product updated",
            product_id=product.id,
            price=str(product.price),
            stock=product.stock,
        )
        return ProductDTO.from_domain(product)

    def _get(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product
