"""Application service: Add Product use case (administrative)."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        slug: str | None = None,
        description: str = "",
        stock: int = 0,
        image: str = "",
    ) -> ProductDTO:
        """Add a new product to the catalog. Slugs must be unique."""
        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            price=Money.of(price),
            slug=slug,
            description=description,
            stock=stock,
            image=image,
        )

        if self._product_repo.get_by_slug(product.slug) is not None:
            raise ValidationError(f"Product slug '{product.slug}' already exists")

        self._product_repo.save(product)
        logger.info("Product added", product_id=product.id, slug=product.slug)
        return ProductDTO.from_domain(product)
