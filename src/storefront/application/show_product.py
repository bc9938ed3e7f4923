"""Application service: Show Product use case (query).

A product can be addressed either by its ID or by its slug; the ID is
tried first. Slugs are never all digits, so no slug is shadowed by a
sequential product ID.
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, id_or_slug: str) -> ProductDTO:
        product = self._product_repo.get_by_id(id_or_slug)
        if product is None:
            product = self._product_repo.get_by_slug(id_or_slug)
        if product is None:
            raise EntityNotFoundError(f"Product '{id_or_slug}' not found")
        return ProductDTO.from_domain(product)
