"""Application service: View Cart use case.

Prices each entry at the *current* catalog price. Entries whose product
has left the catalog are dropped (see CartPricingService).
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO, ProductDTO
from storefront.domain.model.session import Session
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import (
    CartPricingService,
    PricedCart,
)


class ViewCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._pricing = CartPricingService(product_repo)

    def handle(self, session: Session) -> CartDTO:
        return to_cart_dto(self._pricing.price(session))


def to_cart_dto(priced: PricedCart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product=ProductDTO.from_domain(line.product),
                qty=line.quantity,
                subtotal=str(line.subtotal),
            )
            for line in priced.lines
        ],
        total=str(priced.total),
    )
