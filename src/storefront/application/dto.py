"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the web and CLI layers
without exposing domain internals. Money is always rendered as a
two-decimal string, e.g. ``"15.00"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    slug: str
    description: str
    price: str
    stock: int
    image: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=str(product.price),
            stock=product.stock,
            image=product.image,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """Output: one resolved cart entry."""

    product: ProductDTO
    qty: int
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class UserDTO:
    id: int
    username: str
    email: str

    @staticmethod
    def from_domain(user: User) -> UserDTO:
        return UserDTO(id=user.id, username=user.username, email=user.email)  # type: ignore[arg-type]


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: int | None
    paid: bool
    items: list[OrderItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            paid=order.paid,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.isoformat(),
        )
