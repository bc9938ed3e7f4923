"""The collaborators every endpoint draws on, attached to ``app.state``."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from fastapi import Request

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.session_repository import SessionRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.domain.service.payment_gateway import PaymentGateway


@dataclass(frozen=True)
class Services:
    product_repo: ProductRepository
    user_repo: UserRepository
    order_repo: OrderRepository
    session_repo: SessionRepository
    hasher: PasswordHasher
    payment_gateway: PaymentGateway
    session_cookie: str = "session_id"
    session_ttl: timedelta = timedelta(days=14)
    min_password_length: int = 8


def get_services(request: Request) -> Services:
    return request.app.state.services
