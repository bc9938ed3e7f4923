"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import FastAPI

from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_config import configure_logging
from storefront.infrastructure.payment.stub_payment_gateway import StubPaymentGateway
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from storefront.infrastructure.session.memory_session_repository import (
    InMemorySessionRepository,
)
from storefront.infrastructure.web.app import create_app
from storefront.infrastructure.web.services import Services


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def build_app() -> FastAPI:
    """Build the web application with the JSON store and stub payments."""
    cfg = settings()
    configure_logging(cfg.log_level, cfg.log_json)
    services = Services(
        product_repo=product_repository(),
        user_repo=user_repository(),
        order_repo=order_repository(),
        session_repo=InMemorySessionRepository(ttl=cfg.session_ttl),
        hasher=BcryptPasswordHasher(rounds=cfg.bcrypt_rounds),
        payment_gateway=StubPaymentGateway(),
        session_cookie=cfg.session_cookie,
        session_ttl=cfg.session_ttl,
        min_password_length=cfg.min_password_length,
    )
    return create_app(services)
