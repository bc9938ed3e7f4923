"""Storefront FastAPI application.

Usage:
    storefront serve --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from storefront.infrastructure.web.errors import register_error_handlers
from storefront.infrastructure.web.routes import (
    account_router,
    cart_router,
    catalog_router,
    order_router,
)
from storefront.infrastructure.web.services import Services


def create_app(services: Services) -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalog, session cart, accounts and checkout",
    )
    app.state.services = services

    register_error_handlers(app)

    app.include_router(catalog_router)
    app.include_router(cart_router)
    app.include_router(account_router)
    app.include_router(order_router)

    @app.get("/health")
    def health() -> JSONResponse:
        return JSONResponse(content={"status": "ok"})

    return app
