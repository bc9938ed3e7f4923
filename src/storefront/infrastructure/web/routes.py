"""FastAPI routes for the storefront: catalog, cart, account and orders.

Endpoints are thin: they pull the request's Session and the wired
Services, call one application handler, and return its DTO. Domain
exceptions are turned into responses by the handlers in ``errors``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.current_user import CurrentUserHandler
from storefront.application.dto import CartDTO, OrderDTO, ProductDTO, UserDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.login_user import LoginUserHandler
from storefront.application.logout_user import LogoutUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.model.session import Session
from storefront.infrastructure.web.schemas import (
    AddToCartRequest,
    LoginRequest,
    OrderIdResponse,
    RegisterRequest,
    StatusResponse,
)
from storefront.infrastructure.web.services import Services, get_services
from storefront.infrastructure.web.sessions import current_session, rotate_session

# ---------------------------------------------------------------------------
# Catalog Router
# ---------------------------------------------------------------------------
catalog_router = APIRouter(prefix="/products", tags=["catalog"])


@catalog_router.get("", response_model=list[ProductDTO])
def list_products(services: Services = Depends(get_services)) -> list[ProductDTO]:
    return ListProductsHandler(services.product_repo).handle()


@catalog_router.get("/{id_or_slug}", response_model=ProductDTO)
def show_product(id_or_slug: str, services: Services = Depends(get_services)) -> ProductDTO:
    return ShowProductHandler(services.product_repo).handle(id_or_slug)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartDTO)
def view_cart(
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> CartDTO:
    return ViewCartHandler(services.product_repo).handle(session)


@cart_router.post("/add", response_model=CartDTO)
def add_to_cart(
    body: AddToCartRequest,
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> CartDTO:
    return AddToCartHandler(services.product_repo).handle(
        session, product_id=body.product_id, qty=body.qty
    )


@cart_router.api_route("/remove/{product_id}", methods=["GET", "POST"], response_model=CartDTO)
def remove_from_cart(
    product_id: str,
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> CartDTO:
    return RemoveFromCartHandler(services.product_repo).handle(session, product_id)


# ---------------------------------------------------------------------------
# Account Router
# ---------------------------------------------------------------------------
account_router = APIRouter(tags=["account"])


@account_router.post("/register", status_code=201, response_model=UserDTO)
def register(
    body: RegisterRequest,
    response: Response,
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> UserDTO:
    handler = RegisterUserHandler(
        services.user_repo,
        services.hasher,
        min_password_length=services.min_password_length,
    )
    user = handler.handle(
        session, username=body.username, email=body.email, password=body.password
    )
    rotate_session(session, response, services)
    return user


@account_router.post("/login", response_model=UserDTO)
def login(
    body: LoginRequest,
    response: Response,
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> UserDTO:
    user = LoginUserHandler(services.user_repo, services.hasher).handle(
        session, username=body.username, password=body.password
    )
    rotate_session(session, response, services)
    return user


@account_router.post("/logout", response_model=StatusResponse)
def logout(session: Session = Depends(current_session)) -> StatusResponse:
    LogoutUserHandler().handle(session)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(tags=["orders"])


@order_router.post("/checkout", status_code=201, response_model=OrderIdResponse)
def checkout(
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> OrderIdResponse:
    handler = CheckoutHandler(
        order_repo=services.order_repo,
        product_repo=services.product_repo,
        user_repo=services.user_repo,
        payment_gateway=services.payment_gateway,
    )
    order = handler.handle(session)
    return OrderIdResponse(order_id=order.id)


@order_router.get("/orders", response_model=list[OrderDTO])
def list_orders(
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> list[OrderDTO]:
    user = CurrentUserHandler(services.user_repo).require(session)
    return ListOrdersHandler(services.order_repo).handle(user_id=user.id)


@order_router.get("/orders/{order_id}", response_model=OrderDTO)
def show_order(
    order_id: int,
    session: Session = Depends(current_session),
    services: Services = Depends(get_services),
) -> OrderDTO:
    user = CurrentUserHandler(services.user_repo).require(session)
    return ShowOrderHandler(services.order_repo).handle(order_id, owner_id=user.id)
