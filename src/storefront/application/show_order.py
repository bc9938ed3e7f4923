"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, owner_id: int | None = None) -> OrderDTO:
        """Return an order.

        When *owner_id* is given, orders belonging to anyone else are
        reported as not found rather than forbidden.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None or (owner_id is not None and order.user_id != owner_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_domain(order)
