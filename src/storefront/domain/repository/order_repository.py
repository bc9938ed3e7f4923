"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Order]:
        """Return the orders placed by one user, newest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order together with its items in a single write.

        Orders are immutable once stored; there is no update.
        """
