"""JSON-file-backed implementation of OrderRepository.

Each order is stored as one record with its items embedded, so adding
an order is a single atomic file replace.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def list_for_user(self, user_id: int) -> list[Order]:
        orders = [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["user_id"] == user_id
        ]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def add(self, order: Order) -> None:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} is already stored")
        with self._file.transaction() as orders:
            order.id = max((raw["id"] for raw in orders), default=0) + 1
            orders.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "created_at": order.created_at.isoformat(),
            "total": str(order.total.amount),
            "paid": order.paid,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            total=Money(Decimal(raw["total"])),
            paid=raw["paid"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
