"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_slug(self, slug: str) -> Product | None:
        for raw in self._file.load():
            if raw["slug"] == slug:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._file.load() if raw["id"].isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def save(self, product: Product) -> None:
        with self._file.transaction() as products:
            for i, raw in enumerate(products):
                if raw["id"] == product.id:
                    products[i] = self._to_raw(product)
                    break
            else:
                products.append(self._to_raw(product))

    def delete(self, product_id: str) -> bool:
        with self._file.transaction() as products:
            before = len(products)
            products[:] = [raw for raw in products if raw["id"] != product_id]
            return len(products) != before

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "slug": product.slug,
            "description": product.description,
            "price": str(product.price.amount),
            "stock": product.stock,
            "image": product.image,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            slug=raw["slug"],
            price=Money(Decimal(raw["price"])),
            description=raw.get("description", ""),
            stock=raw.get("stock", 0),
            image=raw.get("image", ""),
        )
