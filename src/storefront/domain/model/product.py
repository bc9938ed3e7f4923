"""Product aggregate.

Products live independently of carts and orders. Only administrative
commands change them: prices move, stock is recounted, products are
added to and removed from the catalog.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """Turn 'Blue Widget (XL)' into 'blue-widget-xl'."""
    normalized = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    return re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")


@dataclass
class Product:
    """A product in the catalog.

    Carts and orders only ever hold the ``id``; an order additionally
    copies ``name`` and ``price`` at purchase time.
    """

    id: str
    name: str
    slug: str
    price: Money
    description: str = ""
    stock: int = 0
    image: str = ""

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        slug: str | None = None,
        description: str = "",
        stock: int = 0,
        image: str = "",
    ) -> Product:
        """Create a new catalog entry, deriving the slug from the name if needed."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        slug = slugify(slug or name)
        if not _SLUG_RE.match(slug):
            raise ValidationError(f"Cannot derive a slug from {name!r}")
        if slug.isdigit():
            # Product IDs are digit strings and are looked up before slugs.
            raise ValidationError(f"Slug {slug!r} cannot be all digits")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if stock < 0:
            raise ValidationError("Stock cannot be negative")

        return Product(
            id=id,
            name=name.strip(),
            slug=slug,
            price=price,
            description=description.strip(),
            stock=stock,
            image=image.strip(),
        )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders are unaffected because they captured a price
        snapshot at checkout time.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def set_stock(self, stock: int) -> None:
        if stock < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = stock
