"""Cart: the session-scoped shopping cart.

A cart is nothing more than ``product_id -> quantity``. It has no
identity of its own and lives exactly as long as the session holding it.
Prices are never stored here; they are read from the catalog on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Quantity


@dataclass
class Cart:
    """Invariant: every stored quantity is a positive integer."""

    lines: dict[str, int] = field(default_factory=dict)

    def add(self, product_id: str, quantity: Quantity) -> int:
        """Increment the quantity held for *product_id*; return the new quantity.

        There is no upper bound and no stock check.
        """
        self.lines[product_id] = self.lines.get(product_id, 0) + quantity.value
        return self.lines[product_id]

    def remove(self, product_id: str) -> bool:
        """Drop the entry for *product_id*. Returns False if it was not there."""
        return self.lines.pop(product_id, None) is not None

    def clear(self) -> None:
        self.lines.clear()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(self.lines.values())

    def items(self) -> list[tuple[str, int]]:
        """Entries in insertion order."""
        return list(self.lines.items())
