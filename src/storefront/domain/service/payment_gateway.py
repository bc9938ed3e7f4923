"""Domain service interface: payment authorization.

Checkout asks the gateway to authorize the order total before anything
is written. Swapping in a real provider only means wiring a different
implementation in the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class PaymentResult:
    approved: bool
    reference: str = ""
    reason: str = ""


class PaymentGateway(ABC):

    @abstractmethod
    def authorize(self, order: Order) -> PaymentResult:
        """Authorize ``order.total`` for ``order.user_id``."""
