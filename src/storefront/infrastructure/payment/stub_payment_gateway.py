"""Payment gateway stand-in that approves every authorization.

Real payment processing is not part of this store; wire a different
PaymentGateway in bootstrap to integrate a provider.
"""

from __future__ import annotations

import uuid

import structlog

from storefront.domain.model.order import Order
from storefront.domain.service.payment_gateway import PaymentGateway, PaymentResult

logger = structlog.get_logger(__name__)


class StubPaymentGateway(PaymentGateway):

    def authorize(self, order: Order) -> PaymentResult:
        reference = f"stub-{uuid.uuid4().hex[:12]}"
        logger.debug(
            "Payment authorized by stub gateway",
            user_id=order.user_id,
            amount=str(order.total),
            reference=reference,
        )
        return PaymentResult(approved=True, reference=reference)
