"""Application service: Logout use case. The cart is kept."""

from __future__ import annotations

import structlog

from storefront.domain.model.session import Session

logger = structlog.get_logger(__name__)


class LogoutUserHandler:

    def handle(self, session: Session) -> None:
        if session.is_authenticated:
            logger.info("User logged out", user_id=session.user_id)
            session.sign_out()
