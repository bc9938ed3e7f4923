"""Application service: Login use case.

Unknown usernames and wrong passwords fail with exactly the same
exception and message, and take roughly the same time, so the endpoint
cannot be used to discover which usernames exist.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO
from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.session import Session
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class LoginUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, session: Session, username: str, password: str) -> UserDTO:
        user = self._user_repo.get_by_username((username or "").strip())

        if user is None:
            self._hasher.dummy_verify(password or "")
            verified = False
        else:
            verified = self._hasher.verify(password or "", user.password_hash)

        if user is None or not verified:
            logger.info("Login failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        session.sign_in(user.id)  # type: ignore[arg-type]
        logger.info("User logged in", user_id=user.id)
        return UserDTO.from_domain(user)
