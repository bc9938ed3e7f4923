"""Application service: Register User use case.

Creates the account, stores only a one-way hash of the password and
signs the new user in on the calling session. There is no email
verification.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.session import Session
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)

DEFAULT_MIN_PASSWORD_LENGTH = 8


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._min_password_length = min_password_length

    def handle(
        self,
        session: Session,
        username: str,
        email: str,
        password: str,
    ) -> UserDTO:
        if len(password or "") < self._min_password_length:
            raise ValidationError(
                f"Password must be at least {self._min_password_length} characters"
            )

        # Shape checks happen before the (slow) hash is computed.
        candidate = User.create(username=username, email=email, password_hash="")

        if self._user_repo.get_by_username(candidate.username) is not None:
            raise ValidationError(f"Username '{candidate.username}' is already taken")
        if self._user_repo.get_by_email(candidate.email) is not None:
            raise ValidationError(f"Email '{candidate.email}' is already registered")

        user = User.create(
            username=candidate.username,
            email=candidate.email,
            password_hash=self._hasher.hash(password),
        )
        self._user_repo.add(user)

        session.sign_in(user.id)  # type: ignore[arg-type]
        logger.info("User registered", user_id=user.id, username=user.username)
        return UserDTO.from_domain(user)
