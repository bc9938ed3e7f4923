"""Application service: resolve the signed-in user of a session (query)."""

from __future__ import annotations

from storefront.domain.exceptions import AuthorizationError
from storefront.domain.model.session import Session
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class CurrentUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, session: Session) -> User | None:
        """Return the signed-in user, or None for anonymous sessions.

        A reference to a user that no longer exists is cleared.
        """
        if session.user_id is None:
            return None
        user = self._user_repo.get_by_id(session.user_id)
        if user is None:
            session.sign_out()
        return user

    def require(self, session: Session) -> User:
        user = self.handle(session)
        if user is None:
            raise AuthorizationError("You must be logged in")
        return user
