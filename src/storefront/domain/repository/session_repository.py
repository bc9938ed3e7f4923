"""Abstract repository for server-side sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.session import Session


class SessionRepository(ABC):

    @abstractmethod
    def get(self, session_id: str) -> Session | None:
        """Return a live session, or None if unknown or expired."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist the session and clear its ``modified`` flag."""

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Forget a session. No-op if it does not exist."""
