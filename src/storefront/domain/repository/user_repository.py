"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return a user by exact username, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email (case-insensitive), or None."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user and assign its ID.

        Raises ValidationError if the username or email is already taken,
        so the uniqueness rule holds even when two registrations race.
        """
