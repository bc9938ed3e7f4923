"""Domain service interface: one-way credential hashing."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted one-way hash of *password*."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check *password* against a stored hash."""

    @abstractmethod
    def dummy_verify(self, password: str) -> None:
        """Spend the same effort as ``verify`` without a stored hash.

        Used for unknown usernames so a failed login takes about as long
        whichever part of the credentials was wrong.
        """
