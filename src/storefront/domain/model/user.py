"""User aggregate: a registered shopper."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]{3,32}$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class User:
    """A registered account.

    Only the one-way ``password_hash`` is ever stored. Users are created
    at registration and not mutated afterwards.
    """

    id: int | None
    username: str
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(username: str, email: str, password_hash: str) -> User:
        """Create a new user, enforcing the shape of username and email."""
        username = (username or "").strip()
        email = normalize_email(email)

        if not _USERNAME_RE.match(username):
            raise ValidationError(
                "Username must be 3-32 characters of letters, digits, '.', '_' or '-'"
            )
        if not _EMAIL_RE.match(email):
            raise ValidationError(f"Invalid email address: {email!r}")

        return User(id=None, username=username, email=email, password_hash=password_hash)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()
