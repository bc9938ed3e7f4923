"""Session: the server-held state of one client.

The client only ever sees the opaque ``id``. Handlers receive the
session explicitly and flip ``modified`` whenever they change it, so the
session store knows to persist it at the end of the request.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from storefront.domain.model.cart import Cart


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Session:

    id: str
    cart: Cart = field(default_factory=Cart)
    user_id: int | None = None
    created_at: datetime = field(default_factory=_now)
    last_seen: datetime = field(default_factory=_now)
    modified: bool = False

    @staticmethod
    def new() -> Session:
        """A fresh anonymous session. It is not stored until something changes it."""
        return Session(id=secrets.token_urlsafe(32))

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def sign_in(self, user_id: int) -> None:
        self.user_id = user_id
        self.modified = True

    def sign_out(self) -> None:
        self.user_id = None
        self.modified = True

    def mark_modified(self) -> None:
        self.modified = True

    def touch(self, now: datetime | None = None) -> None:
        self.last_seen = now or _now()

    def is_expired(self, ttl: timedelta, now: datetime | None = None) -> bool:
        return (now or _now()) - self.last_seen > ttl
