"""In-process, server-side session store.

Sessions are held by reference, keyed by their opaque token. Idle
sessions expire after ``ttl``; an expired session is discarded the next
time anyone asks for it, taking its cart with it. Saves also sweep out
every expired session once per ``purge_interval``, so sessions that are
never presented again do not pile up.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable

from storefront.domain.model.session import Session
from storefront.domain.repository.session_repository import SessionRepository

DEFAULT_PURGE_INTERVAL = timedelta(minutes=5)


class InMemorySessionRepository(SessionRepository):

    def __init__(
        self,
        ttl: timedelta,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        purge_interval: timedelta = DEFAULT_PURGE_INTERVAL,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._purge_interval = purge_interval
        self._store: dict[str, Session] = {}
        self._lock = threading.Lock()
        self._last_purge = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def get(self, session_id: str) -> Session | None:
        now = self._clock()
        with self._lock:
            session = self._store.get(session_id)
            if session is None:
                return None
            if session.is_expired(self._ttl, now):
                del self._store[session_id]
                return None
            session.touch(now)
            return session

    def save(self, session: Session) -> None:
        now = self._clock()
        with self._lock:
            if now - self._last_purge >= self._purge_interval:
                self._purge_locked(now)
            session.touch(now)
            session.modified = False
            self._store[session.id] = session

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._store.pop(session_id, None)

    def purge_expired(self) -> int:
        """Drop every expired session; returns how many were removed."""
        now = self._clock()
        with self._lock:
            return self._purge_locked(now)

    def _purge_locked(self, now: datetime) -> int:
        expired = [
            sid for sid, s in self._store.items() if s.is_expired(self._ttl, now)
        ]
        for sid in expired:
            del self._store[sid]
        self._last_purge = now
        return len(expired)
