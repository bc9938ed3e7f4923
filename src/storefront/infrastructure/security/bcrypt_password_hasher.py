"""bcrypt implementation of PasswordHasher."""

from __future__ import annotations

import bcrypt

from storefront.domain.service.password_hasher import PasswordHasher

# bcrypt ignores everything past 72 bytes and newer releases reject
# longer input outright, so passwords are truncated consistently.
_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy-password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(self._rounds)).decode(
            "ascii"
        )

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
        except ValueError:
            # malformed stored hash
            return False

    def dummy_verify(self, password: str) -> None:
        bcrypt.checkpw(_encode(password), self._dummy_hash)
