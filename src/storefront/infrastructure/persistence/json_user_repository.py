"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User, normalize_email
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: int) -> User | None:
        return self._find(lambda raw: raw["id"] == user_id)

    def get_by_username(self, username: str) -> User | None:
        return self._find(lambda raw: raw["username"] == username)

    def get_by_email(self, email: str) -> User | None:
        email = normalize_email(email)
        return self._find(lambda raw: raw["email"] == email)

    def add(self, user: User) -> None:
        with self._file.transaction() as users:
            for raw in users:
                if raw["username"] == user.username:
                    raise ValidationError(f"Username '{user.username}' is already taken")
                if raw["email"] == user.email:
                    raise ValidationError(f"Email '{user.email}' is already registered")
            user.id = max((raw["id"] for raw in users), default=0) + 1
            users.append(self._to_raw(user))

    # --- Serialization --------------------------------------------------------

    def _find(self, predicate) -> User | None:
        for raw in self._file.load():
            if predicate(raw):
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "password_hash": user.password_hash,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
