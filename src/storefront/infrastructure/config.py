"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    session_cookie: str = "session_id"
    session_ttl: timedelta = timedelta(days=14)
    min_password_length: int = 8
    bcrypt_rounds: int = 12
    log_level: str = "INFO"
    log_json: bool = False

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            session_cookie=env.get("STOREFRONT_SESSION_COOKIE", "session_id"),
            session_ttl=timedelta(
                seconds=int(env.get("STOREFRONT_SESSION_TTL", 14 * 24 * 3600))
            ),
            min_password_length=int(env.get("STOREFRONT_MIN_PASSWORD_LENGTH", 8)),
            bcrypt_rounds=int(env.get("STOREFRONT_BCRYPT_ROUNDS", 12)),
            log_level=env.get("STOREFRONT_LOG_LEVEL", "INFO").upper(),
            log_json=env.get("STOREFRONT_LOG_JSON", "false").lower() in _TRUTHY,
        )
