"""Runtime settings read from the environment.

Every value has a local-development default so the CLI works out of the
box against a SQLite file under ``data/``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'ecom.db'}"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:

    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080
    request_timeout: float = 60.0
    sql_echo: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            database_url=env.get("ECOM_DATABASE_URL") or env.get("DATABASE_URL") or DEFAULT_DATABASE_URL,
            log_level=env.get("ECOM_LOG_LEVEL", "INFO").upper(),
            host=env.get("ECOM_HOST", "127.0.0.1"),
            port=int(env.get("ECOM_PORT", "8080")),
            request_timeout=float(env.get("ECOM_REQUEST_TIMEOUT", "60")),
            sql_echo=env.get("ECOM_SQL_ECHO", "").lower() in _TRUTHY,
        )
