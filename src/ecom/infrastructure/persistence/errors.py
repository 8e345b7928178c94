"""Translation of driver errors into the domain's PersistenceError."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from ecom.domain.exceptions import PersistenceError


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise store failures as PersistenceError.

    sqlite3 raises a bare OverflowError when binding an integer outside the
    signed 64-bit range, so that is caught alongside SQLAlchemyError.
    """
    try:
        yield
    except (SQLAlchemyError, OverflowError) as exc:
        raise PersistenceError(f"Failed to {action}: {exc.__class__.__name__}") from exc
