"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly.  Every subclass carries
an ``ErrorKind`` tag; boundaries branch on the kind, never on message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    CANCELLED = "cancelled"
    PERSISTENCE = "persistence"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.PERSISTENCE


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = ErrorKind.VALIDATION


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} not found")
        self.product_id = product_id


class InsufficientStockError(DomainException):
    """Available quantity is lower than the quantity requested."""

    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, product_id: int, requested: int, available: int | None = None) -> None:
        if available is None:
            message = f"Insufficient stock for product #{product_id} (need {requested})"
        else:
            message = (
                f"Insufficient stock for product #{product_id} "
                f"(need {requested}, have {available} available)"
            )
        super().__init__(message)
        self.product_id = product_id
        self.requested = requested
        self.available = available


class PlacementCancelledError(DomainException):
    """The caller's deadline passed while a unit of work was open."""

    kind = ErrorKind.CANCELLED


class PersistenceError(DomainException):
    """The store failed (unreachable, constraint, commit failure).

    Safe to retry: no partial state survives a failed unit of work.
    """

    kind = ErrorKind.PERSISTENCE
