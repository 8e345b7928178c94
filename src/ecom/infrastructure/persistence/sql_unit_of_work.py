"""SQLAlchemy unit of work: one connection, one transaction."""

from __future__ import annotations

from loguru import logger
from sqlalchemy.engine import Connection, Engine, RootTransaction
from sqlalchemy.exc import SQLAlchemyError

from ecom.domain.exceptions import PersistenceError
from ecom.domain.repository.unit_of_work import UnitOfWork
from ecom.infrastructure.persistence.errors import translate_errors
from ecom.infrastructure.persistence.sql_inventory_store import SqlInventoryStore
from ecom.infrastructure.persistence.sql_order_store import SqlOrderStore


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._connection: Connection | None = None
        self._transaction: RootTransaction | None = None

    def begin(self) -> None:
        if self._connection is not None:
            raise PersistenceError("Unit of work already in progress")
        with translate_errors("begin unit of work"):
            self._connection = self._engine.connect()
            try:
                self._transaction = self._connection.begin()
            except SQLAlchemyError:
                self._release()
                raise
        self.products = SqlInventoryStore(self._connection)
        self.orders = SqlOrderStore(self._connection)

    def commit(self) -> None:
        if self._transaction is None or not self._transaction.is_active:
            raise PersistenceError("No active unit of work to commit")
        with translate_errors("commit unit of work"):
            self._transaction.commit()

    def rollback(self) -> None:
        if self._connection is None:
            return
        try:
            if self._transaction is not None and self._transaction.is_active:
                self._transaction.rollback()
        except SQLAlchemyError as exc:
            # Closing the connection below discards the transaction anyway.
            logger.warning("Rollback failed, discarding connection: {}", exc)
            self._connection.invalidate()
        finally:
            self._release()

    def _release(self) -> None:
        connection, self._connection, self._transaction = self._connection, None, None
        if connection is not None:
            connection.close()
