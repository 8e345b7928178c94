"""Engine construction and schema management."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url

from ecom.infrastructure.persistence.errors import translate_errors
from ecom.infrastructure.persistence.tables import metadata


def create_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for *database_url*.

    SQLite units start with ``BEGIN IMMEDIATE`` (writers queue on the
    database lock for up to 30 seconds) and enforce foreign keys. Other
    backends get a pre-pinged pool; PostgreSQL needs the ``postgres`` extra.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return sa_create_engine(url, echo=echo, pool_pre_ping=True)

    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = sa_create_engine(
        url,
        echo=echo,
        connect_args={"check_same_thread": False, "timeout": 30},
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Let SQLAlchemy emit BEGIN itself.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def init_schema(engine: Engine) -> None:
    with translate_errors("create schema"):
        metadata.create_all(engine)
    logger.info("Schema ready on {}", engine.url.render_as_string(hide_password=True))
