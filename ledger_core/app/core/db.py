from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .errors import StoreUnavailableError


logger = logging.getLogger(__name__)


def _enable_sqlite_immediate_transactions(engine: Engine) -> None:
    # pysqlite defers BEGIN until the first write, which lets two transfers
    # read the same balance. Take the write lock at BEGIN instead.
    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine_for_url(
    database_url: str,
    *,
    echo: bool = False,
    busy_timeout: float = 5.0,
) -> Engine:
    connect_args: dict[str, Any] = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": busy_timeout}
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)
    if is_sqlite:
        _enable_sqlite_immediate_transactions(engine)
    return engine


class Database:
    """Explicitly owned handle on the storage backend.

    Construct one per process (or per test), call :meth:`init` before use and
    :meth:`dispose` on shutdown. Sessions handed out by :meth:`session` never
    start a transaction on their own; callers go through a
    ``TransactionManager``.
    """

    def __init__(
        self,
        database_url: str,
        *,
        echo: bool = False,
        busy_timeout: float = 5.0,
    ) -> None:
        self.database_url = database_url
        self.engine = create_engine_for_url(
            database_url, echo=echo, busy_timeout=busy_timeout
        )

    def init(self) -> None:
        try:
            SQLModel.metadata.create_all(self.engine)
        except (OperationalError, InterfaceError) as exc:
            raise StoreUnavailableError(
                f"Database at {self.engine.url} is unavailable"
            ) from exc
        logger.info("database.initialised", extra={"url": str(self.engine.url)})

    def session(self) -> Session:
        return Session(self.engine, autobegin=False, expire_on_commit=False)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("database.disposed", extra={"url": str(self.engine.url)})
