from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import SessionTransaction
from sqlmodel import Session

from ..core.errors import NoActiveTransactionError, TransactionAlreadyActiveError
from .store import translate_store_errors


logger = logging.getLogger(__name__)


class TransactionState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class TransactionManager:
    """Explicit unit-of-work demarcation over a single session.

    ``begin`` opens a scope in which every store operation sharing this
    manager is provisional; ``commit`` makes them durable together and
    ``rollback`` discards them. A manager can run several transactions one
    after another but never two at once.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self._state = TransactionState.IDLE
        self._transaction: Optional[SessionTransaction] = None

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is TransactionState.ACTIVE

    def begin(self) -> None:
        if self.is_active:
            raise TransactionAlreadyActiveError("A transaction is already active")
        with translate_store_errors():
            self._transaction = self.session.begin()
        self._state = TransactionState.ACTIVE

    def commit(self) -> None:
        transaction = self._require_active("commit")
        try:
            with translate_store_errors():
                transaction.commit()
        except Exception:
            self._discard()
            raise
        self._transaction = None
        self._state = TransactionState.COMMITTED

    def rollback(self) -> None:
        transaction = self._require_active("rollback")
        self._transaction = None
        self._state = TransactionState.ROLLED_BACK
        with translate_store_errors():
            transaction.rollback()

    @contextmanager
    def atomic(self) -> Iterator["TransactionManager"]:
        """Run the enclosed block as one unit of work.

        Commits on normal exit. Any exception rolls the work back and is
        re-raised unchanged.
        """
        self.begin()
        try:
            yield self
        except BaseException:
            if self.is_active:
                self._discard()
            raise
        if self.is_active:
            self.commit()

    def _require_active(self, operation: str) -> SessionTransaction:
        if not self.is_active or self._transaction is None:
            raise NoActiveTransactionError(f"Cannot {operation}: no active transaction")
        return self._transaction

    def _discard(self) -> None:
        # Used on error paths: the error being handled must win over a
        # failing rollback.
        self._transaction = None
        self._state = TransactionState.ROLLED_BACK
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.exception("transaction.rollback_failed")
