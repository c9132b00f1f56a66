from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlmodel import Session, SQLModel

from ..core.errors import NotFoundError, StoreUnavailableError

if TYPE_CHECKING:
    from .transactions import TransactionManager


RecordT = TypeVar("RecordT", bound=BaseModel)


@contextmanager
def translate_store_errors() -> Iterator[None]:
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        raise StoreUnavailableError(f"Storage backend unavailable: {exc.orig}") from exc


class EntityStore(Generic[RecordT]):
    """Keyed persistence for one record type.

    Callers work with detached pydantic records; the table rows never leave
    the store. Every call either joins the transaction opened on
    ``transaction_manager`` or, when none is active, runs in its own short
    transaction committed before returning.
    """

    record_type: type[RecordT]
    model_type: type[SQLModel]
    not_found_error: type[NotFoundError] = NotFoundError

    def __init__(self, transaction_manager: "TransactionManager") -> None:
        self.transaction_manager = transaction_manager

    @property
    def session(self) -> Session:
        return self.transaction_manager.session

    @contextmanager
    def _unit(self) -> Iterator[Session]:
        with translate_store_errors():
            if self.transaction_manager.is_active:
                yield self.session
            else:
                with self.session.begin():
                    yield self.session

    def _load(self, record_id: int, *, for_update: bool = False) -> Optional[SQLModel]:
        # populate_existing so a row cached by an earlier call is re-read.
        return self.session.get(
            self.model_type,
            record_id,
            populate_existing=True,
            with_for_update=for_update or None,
        )

    def _to_record(self, row: SQLModel) -> RecordT:
        return self.record_type.model_validate(row, from_attributes=True)

    def _missing(self, record_id: int) -> NotFoundError:
        return self.not_found_error(f"{self.model_type.__name__} {record_id} not found")

    def create(self, record: RecordT) -> int:
        row = self.model_type(**record.model_dump(exclude={"id"}))
        with self._unit() as session:
            session.add(row)
            session.flush()
            record_id = row.id
        return record_id

    def fetch(self, record_id: int, *, for_update: bool = False) -> Optional[RecordT]:
        with self._unit():
            row = self._load(record_id, for_update=for_update)
            return self._to_record(row) if row is not None else None

    def update(self, record: RecordT) -> None:
        if record.id is None:
            raise ValueError(f"Cannot update {self.model_type.__name__} without an id")
        with self._unit() as session:
            row = self._load(record.id)
            if row is None:
                raise self._missing(record.id)
            for field, value in record.model_dump(exclude={"id"}).items():
                setattr(row, field, value)
            session.add(row)
            session.flush()

    def delete(self, record_id: int) -> None:
        with self._unit() as session:
            row = self._load(record_id)
            if row is None:
                raise self._missing(record_id)
            session.delete(row)
            session.flush()
