from decimal import Decimal

import pytest

from ..core.db import Database
from ..core.errors import (
    AccountNotFoundError,
    NotFoundError,
    StoreUnavailableError,
    StudentNotFoundError,
)
from ..models import AccountRecord, StudentRecord
from ..services import StudentRepository, TransactionManager


def test_create_then_fetch_round_trip(students) -> None:
    record = StudentRecord(name="Alice", course="Java")
    student_id = students.create(record)

    fetched = students.fetch(student_id)
    assert fetched == record.model_copy(update={"id": student_id})


def test_create_assigns_unique_ids(students) -> None:
    first = students.create(StudentRecord(name="Alice", course="Java"))
    second = students.create(StudentRecord(name="Bob", course="Python"))
    assert first != second


def test_create_ignores_caller_supplied_id(students) -> None:
    student_id = students.create(StudentRecord(id=999, name="Alice", course="Java"))
    assert student_id != 999
    assert students.fetch(999) is None


def test_fetch_missing_returns_none(students) -> None:
    assert students.fetch(12345) is None


def test_update_replaces_fields(students) -> None:
    student_id = students.create(StudentRecord(name="Alice", course="Java"))
    students.update(StudentRecord(id=student_id, name="Alice", course="Spring Boot"))

    assert students.fetch(student_id).course == "Spring Boot"


def test_update_without_id_is_rejected(students) -> None:
    with pytest.raises(ValueError):
        students.update(StudentRecord(name="Alice", course="Java"))


def test_update_after_delete_raises_not_found(students) -> None:
    student_id = students.create(StudentRecord(name="Alice", course="Java"))
    students.delete(student_id)

    with pytest.raises(StudentNotFoundError):
        students.update(StudentRecord(id=student_id, name="Alice", course="Spring"))


def test_delete_twice_raises_not_found(students) -> None:
    student_id = students.create(StudentRecord(name="Alice", course="Java"))
    students.delete(student_id)

    assert students.fetch(student_id) is None
    with pytest.raises(NotFoundError):
        students.delete(student_id)


def test_account_repository_not_found_error(accounts) -> None:
    with pytest.raises(AccountNotFoundError):
        accounts.save(AccountRecord(id=42, name="Ghost", balance=Decimal("1.00")))


def test_save_creates_then_updates(accounts) -> None:
    created = accounts.save(AccountRecord(name="A", balance=Decimal("100.00")))
    assert created.id is not None

    accounts.save(created.model_copy(update={"balance": Decimal("12.50")}))
    assert accounts.find_by_id(created.id).balance == Decimal("12.50")


def test_writes_are_visible_to_other_sessions(database, students) -> None:
    student_id = students.create(StudentRecord(name="Alice", course="Java"))

    with database.session() as other:
        other_students = StudentRepository(TransactionManager(other))
        assert other_students.fetch(student_id).course == "Java"
        other_students.update(StudentRecord(id=student_id, name="Alice", course="Go"))

    # No stale read from the first session's identity map.
    assert students.fetch(student_id).course == "Go"


def test_store_unavailable_when_database_cannot_be_opened(tmp_path) -> None:
    database = Database(f"sqlite:///{tmp_path / 'missing' / 'ledger.db'}")
    try:
        with pytest.raises(StoreUnavailableError):
            database.init()

        with database.session() as session:
            repository = StudentRepository(TransactionManager(session))
            with pytest.raises(StoreUnavailableError):
                repository.create(StudentRecord(name="Alice", course="Java"))
            with pytest.raises(StoreUnavailableError):
                repository.fetch(1)
    finally:
        database.dispose()


def test_largest_balance_round_trips_exactly(accounts, read_balance) -> None:
    created = accounts.save(
        AccountRecord(name="Max", balance=Decimal("9999999999999.99"))
    )

    assert read_balance(created.id) == Decimal("9999999999999.99")
