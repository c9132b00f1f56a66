from decimal import Decimal

import pytest

from ..core.db import Database
from ..models import AccountRecord
from ..services import AccountRepository, StudentRepository, TransactionManager


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'test.db'}")
    db.init()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def transaction_manager(session) -> TransactionManager:
    return TransactionManager(session)


@pytest.fixture
def students(transaction_manager) -> StudentRepository:
    return StudentRepository(transaction_manager)


@pytest.fixture
def accounts(transaction_manager) -> AccountRepository:
    return AccountRepository(transaction_manager)


@pytest.fixture
def read_balance(database):
    """Reads a balance through a separate session, as another client would."""

    def _read(account_id: int) -> Decimal:
        with database.session() as other:
            account = AccountRepository(TransactionManager(other)).find_by_id(account_id)
            assert account is not None
            return account.balance

    return _read


@pytest.fixture
def open_account(accounts):
    def _open(name: str, balance: str) -> AccountRecord:
        return accounts.save(AccountRecord(name=name, balance=Decimal(balance)))

    return _open
