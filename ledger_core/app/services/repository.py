from __future__ import annotations

from typing import Optional

from ..core.errors import AccountNotFoundError, StudentNotFoundError
from ..models import AccountModel, AccountRecord, StudentModel, StudentRecord
from .store import EntityStore


class StudentRepository(EntityStore[StudentRecord]):
    record_type = StudentRecord
    model_type = StudentModel
    not_found_error = StudentNotFoundError


class AccountRepository(EntityStore[AccountRecord]):
    """Account persistence: find by id and save."""

    record_type = AccountRecord
    model_type = AccountModel
    not_found_error = AccountNotFoundError

    def find_by_id(
        self, account_id: int, *, for_update: bool = False
    ) -> Optional[AccountRecord]:
        return self.fetch(account_id, for_update=for_update)

    def save(self, account: AccountRecord) -> AccountRecord:
        if account.id is None:
            account_id = self.create(account)
            return account.model_copy(update={"id": account_id})
        self.update(account)
        return account
