from __future__ import annotations

import logging
from decimal import Decimal
from typing import Union

from ..core.errors import AccountNotFoundError
from ..core.money import non_negative_amount
from ..models import AccountCreate, AccountRecord
from .repository import AccountRepository


logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, repository: AccountRepository) -> None:
        self.repository = repository

    def open_account(
        self, name: str, balance: Union[Decimal, float, int, str] = Decimal("0")
    ) -> AccountRecord:
        account = self.repository.save(
            AccountRecord(name=name, balance=non_negative_amount(balance))
        )
        logger.info(
            "account.created",
            extra={"account_id": account.id, "owner_name": account.name},
        )
        return account

    def create_account(self, payload: AccountCreate) -> AccountRecord:
        return self.open_account(payload.name, payload.balance)

    def get_account(self, account_id: int) -> AccountRecord:
        account = self.repository.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account
