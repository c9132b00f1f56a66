from __future__ import annotations

import logging
from decimal import Decimal
from typing import Union

from ..core.errors import AccountNotFoundError, InsufficientBalanceError
from ..core.money import as_money, positive_amount
from ..models import AccountRecord, TransferRequest, TransferResult
from .repository import AccountRepository
from .transactions import TransactionManager


logger = logging.getLogger(__name__)


class TransferService:
    """Moves money between two accounts as a single unit of work."""

    def __init__(
        self,
        repository: AccountRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.repository = repository
        self.transaction_manager = transaction_manager

    def _get_account(self, account_id: int) -> AccountRecord:
        account = self.repository.find_by_id(account_id, for_update=True)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    def _check_balance(self, account: AccountRecord, amount: Decimal) -> None:
        if account.balance < amount:
            logger.info(
                "transfer.rejected",
                extra={
                    "account_id": account.id,
                    "balance": str(account.balance),
                    "amount": str(amount),
                },
            )
            raise InsufficientBalanceError(
                f"Insufficient balance in account {account.id}"
            )

    def transfer(
        self,
        from_id: int,
        to_id: int,
        amount: Union[Decimal, float, int, str],
    ) -> TransferResult:
        amount = positive_amount(amount)

        with self.transaction_manager.atomic():
            if from_id == to_id:
                # Net effect is zero; only the balance check applies.
                account = self._get_account(from_id)
                self._check_balance(account, amount)
                return TransferResult(source=account, dest=account)

            # Lock rows in id order so opposing transfers cannot deadlock.
            first, second = sorted((from_id, to_id))
            loaded = {first: self._get_account(first), second: self._get_account(second)}
            source, dest = loaded[from_id], loaded[to_id]

            self._check_balance(source, amount)

            source = source.model_copy(update={"balance": source.balance - amount})
            # Rejects a credit that would push the balance past MAX_AMOUNT.
            dest = dest.model_copy(update={"balance": as_money(dest.balance + amount)})
            self.repository.save(source)
            self.repository.save(dest)

        logger.info(
            "account.transfer",
            extra={
                "source_account_id": from_id,
                "dest_account_id": to_id,
                "amount": str(amount),
            },
        )
        return TransferResult(source=source, dest=dest)

    def execute(self, payload: TransferRequest) -> TransferResult:
        return self.transfer(
            payload.from_account_id, payload.to_account_id, payload.amount
        )
