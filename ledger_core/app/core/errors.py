class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""


class NotFoundError(LedgerError):
    """Raised when an identifier is absent at read, update or delete time."""


class AccountNotFoundError(NotFoundError):
    """Raised when an account id is missing from the store."""


class StudentNotFoundError(NotFoundError):
    """Raised when a student id is missing from the store."""


class StoreUnavailableError(LedgerError):
    """Raised when the storage backend cannot be reached."""


class InvalidAmountError(LedgerError):
    """Raised when a monetary amount is not a positive number."""


class InsufficientBalanceError(LedgerError):
    """Raised when a transfer would drop the source balance below zero."""


class TransactionStateError(LedgerError):
    """Raised when the transaction state machine is driven out of order."""


class TransactionAlreadyActiveError(TransactionStateError):
    """Raised by begin() while a transaction is already open."""


class NoActiveTransactionError(TransactionStateError):
    """Raised by commit() or rollback() when no transaction is open."""
