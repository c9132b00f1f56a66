from .accounts import AccountService
from .repository import AccountRepository, StudentRepository
from .store import EntityStore
from .students import StudentService
from .transactions import TransactionManager, TransactionState
from .transfer import TransferService

__all__ = [
    "AccountRepository",
    "AccountService",
    "EntityStore",
    "StudentRepository",
    "StudentService",
    "TransactionManager",
    "TransactionState",
    "TransferService",
]
