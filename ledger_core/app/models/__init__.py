from .db import Account as AccountModel
from .db import Student as StudentModel
from .schemas import (
    AccountCreate,
    AccountRecord,
    StudentCourseUpdate,
    StudentCreate,
    StudentRecord,
    TransferRequest,
    TransferResult,
)

__all__ = [
    "AccountCreate",
    "AccountRecord",
    "StudentCourseUpdate",
    "StudentCreate",
    "StudentRecord",
    "TransferRequest",
    "TransferResult",
    "AccountModel",
    "StudentModel",
]
