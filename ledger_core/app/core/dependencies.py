from collections.abc import Generator

from fastapi import Depends, Request
from sqlmodel import Session

from ..services import (
    AccountRepository,
    AccountService,
    StudentRepository,
    StudentService,
    TransactionManager,
    TransferService,
)
from .db import Database

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_session(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    with database.session() as session:
        yield session

def get_transaction_manager(session: Session = Depends(get_session)) -> TransactionManager:
    return TransactionManager(session)

def get_student_service(
    transaction_manager: TransactionManager = Depends(get_transaction_manager),
) -> StudentService:
    return StudentService(StudentRepository(transaction_manager), transaction_manager)

def get_account_service(
    transaction_manager: TransactionManager = Depends(get_transaction_manager),
) -> AccountService:
    return AccountService(AccountRepository(transaction_manager))

def get_transfer_service(
    transaction_manager: TransactionManager = Depends(get_transaction_manager),
) -> TransferService:
    return TransferService(AccountRepository(transaction_manager), transaction_manager)
