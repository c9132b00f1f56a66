from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..core.dependencies import (
    get_account_service,
    get_student_service,
    get_transfer_service,
)
from ..models import (
    AccountCreate,
    AccountRecord,
    StudentCourseUpdate,
    StudentCreate,
    StudentRecord,
    TransferRequest,
    TransferResult,
)
from ..services import AccountService, StudentService, TransferService


student_router = APIRouter(prefix="/students", tags=["students"])

def _student_not_found(student_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Student {student_id} not found",
    )

@student_router.post("", response_model=StudentRecord, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentCreate,
    service: StudentService = Depends(get_student_service),
) -> StudentRecord:
    return service.create_student(payload)

@student_router.get("/{student_id}", response_model=StudentRecord)
def read_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
) -> StudentRecord:
    student = service.read_student(student_id)
    if student is None:
        raise _student_not_found(student_id)
    return student

@student_router.patch("/{student_id}", response_model=StudentRecord)
def update_student(
    student_id: int,
    payload: StudentCourseUpdate,
    service: StudentService = Depends(get_student_service),
) -> StudentRecord:
    student = service.update_student(student_id, payload.course)
    if student is None:
        raise _student_not_found(student_id)
    return student

@student_router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
) -> Response:
    if not service.delete_student(student_id):
        raise _student_not_found(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

account_router = APIRouter(prefix="/accounts", tags=["accounts"])

@account_router.post("", response_model=AccountRecord, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: AccountService = Depends(get_account_service),
) -> AccountRecord:
    return service.create_account(payload)

@account_router.get("/{account_id}", response_model=AccountRecord)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> AccountRecord:
    return service.get_account(account_id)

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResult)
def create_transfer(
    payload: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransferResult:
    return service.execute(payload)

__all__ = ["account_router", "student_router", "transfer_router"]
