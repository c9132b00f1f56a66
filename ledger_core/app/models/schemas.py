from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

class StudentRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    course: str

class AccountRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    balance: Decimal = Field(default=Decimal("0.00"), ge=0)

class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Student's full name")
    course: str = Field(..., description="Course the student is enrolled in")

class StudentCourseUpdate(BaseModel):
    course: str

class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the account holder")
    balance: Decimal = Field(default=Decimal("0.00"), description="Opening balance")

class TransferRequest(BaseModel):
    from_account_id: int
    to_account_id: int
    # Validated by TransferService so non-positive amounts surface as InvalidAmountError.
    amount: Decimal

class TransferResult(BaseModel):
    source: AccountRecord
    dest: AccountRecord
