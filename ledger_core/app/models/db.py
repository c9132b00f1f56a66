from __future__ import annotations
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, SQLModel

class Student(SQLModel, table=True):
    __tablename__ = "students"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    course: str

class Account(SQLModel, table=True):
    __tablename__ = "accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    balance: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=18, decimal_places=2)
