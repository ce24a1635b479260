# creche/schemas/fee.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel
from creche.utils.datetime import parse_date_flexible

FeeStatus = Literal["pending", "paid", "overdue"]


class FeeIn(CamelModel):
    student_id: int
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    description: str = Field(min_length=2)
    due_date: date

    @field_validator("due_date", mode="before")
    @classmethod
    def _due(cls, v):
        return parse_date_flexible(v)


class FeeStatusIn(CamelModel):
    status: FeeStatus


class FeeStatusOut(CamelModel):
    success: bool = True
    status: str


class FeeOut(CamelModel):
    id: int
    student_id: int
    student_name: Optional[str] = None
    parent_id: Optional[int] = None
    amount: float
    description: str
    due_date: date
    status: str
    created_at: datetime
    paid_date: Optional[datetime] = None
