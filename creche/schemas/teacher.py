# creche/schemas/teacher.py
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel, Email
from creche.utils.validators import blank_to_none

TeacherStatus = Literal["active", "inactive"]


class TeacherIn(CamelModel):
    name: str = Field(min_length=2)
    email: Email
    phone: Optional[str] = None
    qualification: str = Field(min_length=2)
    class_id: Optional[int] = None
    status: TeacherStatus = "active"

    @field_validator("phone", "class_id", mode="before")
    @classmethod
    def _blank(cls, v):
        return blank_to_none(v)


class TeacherUpdate(CamelModel):
    # PATCH: only the fields sent are changed
    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[Email] = None
    phone: Optional[str] = None
    qualification: Optional[str] = Field(default=None, min_length=2)
    class_id: Optional[int] = None
    status: Optional[TeacherStatus] = None

    @field_validator("class_id", mode="before")
    @classmethod
    def _blank(cls, v):
        return blank_to_none(v)


class TeacherStatusIn(CamelModel):
    status: TeacherStatus


class TeacherOut(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    qualification: str
    class_id: Optional[int] = None
    class_name: Optional[str] = None
    status: str
    hire_date: datetime
    created_at: datetime
