# creche/schemas/child.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel
from .document import DocumentOut
from creche.utils.datetime import parse_date_flexible
from creche.utils.validators import blank_to_none, check_phone


class ChildIn(CamelModel):
    """Direct enrollment by an admin (no application)."""
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    dob: date
    gender: Literal["male", "female", "other"]
    age: Optional[int] = Field(default=None, ge=0)
    parent_id: int
    class_id: Optional[int] = None

    allergies: Optional[str] = None
    medical_conditions: Optional[str] = None
    medications: Optional[str] = None
    emergency_name: Optional[str] = None
    emergency_relationship: Optional[str] = None
    emergency_phone: Optional[str] = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("gender", mode="before")
    @classmethod
    def _lower_gender(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("dob", mode="before")
    @classmethod
    def _dob(cls, v):
        return parse_date_flexible(v)

    @field_validator(
        "allergies", "medical_conditions", "medications",
        "emergency_name", "emergency_relationship",
        mode="before",
    )
    @classmethod
    def _empty_is_null(cls, v):
        return blank_to_none(v)

    @field_validator("emergency_phone", mode="before")
    @classmethod
    def _phone(cls, v):
        v = blank_to_none(v)
        return None if v is None else check_phone(v)


class ChildOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    dob: date
    gender: str
    age: Optional[int] = None
    parent_id: int
    parent_name: Optional[str] = None
    class_id: Optional[int] = None
    class_name: Optional[str] = None
    status: str
    enrollment_date: datetime
    allergies: Optional[str] = None
    medical_conditions: Optional[str] = None


class StudentOut(ChildOut):
    parent_email: Optional[str] = None
    parent_phone: Optional[str] = None


class StudentDetailOut(StudentOut):
    medications: Optional[str] = None
    emergency_name: Optional[str] = None
    emergency_relationship: Optional[str] = None
    emergency_phone: Optional[str] = None
    documents: List[DocumentOut] = Field(default_factory=list)


class StudentUpdate(CamelModel):
    class_id: Optional[int] = None


class ClassIn(CamelModel):
    name: str = Field(min_length=2)
    description: Optional[str] = None
    age_range: Optional[str] = None
    capacity: int = Field(gt=0)
    teacher_id: Optional[int] = None


class ClassOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    age_range: Optional[str] = None
    capacity: Optional[int] = None
    teacher_id: Optional[int] = None
