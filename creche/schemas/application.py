# creche/schemas/application.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel, Email
from .document import DocumentOut
from creche.utils.datetime import parse_date_flexible
from creche.utils.validators import blank_to_none, check_phone

Gender = Literal["male", "female", "other"]


class ApplicationIn(CamelModel):
    child_first_name: str = Field(min_length=2)
    child_last_name: str = Field(min_length=2)
    child_dob: date
    child_gender: Gender
    child_age: Optional[int] = Field(default=None, ge=0)

    allergies: Optional[str] = None
    medical_conditions: Optional[str] = None
    medications: Optional[str] = None

    emergency_name: str = Field(min_length=2)
    emergency_relationship: str = Field(min_length=2)
    emergency_phone: str
    emergency_email: Optional[Email] = None

    # ---- Validators ----
    @field_validator("child_first_name", "child_last_name", "emergency_name", "emergency_relationship", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("child_gender", mode="before")
    @classmethod
    def _lower_gender(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("child_dob", mode="before")
    @classmethod
    def _dob(cls, v):
        return parse_date_flexible(v)

    @field_validator("allergies", "medical_conditions", "medications", "emergency_email", mode="before")
    @classmethod
    def _empty_is_null(cls, v):
        # "" -> None: "not provided" is stored as NULL
        return blank_to_none(v)

    @field_validator("emergency_phone", mode="before")
    @classmethod
    def _phone(cls, v):
        return check_phone(v or "")


class DecisionIn(CamelModel):
    status: Literal["approved", "rejected"]


class DecisionOut(CamelModel):
    success: bool = True
    status: str


class ApplicationOut(CamelModel):
    id: int
    child_first_name: str
    child_last_name: str
    child_dob: date
    child_gender: str
    child_age: Optional[int] = None
    parent_id: int
    parent_name: Optional[str] = None
    allergies: Optional[str] = None
    medical_conditions: Optional[str] = None
    medications: Optional[str] = None
    emergency_name: str
    emergency_relationship: str
    emergency_phone: str
    emergency_email: Optional[str] = None
    status: str
    applied_date: datetime


class ApplicationDetailOut(ApplicationOut):
    documents: List[DocumentOut] = Field(default_factory=list)
