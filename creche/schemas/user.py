# creche/schemas/user.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from .common import CamelModel, Email
from creche.utils.validators import blank_to_none, check_phone


class RegisterIn(CamelModel):
    name: str = Field(min_length=2)
    email: Email
    password: str = Field(min_length=6)
    confirm_password: str
    phone: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def _phone(cls, v):
        v = blank_to_none(v)
        return None if v is None else check_phone(v)

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginIn(CamelModel):
    email: str
    password: str


class ProfileUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=2)
    phone: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def _phone(cls, v):
        v = blank_to_none(v)
        return None if v is None else check_phone(v)


class ChangePasswordIn(CamelModel):
    old_password: str
    new_password: str = Field(min_length=6)
    confirm_password: str

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None


class ContactOut(CamelModel):
    id: int
    name: str
    role: str
