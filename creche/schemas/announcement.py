# creche/schemas/announcement.py
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel
from creche.utils.validators import blank_to_none

Audience = Literal["all", "parents", "staff"]
AnnouncementStatus = Literal["draft", "active", "archived"]


class AnnouncementIn(CamelModel):
    title: str = Field(min_length=3)
    content: str = Field(min_length=10)
    target_audience: Audience = "all"
    publish_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    status: AnnouncementStatus = "active"

    @field_validator("publish_date", "expiry_date", mode="before")
    @classmethod
    def _blank(cls, v):
        return blank_to_none(v)


class AnnouncementUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=3)
    content: Optional[str] = Field(default=None, min_length=10)
    target_audience: Optional[Audience] = None
    publish_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    status: Optional[AnnouncementStatus] = None

    @field_validator("publish_date", "expiry_date", mode="before")
    @classmethod
    def _blank(cls, v):
        return blank_to_none(v)


class AnnouncementStatusIn(CamelModel):
    status: AnnouncementStatus


class AnnouncementOut(CamelModel):
    id: int
    title: str
    content: str
    author_id: int
    author_name: Optional[str] = None
    target_audience: str
    publish_date: datetime
    expiry_date: Optional[datetime] = None
    status: str
    created_at: datetime
