# creche/schemas/message.py
from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import CamelModel


class MessageIn(CamelModel):
    receiver_id: int
    subject: str = Field(min_length=2)
    content: str = Field(min_length=2)


class MessageOut(CamelModel):
    id: int
    sender_id: int
    sender_name: str
    sender_role: str
    receiver_id: int
    receiver_name: str
    subject: str
    content: str
    status: str
    created_at: datetime
