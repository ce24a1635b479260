# creche/schemas/notification.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .common import CamelModel


class NotificationOut(CamelModel):
    id: int
    user_id: int
    title: str
    message: str
    date: datetime
    is_read: bool


class NotificationReadOut(CamelModel):
    success: bool = True
    notification: NotificationOut


class ReadAllOut(CamelModel):
    success: bool = True
    count: int


class ActivityOut(CamelModel):
    id: int
    user_id: int
    user_name: Optional[str] = None
    type: str
    title: str
    description: str
    created_at: datetime


class StatsOut(CamelModel):
    total_students: int
    pending_applications: int
    attendance_today: int
    pending_fees: int
