# creche/schemas/attendance.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import field_validator

from .common import CamelModel
from creche.utils.datetime import parse_date_flexible


class _DateIn(CamelModel):
    date: dt.date

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, v):
        return parse_date_flexible(v)


class AttendanceIn(_DateIn):
    student_id: int
    present: bool
    notes: Optional[str] = None


class MarkAllIn(_DateIn):
    class_id: Optional[int] = None
    present: bool = True


class AttendanceNotesIn(CamelModel):
    notes: str = ""


class AttendanceOut(CamelModel):
    id: int
    student_id: int
    date: dt.date
    present: bool
    notes: Optional[str] = None


class AttendanceSheetRow(CamelModel):
    """One active child on a given day; id is 0 when nothing was recorded yet."""
    id: int
    student_id: int
    student_name: str
    class_id: Optional[int] = None
    class_name: Optional[str] = None
    date: dt.date
    present: bool
    notes: str
