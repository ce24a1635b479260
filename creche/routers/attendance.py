# creche/routers/attendance.py
import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from creche.core.errors import ValidationFailed
from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.attendance import (
    AttendanceIn, AttendanceNotesIn, AttendanceOut, AttendanceSheetRow, MarkAllIn,
)
from creche.schemas.common import CamelModel
from creche.services import attendance as svc
from creche.services.export_service import XLSX_MEDIA_TYPE
from creche.utils.datetime import parse_date_flexible, today

router = APIRouter(prefix="/attendance", tags=["Attendance"])


class MarkAllOut(CamelModel):
    success: bool = True
    count: int


def _day(date: Optional[str]) -> dt.date:
    if not date:
        return today()
    d = parse_date_flexible(date)
    if not isinstance(d, dt.date):
        raise ValidationFailed.field("date", "Invalid date")
    return d


@router.get("", response_model=List[AttendanceSheetRow])
def attendance_sheet(
    date: Optional[str] = Query(None, description="YYYY-MM-DD or dd/mm/yyyy, default today"),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.attendance_sheet(db, user, _day(date))


@router.post("", response_model=AttendanceOut)
def record_attendance(payload: AttendanceIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.record_attendance(db, user, payload)


@router.post("/mark-all", response_model=MarkAllOut)
def mark_all(payload: MarkAllIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return MarkAllOut(count=svc.mark_all(db, user, payload))


@router.get("/export")
def export_attendance(
    date: Optional[str] = Query(None),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    day = _day(date)
    data = svc.export_sheet(db, user, day)
    return Response(
        content=data,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="attendance_{day.strftime("%Y%m%d")}.xlsx"'},
    )


@router.patch("/{attendance_id}", response_model=AttendanceOut)
def update_notes(
    attendance_id: int,
    payload: AttendanceNotesIn,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.update_notes(db, user, attendance_id, payload.notes)
