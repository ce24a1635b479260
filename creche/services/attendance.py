# creche/services/attendance.py
from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from creche.core.errors import Conflict, NotFound, ValidationFailed
from creche.core.policy import authorize
from creche.db.session import atomic
from creche.models import Attendance, Child, Class, User
from creche.services.activity import log_activity
from creche.services.export_service import build_attendance_xlsx

log = logging.getLogger("creche.lifecycle")


def _upsert(db: Session, student_id: int, day: dt.date, present: bool, notes: Optional[str]) -> Attendance:
    row = (
        db.query(Attendance)
        .filter(Attendance.student_id == student_id, Attendance.date == day)
        .first()
    )
    if row:
        row.present = present
        if notes is not None:
            row.notes = notes
    else:
        row = Attendance(student_id=student_id, date=day, present=present, notes=notes)
        db.add(row)
    db.flush()
    return row


def active_children(db: Session, class_id: Optional[int] = None) -> List[Child]:
    q = db.query(Child).filter(Child.status == "active")
    if class_id is not None:
        q = q.filter(Child.class_id == class_id)
    return q.order_by(Child.last_name.asc(), Child.first_name.asc()).all()


def record_attendance(db: Session, me: User, data) -> Attendance:
    """Insert or update the single record for (student, date)."""
    authorize(me, "attendance.write", message="Forbidden - only admins can record attendance")
    if not db.get(Child, data.student_id):
        raise ValidationFailed.field("studentId", "Student not found")
    try:
        with atomic(db):
            row = _upsert(db, data.student_id, data.date, data.present, data.notes)
    except IntegrityError:
        raise Conflict("Attendance for this student and date was recorded concurrently")
    return row


def mark_all(db: Session, me: User, data) -> int:
    """
    Apply the same presence to every active child (optionally one class) on a
    date, then write one summary Activity with ``me`` as the actor.
    """
    authorize(me, "attendance.write", message="Forbidden - only admins can record attendance")
    if data.class_id is not None and not db.get(Class, data.class_id):
        raise ValidationFailed.field("classId", "Class not found")

    children = active_children(db, data.class_id)
    word = "present" if data.present else "absent"
    scope = " in a specific class" if data.class_id is not None else ""
    try:
        with atomic(db):
            for child in children:
                _upsert(db, child.id, data.date, data.present, None)
            log_activity(
                db,
                user_id=me.id,
                type="attendance",
                title="Attendance marked for all students",
                description=f"Attendance on {data.date.isoformat()} has been marked as {word} for all students{scope}",
            )
    except IntegrityError:
        raise Conflict("Attendance for this date was recorded concurrently")
    log.info("attendance %s marked %s for %d children", data.date, word, len(children))
    return len(children)


def attendance_sheet(db: Session, me: User, day: dt.date) -> List[dict]:
    """Every active child for ``day``; children without a record show id 0, absent."""
    authorize(me, "attendance.read", message="Forbidden - only admins can view attendance")
    records = {
        a.student_id: a
        for a in db.query(Attendance).filter(Attendance.date == day).all()
    }
    sheet = []
    for child in active_children(db):
        rec = records.get(child.id)
        sheet.append({
            "id": rec.id if rec else 0,
            "student_id": child.id,
            "student_name": child.full_name,
            "class_id": child.class_id,
            "class_name": child.class_name,
            "date": day,
            "present": bool(rec.present) if rec else False,
            "notes": (rec.notes or "") if rec else "",
        })
    return sheet


def update_notes(db: Session, me: User, attendance_id: int, notes: str) -> Attendance:
    authorize(me, "attendance.write", message="Forbidden - only admins can update attendance")
    row = db.get(Attendance, attendance_id)
    if not row:
        raise NotFound("Attendance record not found")
    row.notes = notes
    db.commit()
    return row


def export_sheet(db: Session, me: User, day: dt.date) -> bytes:
    authorize(me, "attendance.export", message="Forbidden - only admins can export attendance")
    return build_attendance_xlsx(day, attendance_sheet(db, me, day))
