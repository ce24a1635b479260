# creche/services/teachers.py
from __future__ import annotations

from typing import List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from creche.core.errors import NotFound, ValidationFailed
from creche.core.policy import authorize
from creche.db.session import atomic
from creche.models import Class, Teacher, User
from creche.services.activity import log_activity
from creche.utils.datetime import utcnow

DENIED = "Forbidden - only admins can manage teachers"


def _check_email_free(db: Session, email: str, exclude_id: int = None) -> None:
    q = db.query(Teacher).filter(func.lower(Teacher.email) == email.lower())
    if exclude_id is not None:
        q = q.filter(Teacher.id != exclude_id)
    if q.first():
        raise ValidationFailed.field("email", "A teacher with this email already exists")


def _check_class(db: Session, class_id) -> None:
    if class_id is not None and not db.get(Class, class_id):
        raise ValidationFailed.field("classId", "Class not found")


def list_teachers(db: Session, me: User) -> List[Teacher]:
    authorize(me, "teacher.read", message=DENIED)
    return db.query(Teacher).order_by(Teacher.name.asc()).all()


def get_teacher(db: Session, me: User, teacher_id: int) -> Teacher:
    authorize(me, "teacher.read", message=DENIED)
    t = db.get(Teacher, teacher_id)
    if not t:
        raise NotFound("Teacher not found")
    return t


def create_teacher(db: Session, me: User, data) -> Teacher:
    authorize(me, "teacher.write", message=DENIED)
    email = str(data.email).lower()
    _check_email_free(db, email)
    _check_class(db, data.class_id)

    try:
        with atomic(db):
            t = Teacher(**{**data.model_dump(), "email": email}, hire_date=utcnow())
            db.add(t)
            log_activity(
                db,
                user_id=me.id,
                type="staff",
                title="New teacher hired",
                description=f"{t.name} has been hired as a teacher",
            )
    except IntegrityError:
        raise ValidationFailed.field("email", "A teacher with this email already exists")
    return t


def update_teacher(db: Session, me: User, teacher_id: int, data) -> Teacher:
    t = get_teacher(db, me, teacher_id)
    changes = data.model_dump(exclude_unset=True)
    if changes.get("email"):
        changes["email"] = str(changes["email"]).lower()
        _check_email_free(db, changes["email"], exclude_id=t.id)
    if "class_id" in changes:
        _check_class(db, changes["class_id"])

    for k, v in changes.items():
        if v is None and k in ("name", "email", "qualification", "status"):
            continue
        setattr(t, k, v)
    db.commit()
    db.refresh(t)
    return t


def set_teacher_status(db: Session, me: User, teacher_id: int, status: str) -> Teacher:
    t = get_teacher(db, me, teacher_id)
    t.status = status
    db.commit()
    return t
