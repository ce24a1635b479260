# creche/services/children.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from creche.core.errors import NotFound, ValidationFailed
from creche.core.policy import ROLE_PARENT, authorize, is_admin
from creche.db.session import atomic
from creche.models import Child, Class, Teacher, User
from creche.services.activity import log_activity, notify

log = logging.getLogger("creche.lifecycle")


def enroll_child(db: Session, **fields) -> Child:
    """
    Insert a Child and fan out the enrollment activity + parent notification.
    Flushes only; the caller decides when the unit of work commits.
    """
    child = Child(**fields)
    child.status = fields.get("status") or "active"
    db.add(child)
    db.flush()

    log_activity(
        db,
        user_id=child.parent_id,
        type="enrollment",
        title="New child enrolled",
        description=f"{child.first_name} {child.last_name} has been enrolled",
    )
    notify(
        db,
        user_id=child.parent_id,
        title="Child Enrolled",
        message=f"{child.first_name} has been successfully enrolled in the creche",
    )
    log.info("child %s enrolled for parent %s", child.id, child.parent_id)
    return child


def create_child(db: Session, me: User, data) -> Child:
    authorize(me, "child.create", message="Forbidden - only admins can enroll children")

    parent = db.get(User, data.parent_id)
    if not parent or parent.role != ROLE_PARENT:
        raise ValidationFailed.field("parentId", "Parent not found")
    if data.class_id is not None and not db.get(Class, data.class_id):
        raise ValidationFailed.field("classId", "Class not found")

    with atomic(db):
        child = enroll_child(db, **data.model_dump())
    return child


def list_children(db: Session, me: User) -> List[Child]:
    authorize(me, "child.list")
    q = db.query(Child)
    if not is_admin(me):
        q = q.filter(Child.parent_id == me.id)
    return q.order_by(Child.last_name.asc(), Child.first_name.asc()).all()


def get_child(db: Session, me: User, child_id: int, action: str = "child.read") -> Child:
    child = db.get(Child, child_id)
    if not child:
        raise NotFound("Child not found")
    authorize(me, action, child.parent_id)
    return child


# ---------- students: children as seen by the office ----------

def list_students(db: Session, me: User) -> List[Child]:
    authorize(me, "student.list", message="Forbidden - only admins can access all students")
    return db.query(Child).order_by(Child.last_name.asc(), Child.first_name.asc()).all()


def get_student(db: Session, me: User, student_id: int) -> Child:
    child = db.get(Child, student_id)
    if not child:
        raise NotFound("Student not found")
    authorize(me, "student.read", child.parent_id)
    return child


def assign_class(db: Session, me: User, student_id: int, class_id: Optional[int]) -> Child:
    authorize(me, "student.update", message="Forbidden - only admins can update students")
    child = db.get(Child, student_id)
    if not child:
        raise NotFound("Student not found")
    if class_id is not None and not db.get(Class, class_id):
        raise ValidationFailed.field("classId", "Class not found")
    child.class_id = class_id
    db.commit()
    db.refresh(child)
    return child


# ---------- classes ----------

def list_classes(db: Session, me: User) -> List[Class]:
    authorize(me, "class.read")
    return db.query(Class).order_by(Class.name.asc()).all()


def create_class(db: Session, me: User, data) -> Class:
    authorize(me, "class.create", message="Forbidden - only admins can create classes")
    if data.teacher_id is not None and not db.get(Teacher, data.teacher_id):
        raise ValidationFailed.field("teacherId", "Teacher not found")
    c = Class(**data.model_dump())
    db.add(c)
    db.commit()
    return c
