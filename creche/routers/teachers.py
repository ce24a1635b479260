# creche/routers/teachers.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.teacher import TeacherIn, TeacherOut, TeacherStatusIn, TeacherUpdate
from creche.services import teachers as svc

router = APIRouter(prefix="/teachers", tags=["Teachers"])


@router.get("", response_model=List[TeacherOut])
def list_teachers(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_teachers(db, user)


@router.post("", response_model=TeacherOut, status_code=201)
def create_teacher(payload: TeacherIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.create_teacher(db, user, payload)


@router.get("/{teacher_id}", response_model=TeacherOut)
def get_teacher(teacher_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.get_teacher(db, user, teacher_id)


@router.patch("/{teacher_id}", response_model=TeacherOut)
def update_teacher(
    teacher_id: int,
    payload: TeacherUpdate,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.update_teacher(db, user, teacher_id, payload)


@router.patch("/{teacher_id}/status", response_model=TeacherOut)
def set_teacher_status(
    teacher_id: int,
    payload: TeacherStatusIn,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.set_teacher_status(db, user, teacher_id, payload.status)
