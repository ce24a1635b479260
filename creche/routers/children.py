# creche/routers/children.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.child import (
    ChildIn, ChildOut, ClassIn, ClassOut, StudentDetailOut, StudentOut, StudentUpdate,
)
from creche.services import children as svc

router = APIRouter(tags=["Children"])


# ---------- children (parent view) ----------
@router.get("/children", response_model=List[ChildOut])
def list_children(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_children(db, user)


@router.post("/children", response_model=ChildOut, status_code=201)
def create_child(payload: ChildIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.create_child(db, user, payload)


@router.get("/children/{child_id}", response_model=StudentDetailOut)
def get_child(child_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.get_child(db, user, child_id)


# ---------- students (admin view) ----------
@router.get("/students", response_model=List[StudentOut])
def list_students(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_students(db, user)


@router.get("/students/{student_id}", response_model=StudentDetailOut)
def get_student(student_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.get_student(db, user, student_id)


@router.patch("/students/{student_id}", response_model=StudentOut)
def update_student(
    student_id: int,
    payload: StudentUpdate,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.assign_class(db, user, student_id, payload.class_id)


# ---------- classes ----------
@router.get("/classes", response_model=List[ClassOut])
def list_classes(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_classes(db, user)


@router.post("/classes", response_model=ClassOut, status_code=201)
def create_class(payload: ClassIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.create_class(db, user, payload)
