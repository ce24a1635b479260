# creche/routers/announcements.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.announcement import (
    AnnouncementIn, AnnouncementOut, AnnouncementStatusIn, AnnouncementUpdate,
)
from creche.services import announcements as svc

router = APIRouter(prefix="/announcements", tags=["Announcements"])


@router.get("", response_model=List[AnnouncementOut])
def list_announcements(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_announcements(db, user)


@router.post("", response_model=AnnouncementOut, status_code=201)
def create_announcement(payload: AnnouncementIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.create_announcement(db, user, payload)


@router.get("/{announcement_id}", response_model=AnnouncementOut)
def get_announcement(announcement_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.get_announcement(db, user, announcement_id)


@router.patch("/{announcement_id}", response_model=AnnouncementOut)
def update_announcement(
    announcement_id: int,
    payload: AnnouncementUpdate,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.update_announcement(db, user, announcement_id, payload)


@router.patch("/{announcement_id}/status", response_model=AnnouncementOut)
def set_announcement_status(
    announcement_id: int,
    payload: AnnouncementStatusIn,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return svc.set_announcement_status(db, user, announcement_id, payload.status)
