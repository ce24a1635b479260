# creche/routers/notifications.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.notification import (
    ActivityOut, NotificationOut, NotificationReadOut, ReadAllOut, StatsOut,
)
from creche.services import activity, notifications, stats

router = APIRouter(tags=["Notifications"])


@router.get("/notifications", response_model=List[NotificationOut])
def list_notifications(
    unread: bool = Query(False),
    limit: int = Query(50, ge=1, le=500),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return notifications.list_notifications(db, user, limit=limit, unread_only=unread)


@router.patch("/notifications/read-all", response_model=ReadAllOut)
def read_all(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return ReadAllOut(count=notifications.mark_all_read(db, user))


@router.patch("/notifications/{notification_id}/read", response_model=NotificationReadOut)
def read_one(notification_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    n = notifications.mark_read(db, user, notification_id)
    return NotificationReadOut(notification=NotificationOut.model_validate(n))


# ---------- admin dashboard ----------
@router.get("/activities", response_model=List[ActivityOut], tags=["Dashboard"])
def list_activities(
    limit: int = Query(10, ge=1, le=200),
    type: Optional[str] = Query(None),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return activity.recent_activities(db, user, limit=limit, type=type)


@router.get("/stats", response_model=StatsOut, tags=["Dashboard"])
def dashboard_stats(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return stats.dashboard_stats(db, user)
