# creche/services/notifications.py
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from creche.core.errors import NotFound
from creche.core.policy import authorize
from creche.models import Notification, User


def list_notifications(db: Session, me: User, *, limit: int = 50, unread_only: bool = False) -> List[Notification]:
    authorize(me, "notification.list")
    q = db.query(Notification).filter(Notification.user_id == me.id)
    if unread_only:
        q = q.filter(Notification.is_read.is_(False))
    return q.order_by(Notification.date.desc(), Notification.id.desc()).limit(limit).all()


def mark_read(db: Session, me: User, notification_id: int) -> Notification:
    n = db.get(Notification, notification_id)
    if not n:
        raise NotFound("Notification not found")
    authorize(me, "notification.update", n.user_id,
              message="You don't have permission to update this notification")
    n.is_read = True
    db.commit()
    return n


def mark_all_read(db: Session, me: User) -> int:
    authorize(me, "notification.list")
    count = (
        db.query(Notification)
        .filter(Notification.user_id == me.id, Notification.is_read.is_(False))
        .update({Notification.is_read: True}, synchronize_session=False)
    )
    db.commit()
    return count
