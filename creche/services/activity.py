# creche/services/activity.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from creche.core.config import settings
from creche.core.policy import authorize
from creche.models import Activity, Notification, User

log = logging.getLogger("creche.activity")


def money(amount) -> str:
    return f"{settings.CURRENCY_SYMBOL}{Decimal(str(amount)):.2f}"


def log_activity(db: Session, *, user_id: int, type: str, title: str, description: str) -> Activity:
    """
    Append one audit row. Does not commit: the row belongs to the caller's
    unit of work and rolls back with it.
    """
    row = Activity(user_id=user_id, type=type, title=title, description=description)
    db.add(row)
    log.debug("activity type=%s user=%s title=%r", type, user_id, title)
    return row


def notify(db: Session, *, user_id: int, title: str, message: str) -> Notification:
    """Queue one notification for ``user_id``; no commit here either."""
    row = Notification(user_id=user_id, title=title, message=message, is_read=False)
    db.add(row)
    log.debug("notify user=%s title=%r", user_id, title)
    return row


def recent_activities(db: Session, me: User, *, limit: int = 10, type: Optional[str] = None) -> List[Activity]:
    authorize(me, "activity.read", message="Forbidden - only admins can access activities")
    q = db.query(Activity)
    if type:
        q = q.filter(Activity.type == type)
    return q.order_by(Activity.created_at.desc(), Activity.id.desc()).limit(limit).all()
