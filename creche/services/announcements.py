# creche/services/announcements.py
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from creche.core.errors import Forbidden, NotFound
from creche.core.policy import ROLE_PARENT, authorize, is_admin
from creche.db.session import atomic
from creche.models import Announcement, User
from creche.models.announcement import PARENT_AUDIENCES
from creche.services.activity import log_activity, notify
from creche.utils.datetime import utcnow

log = logging.getLogger("creche.lifecycle")

DENIED = "Forbidden - only admins can manage announcements"


def list_announcements(db: Session, me: User) -> List[Announcement]:
    """Admins see every announcement; parents only active ones addressed to them."""
    authorize(me, "announcement.list")
    q = db.query(Announcement)
    if not is_admin(me):
        q = q.filter(
            Announcement.status == "active",
            Announcement.target_audience.in_(PARENT_AUDIENCES),
        )
    return q.order_by(Announcement.publish_date.desc(), Announcement.id.desc()).all()


def get_announcement(db: Session, me: User, announcement_id: int) -> Announcement:
    authorize(me, "announcement.read")
    a = db.get(Announcement, announcement_id)
    if not a:
        raise NotFound("Announcement not found")
    if not is_admin(me) and not a.visible_to_parents():
        raise Forbidden("You don't have permission to view this announcement")
    return a


def create_announcement(db: Session, me: User, data) -> Announcement:
    """
    Publish an announcement. Writes one Activity, and when the audience
    includes parents, one Notification per parent account.
    """
    authorize(me, "announcement.write", message=DENIED)
    fields = data.model_dump()
    fields["publish_date"] = fields.get("publish_date") or utcnow()

    with atomic(db):
        a = Announcement(**fields, author_id=me.id)
        db.add(a)
        log_activity(
            db,
            user_id=me.id,
            type="announcement",
            title="New announcement published",
            description=a.title,
        )
        recipients = 0
        if a.target_audience in PARENT_AUDIENCES:
            for (parent_id,) in db.query(User.id).filter(User.role == ROLE_PARENT).all():
                notify(db, user_id=parent_id, title="New Announcement", message=a.title)
                recipients += 1
    log.info("announcement %s published, %d parents notified", a.id, recipients)
    return a


def update_announcement(db: Session, me: User, announcement_id: int, data) -> Announcement:
    authorize(me, "announcement.write", message=DENIED)
    a = db.get(Announcement, announcement_id)
    if not a:
        raise NotFound("Announcement not found")
    for k, v in data.model_dump(exclude_unset=True).items():
        if v is None and k in ("title", "content", "target_audience", "publish_date", "status"):
            continue
        setattr(a, k, v)
    db.commit()
    return a


def set_announcement_status(db: Session, me: User, announcement_id: int, status: str) -> Announcement:
    authorize(me, "announcement.write", message=DENIED)
    a = db.get(Announcement, announcement_id)
    if not a:
        raise NotFound("Announcement not found")
    a.status = status
    db.commit()
    return a
