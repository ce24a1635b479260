# creche/services/applications.py
"""
Application lifecycle.

    pending --admin approves--> approved   (+ a Child is enrolled)
    pending --admin rejects---> rejected

Both decisions write, in one transaction and in this order: the status, an
Activity (actor = the applying parent), a Notification to that parent and,
for approvals, the Child row with its own enrollment activity/notification.
A decided application cannot be decided again.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from creche.core.errors import Conflict, NotFound, ValidationFailed
from creche.core.policy import authorize, is_admin
from creche.db.session import atomic
from creche.models import Application, User
from creche.models.application import APPLICATION_STATUSES
from creche.services.activity import log_activity, notify
from creche.services.children import enroll_child
from creche.utils.datetime import utcnow

log = logging.getLogger("creche.lifecycle")

DECISIONS = APPLICATION_STATUSES[1:]  # approved, rejected


def submit_application(db: Session, me: User, data) -> Application:
    """
    Store a new pending application for ``me``. Optional free-text fields
    arrive already normalised ("" -> None). No activity or notification is
    written for a submission.
    """
    authorize(me, "application.submit")
    with atomic(db):
        a = Application(
            **data.model_dump(),
            parent_id=me.id,
            status="pending",
            applied_date=utcnow(),
        )
        db.add(a)
    log.info("application %s submitted by parent %s", a.id, me.id)
    return a


def decide_application(db: Session, me: User, application_id: int, decision: str) -> Application:
    authorize(me, "application.decide", message="Forbidden - only admins can update application status")
    if decision not in DECISIONS:
        raise ValidationFailed.field("status", "Invalid status value")

    a = db.get(Application, application_id)
    if not a:
        raise NotFound("Application not found")
    if a.status != "pending":
        raise Conflict(f"Application has already been {a.status}")

    with atomic(db):
        a.status = decision
        log_activity(
            db,
            user_id=a.parent_id,
            type="application",
            title=f"Application status updated to {decision}",
            description=f"Application for {a.child_first_name} {a.child_last_name} has been {decision}",
        )
        notify(
            db,
            user_id=a.parent_id,
            title="Application Status Updated",
            message=f"Your application for {a.child_first_name} has been {decision}",
        )
        if decision == "approved":
            enroll_child(
                db,
                first_name=a.child_first_name,
                last_name=a.child_last_name,
                dob=a.child_dob,
                gender=a.child_gender,
                age=a.child_age,
                parent_id=a.parent_id,
                status="active",
                enrollment_date=utcnow(),
                allergies=a.allergies,
                medical_conditions=a.medical_conditions,
                medications=a.medications,
                emergency_name=a.emergency_name,
                emergency_relationship=a.emergency_relationship,
                emergency_phone=a.emergency_phone,
            )

    log.info("application %s %s by admin %s", a.id, decision, me.id)
    return a


def list_applications(db: Session, me: User) -> List[Application]:
    authorize(me, "application.list")
    q = db.query(Application)
    if not is_admin(me):
        q = q.filter(Application.parent_id == me.id)
    return q.order_by(Application.applied_date.desc(), Application.id.desc()).all()


def get_application(db: Session, me: User, application_id: int) -> Application:
    a = db.get(Application, application_id)
    if not a:
        raise NotFound("Application not found")
    authorize(me, "application.read", a.parent_id)
    return a
