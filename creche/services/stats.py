# creche/services/stats.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from creche.core.policy import authorize
from creche.models import Application, Attendance, Child, Fee, User
from creche.utils.datetime import today


def dashboard_stats(db: Session, me: User) -> dict:
    authorize(me, "stats.read", message="Forbidden - only admins can access stats")

    def count(model, *where):
        return db.query(func.count(model.id)).filter(*where).scalar() or 0

    return {
        "total_students": count(Child, Child.status == "active"),
        "pending_applications": count(Application, Application.status == "pending"),
        "attendance_today": count(Attendance, Attendance.date == today(), Attendance.present.is_(True)),
        "pending_fees": count(Fee, Fee.status == "pending"),
    }
