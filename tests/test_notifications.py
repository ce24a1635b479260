# tests/test_notifications.py
from creche.models import Attendance, Notification
from creche.utils.datetime import today


def test_notifications_are_recipient_only(enrolled, parent_client, other_client):
    mine = parent_client.get("/api/notifications").json()
    assert len(mine) == 2
    assert mine[0]["title"] == "Child Enrolled"
    assert other_client.get("/api/notifications").json() == []


def test_mark_one_read(enrolled, parent_client, other_client, db):
    n = parent_client.get("/api/notifications").json()[0]

    assert other_client.patch(f"/api/notifications/{n['id']}/read").status_code == 403
    assert parent_client.patch("/api/notifications/999/read").status_code == 404

    r = parent_client.patch(f"/api/notifications/{n['id']}/read")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["notification"]["isRead"] is True


def test_read_all(enrolled, parent_client, parent, db):
    r = parent_client.patch("/api/notifications/read-all")
    assert r.json() == {"success": True, "count": 2}
    assert parent_client.patch("/api/notifications/read-all").json()["count"] == 0
    db.expire_all()
    assert db.query(Notification).filter(Notification.user_id == parent.id, Notification.is_read.is_(False)).count() == 0


def test_activities_are_admin_only(enrolled, admin_client, parent_client, parent):
    assert parent_client.get("/api/activities").status_code == 403

    acts = admin_client.get("/api/activities").json()
    assert [a["type"] for a in acts] == ["enrollment", "application"]
    assert acts[0]["userName"] == parent.name

    only = admin_client.get("/api/activities", params={"type": "application", "limit": 5}).json()
    assert len(only) == 1


def test_stats(enrolled, admin_client, parent_client):
    assert parent_client.get("/api/stats").status_code == 403

    stats = admin_client.get("/api/stats").json()
    assert stats == {
        "totalStudents": 1,
        "pendingApplications": 0,
        "attendanceToday": 0,
        "pendingFees": 0,
    }


def test_stats_counts_today(enrolled, admin_client, db):
    db.add(Attendance(student_id=enrolled["id"], date=today(), present=True))
    db.commit()
    assert admin_client.get("/api/stats").json()["attendanceToday"] == 1
