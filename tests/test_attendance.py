# tests/test_attendance.py
from io import BytesIO

import pytest
from openpyxl import load_workbook

from creche.models import Activity, Attendance, Child, Class

DAY = "2026-03-02"


@pytest.fixture
def toddlers(db):
    c = Class(name="Toddler Group", age_range="1-2 years", capacity=15)
    db.add(c)
    db.commit()
    return c


def test_record_is_upsert(admin_client, enrolled, db):
    body = {"studentId": enrolled["id"], "date": DAY, "present": True}
    first = admin_client.post("/api/attendance", json=body)
    assert first.status_code == 200

    second = admin_client.post("/api/attendance", json={**body, "present": False, "notes": "sick"})
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    rows = db.query(Attendance).all()
    assert len(rows) == 1
    assert rows[0].present is False
    assert rows[0].notes == "sick"


def test_attendance_is_admin_only(parent_client, enrolled):
    r = parent_client.post("/api/attendance", json={"studentId": enrolled["id"], "date": DAY, "present": True})
    assert r.status_code == 403
    assert parent_client.get("/api/attendance").status_code == 403


def test_sheet_fills_missing_children(admin_client, enrolled):
    rows = admin_client.get("/api/attendance", params={"date": DAY}).json()
    assert len(rows) == 1
    assert rows[0] == {
        "id": 0,
        "studentId": enrolled["id"],
        "studentName": "Emma Johnson",
        "classId": None,
        "className": None,
        "date": DAY,
        "present": False,
        "notes": "",
    }


def test_mark_all_uses_caller_as_actor(admin_client, admin, enrolled, db):
    r = admin_client.post("/api/attendance/mark-all", json={"date": DAY, "present": True})
    assert r.status_code == 200
    assert r.json() == {"success": True, "count": 1}

    act = db.query(Activity).filter(Activity.type == "attendance").one()
    assert act.user_id == admin.id
    assert act.description == f"Attendance on {DAY} has been marked as present for all students"

    # running it again updates in place
    admin_client.post("/api/attendance/mark-all", json={"date": DAY, "present": False})
    rows = db.query(Attendance).all()
    assert len(rows) == 1
    db.expire_all()
    assert db.query(Attendance).one().present is False


def test_mark_all_for_one_class(admin_client, enrolled, toddlers, db):
    admin_client.patch(f"/api/students/{enrolled['id']}", json={"classId": toddlers.id})

    other = Class(name="Preschool I", capacity=20)
    db.add(other)
    db.commit()

    r = admin_client.post("/api/attendance/mark-all", json={"date": DAY, "classId": other.id})
    assert r.json()["count"] == 0

    r = admin_client.post("/api/attendance/mark-all", json={"date": DAY, "classId": toddlers.id})
    assert r.json()["count"] == 1
    act = db.query(Activity).filter(Activity.type == "attendance").order_by(Activity.id.desc()).first()
    assert act.description.endswith("for all students in a specific class")


def test_mark_all_skips_inactive(admin_client, enrolled, db):
    child = db.get(Child, enrolled["id"])
    child.status = "inactive"
    db.commit()

    r = admin_client.post("/api/attendance/mark-all", json={"date": DAY})
    assert r.json()["count"] == 0
    assert admin_client.get("/api/attendance", params={"date": DAY}).json() == []


def test_update_notes(admin_client, enrolled):
    rec = admin_client.post("/api/attendance", json={"studentId": enrolled["id"], "date": DAY, "present": True}).json()
    r = admin_client.patch(f"/api/attendance/{rec['id']}", json={"notes": "left early"})
    assert r.status_code == 200
    assert r.json()["notes"] == "left early"
    assert admin_client.patch("/api/attendance/999", json={"notes": "x"}).status_code == 404


def test_unknown_student(admin_client, db):
    r = admin_client.post("/api/attendance", json={"studentId": 42, "date": DAY, "present": True})
    assert r.status_code == 400


def test_export_sheet(admin_client, enrolled):
    admin_client.post("/api/attendance", json={"studentId": enrolled["id"], "date": DAY, "present": True})
    r = admin_client.get("/api/attendance/export", params={"date": DAY})
    assert r.status_code == 200
    ws = load_workbook(BytesIO(r.content)).active
    assert [c.value for c in ws[1]] == ["Date", "Child", "Class", "Present", "Notes"]
    assert ws["B2"].value == "Emma Johnson"
    assert ws["D2"].value == "Yes"


def test_failed_summary_rolls_back_mark_all(admin_client, enrolled, db, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("activity failed")

    monkeypatch.setattr("creche.services.attendance.log_activity", boom)
    with pytest.raises(RuntimeError):
        admin_client.post("/api/attendance/mark-all", json={"date": DAY, "present": True})

    db.expire_all()
    assert db.query(Attendance).count() == 0
