# tests/test_teachers.py
from creche.models import Activity


def _teacher(client, **over):
    body = {
        "name": "Thandi Mokoena",
        "email": "thandi@creche.test",
        "phone": "0825550000",
        "qualification": "ECD Level 5",
    }
    body.update(over)
    return client.post("/api/teachers", json=body)


def test_create_teacher_logs_staff_activity(admin_client, admin, db):
    r = _teacher(admin_client)
    assert r.status_code == 201, r.text
    assert r.json()["status"] == "active"

    act = db.query(Activity).one()
    assert act.type == "staff"
    assert act.user_id == admin.id
    assert act.description == "Thandi Mokoena has been hired as a teacher"


def test_teacher_email_unique(admin_client):
    _teacher(admin_client)
    r = _teacher(admin_client, name="Other", email="THANDI@creche.test")
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["email"]


def test_teachers_are_admin_only(parent_client, admin_client):
    t = _teacher(admin_client).json()
    assert parent_client.get("/api/teachers").status_code == 403
    assert parent_client.get(f"/api/teachers/{t['id']}").status_code == 403
    assert _teacher(parent_client, email="x@creche.test").status_code == 403


def test_update_and_status(admin_client, db):
    from creche.models import Class

    c = Class(name="Preschool II", capacity=25)
    db.add(c)
    db.commit()

    t = _teacher(admin_client).json()
    r = admin_client.patch(f"/api/teachers/{t['id']}", json={"classId": c.id, "qualification": "B.Ed"})
    assert r.status_code == 200
    assert r.json()["className"] == "Preschool II"
    assert r.json()["qualification"] == "B.Ed"
    assert r.json()["name"] == "Thandi Mokoena"

    r = admin_client.patch(f"/api/teachers/{t['id']}/status", json={"status": "inactive"})
    assert r.json()["status"] == "inactive"

    assert admin_client.patch(f"/api/teachers/{t['id']}", json={"classId": 999}).status_code == 400
    assert admin_client.get("/api/teachers/999").status_code == 404
