# tests/test_auth.py
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from creche.db.session import engine
from creche.main import app
from creche.models import User


def _register(client, **over):
    body = {
        "name": "Jennifer Lee",
        "email": "jennifer@x.test",
        "password": "secret1",
        "confirmPassword": "secret1",
        "phone": "+27 71 333 9876",
    }
    body.update(over)
    return client.post("/api/register", json=body)


def test_register_creates_parent_and_logs_in(anon, db):
    r = _register(anon, role="admin")
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["role"] == "parent"
    assert body["phone"] == "+27713339876"
    assert "passwordHash" not in body

    me = anon.get("/api/user")
    assert me.status_code == 200
    assert me.json()["email"] == "jennifer@x.test"


def test_register_duplicate_email(anon, parent):
    r = _register(anon, email=parent.email)
    assert r.status_code == 400
    assert r.json()["message"] == "Email already exists"


def test_register_password_mismatch(anon, db):
    r = _register(anon, confirmPassword="different")
    assert r.status_code == 400
    messages = [e["message"] for e in r.json()["errors"]]
    assert "Passwords do not match" in messages


def test_register_bad_phone(anon, db):
    r = _register(anon, phone="12345678901")
    assert r.status_code == 400
    paths = [e["path"] for e in r.json()["errors"]]
    assert ["phone"] in paths


def test_login_wrong_password(anon, parent):
    r = anon.post("/api/login", json={"email": parent.email, "password": "nope"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid email or password"}


def test_login_is_case_insensitive_on_email(anon, parent):
    r = anon.post("/api/login", json={"email": parent.email.upper(), "password": "password123"})
    assert r.status_code == 200
    assert r.json()["id"] == parent.id


def test_user_requires_session(anon, db):
    r = anon.get("/api/user")
    assert r.status_code == 401
    assert r.json() == {"message": "Unauthorized"}


def test_logout_clears_session(parent_client):
    assert parent_client.get("/api/user").status_code == 200
    assert parent_client.post("/api/logout").json() == {"success": True}
    assert parent_client.get("/api/user").status_code == 401


def test_update_profile(parent_client, parent, db):
    r = parent_client.patch("/api/user", json={"name": "Sarah J", "phone": "083 444 5678"})
    assert r.status_code == 200
    assert r.json()["name"] == "Sarah J"
    assert r.json()["phone"] == "0834445678"


def test_change_password(parent_client, parent, anon, db):
    r = parent_client.post(
        "/api/user/change-password",
        json={"oldPassword": "wrong", "newPassword": "newpass1", "confirmPassword": "newpass1"},
    )
    assert r.status_code == 400

    r = parent_client.post(
        "/api/user/change-password",
        json={"oldPassword": "password123", "newPassword": "newpass1", "confirmPassword": "newpass1"},
    )
    assert r.status_code == 200

    assert anon.post("/api/login", json={"email": parent.email, "password": "newpass1"}).status_code == 200
    db.expire_all()
    assert db.get(User, parent.id).password_changed_at is not None


def test_contacts_by_role(admin, parent, other_parent, admin_client, parent_client):
    to_parent = {c["id"] for c in parent_client.get("/api/contacts").json()}
    assert to_parent == {admin.id}

    to_admin = {c["id"] for c in admin_client.get("/api/contacts").json()}
    assert to_admin == {parent.id, other_parent.id}


def test_health(anon):
    r = anon.get("/api/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_anonymous_request_sets_no_cookie(anon, db):
    r = anon.get("/api/user")
    assert r.status_code == 401
    assert "set-cookie" not in r.headers


def test_registered_parent_runs_enrollment_end_to_end(anon, admin_client, payload, db):
    r = _register(anon, name="Sarah Johnson", email="sarah@x.test")
    assert r.status_code == 201, r.text

    a = anon.post("/api/applications", json=payload(emergencyEmail="dad@x.test"))
    assert a.status_code == 201, a.text
    app_id = a.json()["id"]

    assert admin_client.patch(f"/api/applications/{app_id}", json={"status": "approved"}).status_code == 200
    assert anon.get(f"/api/applications/{app_id}").json()["status"] == "approved"

    kids = anon.get("/api/children").json()
    assert [(k["firstName"], k["status"]) for k in kids] == [("Emma", "active")]
    assert len(anon.get("/api/notifications", params={"unread": True}).json()) == 2


def test_startup_creates_tables():
    with TestClient(app) as c:
        assert c.get("/api/health").status_code == 200
    assert "children" in inspect(engine).get_table_names()
