# tests/conftest.py
"""
Every test gets a fresh in-memory SQLite database. The app's ``get_db``
dependency is overridden so requests and the ``db`` fixture share it.
"""
from __future__ import annotations

import os

# must be set before creche.core.config is imported
os.environ.setdefault("DB_URL", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import creche.models  # noqa: F401  (register tables)
from creche.core.security import hash_password
from creche.db.base import Base
from creche.db.session import get_db, make_engine
from creche.main import app
from creche.models import User

PASSWORD = "password123"


@pytest.fixture
def engine():
    eng = make_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

    def _get_db():
        s = TestingSession()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    session = TestingSession()
    yield session
    session.close()
    app.dependency_overrides.clear()


def _make_user(db, name, email, role):
    u = User(name=name, email=email, role=role, phone="0821234567", password_hash=hash_password(PASSWORD))
    db.add(u)
    db.commit()
    return u


@pytest.fixture
def admin(db):
    return _make_user(db, "Admin User", "admin@creche.test", "admin")


@pytest.fixture
def parent(db):
    return _make_user(db, "Sarah Johnson", "sarah@x.test", "parent")


@pytest.fixture
def other_parent(db):
    return _make_user(db, "Michael Parker", "michael@x.test", "parent")


def login(user) -> TestClient:
    c = TestClient(app)
    r = c.post("/api/login", json={"email": user.email, "password": PASSWORD})
    assert r.status_code == 200, r.text
    return c


@pytest.fixture
def anon(db):
    return TestClient(app)


@pytest.fixture
def admin_client(admin):
    return login(admin)


@pytest.fixture
def parent_client(parent):
    return login(parent)


@pytest.fixture
def other_client(other_parent):
    return login(other_parent)


def application_payload(**over):
    body = {
        "childFirstName": "Emma",
        "childLastName": "Johnson",
        "childDob": "2020-05-15",
        "childGender": "female",
        "allergies": "",
        "medicalConditions": "",
        "medications": "",
        "emergencyName": "David Johnson",
        "emergencyRelationship": "Father",
        "emergencyPhone": "0821234567",
        "emergencyEmail": "",
    }
    body.update(over)
    return body


@pytest.fixture
def submit(db):
    """submit(client, **overrides) -> application json"""
    def _submit(client, **over):
        r = client.post("/api/applications", json=application_payload(**over))
        assert r.status_code == 201, r.text
        return r.json()
    return _submit


@pytest.fixture
def enrolled(db, admin_client, parent_client, submit):
    """An approved application for ``parent``; returns the resulting child json."""
    app_json = submit(parent_client)
    r = admin_client.patch(f"/api/applications/{app_json['id']}", json={"status": "approved"})
    assert r.status_code == 200, r.text
    children = parent_client.get("/api/children").json()
    assert len(children) == 1
    return children[0]


@pytest.fixture
def login_as(db):
    return login


@pytest.fixture
def payload():
    """payload(**overrides) -> a valid application body"""
    return application_payload
