# tests/test_messages.py
import pytest

from creche.models import Message, Notification


@pytest.fixture
def sent(admin, parent_client):
    r = parent_client.post("/api/messages", json={
        "receiverId": admin.id,
        "subject": "Question about allergies",
        "content": "Emma is allergic to peanuts.",
    })
    assert r.status_code == 201, r.text
    return r.json()


def test_send_notifies_receiver(sent, admin, parent, db):
    assert sent["status"] == "unread"
    assert sent["senderName"] == parent.name
    assert sent["senderRole"] == "parent"

    n = db.query(Notification).one()
    assert n.user_id == admin.id
    assert n.title == "New Message"
    assert n.message == "You have received a new message: Question about allergies"


def test_sender_viewing_keeps_unread(sent, parent_client, db):
    r = parent_client.get(f"/api/messages/{sent['id']}")
    assert r.status_code == 200
    assert r.json()["status"] == "unread"
    assert db.get(Message, sent["id"]).status == "unread"


def test_receiver_viewing_marks_read(sent, admin_client, db):
    r = admin_client.get(f"/api/messages/{sent['id']}")
    assert r.status_code == 200
    assert r.json()["status"] == "read"
    db.expire_all()
    assert db.get(Message, sent["id"]).status == "read"


def test_outsider_cannot_read(sent, other_client, db):
    assert other_client.get(f"/api/messages/{sent['id']}").status_code == 403
    assert other_client.get("/api/messages").json() == []
    assert db.get(Message, sent["id"]).status == "unread"


def test_listing_includes_sent_and_received(sent, parent_client, admin_client):
    assert [m["id"] for m in parent_client.get("/api/messages").json()] == [sent["id"]]
    assert [m["id"] for m in admin_client.get("/api/messages").json()] == [sent["id"]]


def test_send_validation(parent_client, admin):
    r = parent_client.post("/api/messages", json={"receiverId": admin.id, "subject": "x", "content": ""})
    assert r.status_code == 400
    paths = {tuple(e["path"]) for e in r.json()["errors"]}
    assert paths == {("subject",), ("content",)}


def test_unknown_receiver(parent_client):
    r = parent_client.post("/api/messages", json={"receiverId": 999, "subject": "Hello", "content": "Hi there"})
    assert r.status_code == 404


def test_missing_message(parent_client):
    assert parent_client.get("/api/messages/999").status_code == 404
