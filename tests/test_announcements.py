# tests/test_announcements.py
from creche.models import Activity, Notification


def _post(client, **over):
    body = {
        "title": "Sports day",
        "content": "Sports day is on Friday, please send a hat.",
        "targetAudience": "all",
    }
    body.update(over)
    return client.post("/api/announcements", json=body)


def test_create_notifies_every_parent(admin_client, admin, parent, other_parent, db):
    r = _post(admin_client)
    assert r.status_code == 201, r.text
    assert r.json()["authorName"] == admin.name
    assert r.json()["status"] == "active"

    act = db.query(Activity).one()
    assert act.type == "announcement"
    assert act.user_id == admin.id
    assert act.description == "Sports day"

    notes = db.query(Notification).all()
    assert {n.user_id for n in notes} == {parent.id, other_parent.id}
    assert {n.title for n in notes} == {"New Announcement"}


def test_staff_announcement_does_not_notify(admin_client, parent, db):
    assert _post(admin_client, targetAudience="staff").status_code == 201
    assert db.query(Notification).count() == 0
    assert db.query(Activity).count() == 1


def test_create_is_admin_only_and_validated(admin_client, parent_client):
    assert _post(parent_client).status_code == 403
    r = _post(admin_client, title="Hi", content="short")
    assert r.status_code == 400
    assert {tuple(e["path"]) for e in r.json()["errors"]} == {("title",), ("content",)}


def test_parent_visibility(admin_client, parent_client):
    visible = _post(admin_client).json()
    parents = _post(admin_client, targetAudience="parents", title="Parents evening").json()
    staff = _post(admin_client, targetAudience="staff", title="Staff meeting").json()
    draft = _post(admin_client, status="draft", title="Draft notice").json()

    seen = {a["id"] for a in parent_client.get("/api/announcements").json()}
    assert seen == {visible["id"], parents["id"]}
    assert len(admin_client.get("/api/announcements").json()) == 4

    assert parent_client.get(f"/api/announcements/{visible['id']}").status_code == 200
    assert parent_client.get(f"/api/announcements/{staff['id']}").status_code == 403
    assert parent_client.get(f"/api/announcements/{draft['id']}").status_code == 403
    assert parent_client.get("/api/announcements/999").status_code == 404


def test_update_and_archive(admin_client, parent_client):
    a = _post(admin_client).json()

    r = admin_client.patch(f"/api/announcements/{a['id']}", json={"title": "Sports day moved"})
    assert r.status_code == 200
    assert r.json()["title"] == "Sports day moved"
    assert r.json()["content"] == a["content"]

    r = admin_client.patch(f"/api/announcements/{a['id']}/status", json={"status": "archived"})
    assert r.json()["status"] == "archived"
    assert parent_client.get("/api/announcements").json() == []

    assert admin_client.patch(f"/api/announcements/{a['id']}/status", json={"status": "gone"}).status_code == 400
    assert parent_client.patch(f"/api/announcements/{a['id']}/status", json={"status": "active"}).status_code == 403
