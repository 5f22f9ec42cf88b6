from datetime import timedelta

from models import storage
from models.base_model import utcnow
from models.enquiry import Enquiry, EnquiryNote

FORM = {
    "name": "Jane Doe",
    "email": "Jane@Example.com",
    "company": "Acme",
    "message": "We would like to talk about our pipeline.",
}


def submit(client, **overrides):
    return client.post("/api/contact", json={**FORM, **overrides})


def test_public_submission(client):
    resp = submit(client)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Thank you for your enquiry. We will get back to you soon."
    assert set(body["data"]) == {"id"}

    enquiry = storage.get(Enquiry, body["data"]["id"])
    assert enquiry.email == "jane@example.com"
    assert enquiry.service == "Other"
    assert enquiry.source == "website"
    assert enquiry.status.value == "new"
    assert enquiry.priority.value == "medium"


def test_submission_validation(client):
    resp = submit(client, message="too short", service="Astrology")
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.get_json()["errors"]}
    assert {"message", "service"} <= fields


def test_notification_email_when_configured(app, client, outbox):
    app.config["ENQUIRY_NOTIFY_EMAIL"] = "sales@example.com"
    submit(client, name="<b>Jane</b>")
    assert len(outbox) == 1
    to, subject, html = outbox[0]
    assert to == "sales@example.com"
    assert "&lt;b&gt;Jane&lt;/b&gt;" in html


def test_no_notification_by_default(client, outbox):
    submit(client)
    assert outbox == []


def test_admin_list_requires_token(client):
    assert client.get("/api/enquiries").status_code == 401
    assert client.get("/api/contact").status_code == 401


def test_admin_list_filters(client, auth_headers):
    submit(client)
    submit(client, name="Bob Smith", email="bob@corp.io", company="Corp")
    bob = storage.get_session().query(Enquiry).filter(Enquiry.email == "bob@corp.io").first()
    client.put(f"/api/enquiries/{bob.id}/status", json={"status": "qualified", "priority": "high"},
               headers=auth_headers)

    all_rows = client.get("/api/enquiries", headers=auth_headers).get_json()
    assert all_rows["pagination"]["total"] == 2
    assert all_rows["pagination"]["limit"] == 20

    qualified = client.get("/api/enquiries?status=qualified", headers=auth_headers).get_json()["data"]
    assert [e["name"] for e in qualified] == ["Bob Smith"]
    high = client.get("/api/enquiries?priority=high", headers=auth_headers).get_json()["data"]
    assert [e["name"] for e in high] == ["Bob Smith"]
    search = client.get("/api/enquiries?search=acme", headers=auth_headers).get_json()["data"]
    assert [e["name"] for e in search] == ["Jane Doe"]

    assert client.get("/api/enquiries?status=bogus", headers=auth_headers).status_code == 400


def test_date_range_filter(client, auth_headers):
    submit(client)
    old = storage.get_session().query(Enquiry).first()
    old.created_at = utcnow() - timedelta(days=30)
    storage.save()
    submit(client, name="Recent Person")

    start = (utcnow() - timedelta(days=1)).date().isoformat()
    rows = client.get(f"/api/enquiries?startDate={start}", headers=auth_headers).get_json()["data"]
    assert [e["name"] for e in rows] == ["Recent Person"]

    end = (utcnow() - timedelta(days=10)).date().isoformat()
    rows = client.get(f"/api/enquiries?endDate={end}", headers=auth_headers).get_json()["data"]
    assert [e["name"] for e in rows] == ["Jane Doe"]

    assert client.get("/api/enquiries?startDate=yesterday", headers=auth_headers).status_code == 400


def test_status_update_is_explicit(client, auth_headers, admin):
    enquiry_id = submit(client).get_json()["data"]["id"]
    resp = client.put(
        f"/api/enquiries/{enquiry_id}/status",
        json={"status": "contacted", "assignedTo": admin.id, "estimatedValue": 1500, "tags": ["Hot"]},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["status"] == "contacted"
    assert data["priority"] == "medium"
    assert data["assignedTo"] == admin.id
    assert data["estimatedValue"] == "1500.00"
    assert data["tags"] == ["hot"]

    bad = client.put(f"/api/enquiries/{enquiry_id}/status", json={"status": "won"}, headers=auth_headers)
    assert bad.status_code == 400
    nobody = client.put(f"/api/enquiries/{enquiry_id}/status", json={"assignedTo": "missing"},
                        headers=auth_headers)
    assert nobody.status_code == 400


def test_notes_are_appended_in_order(client, auth_headers, admin):
    enquiry_id = submit(client).get_json()["data"]["id"]
    first = client.post(f"/api/enquiries/{enquiry_id}/notes", json={"content": "Called"}, headers=auth_headers)
    assert first.status_code == 201
    assert first.get_json()["data"]["content"] == "Called"
    assert first.get_json()["data"]["createdBy"]["id"] == admin.id
    client.post(f"/api/enquiries/{enquiry_id}/notes", json={"content": "Sent proposal"}, headers=auth_headers)

    detail = client.get(f"/api/enquiries/{enquiry_id}", headers=auth_headers).get_json()["data"]
    assert [n["content"] for n in detail["notes"]] == ["Called", "Sent proposal"]

    empty = client.post(f"/api/enquiries/{enquiry_id}/notes", json={}, headers=auth_headers)
    assert empty.status_code == 400


def test_delete_removes_notes(client, auth_headers):
    enquiry_id = submit(client).get_json()["data"]["id"]
    client.post(f"/api/enquiries/{enquiry_id}/notes", json={"content": "x"}, headers=auth_headers)
    assert client.delete(f"/api/enquiries/{enquiry_id}", headers=auth_headers).status_code == 200
    assert storage.get_session().query(EnquiryNote).count() == 0
    missing = client.get(f"/api/enquiries/{enquiry_id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "Enquiry not found"


def test_stats(client, auth_headers):
    submit(client)
    submit(client, name="Other Person")
    enquiry_id = submit(client, name="Third Person").get_json()["data"]["id"]
    client.put(f"/api/enquiries/{enquiry_id}/status", json={"status": "lost"}, headers=auth_headers)

    stats = client.get("/api/enquiries/stats", headers=auth_headers).get_json()["data"]
    assert stats["total"] == 3
    assert stats["new"] == 2
    assert stats["recentCount"] == 3
    assert stats["byStatus"][0] == {"status": "new", "count": 2}


def test_export_csv(client, auth_headers):
    submit(client, message="x" * 300)
    resp = client.get("/api/enquiries/export", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    lines = resp.get_data(as_text=True).splitlines()
    assert lines[0] == ('"Name","Email","Phone","Company","Service","Message",'
                        '"Status","Priority","Source","Created At"')
    assert f'"{"x" * 200}"' in lines[1]
    assert f'"{"x" * 201}"' not in lines[1]
