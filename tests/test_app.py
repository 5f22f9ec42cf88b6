from models import storage

from conftest import bearer


def test_health(client):
    body = client.get("/api/health").get_json()
    assert body["success"] is True
    assert body["status"] == "ok"
    assert body["environment"] == "test"


def test_unknown_route_uses_envelope(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "Route not found"}


def test_trailing_slash_is_optional(client):
    assert client.get("/api/blog/").status_code == 200
    assert client.get("/api/blog").status_code == 200


def test_security_headers(client):
    resp = client.get("/api/health")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_swagger_spec_lists_api_routes(client):
    spec = client.get("/swagger.json").get_json()
    assert "/api/blog/" in spec["paths"] or "/api/blog" in spec["paths"]


def test_dashboard(client, auth_headers):
    client.post("/api/contact", json={"name": "Jane", "email": "j@example.com",
                                      "message": "Hello there, let us talk."})
    client.post("/api/blog", json={"title": "Post", "content": "body", "status": "published"},
                headers=auth_headers)

    data = client.get("/api/admin/dashboard", headers=auth_headers).get_json()["data"]
    assert data["counts"]["enquiries"] == {"total": 1, "new": 1}
    assert data["counts"]["blogs"] == {"total": 1, "published": 1}
    assert data["recent"]["blogs"][0]["author"]["name"] == "Admin User"
    assert data["breakdown"]["enquiriesByStatus"] == [{"_id": "new", "count": 1}]

    feed = client.get("/api/admin/activity?limit=5", headers=auth_headers).get_json()["data"]
    assert {item["type"] for item in feed} == {"blog", "enquiry"}
    assert feed[0]["date"] >= feed[-1]["date"]


def test_inactive_admin_is_locked_out(client, admin):
    headers = bearer(admin)
    admin.is_active = False
    storage.save()
    resp = client.get("/api/admin/dashboard", headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Account is deactivated."

