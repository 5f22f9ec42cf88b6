from datetime import timedelta

from models import storage
from models.base_model import utcnow
from models.blog import Blog


def make_post(client, headers, **overrides):
    payload = {"title": "Scaling Revenue Ops", "content": "<p>" + "word " * 450 + "</p>", "status": "published"}
    payload.update(overrides)
    return client.post("/api/blog", json=payload, headers=headers)


def test_create_generates_slug_and_read_time(client, auth_headers, admin):
    resp = make_post(client, auth_headers, tags=[" CRM ", "crm", "Growth"])
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["slug"] == "scaling-revenue-ops"
    assert data["readTime"] == 3
    assert data["tags"] == ["crm", "growth"]
    assert data["publishDate"] is not None
    assert data["author"]["id"] == admin.id
    assert data["category"] == "General"


def test_slug_is_ascii_only(client, auth_headers):
    data = make_post(client, auth_headers, title="Café Strategy").get_json()["data"]
    assert data["slug"] == "caf-strategy"

    resent = client.put(f"/api/blog/{data['id']}", json={"slug": data["slug"]}, headers=auth_headers)
    assert resent.status_code == 200


def test_duplicate_titles_get_numbered_slugs(client, auth_headers):
    make_post(client, auth_headers)
    second = make_post(client, auth_headers).get_json()["data"]
    assert second["slug"] == "scaling-revenue-ops-1"


def test_explicit_duplicate_slug_is_rejected(client, auth_headers):
    make_post(client, auth_headers, slug="taken")
    resp = make_post(client, auth_headers, slug="taken", title="Other")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "A post with this slug already exists"


def test_create_requires_auth_and_valid_body(client, auth_headers):
    assert make_post(client, {}).status_code == 401
    resp = client.post("/api/blog", json={"title": "x", "category": "Nope"}, headers=auth_headers)
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.get_json()["errors"]}
    assert {"content", "category"} <= fields


def test_public_list_hides_drafts_and_future_posts(client, auth_headers):
    make_post(client, auth_headers, title="Live")
    make_post(client, auth_headers, title="Draft", status="draft")
    future = (utcnow() + timedelta(days=3)).isoformat()
    make_post(client, auth_headers, title="Scheduled", publishDate=future)

    body = client.get("/api/blog").get_json()
    assert [p["title"] for p in body["data"]] == ["Live"]
    assert "content" not in body["data"][0]
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 1, "pages": 1}

    admin_body = client.get("/api/blog/admin/all", headers=auth_headers).get_json()
    assert admin_body["pagination"]["total"] == 3


def test_filters_by_category_tag_and_search(client, auth_headers):
    make_post(client, auth_headers, title="Automation Wins", category="Automation", tags=["hubspot"])
    make_post(client, auth_headers, title="Strategy Notes", category="Strategy", tags=["planning"])

    assert [p["title"] for p in client.get("/api/blog?category=Automation").get_json()["data"]] == ["Automation Wins"]
    assert [p["title"] for p in client.get("/api/blog?tag=HubSpot").get_json()["data"]] == ["Automation Wins"]
    assert [p["title"] for p in client.get("/api/blog?search=strategy").get_json()["data"]] == ["Strategy Notes"]
    assert client.get("/api/blog?search=%").get_json()["data"] == []
    assert client.get("/api/blog?search=_").get_json()["data"] == []


def test_pagination_and_sorting(client, auth_headers):
    for title in ("Alpha", "Bravo", "Charlie"):
        make_post(client, auth_headers, title=title)
    body = client.get("/api/blog?sortBy=title&sortOrder=asc&limit=2&page=2").get_json()
    assert [p["title"] for p in body["data"]] == ["Charlie"]
    assert body["pagination"]["pages"] == 2

    assert client.get("/api/blog?sortBy=password").status_code == 400


def test_get_by_slug_counts_views(client, auth_headers):
    make_post(client, auth_headers)
    first = client.get("/api/blog/scaling-revenue-ops").get_json()["data"]
    second = client.get("/api/blog/scaling-revenue-ops").get_json()["data"]
    assert first["viewCount"] == 1
    assert second["viewCount"] == 2
    assert client.get("/api/blog/missing").status_code == 404


def test_draft_not_visible_by_slug(client, auth_headers):
    make_post(client, auth_headers, status="draft")
    assert client.get("/api/blog/scaling-revenue-ops").status_code == 404


def test_categories_and_tags(client, auth_headers):
    make_post(client, auth_headers, title="A", category="Growth", tags=["crm", "ops"])
    make_post(client, auth_headers, title="B", category="Growth", tags=["crm"])
    make_post(client, auth_headers, title="C", category="Strategy", status="draft", tags=["crm"])

    categories = client.get("/api/blog/categories").get_json()["data"]
    assert categories == [{"name": "Growth", "count": 2}]
    tags = client.get("/api/blog/tags").get_json()["data"]
    assert tags[0] == {"name": "crm", "count": 2}


def test_update_is_partial_and_recomputes_read_time(client, auth_headers):
    post = make_post(client, auth_headers, status="draft").get_json()["data"]
    assert post["publishDate"] is None

    resp = client.put(f"/api/blog/{post['id']}", json={"status": "published", "content": "short"},
                      headers=auth_headers)
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["title"] == "Scaling Revenue Ops"
    assert data["readTime"] == 1
    assert data["publishDate"] is not None


def test_update_slug_conflict(client, auth_headers):
    make_post(client, auth_headers, slug="first")
    second = make_post(client, auth_headers, slug="second").get_json()["data"]
    resp = client.put(f"/api/blog/{second['id']}", json={"slug": "first"}, headers=auth_headers)
    assert resp.status_code == 400


def test_delete(client, auth_headers):
    post = make_post(client, auth_headers).get_json()["data"]
    assert client.delete(f"/api/blog/{post['id']}", headers=auth_headers).status_code == 200
    assert storage.get_session().query(Blog).count() == 0
    assert client.delete(f"/api/blog/{post['id']}", headers=auth_headers).status_code == 404
