import pytest

from models import storage
from models.content import Content
from models.content_defaults import DEFAULT_CONTENT, get_default_structure
from services import content_service
from utils.exceptions import NotFound, InvalidInput


def test_unknown_page_falls_back_to_template(app):
    page = content_service.get_page("Home")
    assert page["page"] == "home"
    assert page["isDefault"] is True
    assert page["sections"] == DEFAULT_CONTENT["home"]
    assert storage.get_session().query(Content).count() == 0


def test_page_without_template_is_empty(app):
    page = content_service.get_page("nowhere")
    assert page["sections"] == {}
    assert page["isDefault"] is True


def test_template_copies_are_independent(app):
    first = get_default_structure("home")
    first["hero"]["title"] = "changed"
    assert get_default_structure("home")["hero"]["title"] != "changed"


def test_put_section_creates_row_with_only_that_section(app):
    stored = content_service.put_section("home", "hero", {"title": "Hi"})
    assert stored == {"title": "Hi"}
    page = content_service.get_page("home")
    assert page["isDefault"] is False
    assert page["sections"] == {"hero": {"title": "Hi"}}


def test_put_section_keeps_other_sections(app):
    content_service.put_section("home", "hero", {"title": "Hi"})
    content_service.put_section("home", "stats", [{"value": "1"}])
    content_service.put_section("home", "hero", {"title": "Hello"})
    sections = content_service.get_page("home")["sections"]
    assert sections == {"hero": {"title": "Hello"}, "stats": [{"value": "1"}]}


def test_put_page_replaces_sections_wholesale(app):
    content_service.put_section("about", "hero", {"title": "Old"})
    content_service.put_page("about", sections={"mission": {"title": "M"}})
    assert content_service.get_page("about")["sections"] == {"mission": {"title": "M"}}


def test_put_page_needs_sections_or_seo(app):
    with pytest.raises(InvalidInput):
        content_service.put_page("about")


def test_get_section_missing(app):
    with pytest.raises(NotFound) as exc:
        content_service.get_section("home", "nope")
    assert exc.value.message == "Section 'nope' not found on page 'home'"


def test_delete_section(app):
    content_service.put_page("home", sections={"a": 1, "b": 2})
    content_service.delete_section("home", "a")
    assert content_service.get_page("home")["sections"] == {"b": 2}

    with pytest.raises(NotFound):
        content_service.delete_section("home", "a")
    with pytest.raises(NotFound):
        content_service.delete_section("contact", "hero")


def test_reset_page_restores_template_and_clears_seo(app):
    content_service.put_page("services", sections={"x": 1}, seo={"metaTitle": "T"})
    page = content_service.reset_page("services")
    assert page["sections"] == DEFAULT_CONTENT["services"]
    assert page["seo"] == {}

    with pytest.raises(InvalidInput):
        content_service.reset_page("nowhere")


def test_initialize_all_skips_existing_pages(app):
    content_service.put_section("home", "hero", {"title": "Mine"})
    created = content_service.initialize_all()
    assert "home" not in created
    assert set(created) == set(DEFAULT_CONTENT) - {"home"}
    assert content_service.get_page("home")["sections"] == {"hero": {"title": "Mine"}}
    assert content_service.initialize_all() == []


def test_describe_structure(app):
    structure = {s["name"]: s for s in content_service.describe_structure("home")}
    assert structure["hero"]["type"] == "object"
    assert "title" in structure["hero"]["fields"]
    assert structure["stats"]["isArray"] is True
    assert structure["stats"]["fields"] == ["value", "label"]


def test_list_pages_marks_stored_pages(app):
    content_service.put_section("home", "hero", {})
    pages = {p["page"]: p for p in content_service.list_pages()}
    assert pages["home"]["exists"] is True
    assert pages["about"]["exists"] is False


# HTTP layer


def test_public_read_and_protected_write(client, auth_headers):
    assert client.get("/api/content/home").get_json()["data"]["isDefault"] is True
    assert client.put("/api/content/home/hero", json={"title": "x"}).status_code == 401

    resp = client.put("/api/content/home/hero", json={"title": "Welcome"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"page": "home", "section": "hero", "content": {"title": "Welcome"}}

    section = client.get("/api/content/HOME/hero").get_json()["data"]
    assert section["content"] == {"title": "Welcome"}


def test_section_body_may_be_any_json(client, auth_headers):
    resp = client.put("/api/content/home/stats", json=[{"value": "1"}], headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["content"] == [{"value": "1"}]


def test_section_body_must_be_json(client, auth_headers):
    resp = client.put("/api/content/home/hero", data="plain", headers=auth_headers)
    assert resp.status_code == 400


def test_put_page_stores_camelcase_seo(client, auth_headers):
    resp = client.put(
        "/api/content/about",
        json={"seo": {"metaTitle": "About us", "metaDescription": "Who we are"}},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    seo = client.get("/api/content/about").get_json()["data"]["seo"]
    assert seo["metaTitle"] == "About us"
    assert "meta_title" not in seo


def test_put_page_rejects_empty_body(client, auth_headers):
    resp = client.put("/api/content/about", json={}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please provide sections or seo data to update"


def test_structure_and_seo_routes_win_over_section_route(client, auth_headers):
    structure = client.get("/api/content/home/structure")
    assert structure.status_code == 200
    assert "sections" in structure.get_json()["data"]

    seo = client.put("/api/content/home/seo", json={"metaTitle": "Home"}, headers=auth_headers)
    assert seo.status_code == 200
    assert client.get("/api/content/home").get_json()["data"]["sections"] == {}


def test_initialize_and_reset_routes(client, auth_headers):
    resp = client.post("/api/content/initialize", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["count"] == len(DEFAULT_CONTENT)

    client.put("/api/content/home/hero", json={"title": "x"}, headers=auth_headers)
    reset = client.post("/api/content/home/reset", headers=auth_headers)
    assert reset.get_json()["data"]["sections"]["hero"] == DEFAULT_CONTENT["home"]["hero"]


def test_delete_missing_section_route(client, auth_headers):
    resp = client.delete("/api/content/home/hero", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Page 'home' not found"
