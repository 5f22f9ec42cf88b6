import io
import os

from models import storage
from models.media import Media


def upload(client, headers, name="logo.png", mimetype="image/png", data=b"\x89PNG fake", **form):
    payload = {"file": (io.BytesIO(data), name, mimetype), **form}
    return client.post("/api/media", data=payload, headers=headers, content_type="multipart/form-data")


def test_upload_stores_file_and_row(app, client, auth_headers, admin):
    resp = upload(client, auth_headers, folder="logos", alt="Logo")
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["url"].startswith("/uploads/images/")
    assert data["url"].endswith(".png")
    assert data["originalName"] == "logo.png"
    assert data["folder"] == "logos"
    assert data["uploadedBy"] == admin.id
    assert "path" not in data

    media = storage.get(Media, data["id"])
    assert os.path.exists(media.path)

    served = client.get(data["url"])
    assert served.status_code == 200
    assert served.data == b"\x89PNG fake"


def test_upload_requires_auth(client):
    assert upload(client, {}).status_code == 401


def test_upload_rejects_missing_and_disallowed_files(client, auth_headers):
    missing = client.post("/api/media", data={}, headers=auth_headers, content_type="multipart/form-data")
    assert missing.status_code == 400
    assert missing.get_json()["message"] == "No file uploaded"

    exe = upload(client, auth_headers, name="run.exe", mimetype="application/x-msdownload")
    assert exe.status_code == 400
    assert storage.get_session().query(Media).count() == 0


def test_upload_rejects_large_files(app, client, auth_headers):
    app.config["MAX_FILE_SIZE"] = 10
    resp = upload(client, auth_headers, data=b"x" * 11)
    assert resp.status_code == 400
    assert resp.get_json()["message"].startswith("File too large")


def test_upload_over_request_limit_gets_upload_error(app, client, auth_headers):
    app.config["MAX_FILE_SIZE"] = 10
    app.config["MAX_CONTENT_LENGTH"] = 1024
    resp = upload(client, auth_headers, data=b"x" * 4096)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"].startswith("File too large. Maximum size is")
    assert storage.get_session().query(Media).count() == 0


def test_list_filters_stats_and_folders(client, auth_headers):
    upload(client, auth_headers, name="a.png", folder="logos")
    upload(client, auth_headers, name="b.jpg", mimetype="image/jpeg", caption="Team photo")

    assert client.get("/api/media", headers=auth_headers).get_json()["pagination"]["total"] == 2
    logos = client.get("/api/media?folder=logos", headers=auth_headers).get_json()["data"]
    assert [m["originalName"] for m in logos] == ["a.png"]
    jpeg = client.get("/api/media?mimeType=jpeg", headers=auth_headers).get_json()["data"]
    assert [m["originalName"] for m in jpeg] == ["b.jpg"]
    search = client.get("/api/media?search=team", headers=auth_headers).get_json()["data"]
    assert [m["originalName"] for m in search] == ["b.jpg"]

    stats = client.get("/api/media/stats", headers=auth_headers).get_json()["data"]
    assert stats["totalFiles"] == 2
    assert {t["mimeType"] for t in stats["byType"]} == {"image/png", "image/jpeg"}

    folders = client.get("/api/media/folders", headers=auth_headers).get_json()["data"]
    assert folders == ["general", "logos"]


def test_update_and_delete_remove_file(client, auth_headers):
    data = upload(client, auth_headers).get_json()["data"]
    path = storage.get(Media, data["id"]).path

    resp = client.put(f"/api/media/{data['id']}", json={"alt": "New alt", "tags": ["brand"]}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["alt"] == "New alt"

    assert client.delete(f"/api/media/{data['id']}", headers=auth_headers).status_code == 200
    assert not os.path.exists(path)
    missing = client.get(f"/api/media/{data['id']}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "Media not found"
