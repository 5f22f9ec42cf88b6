from datetime import timedelta

import jwt

from models import storage
from models.admin import Admin
from models.base_model import utcnow
from models.refresh_token import RefreshToken
from utils.security import hash_reset_token

from conftest import PASSWORD, bearer


def login(client, email="admin@example.com", password=PASSWORD):
    return client.post("/api/admin/login", json={"email": email, "password": password})


def test_login_returns_token_pair(client, admin):
    resp = login(client, email="  ADMIN@example.com ")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["admin"]["email"] == "admin@example.com"
    assert body["data"]["admin"]["role"] == "admin"
    assert "passwordHash" not in body["data"]["admin"]
    assert body["data"]["accessToken"]
    assert body["data"]["refreshToken"]
    assert body["data"]["expiresIn"] == "7d"


def test_login_rejects_bad_password_and_unknown_email(client, admin):
    wrong = login(client, password="nope-nope")
    unknown = login(client, email="ghost@example.com")
    assert wrong.status_code == 401
    assert unknown.status_code == 401
    # same message for both so emails cannot be probed
    assert wrong.get_json()["message"] == unknown.get_json()["message"] == "Invalid credentials"


def test_login_validation_error_lists_fields(client):
    resp = client.post("/api/admin/login", json={"email": "not-an-email"})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["message"] == "Validation Error"
    fields = {e["field"] for e in body["errors"]}
    assert {"email", "password"} <= fields


def test_login_deactivated_account(client, admin):
    admin.is_active = False
    storage.save()
    resp = login(client)
    assert resp.status_code == 401
    assert "deactivated" in resp.get_json()["message"]


def test_init_creates_first_admin_once(client, app):
    first = client.post("/api/admin/init")
    assert first.status_code == 201
    assert first.get_json()["data"]["email"] == app.config["ADMIN_EMAIL"]

    second = client.post("/api/admin/init")
    assert second.status_code == 400
    assert second.get_json()["message"] == "Admin already exists"


def test_me_requires_token(client):
    resp = client.get("/api/admin/me")
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Access denied. No token provided."


def test_me_rejects_garbage_token(client, admin):
    resp = client.get("/api/admin/me", headers={"Authorization": "Bearer not.a.jwt"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid token."


def test_me_rejects_token_of_deleted_admin(client, admin):
    headers = bearer(admin)
    storage.delete(admin)
    storage.save()
    resp = client.get("/api/admin/me", headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid token. Admin not found."


def test_expired_access_token(client, app, admin):
    token = jwt.encode(
        {"sub": admin.id, "role": "admin", "type": "access", "exp": utcnow() - timedelta(minutes=1)},
        app.config["JWT_SECRET"],
        algorithm=app.config["JWT_ALGORITHM"],
    )
    headers = {"Authorization": f"Bearer {token}"}
    resp = client.get("/api/admin/me", headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Token expired. Please login again."


def test_update_profile(client, auth_headers):
    resp = client.put("/api/admin/me", json={"name": "New Name", "avatar": "/a.png"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "New Name"
    assert resp.get_json()["data"]["avatar"] == "/a.png"


def test_refresh_token_is_single_use(client, admin):
    tokens = login(client).get_json()["data"]

    first = client.post("/api/admin/refresh-token", json={"refreshToken": tokens["refreshToken"]})
    assert first.status_code == 200
    new_tokens = first.get_json()["data"]
    assert new_tokens["refreshToken"] != tokens["refreshToken"]

    replay = client.post("/api/admin/refresh-token", json={"refreshToken": tokens["refreshToken"]})
    assert replay.status_code == 401
    assert replay.get_json()["message"] == "Invalid or expired refresh token"


def test_refresh_token_missing(client):
    resp = client.post("/api/admin/refresh-token", json={})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Refresh token is required"


def test_logout_revokes_refresh_token(client, admin):
    tokens = login(client).get_json()["data"]
    headers = {"Authorization": f"Bearer {tokens['accessToken']}"}

    resp = client.post("/api/admin/logout", json={"refreshToken": tokens["refreshToken"]}, headers=headers)
    assert resp.status_code == 200
    assert storage.get_session().query(RefreshToken).count() == 0

    again = client.post("/api/admin/refresh-token", json={"refreshToken": tokens["refreshToken"]})
    assert again.status_code == 401


def test_change_password_signs_out_everywhere(client, admin, auth_headers):
    login(client)
    login(client)
    assert storage.get_session().query(RefreshToken).count() == 2

    bad = client.put("/api/admin/password",
                     json={"currentPassword": "wrong", "newPassword": "Another123!"}, headers=auth_headers)
    assert bad.status_code == 400

    ok = client.put("/api/admin/password",
                    json={"currentPassword": PASSWORD, "newPassword": "Another123!"}, headers=auth_headers)
    assert ok.status_code == 200
    assert storage.get_session().query(RefreshToken).count() == 0
    assert login(client, password="Another123!").status_code == 200


def test_forgot_password_same_answer_for_unknown_email(client, admin, outbox):
    known = client.post("/api/admin/forgot-password", json={"email": "admin@example.com"})
    unknown = client.post("/api/admin/forgot-password", json={"email": "ghost@example.com"})
    assert known.status_code == unknown.status_code == 200
    assert known.get_json()["message"] == unknown.get_json()["message"]
    assert len(outbox) == 1
    to, subject, html = outbox[0]
    assert to == "admin@example.com"
    assert "?token=" in html

    stored = storage.get_session().get(Admin, admin.id)
    assert stored.reset_password_token and len(stored.reset_password_token) == 64


def _set_reset_token(admin, raw, expires_in=timedelta(hours=1)):
    admin.reset_password_token = hash_reset_token(raw)
    admin.reset_password_expire = utcnow() + expires_in
    storage.save()


def test_reset_password_flow(client, admin):
    _set_reset_token(admin, "abc123")
    login(client)

    assert client.post("/api/admin/verify-reset-token", json={"token": "abc123"}).status_code == 200

    resp = client.post("/api/admin/reset-password",
                       json={"token": "abc123", "password": "Newpass123!", "confirmPassword": "Newpass123!"})
    assert resp.status_code == 200
    assert storage.get_session().query(RefreshToken).count() == 0
    assert login(client, password="Newpass123!").status_code == 200

    # token is consumed
    reuse = client.post("/api/admin/verify-reset-token", json={"token": "abc123"})
    assert reuse.status_code == 400
    assert reuse.get_json()["message"] == "Invalid or expired reset token"


def test_reset_password_rejects_expired_token(client, admin):
    _set_reset_token(admin, "old", expires_in=timedelta(minutes=-1))
    resp = client.post("/api/admin/reset-password",
                       json={"token": "old", "password": "Newpass123!", "confirmPassword": "Newpass123!"})
    assert resp.status_code == 400


def test_reset_password_confirmation_mismatch(client, admin):
    _set_reset_token(admin, "abc")
    resp = client.post("/api/admin/reset-password",
                       json={"token": "abc", "password": "Newpass123!", "confirmPassword": "Different123!"})
    assert resp.status_code == 400
    assert any(e["field"] == "confirmPassword" for e in resp.get_json()["errors"])


def test_register_requires_admin_role(client, editor_headers):
    resp = client.post("/api/admin/register",
                       json={"email": "new@example.com", "password": "Password123!", "name": "New"},
                       headers=editor_headers)
    assert resp.status_code == 403
    assert resp.get_json()["message"] == "Access denied. Insufficient permissions."


def test_register_creates_editor(client, auth_headers):
    resp = client.post("/api/admin/register",
                       json={"email": "new@example.com", "password": "Password123!", "name": "New"},
                       headers=auth_headers)
    assert resp.status_code == 201
    assert resp.get_json()["data"]["role"] == "editor"

    dup = client.post("/api/admin/register",
                      json={"email": "NEW@example.com", "password": "Password123!", "name": "New"},
                      headers=auth_headers)
    assert dup.status_code == 400
    assert dup.get_json()["message"] == "Email already registered"
