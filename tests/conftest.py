import os

# must be set before `models` is imported: the storage engine is built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"

import pytest

from api import create_app
from api.commands import create_admin
from models import storage
from models.admin import AdminRole
from services import mailer
from utils.security import create_access_token

PASSWORD = "Password123!"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config.update(UPLOAD_DIR=str(tmp_path / "uploads"))
    mailer.reset_mailer()
    with app.app_context():
        storage.drop_all()
        storage.reload()
        yield app
        storage.close()
    mailer.reset_mailer()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def outbox(monkeypatch):
    """Messages handed to the mailer, as (to, subject, html)."""
    sent = []

    def fake_send(self, to, subject, html, text=None):
        sent.append((to, subject, html))
        return True

    monkeypatch.setattr(mailer.Mailer, "send", fake_send)
    return sent


@pytest.fixture
def make_admin(app):
    def _make(email="admin@example.com", password=PASSWORD, name="Admin User", role=AdminRole.ADMIN):
        return create_admin(email, password, name, role=role)
    return _make


@pytest.fixture
def admin(make_admin):
    return make_admin()


@pytest.fixture
def editor(make_admin):
    return make_admin(email="editor@example.com", name="Editor User", role=AdminRole.EDITOR)


def bearer(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def auth_headers(admin):
    return bearer(admin)


@pytest.fixture
def editor_headers(editor):
    return bearer(editor)
