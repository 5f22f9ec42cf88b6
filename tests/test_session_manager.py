from datetime import timedelta

import pytest

from models import storage
from models.base_model import utcnow
from models.refresh_token import RefreshToken
from services import session_manager
from utils.exceptions import Unauthenticated
from utils.security import decode_access_token


def _tokens(admin):
    return storage.get_session().query(RefreshToken).filter(RefreshToken.admin_id == admin.id).all()


def test_issue_tokens_persists_refresh_token(admin):
    tokens = session_manager.issue_tokens(admin)
    assert decode_access_token(tokens["accessToken"])["sub"] == admin.id
    rows = _tokens(admin)
    assert len(rows) == 1
    assert rows[0].token == tokens["refreshToken"]
    assert len(tokens["refreshToken"]) == 80
    assert rows[0].expires_at > utcnow() + timedelta(days=29)


def test_rotate_replaces_token(admin):
    old = session_manager.issue_tokens(admin)["refreshToken"]
    owner, tokens = session_manager.rotate_refresh_token(old)
    assert owner.id == admin.id
    assert [r.token for r in _tokens(admin)] == [tokens["refreshToken"]]

    with pytest.raises(Unauthenticated):
        session_manager.rotate_refresh_token(old)


def test_rotate_loses_race_when_token_vanishes(admin, monkeypatch):
    raw = session_manager.issue_tokens(admin)["refreshToken"]
    verify = session_manager.verify_refresh_token

    def verify_then_consume(token):
        owner = verify(token)
        # a concurrent request rotates the same token first
        session_manager.revoke_refresh_token(token)
        return owner

    monkeypatch.setattr(session_manager, "verify_refresh_token", verify_then_consume)
    with pytest.raises(Unauthenticated):
        session_manager.rotate_refresh_token(raw)
    assert _tokens(admin) == []


def test_expired_token_is_rejected_and_deleted(admin):
    raw = session_manager.issue_tokens(admin)["refreshToken"]
    row = _tokens(admin)[0]
    row.expires_at = utcnow() - timedelta(seconds=1)
    storage.save()

    with pytest.raises(Unauthenticated):
        session_manager.verify_refresh_token(raw)
    assert _tokens(admin) == []


def test_token_of_inactive_admin_is_rejected(admin):
    raw = session_manager.issue_tokens(admin)["refreshToken"]
    admin.is_active = False
    storage.save()
    with pytest.raises(Unauthenticated):
        session_manager.verify_refresh_token(raw)


def test_revoke_is_idempotent(admin):
    raw = session_manager.issue_tokens(admin)["refreshToken"]
    session_manager.revoke_refresh_token(raw)
    session_manager.revoke_refresh_token(raw)
    session_manager.revoke_refresh_token(None)
    assert _tokens(admin) == []


def test_revoke_all_only_touches_one_admin(admin, editor):
    session_manager.issue_tokens(admin)
    session_manager.issue_tokens(admin)
    session_manager.issue_tokens(editor)
    assert session_manager.revoke_all_refresh_tokens(admin.id) == 2
    assert len(_tokens(editor)) == 1


def test_purge_expired(admin):
    session_manager.issue_tokens(admin)
    session_manager.issue_tokens(admin)
    rows = _tokens(admin)
    rows[0].expires_at = utcnow() - timedelta(days=1)
    storage.save()
    assert session_manager.purge_expired_refresh_tokens() == 1
    assert len(_tokens(admin)) == 1
