"""
Refresh-token lifecycle for admin sessions.

Access tokens are stateless JWTs (utils.security). Refresh tokens are opaque
random strings stored in `refresh_tokens`; a token is valid while its row
exists, has not expired and belongs to an active admin. Refreshing is single
use: the presented token is deleted and a new pair issued.
"""
from __future__ import annotations

import logging
from typing import Dict, Tuple

from flask import current_app

from models import storage
from models.admin import Admin
from models.base_model import utcnow
from models.refresh_token import RefreshToken
from utils.exceptions import Unauthenticated
from utils.security import create_access_token, generate_refresh_token, parse_duration

logger = logging.getLogger(__name__)

INVALID_REFRESH = "Invalid or expired refresh token"


def issue_tokens(admin: Admin) -> Dict[str, str]:
    """Mint an access token and persist a new refresh token for `admin`."""
    refresh = RefreshToken(
        token=generate_refresh_token(),
        admin_id=admin.id,
        expires_at=utcnow() + parse_duration(current_app.config["JWT_REFRESH_EXPIRES_IN"]),
    )
    storage.new(refresh)
    storage.save()
    return {
        "accessToken": create_access_token(admin),
        "refreshToken": refresh.token,
        "expiresIn": current_app.config["JWT_EXPIRES_IN"],
    }


def _delete_by_token(raw: str) -> int:
    session = storage.get_session()
    removed = session.query(RefreshToken).filter(RefreshToken.token == raw).delete(synchronize_session=False)
    storage.save()
    return removed


def verify_refresh_token(raw: str) -> Admin:
    """
    Return the owning admin or raise Unauthenticated.
    Expired tokens and tokens of missing/inactive admins are deleted on sight.
    """
    if not raw:
        raise Unauthenticated(INVALID_REFRESH)
    session = storage.get_session()
    row = session.query(RefreshToken).filter(RefreshToken.token == raw).first()
    if row is None:
        raise Unauthenticated(INVALID_REFRESH)

    if row.expires_at <= utcnow():
        _delete_by_token(raw)
        raise Unauthenticated(INVALID_REFRESH)

    admin = session.get(Admin, row.admin_id)
    if admin is None or not admin.is_active:
        _delete_by_token(raw)
        raise Unauthenticated(INVALID_REFRESH)
    return admin


def rotate_refresh_token(raw: str) -> Tuple[Admin, Dict[str, str]]:
    """
    Exchange a refresh token for a new pair.

    The delete is conditional on the row still being there, so when two
    requests race with the same token only the one that removed it gets
    new tokens.
    """
    admin = verify_refresh_token(raw)
    if _delete_by_token(raw) != 1:
        logger.warning("Refresh token for admin %s was already used", admin.id)
        raise Unauthenticated(INVALID_REFRESH)
    return admin, issue_tokens(admin)


def revoke_refresh_token(raw: str) -> None:
    """Idempotent; unknown tokens are ignored."""
    if raw:
        _delete_by_token(raw)


def revoke_all_refresh_tokens(admin_id: str) -> int:
    session = storage.get_session()
    removed = session.query(RefreshToken).filter(RefreshToken.admin_id == admin_id).delete(synchronize_session=False)
    storage.save()
    return removed


def purge_expired_refresh_tokens() -> int:
    session = storage.get_session()
    removed = session.query(RefreshToken).filter(RefreshToken.expires_at <= utcnow()).delete(synchronize_session=False)
    storage.save()
    logger.info("Purged %d expired refresh tokens", removed)
    return removed
