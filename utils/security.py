"""
security helpers:
- Argon2 password hashing via argon2-cffi
- access-token JWT creation/verification via PyJWT
- duration strings ("7d", "12h", "30m", raw milliseconds)
- opaque refresh tokens and password-reset tokens
"""
from __future__ import annotations

import hashlib
import re
import secrets
from datetime import timedelta
from typing import Dict, Any, Union

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, VerificationError, InvalidHashError

from flask import current_app

from models.base_model import utcnow

ph = PasswordHasher()

_DURATION = re.compile(r"^\s*(\d+)\s*([dhm]?)\s*$")


class TokenExpired(Exception):
    pass


class TokenInvalid(Exception):
    pass


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password using argon2
    """
    try:
        return ph.verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def parse_duration(value: Union[str, int, None]) -> timedelta:
    """
    "7d" -> 7 days, "12h" -> 12 hours, "30m" -> 30 minutes.
    A bare number is taken as milliseconds.
    """
    if isinstance(value, int):
        return timedelta(milliseconds=value)
    match = _DURATION.match(value or "")
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = int(match.group(1)), match.group(2)
    if unit == "d":
        return timedelta(days=amount)
    if unit == "h":
        return timedelta(hours=amount)
    if unit == "m":
        return timedelta(minutes=amount)
    return timedelta(milliseconds=amount)


def create_access_token(admin) -> str:
    """Signed access token carrying the admin id and role."""
    now = utcnow()
    exp = now + parse_duration(current_app.config["JWT_EXPIRES_IN"])
    payload = {
        "sub": str(admin.id),
        "role": admin.role_name,
        "type": "access",
        # PyJWT converts naive datetimes with utctimetuple(), i.e. as UTC
        "iat": now,
        "exp": exp,
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=current_app.config["JWT_ALGORITHM"])


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token.
    Raises TokenExpired or TokenInvalid.
    """
    try:
        decoded = jwt.decode(
            token, current_app.config["JWT_SECRET"], algorithms=[current_app.config["JWT_ALGORITHM"]]
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpired("Token expired")
    except jwt.InvalidTokenError as exc:
        raise TokenInvalid(f"Invalid token: {exc}")

    if decoded.get("type") != "access" or not decoded.get("sub"):
        raise TokenInvalid("Wrong token type")
    return decoded


def generate_refresh_token() -> str:
    """80 hex chars (40 random bytes)."""
    return secrets.token_hex(40)


def generate_reset_token() -> str:
    return secrets.token_hex(32)


def hash_reset_token(token: str) -> str:
    """Only the SHA-256 digest of a reset token is stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
