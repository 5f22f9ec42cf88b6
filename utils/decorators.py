from __future__ import annotations
from functools import wraps
from flask import request, g, abort
from utils.security import decode_access_token, TokenExpired, TokenInvalid
from models import storage
from models.admin import Admin


def _bearer_token():
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return None
    return auth.split(" ", 1)[1].strip() or None


def _authenticate():
    """Resolve the bearer token to an active Admin or abort with 401."""
    token = _bearer_token()
    if not token:
        abort(401, description="Access denied. No token provided.")
    try:
        decoded = decode_access_token(token)
    except TokenExpired:
        abort(401, description="Token expired. Please login again.")
    except TokenInvalid:
        abort(401, description="Invalid token.")

    admin = storage.get_session().get(Admin, decoded["sub"])
    if not admin:
        abort(401, description="Invalid token. Admin not found.")
    if not admin.is_active:
        abort(401, description="Account is deactivated.")
    return admin


def jwt_required():
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            g.current_admin = _authenticate()
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def jwt_optional():
    """Attach the admin when the token is good; anything else means anonymous."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            g.current_admin = None
            token = _bearer_token()
            if token:
                try:
                    decoded = decode_access_token(token)
                except (TokenExpired, TokenInvalid):
                    decoded = None
                if decoded:
                    admin = storage.get_session().get(Admin, decoded["sub"])
                    if admin and admin.is_active:
                        g.current_admin = admin
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def roles_required(required_roles: list[str]):
    """
    Allow access if the admin's role is one of required_roles.
    Runs authentication first, so a missing token is still a 401.
    """
    req = set(required_roles or [])

    def decorator(fn):
        @wraps(fn)
        @jwt_required()
        def wrapper(*args, **kwargs):
            admin = getattr(g, "current_admin", None)
            if admin is None:
                abort(401, description="Access denied. Not authenticated.")
            if admin.role_name not in req:
                abort(403, description="Access denied. Insufficient permissions.")
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def current_admin_id():
    admin = getattr(g, "current_admin", None)
    return admin.id if admin else None
