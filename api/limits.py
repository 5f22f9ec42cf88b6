"""
Rate limiting with Flask-Limiter.

Storage comes from RATELIMIT_STORAGE_URI: memory:// for a single process,
redis://host:port/db when several instances share counters.
"""
from flask import request, current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def _body_email() -> str:
    data = request.get_json(silent=True)
    if isinstance(data, dict) and isinstance(data.get("email"), str):
        return data["email"].strip().lower()
    return ""


def ip_and_agent_key() -> str:
    return f"{get_remote_address()}:{request.headers.get('User-Agent', '')}"


def contact_key() -> str:
    return f"contact:{get_remote_address()}:{_body_email()}"


def login_key() -> str:
    return f"login:{get_remote_address()}:{_body_email()}"


def reset_key() -> str:
    return f"reset:{get_remote_address()}:{_body_email()}"


def contact_limit() -> str:
    return current_app.config["CONTACT_RATE_LIMIT"]


def login_limit() -> str:
    return current_app.config["LOGIN_RATE_LIMIT"]


def reset_limit() -> str:
    return current_app.config["PASSWORD_RESET_RATE_LIMIT"]


def upload_limit() -> str:
    return current_app.config["UPLOAD_RATE_LIMIT"]


def failed_only(response) -> bool:
    """Successful logins do not use up the allowance."""
    return response.status_code != 200


limiter = Limiter(key_func=ip_and_agent_key)
