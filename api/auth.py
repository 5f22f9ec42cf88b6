"""
Admin authentication blueprint (mounted at /api/admin):
- POST /login, /init, /forgot-password, /reset-password, /verify-reset-token, /refresh-token
- GET/PUT /me, PUT /password, POST /register (admin role), POST /logout

Access tokens are JWTs (utils.security); refresh tokens are opaque and
stored, see services.session_manager.
"""
from __future__ import annotations

import logging
from datetime import timedelta

from flask import Blueprint, request, g, abort, current_app

from models import storage
from models.admin import Admin, AdminRole
from models.base_model import utcnow
from models.schemas.admin import (
    LoginSchema,
    RegisterSchema,
    ForgotPasswordSchema,
    ResetPasswordSchema,
    VerifyResetTokenSchema,
    RefreshTokenSchema,
    LogoutSchema,
    ChangePasswordSchema,
    ProfileUpdateSchema,
    AdminOutSchema,
)
from services import session_manager
from services.mailer import send_password_reset_email
from utils.decorators import jwt_required, roles_required
from utils.exceptions import InvalidInput, Unauthenticated
from utils.responses import success
from utils.security import hash_password, verify_password, generate_reset_token, hash_reset_token

from .commands import create_admin
from .limits import limiter, login_key, login_limit, reset_key, reset_limit, failed_only

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
register_schema = RegisterSchema()
forgot_password_schema = ForgotPasswordSchema()
reset_password_schema = ResetPasswordSchema()
verify_reset_token_schema = VerifyResetTokenSchema()
refresh_token_schema = RefreshTokenSchema()
logout_schema = LogoutSchema()
change_password_schema = ChangePasswordSchema()
profile_update_schema = ProfileUpdateSchema()
admin_out_schema = AdminOutSchema()

FORGOT_MESSAGE = "If that email exists in our system, a password reset link has been sent."
INVALID_RESET = "Invalid or expired reset token"


def _find_by_email(email: str):
    return storage.get_session().query(Admin).filter(Admin.email == email).first()


def _find_by_reset_token(token: str):
    return (
        storage.get_session()
        .query(Admin)
        .filter(Admin.reset_password_token == hash_reset_token(token))
        .filter(Admin.reset_password_expire > utcnow())
        .first()
    )


@bp.post("/login")
@limiter.limit(login_limit, key_func=login_key, deduct_when=failed_only,
               error_message="Too many login attempts. Please try again after 15 minutes.")
def login():
    """
    Admin login
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [email, password]
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: "{admin, accessToken, refreshToken, expiresIn}"
      401:
        description: Invalid credentials or deactivated account
      429:
        description: Too many failed attempts
    """
    data = login_schema.load(request.get_json(silent=True) or {})
    admin = _find_by_email(data["email"])
    if admin is None:
        logger.info("Login failed for unknown email")
        raise Unauthenticated("Invalid credentials")
    if not admin.is_active:
        raise Unauthenticated("Account is deactivated. Please contact support.")
    if not verify_password(data["password"], admin.password_hash):
        logger.info("Login failed for admin %s", admin.id)
        raise Unauthenticated("Invalid credentials")

    tokens = session_manager.issue_tokens(admin)
    admin.last_login = utcnow()
    storage.save()
    return success({"admin": admin_out_schema.dump(admin), **tokens}, "Login successful")


@bp.post("/init")
def init_admin():
    """
    Create the first admin from ADMIN_EMAIL / ADMIN_PASSWORD
    ---
    tags:
      - Auth
    responses:
      201:
        description: Admin created
      400:
        description: Admin already exists
    """
    session = storage.get_session()
    if session.query(Admin).filter(Admin.role == AdminRole.ADMIN).first():
        raise InvalidInput("Admin already exists")
    cfg = current_app.config
    admin = create_admin(cfg["ADMIN_EMAIL"], cfg["ADMIN_PASSWORD"], cfg["ADMIN_NAME"])
    if admin is None:
        raise InvalidInput("Admin already exists")
    return success({"email": admin.email, "name": admin.name}, "Admin created successfully", 201)


@bp.post("/forgot-password")
@limiter.limit(reset_limit, key_func=reset_key,
               error_message="Too many password reset requests. Please try again later.")
def forgot_password():
    """
    Request a password reset email
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            email: { type: string }
    responses:
      200:
        description: Always the same message, whether or not the account exists
    """
    data = forgot_password_schema.load(request.get_json(silent=True) or {})
    admin = _find_by_email(data["email"])
    if admin is None:
        return success(message=FORGOT_MESSAGE)

    token = generate_reset_token()
    admin.reset_password_token = hash_reset_token(token)
    admin.reset_password_expire = utcnow() + timedelta(milliseconds=current_app.config["RESET_TOKEN_EXPIRES"])
    storage.save()

    reset_url = f"{current_app.config['RESET_PASSWORD_URL']}?token={token}"
    if not send_password_reset_email(admin.email, reset_url):
        logger.warning("Password reset email for admin %s was not delivered", admin.id)
    logger.info("Password reset requested for admin %s", admin.id)
    return success(message=FORGOT_MESSAGE)


@bp.post("/reset-password")
@limiter.limit(reset_limit, key_func=reset_key,
               error_message="Too many password reset requests. Please try again later.")
def reset_password():
    """
    Set a new password with a reset token
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            token: { type: string }
            password: { type: string, minLength: 8 }
            confirmPassword: { type: string }
    responses:
      200:
        description: Password changed; every session is revoked
      400:
        description: Invalid or expired reset token
    """
    data = reset_password_schema.load(request.get_json(silent=True) or {})
    admin = _find_by_reset_token(data["token"])
    if admin is None:
        raise InvalidInput(INVALID_RESET)

    admin.password_hash = hash_password(data["password"])
    admin.reset_password_token = None
    admin.reset_password_expire = None
    admin.is_active = True
    storage.save()
    session_manager.revoke_all_refresh_tokens(admin.id)
    return success(message="Password reset successfully. Please login with your new password.")


@bp.post("/verify-reset-token")
def verify_reset_token():
    """
    Check a reset token without using it
    ---
    tags:
      - Auth
    responses:
      200:
        description: Token is valid
      400:
        description: Invalid or expired reset token
    """
    data = verify_reset_token_schema.load(request.get_json(silent=True) or {})
    if _find_by_reset_token(data["token"]) is None:
        raise InvalidInput(INVALID_RESET)
    return success(message="Token is valid")


@bp.post("/refresh-token")
def refresh_token():
    """
    Exchange a refresh token for a new token pair (single use)
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            refreshToken: { type: string }
    responses:
      200:
        description: "{accessToken, refreshToken, expiresIn}"
      400:
        description: Refresh token is required
      401:
        description: Invalid or expired refresh token
    """
    payload = request.get_json(silent=True) or {}
    if not payload.get("refreshToken"):
        raise InvalidInput("Refresh token is required")
    data = refresh_token_schema.load(payload)
    _, tokens = session_manager.rotate_refresh_token(data["refresh_token"])
    return success(tokens, "Token refreshed")


@bp.get("/me")
@jwt_required()
def get_profile():
    """
    Current admin profile
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: Admin
      401:
        description: Not authenticated
    """
    return success(admin_out_schema.dump(g.current_admin))


@bp.put("/me")
@jwt_required()
def update_profile():
    """
    Update name / avatar
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            name: { type: string }
            avatar: { type: string }
    responses:
      200:
        description: Profile updated
    """
    data = profile_update_schema.load(request.get_json(silent=True) or {})
    admin = g.current_admin
    if data.get("name"):
        admin.name = data["name"]
    if "avatar" in data:
        admin.avatar = data["avatar"]
    admin.save()
    return success(admin_out_schema.dump(admin), "Profile updated")


@bp.put("/password")
@jwt_required()
def change_password():
    """
    Change password; signs out every session
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            currentPassword: { type: string }
            newPassword: { type: string, minLength: 8 }
    responses:
      200:
        description: Password changed
      400:
        description: Current password is incorrect
    """
    data = change_password_schema.load(request.get_json(silent=True) or {})
    admin = g.current_admin
    if not verify_password(data["current_password"], admin.password_hash):
        raise InvalidInput("Current password is incorrect")
    admin.password_hash = hash_password(data["new_password"])
    admin.save()
    session_manager.revoke_all_refresh_tokens(admin.id)
    return success(message="Password changed successfully. Please login again.")


@bp.post("/register")
@roles_required(["admin"])
def register():
    """
    Create another admin or editor account
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string, minLength: 8 }
            name: { type: string }
            role: { type: string, enum: [admin, editor] }
    responses:
      201:
        description: Admin created
      400:
        description: Email already registered
      403:
        description: Insufficient permissions
    """
    data = register_schema.load(request.get_json(silent=True) or {})
    if _find_by_email(data["email"]):
        raise InvalidInput("Email already registered")
    # only admins may create admins
    role = AdminRole(data["role"]) if g.current_admin.role_name == AdminRole.ADMIN.value else AdminRole.EDITOR
    admin = create_admin(data["email"], data["password"], data["name"], role=role)
    if admin is None:
        abort(400, description="Email already registered")
    return success(admin_out_schema.dump(admin), "Admin created successfully", 201)


@bp.post("/logout")
@jwt_required()
def logout():
    """
    Revoke the given refresh token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            refreshToken: { type: string }
    responses:
      200:
        description: Logged out
    """
    data = logout_schema.load(request.get_json(silent=True) or {})
    session_manager.revoke_refresh_token(data.get("refresh_token"))
    return success(message="Logged out successfully")
