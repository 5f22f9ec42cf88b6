import re

from marshmallow import fields, pre_load, validate, validates, validates_schema, ValidationError

from models.admin import AdminRole
from models.schemas.common import CamelCaseSchema


def _norm_email(v):
    return v.strip().lower() if isinstance(v, str) else v


_STRONG = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


class _EmailNormalizingSchema(CamelCaseSchema):
    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data = dict(data)
            data["email"] = _norm_email(data["email"])
        return data


class LoginSchema(_EmailNormalizingSchema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)


class RegisterSchema(_EmailNormalizingSchema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=8))
    name = fields.String(required=True, validate=validate.Length(min=2, max=100))
    role = fields.String(load_default=AdminRole.EDITOR.value,
                         validate=validate.OneOf([r.value for r in AdminRole]))


class ForgotPasswordSchema(_EmailNormalizingSchema):
    email = fields.Email(required=True)


class ResetPasswordSchema(CamelCaseSchema):
    token = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=8))
    confirm_password = fields.String(load_only=True)

    @validates("password")
    def validate_strength(self, value, **kwargs):
        if not _STRONG.match(value):
            raise ValidationError(
                "Password must contain at least one uppercase letter, one lowercase letter, and one number."
            )

    @validates_schema
    def validate_confirmation(self, data, **kwargs):
        if "confirm_password" in data and data["confirm_password"] != data.get("password"):
            raise ValidationError("Passwords do not match.", field_name="confirmPassword")


class VerifyResetTokenSchema(CamelCaseSchema):
    token = fields.String(required=True, validate=validate.Length(min=1))


class RefreshTokenSchema(CamelCaseSchema):
    refresh_token = fields.String(required=True, validate=validate.Length(min=1))


class LogoutSchema(CamelCaseSchema):
    refresh_token = fields.String(allow_none=True)


class ChangePasswordSchema(CamelCaseSchema):
    current_password = fields.String(required=True, load_only=True)
    new_password = fields.String(required=True, load_only=True, validate=validate.Length(min=8))


class ProfileUpdateSchema(CamelCaseSchema):
    name = fields.String(validate=validate.Length(min=2, max=100))
    avatar = fields.String(allow_none=True)


class AdminOutSchema(CamelCaseSchema):
    id = fields.String()
    email = fields.String()
    name = fields.String()
    role = fields.Function(lambda obj: obj.role_name)
    avatar = fields.String(allow_none=True)
    is_active = fields.Boolean()
    last_login = fields.DateTime(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
