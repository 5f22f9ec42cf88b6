"""
Shared marshmallow building blocks.

Every API schema derives from CamelCaseSchema: attributes are snake_case in
Python, keys are camelCase on the wire, and unknown keys are dropped.
"""
from datetime import datetime, timezone

from marshmallow import Schema, fields, validate, EXCLUDE, ValidationError

SLUG_REGEX = r"^[a-z0-9-]+$"


def camelcase(s: str) -> str:
    head, *tail = s.split("_")
    return head + "".join(part.title() for part in tail)


def to_naive_utc(value):
    """Aware datetimes are converted to UTC and stripped of tzinfo."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def normalize_tags(tags):
    """Trimmed, lowercased, first occurrence kept."""
    seen = []
    for tag in tags or []:
        if isinstance(tag, str) and tag.strip() and tag.strip().lower() not in seen:
            seen.append(tag.strip().lower())
    return seen


def validate_not_blank(value):
    if isinstance(value, str) and not value.strip():
        raise ValidationError("Must not be blank.")


class CamelCaseSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    def on_bind_field(self, field_name, field_obj):
        field_obj.data_key = camelcase(field_obj.data_key or field_name)


class SEOSchema(CamelCaseSchema):
    meta_title = fields.String(allow_none=True, validate=validate.Length(max=70))
    meta_description = fields.String(allow_none=True, validate=validate.Length(max=170))
    keywords = fields.List(fields.String(), allow_none=True)
    og_image = fields.String(allow_none=True)
    canonical_url = fields.String(allow_none=True)


class ReorderItemSchema(CamelCaseSchema):
    id = fields.String(required=True)
    order = fields.Integer(required=True)


class ReorderSchema(CamelCaseSchema):
    orders = fields.List(fields.Nested(ReorderItemSchema), required=True, validate=validate.Length(min=1))
