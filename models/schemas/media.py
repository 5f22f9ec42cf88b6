from marshmallow import fields, validate

from models.schemas.common import CamelCaseSchema


class MediaUpdateSchema(CamelCaseSchema):
    alt = fields.String(allow_none=True, validate=validate.Length(max=255))
    caption = fields.String(allow_none=True, validate=validate.Length(max=500))
    folder = fields.String(validate=validate.Length(min=1, max=100))
    tags = fields.List(fields.String())
    is_public = fields.Boolean()


class MediaOutSchema(CamelCaseSchema):
    # `path` is deliberately absent
    id = fields.String()
    filename = fields.String()
    original_name = fields.String()
    url = fields.String()
    mime_type = fields.String()
    size = fields.Integer()
    width = fields.Integer(allow_none=True)
    height = fields.Integer(allow_none=True)
    alt = fields.String(allow_none=True)
    caption = fields.String(allow_none=True)
    uploaded_by = fields.String(allow_none=True)
    folder = fields.String()
    tags = fields.List(fields.String())
    is_public = fields.Boolean()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
