from marshmallow import fields, validate

from models.schemas.common import CamelCaseSchema

STATUSES = ("active", "inactive")


class ClientInSchema(CamelCaseSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    logo = fields.String(required=True, validate=validate.Length(min=1))
    logo_dark = fields.String(allow_none=True)
    website = fields.Url(allow_none=True)
    industry = fields.String(allow_none=True)
    featured = fields.Boolean(load_default=False)
    status = fields.String(load_default="active", validate=validate.OneOf(STATUSES))
    order = fields.Integer(load_default=0)


class ClientOutSchema(CamelCaseSchema):
    id = fields.String()
    name = fields.String()
    logo = fields.String()
    logo_dark = fields.String(allow_none=True)
    website = fields.String(allow_none=True)
    industry = fields.String(allow_none=True)
    featured = fields.Boolean()
    status = fields.String()
    order = fields.Integer()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
