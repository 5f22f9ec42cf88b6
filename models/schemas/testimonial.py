from marshmallow import fields, validate

from models.schemas.common import CamelCaseSchema

STATUSES = ("active", "inactive")


class TestimonialInSchema(CamelCaseSchema):
    quote = fields.String(required=True, validate=validate.Length(min=1, max=1000))
    author = fields.String(required=True, validate=validate.Length(min=1, max=100))
    designation = fields.String(allow_none=True, validate=validate.Length(max=100))
    company = fields.String(allow_none=True, validate=validate.Length(max=100))
    avatar = fields.String(allow_none=True)
    rating = fields.Integer(load_default=5, validate=validate.Range(min=1, max=5))
    featured = fields.Boolean(load_default=False)
    status = fields.String(load_default="active", validate=validate.OneOf(STATUSES))
    order = fields.Integer(load_default=0)


class TestimonialOutSchema(CamelCaseSchema):
    id = fields.String()
    quote = fields.String()
    author = fields.String()
    designation = fields.String(allow_none=True)
    company = fields.String(allow_none=True)
    avatar = fields.String(allow_none=True)
    rating = fields.Integer()
    featured = fields.Boolean()
    status = fields.String()
    order = fields.Integer()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
