from marshmallow import fields, validate

from models.schemas.common import CamelCaseSchema

STATUSES = ("active", "inactive")


class TeamMemberInSchema(CamelCaseSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    role = fields.String(required=True, validate=validate.Length(min=1, max=100))
    bio = fields.String(allow_none=True, validate=validate.Length(max=1000))
    image = fields.String(allow_none=True)
    linkedin = fields.String(allow_none=True)
    twitter = fields.String(allow_none=True)
    email = fields.Email(allow_none=True)
    order = fields.Integer(load_default=0)
    status = fields.String(load_default="active", validate=validate.OneOf(STATUSES))


class TeamMemberOutSchema(CamelCaseSchema):
    id = fields.String()
    name = fields.String()
    role = fields.String()
    bio = fields.String(allow_none=True)
    image = fields.String(allow_none=True)
    linkedin = fields.String(allow_none=True)
    twitter = fields.String(allow_none=True)
    email = fields.String(allow_none=True)
    order = fields.Integer()
    status = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
