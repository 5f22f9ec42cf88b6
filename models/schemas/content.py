from marshmallow import fields

from models.schemas.common import CamelCaseSchema, SEOSchema


class PageUpdateSchema(CamelCaseSchema):
    sections = fields.Dict(keys=fields.String(), values=fields.Raw(allow_none=True))
    seo = fields.Nested(SEOSchema)


class ContentOutSchema(CamelCaseSchema):
    id = fields.String()
    page = fields.String()
    sections = fields.Dict()
    seo = fields.Dict()
    updated_by = fields.String(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
