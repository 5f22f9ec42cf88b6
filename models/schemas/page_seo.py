from marshmallow import fields, validate

from models.schemas.common import CamelCaseSchema


class PageSEOMetaSchema(CamelCaseSchema):
    meta_title = fields.String(required=True, validate=validate.Length(min=1, max=60))
    meta_description = fields.String(required=True, validate=validate.Length(min=1, max=160))
    keywords = fields.List(fields.String(), load_default=list)
    og_image = fields.String(allow_none=True)
    og_title = fields.String(allow_none=True)
    og_description = fields.String(allow_none=True)
    canonical_url = fields.String(allow_none=True)
    no_index = fields.Boolean(load_default=False)


class CustomFieldSchema(CamelCaseSchema):
    key = fields.String(required=True, validate=validate.Length(min=1))
    value = fields.String(allow_none=True)


class PageSEOInSchema(CamelCaseSchema):
    page_title = fields.String(allow_none=True, validate=validate.Length(max=200))
    seo = fields.Nested(PageSEOMetaSchema, required=True)
    custom_fields = fields.List(fields.Nested(CustomFieldSchema), load_default=list)
    is_active = fields.Boolean(load_default=True)


class PageSEOOutSchema(CamelCaseSchema):
    id = fields.String()
    page = fields.String()
    page_title = fields.String(allow_none=True)
    seo = fields.Dict()
    custom_fields = fields.List(fields.Dict())
    is_active = fields.Boolean()
    updated_at = fields.DateTime()
