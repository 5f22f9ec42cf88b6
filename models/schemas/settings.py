from marshmallow import fields, validate

from models.schemas.common import CamelCaseSchema


class SettingsInSchema(CamelCaseSchema):
    """All keys optional; JSON groups are merged into the stored values."""
    site_name = fields.String(validate=validate.Length(min=1, max=100))
    site_tagline = fields.String(allow_none=True, validate=validate.Length(max=255))
    site_description = fields.String(allow_none=True)
    contact_info = fields.Dict()
    social_links = fields.Dict()
    hero = fields.Dict()
    footer = fields.Dict()
    business_info = fields.Dict()
    seo = fields.Dict()
    tracking = fields.Dict()
    custom_css = fields.String(allow_none=True)
    custom_js = fields.String(allow_none=True)
    maintenance_mode = fields.Boolean()


class SettingsOutSchema(CamelCaseSchema):
    id = fields.String()
    site_name = fields.String()
    site_tagline = fields.String(allow_none=True)
    site_description = fields.String(allow_none=True)
    contact_info = fields.Dict()
    social_links = fields.Dict()
    hero = fields.Dict()
    footer = fields.Dict()
    business_info = fields.Dict()
    seo = fields.Dict()
    tracking = fields.Dict()
    custom_css = fields.String(allow_none=True)
    custom_js = fields.String(allow_none=True)
    maintenance_mode = fields.Boolean()
    updated_at = fields.DateTime()
