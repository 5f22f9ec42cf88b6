from marshmallow import fields, validate, post_load

from models.case_study import CaseStudyStatus, INDUSTRIES
from models.schemas.common import CamelCaseSchema, SEOSchema, SLUG_REGEX, to_naive_utc, validate_not_blank


class ResultSchema(CamelCaseSchema):
    metric = fields.String(required=True)
    value = fields.String(required=True)
    description = fields.String(allow_none=True)


class CaseStudyTestimonialSchema(CamelCaseSchema):
    quote = fields.String(allow_none=True)
    author = fields.String(allow_none=True)
    designation = fields.String(allow_none=True)
    avatar = fields.String(allow_none=True)


class CaseStudyInSchema(CamelCaseSchema):
    title = fields.String(required=True, validate=[validate.Length(min=1, max=200), validate_not_blank])
    slug = fields.String(validate=validate.Regexp(SLUG_REGEX, error="Slug may only contain lowercase letters, numbers and hyphens."))
    industry = fields.String(required=True, validate=validate.OneOf(INDUSTRIES))
    client_name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    client_logo = fields.String(allow_none=True)
    featured_image = fields.String(allow_none=True)
    challenge = fields.String(required=True, validate=validate.Length(min=1))
    solution = fields.String(required=True, validate=validate.Length(min=1))
    results = fields.List(fields.Nested(ResultSchema), load_default=list)
    timeline = fields.String(allow_none=True)
    technologies = fields.List(fields.String(), load_default=list)
    testimonial = fields.Nested(CaseStudyTestimonialSchema, allow_none=True)
    featured = fields.Boolean(load_default=False)
    status = fields.String(load_default=CaseStudyStatus.PUBLISHED.value,
                           validate=validate.OneOf([s.value for s in CaseStudyStatus]))
    publish_date = fields.DateTime(allow_none=True)
    seo = fields.Nested(SEOSchema, load_default=dict)

    @post_load
    def normalize(self, data, **kwargs):
        if "publish_date" in data:
            data["publish_date"] = to_naive_utc(data["publish_date"])
        if "status" in data:
            data["status"] = CaseStudyStatus(data["status"])
        return data


class CaseStudyOutSchema(CamelCaseSchema):
    id = fields.String()
    title = fields.String()
    slug = fields.String()
    industry = fields.String()
    client_name = fields.String()
    client_logo = fields.String(allow_none=True)
    featured_image = fields.String(allow_none=True)
    challenge = fields.String()
    solution = fields.String()
    results = fields.List(fields.Dict())
    timeline = fields.String(allow_none=True)
    technologies = fields.List(fields.String())
    testimonial = fields.Dict(allow_none=True)
    featured = fields.Boolean()
    status = fields.Function(lambda obj: getattr(obj.status, "value", obj.status))
    publish_date = fields.DateTime(allow_none=True)
    seo = fields.Dict()
    view_count = fields.Integer()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
