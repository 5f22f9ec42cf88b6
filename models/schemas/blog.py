from marshmallow import fields, validate, post_load

from models.blog import BlogStatus, BLOG_CATEGORIES
from models.schemas.common import (
    CamelCaseSchema,
    SEOSchema,
    SLUG_REGEX,
    normalize_tags,
    to_naive_utc,
    validate_not_blank,
)


class BlogInSchema(CamelCaseSchema):
    """Create payload; updates load the same schema with partial=True."""
    title = fields.String(required=True, validate=[validate.Length(min=1, max=200), validate_not_blank])
    slug = fields.String(validate=validate.Regexp(SLUG_REGEX, error="Slug may only contain lowercase letters, numbers and hyphens."))
    featured_image = fields.String(allow_none=True)
    excerpt = fields.String(allow_none=True, validate=validate.Length(max=300))
    content = fields.String(required=True, validate=validate.Length(min=1))
    category = fields.String(load_default="General", validate=validate.OneOf(BLOG_CATEGORIES))
    tags = fields.List(fields.String(), load_default=list)
    status = fields.String(load_default=BlogStatus.DRAFT.value, validate=validate.OneOf([s.value for s in BlogStatus]))
    publish_date = fields.DateTime(allow_none=True)
    featured = fields.Boolean(load_default=False)
    seo = fields.Nested(SEOSchema, load_default=dict)

    @post_load
    def normalize(self, data, **kwargs):
        if "tags" in data:
            data["tags"] = normalize_tags(data["tags"])
        if "publish_date" in data:
            data["publish_date"] = to_naive_utc(data["publish_date"])
        if "status" in data:
            data["status"] = BlogStatus(data["status"])
        return data


class BlogOutSchema(CamelCaseSchema):
    id = fields.String()
    title = fields.String()
    slug = fields.String()
    featured_image = fields.String(allow_none=True)
    excerpt = fields.String(allow_none=True)
    content = fields.String()
    category = fields.String()
    tags = fields.List(fields.String())
    status = fields.Function(lambda obj: getattr(obj.status, "value", obj.status))
    publish_date = fields.DateTime(allow_none=True)
    read_time = fields.Integer()
    featured = fields.Boolean()
    seo = fields.Dict()
    view_count = fields.Integer()
    author = fields.Method("get_author")
    created_at = fields.DateTime()
    updated_at = fields.DateTime()

    def get_author(self, obj):
        author = getattr(obj, "author", None)
        if author is None:
            return None
        return {"id": author.id, "name": author.name, "avatar": author.avatar}


class BlogSummarySchema(BlogOutSchema):
    """List rows omit the article body."""
    class Meta:
        exclude = ("content",)
