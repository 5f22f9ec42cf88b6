from marshmallow import fields, validate, post_load

from models.enquiry import EnquiryStatus, EnquiryPriority, SERVICES, SOURCES
from models.schemas.common import CamelCaseSchema, normalize_tags


class EnquiryCreateSchema(CamelCaseSchema):
    """Public contact form."""
    name = fields.String(required=True, validate=validate.Length(min=2, max=100))
    email = fields.Email(required=True)
    phone = fields.String(allow_none=True, validate=validate.Length(max=50))
    company = fields.String(allow_none=True, validate=validate.Length(max=100))
    service = fields.String(allow_none=True, validate=validate.OneOf(SERVICES))
    message = fields.String(required=True, validate=validate.Length(min=10, max=2000))
    source = fields.String(load_default="website", validate=validate.OneOf(SOURCES))

    @post_load
    def normalize(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        return data


class EnquiryStatusSchema(CamelCaseSchema):
    status = fields.String(validate=validate.OneOf([s.value for s in EnquiryStatus]))
    priority = fields.String(validate=validate.OneOf([p.value for p in EnquiryPriority]))
    assigned_to = fields.String(allow_none=True)
    estimated_value = fields.Decimal(allow_none=True, places=2, validate=validate.Range(min=0))
    tags = fields.List(fields.String())

    @post_load
    def normalize(self, data, **kwargs):
        if "status" in data:
            data["status"] = EnquiryStatus(data["status"])
        if "priority" in data:
            data["priority"] = EnquiryPriority(data["priority"])
        if "tags" in data:
            data["tags"] = normalize_tags(data["tags"])
        return data


class EnquiryNoteInSchema(CamelCaseSchema):
    content = fields.String(required=True, validate=validate.Length(min=1, max=2000))


class EnquiryNoteOutSchema(CamelCaseSchema):
    id = fields.String()
    content = fields.String()
    created_by = fields.Method("get_author")
    created_at = fields.DateTime()

    def get_author(self, obj):
        author = getattr(obj, "author", None)
        if author is None:
            return None
        return {"id": author.id, "name": author.name}


class EnquiryOutSchema(CamelCaseSchema):
    id = fields.String()
    name = fields.String()
    email = fields.String()
    phone = fields.String(allow_none=True)
    company = fields.String(allow_none=True)
    service = fields.String(allow_none=True)
    message = fields.String()
    source = fields.String()
    status = fields.Function(lambda obj: getattr(obj.status, "value", obj.status))
    priority = fields.Function(lambda obj: getattr(obj.priority, "value", obj.priority))
    assigned_to = fields.String(allow_none=True)
    estimated_value = fields.Decimal(allow_none=True, as_string=True)
    tags = fields.List(fields.String())
    notes = fields.List(fields.Nested(EnquiryNoteOutSchema))
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
