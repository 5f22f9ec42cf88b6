from flask import Blueprint, request

from models import storage
from models.testimonial import Testimonial
from models.schemas.common import ReorderSchema
from models.schemas.testimonial import TestimonialInSchema, TestimonialOutSchema
from utils.decorators import roles_required
from utils.exceptions import NotFound
from utils.ordering import apply_ordering
from utils.pagination import parse_pagination, paginate, bool_arg
from utils.responses import success

bp = Blueprint("testimonials", __name__)

testimonial_in_schema = TestimonialInSchema()
testimonial_out_schema = TestimonialOutSchema()
testimonials_out_schema = TestimonialOutSchema(many=True)
reorder_schema = ReorderSchema()

EDITORS = ["admin", "editor"]

SORT_COLUMNS = {
    "createdAt": Testimonial.created_at,
    "updatedAt": Testimonial.updated_at,
    "order": Testimonial.order,
    "rating": Testimonial.rating,
    "author": Testimonial.author,
}


def _get_or_404(testimonial_id):
    testimonial = storage.get(Testimonial, testimonial_id)
    if not testimonial:
        raise NotFound("Testimonial not found")
    return testimonial


@bp.get("/")
def list_testimonials():
    """
    Testimonials in display order
    ---
    tags:
      - Testimonials
    parameters:
      - in: query
        name: status
        type: string
        enum: [active, inactive]
      - in: query
        name: featured
        type: boolean
    responses:
      200:
        description: List of testimonials
    """
    query = storage.get_session().query(Testimonial)
    if request.args.get("status"):
        query = query.filter(Testimonial.status == request.args["status"])
    if bool_arg("featured"):
        query = query.filter(Testimonial.featured.is_(True))
    rows = query.order_by(Testimonial.order.asc(), Testimonial.created_at.desc()).all()
    return success(testimonials_out_schema.dump(rows))


@bp.get("/admin/all")
@roles_required(EDITORS)
def admin_list():
    """
    All testimonials, paginated
    ---
    tags:
      - Testimonials
    security:
      - Bearer: []
    parameters:
      - in: query
        name: page
        type: integer
      - in: query
        name: limit
        type: integer
        default: 20
    responses:
      200:
        description: List of testimonials
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="createdAt", default_limit=20)
    rows, pagination = paginate(storage.get_session().query(Testimonial), params)
    return success(testimonials_out_schema.dump(rows), pagination=pagination)


@bp.get("/<testimonial_id>")
def get_testimonial(testimonial_id):
    """
    One testimonial
    ---
    tags:
      - Testimonials
    responses:
      200:
        description: Testimonial
      404:
        description: Testimonial not found
    """
    return success(testimonial_out_schema.dump(_get_or_404(testimonial_id)))


@bp.post("/")
@roles_required(EDITORS)
def create_testimonial():
    """
    Add a testimonial
    ---
    tags:
      - Testimonials
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [quote, author]
          properties:
            quote: { type: string, maxLength: 1000 }
            author: { type: string }
            designation: { type: string }
            company: { type: string }
            avatar: { type: string }
            rating: { type: integer, minimum: 1, maximum: 5 }
            featured: { type: boolean }
            status: { type: string, enum: [active, inactive] }
    responses:
      201:
        description: Created
    """
    data = testimonial_in_schema.load(request.get_json(silent=True) or {})
    testimonial = Testimonial(**data)
    storage.new(testimonial)
    storage.save()
    return success(testimonial_out_schema.dump(testimonial), "Testimonial created successfully", 201)


@bp.put("/reorder")
@roles_required(EDITORS)
def reorder_testimonials():
    """
    Set display order
    ---
    tags:
      - Testimonials
    security:
      - Bearer: []
    responses:
      200:
        description: Reordered
    """
    data = reorder_schema.load(request.get_json(silent=True) or {})
    apply_ordering(Testimonial, data["orders"])
    return success(message="Testimonials reordered successfully")


@bp.put("/<testimonial_id>")
@roles_required(EDITORS)
def update_testimonial(testimonial_id):
    """
    Update a testimonial (partial)
    ---
    tags:
      - Testimonials
    security:
      - Bearer: []
    responses:
      200:
        description: Updated
      404:
        description: Testimonial not found
    """
    testimonial = _get_or_404(testimonial_id)
    data = testimonial_in_schema.load(request.get_json(silent=True) or {}, partial=True)
    for key, value in data.items():
        setattr(testimonial, key, value)
    testimonial.save()
    return success(testimonial_out_schema.dump(testimonial), "Testimonial updated successfully")


@bp.delete("/<testimonial_id>")
@roles_required(EDITORS)
def delete_testimonial(testimonial_id):
    """
    Delete a testimonial
    ---
    tags:
      - Testimonials
    security:
      - Bearer: []
    responses:
      200:
        description: Deleted
      404:
        description: Testimonial not found
    """
    testimonial = _get_or_404(testimonial_id)
    testimonial.delete()
    storage.save()
    return success(message="Testimonial deleted successfully")
