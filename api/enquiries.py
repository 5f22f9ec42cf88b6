"""
Contact-form intake and the admin enquiry pipeline.

Registered twice: /api/contact for the public form and /api/enquiries for
the admin screens. Both prefixes serve every route.
"""
import logging
from datetime import timedelta

from flask import Blueprint, request, current_app, make_response
from sqlalchemy import func

from api.limits import limiter, contact_limit, contact_key
from models import storage
from models.admin import Admin
from models.base_model import utcnow
from models.enquiry import Enquiry, EnquiryNote, EnquiryStatus, EnquiryPriority
from models.schemas.enquiry import (
    EnquiryCreateSchema,
    EnquiryStatusSchema,
    EnquiryNoteInSchema,
    EnquiryNoteOutSchema,
    EnquiryOutSchema,
)
from services.mailer import send_enquiry_notification
from utils.decorators import jwt_required, current_admin_id
from utils.exceptions import NotFound, InvalidInput
from utils.export import to_csv
from utils.pagination import parse_pagination, paginate, build_search_filter, parse_date_arg
from utils.responses import success

logger = logging.getLogger(__name__)

bp = Blueprint("enquiries", __name__)

enquiry_create_schema = EnquiryCreateSchema()
enquiry_status_schema = EnquiryStatusSchema()
note_in_schema = EnquiryNoteInSchema()
note_out_schema = EnquiryNoteOutSchema()
enquiry_out_schema = EnquiryOutSchema()
enquiries_out_schema = EnquiryOutSchema(many=True, exclude=("notes",))

SORT_COLUMNS = {
    "createdAt": Enquiry.created_at,
    "updatedAt": Enquiry.updated_at,
    "name": Enquiry.name,
    "status": Enquiry.status,
    "priority": Enquiry.priority,
}

EXPORT_COLUMNS = [
    ("Name", lambda e: e.name),
    ("Email", lambda e: e.email),
    ("Phone", lambda e: e.phone),
    ("Company", lambda e: e.company),
    ("Service", lambda e: e.service),
    ("Message", lambda e: (e.message or "")[:200]),
    ("Status", lambda e: e.status.value),
    ("Priority", lambda e: e.priority.value),
    ("Source", lambda e: e.source),
    ("Created At", lambda e: e.created_at.isoformat() + "Z"),
]


def _get_or_404(enquiry_id):
    enquiry = storage.get(Enquiry, enquiry_id)
    if not enquiry:
        raise NotFound("Enquiry not found")
    return enquiry


def _date_range(query):
    start = parse_date_arg("startDate")
    end = parse_date_arg("endDate", end_of_day=True)
    if start:
        query = query.filter(Enquiry.created_at >= start)
    if end:
        query = query.filter(Enquiry.created_at <= end)
    return query


@bp.post("/")
@limiter.limit(
    contact_limit,
    key_func=contact_key,
    error_message="Too many submissions. Please wait before sending another message.",
)
def create_enquiry():
    """
    Submit the contact form (public, rate limited)
    ---
    tags:
      - Enquiries
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, email, message]
          properties:
            name: { type: string, minLength: 2, maxLength: 100 }
            email: { type: string, format: email }
            phone: { type: string }
            company: { type: string }
            service: { type: string }
            message: { type: string, minLength: 10, maxLength: 2000 }
            source: { type: string, enum: [website, referral, social, direct, other] }
    responses:
      201:
        description: Enquiry received
      400:
        description: Validation Error
      429:
        description: Too many submissions
    """
    data = enquiry_create_schema.load(request.get_json(silent=True) or {})
    data["service"] = data.get("service") or "Other"
    enquiry = Enquiry(**data)
    storage.new(enquiry)
    storage.save()
    logger.info("Enquiry %s received from %s", enquiry.id, enquiry.email)

    notify = current_app.config.get("ENQUIRY_NOTIFY_EMAIL")
    if notify and not send_enquiry_notification(enquiry, notify):
        logger.warning("Notification for enquiry %s was not delivered", enquiry.id)

    return success(
        {"id": enquiry.id},
        "Thank you for your enquiry. We will get back to you soon.",
        201,
    )


@bp.get("/")
@jwt_required()
def list_enquiries():
    """
    Enquiries, newest first
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    parameters:
      - in: query
        name: status
        type: string
      - in: query
        name: priority
        type: string
      - in: query
        name: search
        type: string
        description: Matches name, email or company
      - in: query
        name: startDate
        type: string
        format: date
      - in: query
        name: endDate
        type: string
        format: date
      - in: query
        name: page
        type: integer
      - in: query
        name: limit
        type: integer
        default: 20
    responses:
      200:
        description: Paginated enquiries
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="createdAt", default_limit=20)
    query = storage.get_session().query(Enquiry)

    status = request.args.get("status")
    if status:
        if status not in [s.value for s in EnquiryStatus]:
            raise InvalidInput(f"Invalid status: {status}")
        query = query.filter(Enquiry.status == EnquiryStatus(status))
    priority = request.args.get("priority")
    if priority:
        if priority not in [p.value for p in EnquiryPriority]:
            raise InvalidInput(f"Invalid priority: {priority}")
        query = query.filter(Enquiry.priority == EnquiryPriority(priority))

    query = _date_range(query)
    search = build_search_filter(params.search, [Enquiry.name, Enquiry.email, Enquiry.company])
    if search is not None:
        query = query.filter(search)

    rows, pagination = paginate(query, params)
    return success(enquiries_out_schema.dump(rows), pagination=pagination)


@bp.get("/stats")
@jwt_required()
def enquiry_stats():
    """
    Totals and a per-status breakdown
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    responses:
      200:
        description: Enquiry statistics
    """
    session = storage.get_session()
    by_status = (
        session.query(Enquiry.status, func.count(Enquiry.id))
        .group_by(Enquiry.status)
        .order_by(func.count(Enquiry.id).desc())
        .all()
    )
    since = utcnow() - timedelta(days=7)
    return success({
        "total": session.query(Enquiry).count(),
        "new": session.query(Enquiry).filter(Enquiry.status == EnquiryStatus.NEW).count(),
        "byStatus": [{"status": s.value, "count": c} for s, c in by_status],
        "recentCount": session.query(Enquiry).filter(Enquiry.created_at >= since).count(),
    })


@bp.get("/export")
@jwt_required()
def export_enquiries():
    """
    Download enquiries as CSV
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    produces:
      - text/csv
    parameters:
      - in: query
        name: status
        type: string
      - in: query
        name: startDate
        type: string
        format: date
      - in: query
        name: endDate
        type: string
        format: date
    responses:
      200:
        description: CSV file
    """
    query = storage.get_session().query(Enquiry)
    status = request.args.get("status")
    if status:
        if status not in [s.value for s in EnquiryStatus]:
            raise InvalidInput(f"Invalid status: {status}")
        query = query.filter(Enquiry.status == EnquiryStatus(status))
    rows = _date_range(query).order_by(Enquiry.created_at.desc()).all()

    resp = make_response(to_csv(rows, EXPORT_COLUMNS))
    resp.headers["Content-Type"] = "text/csv; charset=utf-8"
    filename = f"enquiries-{utcnow().date().isoformat()}.csv"
    resp.headers["Content-Disposition"] = f'attachment; filename="{filename}"'
    return resp


@bp.get("/<enquiry_id>")
@jwt_required()
def get_enquiry(enquiry_id):
    """
    One enquiry with its notes
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    responses:
      200:
        description: Enquiry
      404:
        description: Enquiry not found
    """
    return success(enquiry_out_schema.dump(_get_or_404(enquiry_id)))


@bp.put("/<enquiry_id>/status")
@jwt_required()
def update_status(enquiry_id):
    """
    Move an enquiry through the pipeline
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            status: { type: string, enum: [new, contacted, qualified, proposal, negotiation, closed, lost] }
            priority: { type: string, enum: [low, medium, high, urgent] }
            assignedTo: { type: string }
            estimatedValue: { type: number }
            tags: { type: array, items: { type: string } }
    responses:
      200:
        description: Enquiry updated
      404:
        description: Enquiry not found
    """
    enquiry = _get_or_404(enquiry_id)
    data = enquiry_status_schema.load(request.get_json(silent=True) or {})
    if data.get("assigned_to") and not storage.get(Admin, data["assigned_to"]):
        raise InvalidInput("Assigned admin not found")

    for key, value in data.items():
        setattr(enquiry, key, value)
    enquiry.save()
    return success(enquiry_out_schema.dump(enquiry), "Enquiry updated successfully")


@bp.post("/<enquiry_id>/notes")
@jwt_required()
def add_note(enquiry_id):
    """
    Append a note
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [content]
          properties:
            content: { type: string }
    responses:
      201:
        description: Note added
      404:
        description: Enquiry not found
    """
    enquiry = _get_or_404(enquiry_id)
    data = note_in_schema.load(request.get_json(silent=True) or {})
    note = EnquiryNote(content=data["content"], created_by=current_admin_id())
    enquiry.notes.append(note)
    # a new note counts as an update of the enquiry
    enquiry.updated_at = utcnow()
    storage.save()
    return success(note_out_schema.dump(note), "Note added successfully", 201)


@bp.delete("/<enquiry_id>")
@jwt_required()
def delete_enquiry(enquiry_id):
    """
    Delete an enquiry and its notes
    ---
    tags:
      - Enquiries
    security:
      - Bearer: []
    responses:
      200:
        description: Deleted
      404:
        description: Enquiry not found
    """
    enquiry = _get_or_404(enquiry_id)
    enquiry.delete()
    storage.save()
    return success(message="Enquiry deleted successfully")
