from __future__ import annotations

from flask import Blueprint, request
from sqlalchemy import func

from models import storage
from models.base_model import utcnow
from models.case_study import CaseStudy, CaseStudyStatus
from models.schemas.case_study import CaseStudyInSchema, CaseStudyOutSchema
from models.schemas.common import SEOSchema
from utils.decorators import jwt_required
from utils.exceptions import Conflict, NotFound
from utils.pagination import parse_pagination, build_search_filter, paginate, bool_arg
from utils.responses import success
from utils.text import generate_unique_slug

bp = Blueprint("case_studies", __name__)

case_study_in_schema = CaseStudyInSchema()
case_study_out_schema = CaseStudyOutSchema()
case_studies_out_schema = CaseStudyOutSchema(many=True)
seo_schema = SEOSchema()

SORT_COLUMNS = {
    "publishDate": CaseStudy.publish_date,
    "createdAt": CaseStudy.created_at,
    "updatedAt": CaseStudy.updated_at,
    "title": CaseStudy.title,
    "viewCount": CaseStudy.view_count,
}

DUPLICATE_SLUG = "A case study with this slug already exists"
NOT_FOUND = "Case study not found"


def _slug_exists(slug: str, exclude_id: str | None = None) -> bool:
    query = storage.get_session().query(CaseStudy.id).filter(CaseStudy.slug == slug)
    if exclude_id:
        query = query.filter(CaseStudy.id != exclude_id)
    return query.first() is not None


def _get_or_404(case_study_id: str) -> CaseStudy:
    case_study = storage.get(CaseStudy, case_study_id)
    if not case_study:
        raise NotFound(NOT_FOUND)
    return case_study


def _published():
    return storage.get_session().query(CaseStudy).filter(CaseStudy.status == CaseStudyStatus.PUBLISHED)


@bp.get("/")
def list_case_studies():
    """
    Published case studies, paginated
    ---
    tags:
      - Case Studies
    parameters:
      - in: query
        name: industry
        type: string
      - in: query
        name: featured
        type: boolean
      - in: query
        name: search
        type: string
      - in: query
        name: page
        type: integer
      - in: query
        name: limit
        type: integer
    responses:
      200:
        description: List of case studies
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="publishDate")
    query = _published().filter(CaseStudy.publish_date <= utcnow())
    search = build_search_filter(params.search, [CaseStudy.title, CaseStudy.client_name, CaseStudy.industry])
    if search is not None:
        query = query.filter(search)
    if request.args.get("industry"):
        query = query.filter(CaseStudy.industry == request.args["industry"])
    featured = bool_arg("featured")
    if featured is not None:
        query = query.filter(CaseStudy.featured.is_(featured))
    rows, pagination = paginate(query, params)
    return success(case_studies_out_schema.dump(rows), pagination=pagination)


@bp.get("/featured")
def featured():
    """
    Featured published case studies, newest first
    ---
    tags:
      - Case Studies
    parameters:
      - in: query
        name: limit
        type: integer
        default: 3
    responses:
      200:
        description: List of case studies
    """
    limit = min(max(request.args.get("limit", 3, type=int), 1), 100)
    rows = (
        _published()
        .filter(CaseStudy.featured.is_(True))
        .order_by(CaseStudy.publish_date.desc())
        .limit(limit)
        .all()
    )
    return success(case_studies_out_schema.dump(rows))


@bp.get("/industries")
def industries():
    """
    Published case study count per industry
    ---
    tags:
      - Case Studies
    responses:
      200:
        description: "[{name, count}]"
    """
    rows = (
        storage.get_session()
        .query(CaseStudy.industry, func.count(CaseStudy.id))
        .filter(CaseStudy.status == CaseStudyStatus.PUBLISHED)
        .group_by(CaseStudy.industry)
        .all()
    )
    return success(sorted(({"name": n, "count": c} for n, c in rows), key=lambda i: -i["count"]))


@bp.get("/admin/all")
@jwt_required()
def admin_list():
    """
    All case studies regardless of status
    ---
    tags:
      - Case Studies
    security:
      - Bearer: []
    parameters:
      - in: query
        name: status
        type: string
      - in: query
        name: industry
        type: string
      - in: query
        name: search
        type: string
    responses:
      200:
        description: List of case studies
    """
    params = parse_pagination(SORT_COLUMNS, default_sort="createdAt")
    query = storage.get_session().query(CaseStudy)
    search = build_search_filter(
        params.search, [CaseStudy.title, CaseStudy.slug, CaseStudy.client_name, CaseStudy.industry]
    )
    if search is not None:
        query = query.filter(search)
    status = request.args.get("status")
    if status in [s.value for s in CaseStudyStatus]:
        query = query.filter(CaseStudy.status == CaseStudyStatus(status))
    if request.args.get("industry"):
        query = query.filter(CaseStudy.industry == request.args["industry"])
    rows, pagination = paginate(query, params)
    return success(case_studies_out_schema.dump(rows), pagination=pagination)


@bp.get("/admin/<case_study_id>")
@jwt_required()
def admin_get(case_study_id):
    """
    One case study by id, any status
    ---
    tags:
      - Case Studies
    security:
      - Bearer: []
    responses:
      200:
        description: Case study
      404:
        description: Case study not found
    """
    return success(case_study_out_schema.dump(_get_or_404(case_study_id)))


@bp.get("/<slug>")
def get_by_slug(slug):
    """
    Published case study by slug; counts a view
    ---
    tags:
      - Case Studies
    responses:
      200:
        description: Case study
      404:
        description: Case study not found
    """
    case_study = _published().filter(CaseStudy.slug == slug).first()
    if not case_study:
        raise NotFound(NOT_FOUND)
    storage.get_session().query(CaseStudy).filter(CaseStudy.id == case_study.id).update(
        {CaseStudy.view_count: CaseStudy.view_count + 1}, synchronize_session=False
    )
    storage.save()
    data = case_study_out_schema.dump(case_study)
    data["viewCount"] = (case_study.view_count or 0) + 1
    return success(data)


@bp.post("/")
@jwt_required()
def create_case_study():
    """
    Create a case study
    ---
    tags:
      - Case Studies
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, industry, clientName, challenge, solution]
          properties:
            title: { type: string }
            slug: { type: string }
            industry: { type: string }
            clientName: { type: string }
            challenge: { type: string }
            solution: { type: string }
            results:
              type: array
              items:
                type: object
                properties:
                  metric: { type: string }
                  value: { type: string }
                  description: { type: string }
            technologies: { type: array, items: { type: string } }
            testimonial: { type: object }
            featured: { type: boolean }
            status: { type: string, enum: [draft, published, archived] }
    responses:
      201:
        description: Created
      400:
        description: Validation error or duplicate slug
    """
    data = case_study_in_schema.load(request.get_json(silent=True) or {})
    if data.get("slug"):
        if _slug_exists(data["slug"]):
            raise Conflict(DUPLICATE_SLUG)
    else:
        data["slug"] = generate_unique_slug(data["title"], _slug_exists)
    data["seo"] = seo_schema.dump(data.get("seo") or {})
    if not data.get("publish_date"):
        data["publish_date"] = utcnow()

    case_study = CaseStudy(**data)
    storage.new(case_study)
    storage.save()
    return success(case_study_out_schema.dump(case_study), "Case study created successfully", 201)


@bp.put("/<case_study_id>")
@jwt_required()
def update_case_study(case_study_id):
    """
    Update a case study (partial)
    ---
    tags:
      - Case Studies
    security:
      - Bearer: []
    responses:
      200:
        description: Updated
      400:
        description: Validation error or duplicate slug
      404:
        description: Case study not found
    """
    case_study = _get_or_404(case_study_id)
    data = case_study_in_schema.load(request.get_json(silent=True) or {}, partial=True)
    slug = data.pop("slug", None)
    if slug and slug != case_study.slug:
        if _slug_exists(slug, exclude_id=case_study.id):
            raise Conflict(DUPLICATE_SLUG)
        case_study.slug = slug
    if "seo" in data:
        data["seo"] = seo_schema.dump(data["seo"] or {})
    if "publish_date" in data and data["publish_date"] is None:
        data.pop("publish_date")
    for key, value in data.items():
        setattr(case_study, key, value)
    case_study.save()
    return success(case_study_out_schema.dump(case_study), "Case study updated successfully")


@bp.delete("/<case_study_id>")
@jwt_required()
def delete_case_study(case_study_id):
    """
    Delete a case study
    ---
    tags:
      - Case Studies
    security:
      - Bearer: []
    responses:
      200:
        description: Deleted
      404:
        description: Case study not found
    """
    case_study = _get_or_404(case_study_id)
    case_study.delete()
    storage.save()
    return success(message="Case study deleted successfully")
