"""Dashboard counts and the recent-activity feed for the admin home screen."""
from flask import Blueprint, request
from sqlalchemy import func

from models import storage
from models.blog import Blog, BlogStatus
from models.case_study import CaseStudy, CaseStudyStatus
from models.enquiry import Enquiry, EnquiryStatus
from models.media import Media
from utils.decorators import jwt_required
from utils.responses import success

bp = Blueprint("dashboard", __name__)

RECENT = 5
MAX_ACTIVITY = 100


def _iso(dt):
    return dt.isoformat() if dt else None


def _value(enum_or_str):
    return getattr(enum_or_str, "value", enum_or_str)


def _breakdown(session, column):
    rows = session.query(column, func.count()).group_by(column).all()
    return sorted(({"_id": _value(k), "count": c} for k, c in rows), key=lambda r: -r["count"])


@bp.get("/dashboard")
@jwt_required()
def dashboard():
    """
    Dashboard statistics
    ---
    tags:
      - Dashboard
    security:
      - Bearer: []
    responses:
      200:
        description: "{counts, recent, breakdown}"
    """
    session = storage.get_session()
    counts = {
        "blogs": {
            "total": session.query(Blog).count(),
            "published": session.query(Blog).filter(Blog.status == BlogStatus.PUBLISHED).count(),
        },
        "caseStudies": {
            "total": session.query(CaseStudy).count(),
            "published": session.query(CaseStudy).filter(CaseStudy.status == CaseStudyStatus.PUBLISHED).count(),
        },
        "enquiries": {
            "total": session.query(Enquiry).count(),
            "new": session.query(Enquiry).filter(Enquiry.status == EnquiryStatus.NEW).count(),
        },
        "media": session.query(Media).count(),
    }

    enquiries = session.query(Enquiry).order_by(Enquiry.created_at.desc()).limit(RECENT).all()
    blogs = session.query(Blog).order_by(Blog.created_at.desc()).limit(RECENT).all()
    case_studies = session.query(CaseStudy).order_by(CaseStudy.created_at.desc()).limit(RECENT).all()
    recent = {
        "enquiries": [
            {"id": e.id, "name": e.name, "email": e.email, "company": e.company,
             "status": _value(e.status), "createdAt": _iso(e.created_at)}
            for e in enquiries
        ],
        "blogs": [
            {"id": b.id, "title": b.title, "status": _value(b.status), "createdAt": _iso(b.created_at),
             "author": {"name": b.author.name} if b.author else None}
            for b in blogs
        ],
        "caseStudies": [
            {"id": c.id, "title": c.title, "industry": c.industry, "status": _value(c.status),
             "createdAt": _iso(c.created_at)}
            for c in case_studies
        ],
    }

    return success({
        "counts": counts,
        "recent": recent,
        "breakdown": {
            "enquiriesByStatus": _breakdown(session, Enquiry.status),
            "blogsByCategory": _breakdown(session, Blog.category),
        },
    })


@bp.get("/activity")
@jwt_required()
def activity():
    """
    Recently updated blogs, case studies and enquiries, newest first
    ---
    tags:
      - Dashboard
    security:
      - Bearer: []
    parameters:
      - in: query
        name: limit
        type: integer
        default: 20
    responses:
      200:
        description: Activity list
    """
    limit = min(max(request.args.get("limit", 20, type=int), 1), MAX_ACTIVITY)
    session = storage.get_session()

    items = []
    for b in session.query(Blog).order_by(Blog.updated_at.desc()).limit(limit):
        items.append({
            "type": "blog",
            "action": "published" if b.status == BlogStatus.PUBLISHED else "updated",
            "title": b.title,
            "by": b.author.name if b.author else "Unknown",
            "date": b.updated_at,
        })
    for c in session.query(CaseStudy).order_by(CaseStudy.updated_at.desc()).limit(limit):
        items.append({
            "type": "caseStudy",
            "action": "published" if c.status == CaseStudyStatus.PUBLISHED else "updated",
            "title": c.title,
            "date": c.updated_at,
        })
    for e in session.query(Enquiry).order_by(Enquiry.updated_at.desc()).limit(limit):
        items.append({
            "type": "enquiry",
            "action": "updated",
            "title": f"{e.name} from {e.company}" if e.company else e.name,
            "date": e.updated_at,
        })

    items.sort(key=lambda a: a["date"], reverse=True)
    for item in items:
        item["date"] = _iso(item["date"])
    return success(items[:limit])
