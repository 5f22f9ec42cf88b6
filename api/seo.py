from flask import Blueprint, request

from models import storage
from models.page_seo import PageSEO, SEO_PAGES
from models.schemas.page_seo import PageSEOInSchema, PageSEOMetaSchema, PageSEOOutSchema
from utils.decorators import jwt_required
from utils.exceptions import NotFound, InvalidInput
from utils.responses import success

bp = Blueprint("seo", __name__)

page_seo_in_schema = PageSEOInSchema()
page_seo_out_schema = PageSEOOutSchema()
seo_meta_schema = PageSEOMetaSchema()


def _find(page, active_only=False):
    query = storage.get_session().query(PageSEO).filter(PageSEO.page == page)
    if active_only:
        query = query.filter(PageSEO.is_active.is_(True))
    return query.first()


@bp.get("/")
def all_page_seo():
    """
    SEO metadata of every active page, keyed by page
    ---
    tags:
      - SEO
    responses:
      200:
        description: "Map of page -> {pageTitle, metaTitle, ...}"
    """
    rows = storage.get_session().query(PageSEO).filter(PageSEO.is_active.is_(True)).all()
    return success({row.page: {"pageTitle": row.page_title, **(row.seo or {})} for row in rows})


@bp.get("/<page>")
def page_seo(page):
    """
    SEO metadata for one page
    ---
    tags:
      - SEO
    parameters:
      - in: path
        name: page
        type: string
        required: true
    responses:
      200:
        description: Page SEO
      404:
        description: SEO settings not found for this page
    """
    row = _find(page, active_only=True)
    if row is None:
        raise NotFound("SEO settings not found for this page")
    return success(page_seo_out_schema.dump(row))


@bp.put("/<page>")
@jwt_required()
def upsert_page_seo(page):
    """
    Create or replace SEO metadata for a page
    ---
    tags:
      - SEO
    security:
      - Bearer: []
    parameters:
      - in: path
        name: page
        type: string
        enum: [home, solutions, industries, case-studies, company, contact, blog]
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [seo]
          properties:
            pageTitle: { type: string }
            seo:
              type: object
              required: [metaTitle, metaDescription]
              properties:
                metaTitle: { type: string, maxLength: 60 }
                metaDescription: { type: string, maxLength: 160 }
                keywords: { type: array, items: { type: string } }
                ogImage: { type: string }
                canonicalUrl: { type: string }
                noIndex: { type: boolean }
            customFields:
              type: array
              items: { type: object }
            isActive: { type: boolean }
    responses:
      200:
        description: SEO settings updated successfully
      400:
        description: Invalid page identifier or validation error
    """
    if page not in SEO_PAGES:
        raise InvalidInput("Invalid page identifier")
    data = page_seo_in_schema.load(request.get_json(silent=True) or {})

    row = _find(page)
    if row is None:
        row = PageSEO(page=page)
        storage.new(row)
    row.page_title = data.get("page_title")
    row.seo = seo_meta_schema.dump(data["seo"])
    row.custom_fields = data["custom_fields"]
    row.is_active = data["is_active"]
    row.save()
    return success(page_seo_out_schema.dump(row), "SEO settings updated successfully")


@bp.delete("/<page>")
@jwt_required()
def delete_page_seo(page):
    """
    Remove SEO metadata for a page
    ---
    tags:
      - SEO
    security:
      - Bearer: []
    responses:
      200:
        description: SEO settings deleted successfully
      404:
        description: SEO settings not found for this page
    """
    row = _find(page)
    if row is None:
        raise NotFound("SEO settings not found for this page")
    row.delete()
    storage.save()
    return success(message="SEO settings deleted successfully")
