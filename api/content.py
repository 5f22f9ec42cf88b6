"""
Page content (mounted at /api/content).

Reads are public and fall back to the default templates; writes need an
authenticated admin. /<page>/structure and /<page>/seo are literal routes and
take precedence over /<page>/<section>.
"""
from flask import Blueprint, request

from models.schemas.common import SEOSchema
from models.schemas.content import PageUpdateSchema
from services import content_service
from utils.decorators import jwt_required, current_admin_id
from utils.exceptions import InvalidInput
from utils.responses import success

bp = Blueprint("content", __name__)

page_update_schema = PageUpdateSchema()
seo_schema = SEOSchema()


@bp.get("/")
def list_pages():
    """
    Every stored page plus template pages not stored yet (exists=false)
    ---
    tags:
      - Content
    responses:
      200:
        description: "[{page, seo, updatedAt, exists}]"
    """
    return success(content_service.list_pages())


@bp.post("/initialize")
@jwt_required()
def initialize():
    """
    Store the default content for every page that has none
    ---
    tags:
      - Content
    security:
      - Bearer: []
    responses:
      200:
        description: "{count, pages}"
    """
    created = content_service.initialize_all(current_admin_id())
    return success(
        {"count": len(created), "pages": created},
        f"Initialized {len(created)} pages with default content",
    )


@bp.get("/<page>")
def get_page(page):
    """
    Page content; the default template when nothing is stored (isDefault=true)
    ---
    tags:
      - Content
    parameters:
      - in: path
        name: page
        type: string
        required: true
    responses:
      200:
        description: "{page, sections, seo, isDefault}"
    """
    return success(content_service.get_page(page))


@bp.get("/<page>/structure")
def get_structure(page):
    """
    Section names, kinds and fields derived from the page template
    ---
    tags:
      - Content
    parameters:
      - in: path
        name: page
        type: string
        required: true
    responses:
      200:
        description: "{page, sections: [{name, type, fields, isArray}]}"
    """
    return success({
        "page": content_service.normalize_page(page),
        "sections": content_service.describe_structure(page),
    })


@bp.get("/<page>/<section>")
def get_section(page, section):
    """
    One section of a page
    ---
    tags:
      - Content
    parameters:
      - in: path
        name: page
        type: string
        required: true
      - in: path
        name: section
        type: string
        required: true
    responses:
      200:
        description: "{page, section, content}"
      404:
        description: Section not found
    """
    value = content_service.get_section(page, section)
    return success({"page": content_service.normalize_page(page), "section": section, "content": value})


@bp.put("/<page>")
@jwt_required()
def put_page(page):
    """
    Replace a page's sections and/or SEO
    ---
    tags:
      - Content
    security:
      - Bearer: []
    parameters:
      - in: path
        name: page
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            sections: { type: object }
            seo: { type: object }
    responses:
      200:
        description: Page content updated
      400:
        description: Neither sections nor seo given
    """
    data = page_update_schema.load(request.get_json(silent=True) or {})
    seo = seo_schema.dump(data["seo"]) if data.get("seo") else None
    content = content_service.put_page(page, data.get("sections"), seo, current_admin_id())
    return success(content, "Page content updated successfully")


@bp.put("/<page>/seo")
@jwt_required()
def put_seo(page):
    """
    Replace a page's SEO object
    ---
    tags:
      - Content
    security:
      - Bearer: []
    parameters:
      - in: path
        name: page
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            metaTitle: { type: string }
            metaDescription: { type: string }
            keywords: { type: array, items: { type: string } }
            ogImage: { type: string }
            canonicalUrl: { type: string }
    responses:
      200:
        description: SEO updated
    """
    data = seo_schema.load(request.get_json(silent=True) or {})
    seo = content_service.put_seo(page, seo_schema.dump(data), current_admin_id())
    return success(seo, "SEO updated successfully")


@bp.put("/<page>/<section>")
@jwt_required()
def put_section(page, section):
    """
    Replace one section; the request body is the new value
    ---
    tags:
      - Content
    security:
      - Bearer: []
    parameters:
      - in: path
        name: page
        type: string
        required: true
      - in: path
        name: section
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200:
        description: "{page, section, content}"
    """
    if not request.is_json:
        raise InvalidInput("Section content must be sent as JSON")
    value = request.get_json(silent=True)
    stored = content_service.put_section(page, section, value, current_admin_id())
    return success(
        {"page": content_service.normalize_page(page), "section": section, "content": stored},
        "Section content updated successfully",
    )


@bp.delete("/<page>/<section>")
@jwt_required()
def delete_section(page, section):
    """
    Remove a section from a stored page
    ---
    tags:
      - Content
    security:
      - Bearer: []
    responses:
      200:
        description: Section deleted
      404:
        description: Page or section not found
    """
    content_service.delete_section(page, section, current_admin_id())
    return success(message="Section deleted successfully")


@bp.post("/<page>/reset")
@jwt_required()
def reset_page(page):
    """
    Overwrite a page with its default template and clear its SEO
    ---
    tags:
      - Content
    security:
      - Bearer: []
    responses:
      200:
        description: Page content reset to defaults
      400:
        description: No default structure for this page
    """
    content = content_service.reset_page(page, current_admin_id())
    return success(content, "Page content reset to defaults")
