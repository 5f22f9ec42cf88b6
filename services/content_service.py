"""
Page content: one Content row per page holding a map of named sections.

Reads never fail for a missing page; they fall back to the default template
(models/content_defaults.py) and report isDefault=True. Writes upsert the
row. Section values are opaque JSON: an object, a list of objects or a
scalar. Only the templates describe their shape.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm.attributes import flag_modified

from models import storage
from models.base_model import utcnow
from models.content import Content
from models.content_defaults import DEFAULT_CONTENT, get_default_structure
from models.schemas.content import ContentOutSchema
from utils.exceptions import InvalidInput, NotFound

logger = logging.getLogger(__name__)

content_out_schema = ContentOutSchema()


def normalize_page(name: str) -> str:
    return (name or "").strip().lower()


def _find(page: str) -> Optional[Content]:
    return storage.get_session().query(Content).filter(Content.page == page).first()


def _serialize(content: Content) -> Dict[str, Any]:
    data = content_out_schema.dump(content)
    data["isDefault"] = False
    return data


def _upsert(page: str, updated_by: Optional[str], **values) -> Content:
    content = _find(page)
    if content is None:
        content = Content(page=page, sections={}, seo={})
    for key, value in values.items():
        setattr(content, key, value)
        flag_modified(content, key)
    content.updated_by = updated_by
    content.updated_at = utcnow()
    storage.new(content)
    storage.save()
    return content


def get_page(name: str) -> Dict[str, Any]:
    page = normalize_page(name)
    content = _find(page)
    if content is None:
        return {
            "page": page,
            "sections": get_default_structure(page),
            "seo": {},
            "isDefault": True,
        }
    return _serialize(content)


def get_section(name: str, section: str) -> Any:
    page = normalize_page(name)
    content = _find(page)
    sections = content.sections if content is not None else get_default_structure(page)
    if section not in (sections or {}):
        raise NotFound(f"Section '{section}' not found on page '{page}'")
    return sections[section]


def put_page(name: str, sections: Optional[dict] = None, seo: Optional[dict] = None,
             updated_by: Optional[str] = None) -> Dict[str, Any]:
    """Replace the provided top-level keys wholesale; no per-section merge."""
    if not sections and not seo:
        raise InvalidInput("Please provide sections or seo data to update")
    values = {}
    if sections:
        values["sections"] = dict(sections)
    if seo:
        values["seo"] = dict(seo)
    return _serialize(_upsert(normalize_page(name), updated_by, **values))


def put_section(name: str, section: str, value: Any, updated_by: Optional[str] = None) -> Any:
    page = normalize_page(name)
    content = _find(page)
    current = dict(content.sections or {}) if content is not None else {}
    current[section] = value
    content = _upsert(page, updated_by, sections=current)
    return content.sections[section]


def put_seo(name: str, seo: dict, updated_by: Optional[str] = None) -> Dict[str, Any]:
    content = _upsert(normalize_page(name), updated_by, seo=dict(seo or {}))
    return content.seo


def delete_section(name: str, section: str, updated_by: Optional[str] = None) -> None:
    page = normalize_page(name)
    content = _find(page)
    if content is None:
        raise NotFound(f"Page '{page}' not found")
    if section not in (content.sections or {}):
        raise NotFound(f"Section '{section}' not found on page '{page}'")
    remaining = {k: v for k, v in content.sections.items() if k != section}
    _upsert(page, updated_by, sections=remaining)


def reset_page(name: str, updated_by: Optional[str] = None) -> Dict[str, Any]:
    """Destructive: sections become the template, seo is cleared."""
    page = normalize_page(name)
    template = get_default_structure(page)
    if not template:
        raise InvalidInput(f"No default structure available for page '{page}'")
    return _serialize(_upsert(page, updated_by, sections=template, seo={}))


def initialize_all(updated_by: Optional[str] = None) -> List[str]:
    """Create rows for template pages that have none yet; returns the created page names."""
    session = storage.get_session()
    existing = {p for (p,) in session.query(Content.page).all()}
    created = []
    for page in sorted(DEFAULT_CONTENT):
        if page in existing:
            continue
        storage.new(Content(page=page, sections=get_default_structure(page), seo={}, updated_by=updated_by))
        created.append(page)
    if created:
        storage.save()
    logger.info("Initialized %d pages with default content", len(created))
    return created


def _json_type(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return "string"


def describe_structure(name: str) -> List[Dict[str, Any]]:
    """Editor hints from the template only; stored rows may hold more."""
    structure = []
    for key, value in get_default_structure(name).items():
        kind = _json_type(value)
        if kind == "array":
            first = value[0] if value else None
            fields = list(first.keys()) if isinstance(first, dict) else []
        elif kind == "object":
            fields = list(value.keys())
        else:
            fields = []
        structure.append({"name": key, "type": kind, "fields": fields, "isArray": kind == "array"})
    return structure


def list_pages() -> List[Dict[str, Any]]:
    session = storage.get_session()
    stored = session.query(Content).all()
    pages = [
        {"page": c.page, "seo": c.seo or {}, "updatedAt": c.updated_at.isoformat() if c.updated_at else None,
         "exists": True}
        for c in stored
    ]
    known = {c.page for c in stored}
    pages += [
        {"page": p, "seo": {}, "updatedAt": None, "exists": False}
        for p in DEFAULT_CONTENT if p not in known
    ]
    return sorted(pages, key=lambda p: p["page"])
