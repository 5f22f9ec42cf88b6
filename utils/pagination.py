"""
Query-string helpers shared by the list endpoints.

?page=1&limit=10&sortBy=createdAt&sortOrder=desc&search=foo
"""
from __future__ import annotations

import math
from collections import namedtuple
from datetime import datetime, timezone
from typing import Dict, Optional

from flask import request, abort
from sqlalchemy import or_, func

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

PageParams = namedtuple("PageParams", "page limit skip order_by search")


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        abort(400, description=f"{name} must be an integer")


def parse_pagination(sort_columns: Dict[str, object], default_sort: str = "createdAt",
                     default_limit: int = DEFAULT_LIMIT) -> PageParams:
    """
    sort_columns is the allow-list: API field (camelCase) -> SQLAlchemy column.
    An unknown sortBy is a 400.
    """
    page = max(_int_arg("page", 1), 1)
    limit = min(max(_int_arg("limit", default_limit), 1), MAX_LIMIT)

    sort_by = request.args.get("sortBy") or default_sort
    col = sort_columns.get(sort_by)
    if col is None:
        abort(400, description=f"Unsupported sort field: {sort_by}")
    order_by = col.asc() if request.args.get("sortOrder") == "asc" else col.desc()

    search = (request.args.get("search") or "").strip()
    return PageParams(page, limit, (page - 1) * limit, order_by, search)


def build_search_filter(search: str, columns):
    """Case-insensitive substring match over any of `columns`, or None."""
    if not search or not columns:
        return None
    escaped = search.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return or_(*[func.lower(c).like(pattern, escape="\\") for c in columns])


def paginate(query, params: PageParams):
    """Apply ordering and the page window; returns (rows, pagination dict)."""
    total = query.order_by(None).count()
    rows = query.order_by(params.order_by).offset(params.skip).limit(params.limit).all()
    return rows, {
        "page": params.page,
        "limit": params.limit,
        "total": total,
        "pages": math.ceil(total / params.limit) if total else 0,
    }


def parse_date_arg(name: str, end_of_day: bool = False) -> Optional[datetime]:
    val = request.args.get(name)
    if not val:
        return None
    try:
        parsed = datetime.fromisoformat(val)
    except ValueError:
        abort(400, description=f"Invalid date format for {name}. Use YYYY-MM-DD")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    if end_of_day and len(val) == 10:
        parsed = parsed.replace(hour=23, minute=59, second=59, microsecond=999999)
    return parsed


def bool_arg(name: str) -> Optional[bool]:
    val = request.args.get(name)
    if val is None or val == "":
        return None
    return val.lower() in ("1", "true", "yes")
