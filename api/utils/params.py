"""
Query-string and path helpers shared by the resource blueprints.
All of them abort(400) on bad input.
"""
from typing import Dict, List, Tuple

from flask import request, abort

from models.schemas.common import is_uuid

MAX_LIMIT = 100


def parse_pagination() -> Tuple[int, int]:
    try:
        page = int(request.args.get("page", "1"))
        limit = int(request.args.get("limit", "20"))
        page = max(page, 1)
        limit = max(1, min(limit, MAX_LIMIT))
        return page, limit
    except ValueError:
        abort(400, description="page and limit must be integers")


def parse_sort(columns: Dict[str, object], default: str) -> List:
    """Comma-separated sort keys, '-' prefix for descending, restricted to `columns`"""
    sort_param = request.args.get("sort", default)
    keys = [s.strip() for s in sort_param.split(",") if s.strip()]
    order_by = []
    for f in keys:
        desc = f.startswith("-")
        key = f[1:] if desc else f
        col = columns.get(key)
        if col is None:
            abort(400, description=f"Unsupported sort field: {key}. Allowed: {', '.join(columns)}")
        order_by.append(col.desc() if desc else col.asc())
    return order_by


def require_id(value: str, label: str) -> str:
    if not is_uuid(value):
        abort(400, description=f"Invalid {label} ID")
    return value
