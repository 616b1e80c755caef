"""
Постраничная выдача для списочных API.
"""

from typing import Any, Dict, Tuple

from django.db.models import QuerySet

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _to_int(raw: Any, default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def page_params(query_params) -> Tuple[int, int]:
    """(page, page_size) из query-параметров page/pageSize: page >= 1, размер 1..100."""
    page = max(1, _to_int(query_params.get("page"), 1))
    page_size = _to_int(query_params.get("pageSize"), DEFAULT_PAGE_SIZE)
    page_size = max(1, min(MAX_PAGE_SIZE, page_size))
    return page, page_size


def paginate(qs: QuerySet, page: int, page_size: int) -> Dict[str, Any]:
    offset = (page - 1) * page_size
    return {
        "items": list(qs[offset : offset + page_size]),
        "total": qs.count(),
        "page": page,
        "pageSize": page_size,
    }
