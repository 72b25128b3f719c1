"""Page/limit handling for list endpoints, on top of Django's Paginator."""

from dataclasses import dataclass

from django.core.paginator import EmptyPage, Paginator

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int


def _to_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def page_request(params) -> PageRequest:
    """Build a PageRequest from query parameters.

    ``page`` is at least 1; ``limit`` is clamped to 1..MAX_LIMIT and
    defaults to DEFAULT_LIMIT. Garbage values fall back to the defaults.
    """
    page = max(1, _to_int(params.get("page"), 1))
    limit = min(MAX_LIMIT, max(1, _to_int(params.get("limit"), DEFAULT_LIMIT)))
    return PageRequest(page=page, limit=limit)


def pagination_meta(paginator: Paginator, page: int, has_next: bool) -> dict:
    """Build the ``pagination`` block of a list response."""
    return {
        "total": paginator.count,
        "page": page,
        "limit": paginator.per_page,
        # Paginator reports one empty page for an empty result; clients expect 0
        "totalPages": paginator.num_pages if paginator.count else 0,
        "hasNext": has_next,
        "hasPrev": page > 1,
    }


def paginate(queryset, params):
    """Return the rows for the requested page.

    A page past the end yields no rows rather than the last page.

    Returns:
        (rows, pagination_meta) tuple
    """
    request = page_request(params)
    paginator = Paginator(queryset, request.limit)
    try:
        page = paginator.page(request.page)
    except EmptyPage:
        return [], pagination_meta(paginator, request.page, has_next=False)
    return list(page.object_list), pagination_meta(paginator, request.page, page.has_next())
