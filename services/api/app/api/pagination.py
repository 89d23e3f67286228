from __future__ import annotations

from collections.abc import Iterable

from app.core.config import settings
from app.crud.paging import Page, PageRequest, SortOrder
from fastapi import Query
from fastapi.exceptions import RequestValidationError
from starlette.datastructures import URL


def _sort_error(raw: str, msg: str) -> RequestValidationError:
    return RequestValidationError(
        [
            {
                "type": "value_error",
                "loc": ("query", "sort"),
                "msg": msg,
                "input": raw,
            }
        ]
    )


def parse_sort(values: Iterable[str], allowed: Iterable[str]) -> tuple[SortOrder, ...]:
    """Parse ``field[,direction]`` sort parameters, e.g. ``title,desc``."""
    allowed = set(allowed)
    orders: list[SortOrder] = []
    for raw in values:
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        if not parts:
            continue
        field, *rest = parts
        if field not in allowed:
            raise _sort_error(raw, f"Unknown sort property '{field}'")
        direction = rest[0].lower() if rest else "asc"
        if direction not in ("asc", "desc") or len(rest) > 1:
            raise _sort_error(raw, f"Invalid sort direction in '{raw}'")
        orders.append(SortOrder(field=field, direction=direction))  # type: ignore[arg-type]
    return tuple(orders)


def pageable(allowed_sort: Iterable[str]):
    """Build a dependency that reads ``page``, ``size`` and ``sort`` query params."""
    allowed = tuple(allowed_sort)

    def _dep(
        page: int = Query(0, ge=0),
        size: int | None = Query(None, ge=1),
        sort: list[str] | None = Query(None),
    ) -> PageRequest:
        effective = min(size or settings.page_size_default, settings.page_size_max)
        return PageRequest(page=page, size=effective, sort=parse_sort(sort or [], allowed))

    return _dep


def _prepare_link(url: URL, page: int, size: int, rel: str) -> str:
    target = url.include_query_params(page=page, size=size)
    return f'<{target}>; rel="{rel}"'


def generate_pagination_headers(url: URL, page: Page) -> dict[str, str]:
    """``X-Total-Count`` and an RFC 5988 ``Link`` header for a page of results."""
    links: list[str] = []
    total_pages = page.total_pages
    if page.page < total_pages - 1:
        links.append(_prepare_link(url, page.page + 1, page.size, "next"))
    if page.page > 0:
        links.append(_prepare_link(url, page.page - 1, page.size, "prev"))
    last_page = total_pages - 1 if total_pages > 0 else 0
    links.append(_prepare_link(url, last_page, page.size, "last"))
    links.append(_prepare_link(url, 0, page.size, "first"))
    return {
        "X-Total-Count": str(page.total),
        "Link": ",".join(links),
    }
