"""Paginated response: trim the over-fetched row and build navigation links."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from limit_offset.core.logging import get_logger
from limit_offset.params import PARAM_PAGE_LIMIT, PARAM_PAGE_OFFSET, PageParams

T = TypeVar("T")

log = get_logger(__name__)


class PageLinks(BaseModel):
    first: str
    prev: str | None = None
    next: str | None = None
    last: str | None = None  # never set: needs a total count


class PageResponse(BaseModel, Generic[T]):
    data: list[T]
    links: PageLinks

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict; unset links are left out."""
        body = self.model_dump(exclude={"links"})
        body["links"] = self.links.model_dump(exclude_none=True)
        return body


def _link(base_url: str, limit: int, offset: int, sort_url: str) -> str:
    link = f"{base_url}?{PARAM_PAGE_LIMIT}={limit}&{PARAM_PAGE_OFFSET}={offset}"
    if sort_url:
        link += f"&{sort_url}"
    return link


def build_links(base_url: str, params: PageParams, fetched: int) -> PageLinks:
    """Links for a page given how many rows the query returned (before trimming)."""
    sort_url = params.render_sort_url()
    next_link = prev_link = None
    if fetched > params.limit:
        next_link = _link(base_url, params.limit, params.offset + params.limit, sort_url)
    if params.offset > 0:
        # Clamped: offset 3 with limit 5 points back at 0.
        prev_link = _link(base_url, params.limit, max(params.offset - params.limit, 0), sort_url)
    return PageLinks(first=_link(base_url, params.limit, 0, sort_url), prev=prev_link, next=next_link)


def build_page(items: list[T], base_url: str, params: PageParams) -> PageResponse[T]:
    """Page of ``items`` as fetched with ``params.render_query()`` (up to limit + 1 rows)."""
    fetched = len(items)
    data = list(items[:-1]) if fetched > params.limit else list(items)
    links = build_links(base_url, params, fetched)
    log.debug(
        "page_built",
        base_url=base_url,
        limit=params.limit,
        offset=params.offset,
        fetched=fetched,
        returned=len(data),
        has_next=links.next is not None,
    )
    return PageResponse(data=data, links=links)
