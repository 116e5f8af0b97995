"""Page parameters: read page[limit] / page[offset] / sort off a request and
render them back out as a SQL fragment or a link query string."""

from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from limit_offset.core.exceptions import ParseError
from limit_offset.core.logging import get_logger

PARAM_PAGE_LIMIT = "page[limit]"
PARAM_PAGE_OFFSET = "page[offset]"
PARAM_SORT = "sort"

# Largest value accepted for page[limit] / page[offset] (unsigned 32-bit).
MAX_PAGE_VALUE = 2**32 - 1

log = get_logger(__name__)


class SortSpec(BaseModel):
    """One ORDER BY column. ``direction`` is passed through as given (asc, desc, ...)."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: str


class PageParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: NonNegativeInt = 0
    offset: NonNegativeInt = 0
    sorts: tuple[SortSpec, ...] = ()

    def render_query(self) -> str:
        """Trailing LIMIT/OFFSET/ORDER BY fragment for the data query.

        Asks for limit + 1 rows: the extra row tells build_page whether a
        next page exists without a count query. Field and direction are
        interpolated verbatim.
        """
        query = f" LIMIT {self.limit + 1} OFFSET {self.offset} "
        if self.sorts:
            query += "ORDER BY " + ",".join(f"{s.field} {s.direction}" for s in self.sorts)
        return query

    def render_sort_url(self) -> str:
        """``sort=field.direction,...`` or "" when there is nothing to sort by."""
        if not self.sorts:
            return ""
        return f"{PARAM_SORT}=" + ",".join(f"{s.field}.{s.direction}" for s in self.sorts)


def _query_value(request: Any, name: str) -> str:
    """First value of ``name`` in the query string, "" when absent."""
    query_params = getattr(request, "query_params", None)
    if query_params is None:
        # plain mapping of query params
        return request.get(name) or ""
    values = query_params.getlist(name)
    return values[0] if values else ""


def _parse_uint(value: str) -> int | None:
    if not (value.isascii() and value.isdigit()):
        return None
    n = int(value)
    return n if n <= MAX_PAGE_VALUE else None


def parse_sort(raw: str) -> tuple[SortSpec, ...]:
    """Split ``name.asc,created_at.desc`` into SortSpecs; drop malformed tokens."""
    sorts: list[SortSpec] = []
    for token in raw.split(","):
        parts = token.split(".")
        if len(parts) != 2:
            log.debug("sort_token_dropped", token=token)
            continue
        sorts.append(SortSpec(field=parts[0], direction=parts[1]))
    return tuple(sorts)


def extract_params(request: Any, default_offset: int, default_limit: int) -> PageParams:
    """Build PageParams from the request query string, falling back to defaults.

    Raises ParseError when page[limit] or page[offset] is present but not a
    non-negative integer; the error's ``params`` carries the defaults (and a
    limit, if that parsed before offset failed).
    """
    limit = default_limit
    offset = default_offset

    raw_limit = _query_value(request, PARAM_PAGE_LIMIT)
    raw_offset = _query_value(request, PARAM_PAGE_OFFSET)
    raw_sort = _query_value(request, PARAM_SORT)

    if raw_limit:
        parsed = _parse_uint(raw_limit)
        if parsed is None:
            log.warning("page_param_invalid", param=PARAM_PAGE_LIMIT, value=raw_limit)
            raise ParseError(PARAM_PAGE_LIMIT, raw_limit, PageParams(limit=limit, offset=offset))
        limit = parsed

    if raw_offset:
        parsed = _parse_uint(raw_offset)
        if parsed is None:
            log.warning("page_param_invalid", param=PARAM_PAGE_OFFSET, value=raw_offset)
            raise ParseError(PARAM_PAGE_OFFSET, raw_offset, PageParams(limit=limit, offset=offset))
        offset = parsed

    sorts = parse_sort(raw_sort) if raw_sort else ()
    return PageParams(limit=limit, offset=offset, sorts=sorts)
