from limit_offset.core.exceptions import ParseError
from limit_offset.page import PageLinks, PageResponse, build_links, build_page
from limit_offset.params import (
    PARAM_PAGE_LIMIT,
    PARAM_PAGE_OFFSET,
    PARAM_SORT,
    PageParams,
    SortSpec,
    extract_params,
    parse_sort,
)

__all__ = [
    "PARAM_PAGE_LIMIT",
    "PARAM_PAGE_OFFSET",
    "PARAM_SORT",
    "PageLinks",
    "PageParams",
    "PageResponse",
    "ParseError",
    "SortSpec",
    "build_links",
    "build_page",
    "extract_params",
    "parse_sort",
]
