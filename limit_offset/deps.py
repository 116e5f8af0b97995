"""Shared FastAPI dependencies."""

from fastapi import Request

from limit_offset.core.config import get_settings
from limit_offset.params import PageParams, extract_params


def get_page_params(request: Request) -> PageParams:
    """Dependency: page params from the query string, configured defaults otherwise.

    ParseError propagates; the registered AppError handler turns it into a 400.
    """
    settings = get_settings()
    return extract_params(request, settings.default_page_offset, settings.default_page_limit)
