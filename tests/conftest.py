import os
from collections.abc import Generator

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

os.environ.setdefault("DEFAULT_PAGE_LIMIT", "5")
os.environ.setdefault("DEFAULT_PAGE_OFFSET", "0")

ROWS = [f"item{i}" for i in range(12)]


def fetch_rows(params) -> list[str]:
    """Stand-in for the data layer: honours LIMIT limit+1 OFFSET offset."""
    return ROWS[params.offset : params.offset + params.limit + 1]


@pytest.fixture
def app() -> FastAPI:
    from limit_offset.core.config import get_settings
    from limit_offset.core.exceptions import register_exception_handlers
    from limit_offset.core.logging import configure_logging
    from limit_offset.deps import get_page_params
    from limit_offset.page import build_page
    from limit_offset.params import PageParams

    get_settings.cache_clear()
    configure_logging(debug=get_settings().debug)
    app = FastAPI()
    register_exception_handlers(app)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request.state.request_id = request.headers.get("X-Request-ID", "test-request")
        return await call_next(request)

    @app.get("/items")
    async def items(request: Request, params: PageParams = Depends(get_page_params)):
        page = build_page(fetch_rows(params), request.url.path, params)
        return {**page.to_dict(), "query": params.render_query()}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
