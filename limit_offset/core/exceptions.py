from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request, status
from fastapi.responses import ORJSONResponse

if TYPE_CHECKING:
    from limit_offset.params import PageParams


class AppError(Exception):
    """Base error with consistent schema."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST", details: dict[str, Any] | None = None):
        super().__init__(message, code=code, status_code=status.HTTP_400_BAD_REQUEST, details=details)


class ParseError(BadRequestError):
    """page[limit] or page[offset] is present but not a non-negative integer.

    ``params`` holds the best-effort PageParams: whatever parsed before the
    failure, defaults for the rest. Callers that want to carry on with
    defaults can read it off the exception.
    """

    def __init__(self, param: str, value: str, params: "PageParams"):
        self.param = param
        self.value = value
        self.params = params
        super().__init__(
            f"{param} must be a non-negative integer",
            code="INVALID_PAGE_PARAM",
            details={"param": param, "value": value},
        )


def error_response(request: Request, exc: AppError) -> ORJSONResponse:
    body = {
        "error": {
            "message": exc.message,
            "code": exc.code,
            "details": exc.details,
        }
    }
    if hasattr(request.state, "request_id"):
        body["request_id"] = request.state.request_id
    return ORJSONResponse(status_code=exc.status_code, content=body)


async def app_exception_handler(request: Request, exc: AppError) -> ORJSONResponse:
    return error_response(request, exc)


async def generic_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    from limit_offset.core.logging import get_logger
    get_logger(__name__).exception("unhandled_exception", exc_info=exc)
    body = {
        "error": {
            "message": "Internal server error",
            "code": "INTERNAL_ERROR",
            "details": {},
        }
    }
    if hasattr(request.state, "request_id"):
        body["request_id"] = request.state.request_id
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
