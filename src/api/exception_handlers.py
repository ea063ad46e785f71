"""Error envelope for every failure the API reports.

All error bodies share one shape::

    {"error_code": "PROJECT_NOT_FOUND", "message": "...", "details": {...}}

Server-side failures carry the request id in ``details`` so a report can be
matched to the logs.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()

HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_response(status_code: int, error_code: str, message: str, details: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details},
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    details = exc.details
    if exc.status_code >= 500:
        logger.error(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
        if details is None:
            details = {"request_id": _request_id(request)}
    else:
        # Rejected input and missing records are routine
        logger.info("app_exception", error_code=exc.error_code.value, message=exc.message)
    return error_response(exc.status_code, exc.error_code.value, exc.message, details)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        exc.status_code,
        HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        str(exc.detail),
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Typed request bodies (login) that fail their schema."""
    errors = exc.errors()
    logger.info("request_validation_failed", error_count=len(errors))
    return error_response(
        422,
        ErrorCode.VALIDATION_ERROR.value,
        "Request validation failed",
        [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in errors
        ],
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    request_id = _request_id(request)
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=request_id,
        exc_info=exc,
    )
    message = "An unexpected error occurred" if settings.is_production else str(exc)
    return error_response(
        500, ErrorCode.INTERNAL_ERROR.value, message, {"request_id": request_id}
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error envelope handlers on ``app``."""
    app.add_exception_handler(AppException, handle_app_exception)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
