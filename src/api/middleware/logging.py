"""Access logging through structlog."""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.rate_limit import client_address

logger = structlog.get_logger()

# Health probes and static media hits are not worth a log line each
QUIET_PATHS = frozenset({"/health"})
QUIET_PREFIXES = ("/images/",)
WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def is_quiet(path: str) -> bool:
    return path in QUIET_PATHS or path.startswith(QUIET_PREFIXES)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One ``request_completed`` event per request.

    The request id, method and path are bound to the structlog context, so
    every event logged while handling the request carries them too.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=getattr(request.state, "request_id", "unknown"),
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("request_failed", error=str(exc), duration_ms=_elapsed_ms(started))
            raise

        status_code = response.status_code
        if status_code < 400 and is_quiet(request.url.path):
            return response

        fields = {"status_code": status_code, "duration_ms": _elapsed_ms(started)}
        if request.method in WRITE_METHODS:
            # Content writes are rare; keep who sent them
            fields["client"] = client_address(request)

        if status_code >= 500:
            logger.warning("request_completed", **fields)
        else:
            logger.info("request_completed", **fields)
        return response
