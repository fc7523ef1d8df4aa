"""Request ID middleware: one id per request, bound into structlog."""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger("prreview.api")

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_ID_LEN = 128


def pick_request_id(incoming: str | None) -> str:
    """Reuse the caller's id when it is a sane token, else mint a new one.

    Upstream proxies send trace ids in many formats, so anything printable,
    space-free and at most 128 chars is accepted.
    """
    if incoming and len(incoming) <= _MAX_ID_LEN and incoming.isprintable() and " " not in incoming:
        return incoming
    return uuid.uuid4().hex


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 1)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind request_id / method / path for every log line of a request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = pick_request_id(request.headers.get(REQUEST_ID_HEADER))
        tokens = structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        log.info("request.started")
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request.failed", duration_ms=_elapsed_ms(start))
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            log.info(
                "request.completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(start),
            )
            return response
        finally:
            structlog.contextvars.reset_contextvars(**tokens)
