"""Unified error handling — every failure becomes ``{"error": {code, message}}``."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from prreview.services import ServiceError, UnexpectedError

log = structlog.get_logger("prreview.api")


def error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


async def _service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, str(exc)),
    )


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return JSONResponse(
        status_code=400,
        content=error_body("INVALID_INPUT", "; ".join(messages) or "invalid request"),
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Store / transport failures: log the cause, hide it from the client.
    log.error(
        "request.unexpected_error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    unexpected = UnexpectedError("internal server error")
    return JSONResponse(
        status_code=unexpected.status_code,
        content=error_body(unexpected.code, str(unexpected)),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _unexpected_error_handler)
    app.add_exception_handler(OSError, _unexpected_error_handler)
