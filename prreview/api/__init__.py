"""PR review service REST API — FastAPI application factory."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from prreview import __version__
from prreview.api.deps import dispose_engine, get_engine, init_session_factory
from prreview.api.errors import register_error_handlers
from prreview.api.middleware.request_id import RequestIDMiddleware
from prreview.api.routers import events, pull_requests, stats, teams, users
from prreview.api.schemas.common import ErrorResponse
from prreview.core.database import create_schema
from prreview.core.logging import setup_logging

log = structlog.get_logger("prreview.api")

_ERROR_RESPONSES = {status: {"model": ErrorResponse} for status in (400, 404, 409, 500)}


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: init DB (and schema). Shutdown: dispose engine."""
    init_session_factory()
    if os.environ.get("PRREVIEW_CREATE_SCHEMA", "1") == "1":
        tables = await create_schema(get_engine())
        log.info("db.schema_ready", tables=tables)
    log.info("app.started", version=__version__)
    yield
    await dispose_engine()
    log.info("app.stopped")


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title="PR Review Service",
        version=__version__,
        lifespan=_lifespan,
    )

    register_error_handlers(app)

    cors_origins = os.environ.get("PRREVIEW_CORS_ORIGINS", "http://localhost:3000")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse(
            {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
        )

    app.include_router(teams.router, prefix="/team", tags=["teams"], responses=_ERROR_RESPONSES)
    app.include_router(users.router, prefix="/users", tags=["users"], responses=_ERROR_RESPONSES)
    app.include_router(
        pull_requests.router,
        prefix="/pullRequest",
        tags=["pull-requests"],
        responses=_ERROR_RESPONSES,
    )
    app.include_router(stats.router, prefix="/stats", tags=["stats"], responses=_ERROR_RESPONSES)
    app.include_router(events.router, prefix="/events", tags=["events"], responses=_ERROR_RESPONSES)

    return app
