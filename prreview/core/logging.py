"""Logging bootstrap: structlog rendered through stdlib handlers."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

# (level, format) used when PRREVIEW_LOG_LEVEL / PRREVIEW_LOG_FORMAT are unset
_ENV_DEFAULTS: dict[str, tuple[str, str]] = {
    "production": ("INFO", "json"),
    "test": ("WARNING", "json"),
    "development": ("DEBUG", "console"),
}


def resolve_log_settings(env: dict[str, str] | None = None) -> tuple[str, str]:
    """Return ``(level, format)`` for the current deployment environment.

    ``PRREVIEW_ENV`` picks the defaults (development when unset or
    unknown); explicit ``PRREVIEW_LOG_LEVEL`` / ``PRREVIEW_LOG_FORMAT`` win.
    """
    env = os.environ if env is None else env
    deployment = env.get("PRREVIEW_ENV", "development").lower()
    default_level, default_format = _ENV_DEFAULTS.get(deployment, _ENV_DEFAULTS["development"])
    level = env.get("PRREVIEW_LOG_LEVEL") or default_level
    fmt = env.get("PRREVIEW_LOG_FORMAT") or default_format
    return level.upper(), fmt.lower()


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger once per process."""
    log_level, log_format = resolve_log_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stdout"], "level": log_level},
            "loggers": {
                "prreview": {"level": log_level},
                # request lines come from RequestIDMiddleware instead
                "uvicorn.access": {"level": "WARNING"},
                "uvicorn.error": {"level": "INFO"},
                "sqlalchemy.engine": {"level": "WARNING"},
                "asyncpg": {"level": "WARNING"},
            },
        }
    )
