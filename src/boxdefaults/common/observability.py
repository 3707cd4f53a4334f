"""Logging setup shared by the box defaults tooling.

Log lines are JSON on stderr so ``boxdefaults show`` output on stdout stays
sourceable by shell scripts.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars


SERVICE_NAME = "boxdefaults"
DEFAULT_LOG_LEVEL = "WARNING"

_logging_configured = False


def get_logger(component: str):
    return structlog.get_logger(f"{SERVICE_NAME}.{component}")


def resolve_log_level(level: str | int | None) -> int:
    """Map a level name or number to a logging level, falling back to WARNING."""

    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.strip():
        numeric = logging.getLevelName(level.strip().upper())
        if isinstance(numeric, int):
            return numeric
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging(service_name: str = SERVICE_NAME, level: str | int | None = None) -> None:
    global _logging_configured
    numeric_level = resolve_log_level(level)
    if not _logging_configured:
        logging.basicConfig(level=numeric_level, format="%(message)s", stream=sys.stderr)
        _logging_configured = True
    else:
        logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.dict_tracebacks,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    bind_contextvars(service=service_name)
