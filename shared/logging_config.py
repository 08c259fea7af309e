"""Structured logging configuration.

Sets up structlog to emit either JSON (production) or colored console output
(development). Values not passed explicitly fall back to the SERVICE_NAME,
LOG_FORMAT and LOG_LEVEL environment variables.

Usage:
    from shared.logging_config import setup_logging
    import structlog

    setup_logging(service_name="resource-api")
    logger = structlog.get_logger()
    logger.info("resource_created", resource_id=1)
"""

import logging
import os
import sys
from typing import Literal

import structlog
from structlog.types import Processor


def _build_processors(log_format: str) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        # correlation_id, method, path bound by the HTTP middleware
        structlog.contextvars.merge_contextvars,
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def setup_logging(
    service_name: str | None = None,
    log_format: Literal["json", "console"] | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structured logging with structlog.

    Args:
        service_name: Name bound to every log entry (e.g. "resource-api").
                     Falls back to SERVICE_NAME env var or "unknown".
        log_format: "json" for production, "console" for development.
                   Falls back to LOG_FORMAT env var or "console".
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
                  Falls back to LOG_LEVEL env var or "INFO".
    """
    service_name = service_name or os.getenv("SERVICE_NAME", "unknown")
    log_format = log_format or os.getenv("LOG_FORMAT", "console")
    log_level = log_level or os.getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=_build_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=service_name)

    logger = structlog.get_logger()
    logger.info(
        "logging_initialized",
        service=service_name,
        log_format=log_format,
        log_level=log_level,
    )


def bind_request_context(correlation_id: str, method: str, path: str) -> None:
    """Attach request identifiers to every log entry of the current context."""
    structlog.contextvars.bind_contextvars(
        correlation_id=correlation_id, method=method, path=path
    )


def get_correlation_id() -> str | None:
    """Get correlation ID from current context."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Drop request identifiers, keeping the bound service name."""
    structlog.contextvars.unbind_contextvars("correlation_id", "method", "path")
