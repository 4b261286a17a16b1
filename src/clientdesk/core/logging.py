"""Logging configuration using structlog."""

import hashlib
import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def setup_logging(debug: bool | None = None) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: If True, use colored console output. If False, use JSON for production.
            Defaults to the DEBUG setting.
    """
    if debug is None:
        from src.clientdesk.core.config import get_settings

        debug = get_settings().debug
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Statement logging is controlled by DATABASE_ECHO, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind request-level context to all subsequent log calls.

    Args:
        request_id: The correlation ID supplied by the calling layer.
    """
    if request_id:
        bind_contextvars(request_id=request_id)


def organization_log_value(organization_id: str) -> str:
    """Return the organization id as it should appear in logs.

    Hashed (first 16 hex chars of SHA-256) when LOG_ORGANIZATION_IDS is off.
    """
    from src.clientdesk.core.config import get_settings

    if get_settings().log_organization_ids:
        return organization_id
    return hashlib.sha256(organization_id.encode()).hexdigest()[:16]


def bind_organization_context(organization_id: str) -> None:
    """Bind the caller's organization to all subsequent log calls.

    Args:
        organization_id: The tenant the current unit of work is scoped to.
    """
    bind_contextvars(organization_id=organization_log_value(organization_id))


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
