"""Structured logging setup using structlog.

The client modules only call ``get_logger``; ``setup_logging`` is for
applications (see ``scripts/``) that want the Okta logs rendered.
"""

from __future__ import annotations

import logging
import sys

import structlog

from config.settings import Settings, get_settings

_SECRET_KEYS = frozenset(
    {"password", "api_token", "authorization", "cookie", "sessiontoken", "session_token", "sid"}
)


def redact_secrets(_logger, _method_name: str, event_dict: dict) -> dict:
    """Mask credential-bearing keys before an event is rendered."""
    for key in event_dict:
        if key.lower() in _SECRET_KEYS:
            event_dict[key] = "***"
    return event_dict


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog from ``log_level`` and ``log_format``."""
    settings = settings or get_settings()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        redact_secrets,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
