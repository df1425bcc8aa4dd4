"""
Structured logging for privgate.

Usage:
    from privgate.utils.logging import get_logger

    logger = get_logger(__name__)
    logger.info("authorization_requested", token=7, action="set_data_dir")

Event names are snake_case; context goes into keyword arguments.
"""

import logging
import sys
from typing import Any

import structlog

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "secret",
        "api_key",
        "authorization",
        "credential",
        "token_secret",
        "binder_token",
    }
)

REDACTED = "***REDACTED***"

_configured = False


def filter_sensitive_data(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    structlog processor that redacts sensitive values.

    Correlation tokens (``token``, ``request_token``) are plain ids and are kept.
    """
    for key in list(event_dict.keys()):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(
    level: str = "INFO",
    fmt: str = "console",
    log_file: str | None = None,
) -> None:
    """
    Configure structlog on top of the standard logging module.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR)
        fmt: "console" for human readable output, "json" for JSON lines
        log_file: Optional path that also receives every log line
    """
    global _configured

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root = logging.getLogger("privgate")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))
    root.propagate = False

    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            filter_sensitive_data,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog logger, configuring logging from settings on first use."""
    if not _configured:
        from privgate.config import settings

        configure_logging(
            level=settings.effective_log_level,
            fmt=settings.log_format,
            log_file=settings.log_file,
        )
    return structlog.get_logger(name)


__all__ = ["get_logger", "configure_logging", "filter_sensitive_data"]
