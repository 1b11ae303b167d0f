# server/utils/logging_config.py
"""Structured logging setup."""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import LoggerFactory

_configured = False


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog on top of the standard library logging module."""
    global _configured

    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog logger with the specified name."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
