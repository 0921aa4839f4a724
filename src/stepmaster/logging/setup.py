"""
Structured logging configuration
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger, Processor, WrappedLogger

from stepmaster.config import Settings


class _ServiceFields:
    """Stamps the service name and environment on every event."""

    def __init__(self, service: str, environment: str):
        self.fields = {"service": service, "environment": environment}

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in self.fields.items():
            event_dict.setdefault(key, value)
        return event_dict


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(settings: Optional[Settings] = None) -> FilteringBoundLogger:
    """
    Configure structlog for the service

    Events are rendered straight to stdout; stdlib loggers such as uvicorn's
    share the level but keep their own formatting.

    Args:
        settings: Settings to read level, format and service name from

    Returns:
        Logger bound to the service name
    """
    settings = settings or Settings()
    level = getattr(logging, settings.log_level.upper())

    # uvicorn
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _ServiceFields(settings.service_name, settings.environment),
        _renderer(settings.log_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(settings.service_name)
