"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

HTTP_LOGGERS = ("httpx", "httpcore")


def add_seed_run_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the seed run ID to the front of the event when one is bound."""
    seed_run_id = event_dict.pop("seed_run_id", None)
    if seed_run_id:
        return {"seed_run_id": seed_run_id, **event_dict}
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    format_as_json: bool = True,
    include_run_id: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: If True, output logs as JSON; otherwise use console format
        include_run_id: If True, lead every event with the bound seed run ID
    """
    level = getattr(logging, log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # httpx logs every Appwrite and image request at INFO
    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    # Build processor chain
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if include_run_id:
        processors.append(add_seed_run_id)

    # Add appropriate renderer
    if format_as_json:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

