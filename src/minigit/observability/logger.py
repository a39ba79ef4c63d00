"""Structured logging with a per-invocation run_id.

Uses structlog on top of stdlib logging.  Library modules keep using
``logging.getLogger(__name__)``; their records are rendered by the same
structlog formatter as native structlog events.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Any

import structlog

_PACKAGE_LOGGER = "minigit"
_HANDLER_NAME = "minigit-stderr"


def new_run_id() -> str:
    """Generate a run ID and bind it to every subsequent structlog entry."""
    run_id = uuid.uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(run_id=run_id)
    return run_id


def _add_component(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add component name."""
    event_dict.setdefault("component", "minigit")
    return event_dict


def setup_logging(
    level: str = "WARNING",
    format: str = "console",
) -> None:
    """Configure structured logging for the application.

    structlog events and plain stdlib records from ``minigit.*`` share one
    stderr handler whose ``ProcessorFormatter`` renders both, so with
    ``format="json"`` every line is a single JSON document.  Calling this
    again replaces the handler installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for machine consumption, "console" for humans.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        _add_component,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Any
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
