"""structlog configuration for the blob server.

Call ``configure_logging`` once at startup; modules then log through
``structlog.get_logger(__name__)``.
"""

from __future__ import annotations

import logging

import structlog
from structlog.typing import Processor


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structlog processors.

    ``fmt`` is ``"json"`` for machine-readable lines, anything else renders
    for the console.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
