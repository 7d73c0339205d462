"""structlog based logger setup."""

from __future__ import annotations

import logging
import sys

import structlog

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _renderers(format: str) -> list[structlog.types.Processor]:
    if format == "json":
        return [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    if format == "text":
        return [structlog.dev.ConsoleRenderer(colors=False)]
    raise ValueError(f"Unsupported log format: {format}")


def new_logger(
    level: str = "INFO",
    format: str = "json",
    name: str = "budget_session",
) -> structlog.stdlib.BoundLogger:
    """Route structlog through stdlib logging and return a bound logger.

    Args:
        level: log level name; unknown names fall back to INFO
        format: "json" for one JSON object per line, "text" for console output
        name: stdlib logger name of the returned logger

    Returns:
        A configured structlog.stdlib.BoundLogger
    """
    renderers = _renderers(format)
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(name).setLevel(log_level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *renderers],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # module-level loggers must follow later reconfiguration
        cache_logger_on_first_use=False,
    )

    return structlog.stdlib.get_logger(name)
