"""
Structured Logging (structlog).

Engine, middleware and hook events are emitted as ``tool_*`` event names
(``tool_access_denied``, ``tool_execution_failed``, ``tool_rate_limited``,
...) carrying ``tool_name`` plus ``risk_level``, ``duration_ms`` or
``error_type`` where they apply, so one call can be followed across layers.
Validated pydantic args are rendered through ``default=str`` in JSON mode.
"""

import logging
import sys

import structlog

from exo_config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configure structlog for structured logging.

    Output format: JSON (default) or text (dev)
    Includes: logger name, level, ISO timestamp, exception info
    """
    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=settings.LOG_LEVEL.upper()
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get configured logger; ``name`` is the emitting module, e.g. ``exo_tools.tool``."""
    return structlog.get_logger(name)
