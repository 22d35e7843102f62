"""
structlog setup for the reservation-extract command.
"""

import logging
import sys
import structlog

from .config import settings


def setup_logging() -> None:
    """
    Route extraction events (entity_extraction_start, name_found, ...) to stderr.

    Level and renderer come from LOG_LEVEL and LOG_JSON. stdout is left to the
    JSON records the CLI prints.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if settings.log_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
