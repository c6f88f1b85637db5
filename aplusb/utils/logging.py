"""Logging configuration for the summation CLI."""

import logging
import sys
from typing import Optional, TextIO

import structlog


def setup_logging(
    level: str = "WARNING",
    json_logs: bool = False,
    stream: Optional[TextIO] = None
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging.

    Diagnostics go to stderr by default; stdout is reserved for results.
    """
    log_level = getattr(logging, level.upper())

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            logging.StreamHandler(stream or sys.stderr)
        ],
        force=True
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)

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
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("aplusb")
    logger.debug("Logging configured", level=level.upper(), json_logs=json_logs)
    return logger
