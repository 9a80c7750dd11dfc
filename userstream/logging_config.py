"""
Logging configuration module for userstream.

Configures structlog on top of the standard library logging so that both
structlog loggers and plain ``logging`` loggers share one output stream.
Supports JSON output for log aggregation and console output for development.
"""

import logging
import sys
from typing import Optional

import structlog


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    service_name: str = "userstream",
) -> structlog.stdlib.BoundLogger:
    """
    Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON instead of human-readable console output
        service_name: Name of the service for log identification

    Returns:
        Logger bound to the service name
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(service_name)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name for the logger (typically __name__ of the module)

    Returns:
        structlog logger
    """
    return structlog.get_logger(name or "userstream")
