"""
Centralized logging configuration for the script engine.

This module provides standardized logging configuration using structlog
for all components. Parsing and evaluation log through loggers obtained
here so that skipped statements and emitted indicators share one format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # structlog does the formatting, stdlib only routes
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the script engine subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for parse and evaluation events
    """
    # Must stay a lazy proxy until configure_logging has run
    return structlog.get_logger(name, subsystem="script_engine")


def log_statement_skipped(
    logger: FilteringBoundLogger,
    line_no: int,
    line: str,
    reason: str = "unrecognized"
) -> None:
    """
    Log a script line that produced no statement.

    Args:
        logger: Structlog logger instance
        line_no: 1-based line number in the script
        line: Trimmed line text
        reason: Why the line was dropped
    """
    logger.debug(
        "Statement skipped",
        line_no=line_no,
        line=line,
        reason=reason,
    )


def log_indicator_emitted(
    logger: FilteringBoundLogger,
    name: str,
    points: int,
    color: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an indicator produced by a plot statement.

    Args:
        logger: Structlog logger instance
        name: Indicator title
        points: Number of data points in the indicator
        color: Resolved display color
        context: Additional context data
    """
    bound_logger = logger.bind(
        indicator=name,
        points=points,
        color=color,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Indicator emitted")
