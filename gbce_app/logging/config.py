"""
Centralized logging configuration for the stock calculation toolkit.

This module provides standardized logging configuration using structlog
for all components. Library modules only obtain loggers; configuring output
is left to whatever script or shell drives the engine.
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

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
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

    # Decimal results are rendered through str() by both renderers
    if format_json:
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

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


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the calculation subsystem."""
    return structlog.get_logger(name, subsystem="calculation")


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the trade ledger subsystem."""
    return structlog.get_logger(name, subsystem="ledger")


def log_calculation(
    logger: FilteringBoundLogger,
    metric_name: str,
    result: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed calculation with standardized format.

    Args:
        logger: Structlog logger instance
        metric_name: Name of the metric calculated (e.g. "vwsp")
        result: Calculated value
        context: Inputs worth recording alongside the result
    """
    bound_logger = logger.bind(metric_name=metric_name, result=str(result))

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("calculation")


def log_calculation_failure(
    logger: FilteringBoundLogger,
    metric_name: str,
    error: Exception,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a calculation that raised a domain error.

    Args:
        logger: Structlog logger instance
        metric_name: Name of the metric attempted
        error: The domain error about to be re-raised
        context: Inputs that led to the failure
    """
    bound_logger = logger.bind(
        metric_name=metric_name,
        error_type=type(error).__name__,
        reason=str(error),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("calculation_failed")
