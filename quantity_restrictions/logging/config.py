"""
Centralized logging configuration for quantity restriction processing.

This module provides standardized logging configuration using structlog.
The rounder and validator obtain their loggers here so that embedding
applications can switch between console and JSON output in one place.
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


def get_validation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for restriction validation.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for validation decisions
    """
    return get_logger(name).bind(
        subsystem="quantity_validation",
        audit_trail=True
    )


def log_violation(
    logger: FilteringBoundLogger,
    kind: str,
    sku: str,
    restriction_value: Any,
    actual_value: Any,
    operation: str,
) -> None:
    """
    Log a recorded violation with standardized format.

    Args:
        logger: Structlog logger instance
        kind: Violation kind name
        sku: SKU the violation belongs to
        restriction_value: Policy value that was not fulfilled
        actual_value: Quantity that breached the policy
        operation: "addition" or "removal"
    """
    logger.bind(
        violation=kind,
        sku=sku,
        restriction_value=restriction_value,
        actual_value=actual_value,
        operation=operation,
    ).warning("Quantity restriction violated")


def log_validation_summary(
    logger: FilteringBoundLogger,
    operation: str,
    item_count: int,
    violation_count: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a validation batch.

    Args:
        logger: Structlog logger instance
        operation: "addition" or "removal"
        item_count: Number of group keys validated
        violation_count: Number of violations recorded
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        item_count=item_count,
        violation_count=violation_count,
        result="PASS" if violation_count == 0 else "FAIL",
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Quantity restriction validation finished")
