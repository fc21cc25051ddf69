"""
Centralized logging configuration for the band overlay.

This module provides standardized logging configuration using structlog
for all components. Hosts embedding the plugin may call configure_logging
once at start-up; otherwise structlog's own defaults apply.

The render path logs on every redraw, so it gets its own level and is kept
at WARNING unless asked for explicitly.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import EventDict, FilteringBoundLogger, WrappedLogger

PACKAGE_LOGGER = "bbands_app"
RENDER_LOGGER = "bbands_app.render"


def add_component(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """
    Tag events with the package component that emitted them.

    "bbands_app.metrics.rolling" becomes component="metrics". Loggers from
    outside the package are left untouched.
    """
    name = event_dict.get("logger", "")
    if name.startswith(PACKAGE_LOGGER + "."):
        event_dict.setdefault("component", name.split(".")[1])
    return event_dict


def configure_logging(
    level: str = "INFO",
    render_level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: TextIO = sys.stdout,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the overlay and the host process.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        render_level: Level for per-redraw render logs
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        stream: Where log lines are written
        extra_processors: Additional structlog processors to include
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream,
        format="%(message)s"
    )
    logging.getLogger(RENDER_LOGGER).setLevel(getattr(logging, render_level.upper()))

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        add_component,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
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


def get_render_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with render-pass context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for draw calls
    """
    return structlog.get_logger(name, subsystem="render")


def log_param_rejection(
    logger: FilteringBoundLogger,
    indicator_name: str,
    field: str,
    value: Any,
    reason: str,
) -> None:
    """
    Log a rejected parameter set with standardized format.

    Args:
        logger: Structlog logger instance
        indicator_name: Registered indicator name
        field: Offending parameter
        value: Offending value
        reason: Why it was rejected
    """
    logger.bind(
        indicator=indicator_name,
        field=field,
        value=value,
        reason=reason,
    ).warning("Parameters rejected")
