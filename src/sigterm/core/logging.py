"""Structured logging infrastructure for sigterm.

Provides structured logging using structlog on top of the stdlib logging
module, with console output for humans and JSON output for log collectors.
The core signal types never log; this module serves the configuration and
command-line layers.

Example usage:
    from sigterm.core.logging import get_logger, configure_logging

    # Configure once at startup
    configure_logging(level="DEBUG", format="console")

    # Get a component-specific logger
    logger = get_logger("config")

    # Log with structured fields
    logger.info("config_loaded", path="shutdown.yaml")

    # Bind context for a scope
    env_logger = logger.bind(source="env")
    env_logger.debug("variable_unset", name="SIGTERM_STOP_SIGNAL")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["console", "json"]

_VALID_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})
_VALID_FORMATS: frozenset[str] = frozenset({"console", "json"})


def _add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that adds ISO8601 UTC timestamp.

    Args:
        logger: The wrapped logger object.
        method_name: The name of the method called on the logger.
        event_dict: The event dict containing all bound and event data.

    Returns:
        Event dict with timestamp added.
    """
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class SigtermLogger:
    """Component logger wrapper around structlog.

    The logger is bound to a component name and can have additional context
    bound for a specific scope.

    Note: the underlying structlog logger is fetched on every call, so loggers
    created at module import time still respect configuration set later via
    configure_logging().
    """

    def __init__(
        self,
        component: str,
        **initial_context: Any,
    ) -> None:
        """Initialize a logger for a component.

        Args:
            component: The component name (e.g., "config", "cli").
            **initial_context: Additional context to bind.
        """
        self._component = component
        self._context: dict[str, Any] = {"component": component, **initial_context}

    def _get_logger(self) -> structlog.stdlib.BoundLogger:
        logger: structlog.stdlib.BoundLogger = structlog.get_logger().bind(**self._context)
        return logger

    def bind(self, **context: Any) -> SigtermLogger:
        """Create a new logger with additional bound context.

        Args:
            **context: Additional context to bind.

        Returns:
            A new SigtermLogger with the additional context bound.
        """
        new_logger = SigtermLogger.__new__(SigtermLogger)
        new_logger._component = self._component
        new_logger._context = {**self._context, **context}
        return new_logger

    def unbind(self, *keys: str) -> SigtermLogger:
        """Create a new logger with specified keys removed.

        Args:
            *keys: Keys to remove from the bound context.

        Returns:
            A new SigtermLogger with the specified keys unbound.
        """
        new_logger = SigtermLogger.__new__(SigtermLogger)
        new_logger._component = self._component
        new_logger._context = {k: v for k, v in self._context.items() if k not in keys}
        return new_logger

    def debug(self, event: str, **kw: Any) -> None:
        """Log a debug message."""
        self._get_logger().debug(event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        """Log an info message."""
        self._get_logger().info(event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        """Log a warning message."""
        self._get_logger().warning(event, **kw)


def _get_processors(format: LogFormat, include_timestamps: bool) -> list[Processor]:  # noqa: A002
    """Build the structlog processor chain for the given output format."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,  # Filter before processing
        structlog.stdlib.add_log_level,
    ]

    if include_timestamps:
        processors.append(_add_timestamp)

    renderer: Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    processors.extend([
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ])

    return processors


def configure_logging(
    level: LogLevel = "WARNING",
    format: LogFormat = "console",  # noqa: A002
    include_timestamps: bool = True,
) -> None:
    """Configure sigterm structured logging.

    Log output goes to stderr so it never mixes with command output on
    stdout. Should be called once at application startup.

    Args:
        level: Minimum log level to capture.
        format: "console" for human-readable, "json" for structured output.
        include_timestamps: Whether to include ISO8601 timestamps.

    Raises:
        ValueError: If level or format is not recognized.
    """
    level_name = level.upper()
    if level_name not in _VALID_LEVELS:
        raise ValueError(
            f"Invalid log level '{level}'. Use one of: {', '.join(sorted(_VALID_LEVELS))}"
        )
    if format not in _VALID_FORMATS:
        raise ValueError(
            f"Invalid log format '{format}'. Use one of: {', '.join(sorted(_VALID_FORMATS))}"
        )

    log_level = getattr(logging, level_name)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    # cache_logger_on_first_use=False so import-time loggers follow reconfiguration
    structlog.configure(
        processors=_get_processors(format, include_timestamps),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str, **initial_context: Any) -> SigtermLogger:
    """Get a logger for a component.

    Args:
        component: The component name (e.g., "config", "cli").
        **initial_context: Additional context to bind.

    Returns:
        A SigtermLogger instance bound to the component.
    """
    return SigtermLogger(component, **initial_context)


__all__ = [
    "LogFormat",
    "LogLevel",
    "SigtermLogger",
    "configure_logging",
    "get_logger",
]
