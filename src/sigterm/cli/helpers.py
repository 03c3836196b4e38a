"""Shared utilities for sigterm CLI commands.

This module contains helpers used across multiple CLI command modules:
- Logging configuration state set by global options
- Option parsers for signal-valued flags
- Config loading for commands that accept --config
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import typer
from rich.console import Console

from sigterm.core.config import ShutdownConfig
from sigterm.core.errors import ParseError
from sigterm.core.logging import configure_logging, get_logger
from sigterm.core.signals import Signal

_logger = get_logger("cli")


# =============================================================================
# Logging configuration
# =============================================================================


@dataclass
class CliLoggingConfig:
    """CLI logging configuration state set by global options."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    level_set: bool = False
    format_set: bool = False
    configured: bool = False


_log_config = CliLoggingConfig()


def get_log_level() -> str:
    """Get current log level."""
    return _log_config.level


def set_log_level(level: str) -> None:
    """Set the log level.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR), any case.
    """
    _log_config.level = level.upper()  # type: ignore[assignment]
    _log_config.level_set = True


def get_log_format() -> str:
    """Get current log format."""
    return _log_config.format


def set_log_format(fmt: str) -> None:
    """Set the log format.

    Args:
        fmt: Log format string (console, json).
    """
    _log_config.format = fmt.lower()  # type: ignore[assignment]
    _log_config.format_set = True


def configure_global_logging(console: Console) -> None:
    """Configure logging based on global CLI options.

    Only configures once per session.

    Args:
        console: Rich console for error output.

    Raises:
        typer.Exit: If logging configuration fails.
    """
    if _log_config.configured:
        return

    try:
        configure_logging(level=_log_config.level, format=_log_config.format)
        _log_config.configured = True
    except ValueError as e:
        console.print(f"[red]Logging configuration error:[/red] {e}")
        raise typer.Exit(1) from None


def reset_logging_state() -> None:
    """Reset logging state (primarily for testing)."""
    _log_config.level = "WARNING"
    _log_config.format = "console"
    _log_config.level_set = False
    _log_config.format_set = False
    _log_config.configured = False


# =============================================================================
# Option parsing
# =============================================================================


def parse_signal_option(value: str | Signal) -> Signal:
    """Typer ``parser=`` for signal-valued options.

    Accepts any casing of a termination signal name.

    Raises:
        typer.BadParameter: If value is not a termination signal name.
    """
    if isinstance(value, Signal):
        return value
    try:
        return Signal.parse(value)
    except ParseError as e:
        raise typer.BadParameter(str(e)) from None


# =============================================================================
# Config loading
# =============================================================================


def load_config(config_file: Path | None) -> tuple[ShutdownConfig, str]:
    """Load the effective shutdown config.

    Reads config_file when given, otherwise the environment, and applies
    the config's ``log`` section to logging.

    Returns:
        The config and a short description of where it came from.
    """
    if config_file is not None:
        _logger.debug("config_source", source="file", path=str(config_file))
        config, source = ShutdownConfig.from_yaml(config_file), str(config_file)
    else:
        _logger.debug("config_source", source="environment")
        config, source = ShutdownConfig.from_env(), "environment"
    apply_config_logging(config)
    return config, source


def apply_config_logging(config: ShutdownConfig) -> None:
    """Reconfigure logging from a loaded config's ``log`` section.

    --log-level and --log-format (or their environment variables) take
    precedence over the config file.
    """
    level = get_log_level() if _log_config.level_set else config.log.level
    fmt = get_log_format() if _log_config.format_set else config.log.format
    configure_logging(
        level=level,  # type: ignore[arg-type]
        format=fmt,  # type: ignore[arg-type]
        include_timestamps=config.log.include_timestamps,
    )
    _logger.debug("logging_applied", level=level, format=fmt)


__all__ = [
    "CliLoggingConfig",
    "apply_config_logging",
    "configure_global_logging",
    "get_log_format",
    "get_log_level",
    "load_config",
    "parse_signal_option",
    "reset_logging_state",
    "set_log_format",
    "set_log_level",
]
