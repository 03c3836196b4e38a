"""Configuration models for shutdown signal settings.

Defines Pydantic v2 models that carry a termination Signal as a field, plus
loaders for YAML files and environment variables. Signals are written and
read in their canonical text form ("SIGTERM"); any casing is accepted.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from sigterm.core.logging import get_logger
from sigterm.core.signals import SIGTERM, Signal

_logger = get_logger("config")

DEFAULT_ENV_PREFIX = "SIGTERM_"


class LogConfig(BaseModel):
    """Configuration for structured logging.

    Controls log level, output format and timestamps.
    """

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum log level to capture",
    )
    format: Literal["console", "json"] = Field(
        default="console",
        description="Output format: json for structured, console for human-readable",
    )
    include_timestamps: bool = Field(
        default=True,
        description="Include ISO8601 UTC timestamps in log entries",
    )


class ShutdownConfig(BaseModel):
    """Top-level shutdown configuration.

    Holds the signal that requests a graceful shutdown. The field accepts
    any casing of SIGINT, SIGHUP, SIGTERM, SIGQUIT or SIGKILL and rejects
    everything else, including signal numbers.
    """

    model_config = ConfigDict(extra="forbid")

    stop_signal: Signal = Field(
        default=SIGTERM,
        description="Termination signal used to request shutdown "
        "(SIGINT, SIGHUP, SIGTERM, SIGQUIT or SIGKILL)",
    )
    log: LogConfig = Field(
        default_factory=LogConfig,
        description="Structured logging configuration",
    )

    @classmethod
    def from_yaml(cls, path: Path) -> ShutdownConfig:
        """Load shutdown configuration from a YAML file.

        Raises:
            FileNotFoundError: If path does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the content is not a valid config.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        config = cls.model_validate(data or {})
        _logger.debug("config_loaded", path=str(path), stop_signal=str(config.stop_signal))
        return config

    @classmethod
    def from_yaml_string(cls, yaml_str: str) -> ShutdownConfig:
        """Load shutdown configuration from a YAML string."""
        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data or {})

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = DEFAULT_ENV_PREFIX,
    ) -> ShutdownConfig:
        """Load shutdown configuration from environment variables.

        Reads ``{prefix}STOP_SIGNAL``, ``{prefix}LOG_LEVEL`` and
        ``{prefix}LOG_FORMAT``. Unset or blank variables keep their defaults.
        A set signal name is parsed as written, surrounding whitespace included.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
            prefix: Variable name prefix.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        log: dict[str, Any] = {}

        stop_signal = env.get(f"{prefix}STOP_SIGNAL", "")
        if stop_signal.strip():
            data["stop_signal"] = stop_signal
        level = env.get(f"{prefix}LOG_LEVEL", "").strip()
        if level:
            log["level"] = level.upper()
        fmt = env.get(f"{prefix}LOG_FORMAT", "").strip()
        if fmt:
            log["format"] = fmt.lower()
        if log:
            data["log"] = log

        _logger.debug("config_from_env", prefix=prefix, keys=sorted(data))
        return cls.model_validate(data)

    def to_yaml(self) -> str:
        """Dump the configuration as YAML, with signals in canonical text form."""
        return yaml.safe_dump(
            self.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
        )


def signal_from_env(
    name: str,
    default: Signal | None = None,
    environ: Mapping[str, str] | None = None,
) -> Signal | None:
    """Read a termination signal from a single environment variable.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is unset or blank.
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        The parsed Signal, or default.

    Raises:
        ParseError: If the variable is set to something other than a
            termination signal name.
    """
    env = os.environ if environ is None else environ
    raw = env.get(name, "")
    if not raw.strip():
        _logger.debug("signal_env_unset", name=name, default=str(default))
        return default
    return Signal.parse(raw)


__all__ = [
    "DEFAULT_ENV_PREFIX",
    "LogConfig",
    "ShutdownConfig",
    "signal_from_env",
]
