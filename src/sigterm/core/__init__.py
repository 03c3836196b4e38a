"""Core signal types, errors and configuration."""

from sigterm.core.errors import ParseError, SignalError
from sigterm.core.signals import (
    SIGHUP,
    SIGINT,
    SIGKILL,
    SIGQUIT,
    SIGTERM,
    TERMINATION_SIGNALS,
    Signal,
    is_termination,
    signal_names,
)

__all__ = [
    "ParseError",
    "SIGHUP",
    "SIGINT",
    "SIGKILL",
    "SIGQUIT",
    "SIGTERM",
    "Signal",
    "SignalError",
    "TERMINATION_SIGNALS",
    "is_termination",
    "signal_names",
]
