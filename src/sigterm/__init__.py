"""sigterm - termination signals as named, serializable values.

Example:
    >>> from sigterm import Signal, is_termination
    >>> sig = Signal.parse("sigterm")
    >>> str(sig), is_termination(sig)
    ('SIGTERM', True)
"""

from sigterm.core import (
    SIGHUP,
    SIGINT,
    SIGKILL,
    SIGQUIT,
    SIGTERM,
    TERMINATION_SIGNALS,
    ParseError,
    Signal,
    SignalError,
    is_termination,
    signal_names,
)

__version__ = "0.1.0"

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
    "__version__",
    "is_termination",
    "signal_names",
]
