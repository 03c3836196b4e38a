"""Termination signal value type.

This module provides the Signal type: a named, serializable wrapper around a
platform signal number, used to carry shutdown signals through configuration
(environment variables, command-line flags, YAML files) and to classify
arbitrary signals as termination signals.

Termination signals (see the GNU libc manual, "Termination Signals"):
- SIGINT: Interrupt from the keyboard (Ctrl-C)
- SIGHUP: Hangup of the controlling terminal
- SIGTERM: Polite termination request
- SIGQUIT: Quit from the keyboard, with core dump
- SIGKILL: Immediate, uncatchable termination

The text form of a Signal is its canonical uppercase name. Parsing is
case-insensitive and accepts only the five names above.
"""

from __future__ import annotations

import signal
from types import MappingProxyType
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from sigterm.core.errors import ParseError


class Signal(int):
    """A termination signal used for initiating the shutdown procedure.

    Signal is an ``int`` subclass holding the platform's native signal number,
    so it compares equal to raw values from the ``signal`` module and can be
    passed anywhere the platform expects a signal number::

        >>> Signal(signal.SIGTERM) == signal.SIGTERM
        True
        >>> str(Signal.parse("sigterm"))
        'SIGTERM'

    Values are immutable; parsing returns a new Signal.
    """

    __slots__ = ()

    def __new__(cls, value: int) -> Signal:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"Signal() expects a platform signal number, got {type(value).__name__}"
            )
        return super().__new__(cls, value)

    def unwrap(self) -> int:
        """Return the underlying platform signal number."""
        return int(self)

    def is_termination(self) -> bool:
        """Check whether this signal is one of the termination signals."""
        return is_termination(self)

    def __str__(self) -> str:
        name = _SIGNAL_NAMES.get(self)
        if name is not None:
            return name
        return f"{type(self).__name__}({int(self)}): unknown signal"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def marshal_text(self) -> bytes:
        """Serialize the signal to its canonical text form.

        Returns:
            UTF-8 encoded ``str(self)``. Never fails; unknown values encode
            their diagnostic string.
        """
        return str(self).encode("utf-8")

    @classmethod
    def parse(cls, text: str) -> Signal:
        """Parse a termination signal name.

        Matching is case-insensitive under Unicode case folding: "sigterm",
        "SigTerm" and "SIGTERM" all yield SIGTERM.

        Args:
            text: Signal name to parse.

        Returns:
            The matching Signal.

        Raises:
            ParseError: If text is not one of the five termination signal
                names (including the empty string and numeric strings).
            TypeError: If text is not a str.
        """
        if not isinstance(text, str):
            raise TypeError(f"Signal.parse() expects str, got {type(text).__name__}")
        sig = _SIGNALS_BY_NAME.get(text.casefold())
        if sig is None:
            raise ParseError(text)
        return sig

    @classmethod
    def unmarshal_text(cls, data: bytes | bytearray | memoryview) -> Signal:
        """Deserialize a signal from UTF-8 encoded text.

        Args:
            data: Encoded signal name.

        Returns:
            The matching Signal.

        Raises:
            ParseError: If the bytes are not valid UTF-8 or do not name a
                termination signal.
            TypeError: If data is not bytes-like.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Signal.unmarshal_text() expects bytes, got {type(data).__name__}"
            )
        raw = bytes(data)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(raw.decode("utf-8", errors="replace")) from exc
        return cls.parse(text)

    # -- Pydantic integration -------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Let Signal be used directly as a Pydantic model field.

        Text input is parsed; JSON output is the canonical name.
        """
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "string", "enum": list(signal_names())}

    @classmethod
    def _validate(cls, value: Any) -> Signal:
        """Coerce a config value into a termination Signal.

        Plain integers are rejected: the text form is the config contract.
        """
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (bytes, bytearray)):
            return cls.unmarshal_text(value)
        if isinstance(value, Signal):
            if not is_termination(value):
                raise ValueError(f"{value!s} is not a termination signal")
            return value
        if isinstance(value, signal.Signals):
            if not is_termination(value):
                raise ValueError(f"{value.name} is not a termination signal")
            return cls(value)
        raise ValueError(
            f"expected a termination signal name, got {type(value).__name__}"
        )


# Supported shutdown signals
SIGINT = Signal(signal.SIGINT)    # Keyboard interrupt
SIGHUP = Signal(signal.SIGHUP)    # Terminal hangup
SIGTERM = Signal(signal.SIGTERM)  # Graceful termination request
SIGQUIT = Signal(signal.SIGQUIT)  # Keyboard quit
SIGKILL = Signal(signal.SIGKILL)  # Forced kill

_SIGNAL_NAMES: MappingProxyType[Signal, str] = MappingProxyType({
    SIGINT: "SIGINT",
    SIGHUP: "SIGHUP",
    SIGTERM: "SIGTERM",
    SIGQUIT: "SIGQUIT",
    SIGKILL: "SIGKILL",
})

# Derived from _SIGNAL_NAMES; never edit separately. Keyed by casefolded name.
_SIGNALS_BY_NAME: MappingProxyType[str, Signal] = MappingProxyType(
    {name.casefold(): sig for sig, name in _SIGNAL_NAMES.items()}
)
_TERMINATION_NUMBERS: frozenset[int] = frozenset(int(sig) for sig in _SIGNAL_NAMES)

TERMINATION_SIGNALS: tuple[Signal, ...] = tuple(_SIGNAL_NAMES)


def signal_names() -> tuple[str, ...]:
    """Get the canonical names of the termination signals, in table order."""
    return tuple(_SIGNAL_NAMES.values())


def is_termination(sig: Signal | int) -> bool:
    """Check whether a signal is a termination signal.

    Accepts either a Signal or a raw platform signal number (a plain int or a
    ``signal.Signals`` member). A Signal is unwrapped and tested as its raw
    value, so both forms always agree.

    Args:
        sig: The signal to classify.

    Returns:
        True if sig is SIGINT, SIGHUP, SIGTERM, SIGQUIT or SIGKILL.

    Raises:
        TypeError: If sig is not an integer signal value.
    """
    if isinstance(sig, Signal):
        return is_termination(sig.unwrap())
    if isinstance(sig, bool) or not isinstance(sig, int):
        raise TypeError(
            f"is_termination() expects a signal number, got {type(sig).__name__}"
        )
    return int(sig) in _TERMINATION_NUMBERS


__all__ = [
    "SIGHUP",
    "SIGINT",
    "SIGKILL",
    "SIGQUIT",
    "SIGTERM",
    "TERMINATION_SIGNALS",
    "Signal",
    "is_termination",
    "signal_names",
]
