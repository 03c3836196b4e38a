"""Signal inspection commands for the sigterm CLI.

- `sigterm list`: Show the termination signals as a table
- `sigterm parse`: Parse a signal name into its canonical form
- `sigterm check`: Classify a signal number or platform signal name
"""

from __future__ import annotations

import signal
from typing import Annotated

import typer

from sigterm.core.errors import ParseError
from sigterm.core.logging import get_logger
from sigterm.core.signals import TERMINATION_SIGNALS, Signal, signal_names

from ..output import (
    SIGNAL_DESCRIPTIONS,
    console,
    create_signals_table,
    describe_signal,
    output_error,
    print_json,
)

_logger = get_logger("cli.signals")

# Exit code for `check` when the value is not a termination signal
EXIT_NOT_TERMINATION = 1
# Exit code for `check` when the value names no signal at all
EXIT_UNKNOWN_VALUE = 2


def list_signals(
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON"),
    ] = False,
) -> None:
    """List the supported termination signals."""
    if json_output:
        print_json([
            {"name": str(sig), "number": sig.unwrap()} for sig in TERMINATION_SIGNALS
        ])
        return

    table = create_signals_table()
    for sig in TERMINATION_SIGNALS:
        table.add_row(str(sig), str(sig.unwrap()), SIGNAL_DESCRIPTIONS[sig])
    console.print(table)


def parse(
    text: Annotated[str, typer.Argument(help="Signal name, e.g. SIGTERM (any case)")],
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON"),
    ] = False,
) -> None:
    """Parse a termination signal name and print its canonical form."""
    try:
        sig = Signal.parse(text)
    except ParseError as e:
        _logger.debug("signal_parse_failed", text=e.text)
        if json_output:
            print_json({"success": False, "message": str(e)})
        else:
            output_error(
                str(e),
                hints=[f"Use one of: {', '.join(signal_names())}"],
            )
        raise typer.Exit(1) from None

    _logger.debug("signal_parsed", text=text, signal=str(sig))
    if json_output:
        print_json({"success": True, "name": str(sig), "number": sig.unwrap()})
        return
    console.print(f"[cyan]{sig!s}[/cyan] ({sig.unwrap()})")


def _resolve_signal_value(value: str) -> Signal | None:
    """Resolve a signal number or platform signal name to a Signal."""
    stripped = value.strip()
    try:
        return Signal(int(stripped))
    except ValueError:
        pass
    try:
        return Signal.parse(stripped)
    except ParseError:
        pass
    try:
        return Signal(signal.Signals[stripped.upper()])
    except KeyError:
        return None


def check(
    value: Annotated[
        str,
        typer.Argument(help="Signal number or platform signal name, e.g. 15 or SIGSEGV"),
    ],
) -> None:
    """Check whether a signal is a termination signal.

    Exits 0 for a termination signal, 1 for any other signal, and 2 when
    VALUE is neither a number nor a known signal name.
    """
    sig = _resolve_signal_value(value)
    if sig is None:
        output_error(f"unknown signal: {value}")
        raise typer.Exit(EXIT_UNKNOWN_VALUE)

    name = describe_signal(sig)
    if sig.is_termination():
        console.print(f"[green]{name}[/green] ({sig.unwrap()}) is a termination signal")
        return

    console.print(f"[yellow]{name}[/yellow] ({sig.unwrap()}) is not a termination signal")
    raise typer.Exit(EXIT_NOT_TERMINATION)
