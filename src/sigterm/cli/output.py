"""Rich output formatting for the sigterm CLI.

Centralizes the shared console, table builders and error output so every
command renders signals the same way.
"""

from __future__ import annotations

import json
import signal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sigterm.core.signals import SIGHUP, SIGINT, SIGKILL, SIGQUIT, SIGTERM, Signal

# =============================================================================
# Shared console instance
# =============================================================================

console = Console()

SIGNAL_DESCRIPTIONS: dict[Signal, str] = {
    SIGINT: "Interrupt from keyboard",
    SIGHUP: "Hangup of controlling terminal",
    SIGTERM: "Termination request",
    SIGQUIT: "Quit from keyboard",
    SIGKILL: "Kill (cannot be caught)",
}


def describe_signal(sig: Signal) -> str:
    """Get a display name for any signal number.

    Termination signals use their canonical name; other platform signals use
    the platform name, and unknown numbers fall back to "signal N".
    """
    if sig.is_termination():
        return str(sig)
    try:
        return signal.Signals(sig.unwrap()).name
    except ValueError:
        return f"signal {sig.unwrap()}"


def create_signals_table() -> Table:
    """Create a styled table for termination signal listings.

    Returns:
        Rich Table configured for signal display.
    """
    table = Table(title="Termination Signals")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Number", justify="right")
    table.add_column("Description", style="dim")
    return table


def create_simple_table(show_header: bool = False) -> Table:
    """Create a simple table without box styling, for key-value displays."""
    return Table(show_header=show_header, box=None)


def print_json(data: object, console_instance: Console | None = None) -> None:
    """Print data as indented JSON without Rich markup processing."""
    out = console_instance or console
    out.print_json(json.dumps(data))


def output_error(
    message: str,
    *,
    hints: list[str] | None = None,
    console_instance: Console | None = None,
) -> None:
    """Output a formatted error with optional hints.

    Args:
        message: The error message to display. Markup in it is escaped.
        hints: Optional list of hint strings for the user.
        console_instance: Console to print to. Defaults to module console.
    """
    out = console_instance or console
    out.print(f"[red]Error:[/red] {escape(message)}")

    if hints:
        out.print()
        out.print("[dim]Hints:[/dim]")
        for hint in hints:
            out.print(f"  - {escape(hint)}")


__all__ = [
    "SIGNAL_DESCRIPTIONS",
    "console",
    "create_signals_table",
    "create_simple_table",
    "describe_signal",
    "output_error",
    "print_json",
]
