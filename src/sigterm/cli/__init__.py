"""sigterm CLI.

Built with Typer. Global options (--version, --log-level, --log-format) are
handled by the app callback, which configures logging before any command
runs. Command logic lives in the modules under ``commands/``.

Package structure:
    cli/
    ├── __init__.py           # This file - app assembly
    ├── helpers.py            # Logging state, option parsers, config loading
    ├── output.py             # Rich formatting
    └── commands/
        ├── signals.py        # list, parse, check commands
        └── config_cmd.py     # config check/show/init
"""

from __future__ import annotations

from typing import Annotated

import typer

from sigterm import __version__

from . import helpers as helpers
from .commands import check, config_app, list_signals, parse
from .helpers import (
    configure_global_logging,
    parse_signal_option,
    set_log_format,
    set_log_level,
)
from .output import console

# =============================================================================
# Typer app definition
# =============================================================================

app = typer.Typer(
    name="sigterm",
    help="Inspect and validate process termination signals",
    add_completion=False,
)


# =============================================================================
# Global option callbacks
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"sigterm v{__version__}")
        raise typer.Exit()


def log_level_callback(value: str | None) -> str | None:
    """Set log level from CLI option."""
    if value:
        set_log_level(value)
    return value


def log_format_callback(value: str | None) -> str | None:
    """Set log format from CLI option."""
    if value:
        set_log_format(value)
    return value


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-L",
            callback=log_level_callback,
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
            envvar="SIGTERM_LOG_LEVEL",
        ),
    ] = None,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            callback=log_format_callback,
            help="Log format: console or json",
            envvar="SIGTERM_LOG_FORMAT",
        ),
    ] = None,
) -> None:
    """sigterm - termination signals as named, serializable values."""
    configure_global_logging(console)


# =============================================================================
# Command registration
# =============================================================================

app.command(name="list")(list_signals)
app.command()(parse)
app.command()(check)
app.add_typer(config_app)


__all__ = [
    "app",
    "parse_signal_option",
]
