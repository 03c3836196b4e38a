"""Shutdown configuration commands for the sigterm CLI.

This module implements the `sigterm config` command group for validating,
viewing and creating shutdown config files.

Subcommands:
- `sigterm config check`: Validate a YAML config file
- `sigterm config show`: Display the effective config as a Rich table
- `sigterm config init`: Create a default config file
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape

from sigterm.core.config import ShutdownConfig
from sigterm.core.logging import get_logger
from sigterm.core.signals import SIGTERM, Signal

from ..helpers import load_config, parse_signal_option
from ..output import console, create_simple_table, output_error

_logger = get_logger("cli.config")

config_app = typer.Typer(
    name="config",
    help="Manage shutdown configuration.",
    invoke_without_command=True,
)


def _print_validation_errors(exc: ValidationError) -> None:
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "(root)"
        console.print(f"  [red]-[/red] {escape(loc)}: {escape(err['msg'])}")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Manage shutdown configuration."""
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


@config_app.command()
def check(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to the YAML config file"),
    ],
) -> None:
    """Validate a shutdown config file."""
    try:
        config = ShutdownConfig.from_yaml(config_file)
    except FileNotFoundError:
        output_error(f"Config file not found: {config_file}")
        raise typer.Exit(1) from None
    except yaml.YAMLError as e:
        console.print(f"[red]Invalid config:[/red] {escape(str(config_file))}")
        console.print(f"  [red]-[/red] YAML syntax error: {escape(str(e))}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        _logger.debug("config_invalid", path=str(config_file), error_count=e.error_count())
        console.print(f"[red]Invalid config:[/red] {escape(str(config_file))}")
        _print_validation_errors(e)
        raise typer.Exit(1) from None

    console.print(
        f"[green]Valid config:[/green] {escape(str(config_file))} "
        f"(stop_signal={config.stop_signal!s})"
    )


@config_app.command()
def show(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to the YAML config file (default: read environment)",
        ),
    ] = None,
) -> None:
    """Show the effective shutdown configuration."""
    try:
        config, source = load_config(config_file)
    except FileNotFoundError:
        output_error(f"Config file not found: {config_file}")
        raise typer.Exit(1) from None
    except (yaml.YAMLError, ValidationError) as e:
        output_error(f"Invalid config: {e}")
        raise typer.Exit(1) from None

    table = create_simple_table()
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("source", escape(source))
    table.add_row("stop_signal", f"{config.stop_signal!s} ({config.stop_signal.unwrap()})")
    table.add_row("log.level", config.log.level)
    table.add_row("log.format", config.log.format)
    table.add_row("log.include_timestamps", str(config.log.include_timestamps))
    console.print(table)


@config_app.command()
def init(
    path: Annotated[Path, typer.Argument(help="Where to write the config file")],
    stop_signal: Annotated[
        Signal | None,
        typer.Option(
            "--stop-signal",
            "-s",
            parser=parse_signal_option,
            help="Termination signal used to request shutdown (default: SIGTERM)",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create a shutdown config file with default settings."""
    if path.exists() and not force:
        output_error(
            f"Config file already exists: {path}",
            hints=["Use --force to overwrite it"],
        )
        raise typer.Exit(1)

    config = ShutdownConfig(stop_signal=stop_signal if stop_signal is not None else SIGTERM)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_yaml())
    _logger.info("config_written", path=str(path), stop_signal=str(config.stop_signal))
    console.print(f"[green]Wrote config:[/green] {escape(str(path))}")
