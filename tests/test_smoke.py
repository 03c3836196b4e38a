"""Smoke tests for CLI entry points and module imports.

These tests verify that:
1. All public modules can be imported without errors
2. All CLI commands respond to --help without crashing
3. CLI commands fail gracefully with missing arguments
"""

from __future__ import annotations

import importlib

import pytest
from typer.testing import CliRunner

from sigterm.cli import app

runner = CliRunner()


IMPORTABLE_MODULES = [
    # Core
    "sigterm",
    "sigterm.core",
    "sigterm.core.config",
    "sigterm.core.errors",
    "sigterm.core.logging",
    "sigterm.core.signals",
    # CLI
    "sigterm.cli",
    "sigterm.cli.helpers",
    "sigterm.cli.output",
    "sigterm.cli.commands",
    "sigterm.cli.commands.config_cmd",
    "sigterm.cli.commands.signals",
]


class TestModuleImports:
    """Verify all public modules import without errors."""

    @pytest.mark.parametrize("module_name", IMPORTABLE_MODULES)
    def test_module_imports(self, module_name: str) -> None:
        """Each module should import cleanly without side effects."""
        mod = importlib.import_module(module_name)
        assert mod is not None

    def test_public_api(self) -> None:
        """The top-level package exports the signal API."""
        import sigterm

        for name in sigterm.__all__:
            assert hasattr(sigterm, name)


class TestCommandsSmoke:
    """--help for every command exits cleanly."""

    @pytest.mark.parametrize(
        "args",
        [
            ["--help"],
            ["list", "--help"],
            ["parse", "--help"],
            ["check", "--help"],
            ["config", "--help"],
            ["config", "check", "--help"],
            ["config", "show", "--help"],
            ["config", "init", "--help"],
        ],
    )
    def test_help(self, args: list[str]) -> None:
        """Test --help exits cleanly."""
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "Usage" in result.stdout


class TestMissingArguments:
    """Commands with required arguments fail with a usage error."""

    @pytest.mark.parametrize(
        "args",
        [
            ["parse"],
            ["check"],
            ["config", "check"],
            ["config", "init"],
        ],
    )
    def test_missing_argument_exits_2(self, args: list[str]) -> None:
        """Test that missing arguments are usage errors."""
        result = runner.invoke(app, args)
        assert result.exit_code == 2
