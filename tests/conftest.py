"""Pytest fixtures for sigterm tests."""

import logging
from pathlib import Path
from typing import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Reset logging state before and after each test.

    This ensures test isolation for logging configuration.
    """
    from sigterm.cli import helpers

    helpers.reset_logging_state()

    # Reset structlog to default state
    structlog.reset_defaults()

    # Clear all handlers from root logger
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    for handler in original_handlers:
        root_logger.removeHandler(handler)

    yield

    helpers.reset_logging_state()
    structlog.reset_defaults()

    # Restore original handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture(autouse=True)
def clean_signal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SIGTERM_* variables so the host environment cannot leak in."""
    for var in ("SIGTERM_STOP_SIGNAL", "SIGTERM_LOG_LEVEL", "SIGTERM_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_yaml_config(tmp_path: Path) -> Path:
    """Write a valid shutdown config and return its path."""
    config_path = tmp_path / "shutdown.yaml"
    config_path.write_text(
        "stop_signal: sigint\n"
        "log:\n"
        "  level: DEBUG\n"
        "  format: json\n"
    )
    return config_path
