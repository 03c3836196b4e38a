"""CLI command modules.

- signals.py: list, parse, check
- config_cmd.py: the `config` command group
"""

from .config_cmd import config_app
from .signals import check, list_signals, parse

__all__ = [
    "check",
    "config_app",
    "list_signals",
    "parse",
]
