"""Allow running as ``python -m sigterm``."""

from sigterm.cli import app

if __name__ == "__main__":
    app()
