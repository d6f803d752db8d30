"""sdxxd CLI - Command-line interface for the sdxxd tool."""

from sdxxd.cli.main import app, run_cli

__all__ = ["app", "run_cli"]
