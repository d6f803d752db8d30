"""Command-line interface for sdxxd.

This module provides the Typer-based CLI that turns a file or standard
input into a hex dump, or reverts a dump back into binary.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from sdxxd import __version__
from sdxxd.config import load_config
from sdxxd.core.exceptions import (
    ConfigError,
    DecodeError,
    SdxxdError,
    SeekError,
    SourceError,
    UsageError,
)
from sdxxd.core.logging import setup_logging
from sdxxd.core.models import RawFlags, SetFlags
from sdxxd.drivers import select_driver

# Exit code for an interrupted run
EXIT_INTERRUPTED = 1

app = typer.Typer(
    name="sdxxd",
    help="sdxxd - make a hex dump or do the reverse.",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)


def _display_error(error: Exception, title: str = "Error") -> None:
    """Display an error with rich formatting.

    Args:
        error: The exception to display.
        title: The title for the error panel.
    """
    if isinstance(error, UsageError):
        heading = "Usage Error"
        extra = f"\n\n[dim]Flag:[/dim] {error.flag}" if error.flag else ""
    elif isinstance(error, SeekError):
        heading = "Seek Error"
        extra = ""
    elif isinstance(error, SourceError):
        heading = "Input Error"
        extra = f"\n\n[dim]Path:[/dim] {escape(error.path)}" if error.path else ""
    elif isinstance(error, DecodeError):
        heading = "Decode Error"
        extra = f"\n\n[dim]Line:[/dim] {error.line_number}" if error.line_number else ""
    elif isinstance(error, ConfigError):
        heading = "Configuration Error"
        extra = f"\n\n[dim]Config key:[/dim] {error.config_key}" if error.config_key else ""
    elif isinstance(error, SdxxdError):
        heading = title
        extra = ""
    else:
        error_console.print(
            Panel(
                f"[bold red]{title}[/bold red]\n\n{escape(str(error))}",
                title="[red]Error[/red]",
                border_style="red",
            )
        )
        return

    message = f"[bold red]{heading}[/bold red]\n\nsdxxd: {escape(error.message)}{extra}"
    error_console.print(Panel(message, title=f"[red]{heading}[/red]", border_style="red"))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]sdxxd[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.command()
def main(
    infile: Annotated[
        Optional[str],
        typer.Argument(
            help="File to dump; omit or use '-' for standard input",
            show_default=False,
        ),
    ] = None,
    little_endian: Annotated[
        bool,
        typer.Option("--little-endian", "-e", help="Switch to little-endian hex dump"),
    ] = False,
    group_size: Annotated[
        Optional[str],
        typer.Option("--group-size", "-g", help="Number of octets per group"),
    ] = None,
    length: Annotated[
        Optional[str],
        typer.Option("--length", "-l", help="Stop after this many octets"),
    ] = None,
    cols: Annotated[
        Optional[str],
        typer.Option("--cols", "-c", help="Octets per line [default: 16]"),
    ] = None,
    seek: Annotated[
        Optional[str],
        typer.Option("--seek", "-s", help="Start at this byte offset (negative: from end)"),
    ] = None,
    revert: Annotated[
        bool,
        typer.Option("--revert", "-r", help="Convert a hex dump into binary"),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Path to a configuration file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on standard error"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Make a hex dump of a file or standard input, or do the reverse.

    Exit codes:
        0: Success
        1: Invalid length, columns or group size
        2: Input file missing or unreadable, or malformed dump in a file
        4: Seek requested on standard input
    """
    try:
        settings = load_config(config_path=config)
    except ConfigError as e:
        _display_error(e)
        raise typer.Exit(code=e.exit_code) from None

    level = getattr(logging, settings.log_level.value.upper())
    logger = setup_logging(verbose=verbose, level=level)

    # Flags left at None were not given on the command line.
    defaults = RawFlags()
    raw = RawFlags(
        little_endian=little_endian,
        group_size=group_size if group_size is not None else defaults.group_size,
        length=length if length is not None else defaults.length,
        columns=cols if cols is not None else defaults.columns,
        seek=seek if seek is not None else defaults.seek,
        revert=revert,
    )
    set_flags = SetFlags(
        group_size=group_size is not None,
        length=length is not None,
        columns=cols is not None,
        seek=seek is not None,
    )

    driver = select_driver(
        infile,
        raw,
        set_flags,
        read_buffer_size=settings.dump.read_buffer_size,
        batch_size=settings.revert.batch_size,
    )
    logger.debug("using %s driver with %s", driver.driver_type, set_flags)

    try:
        status = driver.run()
    except SdxxdError as e:
        _display_error(e)
        raise typer.Exit(code=e.exit_code) from None
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(code=EXIT_INTERRUPTED) from None

    raise typer.Exit(code=status)


def run_cli() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run_cli()
