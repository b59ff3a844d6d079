"""Top-level callback for the commitsmith CLI."""

from typing import Optional

import typer

from commitsmith import __version__
from commitsmith.cli.utils import configure_logging


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"commitsmith {__version__}")
        raise typer.Exit()


def main_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Suggest commit messages from the changes in a git repository."""
    configure_logging(verbose)
