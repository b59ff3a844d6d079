"""CLI command for listing per-file diffs."""

import json
from pathlib import Path

import typer

from commitsmith.engine import get_file_changes
from commitsmith.exceptions import GitOperationError, ValidationError
from commitsmith.user_config import get_exclude_markers


def diff_command(
    root_dir: Path = typer.Argument(
        Path("."),
        help="Repository directory to inspect",
    ),
    show_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the diffs as a JSON list",
    ),
) -> None:
    """Show the diff of every non-excluded changed file."""
    try:
        diffs = get_file_changes(str(root_dir), exclude_markers=get_exclude_markers(root_dir))
    except (ValidationError, GitOperationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if show_json:
        typer.echo(json.dumps([d.model_dump() for d in diffs], indent=2))
        return

    if not diffs:
        typer.echo("No changed files.")
        return

    for file_diff in diffs:
        typer.echo(f"=== {file_diff.file}")
        typer.echo(file_diff.diff)
