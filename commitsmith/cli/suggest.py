"""CLI command for generating commit message suggestions."""

from pathlib import Path
from typing import Optional

import typer

from commitsmith.cli.utils import display_response, get_effective_options, parse_style
from commitsmith.engine import generate_commit_messages
from commitsmith.user_config import get_exclude_markers, get_scope_config


def suggest_command(
    root_dir: Path = typer.Argument(
        Path("."),
        help="Repository directory to inspect",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        "-s",
        help="Message style: conventional, semantic or descriptive",
    ),
    max_suggestions: Optional[int] = typer.Option(
        None,
        "--max",
        "-n",
        help="Number of suggestions to generate (1-5)",
    ),
    include_scope: Optional[bool] = typer.Option(
        None,
        "--scope/--no-scope",
        help="Include the scope in conventional messages",
    ),
    show_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the full response as JSON",
    ),
) -> None:
    """Suggest commit messages for the staged changes."""
    options = get_effective_options(root_dir, parse_style(style), max_suggestions, include_scope)

    response = generate_commit_messages(
        str(root_dir),
        style=options.style,
        max_suggestions=options.max_suggestions,
        include_scope=options.include_scope,
        exclude_markers=get_exclude_markers(root_dir),
        scope_config=get_scope_config(root_dir),
    )

    if show_json:
        typer.echo(response.to_json())
    else:
        display_response(response)

    if response.primary is not None and response.primary.type == "error":
        raise typer.Exit(1)
