"""Utility functions for CLI commands."""

import logging
from pathlib import Path
from typing import Optional

import typer

from commitsmith.response import CommitResponse
from commitsmith.styles import MessageStyle
from commitsmith.user_config import DefaultOptions, get_default_options


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_style(value: Optional[str]) -> Optional[MessageStyle]:
    """Parse a --style value, exiting with an error when unknown."""
    if value is None:
        return None
    try:
        return MessageStyle(value.lower())
    except ValueError:
        valid = ", ".join(s.value for s in MessageStyle)
        typer.echo(f"Invalid style: {value}", err=True)
        typer.echo(f"Valid styles: {valid}")
        raise typer.Exit(1)


def get_effective_options(
    root_dir: Path,
    style: Optional[MessageStyle],
    max_suggestions: Optional[int],
    include_scope: Optional[bool],
) -> DefaultOptions:
    """Merge command-line flags over the repository config defaults.

    Args:
        root_dir: Repository root holding .commitsmith/config.yaml.
        style: --style flag value.
        max_suggestions: --max flag value.
        include_scope: --scope/--no-scope flag value.

    Returns:
        The options to use.
    """
    options = get_default_options(root_dir)
    if style is not None:
        options.style = style
    if max_suggestions is not None:
        options.max_suggestions = max_suggestions
    if include_scope is not None:
        options.include_scope = include_scope
    return options


def display_response(response: CommitResponse) -> None:
    """Print suggestions in rank order with their rationale."""
    for index, suggestion in enumerate(response.suggestions, start=1):
        marker = "*" if suggestion.priority == "primary" else " "
        typer.echo(f"{marker} {index}. {suggestion.message}")
        typer.echo(f"     {suggestion.rationale}")

    summary = response.summary
    typer.echo()
    change_types = ", ".join(summary.change_types) or "none"
    typer.echo(f"Files changed: {summary.files_changed} ({change_types})")
    typer.echo(response.usage.how_to_use)
