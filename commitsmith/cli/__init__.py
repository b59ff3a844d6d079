"""CLI entry point for commitsmith.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitsmith.cli.diff import diff_command
from commitsmith.cli.main import main_command
from commitsmith.cli.style import style_app
from commitsmith.cli.suggest import suggest_command

# Main application
app = typer.Typer(
    name="commitsmith",
    help="commitsmith: heuristic commit message suggestions",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(style_app, name="style")

# Add individual commands
app.command("suggest")(suggest_command)
app.command("diff")(diff_command)

app.callback()(main_command)


__all__ = [
    "app",
    "style_app",
    "main_command",
    "suggest_command",
    "diff_command",
]
