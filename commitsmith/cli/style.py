"""CLI commands for message style information."""

from pathlib import Path

import typer

from commitsmith.styles import MessageStyle, STYLE_DESCRIPTIONS
from commitsmith.user_config import get_default_options

# Subcommand group for style information
style_app = typer.Typer(
    name="style",
    help="Describe the available commit message styles",
    add_completion=False,
)


@style_app.command("list")
def style_list(
    root_dir: Path = typer.Option(
        Path("."),
        "--repo",
        help="Repository whose default style is shown",
    ),
) -> None:
    """List available styles and show the repository default."""
    current_style = get_default_options(root_dir).style

    typer.echo("Available commit message styles:")
    typer.echo()

    for style in MessageStyle:
        desc = STYLE_DESCRIPTIONS[style]
        marker = " ← default" if style == current_style else ""
        typer.echo(f"  • {desc['name']}{marker}")
        typer.echo(f"    {desc['description']}")
        typer.echo()

    typer.echo("Use 'commitsmith style show <style>' for details.")


@style_app.command("show")
def style_show(
    style: str = typer.Argument(
        ...,
        help="Style name (conventional, semantic, descriptive)",
    ),
) -> None:
    """Show the format, variants and an example of a style."""
    try:
        message_style = MessageStyle(style.lower())
    except ValueError:
        typer.echo(f"Invalid style: {style}", err=True)
        typer.echo("Valid styles: conventional, semantic, descriptive")
        raise typer.Exit(1)

    desc = STYLE_DESCRIPTIONS[message_style]

    typer.echo(f"Style: {desc['name']}")
    typer.echo("=" * 50)
    typer.echo()
    typer.echo(f"Description: {desc['description']}")
    typer.echo()
    typer.echo("Format:")
    typer.echo(f"  {desc['format']}")
    typer.echo()
    typer.echo("Variants:")
    for index, variant in enumerate(desc["variants"]):
        typer.echo(f"  {index}. {variant}")
    typer.echo()
    typer.echo("Example:")
    typer.echo(f"  {desc['example']}")
