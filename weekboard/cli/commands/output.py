"""
FILE: weekboard/cli/commands/output.py
PURPOSE: Export and reset commands
"""

from pathlib import Path
from typing import Optional

import typer

from ..main import app, console, error_console, get_session
from ...core.constants import EXPORT_EXTENSION
from ...core.weeks import default_export_name


def with_export_extension(path: Path) -> Path:
    """Append .xlsx unless the name already ends with it (case-insensitive)."""
    if path.suffix.lower() != EXPORT_EXTENSION:
        return path.with_name(path.name + EXPORT_EXTENSION)
    return path


def choose_destination(suggested: Path, yes: bool) -> Optional[Path]:
    """
    Ask for the export file, confirming before overwriting.

    Returns:
        Chosen path, or None if the user cancelled
    """
    try:
        answer = typer.prompt("Save as", default=str(suggested)) if not yes else str(suggested)
    except typer.Abort:
        return None

    answer = answer.strip()
    if not answer:
        return None

    path = with_export_extension(Path(answer).expanduser())

    if path.exists() and not yes:
        try:
            if not typer.confirm(f"{path} exists. Overwrite?", default=False):
                return None
        except typer.Abort:
            return None
    return path


@app.command()
def export(
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output .xlsx file"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="Template .xlsx file"),
    yes: bool = typer.Option(False, "-y", "--yes", help="Don't prompt; overwrite existing files"),
):
    """
    Export the board to a spreadsheet.

    The default file name is "<week>KW <DD.MM>-<DD.MM>.xlsx".

    Example:
        weekboard export
        weekboard export --out plan.xlsx --template GrafikTemplate.xlsx
    """
    session = get_session()
    board = session.board

    if out is not None:
        destination = with_export_extension(out)
        if destination.exists() and not yes:
            try:
                if not typer.confirm(f"{destination} exists. Overwrite?", default=False):
                    destination = None
            except typer.Abort:
                destination = None
    else:
        suggested = Path(default_export_name(board.year, board.week_number) + EXPORT_EXTENSION)
        destination = choose_destination(suggested, yes)

    result = session.export(destination, template_path=template)

    if result.success:
        console.print(f"[green]✓[/green] Exported to {result.path}")
    elif result.cancelled:
        console.print("[yellow]Cancelled[/yellow]")
    else:
        error_console.print(f"[red]Error:[/red] Export failed: {result.error}")
        raise typer.Exit(1)


@app.command()
def reset(
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip confirmation prompt"),
):
    """
    Delete all rows and settings and start with an empty board.

    Example:
        weekboard reset --yes
    """
    session = get_session()

    if not yes:
        console.print(f"[yellow]About to delete {len(session.board.rows)} row(s) and all settings[/yellow]")
        if not typer.confirm("Continue?", default=False):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    if not session.reset():
        error_console.print("[red]Error:[/red] Could not delete the saved board")
        raise typer.Exit(1)
    console.print("[green]✓[/green] Board reset")
