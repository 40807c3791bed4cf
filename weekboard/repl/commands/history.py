"""
FILE: weekboard/repl/commands/history.py
PURPOSE: Undo/redo, save, export and reset handlers for REPL
"""

from pathlib import Path

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.constants import EXPORT_EXTENSION
from ...core.weeks import default_export_name


def ask_confirmation(message: str) -> bool:
    """Ask user for confirmation (y/n)."""
    response = input(f"{message} (y/n): ").strip().lower()
    return response in ('y', 'yes')


def handle_undo_command(result: ParseResult) -> None:
    """
    Handle 'undo' command - restore the board before the last change.

    Usage:
        undo
    """
    if repl_context.session.undo():
        console.print("[green]✓ Undone[/green]")
    else:
        console.print("[yellow]Nothing to undo[/yellow]")


def handle_redo_command(result: ParseResult) -> None:
    """
    Handle 'redo' command - re-apply the last undone change.

    Usage:
        redo
    """
    if repl_context.session.redo():
        console.print("[green]✓ Redone[/green]")
    else:
        console.print("[yellow]Nothing to redo[/yellow]")


def handle_save_command(result: ParseResult) -> None:
    """Handle 'save' command - write the board now instead of waiting."""
    if repl_context.session.save_now():
        console.print("[green]✓ Saved[/green]")
    else:
        console.print("[red]Error:[/red] Could not save the board (see log)")


def handle_export_command(result: ParseResult) -> None:
    """
    Handle 'export' command - write the board to a spreadsheet.

    Usage:
        export                          # Prompt for a file name
        export --out plan.xlsx
        export --template Grafik.xlsx --yes
    """
    session = repl_context.session
    board = session.board
    yes = result.flags.get("yes") is True

    out = result.flags.get("out")
    if isinstance(out, str):
        answer = out
    else:
        suggested = default_export_name(board.year, board.week_number) + EXPORT_EXTENSION
        answer = suggested if yes else (input(f"Save as [{suggested}]: ").strip() or suggested)

    destination = Path(answer).expanduser()
    if destination.suffix.lower() != EXPORT_EXTENSION:
        destination = destination.with_name(destination.name + EXPORT_EXTENSION)

    if destination.exists() and not yes:
        if not ask_confirmation(f"{destination} exists. Overwrite?"):
            destination = None

    template = result.flags.get("template")
    export_result = session.export(
        destination,
        template_path=template if isinstance(template, str) else None,
    )

    if export_result.success:
        console.print(f"[green]✓[/green] Exported to {export_result.path}")
    elif export_result.cancelled:
        console.print("[yellow]Cancelled[/yellow]")
    else:
        console.print(f"[red]Error:[/red] Export failed: {export_result.error}")


def handle_reset_command(result: ParseResult) -> None:
    """
    Handle 'reset' command - start over with an empty board.

    The previous board stays reachable with 'undo'.

    Usage:
        reset
        reset --yes
    """
    session = repl_context.session

    if not result.flags.get("yes"):
        if not ask_confirmation(f"Delete {len(session.board.rows)} row(s) and all settings?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    if session.reset():
        console.print("[green]✓ Board reset[/green] [dim](undo restores it)[/dim]")
    else:
        console.print("[red]Error:[/red] Could not delete the saved board")
