"""
FILE: weekboard/repl/display.py
PURPOSE: Display functions for the board and single rows
EXPORTS:
  - display_row() - Display a single row
  - display_board() - Display the board table, filtered by REPL context
DEPENDENCIES:
  - rich (formatted output)
  - weekboard.formatting (BoardFormatter)
NOTES:
  - Accepts repl_context as a parameter to avoid circular imports
"""

from rich.console import Console

from ..core.board import Board
from ..core.models import Row
from ..formatting import BoardFormatter

# Create console instance here to avoid circular import
console = Console()


def display_row(row: Row, message: str = "", console_instance: Console = None) -> None:
    """
    Display a single row with optional message.

    Args:
        row: Row to display
        message: Optional message to show before the row (e.g., "Added:")
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if message:
        console_instance.print(f"[green]{message}[/green]")

    states = " ".join(tile.state.value for tile in row.tiles)
    excluded = "" if row.included else " [dim](excluded)[/dim]"
    console_instance.print(
        f"  [cyan]{row.position}[/cyan]: {row.label or '(unnamed)'}{excluded} [dim]{states}[/dim]"
    )


def display_board(board: Board, repl_context=None, console_instance: Console = None) -> None:
    """
    Display the board as a table.

    Args:
        board: Board to display
        repl_context: Optional REPLContext whose filter limits the listed rows
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    rows = board.rows
    if repl_context is not None:
        rows = repl_context.filter_rows(board.rows)

    if not board.rows:
        console_instance.print("[dim]No rows yet. Add one with: add \"Name\"[/dim]")
    elif not rows:
        console_instance.print("[dim]No rows match the current filter[/dim]")

    console_instance.print(BoardFormatter.create_table(board, rows))
