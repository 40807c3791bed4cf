"""
FILE: weekboard/cli/main.py
PURPOSE: Typer-based CLI for one-shot board commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version(), help(), repl() - System commands
  - show(), status() - Board views
  - add(), rm(), rename(), include(), exclude(), up(), down() - Row commands
  - toggle(), set_tile() - Tile commands
  - need(), week() - Column and week settings
  - export(), reset() - Output and housekeeping
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - weekboard.core.service (session layer)
  - weekboard.core.exceptions (error handling)
  - weekboard.repl (interactive mode)
NOTES:
  - View commands support --json and --raw flags
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
  - Each command loads the saved board, applies one intent and saves at once
"""

import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from .. import __version__
from ..core.config import load_settings
from ..core.logger import setup_logging
from ..core.service import BoardSession, open_session

# Typer app setup
app = typer.Typer(
    name="weekboard",
    help="Weekly work-schedule board",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


def get_session() -> BoardSession:
    """Load the saved board for a one-shot command (saves are written immediately)."""
    return open_session(save_delay=0)


@app.callback(invoke_without_command=True)
def default_command(ctx: typer.Context):
    """
    Default callback - sets up logging and launches the REPL when no
    command is specified.
    """
    settings = load_settings()
    setup_logging(settings.log_path)

    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    # System commands
    version,
    help,
    repl,
    # Board commands
    show,
    status,
    add,
    rm,
    rename,
    include,
    exclude,
    up,
    down,
    toggle,
    set_tile,
    need,
    week,
    # Output commands
    export,
    reset,
)


def main():
    """Main entry point for CLI."""
    app()

