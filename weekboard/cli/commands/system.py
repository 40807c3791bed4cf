"""
FILE: weekboard/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import typer

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__


@app.command()
def version():
    """Show weekboard version."""
    console.print(f"weekboard v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]weekboard[/bold cyan] - Weekly work-schedule board\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  weekboard [command] [options]")
    console.print("  weekboard                    [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("show", "Show the board", "weekboard show [--json] [--raw]"),
        ("status", "Show staffing per day", "weekboard status [--json]"),
        ("add", "Add an employee row", 'weekboard add "Name"'),
        ("rm", "Remove a row", "weekboard rm <row>"),
        ("rename", "Change a row header", 'weekboard rename <row> "Name"'),
        ("include", "Count a row toward staffing", "weekboard include <row>"),
        ("exclude", "Stop counting a row", "weekboard exclude <row>"),
        ("up", "Move a row up", "weekboard up <row>"),
        ("down", "Move a row down", "weekboard down <row>"),
        ("toggle", "Cycle a day: A -> Praca -> U", "weekboard toggle <row> <day>"),
        ("set", "Set a day's state", "weekboard set <row> <day> <A|Praca|U>"),
        ("need", "Set required workers for a day", "weekboard need <day> <count>"),
        ("week", "Select the calendar week", "weekboard week <year> <week>"),
        ("export", "Export to a spreadsheet", "weekboard export [--out FILE] [--template FILE]"),
        ("reset", "Start with an empty board", "weekboard reset [--yes]"),
        ("repl", "Launch interactive REPL", "weekboard repl"),
        ("version", "Show version", "weekboard version"),
        ("help", "Show this help message", "weekboard help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{example}[/dim]\n")

    console.print("[bold]Staffing rules:[/bold]")
    console.print("  Monday-Saturday: required workers, or one extra")
    console.print("  Sunday:          exactly the required workers")
    console.print("  Excluded rows never count\n")

    console.print("[bold]Examples:[/bold]")
    console.print("  weekboard                      # Launch REPL (default)")
    console.print('  weekboard add "Anna"')
    console.print("  weekboard toggle 0 mon         # Anna works on Monday")
    console.print("  weekboard set 0 fri leave      # Anna is on leave Friday")
    console.print("  weekboard need sun 2           # Sunday needs exactly 2")
    console.print("  weekboard week 2025 3")
    console.print("  weekboard export --out plan.xlsx\n")


@app.command()
def repl():
    """
    Launch interactive REPL mode.

    The REPL provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - Undo/redo of every change
    - Exit with Ctrl+D or type 'exit'

    Example:
        weekboard repl
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        repl_main()
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
