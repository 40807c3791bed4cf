"""
FILE: weekboard/repl/commands/system.py
PURPOSE: System command handlers for REPL
"""

from ..main import console
from ..parser import ParseResult


def handle_help_command(result: ParseResult) -> None:
    """
    Handle 'help' command - show available commands.

    Args:
        result: Parsed command (unused)
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]show [--json][/cyan]               Show the board (respects filter)
  [cyan]status[/cyan]                      Required vs. scheduled workers per day
  [cyan]add [<name>][/cyan]                Add an employee row
  [cyan]rm <row>[/cyan]                    Remove a row
  [cyan]rename <row> <name>[/cyan]         Change a row header
  [cyan]include <row>[/cyan]               Count a row toward staffing
  [cyan]exclude <row>[/cyan]               Stop counting a row
  [cyan]up <row>[/cyan] / [cyan]down <row>[/cyan]         Move a row
  [cyan]toggle <row> <day>[/cyan]          Cycle a day: A -> Praca -> U
  [cyan]set <row> <day> <state>[/cyan]     Set a day to A, Praca or U
  [cyan]need <day> <count>[/cyan]          Required workers for a day (1-20)
  [cyan]week [<year> <week>][/cyan]        Show or select the calendar week
  [cyan]filter [all|included|excluded][/cyan] Limit listed rows
  [cyan]undo[/cyan] / [cyan]redo[/cyan]                 Step through change history
  [cyan]save[/cyan]                        Save now
  [cyan]export [--out F] [--template F][/cyan] Export to a spreadsheet
  [cyan]reset [--yes][/cyan]               Start with an empty board
  [cyan]help[/cyan]                        Show this help
  [cyan]clear[/cyan]                       Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]               Exit REPL

[bold cyan]Staffing rules:[/bold cyan]

  Monday-Saturday: required workers, or one extra (shown as +1)
  Sunday: exactly the required workers
  Excluded rows never count

[bold cyan]Examples:[/bold cyan]

  [dim]add "Anna Maria"
  toggle 0 mon
  set 0 sun work
  need sat 2
  week 2025 3
  filter --search anna
  export --out plan.xlsx[/dim]
"""
    console.print(help_text)


def handle_clear_command(result: ParseResult) -> None:
    """Handle 'clear' command - clear the screen."""
    console.clear()
