"""
FILE: weekboard/repl/main.py
PURPOSE: Interactive REPL for editing the board with prompt-toolkit
EXPORTS:
  - REPLContext (dataclass)
  - repl_context (session-wide context)
  - execute_command(result) -> bool
  - run_repl() - Main REPL loop
  - main() - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - weekboard.core.service (session layer)
  - weekboard.repl.parser (command parsing)
  - weekboard.repl.completer (autocomplete)
NOTES:
  - Command history automatic with PromptSession
  - Bottom toolbar shows staffing and undo/redo counts
  - Saves are debounced while editing and flushed on exit
  - Ctrl+D or "exit"/"quit" to exit
"""

import sys
from dataclasses import dataclass
from typing import List, Optional

# Fix Windows console encoding for Unicode characters
# Only wrap if not already wrapped to prevent issues
if sys.platform == "win32":
    import io
    if not isinstance(sys.stdout, io.TextIOWrapper) or sys.stdout.encoding != 'utf-8':
        try:
            sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from ..core.logger import logger
from ..core.models import Row
from ..core.service import BoardSession, open_session
from .parser import parse_command, ParseResult
from .completer import create_completer


# Rich console for formatted output
console = Console()


# --- REPL Context (Persistent State) ---

FILTER_ALL = "all"
FILTER_INCLUDED = "included"
FILTER_EXCLUDED = "excluded"
VALID_FILTERS = (FILTER_ALL, FILTER_INCLUDED, FILTER_EXCLUDED)


@dataclass
class REPLContext:
    """
    Persistent context for the REPL session.

    Attributes:
        session: Board session being edited (None until the REPL starts)
        row_filter: Which rows "show" lists ('all', 'included', 'excluded')
        search: Case-insensitive text a row label must contain to be listed
    """
    session: Optional[BoardSession] = None
    row_filter: str = FILTER_ALL
    search: Optional[str] = None

    def get_prompt(self) -> str:
        """
        Generate prompt string based on current context.

        Returns:
            Prompt like "weekboard> " or "weekboard:[KW3 | included]> "
        """
        parts = []

        board = self.session.board if self.session else None
        if board is not None and board.week_number is not None:
            parts.append(f"KW{board.week_number}")

        if self.row_filter != FILTER_ALL:
            parts.append(self.row_filter)

        if self.search:
            parts.append(f"'{self.search}'")

        if parts:
            return f"weekboard:[{' | '.join(parts)}]> "
        return "weekboard> "

    def filter_rows(self, rows: List[Row]) -> List[Row]:
        """
        Filter rows for display.

        Filtering only affects what is listed; staffing always counts every
        included row.
        """
        filtered = rows

        if self.row_filter == FILTER_INCLUDED:
            filtered = [r for r in filtered if r.included]
        elif self.row_filter == FILTER_EXCLUDED:
            filtered = [r for r in filtered if not r.included]

        if self.search:
            needle = self.search.lower()
            filtered = [r for r in filtered if needle in r.label.lower()]

        return filtered


# Global REPL context (persists during session, resets on restart)
repl_context = REPLContext()


def get_bottom_toolbar() -> HTML:
    """Toolbar with staffing summary and undo/redo availability."""
    session = repl_context.session
    if session is None:
        return HTML("<style bg='#444444' fg='#ffffff'> weekboard </style>")

    try:
        statuses = session.board.get_columns_status()
        invalid = [s.name[:3] for s in statuses if not s.is_valid]
        staffing = "all days staffed" if not invalid else f"check: {', '.join(invalid)}"
        history = session.history.status()
        text = (
            f"{len(session.board.rows)} row(s) | {staffing} | "
            f"undo {history['undo_count']} / redo {history['redo_count']}"
        )
        return HTML(f"<style bg='#444444' fg='#ffffff'> {text} </style>")
    except Exception:
        # Toolbar must never break the prompt
        return HTML("<style bg='#444444' fg='#ffffff'> weekboard </style>")


# Import command handlers from command modules
from .commands import (
    # Board handlers
    handle_show_command,
    handle_status_command,
    handle_add_command,
    handle_rm_command,
    handle_rename_command,
    handle_include_command,
    handle_exclude_command,
    handle_up_command,
    handle_down_command,
    handle_toggle_command,
    handle_set_command,
    handle_need_command,
    handle_week_command,
    handle_filter_command,
    # History and output handlers
    handle_undo_command,
    handle_redo_command,
    handle_save_command,
    handle_export_command,
    handle_reset_command,
    # System handlers
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        result: Parsed command from parser

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handlers = {
        "show": handle_show_command,
        "ls": handle_show_command,
        "status": handle_status_command,
        "add": handle_add_command,
        "rm": handle_rm_command,
        "rename": handle_rename_command,
        "include": handle_include_command,
        "exclude": handle_exclude_command,
        "up": handle_up_command,
        "down": handle_down_command,
        "toggle": handle_toggle_command,
        "t": handle_toggle_command,
        "set": handle_set_command,
        "need": handle_need_command,
        "week": handle_week_command,
        "filter": handle_filter_command,
        "undo": handle_undo_command,
        "redo": handle_redo_command,
        "save": handle_save_command,
        "export": handle_export_command,
        "reset": handle_reset_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        handler(result)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(session: Optional[BoardSession] = None) -> None:
    """
    Main REPL loop.

    Args:
        session: Session to edit (None = load the saved board)

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    repl_context.session = session or open_session()

    # In piped/test environments, skip prompt_toolkit entirely
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()
    use_simple_input = not has_tty
    prompt_session = None

    if has_tty:
        try:
            prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]weekboard REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    try:
        while True:
            try:
                if use_simple_input or prompt_session is None:
                    user_input = input(repl_context.get_prompt())
                else:
                    user_input = prompt_session.prompt(
                        HTML(f"<b>{repl_context.get_prompt().replace('>', '&gt;')}</b>")
                    )

                result = parse_command(user_input)
                if not execute_command(result):
                    break

            except KeyboardInterrupt:
                console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
                continue
            except EOFError:
                console.print()
                console.print("[dim]Goodbye![/dim]")
                break
            except Exception as e:
                # Unexpected error - show but don't crash
                logger.exception("Unexpected error in REPL")
                console.print(f"[red]Unexpected error:[/red] {e}")
    finally:
        if not repl_context.session.flush():
            console.print("[red]Error:[/red] Could not save the board")


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: weekboard repl
    """
    try:
        run_repl()
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)
