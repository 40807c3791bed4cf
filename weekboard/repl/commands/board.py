"""
FILE: weekboard/repl/commands/board.py
PURPOSE: Board command handlers for REPL
"""

from ..main import console, repl_context, VALID_FILTERS, FILTER_ALL
from ..parser import ParseResult
from ..display import display_board, display_row
from ...core.constants import (
    INTENT_ADD_ROW,
    INTENT_REMOVE_ROW,
    INTENT_SET_ROW_HEADER,
    INTENT_SET_ROW_INCLUDED,
    INTENT_TOGGLE_TILE,
    INTENT_SET_TILE,
    INTENT_SET_COLUMN_REQUIRED,
    INTENT_MOVE_ROW_UP,
    INTENT_MOVE_ROW_DOWN,
    INTENT_SET_YEAR_AND_WEEK,
    DAY_NAMES,
    MIN_YEAR,
    MAX_YEAR,
    MIN_WEEK,
)
from ...core.exceptions import WeekboardError, InvalidInputError
from ...core.models import parse_tile_state
from ...core.weeks import weeks_in_year
from ...formatting import BoardFormatter
from ...utils import parse_day, parse_row, parse_count


def _usage(message: str, usage: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
    console.print(f"[dim]Usage: {usage}[/dim]")


def handle_show_command(result: ParseResult) -> None:
    """
    Handle 'show' command - display the board.

    Usage:
        show
        show --json
    """
    board = repl_context.session.board
    if result.flags.get("json"):
        console.print_json(BoardFormatter.to_json(board))
        return
    display_board(board, repl_context, console)


def handle_status_command(result: ParseResult) -> None:
    """Handle 'status' command - staffing per day."""
    board = repl_context.session.board
    console.print(BoardFormatter.create_status_table(board))
    if board.is_fully_staffed():
        console.print("[green]✓ Every day is validly staffed[/green]")


def handle_add_command(result: ParseResult) -> None:
    """
    Handle 'add' command - append an employee row.

    Usage:
        add Anna
        add "Anna Maria"
        add             # unnamed row
    """
    # Join all args as the label (in case they didn't use quotes)
    label = " ".join(result.args)
    row = repl_context.session.dispatch(INTENT_ADD_ROW, {"label": label})
    display_row(row, "✓ Added:", console)


def handle_rm_command(result: ParseResult) -> None:
    """
    Handle 'rm' command - remove a row.

    Usage:
        rm 2
    """
    if not result.args:
        _usage("Row position required", "rm <row>")
        return

    try:
        position = parse_row(result.args[0])
        session = repl_context.session
        row = session.board.get_row(position)
        if row is None:
            console.print(f"[red]Error:[/red] Row {position} not found")
            return
        session.dispatch(INTENT_REMOVE_ROW, {"row": position})
        console.print(f"[red]✗[/red] Removed row {position}: {row.label or '(unnamed)'}")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_rename_command(result: ParseResult) -> None:
    """
    Handle 'rename' command - change a row header.

    Usage:
        rename 0 "Anna K."
    """
    if len(result.args) < 2:
        _usage("Row position and new name required", 'rename <row> "Name"')
        return

    try:
        position = parse_row(result.args[0])
        label = " ".join(result.args[1:])
        if not repl_context.session.dispatch(INTENT_SET_ROW_HEADER, {"row": position, "label": label}):
            console.print(f"[red]Error:[/red] Row {position} not found")
            return
        console.print(f"[green]✓[/green] Renamed row {position}: {label}")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def _set_included(result: ParseResult, included: bool) -> None:
    command = "include" if included else "exclude"
    if not result.args:
        _usage("Row position required", f"{command} <row>")
        return

    try:
        position = parse_row(result.args[0])
        payload = {"row": position, "included": included}
        if not repl_context.session.dispatch(INTENT_SET_ROW_INCLUDED, payload):
            console.print(f"[red]Error:[/red] Row {position} not found")
            return
        if included:
            console.print(f"[green]✓[/green] Row {position} counts toward staffing")
        else:
            console.print(f"[yellow]✓[/yellow] Row {position} no longer counts toward staffing")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_include_command(result: ParseResult) -> None:
    """Handle 'include' command - count a row toward staffing."""
    _set_included(result, True)


def handle_exclude_command(result: ParseResult) -> None:
    """Handle 'exclude' command - stop counting a row toward staffing."""
    _set_included(result, False)


def _move(result: ParseResult, intent: str, direction: str) -> None:
    if not result.args:
        _usage("Row position required", f"{direction} <row>")
        return

    try:
        position = parse_row(result.args[0])
        if not repl_context.session.dispatch(intent, {"row": position}):
            console.print(f"[yellow]Cannot move row {position} {direction}[/yellow]")
            return
        target = position - 1 if direction == "up" else position + 1
        console.print(f"[green]✓[/green] Moved row {position} to {target}")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_up_command(result: ParseResult) -> None:
    """Handle 'up' command - swap a row with the one above."""
    _move(result, INTENT_MOVE_ROW_UP, "up")


def handle_down_command(result: ParseResult) -> None:
    """Handle 'down' command - swap a row with the one below."""
    _move(result, INTENT_MOVE_ROW_DOWN, "down")


def handle_toggle_command(result: ParseResult) -> None:
    """
    Handle 'toggle' command - cycle a day cell A -> Praca -> U -> A.

    Usage:
        toggle 0 mon
        t 0 6
    """
    if len(result.args) < 2:
        _usage("Row position and day required", "toggle <row> <day>")
        return

    try:
        position = parse_row(result.args[0])
        column = parse_day(result.args[1])
        state = repl_context.session.dispatch(INTENT_TOGGLE_TILE, {"row": position, "column": column})
        if state is None:
            console.print(f"[red]Error:[/red] Row {position} not found")
            return
        console.print(f"[green]✓[/green] Row {position}, {DAY_NAMES[column]}: {state.value}")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_set_command(result: ParseResult) -> None:
    """
    Handle 'set' command - set a day cell to a specific state.

    Usage:
        set 0 fri leave
        set 1 sun Praca
    """
    if len(result.args) < 3:
        _usage("Row position, day and state required", "set <row> <day> <A|Praca|U>")
        return

    try:
        position = parse_row(result.args[0])
        column = parse_day(result.args[1])
        state = parse_tile_state(result.args[2])
        if state is None:
            raise InvalidInputError(f"Unknown state '{result.args[2]}'. Use A, Praca or U")
        payload = {"row": position, "column": column, "state": state}
        if not repl_context.session.dispatch(INTENT_SET_TILE, payload):
            console.print(f"[red]Error:[/red] Row {position} not found")
            return
        console.print(f"[green]✓[/green] Row {position}, {DAY_NAMES[column]}: {state.value}")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_need_command(result: ParseResult) -> None:
    """
    Handle 'need' command - set required workers for a day.

    Usage:
        need sat 2
    """
    if len(result.args) < 2:
        _usage("Day and count required", "need <day> <count>")
        return

    try:
        column = parse_day(result.args[0])
        count = parse_count(result.args[1])
        repl_context.session.dispatch(INTENT_SET_COLUMN_REQUIRED, {"column": column, "count": count})
        console.print(f"[green]✓[/green] {DAY_NAMES[column]} requires {count} worker(s)")
    except WeekboardError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_week_command(result: ParseResult) -> None:
    """
    Handle 'week' command - show or select the calendar week.

    Usage:
        week            # Show the selected week
        week 2025 3
    """
    session = repl_context.session

    if not result.args:
        board = session.board
        headers = BoardFormatter.day_headers(board)
        console.print(f"Week [cyan]{board.week_number}/{board.year}[/cyan]: {headers[0]} - {headers[-1]}")
        return

    if len(result.args) < 2:
        _usage("Year and week required", "week <year> <week>")
        return

    try:
        year, week_number = int(result.args[0]), int(result.args[1])
    except ValueError:
        console.print("[red]Error:[/red] Year and week must be numbers")
        return

    if not MIN_YEAR <= year <= MAX_YEAR:
        console.print(f"[red]Error:[/red] Year must be between {MIN_YEAR} and {MAX_YEAR}")
        return
    if not MIN_WEEK <= week_number <= weeks_in_year(year):
        console.print(f"[red]Error:[/red] Week must be between {MIN_WEEK} and {weeks_in_year(year)} for {year}")
        return

    session.dispatch(INTENT_SET_YEAR_AND_WEEK, {"year": year, "week": week_number})
    headers = BoardFormatter.day_headers(session.board)
    console.print(f"[green]✓[/green] Week {week_number}/{year}: {headers[0]} - {headers[-1]}")


def handle_filter_command(result: ParseResult) -> None:
    """
    Handle 'filter' command - limit which rows 'show' lists.

    Usage:
        filter                  # Show current filter
        filter included         # Only rows counted toward staffing
        filter excluded
        filter all              # Clear filter and search
        filter --search anna    # Only rows whose name contains "anna"
    """
    search = result.flags.get("search")

    if not result.args and search is None:
        parts = [f"rows: [cyan]{repl_context.row_filter}[/cyan]"]
        if repl_context.search:
            parts.append(f"search: [cyan]{repl_context.search}[/cyan]")
        console.print("Current filter: " + ", ".join(parts))
        return

    if result.args:
        mode = result.args[0].lower()
        if mode not in VALID_FILTERS:
            console.print(f"[red]Error:[/red] Invalid filter '{mode}'")
            console.print(f"[dim]Valid filters: {', '.join(VALID_FILTERS)}[/dim]")
            return
        repl_context.row_filter = mode
        if mode == FILTER_ALL:
            repl_context.search = None

    if isinstance(search, str):
        repl_context.search = search

    console.print(f"✓ Showing [cyan]{repl_context.row_filter}[/cyan] rows"
                  + (f" matching '{repl_context.search}'" if repl_context.search else ""))
