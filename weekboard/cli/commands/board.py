"""
FILE: weekboard/cli/commands/board.py
PURPOSE: Board commands (show, status, rows, tiles, staffing, week)
"""

import json

import typer

from ..main import app, console, error_console, get_session
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
    MAX_WEEK,
)
from ...core.exceptions import WeekboardError, InvalidInputError
from ...core.models import parse_tile_state
from ...core.weeks import weeks_in_year
from ...formatting import BoardFormatter
from ...utils import parse_day, parse_row, parse_count


def _fail(message: str) -> None:
    error_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


@app.command()
def show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show the board with per-day staffing.

    Example:
        weekboard show
        weekboard show --json
    """
    try:
        board = get_session().board

        if json_output:
            console.print_json(BoardFormatter.to_json(board))
        elif raw:
            for line in BoardFormatter.format_raw(board):
                console.print(line, markup=False, highlight=False)
        else:
            if not board.rows:
                console.print("[dim]No rows yet. Add one with: weekboard add \"Name\"[/dim]")
            console.print(BoardFormatter.create_table(board))

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def status(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show required vs. scheduled workers per day.

    Weekdays accept the requirement or one extra; Sunday must match exactly.
    Exits with code 1 if any day is not validly staffed.
    """
    board = get_session().board
    statuses = board.get_columns_status()

    if json_output:
        console.print_json(json.dumps([
            {
                "day": s.name,
                "required": s.required_workers,
                "working": s.work_count,
                "valid": s.is_valid,
                "extraOne": s.has_extra_one,
            }
            for s in statuses
        ]))
    else:
        console.print(BoardFormatter.create_status_table(board))

    if not board.is_fully_staffed():
        raise typer.Exit(1)


@app.command()
def add(
    label: str = typer.Argument("", help="Employee name shown in the row header"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Add an employee row at the bottom of the board.

    Example:
        weekboard add "Anna"
    """
    try:
        session = get_session()
        row = session.dispatch(INTENT_ADD_ROW, {"label": label})

        if json_output:
            console.print_json(row.to_json())
        else:
            console.print(f"[green]✓[/green] Added row {row.position}: {row.label or '(unnamed)'}")

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def rm(
    row: str = typer.Argument(..., help="Row position"),
):
    """
    Remove a row. Rows below it move up one position.

    Example:
        weekboard rm 2
    """
    try:
        position = parse_row(row)
        session = get_session()
        existing = session.board.get_row(position)
        if existing is None:
            _fail(f"Row {position} not found")

        session.dispatch(INTENT_REMOVE_ROW, {"row": position})
        console.print(f"[red]✗[/red] Removed row {position}: {existing.label or '(unnamed)'}")

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def rename(
    row: str = typer.Argument(..., help="Row position"),
    label: str = typer.Argument(..., help="New row header"),
):
    """
    Change a row's header.

    Example:
        weekboard rename 0 "Anna K."
    """
    try:
        position = parse_row(row)
        session = get_session()
        if not session.dispatch(INTENT_SET_ROW_HEADER, {"row": position, "label": label}):
            _fail(f"Row {position} not found")
        console.print(f"[green]✓[/green] Renamed row {position}: {label}")

    except WeekboardError as e:
        _fail(str(e))


def _set_included(row: str, included: bool) -> None:
    try:
        position = parse_row(row)
        session = get_session()
        if not session.dispatch(INTENT_SET_ROW_INCLUDED, {"row": position, "included": included}):
            _fail(f"Row {position} not found")
        if included:
            console.print(f"[green]✓[/green] Row {position} counts toward staffing")
        else:
            console.print(f"[yellow]✓[/yellow] Row {position} no longer counts toward staffing")

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def include(row: str = typer.Argument(..., help="Row position")):
    """Count a row's work days toward staffing."""
    _set_included(row, True)


@app.command()
def exclude(row: str = typer.Argument(..., help="Row position")):
    """Stop counting a row's work days toward staffing."""
    _set_included(row, False)


def _move(row: str, intent: str, direction: str) -> None:
    try:
        position = parse_row(row)
        session = get_session()
        if not session.dispatch(intent, {"row": position}):
            _fail(f"Cannot move row {position} {direction}")
        target = position - 1 if direction == "up" else position + 1
        console.print(f"[green]✓[/green] Moved row {position} to {target}")

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def up(row: str = typer.Argument(..., help="Row position")):
    """Swap a row with the one above it."""
    _move(row, INTENT_MOVE_ROW_UP, "up")


@app.command()
def down(row: str = typer.Argument(..., help="Row position")):
    """Swap a row with the one below it."""
    _move(row, INTENT_MOVE_ROW_DOWN, "down")


@app.command()
def toggle(
    row: str = typer.Argument(..., help="Row position"),
    day: str = typer.Argument(..., help="Day index (0-6) or name (mon, tue, ...)"),
):
    """
    Cycle a day cell: A -> Praca -> U -> A.

    Example:
        weekboard toggle 0 mon
    """
    try:
        position = parse_row(row)
        column = parse_day(day)
        session = get_session()
        state = session.dispatch(INTENT_TOGGLE_TILE, {"row": position, "column": column})
        if state is None:
            _fail(f"Row {position} not found")
        console.print(f"[green]✓[/green] Row {position}, {DAY_NAMES[column]}: {state.value}")

    except WeekboardError as e:
        _fail(str(e))


@app.command("set")
def set_tile(
    row: str = typer.Argument(..., help="Row position"),
    day: str = typer.Argument(..., help="Day index (0-6) or name (mon, tue, ...)"),
    state: str = typer.Argument(..., help="A, Praca or U (also: available, work, leave)"),
):
    """
    Set a day cell to a specific state.

    Example:
        weekboard set 0 sun work
    """
    try:
        position = parse_row(row)
        column = parse_day(day)
        parsed = parse_tile_state(state)
        if parsed is None:
            raise InvalidInputError(f"Unknown state '{state}'. Use A, Praca or U")
        session = get_session()
        if not session.dispatch(INTENT_SET_TILE, {"row": position, "column": column, "state": parsed}):
            _fail(f"Row {position} not found")
        console.print(f"[green]✓[/green] Row {position}, {DAY_NAMES[column]}: {parsed.value}")

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def need(
    day: str = typer.Argument(..., help="Day index (0-6) or name (mon, tue, ...)"),
    count: str = typer.Argument(..., help="Required workers (1-20)"),
):
    """
    Set how many workers a day requires.

    Example:
        weekboard need sat 2
    """
    try:
        column = parse_day(day)
        required = parse_count(count)
        session = get_session()
        session.dispatch(INTENT_SET_COLUMN_REQUIRED, {"column": column, "count": required})
        console.print(f"[green]✓[/green] {DAY_NAMES[column]} requires {required} worker(s)")

    except WeekboardError as e:
        _fail(str(e))


@app.command()
def week(
    year: int = typer.Argument(..., help=f"Year ({MIN_YEAR}-{MAX_YEAR})"),
    week_number: int = typer.Argument(..., help=f"ISO week ({MIN_WEEK}-{MAX_WEEK})"),
):
    """
    Select the calendar week shown on the board and used for export.

    Example:
        weekboard week 2025 3
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        _fail(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    if not MIN_WEEK <= week_number <= weeks_in_year(year):
        _fail(f"Week must be between {MIN_WEEK} and {weeks_in_year(year)} for {year}")

    try:
        session = get_session()
        session.dispatch(INTENT_SET_YEAR_AND_WEEK, {"year": year, "week": week_number})
        headers = BoardFormatter.day_headers(session.board)
        console.print(f"[green]✓[/green] Week {week_number}/{year}: {headers[0]} - {headers[-1]}")

    except WeekboardError as e:
        _fail(str(e))
