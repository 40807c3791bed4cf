"""
FILE: weekboard/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - BoardFormatter: Class for rendering boards and column status
DEPENDENCIES:
  - rich (for table formatting)
  - json (for JSON serialization)
  - weekboard.core.board (Board, ColumnStatus)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
  - Column footers: green = valid, yellow = valid with one extra, red = invalid
"""

import json
from typing import List, Optional

from rich.table import Table
from rich.text import Text

from .core.board import Board, ColumnStatus
from .core.constants import DAY_ABBREVIATIONS
from .core.models import Row, TileState
from .core.weeks import format_date_short


STATE_STYLES = {
    TileState.AVAILABLE: "dim",
    TileState.WORK: "bold green",
    TileState.LEAVE: "yellow",
}


class BoardFormatter:
    """Centralized board display formatting."""

    @staticmethod
    def day_headers(board: Board) -> List[str]:
        """Column headers like "Mon 13.01" (just "Mon" when no week is selected)."""
        dates = board.week_dates()
        if dates is None:
            return list(DAY_ABBREVIATIONS)
        return [f"{name} {format_date_short(d)}" for name, d in zip(DAY_ABBREVIATIONS, dates)]

    @staticmethod
    def status_text(status: ColumnStatus) -> Text:
        label = f"{status.work_count}/{status.required_workers}"
        if not status.is_valid:
            return Text(label, style="bold red")
        if status.has_extra_one:
            return Text(f"{label} +1", style="yellow")
        return Text(label, style="green")

    @staticmethod
    def create_table(board: Board, rows: Optional[List[Row]] = None) -> Table:
        """
        Create Rich table for the board.

        Args:
            board: Board to render (staffing footers always use all of its rows)
            rows: Subset of rows to list (None = every row)

        Returns:
            Table with one row per employee and a staffing footer row
        """
        title = "Schedule"
        if board.year is not None and board.week_number is not None:
            title = f"Week {board.week_number}/{board.year}"

        table = Table(title=title, show_header=True, header_style="bold cyan", show_footer=True)
        table.add_column("#", style="cyan", width=3, no_wrap=True, footer="")
        table.add_column("Name", style="white", footer="Staffed")
        table.add_column("In", width=3, justify="center", footer="")

        statuses = board.get_columns_status()
        for header, status in zip(BoardFormatter.day_headers(board), statuses):
            table.add_column(
                header,
                justify="center",
                footer=BoardFormatter.status_text(status),
            )

        for row in (board.rows if rows is None else rows):
            cells = [
                Text(tile.state.value, style=STATE_STYLES.get(tile.state, ""))
                for tile in row.tiles
            ]
            included = Text("✓", style="green") if row.included else Text("-", style="dim")
            name = row.label or Text("(unnamed)", style="dim italic")
            table.add_row(str(row.position), name, included, *cells,
                          style=None if row.included else "dim")

        return table

    @staticmethod
    def create_status_table(board: Board) -> Table:
        table = Table(title="Staffing", show_header=True, header_style="bold cyan")
        table.add_column("Day", style="white")
        table.add_column("Required", justify="right")
        table.add_column("Working", justify="right")
        table.add_column("Status")

        for status in board.get_columns_status():
            if not status.is_valid:
                verdict = Text("understaffed" if status.work_count < status.required_workers
                               else "overstaffed", style="bold red")
            elif status.has_extra_one:
                verdict = Text("ok (+1)", style="yellow")
            else:
                verdict = Text("ok", style="green")
            name = f"{status.name} (exact)" if status.is_sunday else status.name
            table.add_row(name, str(status.required_workers), str(status.work_count), verdict)

        return table

    @staticmethod
    def format_raw(board: Board) -> List[str]:
        """Plain text lines: position | inclusion | label | the seven states."""
        lines = []
        for row in board.rows:
            flag = "+" if row.included else "-"
            states = " ".join(tile.state.value for tile in row.tiles)
            lines.append(f"{row.position} | {flag} | {row.label} | {states}")
        return lines

    @staticmethod
    def to_json(board: Board) -> str:
        """Board state plus computed column status as JSON."""
        data = board.to_dict()
        data["status"] = [
            {
                "index": s.position,
                "name": s.name,
                "requiredWorkers": s.required_workers,
                "workCount": s.work_count,
                "isValid": s.is_valid,
                "isSunday": s.is_sunday,
                "hasExtraOne": s.has_extra_one,
            }
            for s in board.get_columns_status()
        ]
        return json.dumps(data, indent=2, ensure_ascii=False)
