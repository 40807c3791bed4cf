"""
FILE: weekboard/core/board.py
PURPOSE: Board aggregate - rows, columns, mutations and staffing validation
EXPORTS:
  - ColumnStatus (dataclass)
  - Board (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - weekboard.core.models (TileState, Tile, Row, Column)
  - weekboard.core.weeks (week dates for labels)
  - weekboard.core.exceptions (InvalidStateError)
NOTES:
  - Board is the only owner of its rows, columns and tiles
  - Positional mutations never raise: invalid positions return False/None
  - Every structural change ends with _renumber() so positions stay dense
  - Column status is recomputed on every call (never cached)
  - to_dict()/from_dict() round-trip without loss; both persistence and
    undo/redo rely on it
"""

import copy
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from .constants import DAYS_IN_WEEK, DAY_NAMES, MIN_WEEK, MAX_WEEK, MIN_YEAR, MAX_YEAR, SUNDAY
from .exceptions import InvalidStateError
from .models import Column, Row, Tile, TileState, parse_tile_state
from .weeks import current_year_and_week, week_dates, weeks_in_year


@dataclass
class ColumnStatus:
    """Computed staffing status of one weekday column."""

    position: int
    name: str
    required_workers: int
    work_count: int
    is_valid: bool
    is_sunday: bool
    has_extra_one: bool


def _default_columns() -> List[Column]:
    return [Column(position=position) for position in range(DAYS_IN_WEEK)]


@dataclass
class Board:
    """
    Weekly schedule board.

    Attributes:
        columns: Exactly 7 weekday columns (Monday=0 ... Sunday=6)
        rows: Employee rows in display order
        year: Selected ISO year (None = not selected)
        week_number: Selected ISO week (None = not selected)
    """

    columns: List[Column] = field(default_factory=_default_columns)
    rows: List[Row] = field(default_factory=list)
    year: Optional[int] = None
    week_number: Optional[int] = None

    @classmethod
    def empty(cls, today: Optional[date] = None) -> "Board":
        """New board with no rows, selecting the current ISO week."""
        year, week = current_year_and_week(today)
        return cls(year=year, week_number=week)

    # --- Lookup ---

    def get_row(self, position: int) -> Optional[Row]:
        if 0 <= position < len(self.rows):
            return self.rows[position]
        return None

    def get_column(self, position: int) -> Optional[Column]:
        if 0 <= position < len(self.columns):
            return self.columns[position]
        return None

    def get_tile(self, row: int, column: int) -> Optional[Tile]:
        found = self.get_row(row)
        return found.get_tile(column) if found else None

    # --- Structural mutations ---

    def add_row(self, label: str = "") -> Row:
        """Append a row with 7 Available tiles, included in calculations."""
        row = Row(position=len(self.rows), label=label, included=True)
        self.rows.append(row)
        return row

    def remove_row(self, position: int) -> bool:
        """Remove the row at `position` and renumber the rest."""
        if not 0 <= position < len(self.rows):
            return False
        del self.rows[position]
        self._renumber()
        return True

    def move_row_up(self, position: int) -> bool:
        """Swap the row with the one above it."""
        if 0 < position < len(self.rows):
            self._swap_rows(position, position - 1)
            return True
        return False

    def move_row_down(self, position: int) -> bool:
        """Swap the row with the one below it."""
        if 0 <= position < len(self.rows) - 1:
            self._swap_rows(position, position + 1)
            return True
        return False

    def _swap_rows(self, a: int, b: int) -> None:
        self.rows[a], self.rows[b] = self.rows[b], self.rows[a]
        self._renumber()

    def _renumber(self) -> None:
        """Restore dense row positions and tile back-references."""
        for position, row in enumerate(self.rows):
            row.update_position(position)

    # --- Field mutations ---

    def set_row_header(self, position: int, text: str) -> bool:
        row = self.get_row(position)
        if row is None:
            return False
        row.label = text
        return True

    def set_row_included(self, position: int, included: bool) -> bool:
        row = self.get_row(position)
        if row is None:
            return False
        row.included = bool(included)
        return True

    def toggle_tile_state(self, row: int, column: int) -> Optional[TileState]:
        """Advance a tile to its next state; None if the coordinates are invalid."""
        tile = self.get_tile(row, column)
        if tile is None:
            return None
        return tile.toggle_state()

    def set_tile_state(self, row: int, column: int, state) -> bool:
        tile = self.get_tile(row, column)
        if tile is None or parse_tile_state(state) is None:
            return False
        return tile.set_state(state)

    def set_column_required_workers(self, column: int, count: int) -> None:
        """Set a column's required count; invalid column or count <= 0 is ignored."""
        found = self.get_column(column)
        if found is not None:
            found.set_required_workers(count)

    def set_year_and_week(self, year: int, week_number: int) -> bool:
        """
        Select the ISO week shown on the board.

        The week is clamped to the weeks the year actually has (52 or 53).
        A year outside MIN_YEAR..MAX_YEAR is ignored and returns False.
        """
        if not MIN_YEAR <= year <= MAX_YEAR:
            return False
        self.year = year
        self.week_number = max(MIN_WEEK, min(weeks_in_year(year), week_number))
        return True

    # --- Validation ---

    def count_work_in_column(self, column: int) -> int:
        """Work tiles in `column`, counting included rows only."""
        count = 0
        for row in self.rows:
            if not row.included:
                continue
            tile = row.get_tile(column)
            if tile is not None and tile.is_work():
                count += 1
        return count

    def is_column_valid(self, column: int) -> bool:
        """
        Check a column's staffing.

        Sunday must match the requirement exactly; every other day also
        accepts one extra worker.
        """
        found = self.get_column(column)
        if found is None:
            return False

        work = self.count_work_in_column(column)
        required = found.required_workers

        if found.is_sunday():
            return work == required
        return work in (required, required + 1)

    def has_extra_one(self, column: int) -> bool:
        found = self.get_column(column)
        if found is None or found.is_sunday():
            return False
        return self.count_work_in_column(column) == found.required_workers + 1

    def get_columns_status(self) -> List[ColumnStatus]:
        statuses = []
        for column in self.columns:
            work = self.count_work_in_column(column.position)
            statuses.append(ColumnStatus(
                position=column.position,
                name=DAY_NAMES[column.position],
                required_workers=column.required_workers,
                work_count=work,
                is_valid=self.is_column_valid(column.position),
                is_sunday=column.position == SUNDAY,
                has_extra_one=self.has_extra_one(column.position),
            ))
        return statuses

    def is_fully_staffed(self) -> bool:
        return all(self.is_column_valid(column.position) for column in self.columns)

    def week_dates(self) -> Optional[List[date]]:
        """Dates of the selected week, or None when no week is selected."""
        if self.year is None or self.week_number is None:
            return None
        return week_dates(self.year, self.week_number)

    # --- Serialization ---

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested value of the full board state."""
        data: Dict[str, Any] = {
            "columns": [column.to_dict() for column in self.columns],
            "rows": [row.to_dict() for row in self.rows],
        }
        if self.year is not None:
            data["year"] = self.year
        if self.week_number is not None:
            data["weekNumber"] = self.week_number
        return data

    def snapshot(self) -> Dict[str, Any]:
        """Independent copy of the board state."""
        return copy.deepcopy(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        """
        Rebuild a board from to_dict() output.

        Raises:
            InvalidStateError: If the value is not a well-formed board state

        Notes:
            - Row and tile positions are taken from list order, so a saved
              file with stale indices is renumbered on load
        """
        if not isinstance(data, dict):
            raise InvalidStateError("expected a mapping")

        columns_data = data.get("columns")
        rows_data = data.get("rows", [])
        if not isinstance(columns_data, list) or len(columns_data) != DAYS_IN_WEEK:
            raise InvalidStateError(f"expected {DAYS_IN_WEEK} columns")
        if not isinstance(rows_data, list):
            raise InvalidStateError("rows must be a list")

        try:
            columns = [
                Column.from_dict(column_data, position)
                for position, column_data in enumerate(columns_data)
            ]
            rows = [
                Row.from_dict(row_data, position)
                for position, row_data in enumerate(rows_data)
            ]
        except (AttributeError, TypeError) as e:
            raise InvalidStateError(str(e)) from e

        year = data.get("year")
        week_number = data.get("weekNumber")
        if year is not None and not isinstance(year, int):
            raise InvalidStateError(f"year must be an integer, got {year!r}")
        if week_number is not None and not isinstance(week_number, int):
            raise InvalidStateError(f"weekNumber must be an integer, got {week_number!r}")
        if year is not None and not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidStateError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        if week_number is not None and not MIN_WEEK <= week_number <= MAX_WEEK:
            raise InvalidStateError(
                f"weekNumber must be between {MIN_WEEK} and {MAX_WEEK}, got {week_number}"
            )

        return cls(columns=columns, rows=rows, year=year, week_number=week_number)
