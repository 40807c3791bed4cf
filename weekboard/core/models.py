"""
FILE: weekboard/core/models.py
PURPOSE: Domain models for tile states, tiles, rows, and columns
EXPORTS:
  - TileState (enum)
  - TILE_STATE_ORDER: Cycling order of tile states
  - next_tile_state(state) -> TileState
  - parse_tile_state(value) -> TileState
  - Tile (dataclass)
  - Column (dataclass)
  - Row (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - json (stdlib)
  - weekboard.core.constants (board layout)
  - weekboard.core.exceptions (InvalidStateError)
NOTES:
  - All models have from_dict() for reconstruction from saved state
  - All models have to_dict() returning plain JSON-ready values
  - Serialized keys match the board-state.json format
    (index, header, includedInCalculations, rowIndex, columnIndex, state, ...)
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .constants import DAYS_IN_WEEK, SUNDAY, DAY_NAMES, DEFAULT_REQUIRED_WORKERS
from .exceptions import InvalidStateError
from .logger import logger


class TileState(str, Enum):
    """Duty state of a single day cell."""

    AVAILABLE = "A"
    WORK = "Praca"
    LEAVE = "U"

    def __str__(self) -> str:
        return self.value


TILE_STATE_ORDER = (TileState.AVAILABLE, TileState.WORK, TileState.LEAVE)

# Friendly aliases accepted from the command line
_STATE_ALIASES = {
    "a": TileState.AVAILABLE,
    "available": TileState.AVAILABLE,
    "free": TileState.AVAILABLE,
    "praca": TileState.WORK,
    "work": TileState.WORK,
    "w": TileState.WORK,
    "u": TileState.LEAVE,
    "leave": TileState.LEAVE,
    "l": TileState.LEAVE,
}


def next_tile_state(state) -> TileState:
    """
    Return the state after `state` in the cycling order.

    Available -> Work -> Leave -> Available. A value that is not a known
    state advances to the first state (Available).
    """
    try:
        current = TileState(state)
    except ValueError:
        return TILE_STATE_ORDER[0]

    index = TILE_STATE_ORDER.index(current)
    return TILE_STATE_ORDER[(index + 1) % len(TILE_STATE_ORDER)]


def parse_tile_state(value: str) -> Optional[TileState]:
    """
    Parse a state label or alias ("A", "Praca", "work", "leave", ...).

    Returns:
        Matching TileState, or None if the value is not recognized
    """
    if isinstance(value, TileState):
        return value
    try:
        return TileState(value)
    except ValueError:
        return _STATE_ALIASES.get(str(value).strip().lower())


@dataclass
class Tile:
    """One day cell of a row."""

    row: int
    column: int
    state: TileState = TileState.AVAILABLE

    def toggle_state(self) -> TileState:
        """Advance to the next state and return it."""
        self.state = next_tile_state(self.state)
        return self.state

    def set_state(self, state) -> bool:
        """Set a known state; unknown values are ignored."""
        parsed = parse_tile_state(state)
        if parsed is None:
            return False
        self.state = parsed
        return True

    def is_work(self) -> bool:
        return self.state == TileState.WORK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rowIndex": self.row,
            "columnIndex": self.column,
            "state": self.state.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], row: int, column: int) -> "Tile":
        """
        Rebuild a tile at the given coordinates.

        Unknown states (corrupted data) are coerced to Available.
        """
        raw_state = data.get("state", TileState.AVAILABLE.value)
        try:
            state = TileState(raw_state)
        except ValueError:
            logger.warning(
                "Unknown tile state %r at row %d, column %d; using %s",
                raw_state, row, column, TileState.AVAILABLE.value,
            )
            state = TileState.AVAILABLE
        return cls(row=row, column=column, state=state)


@dataclass
class Column:
    """A weekday slot with its staffing requirement."""

    position: int
    required_workers: int = DEFAULT_REQUIRED_WORKERS

    @property
    def name(self) -> str:
        return DAY_NAMES[self.position]

    def is_sunday(self) -> bool:
        return self.position == SUNDAY

    def set_required_workers(self, count: int) -> None:
        """Set the required count; values <= 0 are silently ignored."""
        if count > 0:
            self.required_workers = count

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.position, "requiredWorkers": self.required_workers}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], position: int) -> "Column":
        required = data.get("requiredWorkers", DEFAULT_REQUIRED_WORKERS)
        if isinstance(required, bool) or not isinstance(required, int) or required <= 0:
            raise InvalidStateError(
                f"column {position} has invalid requiredWorkers {required!r}"
            )
        return cls(position=position, required_workers=required)


def _default_tiles(row: int) -> List[Tile]:
    return [Tile(row=row, column=column) for column in range(DAYS_IN_WEEK)]


@dataclass
class Row:
    """An employee row: label, inclusion flag and one tile per weekday."""

    position: int
    label: str = ""
    included: bool = True
    tiles: List[Tile] = field(default_factory=list)

    def __post_init__(self):
        if not self.tiles:
            self.tiles = _default_tiles(self.position)

    def get_tile(self, column: int) -> Optional[Tile]:
        if 0 <= column < len(self.tiles):
            return self.tiles[column]
        return None

    def update_position(self, position: int) -> None:
        """Move the row to `position`, keeping tile back-references in sync."""
        self.position = position
        for tile in self.tiles:
            tile.row = position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.position,
            "header": self.label,
            "includedInCalculations": self.included,
            "tiles": [tile.to_dict() for tile in self.tiles],
        }

    def to_json(self) -> str:
        """Serialize row to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], position: int) -> "Row":
        """
        Rebuild a row at `position`.

        Raises:
            InvalidStateError: If the row does not hold exactly 7 tiles
        """
        tiles_data = data.get("tiles")
        if not isinstance(tiles_data, list) or len(tiles_data) != DAYS_IN_WEEK:
            raise InvalidStateError(f"row {position} must have {DAYS_IN_WEEK} tiles")

        label = data.get("header") or ""
        tiles = [
            Tile.from_dict(tile_data, row=position, column=column)
            for column, tile_data in enumerate(tiles_data)
        ]
        return cls(
            position=position,
            label=str(label),
            included=bool(data.get("includedInCalculations", True)),
            tiles=tiles,
        )
