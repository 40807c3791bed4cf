"""
FILE: weekboard/core/service.py
PURPOSE: Session layer - routes mutation intents to the board with history and saving
EXPORTS:
  - BoardSession (class)
  - open_session(settings, save_delay) -> BoardSession
DEPENDENCIES:
  - weekboard.core.board (Board)
  - weekboard.core.history (HistoryManager)
  - weekboard.core.repository (load/save/clear state)
  - weekboard.core.scheduler (SaveScheduler)
  - weekboard.core.export (export_board)
  - weekboard.core.exceptions (InvalidInputError, UnknownIntentError, InvalidStateError)
NOTES:
  - Every accepted intent checkpoints the pre-mutation snapshot first,
    then mutates, then requests a debounced save
  - Unknown intents and malformed payloads are rejected before anything
    is checkpointed or changed
  - Positional intents with out-of-range positions are accepted and return
    the board's False/None result (no exception)
  - A failed or invalid load leaves the empty default board
  - Intents are ignored while a load is in progress
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from . import repository
from .board import Board
from .config import Settings, load_settings
from .constants import (
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
)
from .exceptions import InvalidInputError, InvalidStateError, UnknownIntentError
from .export import ExportResult, export_board
from .history import HistoryManager
from .logger import logger
from .models import parse_tile_state
from .scheduler import SaveScheduler


# Required payload fields per intent: (integer fields, other fields)
INTENT_FIELDS = {
    INTENT_ADD_ROW: ((), ()),
    INTENT_REMOVE_ROW: (("row",), ()),
    INTENT_SET_ROW_HEADER: (("row",), ("label",)),
    INTENT_SET_ROW_INCLUDED: (("row",), ("included",)),
    INTENT_TOGGLE_TILE: (("row", "column"), ()),
    INTENT_SET_TILE: (("row", "column"), ("state",)),
    INTENT_SET_COLUMN_REQUIRED: (("column", "count"), ()),
    INTENT_MOVE_ROW_UP: (("row",), ()),
    INTENT_MOVE_ROW_DOWN: (("row",), ()),
    INTENT_SET_YEAR_AND_WEEK: (("year", "week"), ()),
}


def validate_payload(intent: str, payload: Dict[str, Any]) -> None:
    """
    Check that `payload` carries the fields `intent` needs.

    Raises:
        UnknownIntentError: If the intent is not part of the protocol
        InvalidInputError: If a field is missing or has the wrong type
    """
    if intent not in INTENT_FIELDS:
        raise UnknownIntentError(intent)

    int_fields, other_fields = INTENT_FIELDS[intent]
    missing = [key for key in int_fields + other_fields if key not in payload]
    if missing:
        raise InvalidInputError(
            f"Intent '{intent}' requires payload field(s): {', '.join(missing)}"
        )

    for key in int_fields:
        value = payload[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"Intent '{intent}': '{key}' must be an integer")

    if intent == INTENT_SET_TILE and parse_tile_state(payload["state"]) is None:
        raise InvalidInputError(f"Unknown tile state '{payload['state']}'")


class BoardSession:
    """
    Live board plus its undo history and save scheduling.

    Args:
        board: Initial board (None = empty board for the current week)
        history: Undo/redo history (None = new HistoryManager)
        save: Persist callable (defaults to repository.save_state)
        save_delay: Debounce delay in seconds (0 = save synchronously)
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        history: Optional[HistoryManager] = None,
        save: Optional[Callable[[Dict[str, Any]], bool]] = None,
        save_delay: float = 0.0,
    ):
        self.board = board if board is not None else Board.empty()
        self.history = history if history is not None else HistoryManager()
        self.scheduler = SaveScheduler(save or repository.save_state, save_delay)
        self.loading = False

        self._handlers: Dict[str, Callable[[Dict[str, Any]], Any]] = {
            INTENT_ADD_ROW: self._add_row,
            INTENT_REMOVE_ROW: self._remove_row,
            INTENT_SET_ROW_HEADER: self._set_row_header,
            INTENT_SET_ROW_INCLUDED: self._set_row_included,
            INTENT_TOGGLE_TILE: self._toggle_tile,
            INTENT_SET_TILE: self._set_tile,
            INTENT_SET_COLUMN_REQUIRED: self._set_column_required,
            INTENT_MOVE_ROW_UP: self._move_row_up,
            INTENT_MOVE_ROW_DOWN: self._move_row_down,
            INTENT_SET_YEAR_AND_WEEK: self._set_year_and_week,
        }

    # --- Mutation protocol ---

    def dispatch(self, intent: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """
        Apply a named mutation intent.

        Args:
            intent: One of the INTENT_* names (e.g. "toggle-tile")
            payload: Intent fields (e.g. {"row": 0, "column": 3})

        Returns:
            The board operation's result (new Row, bool, TileState or None),
            or None when ignored during loading

        Raises:
            UnknownIntentError: If the intent is not part of the protocol
            InvalidInputError: If the payload lacks required fields
        """
        payload = payload or {}
        try:
            validate_payload(intent, payload)
        except InvalidInputError as e:
            logger.info("Rejected intent %r: %s", intent, e)
            raise

        handler = self._handlers[intent]

        if self.loading:
            logger.debug("Ignoring intent %s while loading", intent)
            return None

        self.history.checkpoint(self.board.to_dict())
        result = handler(payload)
        self.request_save()
        return result

    def _add_row(self, payload):
        return self.board.add_row(str(payload.get("label", "")))

    def _remove_row(self, payload):
        return self.board.remove_row(payload["row"])

    def _set_row_header(self, payload):
        return self.board.set_row_header(payload["row"], str(payload["label"]))

    def _set_row_included(self, payload):
        return self.board.set_row_included(payload["row"], bool(payload["included"]))

    def _toggle_tile(self, payload):
        return self.board.toggle_tile_state(payload["row"], payload["column"])

    def _set_tile(self, payload):
        return self.board.set_tile_state(payload["row"], payload["column"], payload["state"])

    def _set_column_required(self, payload):
        return self.board.set_column_required_workers(payload["column"], payload["count"])

    def _move_row_up(self, payload):
        return self.board.move_row_up(payload["row"])

    def _move_row_down(self, payload):
        return self.board.move_row_down(payload["row"])

    def _set_year_and_week(self, payload):
        return self.board.set_year_and_week(payload["year"], payload["week"])

    # --- History ---

    def undo(self) -> bool:
        """Restore the previous checkpoint. Returns False if there is none."""
        previous = self.history.undo(self.board.to_dict())
        if previous is None:
            return False
        self.board = Board.from_dict(previous)
        self.request_save()
        return True

    def redo(self) -> bool:
        """Re-apply the last undone change. Returns False if there is none."""
        following = self.history.redo(self.board.to_dict())
        if following is None:
            return False
        self.board = Board.from_dict(following)
        self.request_save()
        return True

    # --- Persistence ---

    def load(self, state: Optional[Dict[str, Any]] = None) -> bool:
        """
        Replace the board with saved state.

        Args:
            state: State to load (None = read from the repository)

        Returns:
            True if a saved board was loaded, False if the default board is kept
        """
        self.loading = True
        try:
            if state is None:
                state = repository.load_state()
            if state is None:
                return False
            try:
                board = Board.from_dict(state)
            except InvalidStateError as e:
                logger.error("Ignoring saved state: %s", e)
                return False
            if board.year is None or board.week_number is None:
                default = Board.empty()
                board.year, board.week_number = default.year, default.week_number
            self.board = board
            self.history.clear()
            return True
        finally:
            self.loading = False

    def request_save(self) -> None:
        """Schedule a save of the current board state."""
        self.scheduler.schedule(self.board.to_dict())

    def save_now(self) -> bool:
        """Save immediately, replacing any pending debounced save."""
        self.scheduler.schedule(self.board.to_dict())
        return self.scheduler.flush()

    def flush(self) -> bool:
        """Write a pending debounced save, if any."""
        return self.scheduler.flush()

    def reset(self) -> bool:
        """Start over with an empty board and delete the saved state."""
        self.scheduler.cancel()
        self.history.checkpoint(self.board.to_dict())
        self.board = Board.empty()
        return repository.clear_state()

    # --- Export ---

    def export(
        self,
        destination: Optional[Union[str, Path]],
        template_path: Optional[Union[str, Path]] = None,
        settings: Optional[Settings] = None,
    ) -> ExportResult:
        """Export a snapshot of the current board."""
        return export_board(
            Board.from_dict(self.board.snapshot()),
            destination,
            template_path=template_path,
            settings=settings,
        )


def open_session(settings: Optional[Settings] = None, save_delay: Optional[float] = None) -> BoardSession:
    """
    Create a session from settings and load the saved board.

    Args:
        settings: Settings (None = from environment)
        save_delay: Override the configured debounce delay (0 for one-shot commands)
    """
    settings = settings or load_settings()
    session = BoardSession(
        history=HistoryManager(settings.history_size),
        save_delay=settings.save_delay if save_delay is None else save_delay,
    )
    session.load()
    return session
