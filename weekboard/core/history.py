"""
FILE: weekboard/core/history.py
PURPOSE: Undo/redo history over full board-state snapshots
EXPORTS:
  - HistoryManager (class)
DEPENDENCIES:
  - collections.deque (stdlib)
  - json (stdlib)
  - weekboard.core.exceptions (InvalidInputError)
NOTES:
  - Snapshots are stored as JSON text, so later changes to the live board
    can never alter a stored entry
  - Linear history: a new checkpoint clears the redo stack
  - Bounded: past `capacity` the oldest undo entry is dropped silently
  - Session-scoped (not persisted)
"""

import json
from collections import deque
from typing import Any, Deque, Dict, Optional

from .constants import DEFAULT_HISTORY_SIZE
from .exceptions import InvalidInputError
from .logger import logger


class HistoryManager:
    """
    Two bounded stacks of board snapshots.

    The caller checkpoints the pre-mutation snapshot before every change,
    and on undo/redo hands over the current snapshot so it can be restored
    by the opposite operation.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if capacity < 1:
            raise InvalidInputError(f"History capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._undo: Deque[str] = deque(maxlen=capacity)
        self._redo: Deque[str] = deque(maxlen=capacity)

    def checkpoint(self, snapshot: Dict[str, Any]) -> None:
        """
        Record the state before a mutation.

        Args:
            snapshot: Board state as returned by Board.to_dict()
        """
        if len(self._undo) == self.capacity:
            logger.debug("History full, dropping oldest checkpoint")
        self._undo.append(json.dumps(snapshot))
        self._redo.clear()

    def undo(self, current: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Step back one checkpoint.

        Args:
            current: Live board state, kept for redo

        Returns:
            State to restore, or None if there is nothing to undo
        """
        if not self._undo:
            return None
        self._redo.append(json.dumps(current))
        return json.loads(self._undo.pop())

    def redo(self, current: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Step forward again after an undo; None if there is nothing to redo."""
        if not self._redo:
            return None
        self._undo.append(json.dumps(current))
        return json.loads(self._redo.pop())

    def can_undo(self) -> bool:
        return len(self._undo) > 0

    def can_redo(self) -> bool:
        return len(self._redo) > 0

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def status(self) -> Dict[str, Any]:
        return {
            "can_undo": self.can_undo(),
            "can_redo": self.can_redo(),
            "undo_count": len(self._undo),
            "redo_count": len(self._redo),
        }
