"""
FILE: weekboard/core/repository.py
PURPOSE: Persistence of the board state as a JSON file
EXPORTS:
  - DATA_DIR, STATE_PATH: Storage location
  - load_state() -> dict | None
  - save_state(state) -> bool
  - clear_state() -> bool
DEPENDENCIES:
  - json, os, tempfile, pathlib (stdlib)
  - weekboard.core.config (data directory)
  - weekboard.core.exceptions (StorageError)
NOTES:
  - State stored at ~/.weekboard/board-state.json (or $WEEKBOARD_HOME)
  - Auto-creates the directory on first save
  - Never raises for I/O problems: failures are logged and reported through
    the return value
  - Writes go to a temp file that atomically replaces the old state
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from .config import default_data_dir
from .constants import STATE_FILENAME
from .exceptions import StorageError
from .logger import logger


# State file location (resolved at import, patched in tests)
DATA_DIR = default_data_dir()
STATE_PATH = DATA_DIR / STATE_FILENAME


def _read_state_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(path, str(e)) from e

    if not isinstance(data, dict):
        raise StorageError(path, "saved state is not a JSON object")
    return data


def load_state() -> Optional[Dict[str, Any]]:
    """
    Load the saved board state.

    Returns:
        The saved state, or None when nothing is saved or the file is unreadable
    """
    if not STATE_PATH.exists():
        logger.info("No saved state at %s", STATE_PATH)
        return None

    try:
        state = _read_state_file(STATE_PATH)
    except StorageError as e:
        logger.error("Failed to load state: %s", e)
        return None

    logger.info("Loaded state from %s", STATE_PATH)
    return state


def save_state(state: Dict[str, Any]) -> bool:
    """
    Save the board state, overwriting any previous save.

    Args:
        state: Board state as returned by Board.to_dict()

    Returns:
        True if the state was written, False otherwise
    """
    tmp_name = None
    try:
        STATE_PATH.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=".board-state-", suffix=".tmp", dir=STATE_PATH.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, STATE_PATH)
        tmp_name = None
    except (OSError, TypeError, ValueError) as e:
        logger.error("Failed to save state to %s: %s", STATE_PATH, e)
        return False
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.debug("Saved state to %s", STATE_PATH)
    return True


def clear_state() -> bool:
    """Delete the saved state. Returns False if the file could not be removed."""
    try:
        if STATE_PATH.exists():
            STATE_PATH.unlink()
    except OSError as e:
        logger.error("Failed to clear state at %s: %s", STATE_PATH, e)
        return False

    logger.info("Cleared saved state at %s", STATE_PATH)
    return True
