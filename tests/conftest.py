"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from weekboard.core import repository


@pytest.fixture(autouse=True)
def temp_state(monkeypatch, tmp_path):
    """Keep saved state, logs and settings inside a temporary directory."""
    state_path = tmp_path / "board-state.json"
    monkeypatch.setattr(repository, "STATE_PATH", state_path)
    monkeypatch.setattr(repository, "DATA_DIR", tmp_path)
    monkeypatch.setenv("WEEKBOARD_HOME", str(tmp_path))
    for name in ("WEEKBOARD_TEMPLATE", "WEEKBOARD_HISTORY_SIZE", "WEEKBOARD_SAVE_DELAY",
                 "WEEKBOARD_WORK_HOURS", "WEEKBOARD_HEADER_TITLE"):
        monkeypatch.delenv(name, raising=False)
    yield state_path
