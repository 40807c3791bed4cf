"""Tests for saving and loading board state."""

import json

from weekboard.core import repository
from weekboard.core.board import Board


def test_load_without_saved_state(temp_state):
    assert not temp_state.exists()
    assert repository.load_state() is None


def test_save_then_load(temp_state):
    board = Board()
    board.add_row("Anna")
    board.set_year_and_week(2025, 3)

    assert repository.save_state(board.to_dict()) is True
    assert temp_state.exists()
    assert repository.load_state() == board.to_dict()


def test_save_creates_directory(monkeypatch, tmp_path):
    nested = tmp_path / "a" / "b" / "board-state.json"
    monkeypatch.setattr(repository, "STATE_PATH", nested)

    assert repository.save_state(Board().to_dict()) is True
    assert nested.exists()


def test_save_leaves_no_temp_files(temp_state):
    repository.save_state(Board().to_dict())
    repository.save_state(Board().to_dict())
    assert [p.name for p in temp_state.parent.iterdir() if p.name.startswith(".board-state-")] == []


def test_corrupt_file_loads_as_nothing(temp_state):
    temp_state.write_text("{not json", encoding="utf-8")
    assert repository.load_state() is None

    temp_state.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert repository.load_state() is None


def test_unserializable_state_is_reported(temp_state):
    repository.save_state({"rows": []})
    assert repository.save_state({"bad": object()}) is False
    # Previous save is untouched
    assert repository.load_state() == {"rows": []}


def test_clear_state(temp_state):
    repository.save_state(Board().to_dict())
    assert repository.clear_state() is True
    assert not temp_state.exists()
    # Clearing twice is fine
    assert repository.clear_state() is True
