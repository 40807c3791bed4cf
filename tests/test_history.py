"""Tests for undo/redo history."""

import pytest

from weekboard.core.board import Board
from weekboard.core.exceptions import InvalidInputError
from weekboard.core.history import HistoryManager


def state(label):
    board = Board()
    board.add_row(label)
    return board.to_dict()


def test_undo_on_empty_history_returns_none():
    history = HistoryManager()
    assert history.undo(state("now")) is None
    assert history.redo(state("now")) is None
    assert not history.can_undo()
    assert not history.can_redo()


def test_undo_then_redo():
    history = HistoryManager()
    before, after = state("before"), state("after")

    history.checkpoint(before)
    assert history.undo(after) == before
    assert history.can_redo()
    assert history.redo(before) == after
    assert history.can_undo()


def test_checkpoint_clears_redo():
    history = HistoryManager()
    history.checkpoint(state("one"))
    history.undo(state("two"))
    assert history.can_redo()

    history.checkpoint(state("three"))
    assert not history.can_redo()
    assert history.redo(state("four")) is None


def test_capacity_drops_oldest():
    history = HistoryManager(capacity=3)
    for index in range(5):
        history.checkpoint(state(str(index)))

    assert history.status()["undo_count"] == 3
    restored = [history.undo(state("live"))["rows"][0]["header"] for _ in range(3)]
    assert restored == ["4", "3", "2"]
    assert history.undo(state("live")) is None


def test_stored_snapshot_is_independent_of_caller():
    history = HistoryManager()
    snapshot = state("Anna")
    history.checkpoint(snapshot)
    snapshot["rows"][0]["header"] = "mutated"

    assert history.undo(state("live"))["rows"][0]["header"] == "Anna"


def test_clear_and_status():
    history = HistoryManager()
    history.checkpoint(state("a"))
    history.checkpoint(state("b"))
    history.undo(state("c"))
    assert history.status() == {
        "can_undo": True,
        "can_redo": True,
        "undo_count": 1,
        "redo_count": 1,
    }
    history.clear()
    assert history.status()["undo_count"] == 0
    assert history.status()["redo_count"] == 0


def test_capacity_must_be_positive():
    with pytest.raises(InvalidInputError):
        HistoryManager(capacity=0)
