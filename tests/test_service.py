"""Tests for the session layer: intents, history, loading and saving."""

import pytest

from weekboard.core import repository
from weekboard.core.board import Board
from weekboard.core.config import load_settings
from weekboard.core.constants import (
    INTENT_ADD_ROW,
    INTENT_REMOVE_ROW,
    INTENT_SET_ROW_HEADER,
    INTENT_SET_ROW_INCLUDED,
    INTENT_TOGGLE_TILE,
    INTENT_SET_TILE,
    INTENT_SET_COLUMN_REQUIRED,
    INTENT_MOVE_ROW_UP,
    INTENT_SET_YEAR_AND_WEEK,
    VALID_INTENTS,
)
from weekboard.core.exceptions import InvalidInputError, UnknownIntentError
from weekboard.core.models import TileState
from weekboard.core.service import INTENT_FIELDS, BoardSession, open_session


@pytest.fixture
def session():
    return BoardSession(board=Board(year=2025, week_number=3))


def test_every_intent_has_payload_rules(session):
    assert set(INTENT_FIELDS) == set(VALID_INTENTS)
    assert set(session._handlers) == set(VALID_INTENTS)


def test_add_row_returns_row_and_checkpoints(session):
    row = session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    assert row.label == "Anna"
    assert session.history.can_undo()


def test_every_intent_saves(session, temp_state):
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    session.dispatch(INTENT_TOGGLE_TILE, {"row": 0, "column": 1})
    saved = repository.load_state()
    assert saved["rows"][0]["tiles"][1]["state"] == "Praca"


def test_unknown_intent_is_rejected_before_checkpoint(session):
    with pytest.raises(UnknownIntentError):
        session.dispatch("paint-tile", {"row": 0})
    assert not session.history.can_undo()


def test_missing_payload_field_is_rejected(session):
    with pytest.raises(InvalidInputError):
        session.dispatch(INTENT_TOGGLE_TILE, {"row": 0})
    with pytest.raises(InvalidInputError):
        session.dispatch(INTENT_REMOVE_ROW, {"row": "0"})
    with pytest.raises(InvalidInputError):
        session.dispatch(INTENT_SET_TILE, {"row": 0, "column": 0, "state": "bogus"})
    assert not session.history.can_undo()


def test_out_of_range_positions_return_failure(session):
    assert session.dispatch(INTENT_REMOVE_ROW, {"row": 4}) is False
    assert session.dispatch(INTENT_TOGGLE_TILE, {"row": 4, "column": 0}) is None
    assert session.dispatch(INTENT_MOVE_ROW_UP, {"row": 0}) is False


def test_undo_and_redo_restore_board(session):
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    session.dispatch(INTENT_SET_TILE, {"row": 0, "column": 6, "state": "Praca"})
    session.dispatch(INTENT_SET_ROW_HEADER, {"row": 0, "label": "Anna K."})

    assert session.undo() is True
    assert session.board.rows[0].label == "Anna"
    assert session.undo() is True
    assert session.board.get_tile(0, 6).state == TileState.AVAILABLE
    assert session.redo() is True
    assert session.board.get_tile(0, 6).state == TileState.WORK
    assert session.board.rows[0].label == "Anna"


def test_new_intent_after_undo_clears_redo(session):
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    session.undo()
    session.dispatch(INTENT_ADD_ROW, {"label": "Bob"})
    assert session.redo() is False
    assert [r.label for r in session.board.rows] == ["Bob"]


def test_undo_with_empty_history(session):
    assert session.undo() is False
    assert session.redo() is False


def test_staffing_intents(session):
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    session.dispatch(INTENT_SET_COLUMN_REQUIRED, {"column": 2, "count": 2})
    session.dispatch(INTENT_SET_ROW_INCLUDED, {"row": 0, "included": False})
    session.dispatch(INTENT_SET_YEAR_AND_WEEK, {"year": 2026, "week": 10})

    board = session.board
    assert board.columns[2].required_workers == 2
    assert board.rows[0].included is False
    assert (board.year, board.week_number) == (2026, 10)


def test_intents_ignored_while_loading(session):
    session.loading = True
    assert session.dispatch(INTENT_ADD_ROW, {"label": "Anna"}) is None
    assert session.board.rows == []
    assert not session.history.can_undo()


def test_load_replaces_board_and_clears_history(session):
    saved = Board(year=2024, week_number=40)
    saved.add_row("Cleo")
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})

    assert session.load(saved.to_dict()) is True
    assert [r.label for r in session.board.rows] == ["Cleo"]
    assert not session.history.can_undo()


def test_load_invalid_state_keeps_board(session):
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    assert session.load({"columns": [], "rows": []}) is False
    assert [r.label for r in session.board.rows] == ["Anna"]
    assert session.loading is False


def test_load_fills_missing_week(session):
    data = Board().to_dict()
    assert "year" not in data
    session.load(data)
    assert session.board.year is not None
    assert session.board.week_number is not None


def test_open_session_loads_saved_board(temp_state):
    first = open_session(save_delay=0)
    first.dispatch(INTENT_ADD_ROW, {"label": "Anna"})

    second = open_session(save_delay=0)
    assert [r.label for r in second.board.rows] == ["Anna"]
    assert not second.history.can_undo()


def test_open_session_uses_configured_history_size(monkeypatch):
    monkeypatch.setenv("WEEKBOARD_HISTORY_SIZE", "2")
    session = open_session(load_settings(), save_delay=0)
    for _ in range(4):
        session.dispatch(INTENT_ADD_ROW, {"label": "x"})
    assert session.history.status()["undo_count"] == 2


def test_debounced_session_flushes_on_request(temp_state):
    session = BoardSession(save_delay=60)
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    assert not temp_state.exists()
    assert session.flush() is True
    assert repository.load_state()["rows"][0]["header"] == "Anna"


def test_save_now(temp_state):
    session = BoardSession(save_delay=60)
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    assert session.save_now() is True
    assert temp_state.exists()


def test_reset_deletes_saved_state_and_can_be_undone(temp_state):
    session = BoardSession(save_delay=0)
    session.dispatch(INTENT_ADD_ROW, {"label": "Anna"})
    assert temp_state.exists()

    assert session.reset() is True
    assert session.board.rows == []
    assert not temp_state.exists()

    assert session.undo() is True
    assert [r.label for r in session.board.rows] == ["Anna"]


def test_load_rejects_year_out_of_range(session):
    data = Board(year=2025, week_number=1).to_dict()
    data["year"] = 0

    assert session.load(data) is False
    assert session.board.year == 2025
    assert session.board.week_dates() is not None
