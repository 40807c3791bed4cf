"""Tests for the Board aggregate: mutations, renumbering and staffing rules."""

from datetime import date

import pytest

from weekboard.core.board import Board
from weekboard.core.exceptions import InvalidStateError
from weekboard.core.models import TileState


def make_board(*labels):
    board = Board()
    for label in labels:
        board.add_row(label)
    return board


def assert_dense(board):
    for position, row in enumerate(board.rows):
        assert row.position == position
        assert all(tile.row == position for tile in row.tiles)


def test_new_board_has_seven_columns():
    board = Board()
    assert len(board.columns) == 7
    assert [c.position for c in board.columns] == list(range(7))
    assert all(c.required_workers == 1 for c in board.columns)
    assert board.rows == []


def test_empty_selects_current_iso_week():
    board = Board.empty(today=date(2025, 1, 15))
    assert (board.year, board.week_number) == (2025, 3)


def test_add_row_appends_included_row():
    board = make_board("Anna")
    row = board.add_row("Bob")
    assert row.position == 1
    assert row.included
    assert [r.label for r in board.rows] == ["Anna", "Bob"]


def test_remove_row_renumbers():
    board = make_board("Anna", "Bob", "Cleo")
    assert board.remove_row(0) is True
    assert [r.label for r in board.rows] == ["Bob", "Cleo"]
    assert_dense(board)


def test_remove_row_out_of_range_is_noop():
    board = make_board("Anna")
    assert board.remove_row(1) is False
    assert board.remove_row(-1) is False
    assert len(board.rows) == 1


def test_move_rows_swaps_and_renumbers():
    board = make_board("Anna", "Bob", "Cleo")
    assert board.move_row_up(2) is True
    assert [r.label for r in board.rows] == ["Anna", "Cleo", "Bob"]
    assert board.move_row_down(0) is True
    assert [r.label for r in board.rows] == ["Cleo", "Anna", "Bob"]
    assert_dense(board)


def test_move_rows_at_edges_fail():
    board = make_board("Anna", "Bob")
    assert board.move_row_up(0) is False
    assert board.move_row_down(1) is False
    assert board.move_row_up(5) is False
    assert [r.label for r in board.rows] == ["Anna", "Bob"]


def test_invalid_positions_return_failure():
    board = make_board("Anna")
    assert board.set_row_header(3, "X") is False
    assert board.set_row_included(3, False) is False
    assert board.toggle_tile_state(3, 0) is None
    assert board.toggle_tile_state(0, 7) is None
    assert board.set_tile_state(0, 9, TileState.WORK) is False
    board.set_column_required_workers(9, 2)
    assert all(c.required_workers == 1 for c in board.columns)


def test_set_column_required_ignores_non_positive():
    board = Board()
    board.set_column_required_workers(2, 3)
    board.set_column_required_workers(2, 0)
    assert board.columns[2].required_workers == 3


@pytest.mark.parametrize("column, required, work, valid", [
    (0, 1, 0, False),
    (0, 1, 1, True),
    (0, 1, 2, True),
    (0, 1, 3, False),
    (5, 2, 3, True),
    (6, 1, 1, True),
    (6, 1, 2, False),
    (6, 2, 1, False),
])
def test_column_validity(column, required, work, valid):
    board = Board()
    board.set_column_required_workers(column, required)
    for index in range(work):
        board.add_row(f"W{index}")
        board.set_tile_state(index, column, TileState.WORK)
    assert board.count_work_in_column(column) == work
    assert board.is_column_valid(column) is valid


def test_excluded_rows_do_not_count():
    board = make_board("Anna", "Bob")
    board.set_tile_state(0, 0, TileState.WORK)
    board.set_tile_state(1, 0, TileState.WORK)
    board.set_row_included(1, False)

    status = board.get_columns_status()[0]
    assert status.work_count == 1
    assert status.is_valid is True
    assert status.has_extra_one is False


def test_has_extra_one_never_on_sunday():
    board = make_board("Anna", "Bob")
    for row in range(2):
        board.set_tile_state(row, 1, TileState.WORK)
        board.set_tile_state(row, 6, TileState.WORK)
    assert board.has_extra_one(1) is True
    assert board.has_extra_one(6) is False


def test_columns_status_recomputed_after_mutation():
    board = make_board("Anna")
    assert board.get_columns_status()[3].work_count == 0
    board.toggle_tile_state(0, 3)
    status = board.get_columns_status()[3]
    assert status.work_count == 1
    assert status.name == "Thursday"
    assert status.is_sunday is False


def test_fully_staffed():
    board = make_board("Anna")
    assert board.is_fully_staffed() is False
    for column in range(7):
        board.set_tile_state(0, column, TileState.WORK)
    assert board.is_fully_staffed() is True


def test_set_year_and_week_clamps_week():
    board = Board()
    assert board.set_year_and_week(2025, 60) is True
    assert board.week_number == 52
    board.set_year_and_week(2020, 60)
    assert board.week_number == 53
    board.set_year_and_week(2025, 0)
    assert board.week_number == 1


def test_set_year_and_week_ignores_year_out_of_range():
    board = Board(year=2025, week_number=3)
    assert board.set_year_and_week(0, 1) is False
    assert board.set_year_and_week(10000, 1) is False
    assert (board.year, board.week_number) == (2025, 3)


def test_end_to_end_scenario():
    board = Board()
    board.add_row("Anna")
    for _ in range(3):
        board.toggle_tile_state(0, 0)
    assert board.get_tile(0, 0).state == TileState.AVAILABLE

    board.set_column_required_workers(0, 1)
    assert board.toggle_tile_state(0, 0) == TileState.WORK
    assert board.is_column_valid(0) is True

    board.add_row("Bob")
    assert board.toggle_tile_state(1, 0) == TileState.WORK
    assert board.is_column_valid(0) is True

    # Same staffing on Sunday: two workers against one required
    board.set_tile_state(0, 6, TileState.WORK)
    board.set_tile_state(1, 6, TileState.WORK)
    assert board.count_work_in_column(6) == 2
    assert board.is_column_valid(6) is False


def _empty_board():
    return Board()


def _single_row_board():
    board = make_board("Anna")
    board.set_year_and_week(2025, 3)
    return board


def _mixed_board():
    board = make_board("Anna", "Bob", "", "Dora", "Emil")
    board.toggle_tile_state(0, 2)
    board.set_tile_state(1, 5, TileState.LEAVE)
    board.set_tile_state(2, 6, TileState.WORK)
    board.set_tile_state(4, 0, TileState.LEAVE)
    board.toggle_tile_state(4, 1)
    board.set_row_included(1, False)
    board.set_row_included(3, False)
    board.set_column_required_workers(4, 3)
    board.set_column_required_workers(6, 2)
    board.set_year_and_week(2020, 53)
    return board


@pytest.mark.parametrize("build", [_empty_board, _single_row_board, _mixed_board])
def test_round_trip_preserves_state(build):
    board = build()

    restored = Board.from_dict(board.to_dict())
    assert restored == board
    assert restored.to_dict() == board.to_dict()
    assert Board.from_dict(restored.to_dict()) == restored


def test_to_dict_uses_saved_state_keys():
    board = make_board("Anna")
    board.set_year_and_week(2025, 3)
    data = board.to_dict()
    assert set(data) == {"columns", "rows", "year", "weekNumber"}
    assert data["columns"][0] == {"index": 0, "requiredWorkers": 1}
    row = data["rows"][0]
    assert row["header"] == "Anna"
    assert row["includedInCalculations"] is True
    assert row["tiles"][0] == {"rowIndex": 0, "columnIndex": 0, "state": "A"}


def test_snapshot_is_independent():
    board = make_board("Anna")
    snapshot = board.snapshot()
    board.toggle_tile_state(0, 0)
    board.set_row_header(0, "Changed")
    assert snapshot["rows"][0]["header"] == "Anna"
    assert snapshot["rows"][0]["tiles"][0]["state"] == "A"


def test_from_dict_renumbers_stale_indices():
    data = make_board("Anna", "Bob").to_dict()
    data["rows"][0]["index"] = 7
    data["rows"][1]["tiles"][0]["rowIndex"] = 9
    board = Board.from_dict(data)
    assert_dense(board)


def test_from_dict_rejects_malformed_state():
    with pytest.raises(InvalidStateError):
        Board.from_dict({"columns": [], "rows": []})
    with pytest.raises(InvalidStateError):
        Board.from_dict("not a board")
    data = Board().to_dict()
    data["rows"] = "oops"
    with pytest.raises(InvalidStateError):
        Board.from_dict(data)
    data = Board().to_dict()
    data["year"] = "2025"
    with pytest.raises(InvalidStateError):
        Board.from_dict(data)


@pytest.mark.parametrize("year, week", [(0, 1), (9999, 1), (1999, 10), (2025, 0), (2025, 54)])
def test_from_dict_rejects_year_or_week_out_of_range(year, week):
    data = Board().to_dict()
    data["year"] = year
    data["weekNumber"] = week
    with pytest.raises(InvalidStateError):
        Board.from_dict(data)


def test_week_dates_requires_selection():
    board = Board()
    assert board.week_dates() is None
    board.set_year_and_week(2025, 3)
    dates = board.week_dates()
    assert dates[0] == date(2025, 1, 13)
    assert dates[-1] == date(2025, 1, 19)
