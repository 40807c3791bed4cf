"""Tests for spreadsheet export."""

from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook

from weekboard.core.board import Board
from weekboard.core.config import Settings
from weekboard.core.export import (
    ExportStatus,
    build_default_template,
    export_board,
    tile_export_value,
)
from weekboard.core.models import TileState


@pytest.fixture
def board():
    board = Board(year=2025, week_number=3)
    board.add_row("Anna")
    board.add_row("Bob")
    board.set_tile_state(0, 0, TileState.WORK)
    board.set_tile_state(1, 6, TileState.LEAVE)
    return board


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path, work_hours="8.00-16.00", header_title="Plan")


def test_tile_export_values():
    assert tile_export_value(TileState.AVAILABLE) == "A"
    assert tile_export_value(TileState.WORK) == "9.00-17.30"
    assert tile_export_value(TileState.WORK, "7-15") == "7-15"
    assert tile_export_value(TileState.LEAVE) == "U"
    assert tile_export_value("junk") == ""


def test_export_with_default_layout(board, settings, tmp_path):
    out = tmp_path / "plan.xlsx"
    result = export_board(board, out, settings=settings)

    assert result.status == ExportStatus.SUCCESS
    assert result.path == out
    ws = load_workbook(out).worksheets[0]

    assert [ws.cell(row=2, column=c).value for c in range(3, 10)] == [
        "13.01.2025", "14.01.2025", "15.01.2025", "16.01.2025",
        "17.01.2025", "18.01.2025", "19.01.2025",
    ]
    assert ws["A4"].value == "Anna"
    assert ws["C4"].value == "8.00-16.00"
    assert ws["D4"].value == "A"
    assert ws["A7"].value == "Bob"
    assert ws["I7"].value == "U"
    header = ws.oddHeader.center.text
    assert header.startswith("Plan")
    assert header.endswith("Januar 2025")


def test_export_into_template(board, settings, tmp_path):
    template_path = tmp_path / "template.xlsx"
    wb = Workbook()
    wb.active["K1"] = "keep me"
    wb.save(template_path)

    out = tmp_path / "out.xlsx"
    result = export_board(board, out, template_path=template_path, settings=settings)

    assert result.success
    ws = load_workbook(out).worksheets[0]
    assert ws["K1"].value == "keep me"
    assert ws["A4"].value == "Anna"
    # Template itself is not modified
    assert load_workbook(template_path).worksheets[0]["A4"].value is None


def test_header_for_week_spanning_years(settings, tmp_path):
    board = Board(year=2025, week_number=1)
    out = tmp_path / "kw1.xlsx"
    assert export_board(board, out, settings=settings).success
    ws = load_workbook(out).worksheets[0]
    assert ws.oddHeader.center.text.endswith("Dezember/Januar 2024/2025")


def test_cancelled_export(board, settings):
    result = export_board(board, None, settings=settings)
    assert result.status == ExportStatus.CANCELLED
    assert result.cancelled
    assert not result.success


def test_unreadable_template_fails_without_touching_destination(board, settings, tmp_path):
    bad_template = tmp_path / "broken.xlsx"
    bad_template.write_text("not a workbook", encoding="utf-8")
    out = tmp_path / "existing.xlsx"
    out.write_bytes(b"previous export")

    result = export_board(board, out, template_path=bad_template, settings=settings)

    assert result.status == ExportStatus.FAILED
    assert "broken.xlsx" in result.error
    assert out.read_bytes() == b"previous export"


def test_missing_template_fails(board, settings, tmp_path):
    result = export_board(board, tmp_path / "x.xlsx", template_path=tmp_path / "nope.xlsx", settings=settings)
    assert result.status == ExportStatus.FAILED
    assert not (tmp_path / "x.xlsx").exists()


def test_export_requires_week(settings, tmp_path):
    result = export_board(Board(), tmp_path / "x.xlsx", settings=settings)
    assert result.status == ExportStatus.FAILED


def test_export_overwrites_previous_file(board, settings, tmp_path):
    out = tmp_path / "plan.xlsx"
    out.write_bytes(b"old")
    assert export_board(board, out, settings=settings).success
    assert load_workbook(out).worksheets[0]["A4"].value == "Anna"
    assert [p.name for p in tmp_path.iterdir() if p.name.startswith(".export-")] == []


def test_default_template_layout():
    ws = build_default_template(max_rows=2).active
    assert ws["C1"].value == "Monday"
    assert ws["I1"].value == "Sunday"
    assert "A4:A6" in {str(r) for r in ws.merged_cells.ranges}
    assert "A7:A9" in {str(r) for r in ws.merged_cells.ranges}


def test_export_uses_template_from_settings(board, tmp_path):
    template_path = tmp_path / "configured.xlsx"
    wb = Workbook()
    wb.active["Z1"] = "configured"
    wb.save(template_path)
    settings = Settings(data_dir=tmp_path, template_path=Path(template_path))

    out = tmp_path / "out.xlsx"
    assert export_board(board, out, settings=settings).success
    assert load_workbook(out).worksheets[0]["Z1"].value == "configured"


def test_template_with_merged_cells_fails_cleanly(board, settings, tmp_path):
    template_path = tmp_path / "merged.xlsx"
    wb = Workbook()
    wb.active.merge_cells("C4:D4")
    wb.save(template_path)
    out = tmp_path / "out.xlsx"

    result = export_board(board, out, template_path=template_path, settings=settings)

    assert result.status == ExportStatus.FAILED
    assert "Cannot fill template" in result.error
    assert not out.exists()
