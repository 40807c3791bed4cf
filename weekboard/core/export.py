"""
FILE: weekboard/core/export.py
PURPOSE: Export a board to a pre-formatted spreadsheet (.xlsx)
EXPORTS:
  - ExportStatus (enum)
  - ExportResult (dataclass)
  - build_default_template() -> Workbook
  - tile_export_value(state, work_hours) -> str
  - export_board(board, destination, template_path, settings) -> ExportResult
DEPENDENCIES:
  - openpyxl (workbook reading/writing)
  - tempfile, os, pathlib (stdlib)
  - weekboard.core.board (Board)
  - weekboard.core.weeks (dates and labels)
NOTES:
  - Template layout: dates in C2:I2, one 3-row section per employee starting
    at row 4 (name in column A, day values in C..I of the section's first row)
  - Only cell values and the page header are written; template formatting is kept
  - The destination is replaced atomically, so a failed export never leaves a
    half-written file behind
  - destination=None means the user cancelled choosing a file
"""

import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Border, Font, Side
from openpyxl.utils import get_column_letter

from .board import Board
from .config import Settings, load_settings
from .constants import DAY_NAMES, DAYS_IN_WEEK, DEFAULT_WORK_HOURS
from .logger import logger
from .models import TileState
from .weeks import format_date_full, month_label, week_dates, year_label

# Template layout
DATE_ROW = 2
FIRST_SECTION_ROW = 4
SECTION_HEIGHT = 3
NAME_COLUMN = 1          # A
DAYS_START_COLUMN = 3    # C
HEADER_FONT_SIZE = 14


class ExportStatus(str, Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class ExportResult:
    """Outcome of an export request."""

    status: ExportStatus
    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == ExportStatus.SUCCESS

    @property
    def cancelled(self) -> bool:
        return self.status == ExportStatus.CANCELLED


def tile_export_value(state, work_hours: str = DEFAULT_WORK_HOURS) -> str:
    """Text written to the spreadsheet for a tile state."""
    values = {
        TileState.AVAILABLE: "A",
        TileState.WORK: work_hours,
        TileState.LEAVE: "U",
    }
    try:
        return values[TileState(state)]
    except ValueError:
        return ""


def build_default_template(max_rows: int = 20) -> Workbook:
    """
    Build the standard schedule layout in memory.

    Used when no template file is configured. Produces the same cell layout
    the exporter fills: weekday names in row 1, dates in row 2, and
    `max_rows` bordered 3-row employee sections from row 4.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Dienstplan"

    bold = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin")
    box = Border(left=thin, right=thin, top=thin, bottom=thin)

    ws.cell(row=1, column=NAME_COLUMN, value="Name").font = bold
    for offset, day in enumerate(DAY_NAMES):
        cell = ws.cell(row=1, column=DAYS_START_COLUMN + offset, value=day)
        cell.font = bold
        cell.alignment = center

    ws.column_dimensions[get_column_letter(NAME_COLUMN)].width = 24
    ws.column_dimensions[get_column_letter(NAME_COLUMN + 1)].width = 4
    for offset in range(DAYS_IN_WEEK):
        ws.column_dimensions[get_column_letter(DAYS_START_COLUMN + offset)].width = 13

    for index in range(max_rows):
        start = FIRST_SECTION_ROW + index * SECTION_HEIGHT
        ws.merge_cells(
            start_row=start, start_column=NAME_COLUMN,
            end_row=start + SECTION_HEIGHT - 1, end_column=NAME_COLUMN,
        )
        ws.cell(row=start, column=NAME_COLUMN).alignment = Alignment(vertical="center")
        for row in range(start, start + SECTION_HEIGHT):
            for column in range(NAME_COLUMN, DAYS_START_COLUMN + DAYS_IN_WEEK):
                ws.cell(row=row, column=column).border = box
            for offset in range(DAYS_IN_WEEK):
                ws.cell(row=row, column=DAYS_START_COLUMN + offset).alignment = center

    return wb


def _fill_header(ws, board: Board, title: str) -> None:
    dates = week_dates(board.year, board.week_number)
    monday, sunday = dates[0], dates[-1]
    text = f"{title}\n{month_label(monday, sunday)} {year_label(monday, sunday)}"

    for header in (ws.oddHeader, ws.evenHeader, ws.firstHeader):
        header.center.text = text
        header.center.size = HEADER_FONT_SIZE


def _fill_dates(ws, board: Board) -> None:
    for offset, day in enumerate(week_dates(board.year, board.week_number)):
        ws.cell(row=DATE_ROW, column=DAYS_START_COLUMN + offset, value=format_date_full(day))


def _fill_sections(ws, board: Board, work_hours: str) -> None:
    for row in board.rows:
        start = FIRST_SECTION_ROW + row.position * SECTION_HEIGHT
        ws.cell(row=start, column=NAME_COLUMN, value=row.label or "")
        for tile in row.tiles:
            ws.cell(
                row=start,
                column=DAYS_START_COLUMN + tile.column,
                value=tile_export_value(tile.state, work_hours),
            )


def _open_template(template_path: Optional[Path], row_count: int) -> Workbook:
    if template_path is None:
        return build_default_template(max_rows=max(row_count, 1))
    return load_workbook(template_path)


def export_board(
    board: Board,
    destination: Optional[Union[str, Path]],
    template_path: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
) -> ExportResult:
    """
    Write `board` into a copy of the template at `destination`.

    Args:
        board: Board with year and week selected
        destination: Output file, or None if the user cancelled the file choice
        template_path: Template workbook (None = settings template or built-in layout)
        settings: Settings for work hours/header title (None = from environment)

    Returns:
        ExportResult with status success, cancelled or failed
    """
    if destination is None:
        logger.info("Export cancelled by user")
        return ExportResult(status=ExportStatus.CANCELLED)

    if board.year is None or board.week_number is None:
        return ExportResult(
            status=ExportStatus.FAILED,
            error="Select a year and week before exporting",
        )

    settings = settings or load_settings()
    if template_path is None:
        template_path = settings.template_path
    template = Path(template_path) if template_path is not None else None
    destination = Path(destination)

    try:
        wb = _open_template(template, len(board.rows))
    except Exception as e:  # openpyxl raises several unrelated types for bad files
        logger.error("Cannot read template %s: %s", template, e)
        return ExportResult(status=ExportStatus.FAILED, error=f"Cannot read template {template}: {e}")

    try:
        ws = wb.worksheets[0]
        _fill_header(ws, board, settings.header_title)
        _fill_dates(ws, board)
        _fill_sections(ws, board, settings.work_hours)
    except Exception as e:  # e.g. a merged cell over a written position
        logger.error("Cannot fill template %s: %s", template, e)
        return ExportResult(status=ExportStatus.FAILED, error=f"Cannot fill template {template}: {e}")

    tmp_name = None
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".export-", suffix=".xlsx", dir=destination.parent)
        os.close(fd)
        wb.save(tmp_name)
        os.replace(tmp_name, destination)
        tmp_name = None
    except OSError as e:
        logger.error("Cannot write export to %s: %s", destination, e)
        return ExportResult(status=ExportStatus.FAILED, error=f"Cannot write {destination}: {e}")
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.info("Exported week %s/%s to %s", board.week_number, board.year, destination)
    return ExportResult(status=ExportStatus.SUCCESS, path=destination)
