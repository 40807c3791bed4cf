"""
FILE: weekboard/core/weeks.py
PURPOSE: ISO 8601 week arithmetic and date labels
EXPORTS:
  - week_dates(year, week) -> List[date]
  - current_year_and_week(today) -> Tuple[int, int]
  - weeks_in_year(year) -> int
  - format_date_full(d) -> str
  - format_date_short(d) -> str
  - month_label(monday, sunday) -> str
  - year_label(monday, sunday) -> str
  - default_export_name(year, week) -> str
DEPENDENCIES:
  - datetime (stdlib)
  - weekboard.core.constants (GERMAN_MONTHS)
NOTES:
  - Week 1 is the week holding January 4th (equivalently the first Thursday)
  - Week numbers past the last week of a year roll into the next year
"""

from datetime import date, timedelta
from typing import List, Optional, Tuple

from .constants import DAYS_IN_WEEK, GERMAN_MONTHS


def _first_monday(year: int) -> date:
    jan4 = date(year, 1, 4)
    return jan4 - timedelta(days=jan4.isoweekday() - 1)


def week_dates(year: int, week: int) -> List[date]:
    """
    Dates of the given ISO week, Monday first.

    Args:
        year: ISO year
        week: Week number (1-53)

    Returns:
        List of 7 dates (Monday..Sunday)
    """
    monday = _first_monday(year) + timedelta(weeks=week - 1)
    return [monday + timedelta(days=offset) for offset in range(DAYS_IN_WEEK)]


def current_year_and_week(today: Optional[date] = None) -> Tuple[int, int]:
    """ISO year and week number of `today` (defaults to the current date)."""
    today = today or date.today()
    iso = today.isocalendar()
    return iso[0], iso[1]


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in `year` (52 or 53)."""
    # December 28th always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]


def format_date_full(d: date) -> str:
    return d.strftime("%d.%m.%Y")


def format_date_short(d: date) -> str:
    return d.strftime("%d.%m")


def month_label(monday: date, sunday: date) -> str:
    """German month name, or "Month1/Month2" when the week spans two months."""
    first = GERMAN_MONTHS[monday.month - 1]
    if monday.month == sunday.month:
        return first
    return f"{first}/{GERMAN_MONTHS[sunday.month - 1]}"


def year_label(monday: date, sunday: date) -> str:
    if monday.year == sunday.year:
        return str(monday.year)
    return f"{monday.year}/{sunday.year}"


def default_export_name(year: int, week: int) -> str:
    """
    Default export file name without extension.

    Example:
        >>> default_export_name(2025, 3)
        '3KW 13.01-19.01'
    """
    dates = week_dates(year, week)
    return f"{week}KW {format_date_short(dates[0])}-{format_date_short(dates[-1])}"
