"""
FILE: weekboard/utils.py
PURPOSE: Shared argument parsing for CLI and REPL
EXPORTS:
  - parse_day(value) -> int
  - parse_row(value) -> int
  - parse_count(value) -> int
DEPENDENCIES:
  - weekboard.core.constants (day names)
  - weekboard.core.exceptions (InvalidInputError)
NOTES:
  - Days accept an index (0-6), a full name or an unambiguous prefix
  - Row positions are 0-based, matching the board display
"""

from .core.constants import DAY_NAMES, DAYS_IN_WEEK, MAX_REQUIRED_WORKERS
from .core.exceptions import InvalidInputError


def parse_day(value: str) -> int:
    """
    Resolve a weekday argument to a column position.

    Examples:
        >>> parse_day("0")
        0
        >>> parse_day("sun")
        6
        >>> parse_day("Th")
        3
    """
    text = str(value).strip().lower()
    if not text:
        raise InvalidInputError("Day cannot be empty")

    if text.isdigit():
        position = int(text)
        if position >= DAYS_IN_WEEK:
            raise InvalidInputError(f"Day index must be 0-{DAYS_IN_WEEK - 1}, got {position}")
        return position

    matches = [i for i, name in enumerate(DAY_NAMES) if name.lower().startswith(text)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise InvalidInputError(f"Unknown day '{value}'")
    names = ", ".join(DAY_NAMES[i] for i in matches)
    raise InvalidInputError(f"Ambiguous day '{value}' (could be: {names})")


def parse_row(value: str) -> int:
    """Parse a row position (non-negative integer)."""
    try:
        position = int(str(value).strip())
    except ValueError:
        raise InvalidInputError(f"Invalid row: {value}")
    if position < 0:
        raise InvalidInputError(f"Invalid row: {value}")
    return position


def parse_count(value: str) -> int:
    """Parse a required-worker count (1..MAX_REQUIRED_WORKERS)."""
    try:
        count = int(str(value).strip())
    except ValueError:
        raise InvalidInputError(f"Invalid count: {value}")
    if not 1 <= count <= MAX_REQUIRED_WORKERS:
        raise InvalidInputError(f"Count must be between 1 and {MAX_REQUIRED_WORKERS}, got {count}")
    return count
