"""
FILE: weekboard/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - DAYS_IN_WEEK, SUNDAY: Column layout of the board
  - DAY_NAMES, DAY_ABBREVIATIONS: Display names per weekday
  - GERMAN_MONTHS: Month names used in the export page header
  - DEFAULT_REQUIRED_WORKERS, MAX_REQUIRED_WORKERS: Staffing limits
  - MIN_WEEK, MAX_WEEK, MIN_YEAR, MAX_YEAR: Week selector limits
  - DEFAULT_HISTORY_SIZE, DEFAULT_SAVE_DELAY: History and save defaults
  - INTENT_*: Names of the mutation intents
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Centralized constants to avoid magic strings
  - Single source of truth for intent names
"""

# Board layout (Monday=0 ... Sunday=6)
DAYS_IN_WEEK = 7
SUNDAY = 6

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
DAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

GERMAN_MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)

# Staffing
DEFAULT_REQUIRED_WORKERS = 1
MAX_REQUIRED_WORKERS = 20

# Week selector
MIN_WEEK = 1
MAX_WEEK = 53
MIN_YEAR = 2020
MAX_YEAR = 2099

# History and persistence defaults
DEFAULT_HISTORY_SIZE = 100
DEFAULT_SAVE_DELAY = 0.5
STATE_FILENAME = "board-state.json"
LOG_FILENAME = "weekboard.log"

# Export defaults
DEFAULT_WORK_HOURS = "9.00-17.30"
DEFAULT_HEADER_TITLE = "Dienstplan"
EXPORT_EXTENSION = ".xlsx"

# Mutation intents
INTENT_ADD_ROW = "add-row"
INTENT_REMOVE_ROW = "remove-row"
INTENT_SET_ROW_HEADER = "set-row-header"
INTENT_SET_ROW_INCLUDED = "set-row-included"
INTENT_TOGGLE_TILE = "toggle-tile"
INTENT_SET_TILE = "set-tile"
INTENT_SET_COLUMN_REQUIRED = "set-column-required"
INTENT_MOVE_ROW_UP = "move-row-up"
INTENT_MOVE_ROW_DOWN = "move-row-down"
INTENT_SET_YEAR_AND_WEEK = "set-year-and-week"

VALID_INTENTS = (
    INTENT_ADD_ROW,
    INTENT_REMOVE_ROW,
    INTENT_SET_ROW_HEADER,
    INTENT_SET_ROW_INCLUDED,
    INTENT_TOGGLE_TILE,
    INTENT_SET_TILE,
    INTENT_SET_COLUMN_REQUIRED,
    INTENT_MOVE_ROW_UP,
    INTENT_MOVE_ROW_DOWN,
    INTENT_SET_YEAR_AND_WEEK,
)
