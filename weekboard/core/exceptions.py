"""
FILE: weekboard/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - WeekboardError (base exception)
  - InvalidInputError
  - UnknownIntentError
  - InvalidStateError
  - StorageError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from WeekboardError for easy catching
  - Out-of-range row/column positions are NOT errors; board operations
    return False/None for those
  - Session layer raises these, UI layers catch and display
"""


class WeekboardError(Exception):
    """Base exception for all weekboard errors."""
    pass


class InvalidInputError(WeekboardError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)


class UnknownIntentError(InvalidInputError):
    """Mutation intent is not part of the protocol."""

    def __init__(self, intent: str):
        self.intent = intent
        super().__init__(f"Unknown intent '{intent}'")


class InvalidStateError(WeekboardError):
    """Serialized board state cannot be reconstructed."""

    def __init__(self, message: str):
        super().__init__(f"Invalid board state: {message}")


class StorageError(WeekboardError):
    """Reading or writing the saved board state failed."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Storage error at {path}: {reason}")
