"""
FILE: weekboard/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - BoardCompleter (Completer for command/arg completion)
  - create_completer() -> BoardCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
NOTES:
  - Suggests command names when at start of line
  - Suggests day names where a command expects a day
  - Suggests tile states after "set <row> <day>"
  - Suggests flags after commands (--out, --template, --yes)
  - Case-insensitive matching
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import DAY_NAMES


class BoardCompleter(Completer):
    """
    Custom completer for the weekboard REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Day names for toggle/set/need
    - State names for set
    - Flags after command names
    """

    COMMANDS = [
        "show", "status", "add", "rm", "rename", "include", "exclude",
        "up", "down", "toggle", "set", "need", "week", "filter", "export",
        "undo", "redo", "save", "reset", "help", "clear", "exit", "quit",
    ]

    DAYS = [name.lower() for name in DAY_NAMES]

    STATES = ["A", "Praca", "U", "available", "work", "leave"]

    FILTERS = ["all", "included", "excluded"]

    # Position (word index) of the day argument per command
    DAY_ARGUMENT = {
        "toggle": 2,
        "set": 2,
        "need": 1,
    }

    COMMAND_FLAGS = {
        "export": ["--out", "--template", "--yes"],
        "reset": ["--yes"],
        "show": ["--json"],
    }

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. If at start or only one partial word -> suggest commands
            2. If typing a flag -> suggest that command's flags
            3. If at a day argument -> suggest day names
            4. If at the state argument of "set" -> suggest states
            5. If after "filter" -> suggest filter modes
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()

        if not words or (not text_before_cursor.endswith(" ") and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_from(self.COMMANDS, word)
            return

        command = words[0].lower()

        # Index of the word being completed, and its partial text
        if text_before_cursor.endswith(" "):
            index, partial = len(words), ""
        else:
            index, partial = len(words) - 1, words[-1]

        if partial.startswith("--"):
            yield from self._complete_from(self.COMMAND_FLAGS.get(command, []), partial)
            return

        if self.DAY_ARGUMENT.get(command) == index:
            yield from self._complete_from(self.DAYS, partial)
            return

        if command == "set" and index == 3:
            yield from self._complete_from(self.STATES, partial)
            return

        if command == "filter" and index == 1:
            yield from self._complete_from(self.FILTERS, partial)
            return

    def _complete_from(self, options, partial: str) -> Iterable[Completion]:
        partial_lower = partial.lower()
        for option in options:
            if option.lower().startswith(partial_lower):
                yield Completion(option, start_position=-len(partial))


def create_completer() -> BoardCompleter:
    """Create the REPL completer."""
    return BoardCompleter()
