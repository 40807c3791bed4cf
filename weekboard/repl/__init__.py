"""
FILE: weekboard/repl/__init__.py
PURPOSE: REPL package for interactive board editing
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
  - weekboard.core.service (session layer)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete, command history and undo/redo
"""

from .main import main

__all__ = ["main"]
