"""
FILE: weekboard/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .board import (
    show,
    status,
    add,
    rm,
    rename,
    include,
    exclude,
    up,
    down,
    toggle,
    set_tile,
    need,
    week,
)
from .output import (
    export,
    reset,
)
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "show",
    "status",
    "add",
    "rm",
    "rename",
    "include",
    "exclude",
    "up",
    "down",
    "toggle",
    "set_tile",
    "need",
    "week",
    "export",
    "reset",
    "version",
    "help",
    "repl",
]
