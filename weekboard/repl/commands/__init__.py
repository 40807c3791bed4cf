"""
FILE: weekboard/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

# Export all command handlers for easy importing
from .board import (
    handle_show_command,
    handle_status_command,
    handle_add_command,
    handle_rm_command,
    handle_rename_command,
    handle_include_command,
    handle_exclude_command,
    handle_up_command,
    handle_down_command,
    handle_toggle_command,
    handle_set_command,
    handle_need_command,
    handle_week_command,
    handle_filter_command,
)
from .history import (
    handle_undo_command,
    handle_redo_command,
    handle_save_command,
    handle_export_command,
    handle_reset_command,
)
from .system import (
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_show_command",
    "handle_status_command",
    "handle_add_command",
    "handle_rm_command",
    "handle_rename_command",
    "handle_include_command",
    "handle_exclude_command",
    "handle_up_command",
    "handle_down_command",
    "handle_toggle_command",
    "handle_set_command",
    "handle_need_command",
    "handle_week_command",
    "handle_filter_command",
    "handle_undo_command",
    "handle_redo_command",
    "handle_save_command",
    "handle_export_command",
    "handle_reset_command",
    "handle_help_command",
    "handle_clear_command",
]
