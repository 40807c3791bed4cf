"""
FILE: weekboard/core/logger.py
PURPOSE: Application logger and its handler setup
EXPORTS:
  - logger: The "weekboard" logger used by all modules
  - setup_logging(log_path, level) -> logging.Logger
DEPENDENCIES:
  - logging (stdlib)
  - sys (stdlib)
NOTES:
  - Handlers are attached once, by the CLI/REPL entry points
  - Library code only logs; it never configures handlers itself
"""

import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger("weekboard")


def setup_logging(log_path: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Attach file and stderr handlers to the weekboard logger.

    Args:
        log_path: Log file location (None = stderr only)
        level: Level for the logger and the file handler

    Returns:
        The configured logger

    Notes:
        - Safe to call more than once (handlers are only added the first time)
        - Stderr only shows warnings so normal command output stays clean
    """
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            print(f"weekboard: cannot open log file {log_path}: {e}", file=sys.stderr)
        else:
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            file_handler.setLevel(level)
            logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    stream_handler.setLevel(logging.WARNING)
    logger.addHandler(stream_handler)

    return logger
