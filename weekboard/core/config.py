"""
FILE: weekboard/core/config.py
PURPOSE: Runtime settings resolved from environment variables
EXPORTS:
  - Settings (dataclass)
  - load_settings() -> Settings
DEPENDENCIES:
  - os, pathlib (stdlib)
  - weekboard.core.constants (defaults)
  - weekboard.core.logger (warnings for bad values)
NOTES:
  - Data directory defaults to ~/.weekboard
  - Bad numeric values fall back to the default and log a warning
  - Settings are read on each call so tests can change the environment
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_SAVE_DELAY,
    DEFAULT_WORK_HOURS,
    DEFAULT_HEADER_TITLE,
    LOG_FILENAME,
)
from .logger import logger


ENV_HOME = "WEEKBOARD_HOME"
ENV_TEMPLATE = "WEEKBOARD_TEMPLATE"
ENV_HISTORY_SIZE = "WEEKBOARD_HISTORY_SIZE"
ENV_SAVE_DELAY = "WEEKBOARD_SAVE_DELAY"
ENV_WORK_HOURS = "WEEKBOARD_WORK_HOURS"
ENV_HEADER_TITLE = "WEEKBOARD_HEADER_TITLE"


@dataclass
class Settings:
    """Resolved configuration for one run."""

    data_dir: Path
    template_path: Optional[Path] = None
    history_size: int = DEFAULT_HISTORY_SIZE
    save_delay: float = DEFAULT_SAVE_DELAY
    work_hours: str = DEFAULT_WORK_HOURS
    header_title: str = DEFAULT_HEADER_TITLE

    @property
    def log_path(self) -> Path:
        return self.data_dir / LOG_FILENAME


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%r: must be >= %d", name, raw, minimum)
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", name, raw)
        return default
    return value


def default_data_dir() -> Path:
    """Data directory from WEEKBOARD_HOME, or ~/.weekboard."""
    home = os.environ.get(ENV_HOME)
    if home:
        return Path(home).expanduser()
    return Path.home() / ".weekboard"


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Returns:
        Settings with every value either from the environment or the default
    """
    template = os.environ.get(ENV_TEMPLATE)

    return Settings(
        data_dir=default_data_dir(),
        template_path=Path(template).expanduser() if template else None,
        history_size=_env_int(ENV_HISTORY_SIZE, DEFAULT_HISTORY_SIZE, minimum=1),
        save_delay=_env_float(ENV_SAVE_DELAY, DEFAULT_SAVE_DELAY),
        work_hours=os.environ.get(ENV_WORK_HOURS) or DEFAULT_WORK_HOURS,
        header_title=os.environ.get(ENV_HEADER_TITLE) or DEFAULT_HEADER_TITLE,
    )
