"""
FILE: weekboard/core/scheduler.py
PURPOSE: Debounced (coalescing) save scheduling
EXPORTS:
  - SaveScheduler (class)
DEPENDENCIES:
  - threading (stdlib)
NOTES:
  - Cancel-and-reschedule: only the newest pending snapshot survives a burst
  - The snapshot is captured by the caller at request time, so the timer
    thread never reads the live board
  - Writes are numbered; an older snapshot never overwrites a newer one
  - delay == 0 writes synchronously (used by one-shot CLI commands and tests)
"""

import threading
from typing import Any, Callable, Dict, Optional

from .logger import logger


class SaveScheduler:
    """
    Coalesces bursts of save requests into a single write.

    Args:
        save: Callable that persists a snapshot and returns success
        delay: Seconds to wait after the last request before writing
    """

    def __init__(self, save: Callable[[Dict[str, Any]], bool], delay: float):
        self._save = save
        self.delay = delay
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Dict[str, Any]] = None
        self._generation = 0
        self._written = 0
        self._discarded = 0

    def schedule(self, snapshot: Dict[str, Any]) -> None:
        """Replace any pending save with `snapshot` and restart the timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            self._pending = snapshot

            if self.delay > 0:
                self._timer = threading.Timer(self.delay, self.flush)
                self._timer.daemon = True
                self._timer.start()
                return

        self.flush()

    def flush(self) -> bool:
        """
        Write the pending snapshot now.

        Returns:
            Result of the write, or True when nothing was pending
        """
        with self._lock:
            if self._timer is not None and self._timer is not threading.current_thread():
                self._timer.cancel()
            self._timer = None
            snapshot = self._pending
            generation = self._generation
            self._pending = None

        if snapshot is None:
            return True

        with self._write_lock:
            if generation <= max(self._written, self._discarded):
                return True
            ok = self._save(snapshot)
            if ok:
                self._written = generation
            else:
                logger.warning("Saving board state failed; in-memory state is unchanged")
            return ok

    def cancel(self) -> None:
        """
        Drop the pending snapshot without writing it.

        Also discards snapshots a timer thread already took, and waits for
        a write in progress, so nothing older lands after this returns.
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._pending = None
            self._generation += 1
            self._discarded = self._generation

        # Returns only once a write already in progress has finished
        with self._write_lock:
            pass

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None
