"""
Console Log

Append-only console output plus the history of entered command lines.
Output is kept oldest-first; history is kept newest-first.
"""

import threading
from typing import List, Optional

from .events import ConsoleTopic, EventBus


class LogBuffer:
    """Console output lines and command history."""

    def __init__(self, bus: Optional[EventBus] = None):
        self._bus = bus
        self._lines: List[str] = []
        self._history: List[str] = []
        self._lines_lock = threading.RLock()
        self._history_lock = threading.RLock()

    def append(self, message: str) -> str:
        """
        Append a message to the log and announce it.

        The stored line always ends with exactly one added newline
        (none is added if the message already ends with one).
        """
        if not message.endswith("\n"):
            message += "\n"

        with self._lines_lock:
            self._lines.append(message)

        if self._bus is not None:
            self._bus.publish(ConsoleTopic.LOG_MESSAGE)
        return message

    def last_line(self) -> str:
        """The most recently appended line, or "" if the log is empty."""
        with self._lines_lock:
            return self._lines[-1] if self._lines else ""

    def dump_all(self) -> str:
        """Every line, oldest first, as one string."""
        with self._lines_lock:
            return "".join(self._lines)

    def lines(self) -> List[str]:
        with self._lines_lock:
            return list(self._lines)

    def line_count(self) -> int:
        with self._lines_lock:
            return len(self._lines)

    def add_command(self, command: str) -> None:
        """Record an entered command line as the newest history entry."""
        with self._history_lock:
            self._history.insert(0, command)

    def last_command(self) -> str:
        """The most recently entered command, or "" if none."""
        return self.history_at(0)

    def history_at(self, index: int) -> str:
        """
        History entry at index, 0 being the newest.

        Returns "" for any index outside the history.
        """
        with self._history_lock:
            if index < 0 or index >= len(self._history):
                return ""
            return self._history[index]

    def history(self) -> List[str]:
        """History snapshot, newest first."""
        with self._history_lock:
            return list(self._history)

    def history_count(self) -> int:
        with self._history_lock:
            return len(self._history)
