"""Bounded hand-off buffer between the handler and an external shipper."""

import threading

from logtrack.models import LogMessage


class RecordBuffer:
    def __init__(self, max_size: int = 1000):
        self._max_size = max_size
        self._messages: list[LogMessage] = []
        self._dropped = 0
        self._lock = threading.Lock()

    def add(self, message: LogMessage):
        """Queue a message, evicting the oldest if at capacity."""
        with self._lock:
            self._messages.append(message)
            if len(self._messages) > self._max_size:
                self._messages.pop(0)
                self._dropped += 1

    def drain(self, n: int | None = None) -> list[LogMessage]:
        """Remove and return up to N of the oldest messages (all when N is None)."""
        with self._lock:
            if n is None:
                n = len(self._messages)
            if n <= 0:
                return []
            taken = self._messages[:n]
            del self._messages[:n]
            return taken

    def peek(self, n: int = 10) -> list[LogMessage]:
        """Return the N most recent messages without removing them."""
        with self._lock:
            return list(self._messages[-n:]) if n > 0 else []

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._messages)

    @property
    def dropped(self) -> int:
        with self._lock:
            return self._dropped
