"""Limit how many callbacks run at the same time."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable


class Throttle:
    """Run at most `limit` callbacks at a time; each running callback must end with done().

    The callback passed to add runs on the calling thread when a slot is free;
    queued callbacks run on a new thread when a slot is released.
    """

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self._running = 0
        self._lock = threading.Lock()
        self._queue: deque[Callable[[], None]] = deque()

    @property
    def running(self) -> int:
        """Number of callbacks currently counted as running."""
        with self._lock:
            return self._running

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for a slot."""
        with self._lock:
            return len(self._queue)

    def add(self, callback: Callable[[], None]) -> None:
        """Call the callback now, or queue it if the limit is reached."""
        with self._lock:
            if self._running >= self.limit:
                self._queue.append(callback)
                return
            self._running += 1
        callback()

    def done(self) -> None:
        """Mark a callback as done, starting the next queued one if any."""
        with self._lock:
            if self._running <= 0:
                raise RuntimeError("throttle: negative running counter")
            if not self._queue:
                self._running -= 1
                return
            callback = self._queue.popleft()
        threading.Thread(target=callback, daemon=True).start()