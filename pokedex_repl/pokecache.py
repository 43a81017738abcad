"""A small thread-safe cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class _Entry:
    value: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Maps keys to byte strings and drops entries older than ``interval``.

    Unless ``reap_in_background`` is false, a daemon thread reaps expired
    entries once every ``interval``. Call :meth:`close` (or use the cache as a
    context manager) to stop that thread.
    """

    def __init__(
        self,
        interval: float | timedelta,
        reap_in_background: bool = True,
    ) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if reap_in_background:
            self._thread = threading.Thread(
                target=self._reap_loop, name="cache-reaper", daemon=True
            )
            self._thread.start()

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(bytes(value))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self) -> None:
        """Remove every entry created more than ``interval`` seconds ago."""
        cutoff = time.monotonic() - self.interval
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.created_at < cutoff]
            for key in expired:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper, if one is running."""
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.reap()