"""Bounded, age-expiring keyed registry shared by the conversation store and dedup set."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from contextpack.conversation.rwlock import RWLock

logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")


@dataclass
class _Slot(Generic[V]):
    value: V
    last_accessed: float


class ExpiringRegistry(Generic[V]):
    """Map of key -> value that forgets keys not written for ``max_age`` seconds.

    Reads treat an expired key as absent without removing it. Writes reset an
    expired key's value with ``factory`` before applying the update. Expired
    keys are physically removed by ``sweep``, optionally on a background
    thread. When ``max_entries`` is set, inserting a new key beyond it evicts
    expired keys first, then the oldest-inserted ones; writing to an expired
    key counts as a fresh insertion.
    """

    def __init__(
        self,
        max_age: float,
        factory: Callable[[], V],
        max_entries: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_age < 0:
            raise ValueError("max_age must be >= 0")
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")

        self.max_age = max_age
        self.max_entries = max_entries
        self._factory = factory
        self._clock = clock
        self._slots: dict[str, _Slot[V]] = {}
        self._lock = RWLock()

        self._cleanup_thread: Optional[threading.Thread] = None
        self._cleanup_stop = threading.Event()

    def __len__(self) -> int:
        """Number of physically stored keys, expired or not."""
        with self._lock.read():
            return len(self._slots)

    def __contains__(self, key: str) -> bool:
        with self._lock.read():
            slot = self._slots.get(key)
            return slot is not None and not self._is_stale(slot, self._clock())

    def _is_stale(self, slot: _Slot[V], now: float) -> bool:
        return now - slot.last_accessed > self.max_age

    def update(self, key: str, fn: Callable[[V], R]) -> R:
        """Create-or-fetch ``key`` and apply ``fn`` to its value under the write lock.

        The key's last-accessed time is reset to now.
        """
        with self._lock.write():
            now = self._clock()
            slot = self._slots.get(key)
            if slot is None or self._is_stale(slot, now):
                # A reset key counts as newly inserted for max_entries eviction.
                self._slots.pop(key, None)
                slot = _Slot(self._factory(), now)
                self._slots[key] = slot
                self._evict_overflow(now)
            slot.last_accessed = now
            return fn(slot.value)

    def read(self, key: str, fn: Callable[[V], R], default: R) -> R:
        """Apply ``fn`` to the live value of ``key`` under the read lock.

        Returns ``default`` if the key is absent or expired. Does not touch
        the last-accessed time.
        """
        with self._lock.read():
            slot = self._slots.get(key)
            if slot is None or self._is_stale(slot, self._clock()):
                return default
            return fn(slot.value)

    def _evict_overflow(self, now: float) -> None:
        """Drop expired keys first, then the oldest-inserted, until within max_entries."""
        if self.max_entries is None or len(self._slots) <= self.max_entries:
            return
        for key in [k for k, slot in self._slots.items() if self._is_stale(slot, now)]:
            if len(self._slots) <= self.max_entries:
                return
            del self._slots[key]
        while len(self._slots) > self.max_entries:
            del self._slots[next(iter(self._slots))]

    def sweep(self) -> int:
        """Remove every expired key. Returns how many were removed."""
        with self._lock.write():
            now = self._clock()
            expired = [key for key, slot in self._slots.items() if self._is_stale(slot, now)]
            for key in expired:
                del self._slots[key]

        if expired:
            logger.debug(f"Removed {len(expired)} expired entries")
        return len(expired)

    def clear(self) -> None:
        with self._lock.write():
            self._slots.clear()

    def _cleanup_loop(self, interval: float) -> None:
        while not self._cleanup_stop.wait(interval):
            self.sweep()

    def start_cleanup(self, interval: float) -> None:
        """Run ``sweep`` every ``interval`` seconds on a daemon thread."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        if self._cleanup_thread is not None and self._cleanup_thread.is_alive():
            return
        self._cleanup_stop.clear()
        self._cleanup_thread = threading.Thread(
            target=self._cleanup_loop, args=(interval,), daemon=True
        )
        self._cleanup_thread.start()
        logger.debug(f"Cleanup thread started (every {interval}s)")

    def stop_cleanup(self) -> None:
        self._cleanup_stop.set()
        if self._cleanup_thread is not None:
            self._cleanup_thread.join(timeout=5.0)
            self._cleanup_thread = None
