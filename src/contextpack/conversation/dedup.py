"""Bounded memory of already-processed event ids."""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from contextpack.conversation.expiring import ExpiringRegistry


@dataclass
class _Deliveries:
    count: int = 0

    def bump(self) -> int:
        self.count += 1
        return self.count


class SeenSet:
    """Remembers ids for ``max_age`` seconds, at most ``max_entries`` at a time.

    Chat platforms redeliver webhook events; ``mark`` tells a caller whether
    an event id is new.
    """

    def __init__(
        self,
        max_age: float = 600.0,
        max_entries: Optional[int] = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._seen: ExpiringRegistry[_Deliveries] = ExpiringRegistry(
            max_age=max_age,
            factory=_Deliveries,
            max_entries=max_entries,
            clock=clock,
        )

    def __contains__(self, event_id: str) -> bool:
        return event_id in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def mark(self, event_id: str) -> bool:
        """Record a delivery of ``event_id``. Returns True if it was not remembered."""
        if not event_id:
            raise ValueError("event_id must be a non-empty string")
        # Missing and expired ids both start over from a zero count.
        return self._seen.update(event_id, _Deliveries.bump) == 1

    def cleanup(self) -> int:
        return self._seen.sweep()
