"""Per-thread conversation history with a sliding time-to-live."""

import time
from collections import deque
from typing import Callable, Optional

from contextpack.conversation.expiring import ExpiringRegistry
from contextpack.models import ROLES, Message

DEFAULT_MAX_MESSAGES = 20
DEFAULT_MAX_AGE = 3600.0
DEFAULT_CLEANUP_INTERVAL = 900.0


class ConversationStore:
    """Bounded message history per thread id.

    Each thread keeps its most recent ``max_messages`` messages. A thread not
    written for more than ``max_age`` seconds reads as empty; the next write
    to it starts a fresh history. Expired threads are removed every
    ``cleanup_interval`` seconds by a background thread (None disables it).
    """

    def __init__(
        self,
        max_messages: int = DEFAULT_MAX_MESSAGES,
        max_age: float = DEFAULT_MAX_AGE,
        cleanup_interval: Optional[float] = DEFAULT_CLEANUP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_messages <= 0:
            raise ValueError("max_messages must be positive")

        self.max_messages = max_messages
        self._threads: ExpiringRegistry[deque[Message]] = ExpiringRegistry(
            max_age=max_age,
            factory=lambda: deque(maxlen=max_messages),
            clock=clock,
        )
        if cleanup_interval is not None:
            self._threads.start_cleanup(cleanup_interval)

    @property
    def max_age(self) -> float:
        return self._threads.max_age

    def __len__(self) -> int:
        return len(self._threads)

    def __enter__(self) -> "ConversationStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def add_message(self, thread_id: str, role: str, content: str) -> None:
        """Append a message to a thread, dropping its oldest beyond max_messages.

        Every call appends; callers must not record the same turn twice.
        """
        if not thread_id:
            raise ValueError("thread_id must be a non-empty string")
        if role not in ROLES:
            raise ValueError(f"role must be one of {sorted(ROLES)}, got {role!r}")

        message = Message(role=role, content=content, timestamp=time.time())
        self._threads.update(thread_id, lambda messages: messages.append(message))

    def get_messages(self, thread_id: str) -> list[Message]:
        """Return a thread's messages oldest first, or [] if absent or expired."""
        return self._threads.read(thread_id, list, [])

    def cleanup(self) -> int:
        """Remove expired threads now. Returns how many were removed."""
        return self._threads.sweep()

    def close(self) -> None:
        """Stop the background cleanup thread."""
        self._threads.stop_cleanup()
