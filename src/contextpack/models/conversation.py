"""Conversation history models."""

from dataclasses import dataclass

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLES = frozenset({ROLE_USER, ROLE_ASSISTANT})


@dataclass(frozen=True)
class Message:
    """A single role-tagged turn in a conversation thread."""

    role: str
    content: str
    timestamp: float
