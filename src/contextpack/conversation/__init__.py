"""Conversation memory: bounded, expiring per-thread history."""

from contextpack.conversation.dedup import SeenSet
from contextpack.conversation.expiring import ExpiringRegistry
from contextpack.conversation.store import ConversationStore

__all__ = ["ConversationStore", "ExpiringRegistry", "SeenSet"]
