"""Data models for contextpack."""

from contextpack.models.conversation import ROLE_ASSISTANT, ROLE_USER, ROLES, Message
from contextpack.models.document import Chunk, Document, FileMetadata

__all__ = [
    "Document",
    "Chunk",
    "FileMetadata",
    "Message",
    "ROLES",
    "ROLE_USER",
    "ROLE_ASSISTANT",
]
