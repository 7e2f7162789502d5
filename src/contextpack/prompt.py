"""Grounded prompt assembly from retrieved chunks and conversation history."""

import logging
import time
from dataclasses import dataclass, field
from typing import Sequence

from contextpack.conversation import ConversationStore
from contextpack.index import DocumentIndex
from contextpack.models import ROLE_ASSISTANT, ROLE_USER, Chunk, Message

logger = logging.getLogger(__name__)

DEFAULT_BASE_PROMPT = """You are a helpful assistant answering questions inside a team chat.

Key guidelines:
- Be helpful, friendly, and professional
- Provide clear, concise answers
- If you're unsure about something, say so
- Prefer information from the provided documentation when it is relevant"""

DOCUMENTATION_HEADER = "\n\nRELEVANT DOCUMENTATION:\n"
DOCUMENTATION_FOOTER = (
    "\nUse the above documentation to inform your responses when relevant. "
    "If the documentation doesn't contain the answer, say so clearly."
)


def build_system_prompt(chunks: Sequence[Chunk], base_prompt: str = DEFAULT_BASE_PROMPT) -> str:
    """Append retrieved chunks to the base prompt; the base prompt alone if none."""
    if not chunks:
        return base_prompt

    parts = [base_prompt, DOCUMENTATION_HEADER]
    for i, chunk in enumerate(chunks, 1):
        parts.append(f"\n--- Document {i}: {chunk.title} ---\n{chunk.text}\n")
    parts.append(DOCUMENTATION_FOOTER)
    return "".join(parts)


@dataclass(frozen=True)
class GroundedPrompt:
    """Everything a chat-completion request needs for one turn."""

    system: str
    messages: list[Message] = field(default_factory=list)
    source_docs: list[str] = field(default_factory=list)

    def as_chat_messages(self) -> list[dict[str, str]]:
        """Role/content dicts in the shape chat-completion APIs accept."""
        return [{"role": m.role, "content": m.content} for m in self.messages]


class ContextAssembler:
    """Combines a DocumentIndex and a ConversationStore into per-turn prompts."""

    def __init__(
        self,
        index: DocumentIndex,
        store: ConversationStore,
        max_chunks: int = 5,
        base_prompt: str = DEFAULT_BASE_PROMPT,
    ):
        self.index = index
        self.store = store
        self.max_chunks = max_chunks
        self.base_prompt = base_prompt

    def prepare(self, thread_id: str, message: str) -> GroundedPrompt:
        """Build the prompt for a new user message without recording it."""
        chunks = self.index.search(message, self.max_chunks)
        if chunks:
            logger.info(f"Found {len(chunks)} relevant documentation chunks")
            for chunk in chunks:
                logger.debug(f"  {chunk.title} ({chunk.doc_path}) score={chunk.score:.2f}")

        history = self.store.get_messages(thread_id)
        pending = Message(role=ROLE_USER, content=message, timestamp=time.time())

        return GroundedPrompt(
            system=build_system_prompt(chunks, self.base_prompt),
            messages=[*history, pending],
            source_docs=list(dict.fromkeys(chunk.doc_path for chunk in chunks)),
        )

    def record(self, thread_id: str, user_message: str, assistant_message: str) -> None:
        """Append a completed user/assistant exchange to the thread."""
        self.store.add_message(thread_id, ROLE_USER, user_message)
        self.store.add_message(thread_id, ROLE_ASSISTANT, assistant_message)
