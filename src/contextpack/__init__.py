"""contextpack - lexical document retrieval and conversation memory for chat relays."""

from contextpack.conversation import ConversationStore, SeenSet
from contextpack.errors import ContextPackError, IngestError
from contextpack.index import DocumentIndex
from contextpack.models import Chunk, Document, Message
from contextpack.prompt import ContextAssembler, GroundedPrompt, build_system_prompt

__version__ = "0.1.0"

__all__ = [
    "DocumentIndex",
    "ConversationStore",
    "SeenSet",
    "ContextAssembler",
    "GroundedPrompt",
    "build_system_prompt",
    "Document",
    "Chunk",
    "Message",
    "ContextPackError",
    "IngestError",
]
