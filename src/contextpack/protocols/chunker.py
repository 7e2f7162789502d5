"""Protocol for text chunking strategies."""

from typing import Protocol, runtime_checkable

from contextpack.models import Chunk, Document


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies.

    Chunk ids must be derived only from the document path and the chunk's
    position so that re-ingesting a corpus yields the same ids.
    """

    chunk_size: int

    def chunk(self, document: Document) -> list[Chunk]:
        """Split a document into keyword-annotated chunks."""
        ...
