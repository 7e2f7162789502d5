"""Core data models for documents and chunks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileMetadata:
    """Size metadata for an ingested document."""

    path: str
    size_bytes: int
    size_chars: int
    extension: str


@dataclass(frozen=True)
class Document:
    """A titled unit of source text from one ingestion pass."""

    metadata: FileMetadata
    title: str
    content: str

    @property
    def path(self) -> str:
        return self.metadata.path


@dataclass(frozen=True)
class Chunk:
    """A bounded passage of one document, the unit of retrieval.

    ``score`` is only meaningful inside a single search result set.
    """

    id: str
    doc_path: str
    title: str
    text: str
    keywords: tuple[str, ...]
    score: float = 0.0
