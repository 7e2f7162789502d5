"""Immutable index generations."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Iterable, Mapping

import numpy as np

from contextpack.chunkers import extract_title
from contextpack.models import Chunk, Document, FileMetadata
from contextpack.protocols import ChunkingStrategy


@dataclass(frozen=True)
class IndexSnapshot:
    """One generation of documents, chunks and their inverted index.

    Posting lists hold ascending chunk positions into ``chunks`` and are
    read-only numpy arrays; every keyword maps to at least one position.
    """

    documents: tuple[Document, ...] = ()
    chunks: tuple[Chunk, ...] = ()
    postings: Mapping[str, np.ndarray] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_empty(self) -> bool:
        return not self.chunks


EMPTY_SNAPSHOT = IndexSnapshot()


def make_document(path: str, content: str) -> Document:
    metadata = FileMetadata(
        path=path,
        size_bytes=len(content.encode("utf-8")),
        size_chars=len(content),
        extension=PurePosixPath(path).suffix.lower(),
    )
    return Document(metadata=metadata, title=extract_title(content), content=content)


def build_postings(chunks: Iterable[Chunk]) -> Mapping[str, np.ndarray]:
    """Map each keyword to the positions of the chunks containing it."""
    positions: dict[str, list[int]] = {}
    for i, chunk in enumerate(chunks):
        for keyword in chunk.keywords:
            positions.setdefault(keyword, []).append(i)

    postings = {}
    for keyword, hits in positions.items():
        array = np.asarray(hits, dtype=np.int64)
        array.setflags(write=False)
        postings[keyword] = array
    return MappingProxyType(postings)


def build_snapshot(documents: Iterable[Document], chunker: ChunkingStrategy) -> IndexSnapshot:
    """Chunk every document and index the result as a new generation."""
    documents = tuple(documents)
    chunks = tuple(chunk for document in documents for chunk in chunker.chunk(document))
    return IndexSnapshot(documents=documents, chunks=chunks, postings=build_postings(chunks))
