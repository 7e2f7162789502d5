"""In-memory lexical document index."""

import dataclasses
import logging
import math
import threading
from pathlib import Path
from typing import Iterable, Optional

import numpy as np

from contextpack.chunkers import SectionChunker
from contextpack.errors import IngestError
from contextpack.index.snapshot import EMPTY_SNAPSHOT, IndexSnapshot, build_snapshot, make_document
from contextpack.ingesters import get_ingester
from contextpack.models import Chunk, Document
from contextpack.protocols import ChunkingStrategy, Ingester
from contextpack.utils.keywords import extract_keywords

logger = logging.getLogger(__name__)


class DocumentIndex:
    """Chunked, keyword-indexed corpus answering free-text queries.

    Each ingest builds a complete IndexSnapshot off to the side and publishes
    it with a single reference swap, so a search sees either the previous
    generation or the new one, never a mix. Searches do not lock against each
    other.
    """

    def __init__(self, chunk_size: int = SectionChunker.DEFAULT_CHUNK_SIZE,
                 chunker: Optional[ChunkingStrategy] = None):
        self.chunker = chunker or SectionChunker(chunk_size)
        self._snapshot: IndexSnapshot = EMPTY_SNAPSHOT
        self._swap_lock = threading.Lock()
        self._build_lock = threading.Lock()

    @property
    def snapshot(self) -> IndexSnapshot:
        with self._swap_lock:
            return self._snapshot

    @property
    def documents(self) -> tuple[Document, ...]:
        return self.snapshot.documents

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        return self.snapshot.chunks

    def ingest(self, corpus: Iterable[tuple[str, str]]) -> IndexSnapshot:
        """Replace the whole index with the given corpus.

        Args:
            corpus: Ordered ``(identifier, raw_text)`` pairs

        Returns:
            The newly published snapshot

        Raises:
            IngestError: If the corpus cannot be read; the previous
                         generation stays published
        """
        with self._build_lock:
            try:
                documents = [make_document(path, content) for path, content in corpus]
            except IngestError:
                raise
            except OSError as e:
                raise IngestError(f"Failed to read corpus: {e}", original_error=e) from e

            snapshot = build_snapshot(documents, self.chunker)
            with self._swap_lock:
                self._snapshot = snapshot

        logger.info(
            f"Loaded {len(snapshot.documents)} documents, created {len(snapshot.chunks)} chunks"
        )
        return snapshot

    def load(self, source: Path | str, ingester: Optional[Ingester] = None) -> IndexSnapshot:
        """Ingest a corpus source such as a ZIP archive or a folder.

        Raises:
            IngestError: If no ingester handles the source or it cannot be read
        """
        source_path = Path(source)
        ingester = ingester or get_ingester(source_path)
        if ingester is None:
            raise IngestError(f"Cannot process: {source_path}", str(source_path))

        logger.info(f"Loading documents from {ingester.source_type}: {source_path}")
        return self.ingest(ingester.ingest(source_path))

    def search(self, query: str, max_results: int) -> list[Chunk]:
        """Rank chunks against a free-text query.

        Each distinct query keyword found in the index adds
        ``ln(total_chunks / posting_length) + 1`` to every chunk containing
        it. Ties keep corpus order.

        Args:
            query: Free-text query
            max_results: Maximum number of chunks to return

        Returns:
            Copies of the best chunks with ``score`` set, best first
        """
        if max_results < 0:
            raise ValueError("max_results must be >= 0")

        snapshot = self.snapshot
        if snapshot.is_empty or max_results == 0:
            return []

        keywords = extract_keywords(query)
        if not keywords:
            return []

        total = len(snapshot.chunks)
        scores = np.zeros(total, dtype=np.float64)
        for keyword in keywords:
            positions = snapshot.postings.get(keyword)
            if positions is None:
                continue
            scores[positions] += math.log(total / len(positions)) + 1

        matched = np.flatnonzero(scores)
        ranked = matched[np.argsort(-scores[matched], kind="stable")][:max_results]
        return [
            dataclasses.replace(snapshot.chunks[i], score=float(scores[i]))
            for i in ranked
        ]

    def stats(self) -> dict:
        snapshot = self.snapshot
        return {
            "documents": len(snapshot.documents),
            "chunks": len(snapshot.chunks),
            "keywords": len(snapshot.postings),
        }
