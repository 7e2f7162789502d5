"""Lexical document index."""

from contextpack.index.document_index import DocumentIndex
from contextpack.index.snapshot import IndexSnapshot

__all__ = ["DocumentIndex", "IndexSnapshot"]
