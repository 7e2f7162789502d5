"""Chunking strategies for contextpack."""

from contextpack.chunkers.section_chunker import (
    DEFAULT_TITLE,
    SectionChunker,
    clean_content,
    extract_title,
)

__all__ = ["SectionChunker", "extract_title", "clean_content", "DEFAULT_TITLE"]
