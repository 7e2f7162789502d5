"""Heading-based chunking strategy."""

import re

from contextpack.models import Chunk, Document
from contextpack.utils.keywords import extract_keywords

DEFAULT_TITLE = "Untitled"

_BLANK_RUN_RE = re.compile(r"\n\s*\n\s*\n")


def extract_title(content: str) -> str:
    """Return the text of the first top-level ``# `` heading, or DEFAULT_TITLE."""
    for line in content.split("\n"):
        line = line.strip()
        if line.startswith("# "):
            return line[2:]
    return DEFAULT_TITLE


def clean_content(content: str) -> str:
    """Collapse runs of 3+ newlines (with interleaved whitespace) to one blank line."""
    return _BLANK_RUN_RE.sub("\n\n", content).strip()


def split_sections(content: str) -> list[str]:
    """Split text at heading lines, keeping each heading with the section it opens."""
    sections: list[str] = []
    current: list[str] = []

    for line in content.split("\n"):
        if line.strip().startswith("#") and current:
            sections.append("".join(current))
            current = []
        current.append(line + "\n")

    if current:
        sections.append("".join(current))
    return sections


def split_words(text: str, chunk_size: int) -> list[str]:
    """Greedily pack whitespace-delimited words into pieces of at most chunk_size.

    Words are re-joined with single spaces. A word longer than chunk_size
    becomes a piece of its own.
    """
    if len(text) <= chunk_size:
        return [text]

    pieces: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + len(word) + 1 > chunk_size:
            pieces.append(current)
            current = ""
        current = f"{current} {word}" if current else word

    if current:
        pieces.append(current)
    return pieces


class SectionChunker:
    """Default chunking: one chunk per heading section, word-split when too long.

    - Sections start at any line beginning with ``#``
    - A section that fits in chunk_size is emitted as-is
    - Longer sections are packed word by word into chunks of at most chunk_size
    """

    DEFAULT_CHUNK_SIZE = 1000

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def chunk(self, document: Document) -> list[Chunk]:
        """Split a document into chunks.

        Args:
            document: The document to split

        Returns:
            Chunks in document order, ids of the form ``<path>_chunk_<i>`` or
            ``<path>_chunk_<i>_<j>`` for word-split sections
        """
        content = clean_content(document.content)
        if not content:
            return []

        chunks = []
        for i, section in enumerate(split_sections(content)):
            if not section.strip():
                continue

            if len(section) <= self.chunk_size:
                chunks.append(self._make_chunk(document, f"{document.path}_chunk_{i}", section))
                continue

            for j, piece in enumerate(split_words(section, self.chunk_size)):
                chunks.append(self._make_chunk(document, f"{document.path}_chunk_{i}_{j}", piece))

        return chunks

    @staticmethod
    def _make_chunk(document: Document, chunk_id: str, text: str) -> Chunk:
        return Chunk(
            id=chunk_id,
            doc_path=document.path,
            title=document.title,
            text=text,
            keywords=extract_keywords(text),
        )
