"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from contextpack.errors import IngestError
from contextpack.utils.text import decode_document

logger = logging.getLogger(__name__)

SKIP_PATTERNS = frozenset({
    "__pycache__",
    "node_modules",
    "venv",
    "env",
    "dist",
    "build",
})


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"

    def __init__(self, extensions: Optional[Iterable[str]] = (".md",)):
        """Initialize the ingester.

        Args:
            extensions: File extensions to keep (case-insensitive). None keeps
                        every file that does not look binary.
        """
        self.extensions = (
            frozenset(ext.lower() for ext in extensions) if extensions is not None else None
        )

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[tuple[str, str]]:
        """Yield ``(relative path, text)`` pairs from a folder, recursively.

        Files are visited in sorted order so repeated ingests see the same
        sequence.

        Raises:
            IngestError: If the folder does not exist
        """
        if not source.is_dir():
            raise IngestError(f"Not a directory: {source}", str(source))

        def _on_error(error: OSError) -> None:
            logger.warning(f"Failed to list {error.filename}: {error}")

        for root, dirs, files in os.walk(source, onerror=_on_error):
            dirs.sort()
            for filename in sorted(files):
                full_path = Path(root) / filename
                rel_path = full_path.relative_to(source)

                if self._should_skip(rel_path):
                    continue
                if self.extensions is not None and full_path.suffix.lower() not in self.extensions:
                    continue

                try:
                    raw_content = full_path.read_bytes()
                except OSError as e:
                    logger.warning(f"Failed to read {rel_path}: {e}")
                    continue

                text = decode_document(raw_content, sniff=self.extensions is None)
                if text is None:
                    logger.debug(f"Skipping binary file {rel_path}")
                    continue

                yield rel_path.as_posix(), text

    def _should_skip(self, path: Path) -> bool:
        """Skip hidden files and folders and common build artifacts."""
        return any(part.startswith(".") or part in SKIP_PATTERNS for part in path.parts)
