"""Ingester for ZIP archive files."""

import logging
import zipfile
import zlib
from pathlib import Path
from typing import Iterable, Iterator, Optional

from contextpack.errors import IngestError
from contextpack.utils.text import decode_document

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = frozenset({".md"})


class ZipIngester:
    """Ingester for ZIP archives of text documents."""

    source_type = "zip"

    def __init__(self, extensions: Optional[Iterable[str]] = DEFAULT_EXTENSIONS):
        """Initialize the ingester.

        Args:
            extensions: Member extensions to keep (case-insensitive).
                        None keeps every member that is not binary.
        """
        self.extensions = (
            frozenset(ext.lower() for ext in extensions) if extensions is not None else None
        )

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.exists()

    def ingest(self, source: Path) -> Iterator[tuple[str, str]]:
        """Yield ``(member name, text)`` pairs from a ZIP archive.

        A member that fails its CRC check or whose compressed stream is
        corrupt or truncated is logged and skipped.

        Args:
            source: Path to the ZIP file

        Raises:
            IngestError: If the archive is missing or not a valid ZIP file
        """
        try:
            zf = zipfile.ZipFile(source, "r")
        except (OSError, zipfile.BadZipFile) as e:
            raise IngestError(f"Failed to open ZIP file {source}: {e}", str(source), e) from e

        with zf:
            for info in zf.infolist():
                if info.is_dir() or not self._wanted(info.filename):
                    continue

                try:
                    raw_content = zf.read(info.filename)
                except (
                    OSError,
                    EOFError,
                    zlib.error,
                    zipfile.BadZipFile,
                    RuntimeError,
                    NotImplementedError,
                ) as e:
                    logger.warning(f"Failed to read {info.filename}: {e}")
                    continue

                text = decode_document(raw_content, sniff=self.extensions is None)
                if text is None:
                    logger.debug(f"Skipping binary member {info.filename}")
                    continue

                yield info.filename, text

    def _wanted(self, name: str) -> bool:
        if self.extensions is None:
            return True
        return Path(name).suffix.lower() in self.extensions
